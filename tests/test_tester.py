import io
import time

import pytest

from contestkit.input import Input
from contestkit.output import Output, out_line, output, set_output
from contestkit.tester import (
    Mismatch,
    check,
    run_multi_eof,
    run_multi_number,
    run_single,
    run_solution,
    run_tests,
)


@pytest.fixture
def shared():
    stream = io.BytesIO()
    previous = set_output(Output(stream))
    yield stream
    set_output(previous)


def _solve_sum(inp, case):
    out_line(inp.read(int) + inp.read(int))


def _sum_solution(inp):
    return run_solution(inp, lambda i: run_single(i, _solve_sum))


def _write_case(directory, name, given, expected=None):
    (directory / f"{name}.in").write_text(given)
    if expected is not None:
        (directory / f"{name}.out").write_text(expected)


def test_check_counts_equal_tokens():
    assert check("1 2\n", b"1   2") == 2


def test_check_reports_differing_token():
    with pytest.raises(Mismatch, match="Token #1 differs, expected 2, actual 3"):
        check("1 2", "1 3")


def test_check_reports_short_expected():
    with pytest.raises(Mismatch, match="Expected has only 1 tokens"):
        check("1", "1 2")


def test_check_reports_short_actual():
    with pytest.raises(Mismatch, match="Actual has only 0 tokens"):
        check("7", "")


def test_run_single_uses_case_one():
    calls = []
    run_single(Input(b""), lambda inp, case: calls.append(case))
    assert calls == [1]


def test_run_multi_number_reads_count():
    seen = []
    run_multi_number(Input(b"3\na b c"), lambda inp, case: seen.append((case, inp.read(str))))
    assert seen == [(1, "a"), (2, "b"), (3, "c")]


def test_run_multi_eof_until_no_bytes():
    seen = []
    run_multi_eof(Input(b"x y"), lambda inp, case: seen.append((case, inp.read(str))))
    assert seen == [(1, "x"), (2, "y")]


def test_run_solution_flushes_and_reports_exhaustion(shared):
    assert _sum_solution(Input(b"1 2\n\n")) is True
    assert check("3", shared.getvalue()) == 1


def test_run_solution_detects_leftover_input(shared):
    assert _sum_solution(Input(b"1 2 9")) is False


def test_run_tests_ok(tmp_path, shared):
    _write_case(tmp_path, "01", "1 2\n", "3\n")
    report = io.StringIO()
    assert run_tests(tmp_path, _sum_solution, 2000, report) is True
    text = report.getvalue()
    assert "Verdict: \x1b[32mOK" in text
    assert "tests passed" in text
    assert output().flush() is None
    assert shared.getvalue() == b""


def test_run_tests_wrong_answer(tmp_path):
    _write_case(tmp_path, "a", "1 2\n", "4\n")
    _write_case(tmp_path, "b", "5 5\n")
    (tmp_path / "notes.txt").write_text("ignored")
    report = io.StringIO()
    assert run_tests(tmp_path, _sum_solution, 2000, report) is False
    text = report.getvalue()
    assert "Wrong Answer (Token #0 differs" in text
    assert "Not provided" in text
    assert "1/2" in text
    assert text.count("Test ") == 2


def test_run_tests_runtime_error(tmp_path):
    _write_case(tmp_path, "a", "only\n", "1\n")
    report = io.StringIO()
    assert run_tests(tmp_path, _sum_solution, 2000, report) is False
    assert "RuntimeError" in report.getvalue()


def test_run_tests_time_limit(tmp_path):
    def slow(inp):
        time.sleep(0.02)
        return _sum_solution(inp)

    _write_case(tmp_path, "a", "1 2\n", "3\n")
    report = io.StringIO()
    assert run_tests(tmp_path, slow, 1, report) is False
    assert "Time Limit" in report.getvalue()


def test_run_tests_flags_unused_input(tmp_path):
    _write_case(tmp_path, "a", "1 2 3\n")
    report = io.StringIO()
    assert run_tests(tmp_path, _sum_solution, 2000, report) is True
    assert "Input not exhausted" in report.getvalue()