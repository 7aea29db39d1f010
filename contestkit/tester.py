"""Drivers for solutions and a runner that checks them against test files."""

import io
import sys
import time
from pathlib import Path

from contestkit.input import Input
from contestkit.output import Output, output, set_output

_BLUE = "\x1b[34m"
_RED = "\x1b[31m"
_GREEN = "\x1b[32m"
_YELLOW = "\x1b[33m"
_RESET = "\x1b[0m"
_SEPARATOR = "=" * 53


class Mismatch(Exception):
    """Raised when an answer differs from the expected one."""


def check(expected, actual):
    """Compare two texts token by token and return the number of tokens.

    Raise :class:`Mismatch` at the first difference.
    """
    expected_input = Input(expected)
    actual_input = Input(actual)
    count = 0
    while True:
        want = expected_input.next_token()
        got = actual_input.next_token()
        if want != got:
            if want is None:
                raise Mismatch(f"Expected has only {count} tokens")
            if got is None:
                raise Mismatch(f"Actual has only {count} tokens")
            raise Mismatch(
                f"Token #{count} differs, expected {want.decode(errors='replace')}, "
                f"actual {got.decode(errors='replace')}"
            )
        if got is None:
            return count
        count += 1


def run_single(input, solve):
    """Solve one test case numbered 1."""
    solve(input, 1)


def run_multi_number(input, solve):
    """Read the number of test cases, then solve each, numbered from 1."""
    for case in range(1, input.read(int) + 1):
        solve(input, case)


def run_multi_eof(input, solve):
    """Solve test cases numbered from 1 while any input byte is left."""
    case = 1
    while input.peek() is not None:
        solve(input, case)
        case += 1


def run_solution(input, invoke):
    """Run ``invoke(input)``, flush the shared output, report if input was used up."""
    invoke(input)
    output().flush()
    input.skip_whitespace()
    return input.is_exhausted()


def run_tests(tests_dir, run, time_limit_ms=2000, out=None):
    """Run ``run`` on every ``*.in`` file of ``tests_dir`` and report verdicts.

    ``run`` takes an :class:`Input` and returns whether the input was used up;
    its answer is compared with the matching ``*.out`` file when there is one.
    Return True when every test passed.
    """
    report = sys.stdout if out is None else out

    def say(text=""):
        print(text, file=report)

    limit = time_limit_ms / 1000
    failed = total = 0
    for path in sorted(Path(tests_dir).iterdir()):
        if not path.is_file() or path.suffix != ".in":
            continue
        say(_SEPARATOR)
        total += 1
        say(f"{_BLUE}Test {path.stem}{_RESET}")
        say(f"{_BLUE}Input:{_RESET}")
        say(path.read_text(errors="replace"))
        try:
            expected = path.with_suffix(".out").read_text(errors="replace")
        except OSError:
            expected = None
        say(f"{_BLUE}Expected:{_RESET}")
        say(f"{_YELLOW}Not provided{_RESET}" if expected is None else expected)
        say(f"{_BLUE}Output:{_RESET}")

        captured = io.BytesIO()
        previous = set_output(Output(captured))
        try:
            with path.open("rb") as stream:
                started = time.perf_counter()
                exhausted = run(Input(stream))
                elapsed = time.perf_counter() - started
        except Exception as err:
            failed += 1
            say(f"{_BLUE}Verdict: {_RED}RuntimeError ({err!r}){_RESET}")
            continue
        finally:
            set_output(previous)

        produced = captured.getvalue()
        say(produced.decode(errors="replace"))
        say(f"{_BLUE}Time elapsed: {int(elapsed * 1000) / 1000:.3f}s{_RESET}")
        if not exhausted:
            say(f"{_RED}Input not exhausted{_RESET}")
        if expected is not None:
            try:
                check(expected, produced)
            except Mismatch as err:
                say(f"{_BLUE}Verdict: {_RED}Wrong Answer ({err}){_RESET}")
                failed += 1
                continue
        if elapsed > limit:
            failed += 1
            say(f"{_BLUE}Verdict: {_RED}Time Limit{_RESET}")
        else:
            say(f"{_BLUE}Verdict: {_GREEN}OK{_RESET}")

    if failed == 0:
        say(f"{_BLUE}All {_GREEN}{total}{_BLUE} tests passed{_RESET}")
    else:
        say(f"{_RED}{failed}/{total}{_BLUE} tests failed{_RESET}")
    return failed == 0