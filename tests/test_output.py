import io

import pytest

from contestkit.output import Output, out, out_line, output, set_output


@pytest.fixture
def stream():
    return io.BytesIO()


@pytest.fixture
def shared(stream):
    previous = set_output(Output(stream))
    yield stream
    set_output(previous)


@pytest.fixture
def no_shared():
    previous = set_output(None)
    yield
    set_output(previous)


def test_buffered_until_flush(stream):
    writer = Output(stream)
    writer.print(42)
    assert stream.getvalue() == b""
    writer.flush()
    assert stream.getvalue() == b"42"


def test_sequences_are_space_separated(stream):
    writer = Output(stream)
    writer.print([1, 2, 3])
    writer.put(ord("|"))
    writer.print((1, "a"))
    writer.flush()
    assert stream.getvalue() == b"1 2 3|1 a"


def test_floats_written_without_exponent(stream):
    writer = Output(stream)
    writer.print_iter([1.0, 1e-05, float("nan")])
    writer.flush()
    assert stream.getvalue() == b"1 0.00001 NaN"


def test_float_round_trips_through_text(stream):
    writer = Output(stream)
    writer.print(0.1)
    writer.flush()
    assert float(stream.getvalue()) == 0.1


def test_print_per_line(stream):
    writer = Output(stream)
    writer.print_per_line(["a", 2])
    writer.flush()
    assert stream.getvalue() == b"a\n2\n"


def test_print_iter_accepts_generators(stream):
    writer = Output(stream)
    writer.print_iter(str(x) for x in "xyz")
    writer.flush()
    assert stream.getvalue() == b"x y z"


def test_auto_flush_writes_immediately(stream):
    writer = Output(stream, auto_flush=True)
    assert writer.write(b"now") == 3
    assert stream.getvalue() == b"now"


def test_maybe_flush_respects_setting(stream):
    writer = Output(stream)
    writer.put(ord("q"))
    writer.maybe_flush()
    assert stream.getvalue() == b""
    writer.flush()
    assert stream.getvalue() == b"q"


def test_full_buffer_is_flushed(stream):
    writer = Output(stream)
    writer.write(b"x" * 5000)
    assert len(stream.getvalue()) == Output.DEFAULT_BUFFER_SIZE
    writer.flush()
    assert stream.getvalue() == b"x" * 5000


def test_put_flushes_when_full(stream):
    writer = Output(stream)
    for _ in range(Output.DEFAULT_BUFFER_SIZE):
        writer.put(ord("y"))
    assert stream.getvalue() == b"y" * Output.DEFAULT_BUFFER_SIZE


def test_context_manager_flushes(stream):
    with Output(stream) as writer:
        writer.print("done")
    assert stream.getvalue() == b"done"


def test_unsupported_value(stream):
    with pytest.raises(TypeError):
        Output(stream).print(object())


def test_out_and_out_line(shared):
    out(1, "a", [2, 3])
    out_line()
    out_line("z")
    output().flush()
    assert shared.getvalue() == b"1 a 2 3\nz\n"


def test_out_needs_a_value(shared):
    with pytest.raises(TypeError):
        out()


def test_output_requires_instance(no_shared):
    with pytest.raises(RuntimeError):
        output()


def test_set_output_returns_previous(stream, no_shared):
    first = Output(stream)
    assert set_output(first) is None
    assert set_output(None) is first