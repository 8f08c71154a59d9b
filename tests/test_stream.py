import io

import pytest

from kinemodel.stream import IndentedStream


@pytest.fixture
def buffer():
    return io.StringIO()


def test_strings_written_verbatim(buffer):
    IndentedStream(buffer).write("Sphere ").write("body(")
    assert buffer.getvalue() == "Sphere body("


@pytest.mark.parametrize(
    "value, text",
    [(6.57143, "6.57143"), (0.0, "0"), (-5.0, "-5"), (201.299, "201.299")],
)
def test_numbers_in_general_form(buffer, value, text):
    IndentedStream(buffer).write(value)
    assert buffer.getvalue() == text


def test_endl_indents_next_line(buffer):
    stream = IndentedStream(buffer)
    stream.increase_indent().increase_indent().write("a").endl().write("b")
    assert buffer.getvalue() == "a\n\t\tb"


def test_indent_once_writes_single_tab(buffer):
    IndentedStream(buffer, 3).indent_once()
    assert buffer.getvalue() == "\t"


def test_decrease_indent_stops_at_zero(buffer):
    stream = IndentedStream(buffer)
    stream.decrease_indent().decrease_indent()
    assert stream.indentation == 0
    stream.indent()
    assert buffer.getvalue() == ""


def test_increase_then_decrease_restores(buffer):
    stream = IndentedStream(buffer, 2)
    stream.increase_indent().decrease_indent()
    assert stream.indentation == 2