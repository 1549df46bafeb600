"""
Tests for record splitting and line normalization.
"""

import io

from linesort.normalize import accept_lines, is_blank, normalize_line, trim_line
from linesort.records import RawLine, read_records


def test_trim_removes_outer_whitespace_only():
    assert trim_line("  a  b \t") == "a  b"
    assert trim_line("a\tb") == "a\tb"


def test_trim_removes_control_characters():
    assert trim_line("\x00\x07hello\x1b") == "hello"
    assert trim_line(" wide　") == "wide"


def test_normalize_without_trim_is_identity():
    assert normalize_line("  x  ", trim=False) == "  x  "
    assert normalize_line("  x  ", trim=True) == "x"


def test_is_blank():
    assert is_blank("")
    assert is_blank("   ")
    assert is_blank(" \t\x01\x7f")
    assert not is_blank(" x ")


def test_read_records_strips_exactly_one_terminator():
    assert list(read_records(["abc\n"])) == [RawLine("abc", True)]
    assert list(read_records(["abc\r\n"])) == [RawLine("abc", True)]
    assert list(read_records(["abc"])) == [RawLine("abc", False)]


def test_read_records_back_to_back_terminators():
    expected = [RawLine("a", True), RawLine("", True)]
    assert list(read_records(io.StringIO("a\r\r"))) == expected
    assert list(read_records(["a\r\r\n"])) == expected
    assert list(read_records(io.StringIO("a\n\r\n"))) == expected


def test_read_records_marks_truncated_final_line():
    records = list(read_records(io.StringIO("a\nb\r\nc")))
    assert records == [RawLine("a", True), RawLine("b", True), RawLine("c", False)]


def test_read_records_lone_carriage_return():
    records = list(read_records(io.StringIO("x\ry\n")))
    assert records == [RawLine("x", True), RawLine("y", True)]

    records = list(read_records(io.StringIO("x\ry")))
    assert records == [RawLine("x", True), RawLine("y", False)]


def test_read_records_empty_stream():
    assert list(read_records(io.StringIO(""))) == []


def test_accept_lines_drops_truncated_record():
    records = read_records(io.StringIO("one\ntwo\npartial"))
    assert list(accept_lines(records)) == ["one", "two"]


def test_accept_lines_skip_blank_after_trim():
    records = read_records(io.StringIO("   \n a \n\n"))
    assert list(accept_lines(records, trim=True, skip_blank=True)) == ["a"]


def test_accept_lines_skip_blank_without_trim_keeps_padding():
    records = read_records(io.StringIO("   \n a \n"))
    assert list(accept_lines(records, skip_blank=True)) == [" a "]


def test_accept_lines_keeps_blank_lines_by_default():
    records = read_records(io.StringIO("\n\n"))
    assert list(accept_lines(records)) == ["", ""]
