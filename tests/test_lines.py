"""Line reader and tokenizer tests."""

import pytest

from zyfetch.errors import InvalidFormat, LineNotFound, PartNotFound, SourceFileNotFound
from zyfetch.lines import get_line_part, get_line_part_and_rest, read_line, trim_name


def test_read_line_returns_first_matching_line(tmp_path):
    path = tmp_path / "sample"
    path.write_text("alpha=1\nbeta=2\nbeta=3\n", encoding="utf-8")

    assert read_line(path, "beta") == "beta=2"


def test_read_line_empty_prefix_returns_first_line(tmp_path):
    path = tmp_path / "sample"
    path.write_text("first\nsecond\n", encoding="utf-8")

    assert read_line(path, "") == "first"


def test_read_line_last_line_without_newline(tmp_path):
    path = tmp_path / "sample"
    path.write_bytes(b"a\nwanted line")

    assert read_line(path, "want") == "wanted line"


def test_read_line_has_no_line_length_limit(tmp_path):
    path = tmp_path / "sample"
    long_line = "x" * 5000
    path.write_text(f"{long_line}\n", encoding="utf-8")

    assert read_line(path) == long_line


def test_read_line_missing_prefix(tmp_path):
    path = tmp_path / "sample"
    path.write_text("alpha\n", encoding="utf-8")

    with pytest.raises(LineNotFound):
        read_line(path, "beta")


def test_read_line_empty_file(tmp_path):
    path = tmp_path / "empty"
    path.write_bytes(b"")

    with pytest.raises(LineNotFound):
        read_line(path, "")


def test_read_line_missing_file(tmp_path):
    with pytest.raises(SourceFileNotFound):
        read_line(tmp_path / "nope", "")


def test_read_line_directory_is_not_readable(tmp_path):
    with pytest.raises(SourceFileNotFound):
        read_line(tmp_path, "")


def test_trim_name():
    assert trim_name('PRETTY_NAME="Foo Bar"') == "Foo Bar"


def test_trim_name_uses_outer_quotes():
    assert trim_name('KEY="say "hi" now"') == 'say "hi" now'


def test_trim_name_empty_value():
    assert trim_name('KEY=""') == ""


@pytest.mark.parametrize("line", ["NOQUOTES", 'ONE"QUOTE', ""])
def test_trim_name_invalid(line):
    with pytest.raises(InvalidFormat):
        trim_name(line)


def test_get_line_part():
    assert get_line_part("a b c", 1) == "b"


def test_get_line_part_counts_empty_parts():
    assert get_line_part("a  b", 1) == ""
    assert get_line_part("a  b", 2) == "b"


def test_get_line_part_out_of_range():
    with pytest.raises(PartNotFound):
        get_line_part("a b c", 5)


def test_get_line_part_and_rest():
    assert get_line_part_and_rest("model name : Ryzen 7", 2) == "Ryzen 7"


def test_get_line_part_and_rest_tab_separated_cpuinfo():
    line = "model name\t: AMD Ryzen 7 5800X 8-Core Processor"

    assert get_line_part_and_rest(line, 2) == "AMD Ryzen 7 5800X 8-Core Processor"


def test_get_line_part_and_rest_drops_leading_empty_parts():
    assert get_line_part_and_rest("a b  c", 2) == "c"


def test_get_line_part_and_rest_out_of_range():
    with pytest.raises(PartNotFound):
        get_line_part_and_rest("a b c", 3)


def test_get_line_part_and_rest_only_empty_parts():
    with pytest.raises(PartNotFound):
        get_line_part_and_rest("a b  ", 2)


def test_read_line_replaces_invalid_utf8(tmp_path):
    path = tmp_path / "sample"
    path.write_bytes(b"name=\xff\xfe ok\n")

    assert read_line(path, "name") == "name=\ufffd\ufffd ok"


def test_read_line_matches_non_ascii_prefix_by_bytes(tmp_path):
    path = tmp_path / "sample"
    path.write_bytes(b"cafe=plain\ncaf\xc3\xa9=accented\n")

    assert read_line(path, "café") == "café=accented"


def test_read_line_keeps_carriage_return(tmp_path):
    path = tmp_path / "sample"
    path.write_bytes(b"box\r\nnext\n")

    assert read_line(path, "") == "box\r"
