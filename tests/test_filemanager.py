import pytest

from quantgrades.filemanager import (
    append_line,
    exists,
    read_all_lines,
    remove_file,
    write_all_lines,
)


def test_write_then_read_round_trip(tmp_path):
    target = tmp_path / "grades_output.txt"
    lines = ["5", "4", "3"]
    write_all_lines(target, lines)
    assert read_all_lines(target) == lines


def test_write_replaces_existing_content(tmp_path):
    target = tmp_path / "out.txt"
    write_all_lines(target, ["old", "content"])
    write_all_lines(target, ["new"])
    assert read_all_lines(target) == ["new"]


def test_write_terminates_each_line(tmp_path):
    target = tmp_path / "out.txt"
    write_all_lines(str(target), ["a", "b"])
    assert target.read_text(encoding="utf-8") == "a\nb\n"


def test_write_empty_list_gives_empty_file(tmp_path):
    target = tmp_path / "empty.txt"
    write_all_lines(target, [])
    assert read_all_lines(target) == []


def test_append_line_adds_to_end(tmp_path):
    target = tmp_path / "log.txt"
    write_all_lines(target, ["first"])
    append_line(target, "second")
    append_line(target, "third")
    assert read_all_lines(target) == ["first", "second", "third"]


def test_append_line_creates_file(tmp_path):
    target = tmp_path / "fresh.txt"
    append_line(target, "only")
    assert read_all_lines(target) == ["only"]


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_all_lines(tmp_path / "missing.txt")


def test_exists(tmp_path):
    target = tmp_path / "x.txt"
    assert exists(target) is False
    write_all_lines(target, ["x"])
    assert exists(target) is True


def test_remove_file(tmp_path):
    target = tmp_path / "x.txt"
    write_all_lines(target, ["x"])
    assert remove_file(target) is True
    assert exists(target) is False
    assert remove_file(target) is False


def test_write_to_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        write_all_lines(tmp_path / "no" / "such" / "dir.txt", ["x"])