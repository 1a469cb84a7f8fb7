import io
import sys

from tinyunix.wc import Counts, count, main


def test_empty():
    assert count(b"") == Counts(0, 0, 0)


def test_simple_line():
    data = b"hello world\n"
    assert count(data) == Counts(1, 2, len(data))


def test_whitespace_kinds_separate_words():
    result = count("one\ttwo  three\vfour\rfive")
    assert result.words == 5
    assert result.lines == 0


def test_nul_separates_words():
    assert count(b"a\0b").words == 2


def test_chars_count_bytes():
    data = "é\n".encode("utf-8")
    assert count(data).chars == len(data)


def test_main_on_file(tmp_path, capsys):
    path = tmp_path / "f.txt"
    path.write_bytes(b"hello world\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == f"1 2 12 {path}\n"


def test_main_on_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"a b\n")))
    assert main([]) == 0
    assert capsys.readouterr().out == "1 2 4 \n"


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "nope"
    assert main([str(missing)]) == 1
    assert capsys.readouterr().out == f"wc: cannot open {missing}\n"