import io

import pytest

from tinyunix.ed import MAXLINES, Editor, main, read_line


def make_editor(text, filename=""):
    out = io.StringIO()
    return Editor(io.StringIO(text), out, filename), out


def test_read_line_plain():
    out = io.StringIO()
    assert read_line(io.StringIO("hello\nrest"), out, 256) == "hello\n"
    assert out.getvalue() == "hello\n"


def test_read_line_backspace():
    out = io.StringIO()
    assert read_line(io.StringIO("ab\bc\n"), out, 256) == "ac\n"
    assert out.getvalue() == "ab\b \bc\n"


def test_read_line_delete_key_and_empty_backspace():
    out = io.StringIO()
    assert read_line(io.StringIO("\x7fxy\x7f\r"), out, 256) == "x\n"


def test_read_line_truncates_to_max():
    out = io.StringIO()
    assert read_line(io.StringIO("abcdef\n"), out, 4) == "abc\n"


def test_read_line_eof_discards_partial():
    assert read_line(io.StringIO("partial"), io.StringIO(), 256) == ""


def test_append_and_print():
    ed, out = make_editor("a\nhello\nworld\n.\np\nq\n")
    assert ed.run() == 0
    assert ed.lines == ["hello\n", "world\n"]
    assert "1: hello\n2: world\n" in out.getvalue()


def test_delete_line():
    ed, _ = make_editor("1\n")
    ed.lines = ["hello\n", "world\n"]
    ed.delete_line()
    assert ed.lines == ["world\n"]


@pytest.mark.parametrize("answer", ["0\n", "3\n", "x\n"])
def test_delete_invalid_line(answer):
    ed, out = make_editor(answer)
    ed.lines = ["hello\n", "world\n"]
    ed.delete_line()
    assert ed.lines == ["hello\n", "world\n"]
    assert out.getvalue().endswith("Invalid line number\n")


def test_buffer_full():
    ed, out = make_editor("x\n" * (MAXLINES + 1))
    ed.append_lines()
    assert len(ed.lines) == MAXLINES
    assert "Buffer full\n" in out.getvalue()


def test_unknown_command():
    ed, out = make_editor("z\nq\n")
    assert ed.run() == 0
    assert "Unknown command 'z'. Type 'h' for help.\n" in out.getvalue()


def test_help_lists_commands():
    ed, out = make_editor("h\n")
    assert ed.run() == 0
    assert "q - quit\n" in out.getvalue()


def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "doc.txt"
    ed, out = make_editor("", str(path))
    ed.lines = ["one\n", "two\n"]
    ed.write_file()
    assert path.read_text() == "one\ntwo\n"
    assert f"2 lines written to {path}\n" in out.getvalue()

    reader, rout = make_editor(f"{path}\n")
    reader.read_file()
    assert reader.lines == ["one\n", "two\n"]
    assert reader.filename == str(path)
    assert f"2 lines read from {path}\n" in rout.getvalue()


def test_write_asks_for_filename(tmp_path):
    path = tmp_path / "asked.txt"
    ed, _ = make_editor(f"{path}\n")
    ed.lines = ["data\n"]
    ed.write_file()
    assert ed.filename == str(path)
    assert path.read_text() == "data\n"


def test_write_does_not_truncate(tmp_path):
    path = tmp_path / "old.txt"
    original = "XXXXXXXXXX\n"
    path.write_text(original)
    ed, _ = make_editor("", str(path))
    ed.lines = ["ab\n"]
    ed.write_file()
    content = path.read_text()
    assert content.startswith("ab\n")
    assert len(content) == len(original)


def test_write_error_opening(tmp_path):
    ed, out = make_editor("", str(tmp_path / "missing" / "f.txt"))
    ed.lines = ["a\n"]
    ed.write_file()
    assert out.getvalue().endswith("Error opening file\n")


def test_read_missing_file_keeps_lines(tmp_path):
    ed, out = make_editor(f"{tmp_path / 'nope'}\n")
    ed.lines = ["keep\n"]
    ed.read_file()
    assert ed.lines == ["keep\n"]
    assert out.getvalue().endswith("Error opening file\n")


def test_read_drops_unterminated_last_line(tmp_path):
    path = tmp_path / "f.txt"
    path.write_text("one\ntwo")
    ed, _ = make_editor(f"{path}\n")
    ed.read_file()
    assert ed.lines == ["one\n"]


def test_main_reads_file_named_at_prompt(tmp_path, monkeypatch):
    path = tmp_path / "m.txt"
    path.write_text("alpha\n")
    out = io.StringIO()
    monkeypatch.setattr("sys.stdin", io.StringIO(f"{path}\np\nq\n"))
    monkeypatch.setattr("sys.stdout", out)
    assert main([str(path)]) == 0
    assert "1: alpha\n" in out.getvalue()


def test_run_ends_at_eof():
    ed, out = make_editor("a\nline\n")
    assert ed.run() == 0
    assert ed.lines == ["line\n"]