import io

import pytest

from tinyunix.ulib import atoi, gets, strcmp


@pytest.mark.parametrize(
    "text, expected",
    [("123", 123), ("-45", -45), ("+7", 7), ("12abc", 12), ("", 0), (" 5", 0), ("-", 0)],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_strcmp_equal():
    assert strcmp("abc", "abc") == 0


def test_strcmp_sign():
    assert strcmp("abc", "abd") < 0
    assert strcmp("abd", "abc") > 0
    assert strcmp("ab", "abc") < 0
    assert strcmp("abc", "ab") > 0


def test_strcmp_difference_is_byte_difference():
    assert strcmp("a", "b") == ord("a") - ord("b")
    assert strcmp("b", "") == ord("b")


def test_strcmp_stops_at_nul():
    assert strcmp("ab\0x", "ab\0y") == 0
    assert strcmp(b"ab", b"ab") == 0


def test_gets_reads_one_line_at_a_time():
    stream = io.StringIO("hello\nworld")
    assert gets(stream, 100) == "hello\n"
    assert gets(stream, 100) == "world"
    assert gets(stream, 100) == ""


def test_gets_respects_max():
    assert gets(io.StringIO("hello\n"), 4) == "hel"


def test_gets_stops_at_carriage_return():
    assert gets(io.StringIO("ab\rcd"), 10) == "ab\r"


def test_gets_binary_stream():
    assert gets(io.BytesIO(b"ab\ncd"), 10) == b"ab\n"