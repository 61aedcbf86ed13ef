from hypothesis import given
from hypothesis import strategies as st

from tinyparsec.Parsec import Cursor


def test_remaining_and_len():
    c = Cursor("hello world", 6)
    assert c.remaining == "world"
    assert len(c) == 5
    assert not c.is_eof


def test_peek_at_end():
    c = Cursor("ab", 2)
    assert c.is_eof
    assert c.peek() is None
    assert c.remaining == ""


def test_startswith_uses_offset():
    c = Cursor("name: John", 6)
    assert c.startswith("John")
    assert not c.startswith("name")
    assert c.startswith("")


def test_advance_is_clamped_and_immutable():
    c = Cursor("abc")
    d = c.advance(10)
    assert c.offset == 0
    assert d.offset == 3
    assert d.is_eof


@given(st.text(), st.integers(min_value=0, max_value=50))
def test_span_matches_reference(text, offset):
    c = Cursor(text, min(offset, len(text)))
    n = c.span(str.isalpha)
    taken = c.take(n)
    assert all(ch.isalpha() for ch in taken)
    rest = c.remaining[n:]
    assert rest == "" or not rest[0].isalpha()
