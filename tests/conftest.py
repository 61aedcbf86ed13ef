# tests/conftest.py
import pytest

from tinyparsec.Parsec import Cursor, Error, Ok, ParseResult


def assert_result_eq(res1: ParseResult, res2: ParseResult):
    """
    Deep comparison of two ParseResults.
    """
    assert res1.cursor == res2.cursor, f"Cursor mismatch: {res1.cursor} != {res2.cursor}"

    # Check Reply Type
    if isinstance(res1.reply, Ok):
        assert isinstance(res2.reply, Ok), "Reply mismatch: Ok vs Error"
        assert res1.reply.value == res2.reply.value
    else:
        assert isinstance(res2.reply, Error), "Reply mismatch: Error vs Ok"
        assert res1.reply.error.kind == res2.reply.error.kind
        assert res1.reply.error.offset == res2.reply.error.offset


@pytest.fixture
def cursor():
    def _make(input_data, offset=0):
        return Cursor(input_data, offset)

    return _make
