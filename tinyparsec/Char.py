from typing import Callable, Sequence

from .Parsec import Cursor, ErrorKind, ParseError, ParseResult, Parser
from .Prim import choice


# Consumes exactly one character
def char() -> Parser[str]:
    """Parses any single character and returns it."""
    def parse(cursor: Cursor) -> ParseResult[str]:
        c = cursor.peek()
        if c is None:
            return ParseResult.fail(ParseError.at(ErrorKind.EMPTY_INPUT, cursor), cursor)
        return ParseResult.ok(c, cursor.advance())
    return Parser(parse)


# Longest run of characters satisfying a predicate
def substring(predicate: Callable[[str], bool]) -> Parser[str]:
    """
    Consumes the longest prefix whose characters all satisfy predicate.
    Never fails: an empty match is a success.
    """
    def parse(cursor: Cursor) -> ParseResult[str]:
        n = cursor.span(predicate)
        return ParseResult.ok(cursor.take(n), cursor.advance(n))
    return Parser(parse)


def integer() -> Parser[int]:
    """Parses a run of digits as a non-negative int."""
    def parse(cursor: Cursor) -> ParseResult[int]:
        digits = cursor.take(cursor.span(str.isdigit))
        try:
            # str.isdigit also admits characters int() rejects, such as '²'
            number = int(digits)
        except ValueError:
            return ParseResult.fail(ParseError.at(ErrorKind.NOT_A_NUMBER, cursor), cursor)
        return ParseResult.ok(number, cursor.advance(len(digits)))
    return Parser(parse)


def removing_literal(expected: str) -> Parser[None]:
    """Consumes the exact string ``expected`` and yields None."""
    def parse(cursor: Cursor) -> ParseResult[None]:
        if not cursor.startswith(expected):
            return ParseResult.fail(ParseError.at(ErrorKind.LITERAL_NOT_FOUND, cursor, expected=expected), cursor)
        return ParseResult.ok(None, cursor.advance(len(expected)))
    return Parser(parse)


def boolean_of(true_literals: Sequence[str], false_literals: Sequence[str]) -> Parser[bool]:
    """
    Builds a boolean parser from the given spellings. Literals are matched
    case-sensitively, true spellings first, each group in the order given.
    """
    true_bool = choice([removing_literal(s) for s in true_literals]).map(lambda _: True)
    false_bool = choice([removing_literal(s) for s in false_literals]).map(lambda _: False)
    return true_bool.or_else(false_bool)


def boolean() -> Parser[bool]:
    """Parses 'true'/'True' as True and 'false'/'False' as False."""
    return boolean_of(("true", "True"), ("false", "False"))
