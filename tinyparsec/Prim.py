import logging
from typing import Any, Callable, List, Optional, Tuple, TypeVar

from .Parsec import Cursor, Error, ErrorKind, Ok, ParseError, ParseResult, Parser, T, U

V = TypeVar('V')

logger = logging.getLogger(__name__)


def always(value: T) -> Parser[T]:
    """Return a parser that succeeds with a value without consuming input."""
    def parse(cursor: Cursor) -> ParseResult[T]:
        return ParseResult.ok(value, cursor)
    return Parser(parse)


def never() -> Parser[Any]:
    """A parser that always fails without consuming input."""
    def parse(cursor: Cursor) -> ParseResult[Any]:
        return ParseResult.fail(ParseError.at(ErrorKind.NEVER, cursor), cursor)
    return Parser(parse)


def zip2(a: Parser[T], b: Parser[U]) -> Parser[Tuple[T, U]]:
    """Run a then b and return both values. If b fails, nothing is consumed."""
    def parse(cursor: Cursor) -> ParseResult[Tuple[T, U]]:
        res_a = a(cursor)
        if isinstance(res_a.reply, Error):
            return res_a
        res_b = b(res_a.reply.cursor)
        if isinstance(res_b.reply, Error):
            return ParseResult.fail(res_b.reply.error, cursor)
        return ParseResult.ok((res_a.reply.value, res_b.reply.value), res_b.reply.cursor)
    return Parser(parse)


def zip3(a: Parser[T], b: Parser[U], c: Parser[V]) -> Parser[Tuple[T, U, V]]:
    return zip2(a, zip2(b, c)).map(lambda r: (r[0], r[1][0], r[1][1]))


def choice(parsers: List[Parser[T]]) -> Parser[T]:
    """
    Applies a list of parsers in order until one succeeds.
    An empty list behaves like never().
    """
    if not parsers:
        return never()
    return parsers[0].or_else(*parsers[1:])


def lazy(thunk: Callable[[], Parser[T]]) -> Parser[T]:
    """Defer building a parser until it runs, for recursive grammars."""
    cache: List[Parser[T]] = []

    def parse(cursor: Cursor) -> ParseResult[T]:
        if not cache:
            cache.append(thunk())
        return cache[0](cursor)
    return Parser(parse)


def eof() -> Parser[None]:
    """Succeeds only when no input remains."""
    def parse(cursor: Cursor) -> ParseResult[None]:
        if cursor.is_eof:
            return ParseResult.ok(None, cursor)
        return ParseResult.fail(ParseError.at(ErrorKind.UNEXPECTED_END, cursor, expected="end of input"), cursor)
    return Parser(parse)


def run_parser(parser: Parser[T], input_str: str) -> Tuple[Optional[T], Optional[ParseError]]:
    result = parser(Cursor(input_str))
    if isinstance(result.reply, Ok):
        return result.reply.value, None
    return None, result.reply.error


# Debugging parser that logs the remaining input
def parser_trace(label_str: str) -> Parser[None]:
    def parse(cursor: Cursor) -> ParseResult[None]:
        rest = cursor.take(30)
        logger.debug("%s: %r%s at offset %d", label_str, rest, "..." if len(cursor) > 30 else "", cursor.offset)
        return ParseResult.ok(None, cursor)
    return Parser(parse)


# Debugging parser that logs entry, success and backtracking of p
def parser_traced(label_str: str, p: Parser[T]) -> Parser[T]:
    enter = parser_trace(label_str)

    def parse(cursor: Cursor) -> ParseResult[T]:
        enter(cursor)
        res = p(cursor)
        if isinstance(res.reply, Error):
            logger.debug("%s backtracked: %s", label_str, res.reply.error)
        else:
            logger.debug("%s matched %d characters", label_str, res.reply.cursor.offset - cursor.offset)
        return res
    return Parser(parse)
