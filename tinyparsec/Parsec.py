import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Generic, NamedTuple, Optional, Tuple, TypeVar, Union

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cursor:
    """A view of the unconsumed input: the whole buffer plus an offset into it.

    Prefix checks run against ``source`` at ``offset`` so the buffer is never
    copied while parsing. ``remaining`` builds the rest as a new string and is
    meant for results and diagnostics.
    """
    source: str
    offset: int = 0

    @property
    def remaining(self) -> str:
        return self.source[self.offset:]

    @property
    def is_eof(self) -> bool:
        return self.offset >= len(self.source)

    def __len__(self) -> int:
        return len(self.source) - self.offset

    def peek(self) -> Optional[str]:
        """Return the next character, or None at end of input."""
        if self.is_eof:
            return None
        return self.source[self.offset]

    def startswith(self, prefix: str) -> bool:
        return self.source.startswith(prefix, self.offset)

    def span(self, predicate: Callable[[str], bool]) -> int:
        """Length of the longest prefix whose characters all satisfy predicate."""
        end = self.offset
        size = len(self.source)
        while end < size and predicate(self.source[end]):
            end += 1
        return end - self.offset

    def take(self, n: int) -> str:
        return self.source[self.offset:self.offset + n]

    def advance(self, n: int = 1) -> 'Cursor':
        return Cursor(self.source, min(self.offset + n, len(self.source)))


class ErrorKind(Enum):
    NEVER = auto()
    UNEXPECTED_END = auto()
    NOT_A_NUMBER = auto()
    LITERAL_NOT_FOUND = auto()
    EMPTY_INPUT = auto()


class ParseError(Exception):
    """A parse failure: its kind, where it happened and what was left to read.

    Inside the engine a ParseError travels as a value in an ``Error`` reply.
    ``Parser.run`` raises it, and functions passed to ``Parser.map`` may raise
    it to reject a value. The error keeps the cursor it failed at; the
    unconsumed text is only sliced out when ``remaining`` is read.
    """

    def __init__(self,
                 kind: ErrorKind,
                 cursor: Optional[Cursor] = None,
                 expected: Optional[str] = None,
                 causes: Tuple['ParseError', ...] = ()):
        super().__init__()
        self.kind = kind
        self.cursor = cursor if cursor is not None else Cursor("")
        self.expected = expected
        self.causes = tuple(causes)

    @classmethod
    def at(cls, kind: ErrorKind, cursor: Cursor, expected: Optional[str] = None,
           causes: Tuple['ParseError', ...] = ()) -> 'ParseError':
        return cls(kind, cursor, expected, causes)

    @property
    def offset(self) -> int:
        return self.cursor.offset

    @property
    def remaining(self) -> str:
        return self.cursor.remaining

    def describe(self) -> str:
        found = _shorten(self.cursor)
        if self.kind is ErrorKind.NEVER:
            return "parser never succeeds"
        if self.kind is ErrorKind.EMPTY_INPUT:
            return "unexpected end of input"
        if self.kind is ErrorKind.NOT_A_NUMBER:
            return f"expected a number, found {found}"
        if self.kind is ErrorKind.LITERAL_NOT_FOUND:
            return f"expected {self.expected!r}, found {found}"
        # UNEXPECTED_END
        if self.expected is not None:
            return f"expected {self.expected}, found {found}"
        if self.causes:
            alternatives = "; ".join(c.describe() for c in self.causes)
            return f"no alternative matched ({alternatives})"
        return "no alternative matched"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return (self.kind, self.cursor, self.expected, self.causes) == \
               (other.kind, other.cursor, other.expected, other.causes)

    def __hash__(self) -> int:
        return hash((self.kind, self.cursor, self.expected, self.causes))

    def __repr__(self) -> str:
        return f"ParseError({self.kind.name}, offset={self.offset}, remaining={_shorten(self.cursor)})"

    def __str__(self) -> str:
        return f"Parse error at offset {self.offset}: {self.describe()}"


def _shorten(cursor: Cursor, limit: int = 30) -> str:
    if cursor.is_eof:
        return "end of input"
    text = cursor.take(limit)
    if len(cursor) > limit:
        return repr(text) + "..."
    return repr(text)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    cursor: Cursor


@dataclass(frozen=True)
class Error:
    error: ParseError
    cursor: Cursor


Reply = Union[Ok[T], Error]


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of running a parser: an Ok or an Error reply.

    The reply's cursor is where the caller continues from. For an Error it is
    the position the caller observes after the failure, normally the cursor
    the parser was given.
    """
    reply: Reply

    @property
    def is_ok(self) -> bool:
        return isinstance(self.reply, Ok)

    @property
    def value(self) -> Optional[T]:
        return self.reply.value if isinstance(self.reply, Ok) else None

    @property
    def error(self) -> Optional[ParseError]:
        return self.reply.error if isinstance(self.reply, Error) else None

    @property
    def cursor(self) -> Cursor:
        return self.reply.cursor

    @staticmethod
    def ok(value: T, cursor: Cursor) -> 'ParseResult[T]':
        return ParseResult(Ok(value, cursor))

    @staticmethod
    def fail(error: ParseError, cursor: Cursor) -> 'ParseResult[Any]':
        return ParseResult(Error(error, cursor))


class Match(NamedTuple):
    match: Any
    rest: str


class Parser(Generic[T]):
    """A parser: a function from a cursor to a ParseResult."""

    def __init__(self, parse_fn: Callable[[Cursor], ParseResult[T]]):
        self.parse_fn = parse_fn

    def __call__(self, cursor: Cursor) -> ParseResult[T]:
        return self.parse_fn(cursor)

    def run(self, text: str) -> Match:
        """Parse the front of ``text`` and return the value and the unread rest.

        Trailing input is not an error; compose with ``eof()`` to reject it.
        Raises ParseError on failure.
        """
        result = self(Cursor(text))
        if isinstance(result.reply, Error):
            logger.debug("parse failed: %s", result.reply.error)
            raise result.reply.error
        return Match(result.reply.value, result.reply.cursor.remaining)

    # Functor map
    def map(self, f: Callable[[T], U]) -> 'Parser[U]':
        # f may raise ParseError; the cursor stays where self left it
        def parse(cursor: Cursor) -> ParseResult[U]:
            res = self(cursor)
            if isinstance(res.reply, Error):
                return res
            try:
                return ParseResult.ok(f(res.reply.value), res.reply.cursor)
            except ParseError as err:
                return ParseResult.fail(err, res.reply.cursor)
        return Parser(parse)

    # Monadic bind (>>=)
    def flat_map(self, f: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        def parse(cursor: Cursor) -> ParseResult[U]:
            res = self(cursor)
            if isinstance(res.reply, Error):
                return res
            try:
                next_parser = f(res.reply.value)
            except ParseError as err:
                return ParseResult.fail(err, res.reply.cursor)
            res2 = next_parser(res.reply.cursor)
            if isinstance(res2.reply, Error):
                # Both stages form one unit, undo the first stage too.
                return ParseResult.fail(res2.reply.error, cursor)
            return res2
        return Parser(parse)

    # Ordered choice
    def or_else(self, *alternatives: 'Parser[T]') -> 'Parser[T]':
        attempts = (self,) + alternatives

        def parse(cursor: Cursor) -> ParseResult[T]:
            causes = []
            for p in attempts:
                res = p(cursor)
                if isinstance(res.reply, Ok):
                    return res
                err = res.reply.error
                if err.kind is ErrorKind.UNEXPECTED_END and err.causes and err.expected is None:
                    causes.extend(err.causes)
                else:
                    causes.append(err)
            return ParseResult.fail(ParseError.at(ErrorKind.UNEXPECTED_END, cursor, causes=tuple(causes)), cursor)
        return Parser(parse)

    def label(self, name: str) -> 'Parser[T]':
        """Replace a failure at the starting position with 'expected <name>'."""
        def parse(cursor: Cursor) -> ParseResult[T]:
            res = self(cursor)
            if isinstance(res.reply, Error) and res.reply.cursor == cursor:
                err = res.reply.error
                return ParseResult.fail(ParseError.at(ErrorKind.UNEXPECTED_END, cursor, expected=name, causes=(err,)), cursor)
            return res
        return Parser(parse)

    # Alternative (<|>)
    def __or__(self, other: 'Parser[T]') -> 'Parser[T]':
        return self.or_else(other)

    # Sequence (&)
    def __and__(self, other: 'Parser[U]') -> 'Parser[Tuple[T, U]]':
        from .Prim import zip2
        return zip2(self, other)

    # Sequence (*>)
    def __gt__(self, other: 'Parser[U]') -> 'Parser[U]':
        return (self & other).map(lambda pair: pair[1])

    # Sequence (<*)
    def __lt__(self, other: 'Parser[U]') -> 'Parser[T]':
        return (self & other).map(lambda pair: pair[0])

    # Monadic bind also available as >>
    def __rshift__(self, f: Callable[[T], 'Parser[U]']) -> 'Parser[U]':
        return self.flat_map(f)

