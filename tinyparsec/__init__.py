# Core
from .Parsec import Parser, Cursor, ParseResult, Ok, Error, ParseError, ErrorKind, Match
from .Prim import always, never, zip2, zip3, choice, lazy, eof, run_parser

# Primitives
from .Char import char, substring, integer, removing_literal, boolean, boolean_of

# Debugging
from .Prim import parser_trace, parser_traced
