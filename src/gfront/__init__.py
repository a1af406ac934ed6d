"""
gfront - Front End for the G Language
=====================================

This package provides the lexical front end for G, a small C-like
language with sized integer types (u8 ... u64, i8 ... i64, usize, isize).

Main Components
---------------
- **lexer**: Pull-based tokenizer (identifiers, keywords, multi-base
  integer and float literals, escaped strings, nested comments)
- **parser**: Proof-of-concept parser for `type ident = constant ;`
  declarations
- **frontend**: Options and a driver that runs both over strings or files
- **cli**: The `gfc` command-line tool

Quick Start
-----------
Tokenize a string:
    >>> from gfront import Lexer
    >>> lexer = Lexer("i32 answer = 42;")
    >>> [str(tok) for tok in lexer.tokenize()][:2]
    ['<I32>', '<Ident="answer">']

Or use the command-line tool:
    $ gfc --tokens program.G
    $ gfc program.G
"""

__version__ = "0.1.0"

# =============================================================================
# Public API Exports
# =============================================================================

from gfront.errors import (
    GFrontError,
    LexicalError,
    UnclosedCommentError,
    InvalidEscapeError,
    InvalidUnicodeEscapeError,
    InvalidHexDigitError,
    InvalidCodePointError,
    UnterminatedStringError,
    MalformedNumberError,
    ParseError,
    UnexpectedTokenError,
    LexerWarning,
)
from gfront.tokens import Token, TokenType, KEYWORDS
from gfront.source import CharCursor, iter_file_chars
from gfront.lexer import Lexer
from gfront.parser import Parser, VariableDeclaration
from gfront.frontend import (
    Frontend,
    FrontendOptions,
    FrontendResult,
    tokenize,
    parse_source,
)

__all__ = [
    "__version__",
    # Errors
    "GFrontError",
    "LexicalError",
    "UnclosedCommentError",
    "InvalidEscapeError",
    "InvalidUnicodeEscapeError",
    "InvalidHexDigitError",
    "InvalidCodePointError",
    "UnterminatedStringError",
    "MalformedNumberError",
    "ParseError",
    "UnexpectedTokenError",
    "LexerWarning",
    # Tokens
    "Token",
    "TokenType",
    "KEYWORDS",
    # Lexing and parsing
    "CharCursor",
    "iter_file_chars",
    "Lexer",
    "Parser",
    "VariableDeclaration",
    "Frontend",
    "FrontendOptions",
    "FrontendResult",
    "tokenize",
    "parse_source",
]
