"""
G Front End Error Hierarchy
===========================

This module defines the exception hierarchy for the G language front end.
All exceptions inherit from GFrontError, allowing callers to catch every
front-end failure with a single except clause if desired.

Exception Hierarchy
-------------------
GFrontError (base)
├── LexicalError - fatal tokenizer errors
│   ├── UnclosedCommentError - block comment still open at end of input
│   ├── InvalidEscapeError - unknown escape character in a string
│   ├── InvalidUnicodeEscapeError - malformed \\x, \\u or \\U escape
│   │   ├── InvalidHexDigitError - non-hex digit inside the escape
│   │   └── InvalidCodePointError - value is not a Unicode scalar value
│   ├── UnterminatedStringError - end of input inside a string literal
│   └── MalformedNumberError - malformed numeric literal (strict mode only)
└── ParseError - parser errors
    └── UnexpectedTokenError - token does not fit the declaration form

Fatal versus Recoverable
------------------------
Every LexicalError aborts tokenization: there is no partial-token recovery.
Malformed numeric literals (an exponent marker with no exponent) are the one
self-healing case. The lexer drops the marker, records a LexerWarning and
carries on, unless warnings are promoted to errors, in which case
MalformedNumberError is raised instead.

Error Message Format
--------------------
The front end does not track source locations, so messages are:

    error: description
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception
# =============================================================================

class GFrontError(Exception):
    """
    Base exception for all G front-end errors.

    Attributes:
        message: The error description
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with its hint.

        Example output:
            error: invalid escape sequence '\\q'
            hint: valid escapes are \\a \\b \\f \\n \\r \\t \\v \\\\ \\' \\" \\? \\x \\u \\U
        """
        parts = [f"error: {self.message}"]
        if self.hint:
            parts.append(f"hint: {self.hint}")
        return "\n".join(parts)


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(GFrontError):
    """
    Fatal error raised while tokenizing.

    The token stream stops at the first LexicalError; no further tokens
    are produced for the input.
    """
    pass


class UnclosedCommentError(LexicalError):
    """Block comment (possibly nested) still open at end of input."""

    def __init__(self, depth: int = 0):
        self.depth = depth
        super().__init__(
            "unclosed comment",
            hint="add closing */ to terminate the comment"
            + (f" ({depth + 1} levels open)" if depth else ""),
        )


class InvalidEscapeError(LexicalError):
    """Unknown escape character after a backslash in a string literal."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(
            f"invalid escape sequence '\\{char}'",
            hint="valid escapes are \\a \\b \\f \\n \\r \\t \\v \\\\ \\' \\\" \\? "
                 "\\xHH \\uHHHH \\UHHHHHHHH",
        )


class InvalidUnicodeEscapeError(LexicalError):
    """Base class for malformed \\x, \\u and \\U escapes."""
    pass


class InvalidHexDigitError(InvalidUnicodeEscapeError):
    """A non-hex character appeared before the escape's digit count was reached."""

    def __init__(self, char: str, expected_digits: int):
        self.char = char
        self.expected_digits = expected_digits
        super().__init__(
            f"invalid Unicode escape: {char!r} is not a hex digit",
            hint=f"this escape takes exactly {expected_digits} hex digits",
        )


class InvalidCodePointError(InvalidUnicodeEscapeError):
    """The decoded escape value is a surrogate or above U+10FFFF."""

    def __init__(self, code_point: int):
        self.code_point = code_point
        super().__init__(
            f"invalid Unicode escape: 0x{code_point:X} is not a Unicode scalar value",
        )


class UnterminatedStringError(LexicalError):
    """End of input reached inside a string literal."""

    def __init__(self, partial: str = ""):
        self.partial = partial
        super().__init__(
            "unterminated string literal",
            hint="add closing '\"' to complete the string",
        )


class MalformedNumberError(LexicalError):
    """
    Malformed numeric literal.

    Only raised when warnings are promoted to errors; by default the lexer
    recovers and records a LexerWarning instead.
    """

    def __init__(self, message: str, text: str):
        self.text = text
        super().__init__(f"{message} in '{text}'")


# =============================================================================
# Parse Errors
# =============================================================================

class ParseError(GFrontError):
    """Error raised by the declaration parser."""
    pass


class UnexpectedTokenError(ParseError):
    """
    Unexpected token during parsing.

    Raised when the token stream does not match the
    `type ident = constant ;` declaration form.
    """

    def __init__(self, expected: str, found: str):
        self.expected = expected
        self.found = found
        super().__init__(
            f"expected {expected}; got {found}",
        )


# =============================================================================
# Warnings
# =============================================================================

@dataclass(frozen=True)
class LexerWarning:
    """
    Non-fatal diagnostic produced while tokenizing.

    Attributes:
        message: What was wrong
        text: The literal text as it was emitted after recovery
    """
    message: str
    text: str

    def __str__(self) -> str:
        return f"warning: {self.message} in '{self.text}'"
