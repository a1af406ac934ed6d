"""
G Lexer (Tokenizer)
===================

This module implements the lexer for the G language, a small C-like
language. It converts a character stream into tokens for the parser,
one token per pull.

Token Categories
----------------
- Keywords: if, else, do, while, for, u8 ... u64, usize, i8 ... i64, isize
- Identifiers: letters, digits and underscores, not starting with a digit
- Numbers: binary (0b), octal (0o), hexadecimal (0x/0X), decimal, float
- Strings: "double quoted", with C-style and Unicode escapes
- Operators: && || == != <= >= ++ -- += -= *= /= %= ->
- Terminals: every other single character

Comments
--------
- Single-line: // comment
- Block: /* comment */, which may nest: /* a /* b */ c */

Escape Sequences
----------------
\\a \\b \\f \\n \\r \\t \\v, \\\\ \\' \\" \\?, and code points
\\xHH, \\uHHHH, \\UHHHHHHHH (exactly 2, 4 or 8 hex digits)

Numeric Suffixes
----------------
Letters directly after a literal's digits are kept as its `trail`
(123abc -> value "123", trail "abc") instead of being rejected. An
exponent marker with no exponent (1e) is dropped with a warning.

Example Usage
-------------
>>> from gfront.lexer import Lexer
>>> for token in Lexer("u8 x = 0xFF;").tokenize():
...     print(token)
<U8>
<Ident="x">
<=>
<Hexadecimal=FF trail="">
<;>
<EndOfFile>
"""

import logging
import string
from enum import Enum, auto
from typing import Iterable, Iterator, Optional

from gfront.errors import (
    LexerWarning,
    UnclosedCommentError,
    InvalidEscapeError,
    InvalidHexDigitError,
    InvalidCodePointError,
    UnterminatedStringError,
    MalformedNumberError,
)
from gfront.source import CharCursor
from gfront.tokens import EOF_TOKEN, KEYWORDS, TWO_CHAR_OPERATORS, Token, TokenType

logger = logging.getLogger(__name__)


# =============================================================================
# Character Classes
# =============================================================================

WHITESPACE = frozenset(" \t\r\n")
DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)
HEX_DIGITS = frozenset(string.hexdigits)

# Characters that can start an identifier
IDENT_START = LETTERS | {"_"}

# Characters that can continue an identifier or a numeric suffix
IDENT_CHARS = IDENT_START | DIGITS

EXPONENT_MARKERS = frozenset("eE")
EXPONENT_SIGNS = frozenset("+-")

# Prefix letter after a leading 0 -> (token type, valid digits)
BASE_PREFIXES: dict[str, tuple[TokenType, frozenset]] = {
    "b": (TokenType.BINARY, frozenset("01")),
    "o": (TokenType.OCTAL, frozenset(string.octdigits)),
    "x": (TokenType.HEXADECIMAL, HEX_DIGITS),
    "X": (TokenType.HEXADECIMAL, HEX_DIGITS),
}

SIMPLE_ESCAPES = {
    "a": "\a",      # Bell
    "b": "\b",      # Backspace
    "f": "\f",      # Form feed
    "n": "\n",      # Newline
    "r": "\r",      # Carriage return
    "t": "\t",      # Tab
    "v": "\v",      # Vertical tab
    "\\": "\\",
    "'": "'",
    '"': '"',
    "?": "?",
}

# Escape letter -> number of hex digits that follow
HEX_ESCAPES = {
    "x": 2,
    "u": 4,
    "U": 8,
}

MAX_CODE_POINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)


# =============================================================================
# Scanner States
# =============================================================================

class NumberState(Enum):
    """States of the decimal/float scanner (the INT/INT_TRAIL pair also drives fixed-base scans)."""
    INT = auto()            # Integer digits
    DEC = auto()            # Seen '.'
    EXP_SIGN = auto()       # Seen 'e'/'E', sign or digit expected
    EXP = auto()            # Exponent digits
    INT_TRAIL = auto()      # Suffix after an integer
    FLOAT_TRAIL = auto()    # Suffix after a float


TRAIL_STATES = frozenset({NumberState.INT_TRAIL, NumberState.FLOAT_TRAIL})
INTEGER_STATES = frozenset({NumberState.INT, NumberState.INT_TRAIL})


class StringState(Enum):
    """States of the string literal scanner."""
    STR = auto()            # Plain text
    ESCAPE = auto()         # Seen '\'
    HEX = auto()            # Inside \x, \u or \U digits


class CommentState(Enum):
    """States of the block comment skipper."""
    OTHER = auto()
    SLASH = auto()          # Seen '/', may open a nested comment
    STAR = auto()           # Seen '*', may close a comment


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes G source code on demand.

    Each call to `next_token()` skips whitespace and comments, scans
    exactly one token and returns it. Once the input is exhausted it
    returns the EOF token, and keeps returning it on every later call.

    Iterating over a Lexer yields every token followed by the EOF token
    exactly once.

    Usage:
        lexer = Lexer(source_text)
        tokens = list(lexer.tokenize())

    Attributes:
        warnings: Malformed-token warnings recorded so far
        warnings_as_errors: Raise MalformedNumberError instead of warning
    """

    def __init__(self, source: Iterable[str], warnings_as_errors: bool = False):
        """
        Initialize the lexer.

        Args:
            source: Any iterable of characters (a str, a generator, ...)
            warnings_as_errors: Treat malformed literals as fatal errors
        """
        self._chars = CharCursor(source)
        self.warnings_as_errors = warnings_as_errors
        self.warnings: list[LexerWarning] = []

        # Set once iteration has handed out the EOF token
        self._exhausted = False

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if self._exhausted:
            raise StopIteration
        token = self.next_token()
        if token.type == TokenType.EOF:
            self._exhausted = True
        return token

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source.

        Yields:
            Token objects, ending with a single EOF token

        Raises:
            LexicalError: If the source cannot be tokenized
        """
        return iter(self)

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Returns:
            The next Token, or the EOF token at end of input

        Raises:
            LexicalError: If the source cannot be tokenized
        """
        char = self._skip_whitespace_and_comments()
        if char is None:
            return EOF_TOKEN
        return self._scan_token(char)

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace_and_comments(self) -> Optional[str]:
        """
        Skip whitespace and comments.

        Returns:
            The first character of the next token, or None at end of input
        """
        while True:
            char = self._chars.advance()
            if char is None:
                return None

            if char in WHITESPACE:
                continue

            if char == "/":
                following = self._chars.advance()
                if following == "/":
                    self._skip_line_comment()
                    continue
                if following == "*":
                    self._skip_block_comment()
                    continue
                self._chars.push_back(following)

            return char

    def _skip_line_comment(self) -> None:
        """Skip through the end of a // comment, newline included."""
        char = self._chars.advance()
        while char is not None and char != "\n":
            char = self._chars.advance()

    def _skip_block_comment(self) -> None:
        """
        Skip a block comment whose opening /* was already consumed.

        Raises:
            UnclosedCommentError: If input ends before the comment closes
        """
        state = CommentState.OTHER
        depth = 0

        char = self._chars.advance()
        while char is not None:
            if state is CommentState.SLASH and char == "*":
                depth += 1
                state = CommentState.OTHER
            elif state is CommentState.STAR and char == "/":
                if depth == 0:
                    return
                depth -= 1
                state = CommentState.OTHER
            elif char == "/":
                state = CommentState.SLASH
            elif char == "*":
                state = CommentState.STAR
            else:
                state = CommentState.OTHER

            char = self._chars.advance()

        raise UnclosedCommentError(depth)

    # =========================================================================
    # Token Dispatch
    # =========================================================================

    def _scan_token(self, char: str) -> Token:
        """
        Scan the token starting with char.

        The character after char decides two-character operators, base
        prefixes and leading-dot floats; otherwise it is pushed back.
        """
        following = self._chars.advance()

        if following is not None:
            pair = char + following

            operator = TWO_CHAR_OPERATORS.get(pair)
            if operator is not None:
                return Token(operator, pair)

            if char == "0" and following in BASE_PREFIXES:
                return self._scan_fixed_base(following)

            if char == "." and following in DIGITS:
                self._chars.push_back(following)
                return self._scan_decimal(char, NumberState.DEC)

        self._chars.push_back(following)

        if char in DIGITS:
            return self._scan_decimal(char, NumberState.INT)

        if char in IDENT_START:
            return self._scan_identifier(char)

        if char == '"':
            return self._scan_string()

        return Token(TokenType.TERM, char)

    def _scan_identifier(self, first: str) -> Token:
        """
        Scan an identifier or keyword.

        The keyword table is consulted only once the whole identifier has
        been read, so `forever` is an identifier and `for` a keyword.
        """
        chars = [first]
        char = self._chars.advance()
        while char in IDENT_CHARS:
            chars.append(char)
            char = self._chars.advance()
        self._chars.push_back(char)

        name = "".join(chars)
        keyword = KEYWORDS.get(name)
        if keyword is not None:
            return Token(keyword, name)
        return Token(TokenType.IDENTIFIER, name)

    # =========================================================================
    # Numeric Literals
    # =========================================================================

    def _scan_fixed_base(self, prefix: str) -> Token:
        """
        Scan the digits of a 0b, 0o or 0x literal.

        The first identifier character that is not a valid digit moves the
        scan into the suffix state for good: `0b102` has value "10" and
        trail "2".
        """
        token_type, valid_digits = BASE_PREFIXES[prefix]
        digits: list[str] = []
        trail: list[str] = []
        state = NumberState.INT

        while True:
            char = self._chars.advance()
            if state is NumberState.INT and char in valid_digits:
                digits.append(char)
            elif char in IDENT_CHARS:
                state = NumberState.INT_TRAIL
                trail.append(char)
            else:
                break

        self._chars.push_back(char)
        return Token(token_type, "".join(digits), "".join(trail))

    def _scan_decimal(self, first: str, state: NumberState) -> Token:
        """
        Scan a decimal integer or float literal.

        Args:
            first: The literal's first character (a digit, or '.')
            state: INT for a leading digit, DEC for a leading '.'
        """
        value = [first]
        trail: list[str] = []
        before_exponent = state

        while True:
            char = self._chars.advance()
            next_state = self._number_transition(state, char)
            if next_state is None:
                break

            if next_state is NumberState.EXP_SIGN:
                before_exponent = state

            if next_state in TRAIL_STATES:
                trail.append(char)
            else:
                value.append(char)
            state = next_state

        if state is NumberState.EXP_SIGN:
            # Exponent marker without an exponent: drop the marker
            value.pop()
            state = before_exponent
            self._warn("empty exponent", "".join(value))

        self._chars.push_back(char)

        token_type = TokenType.DECIMAL if state in INTEGER_STATES else TokenType.FLOAT
        return Token(token_type, "".join(value), "".join(trail))

    @staticmethod
    def _number_transition(state: NumberState, char: Optional[str]) -> Optional[NumberState]:
        """
        Return the state after reading char, or None if char ends the literal.
        """
        if state is NumberState.INT:
            if char in DIGITS:
                return NumberState.INT
            if char == ".":
                return NumberState.DEC
            if char in EXPONENT_MARKERS:
                return NumberState.EXP_SIGN
            if char in LETTERS:
                return NumberState.INT_TRAIL

        elif state is NumberState.DEC:
            if char in DIGITS:
                return NumberState.DEC
            if char in EXPONENT_MARKERS:
                return NumberState.EXP_SIGN
            if char in LETTERS:
                return NumberState.FLOAT_TRAIL

        elif state is NumberState.EXP_SIGN:
            if char in EXPONENT_SIGNS or char in DIGITS:
                return NumberState.EXP

        elif state is NumberState.EXP:
            if char in DIGITS:
                return NumberState.EXP
            if char in LETTERS:
                return NumberState.FLOAT_TRAIL

        elif char in IDENT_CHARS:
            # Trail states keep whatever identifier characters follow
            return state

        return None

    def _warn(self, message: str, text: str) -> None:
        """
        Record a malformed-token warning, or raise it in strict mode.

        Raises:
            MalformedNumberError: If warnings_as_errors is set
        """
        if self.warnings_as_errors:
            raise MalformedNumberError(message, text)

        warning = LexerWarning(message, text)
        self.warnings.append(warning)
        logger.warning("%s", warning)

    # =========================================================================
    # String Literals
    # =========================================================================

    def _scan_string(self) -> Token:
        """
        Scan a string literal whose opening quote was already consumed.

        Raises:
            InvalidEscapeError: For an unknown escape character
            InvalidHexDigitError: For a non-hex digit inside \\x, \\u or \\U
            InvalidCodePointError: If an escape decodes to a non-scalar value
            UnterminatedStringError: If input ends before the closing quote
        """
        chars: list[str] = []
        state = StringState.STR
        code_point = 0
        remaining = 0
        width = 0

        while True:
            char = self._chars.advance()
            if char is None:
                raise UnterminatedStringError("".join(chars))

            if state is StringState.STR:
                if char == "\\":
                    state = StringState.ESCAPE
                elif char == '"':
                    return Token(TokenType.STRING, "".join(chars))
                else:
                    chars.append(char)

            elif state is StringState.ESCAPE:
                if char in SIMPLE_ESCAPES:
                    chars.append(SIMPLE_ESCAPES[char])
                    state = StringState.STR
                elif char in HEX_ESCAPES:
                    code_point = 0
                    remaining = width = HEX_ESCAPES[char]
                    state = StringState.HEX
                else:
                    raise InvalidEscapeError(char)

            else:
                if char not in HEX_DIGITS:
                    raise InvalidHexDigitError(char, width)
                code_point = code_point * 16 + int(char, 16)
                remaining -= 1
                if remaining == 0:
                    chars.append(_scalar_value(code_point))
                    state = StringState.STR


def _scalar_value(code_point: int) -> str:
    """Convert a decoded escape to its character, rejecting non-scalar values."""
    if code_point > MAX_CODE_POINT or code_point in SURROGATES:
        raise InvalidCodePointError(code_point)
    return chr(code_point)
