"""
G Token Model
=============

Token types and the immutable Token record produced by the lexer.

Token Categories
----------------
- Two-character operators: && || == != <= >= ++ -- += -= *= /= %= ->
- Terminals: any other single character, carried raw (; = ( ) + ...)
- Identifiers, or keywords when the spelling is reserved
- Numeric literals: binary, octal, decimal, hexadecimal, float
- String literals (escape-decoded)
- End of file

Numeric Literals
----------------
Numeric tokens are never converted to numbers here. They carry the raw
significant digits in `value` and any trailing alphanumeric suffix in
`trail`, so a later typing pass can decide what `12u8` or `0xFFzz` means:

| Source    | Type        | value    | trail |
|-----------|-------------|----------|-------|
| 0b1010    | BINARY      | "1010"   | ""    |
| 0o17      | OCTAL       | "17"     | ""    |
| 0xFF      | HEXADECIMAL | "FF"     | ""    |
| 123abc    | DECIMAL     | "123"    | "abc" |
| 1.5e10    | FLOAT       | "1.5e10" | ""    |
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token types for the G language.

    Keywords are distinguished from identifiers so the parser never has
    to compare identifier text.
    """

    # === Structural Tokens ===
    EOF = auto()                # End of file
    TERM = auto()               # Any single-character terminal

    # === Identifiers and Literals ===
    IDENTIFIER = auto()
    BINARY = auto()             # 0b...
    OCTAL = auto()              # 0o...
    DECIMAL = auto()            # 123
    HEXADECIMAL = auto()        # 0x... / 0X...
    FLOAT = auto()              # 1.5, .5, 1e10
    STRING = auto()             # "..."

    # === Binary Operators ===
    AND = auto()                # &&
    OR = auto()                 # ||
    EQUAL = auto()              # ==
    NOT_EQUAL = auto()          # !=
    LESS_EQUAL = auto()         # <=
    GREATER_EQUAL = auto()      # >=

    # === Assignment Operators ===
    ASSIGN_PLUS = auto()        # +=
    ASSIGN_MINUS = auto()       # -=
    ASSIGN_MULTIPLY = auto()    # *=
    ASSIGN_DIVIDE = auto()      # /=
    ASSIGN_MOD = auto()         # %=

    # === Unary Operators ===
    INCREMENT = auto()          # ++
    DECREMENT = auto()          # --
    ARROW = auto()              # ->

    # === Keywords - Control Flow ===
    IF = auto()
    ELSE = auto()
    DO = auto()
    WHILE = auto()
    FOR = auto()

    # === Keywords - Types ===
    U8 = auto()
    U16 = auto()
    U32 = auto()
    U64 = auto()
    USIZE = auto()
    I8 = auto()
    I16 = auto()
    I32 = auto()
    I64 = auto()
    ISIZE = auto()


# =============================================================================
# Lookup Tables
# =============================================================================

# Reserved spellings; consulted only after an identifier is fully scanned
KEYWORDS: dict[str, TokenType] = {
    # Control flow
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "do": TokenType.DO,
    "while": TokenType.WHILE,
    "for": TokenType.FOR,

    # Types
    "u8": TokenType.U8,
    "u16": TokenType.U16,
    "u32": TokenType.U32,
    "u64": TokenType.U64,
    "usize": TokenType.USIZE,
    "i8": TokenType.I8,
    "i16": TokenType.I16,
    "i32": TokenType.I32,
    "i64": TokenType.I64,
    "isize": TokenType.ISIZE,
}

TWO_CHAR_OPERATORS: dict[str, TokenType] = {
    "&&": TokenType.AND,
    "||": TokenType.OR,
    "==": TokenType.EQUAL,
    "!=": TokenType.NOT_EQUAL,
    "<=": TokenType.LESS_EQUAL,
    ">=": TokenType.GREATER_EQUAL,
    "++": TokenType.INCREMENT,
    "--": TokenType.DECREMENT,
    "+=": TokenType.ASSIGN_PLUS,
    "-=": TokenType.ASSIGN_MINUS,
    "*=": TokenType.ASSIGN_MULTIPLY,
    "/=": TokenType.ASSIGN_DIVIDE,
    "%=": TokenType.ASSIGN_MOD,
    "->": TokenType.ARROW,
}


TYPE_KEYWORDS = frozenset({
    TokenType.U8, TokenType.U16, TokenType.U32, TokenType.U64, TokenType.USIZE,
    TokenType.I8, TokenType.I16, TokenType.I32, TokenType.I64, TokenType.ISIZE,
})

INTEGER_RADIX: dict[TokenType, int] = {
    TokenType.BINARY: 2,
    TokenType.OCTAL: 8,
    TokenType.DECIMAL: 10,
    TokenType.HEXADECIMAL: 16,
}

NUMERIC_TYPES = frozenset(INTEGER_RADIX) | {TokenType.FLOAT}

# Names used by the debugging printer, e.g. <NotEqual>, <Hexadecimal=FF trail="">
_DISPLAY_NAMES: dict[TokenType, str] = {
    TokenType.EOF: "EndOfFile",
    TokenType.IDENTIFIER: "Ident",
    TokenType.STRING: "String",
    TokenType.NOT_EQUAL: "NotEqual",
    TokenType.LESS_EQUAL: "LessEqual",
    TokenType.GREATER_EQUAL: "GreaterEqual",
    TokenType.ASSIGN_PLUS: "AssignPlus",
    TokenType.ASSIGN_MINUS: "AssignMinus",
    TokenType.ASSIGN_MULTIPLY: "AssignMultiply",
    TokenType.ASSIGN_DIVIDE: "AssignDivide",
    TokenType.ASSIGN_MOD: "AssignMod",
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single lexical unit.

    Attributes:
        type: The TokenType classification
        value: Operator or keyword spelling, terminal character, identifier
               name, raw literal digits or decoded string text; None for EOF
        trail: Unrecognized suffix of a numeric literal ("" otherwise)
    """
    type: TokenType
    value: Optional[str] = None
    trail: str = ""

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.type in NUMERIC_TYPES:
            return f"Token({self.type.name}, {self.value!r}, trail={self.trail!r})"
        if self.value is not None:
            return f"Token({self.type.name}, {self.value!r})"
        return f"Token({self.type.name})"

    def __str__(self) -> str:
        """Angle-bracket form printed by `gfc --tokens`."""
        if self.type == TokenType.TERM:
            return f"<{self.value}>"

        name = _DISPLAY_NAMES.get(self.type)
        if name is None:
            name = self.type.name.capitalize()

        if self.type in NUMERIC_TYPES:
            return f'<{name}={self.value} trail="{self.trail}">'
        if self.type in (TokenType.IDENTIFIER, TokenType.STRING):
            return f'<{name}="{self.value}">'
        return f"<{name}>"

    @property
    def is_keyword(self) -> bool:
        """Return True for control-flow and type keywords."""
        return self.value in KEYWORDS and KEYWORDS[self.value] is self.type

    @property
    def is_type_keyword(self) -> bool:
        """Return True if this token is a primitive type name."""
        return self.type in TYPE_KEYWORDS

    @property
    def is_numeric(self) -> bool:
        """Return True for integer and float literals."""
        return self.type in NUMERIC_TYPES

    @property
    def radix(self) -> Optional[int]:
        """Base of an integer literal, or None for every other token."""
        return INTEGER_RADIX.get(self.type)


EOF_TOKEN = Token(TokenType.EOF)
