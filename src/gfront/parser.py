"""
G Declaration Parser
====================

A minimal parser that recognizes a single declaration form:

    declaration ::= type_spec IDENTIFIER '=' constant ';'
    type_spec   ::= 'u8' | 'u16' | 'u32' | 'u64' | 'usize'
                  | 'i8' | 'i16' | 'i32' | 'i64' | 'isize'
    constant    ::= BINARY | OCTAL | DECIMAL | HEXADECIMAL | FLOAT

A source file is a sequence of such declarations. The parser pulls
tokens from the lexer one at a time, so it never holds more than the
current token.

Example Usage
-------------
>>> from gfront.lexer import Lexer
>>> from gfront.parser import Parser
>>> for decl in Parser(Lexer("u8 x = 5; i64 big = 0xFFu;")).parse():
...     print(decl)
let u8 x equal 5
let i64 big equal FF
"""

from dataclasses import dataclass

from gfront.errors import UnexpectedTokenError
from gfront.lexer import Lexer
from gfront.tokens import Token, TokenType


@dataclass(frozen=True)
class VariableDeclaration:
    """
    A parsed `type ident = constant ;` declaration.

    Attributes:
        type_token: The type keyword token (u8, i32, ...)
        name: The declared identifier
        constant: The numeric literal token, trail included
    """
    type_token: Token
    name: str
    constant: Token

    def __str__(self) -> str:
        return f"let {self.type_token.value} {self.name} equal {self.constant.value}"


class Parser:
    """
    Parses a sequence of variable declarations.

    Usage:
        parser = Parser(Lexer(source_text))
        declarations = parser.parse()

    Attributes:
        lexer: The token source
    """

    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self._current = lexer.next_token()

    def parse(self) -> list[VariableDeclaration]:
        """
        Parse declarations until end of input.

        Returns:
            The declarations, in source order

        Raises:
            UnexpectedTokenError: If a token does not fit the declaration form
            LexicalError: If the lexer fails
        """
        declarations = []
        while not self._check(TokenType.EOF):
            declarations.append(self._parse_variable_declaration())
        return declarations

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def _check(self, token_type: TokenType) -> bool:
        """Check if the current token has the given type."""
        return self._current.type == token_type

    def _advance(self) -> Token:
        """Consume and return the current token."""
        token = self._current
        self._current = self.lexer.next_token()
        return token

    def _expect_term(self, char: str) -> Token:
        """Expect and consume a single-character terminal."""
        if self._check(TokenType.TERM) and self._current.value == char:
            return self._advance()
        raise UnexpectedTokenError(f"'{char}'", str(self._current))

    # =========================================================================
    # Declarations
    # =========================================================================

    def _parse_variable_declaration(self) -> VariableDeclaration:
        """Parse `type ident = constant ;`."""
        if not self._current.is_type_keyword:
            raise UnexpectedTokenError("type", str(self._current))
        type_token = self._advance()

        if not self._check(TokenType.IDENTIFIER):
            raise UnexpectedTokenError("identifier", str(self._current))
        name = self._advance().value

        self._expect_term("=")

        if not self._current.is_numeric:
            raise UnexpectedTokenError("constant", str(self._current))
        constant = self._advance()

        self._expect_term(";")

        return VariableDeclaration(type_token, name, constant)
