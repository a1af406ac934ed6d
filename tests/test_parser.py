# =============================================================================
# test_parser.py - Declaration Parser Tests
# =============================================================================
# Tests for the `type ident = constant ;` parser and its use of the lexer's
# pull interface.
# =============================================================================

import pytest
from gfront.lexer import Lexer
from gfront.parser import Parser, VariableDeclaration
from gfront.tokens import Token, TokenType
from gfront.errors import (
    ParseError,
    UnexpectedTokenError,
    UnterminatedStringError,
)


def parse(source: str) -> list[VariableDeclaration]:
    """Helper to parse a source string."""
    return Parser(Lexer(source)).parse()


class TestDeclarations:
    """Tests for well-formed declarations."""

    def test_single_declaration(self):
        """The basic declaration form."""
        [decl] = parse("u8 x = 5;")
        assert decl.type_token.type == TokenType.U8
        assert decl.name == "x"
        assert decl.constant == Token(TokenType.DECIMAL, "5")

    def test_rendering(self):
        """Declarations render as `let <type> <name> equal <value>`."""
        [decl] = parse("i64 big = 0xFFu;")
        assert str(decl) == "let i64 big equal FF"
        assert decl.constant.trail == "u"

    @pytest.mark.parametrize("type_name", [
        "u8", "u16", "u32", "u64", "usize",
        "i8", "i16", "i32", "i64", "isize",
    ])
    def test_every_type_keyword(self, type_name):
        """All ten primitive types are accepted."""
        [decl] = parse(f"{type_name} v = 1;")
        assert str(decl) == f"let {type_name} v equal 1"

    @pytest.mark.parametrize("constant,token_type", [
        ("0b11", TokenType.BINARY),
        ("0o7", TokenType.OCTAL),
        ("42", TokenType.DECIMAL),
        ("0x2A", TokenType.HEXADECIMAL),
        ("4.2e1", TokenType.FLOAT),
    ])
    def test_every_constant_kind(self, constant, token_type):
        """Any numeric literal is a valid constant."""
        [decl] = parse(f"u32 n = {constant};")
        assert decl.constant.type == token_type

    def test_multiple_declarations_with_comments(self):
        """Declarations are parsed until end of input."""
        source = """
            // sizes
            u16 width = 640;   /* pixels */
            u16 height = 480;
        """
        assert [str(d) for d in parse(source)] == [
            "let u16 width equal 640",
            "let u16 height equal 480",
        ]

    def test_empty_source(self):
        """No declarations in an empty file."""
        assert parse("  // nothing here\n") == []


class TestParseErrors:
    """Tests for inputs that do not match the declaration form."""

    @pytest.mark.parametrize("source,expected", [
        ("x = 5;", "type"),
        ("u8 = 5;", "identifier"),
        ("u8 if = 5;", "identifier"),
        ("u8 x 5;", "'='"),
        ("u8 x == 5;", "'='"),
        ("u8 x = y;", "constant"),
        ('u8 x = "five";', "constant"),
        ("u8 x = 5", "';'"),
        ("u8 x = 5,", "';'"),
    ])
    def test_unexpected_token(self, source, expected):
        """The error names what was expected."""
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse(source)
        assert exc_info.value.expected == expected
        assert isinstance(exc_info.value, ParseError)

    def test_error_reports_found_token(self):
        """The offending token is included in the message."""
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse("u8 x = 5")
        assert exc_info.value.found == "<EndOfFile>"
        assert "expected ';'" in str(exc_info.value)

    def test_lexical_errors_propagate(self):
        """Lexer failures surface unchanged through the parser."""
        with pytest.raises(UnterminatedStringError):
            parse('u8 x = "oops')
