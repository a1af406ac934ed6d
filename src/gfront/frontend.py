"""
G Front End Driver
==================

This module ties the character source, lexer and parser together:

    Source → Lex → Parse → Declarations

Usage
-----
Command line:
    $ gfc program.G
    $ gfc --tokens program.G

Programmatic:
    >>> from gfront import tokenize, parse_source
    >>> [str(t) for t in tokenize("x->y")]
    ['<Ident="x">', '<Arrow>', '<Ident="y">', '<EndOfFile>']
    >>> [str(d) for d in parse_source("u8 x = 5;")]
    ['let u8 x equal 5']

Files are streamed through `iter_file_chars`, so the lexer reads them
one chunk at a time.

Error Handling
--------------
Lexical errors are fatal and propagate unchanged; nothing is collected
or retried. Malformed-literal warnings are returned in the result (and
logged), or raised as errors when `warnings_as_errors` is set.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Union

from gfront.errors import LexerWarning
from gfront.lexer import Lexer
from gfront.parser import Parser, VariableDeclaration
from gfront.source import DEFAULT_CHUNK_SIZE, iter_file_chars
from gfront.tokens import Token

logger = logging.getLogger(__name__)


@dataclass
class FrontendOptions:
    """
    Front-end configuration options.

    Attributes:
        warnings_as_errors: Raise MalformedNumberError instead of recording
                            malformed-literal warnings
        encoding: Text encoding used when reading source files
        chunk_size: Characters read per chunk when streaming files
    """
    warnings_as_errors: bool = False
    encoding: str = "utf-8"
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self):
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")


@dataclass
class FrontendResult:
    """
    Result of running the front end over one source.

    Attributes:
        filename: Source filename
        tokens: Every token lexed, EOF included (tokenize only)
        declarations: Parsed declarations (parse only)
        warnings: Malformed-literal warnings
    """
    filename: str = "<input>"
    tokens: list[Token] = field(default_factory=list)
    declarations: list[VariableDeclaration] = field(default_factory=list)
    warnings: list[LexerWarning] = field(default_factory=list)

    @property
    def token_count(self) -> int:
        return len(self.tokens)


class Frontend:
    """
    Runs the lexer, and optionally the parser, over G sources.

    Example:
        frontend = Frontend(FrontendOptions(warnings_as_errors=True))
        result = frontend.parse_file("program.G")
        for decl in result.declarations:
            print(decl)

    Attributes:
        options: Front-end configuration options
    """

    def __init__(self, options: Optional[FrontendOptions] = None):
        self.options = options or FrontendOptions()

    def _make_lexer(self, source: Iterable[str]) -> Lexer:
        return Lexer(source, warnings_as_errors=self.options.warnings_as_errors)

    def _file_chars(self, filepath: Union[str, Path]) -> Iterable[str]:
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")
        return iter_file_chars(path, self.options.encoding, self.options.chunk_size)

    def tokenize_source(self, source: Iterable[str], filename: str = "<input>") -> FrontendResult:
        """
        Tokenize a source.

        Args:
            source: Source text, or any iterable of characters
            filename: Source name recorded in the result

        Returns:
            FrontendResult with tokens and warnings

        Raises:
            LexicalError: If the source cannot be tokenized
        """
        lexer = self._make_lexer(source)
        result = FrontendResult(filename=filename)
        result.tokens = list(lexer.tokenize())
        result.warnings = list(lexer.warnings)
        logger.debug("Tokenized %s: %d tokens, %d warnings",
                     filename, result.token_count, len(result.warnings))
        return result

    def tokenize_file(self, filepath: Union[str, Path]) -> FrontendResult:
        """
        Tokenize a source file.

        Raises:
            FileNotFoundError: If the file does not exist
            LexicalError: If the source cannot be tokenized
        """
        return self.tokenize_source(self._file_chars(filepath), str(filepath))

    def parse_source(self, source: Iterable[str], filename: str = "<input>") -> FrontendResult:
        """
        Parse a source into declarations.

        Args:
            source: Source text, or any iterable of characters
            filename: Source name recorded in the result

        Returns:
            FrontendResult with declarations and warnings

        Raises:
            GFrontError: If lexing or parsing fails
        """
        lexer = self._make_lexer(source)
        result = FrontendResult(filename=filename)
        result.declarations = Parser(lexer).parse()
        result.warnings = list(lexer.warnings)
        logger.debug("Parsed %s: %d declarations", filename, len(result.declarations))
        return result

    def parse_file(self, filepath: Union[str, Path]) -> FrontendResult:
        """
        Parse a source file into declarations.

        Raises:
            FileNotFoundError: If the file does not exist
            GFrontError: If lexing or parsing fails
        """
        return self.parse_source(self._file_chars(filepath), str(filepath))


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(source: Iterable[str]) -> list[Token]:
    """
    Tokenize G source with default options.

    Returns:
        Every token, ending with the EOF token
    """
    return Frontend().tokenize_source(source).tokens


def parse_source(source: Iterable[str]) -> list[VariableDeclaration]:
    """Parse G source into declarations with default options."""
    return Frontend().parse_source(source).declarations
