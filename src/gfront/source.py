"""
Character Sources
=================

The lexer reads characters strictly in order and never seeks, so any
iterable of characters will do: a `str`, a generator, or a file streamed
with `iter_file_chars`.

CharCursor adds the one thing the scanners need on top of plain
iteration: a single pushback slot. Several scanners only learn that a
token has ended by reading the character after it. That character is
pushed back so it becomes the first character of the next scan.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 4096


class CharCursor:
    """
    Pull-based character cursor with one character of pushback.

    Usage:
        cursor = CharCursor("ab")
        c = cursor.advance()      # 'a'
        cursor.push_back(c)
        cursor.advance()          # 'a' again
        cursor.advance()          # 'b'
        cursor.advance()          # None (end of input)
    """

    def __init__(self, source: Iterable[str]):
        self._chars = iter(source)
        self._pushed: Optional[str] = None

    def advance(self) -> Optional[str]:
        """Consume and return the next character, or None at end of input."""
        if self._pushed is not None:
            char, self._pushed = self._pushed, None
            return char
        return next(self._chars, None)

    def push_back(self, char: Optional[str]) -> None:
        """
        Return an already-read character to the cursor.

        Pushing back None (end of input) is a no-op, so callers can hand
        back whatever `advance()` returned without checking it first.

        Raises:
            RuntimeError: If the pushback slot is already occupied
        """
        if char is None:
            return
        if self._pushed is not None:
            raise RuntimeError(
                f"pushback slot already holds {self._pushed!r}; cannot push {char!r}"
            )
        self._pushed = char

    def peek(self) -> Optional[str]:
        """Look at the next character without consuming it."""
        char = self.advance()
        self.push_back(char)
        return char

    def match(self, expected: str) -> bool:
        """
        Consume the next character if it matches expected.

        Returns:
            True if matched and consumed, False otherwise
        """
        char = self.advance()
        if char == expected:
            return True
        self.push_back(char)
        return False


def iter_file_chars(
    path: Union[str, Path],
    encoding: str = "utf-8",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Iterator[str]:
    """
    Stream the characters of a text file.

    The file is decoded and read chunk by chunk, so only one chunk is held
    in memory at a time.

    Args:
        path: File to read
        encoding: Text encoding of the file
        chunk_size: Characters to read per chunk

    Yields:
        One character at a time
    """
    logger.debug("Streaming %s (encoding=%s, chunk_size=%d)", path, encoding, chunk_size)
    with open(path, "r", encoding=encoding, newline="") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                return
            yield from chunk
