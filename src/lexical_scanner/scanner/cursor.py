"""
Source Cursor
=============

A read position over the fully materialized input text with bounded
lookahead and pushback.

The automaton reads one character at a time. When a character turns out
to belong to the next token, it is returned to the stream with
``pushback()``. At most ``MAX_PUSHBACK`` characters can be returned at once,
which bounds how far the cursor ever moves backwards.

Reading past the end yields the END sentinel ("") and still advances the
position, so that pushing the sentinel back is symmetric with any other
character. The position never rests beyond ``len(text)`` between tokens.

Copyright (c) 2026 Lexical Scanner Contributors
"""

import bisect

from lexical_scanner.errors import InvariantViolation
from lexical_scanner.scanner.classifier import END


# Maximum number of characters pushback() may return to the stream
MAX_PUSHBACK = 2


class SourceCursor:
    """
    Cursor over an immutable input buffer.

    Attributes:
        text: The decoded source text
    """

    __slots__ = ("text", "_pos", "_length", "_line_starts")

    def __init__(self, text: str):
        self.text = text
        self._pos = 0
        self._length = len(text)
        self._line_starts = _line_starts(text)

    @property
    def position(self) -> int:
        """Index of the next character to be read."""
        return min(self._pos, self._length)

    @property
    def last_position(self) -> int:
        """Index of the character most recently read (len(text) for END)."""
        return min(self._pos - 1, self._length)

    def at_end(self) -> bool:
        """Check if every character of the input has been consumed."""
        return self._pos >= self._length

    def peek(self, offset: int = 0) -> str:
        """
        Look at the character at current position + offset without
        advancing.

        Returns END ("") if past end of input.
        """
        pos = self._pos + offset
        if pos < 0 or pos >= self._length:
            return END
        return self.text[pos]

    def advance(self) -> str:
        """Consume and return the current character (END past the end)."""
        char = self.peek()
        self._pos += 1
        return char

    def pushback(self, count: int = 1) -> None:
        """
        Return the last ``count`` consumed characters to the stream.

        Raises:
            InvariantViolation: If count exceeds MAX_PUSHBACK or would move
                the cursor before the start of the input
        """
        if count < 0 or count > MAX_PUSHBACK:
            raise InvariantViolation(
                f"pushback of {count} characters exceeds the limit of {MAX_PUSHBACK}"
            )
        if count > self._pos:
            raise InvariantViolation(
                f"pushback of {count} characters before start of input"
            )
        self._pos -= count

    def mark(self) -> int:
        """Return an opaque mark of the current read position."""
        return self._pos

    def restore(self, mark: int) -> None:
        """Return to a position previously obtained from mark()."""
        self._pos = mark

    # =========================================================================
    # Location Helpers
    # =========================================================================

    def _line_index(self, pos: int) -> int:
        """Return the 0-indexed line containing a character index."""
        return bisect.bisect_right(self._line_starts, pos) - 1

    def line_column(self, pos: int) -> tuple[int, int]:
        """
        Return the 1-indexed (line, column) of a character index.

        Looked up in the line-start table rather than tracked incrementally,
        so it stays correct across pushback and costs O(log lines).
        """
        pos = min(pos, self._length)
        index = self._line_index(pos)
        return index + 1, pos - self._line_starts[index] + 1

    def line_text(self, pos: int) -> str:
        """Return the full source line containing a character index."""
        pos = min(pos, self._length)
        index = self._line_index(pos)
        line_start = self._line_starts[index]
        if index + 1 < len(self._line_starts):
            line_end = self._line_starts[index + 1] - 1
        else:
            line_end = self._length
        return self.text[line_start:line_end]


def _line_starts(text: str) -> list[int]:
    """Return the index at which each line of text begins."""
    starts = [0]
    newline = text.find("\n")
    while newline != -1:
        starts.append(newline + 1)
        newline = text.find("\n", newline + 1)
    return starts
