"""
Scanner Driver
==============

The scan session: owns the input buffer, the cursor and the accumulation
buffer, and feeds characters to the automaton until it yields a token,
an error, or the end of input.

Example Usage
-------------
>>> from lexical_scanner.scanner import LexicalScanner
>>> scanner = LexicalScanner("while (x <= 10) { x = x + 1; }")
>>> for token in scanner.tokenize():
...     print(token)
Token(RESERVED_WORD, 'while', 1:1)
Token(LPAREN, '(', 1:7)
Token(IDENTIFIER, 'x', 1:8)
Token(LESS_EQUAL, '<=', 1:10)
Token(INTEGER_LITERAL, '10', 1:13)
Token(RPAREN, ')', 1:15)
...

Pull Interface
--------------
A parser calls ``next_token()`` repeatedly. Once the input is exhausted it
returns ``END_OF_INPUT`` on every call. A lexical error is raised on the
first invalid lexeme and ends the scan; create a new session to restart.

Thread Safety
-------------
A session serves exactly one sequential scan and must not be shared
across threads.

Copyright (c) 2026 Lexical Scanner Contributors
"""

from pathlib import Path
from typing import Iterator, NoReturn, Optional, Union
import logging

from lexical_scanner.config import ScannerConfig
from lexical_scanner.errors import LexicalError, SourceLocation
from lexical_scanner.scanner.automaton import ScanState, step
from lexical_scanner.scanner.cursor import SourceCursor
from lexical_scanner.scanner.tokens import END_OF_INPUT, ScanResult, Token, TokenKind

# Logger for this module
logger = logging.getLogger(__name__)


class LexicalScanner:
    """
    Scan session over one fully decoded source text.

    Usage:
        scanner = LexicalScanner(source_text, "prog.txt")
        token = scanner.next_token()

    Attributes:
        source: The source text being scanned
        filename: Name of the source (for error messages)
        config: Settings for this session
    """

    def __init__(
        self,
        source: str = "",
        filename: Optional[str] = None,
        config: Optional[ScannerConfig] = None,
    ):
        """
        Initialize a scan session.

        Args:
            source: The decoded source text
            filename: Name of the source (defaults to config.filename)
            config: Scanner settings (defaults to ScannerConfig())
        """
        self.config = config or ScannerConfig()
        self.source = source
        self.filename = filename or self.config.filename

        self._cursor = SourceCursor(source)
        self._state = ScanState.INITIAL
        self._lexeme = ""
        self._token_start = 0
        self._finished = False
        self._error: Optional[LexicalError] = None

        if not source:
            logger.warning(f"No input provided for {self.filename}")

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        config: Optional[ScannerConfig] = None,
    ) -> "LexicalScanner":
        """
        Read and decode a source file, then open a session over it.

        Args:
            path: Path to the source file
            config: Scanner settings; config.encoding decodes the file

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not valid in the encoding
        """
        config = config or ScannerConfig()
        path = Path(path)
        try:
            text = path.read_bytes().decode(config.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {path}: {e}")
            raise
        logger.debug(f"Read {len(text)} characters from {path}")
        return cls(text, str(path), config)

    # =========================================================================
    # Session State
    # =========================================================================

    @property
    def position(self) -> int:
        """Index of the next unread character."""
        return self._cursor.position

    @property
    def line(self) -> int:
        return self._cursor.line_column(self._cursor.position)[0]

    @property
    def column(self) -> int:
        return self._cursor.line_column(self._cursor.position)[1]

    @property
    def at_end(self) -> bool:
        """True once the end of input has been reported."""
        return self._finished

    # =========================================================================
    # Pull Interface
    # =========================================================================

    def next_token(self) -> ScanResult:
        """
        Scan and return the next token.

        Returns:
            The next Token, or END_OF_INPUT once the input is exhausted

        Raises:
            LexicalError: On the first invalid lexeme, and again on every
                later call since the session cannot resynchronize
            InvariantViolation: If the automaton reaches an undefined state
        """
        if self._error is not None:
            raise self._error
        if self._finished:
            return END_OF_INPUT

        reserved_words = self.config.reserved_words
        while True:
            char = self._cursor.advance()
            result = step(self._state, self._lexeme, char, reserved_words)

            if result.error is not None:
                self._fail(result.error)

            if result.append:
                if not self._lexeme:
                    self._token_start = self._cursor.last_position
                self._lexeme += char

            if result.pushback:
                self._cursor.pushback(result.pushback)

            if result.end_of_input:
                self._finished = True
                logger.debug(f"End of input in {self.filename}")
                return END_OF_INPUT

            if result.token_kind is not None:
                return self._emit(result.token_kind)

            self._state = result.next_state

    def tokenize(self) -> Iterator[Token]:
        """
        Generate all remaining tokens.

        Yields:
            Token objects up to (not including) the end of input

        Raises:
            LexicalError: On the first invalid lexeme
        """
        while True:
            token = self.next_token()
            if token is END_OF_INPUT:
                return
            yield token

    def peek_token(self) -> ScanResult:
        """
        Peek at the next token without consuming it.

        Saves the session state, scans the next token, then restores the
        original state. Lexical errors still propagate, but do not end
        the session until the erroneous token is actually pulled.
        """
        mark = self._cursor.mark()
        saved_finished = self._finished
        saved_error = self._error

        try:
            return self.next_token()
        finally:
            self._cursor.restore(mark)
            self._finished = saved_finished
            self._error = saved_error
            self._reset()

    # =========================================================================
    # Token and Error Emission
    # =========================================================================

    def _emit(self, kind: TokenKind) -> Token:
        """Build the completed token and reset to a clean baseline."""
        line, column = self._cursor.line_column(self._token_start)
        token = Token(
            kind=kind,
            lexeme=self._lexeme.strip(),
            line=line,
            column=column,
            filename=self.filename,
        )
        self._reset()
        logger.debug(f"Scanned {token!r}")
        return token

    def _fail(self, error: LexicalError) -> NoReturn:
        """Attach the source location to a lexical error and raise it."""
        pos = self._cursor.last_position
        line, column = self._cursor.line_column(pos)
        self._error = error.at(
            SourceLocation(self.filename, line, column),
            self._cursor.line_text(pos),
        )
        self._reset()
        logger.debug(f"Scan failed: {self._error.message}")
        raise self._error

    def _reset(self) -> None:
        self._state = ScanState.INITIAL
        self._lexeme = ""


def tokenize(
    source: str,
    filename: str = "<input>",
    config: Optional[ScannerConfig] = None,
) -> list[Token]:
    """
    Scan a complete source text into a list of tokens.

    Args:
        source: The decoded source text
        filename: Name used in error messages
        config: Scanner settings

    Raises:
        LexicalError: On the first invalid lexeme
    """
    return list(LexicalScanner(source, filename, config).tokenize())
