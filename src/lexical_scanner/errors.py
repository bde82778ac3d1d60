"""
Lexical Scanner Error Hierarchy
===============================

This module defines the exception hierarchy for the lexical scanner.
All exceptions inherit from ScannerError, allowing callers to catch every
scanner-related error with a single except clause if desired.

Exception Hierarchy
-------------------
ScannerError (base)
├── LexicalError - malformed input, fatal to the current scan
│   ├── UnrecognizedSymbolError - character not expected at this point
│   ├── MalformedNumberError - digit/letter adjacency or dangling '.'
│   └── MalformedIdentifierError - identifier followed by a non-delimiter
└── InvariantViolation - automaton reached an undefined state

InvariantViolation is not a LexicalError: it signals a defect in the
transition table, never bad input, and ``except LexicalError`` does not
catch it.

Error Message Format
--------------------
Lexical errors carry source location information and follow this format:

    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing

Example:
    prog.txt:3:7: error: malformed number '12a'
        x = 12abc;
              ^
    hint: separate the number from the following name

Copyright (c) 2026 Lexical Scanner Contributors
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class ScannerError(Exception):
    """
    Base exception for all lexical scanner errors.

    Callers can catch every scanner-related error with a single clause:

        try:
            tokens = tokenize(source)
        except ScannerError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source text for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexical Errors
# =============================================================================

def describe_char(char: str) -> str:
    """Return a printable description of a single input character."""
    if char == "":
        return "end of input"
    if char.isprintable() and not char.isspace():
        return f"'{char}'"
    return f"0x{ord(char):02X}"


class LexicalError(ScannerError):
    """
    Base exception for malformed input.

    Every lexical error is raised on the first invalid lexeme and ends the
    scan; there is no resynchronization.

    Attributes:
        char: The offending character ("" when end of input was reached)
        lexeme: The partially accumulated lexeme at the point of failure
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
    """

    # Overridden by subclasses
    description = "invalid lexeme"
    default_hint: Optional[str] = None

    def __init__(
        self,
        char: str,
        lexeme: str = "",
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        self.lexeme = lexeme
        self.message = self._describe()
        self.location = location
        self.hint = hint if hint is not None else self.default_hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _describe(self) -> str:
        """Build the one-line description from the offending text."""
        if self.char == "":
            return f"{self.description} '{self.lexeme}' at end of input"
        if not self.char.isprintable() or self.char.isspace():
            if not self.lexeme:
                return f"{self.description} {describe_char(self.char)}"
            return (
                f"{self.description} '{self.lexeme}' "
                f"followed by {describe_char(self.char)}"
            )
        return f"{self.description} '{self.lexeme}{self.char}'"

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            prog.txt:1:2: error: unrecognized symbol '!x'
                !x
                 ^
            hint: '!' must be followed by '='
        """
        parts = []

        # Location prefix
        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)

    def at(
        self,
        location: SourceLocation,
        source_line: Optional[str] = None,
    ) -> "LexicalError":
        """
        Return a copy of this error positioned at a source location.

        The automaton builds errors without knowing where it is in the
        source; the scanner driver attaches the location before raising.
        """
        return type(self)(
            self.char,
            self.lexeme,
            location=location,
            hint=self.hint,
            source_line=source_line,
        )


class UnrecognizedSymbolError(LexicalError):
    """
    A character that does not belong to any category expected at the
    current decision point.

    Examples:
        - '@' or '.' at the start of a token
        - '!' not followed by '='
    """

    description = "unrecognized symbol"

    def __init__(
        self,
        char: str,
        lexeme: str = "",
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        if hint is None and lexeme == "!":
            hint = "'!' must be followed by '=' to form '!='"
        super().__init__(char, lexeme, location, hint, source_line)


class MalformedNumberError(LexicalError):
    """
    Digits immediately followed by a letter, or a decimal point that is
    not followed by at least one digit.

    Examples:
        12a     # letter adjacent to digits
        1.      # no fraction digits
    """

    description = "malformed number"

    def __init__(
        self,
        char: str,
        lexeme: str = "",
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        if hint is None:
            if lexeme.endswith("."):
                hint = "a decimal point must be followed by at least one digit"
            else:
                hint = "separate the number from the following name"
        super().__init__(char, lexeme, location, hint, source_line)


class MalformedIdentifierError(LexicalError):
    """
    An identifier followed by a character that can neither continue it
    nor delimit it, such as '.' or '@'.
    """

    description = "malformed identifier"
    default_hint = "identifiers may only contain letters, digits and '_'"


# =============================================================================
# Internal Errors
# =============================================================================

class InvariantViolation(ScannerError):
    """
    The automaton reached a state its transition table does not define.

    This indicates a defect in the scanner itself, not malformed input,
    and should be treated as an internal assertion failure.
    """

    def __init__(self, message: str, state: object = None):
        self.state = state
        super().__init__(message)
