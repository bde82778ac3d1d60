# =============================================================================
# test_errors.py - Error Hierarchy Tests
# =============================================================================
# Tests for the scanner exception hierarchy and diagnostic formatting.
# =============================================================================

import pytest
from lexical_scanner.errors import (
    InvariantViolation,
    LexicalError,
    MalformedIdentifierError,
    MalformedNumberError,
    ScannerError,
    SourceLocation,
    UnrecognizedSymbolError,
    describe_char,
)


# =============================================================================
# Hierarchy
# =============================================================================

class TestHierarchy:
    """Test exception inheritance."""

    @pytest.mark.parametrize("error_class", [
        UnrecognizedSymbolError,
        MalformedNumberError,
        MalformedIdentifierError,
    ])
    def test_lexical_errors(self, error_class):
        assert issubclass(error_class, LexicalError)
        assert issubclass(error_class, ScannerError)

    def test_invariant_violation_is_not_lexical(self):
        """Catching user errors must not hide scanner defects."""
        assert issubclass(InvariantViolation, ScannerError)
        assert not issubclass(InvariantViolation, LexicalError)


# =============================================================================
# Message Formatting
# =============================================================================

class TestFormatting:
    """Test diagnostic messages."""

    def test_without_location(self):
        error = UnrecognizedSymbolError("@")
        assert str(error) == "error: unrecognized symbol '@'"

    def test_with_location_and_source_line(self):
        error = MalformedNumberError(
            "a",
            "12",
            location=SourceLocation("prog.txt", 1, 7),
            source_line="x = 12a;",
        )
        assert str(error) == (
            "prog.txt:1:7: error: malformed number '12a'\n"
            "    x = 12a;\n"
            "          ^\n"
            "hint: separate the number from the following name"
        )

    def test_end_of_input(self):
        error = UnrecognizedSymbolError("", "!")
        assert error.message == "unrecognized symbol '!' at end of input"
        assert error.hint == "'!' must be followed by '=' to form '!='"

    def test_dangling_decimal_point_hint(self):
        error = MalformedNumberError("", "1.")
        assert "at least one digit" in error.hint

    def test_whitespace_char_is_described(self):
        error = MalformedNumberError("\n", "1.")
        assert error.message == "malformed number '1.' followed by 0x0A"

    def test_control_char_without_lexeme(self):
        error = UnrecognizedSymbolError("\x00")
        assert error.message == "unrecognized symbol 0x00"

    def test_identifier_hint(self):
        error = MalformedIdentifierError(".", "obj")
        assert error.message == "malformed identifier 'obj.'"
        assert "letters, digits and '_'" in error.hint

    def test_at_attaches_location(self):
        error = MalformedIdentifierError(".", "obj")
        located = error.at(SourceLocation("f", 2, 4), "obj.x")
        assert type(located) is MalformedIdentifierError
        assert located.char == "."
        assert located.lexeme == "obj"
        assert str(located).startswith("f:2:4: error: malformed identifier")
        assert error.location is None


class TestDescribeChar:
    """Test printable descriptions of characters."""

    def test_printable(self):
        assert describe_char("@") == "'@'"

    def test_end(self):
        assert describe_char("") == "end of input"

    def test_space(self):
        assert describe_char(" ") == "0x20"
