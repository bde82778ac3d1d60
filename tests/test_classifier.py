# =============================================================================
# test_classifier.py - Character Classifier Unit Tests
# =============================================================================
# Tests for the pure character-category predicates used by the automaton.
#
# Test coverage includes:
#   - classify() for every category
#   - Totality over the ASCII range
#   - Predicates that overlap on purpose ('=' is relational and EQUALS)
#   - Delimiters that end an identifier
# =============================================================================

import string

import pytest
from lexical_scanner.scanner.classifier import (
    CharClass,
    END,
    classify,
    is_arithmetic_symbol,
    is_delimiter,
    is_identifier_part,
    is_identifier_start,
    is_letter,
    is_punctuation,
    is_relational_symbol,
    is_skip,
)


# =============================================================================
# classify()
# =============================================================================

class TestClassify:
    """Test the total character-to-category mapping."""

    @pytest.mark.parametrize("char,expected", [
        ("0", CharClass.DIGIT),
        ("9", CharClass.DIGIT),
        ("a", CharClass.LETTER),
        ("Z", CharClass.LETTER),
        ("_", CharClass.UNDERSCORE),
        (".", CharClass.DOT),
        (" ", CharClass.SKIP),
        ("\t", CharClass.SKIP),
        ("\n", CharClass.SKIP),
        ("\r", CharClass.SKIP),
        ("=", CharClass.EQUALS),
        ("+", CharClass.ARITHMETIC),
        ("-", CharClass.ARITHMETIC),
        ("*", CharClass.ARITHMETIC),
        ("/", CharClass.ARITHMETIC),
        ("<", CharClass.RELATIONAL),
        (">", CharClass.RELATIONAL),
        ("!", CharClass.RELATIONAL),
        (",", CharClass.PUNCTUATION),
        (";", CharClass.PUNCTUATION),
        ("(", CharClass.PUNCTUATION),
        (")", CharClass.PUNCTUATION),
        ("{", CharClass.PUNCTUATION),
        ("}", CharClass.PUNCTUATION),
        ("", CharClass.END),
        ("@", CharClass.OTHER),
        ("[", CharClass.OTHER),
        ("\x00", CharClass.OTHER),
    ])
    def test_category(self, char, expected):
        """Each character maps to its documented category."""
        assert classify(char) is expected

    def test_non_ascii_letter_is_other(self):
        """Identifier rules are ASCII only."""
        assert classify("é") is CharClass.OTHER
        assert not is_letter("é")

    def test_non_ascii_digit_is_other(self):
        """Unicode digits are not digits for the scanner."""
        assert classify("٣") is CharClass.OTHER

    def test_total_over_ascii(self):
        """Every ASCII character has exactly one category."""
        for code in range(128):
            assert isinstance(classify(chr(code)), CharClass)

    def test_end_sentinel(self):
        """The END sentinel is the empty string."""
        assert END == ""
        assert classify(END) is CharClass.END


# =============================================================================
# Predicates
# =============================================================================

class TestPredicates:
    """Test the individual character predicates."""

    def test_equals_is_relational_symbol(self):
        """'=' continues every two-character relational operator."""
        assert is_relational_symbol("=")
        assert classify("=") is CharClass.EQUALS

    def test_arithmetic_symbols(self):
        for char in "+-*/":
            assert is_arithmetic_symbol(char)
        assert not is_arithmetic_symbol("%")

    def test_punctuation(self):
        for char in ",;(){}":
            assert is_punctuation(char)
        assert not is_punctuation("[")

    def test_skip_characters(self):
        for char in " \t\n\r\f\v":
            assert is_skip(char)
        assert not is_skip("")

    def test_identifier_start(self):
        """Identifiers start with a letter or underscore, never a digit."""
        assert is_identifier_start("a")
        assert is_identifier_start("_")
        assert not is_identifier_start("1")

    def test_identifier_part(self):
        for char in string.ascii_letters + string.digits + "_":
            assert is_identifier_part(char)
        assert not is_identifier_part(".")


class TestDelimiters:
    """Test which characters may end an identifier."""

    @pytest.mark.parametrize("char", [" ", "\n", "=", "+", "<", "!", ";", ")", ""])
    def test_delimiter(self, char):
        assert is_delimiter(char)

    @pytest.mark.parametrize("char", [".", "@", "#", "é"])
    def test_not_delimiter(self, char):
        """Dots and OTHER characters make an identifier malformed."""
        assert not is_delimiter(char)

    def test_identifier_part_and_delimiter_are_disjoint(self):
        """Identifier part and delimiter never overlap."""
        for code in range(128):
            char = chr(code)
            assert not (is_identifier_part(char) and is_delimiter(char))
