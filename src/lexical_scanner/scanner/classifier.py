"""
Character Classifier
====================

Pure predicates partitioning the character domain into the categories the
scanning automaton decides on. There is no state here.

Categories
----------
| Category    | Characters                          |
|-------------|-------------------------------------|
| DIGIT       | 0-9                                 |
| LETTER      | a-z A-Z (ASCII only)                |
| UNDERSCORE  | _                                   |
| DOT         | .                                   |
| SKIP        | space, tab, newline, CR, FF, VT     |
| EQUALS      | =                                   |
| ARITHMETIC  | + - * /                             |
| RELATIONAL  | < > !                               |
| PUNCTUATION | , ; ( ) { }                         |
| END         | "" (read past the end of the input) |
| OTHER       | everything else                     |

``classify()`` is total and the categories are mutually exclusive. Note
that '=' classifies as EQUALS, while ``is_relational_symbol()`` also
accepts it: '=' is both the assignment starter and the second character
of every two-character relational operator.

Copyright (c) 2026 Lexical Scanner Contributors
"""

from enum import Enum, auto
import string


class CharClass(Enum):
    """Category of a single input character."""

    DIGIT = auto()
    LETTER = auto()
    UNDERSCORE = auto()
    DOT = auto()
    SKIP = auto()
    EQUALS = auto()
    ARITHMETIC = auto()
    RELATIONAL = auto()     # < > ! ('=' is EQUALS)
    PUNCTUATION = auto()
    END = auto()            # Sentinel for end of input
    OTHER = auto()


# =============================================================================
# Character Sets
# =============================================================================

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)
SKIP_CHARS = frozenset(" \t\n\r\f\v")
ARITHMETIC_SYMBOLS = frozenset("+-*/")
RELATIONAL_SYMBOLS = frozenset("<>!=")
PUNCTUATION_SYMBOLS = frozenset(",;(){}")

# Sentinel returned by the cursor when reading past the end of the input
END = ""


# =============================================================================
# Predicates
# =============================================================================

def is_digit(char: str) -> bool:
    return char in DIGITS


def is_letter(char: str) -> bool:
    return char in LETTERS


def is_underscore(char: str) -> bool:
    return char == "_"


def is_dot(char: str) -> bool:
    return char == "."


def is_skip(char: str) -> bool:
    """Whitespace that separates tokens and is never part of a lexeme."""
    return char in SKIP_CHARS


def is_equals(char: str) -> bool:
    return char == "="


def is_arithmetic_symbol(char: str) -> bool:
    return char in ARITHMETIC_SYMBOLS


def is_relational_symbol(char: str) -> bool:
    return char in RELATIONAL_SYMBOLS


def is_punctuation(char: str) -> bool:
    return char in PUNCTUATION_SYMBOLS


def is_end(char: str) -> bool:
    return char == END


def is_identifier_start(char: str) -> bool:
    return is_letter(char) or is_underscore(char)


def is_identifier_part(char: str) -> bool:
    return is_letter(char) or is_digit(char) or is_underscore(char)


def is_delimiter(char: str) -> bool:
    """
    Return True if the character can end an identifier.

    Delimiters are skip characters, operator and punctuation symbols, and
    the end of input. Dots and OTHER characters are not delimiters, which
    makes a malformed identifier such as ``abc.d`` detectable.
    """
    return (
        is_skip(char)
        or is_equals(char)
        or is_arithmetic_symbol(char)
        or is_relational_symbol(char)
        or is_punctuation(char)
        or is_end(char)
    )


def classify(char: str) -> CharClass:
    """
    Map a single character (or the END sentinel) to its category.

    Args:
        char: One character, or "" for end of input

    Returns:
        The CharClass the character belongs to
    """
    if char == END:
        return CharClass.END
    if char in DIGITS:
        return CharClass.DIGIT
    if char in LETTERS:
        return CharClass.LETTER
    if char == "_":
        return CharClass.UNDERSCORE
    if char == ".":
        return CharClass.DOT
    if char in SKIP_CHARS:
        return CharClass.SKIP
    if char == "=":
        return CharClass.EQUALS
    if char in ARITHMETIC_SYMBOLS:
        return CharClass.ARITHMETIC
    if char in RELATIONAL_SYMBOLS:
        return CharClass.RELATIONAL
    if char in PUNCTUATION_SYMBOLS:
        return CharClass.PUNCTUATION
    return CharClass.OTHER
