"""
Reserved-Word Table
===================

The fixed set of keywords consulted once per completed identifier.
Matching is exact and case-sensitive: ``if`` is reserved, ``If`` and
``ifx`` are ordinary identifiers.

Copyright (c) 2026 Lexical Scanner Contributors
"""

from typing import AbstractSet


# Default keyword table; ScannerConfig can replace it
RESERVED_WORDS: frozenset[str] = frozenset({
    # Program entry
    "main",

    # Control flow
    "if",
    "else",
    "while",
    "do",
    "for",

    # Types
    "int",
    "float",
    "char",
})


def is_reserved_word(text: str, table: AbstractSet[str] = RESERVED_WORDS) -> bool:
    """Return True if the completed identifier text is a reserved word."""
    return text in table
