"""
Lexical Scanner Core
====================

A deterministic, character-at-a-time finite-state scanner that converts
source text into a linear stream of classified tokens.

Components (leaf first)
-----------------------
- **classifier**: pure character-category predicates
- **keywords**: the reserved-word table
- **tokens**: TokenKind, Token and the END_OF_INPUT signal
- **cursor**: read position with bounded peek/pushback
- **automaton**: the 22-state transition function
- **driver**: LexicalScanner, the scan session exposing next_token()

Pipeline
--------
    source text → LexicalScanner → automaton.step() → classifier / keywords
                       ↑                    │
                       └── Token / error ───┘

Copyright (c) 2026 Lexical Scanner Contributors
"""

from lexical_scanner.scanner.automaton import ScanState, Step, step
from lexical_scanner.scanner.classifier import CharClass, classify
from lexical_scanner.scanner.cursor import MAX_PUSHBACK, SourceCursor
from lexical_scanner.scanner.driver import LexicalScanner, tokenize
from lexical_scanner.scanner.keywords import RESERVED_WORDS, is_reserved_word
from lexical_scanner.scanner.tokens import (
    END_OF_INPUT,
    EndOfInput,
    Token,
    TokenKind,
)

__all__ = [
    # Session
    "LexicalScanner",
    "tokenize",
    # Tokens
    "Token",
    "TokenKind",
    "EndOfInput",
    "END_OF_INPUT",
    # Automaton
    "ScanState",
    "Step",
    "step",
    # Classifier and keywords
    "CharClass",
    "classify",
    "RESERVED_WORDS",
    "is_reserved_word",
    # Cursor
    "SourceCursor",
    "MAX_PUSHBACK",
]
