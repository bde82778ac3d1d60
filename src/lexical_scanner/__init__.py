"""
Lexical Scanner - Finite-State Tokenizer for a Small Imperative Language
=======================================================================

This package converts raw source text into a linear stream of classified
lexical tokens for consumption by a downstream parser.

The scanner is a single deterministic finite automaton fed one character
at a time. It resolves token boundaries by maximal munch with at most two
characters of pushback, and aborts on the first malformed lexeme.

Main Components
---------------
- **scanner**: the scanning core (classifier, reserved words, automaton,
  scan session)
- **errors**: exception hierarchy with source locations
- **config**: scanner settings, optionally from the environment
- **cli**: the ``lexscan`` command-line tool

Token Families
--------------
| Family      | Examples                    |
|-------------|-----------------------------|
| Literals    | 123  12.5                   |
| Names       | foo  _tmp1  while           |
| Assignment  | =                           |
| Relational  | ==  <  <=  >  >=  !=        |
| Arithmetic  | +  -  *  /                  |
| Punctuation | ,  ;  (  )  {  }            |

Quick Start
-----------
Pull tokens one at a time:
    >>> from lexical_scanner import LexicalScanner
    >>> scanner = LexicalScanner("x = 1;")
    >>> scanner.next_token()
    Token(IDENTIFIER, 'x', 1:1)

Scan a whole text:
    >>> from lexical_scanner import tokenize
    >>> [t.lexeme for t in tokenize("if (a >= 2.5) b = a;")]
    ['if', '(', 'a', '>=', '2.5', ')', 'b', '=', 'a', ';']

Or use the command-line tool:
    $ lexscan program.txt
    $ lexscan program.txt --format json

Copyright (c) 2026 Lexical Scanner Contributors
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from lexical_scanner.errors import (
    ScannerError,
    SourceLocation,
    LexicalError,
    UnrecognizedSymbolError,
    MalformedNumberError,
    MalformedIdentifierError,
    InvariantViolation,
)
from lexical_scanner.scanner import (
    LexicalScanner,
    tokenize,
    Token,
    TokenKind,
    EndOfInput,
    END_OF_INPUT,
    RESERVED_WORDS,
)
from lexical_scanner.config import ScannerConfig

__all__ = [
    # Version info
    "__version__",
    # Scanner
    "LexicalScanner",
    "tokenize",
    "Token",
    "TokenKind",
    "EndOfInput",
    "END_OF_INPUT",
    "RESERVED_WORDS",
    # Configuration
    "ScannerConfig",
    # Exception hierarchy
    "ScannerError",
    "SourceLocation",
    "LexicalError",
    "UnrecognizedSymbolError",
    "MalformedNumberError",
    "MalformedIdentifierError",
    "InvariantViolation",
]
