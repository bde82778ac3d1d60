"""
Token Model
===========

Token categories produced by the scanner, the immutable Token value, and
the end-of-input signal returned by ``LexicalScanner.next_token()``.

Example
-------
>>> from lexical_scanner.scanner.tokens import Token, TokenKind
>>> Token(TokenKind.LESS_EQUAL, "<=", line=1, column=3)
Token(LESS_EQUAL, '<=', 1:3)

Copyright (c) 2026 Lexical Scanner Contributors
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union

from lexical_scanner.errors import SourceLocation


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Closed set of token categories.

    Adding a category requires adding automaton states that produce it.
    """

    # === Literals ===
    INTEGER_LITERAL = auto()    # 123
    REAL_LITERAL = auto()       # 12.5

    # === Names ===
    IDENTIFIER = auto()         # foo, _bar1
    RESERVED_WORD = auto()      # if, while, int, ...

    # === Assignment ===
    ASSIGN = auto()             # =

    # === Relational Operators ===
    EQUAL = auto()              # ==
    LESS_THAN = auto()          # <
    LESS_EQUAL = auto()         # <=
    GREATER_THAN = auto()       # >
    GREATER_EQUAL = auto()      # >=
    NOT_EQUAL = auto()          # !=

    # === Arithmetic Operators ===
    PLUS = auto()               # +
    MINUS = auto()              # -
    MULTIPLY = auto()           # *
    DIVIDE = auto()             # /

    # === Punctuation ===
    COMMA = auto()              # ,
    SEMICOLON = auto()          # ;
    LPAREN = auto()             # (
    RPAREN = auto()             # )
    LBRACE = auto()             # {
    RBRACE = auto()             # }

    @property
    def is_literal(self) -> bool:
        return self in (TokenKind.INTEGER_LITERAL, TokenKind.REAL_LITERAL)

    @property
    def is_relational(self) -> bool:
        return self in RELATIONAL_KINDS

    @property
    def is_arithmetic(self) -> bool:
        return self in (
            TokenKind.PLUS,
            TokenKind.MINUS,
            TokenKind.MULTIPLY,
            TokenKind.DIVIDE,
        )

    @property
    def is_punctuation(self) -> bool:
        return self in PUNCTUATION_KINDS.values()


RELATIONAL_KINDS = frozenset({
    TokenKind.EQUAL,
    TokenKind.LESS_THAN,
    TokenKind.LESS_EQUAL,
    TokenKind.GREATER_THAN,
    TokenKind.GREATER_EQUAL,
    TokenKind.NOT_EQUAL,
})

# Single-character tokens, keyed by their symbol
ARITHMETIC_KINDS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.MULTIPLY,
    "/": TokenKind.DIVIDE,
}

PUNCTUATION_KINDS: dict[str, TokenKind] = {
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Tokens compare by ``(kind, lexeme)`` only; the position fields are
    carried for diagnostics and do not take part in equality.

    Attributes:
        kind: The TokenKind classification
        lexeme: The exact source text of the token
        line: Line of the token's first character (1-indexed)
        column: Column of the token's first character (1-indexed)
        filename: Name of the source the token was read from
    """
    kind: TokenKind
    lexeme: str
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)
    filename: str = field(default="<input>", compare=False)

    def __repr__(self) -> str:
        """Format token for debugging output."""
        return f"Token({self.kind.name}, {self.lexeme!r}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    def as_dict(self) -> dict:
        """Return a JSON-serializable representation of the token."""
        return {
            "kind": self.kind.name,
            "lexeme": self.lexeme,
            "line": self.line,
            "column": self.column,
        }


# =============================================================================
# End of Input
# =============================================================================

class EndOfInput:
    """
    Signal returned by ``next_token()`` once the input is exhausted.

    This is not an error: every call after the last token returns the
    same ``END_OF_INPUT`` instance.
    """

    _instance = None

    def __new__(cls) -> "EndOfInput":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "END_OF_INPUT"

    def __bool__(self) -> bool:
        return False


END_OF_INPUT = EndOfInput()

ScanResult = Union[Token, EndOfInput]
