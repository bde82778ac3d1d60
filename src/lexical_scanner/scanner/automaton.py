"""
Scanning Automaton
==================

The deterministic transition function of the scanner. Given the current
state, the lexeme accumulated so far and one input character, ``step()``
returns a ``Step`` describing what to do next: move to another state,
append the character to the lexeme, return characters to the stream,
emit a token, or fail.

The function is pure. The scanner driver owns the cursor and the
accumulation buffer and applies each Step to them.

Branches
--------
From the initial state the first character selects one of six
independent sub-machines, each recognizing its family by maximal munch:

    INITIAL ─┬─ digit ─────────> number      123  12.5
             ├─ letter / _ ────> identifier  foo  _x1  if
             ├─ = ─────────────> equals      =  ==
             ├─ + - * / ───────> arithmetic  +  -  *  /
             ├─ , ; ( ) { } ───> punctuation
             └─ < > ! ─────────> relational  <  <=  >  >=  !=

Accept States
-------------
Most branches end in a single-step accept state. The character that
revealed the end of the token is pushed back when the accept state is
entered; the accept state reads it once more, emits the token, and
pushes it back again so that it starts the next token. After every
emission the automaton is back in INITIAL with an empty lexeme.

Number branch:

    INITIAL --digit--> INTEGER --.--> DECIMAL_POINT --digit--> FRACTION
                         |  ^digit                               |  ^digit
                         v                                       v
                  INTEGER_ACCEPT                           REAL_ACCEPT

A letter directly after digits, or a '.' not followed by a digit, is a
MalformedNumberError.

Copyright (c) 2026 Lexical Scanner Contributors
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import AbstractSet, Callable, Optional

from lexical_scanner.errors import (
    InvariantViolation,
    LexicalError,
    MalformedIdentifierError,
    MalformedNumberError,
    UnrecognizedSymbolError,
)
from lexical_scanner.scanner.classifier import (
    CharClass,
    classify,
    is_delimiter,
    is_digit,
    is_dot,
    is_equals,
    is_identifier_part,
    is_letter,
)
from lexical_scanner.scanner.keywords import RESERVED_WORDS, is_reserved_word
from lexical_scanner.scanner.tokens import (
    ARITHMETIC_KINDS,
    PUNCTUATION_KINDS,
    TokenKind,
)


# =============================================================================
# States
# =============================================================================

class ScanState(Enum):
    """The 22 states of the scanning automaton."""

    INITIAL = auto()

    # === Number branch ===
    INTEGER = auto()                # digits so far
    INTEGER_ACCEPT = auto()
    DECIMAL_POINT = auto()          # digits followed by '.'
    FRACTION = auto()               # at least one digit after '.'
    REAL_ACCEPT = auto()

    # === Identifier branch ===
    IDENTIFIER = auto()
    IDENTIFIER_ACCEPT = auto()      # identifier or reserved word

    # === Equals branch ===
    EQUALS = auto()                 # '=' read
    ASSIGN_ACCEPT = auto()
    EQUAL_ACCEPT = auto()

    # === Arithmetic branch ===
    ARITHMETIC = auto()             # operator read, one char of lookahead

    # === Punctuation branch ===
    PUNCTUATION = auto()

    # === Relational branch ===
    RELATIONAL = auto()             # dispatch on '<', '>' or '!'
    LESS = auto()
    LESS_EQUAL_ACCEPT = auto()
    LESS_ACCEPT = auto()
    GREATER = auto()
    GREATER_EQUAL_ACCEPT = auto()
    GREATER_ACCEPT = auto()
    NOT = auto()                    # '!' read, '=' required
    NOT_EQUAL_ACCEPT = auto()


# =============================================================================
# Transition Result
# =============================================================================

@dataclass(frozen=True)
class Step:
    """
    Outcome of feeding one character to the automaton.

    Attributes:
        next_state: State to continue from (INITIAL after a token or error)
        append: Append the character to the accumulated lexeme
        pushback: Number of characters to return to the stream
        token_kind: Kind of the token completed by this step, if any
        error: Lexical error detected by this step, if any
        end_of_input: The input is exhausted and no token is in progress
    """
    next_state: ScanState
    append: bool = False
    pushback: int = 0
    token_kind: Optional[TokenKind] = None
    error: Optional[LexicalError] = None
    end_of_input: bool = False


def _goto(state: ScanState, append: bool = True, pushback: int = 0) -> Step:
    return Step(state, append=append, pushback=pushback)


def _emit(kind: TokenKind, append: bool = False, pushback: int = 1) -> Step:
    return Step(ScanState.INITIAL, append=append, pushback=pushback, token_kind=kind)


def _fail(error: LexicalError) -> Step:
    return Step(ScanState.INITIAL, error=error)


# Handlers take (lexeme, char, reserved_words) and return a Step
Handler = Callable[[str, str, AbstractSet[str]], Step]


def _accept(kind: TokenKind) -> Handler:
    """Build the handler of a single-step accept state."""
    def handler(lexeme: str, char: str, reserved_words: AbstractSet[str]) -> Step:
        return _emit(kind)
    return handler


# =============================================================================
# Initial State
# =============================================================================

# Branch entry state for each starting character class
BRANCH_ENTRIES: dict[CharClass, ScanState] = {
    CharClass.DIGIT: ScanState.INTEGER,
    CharClass.LETTER: ScanState.IDENTIFIER,
    CharClass.UNDERSCORE: ScanState.IDENTIFIER,
    CharClass.EQUALS: ScanState.EQUALS,
    CharClass.ARITHMETIC: ScanState.ARITHMETIC,
    CharClass.PUNCTUATION: ScanState.PUNCTUATION,
    CharClass.RELATIONAL: ScanState.RELATIONAL,
}

# Branches whose dispatch state re-reads the first character
_REREAD_BRANCHES = frozenset({ScanState.PUNCTUATION, ScanState.RELATIONAL})


def _initial(lexeme: str, char: str, reserved_words: AbstractSet[str]) -> Step:
    category = classify(char)

    if category is CharClass.SKIP:
        return Step(ScanState.INITIAL)

    if category is CharClass.END:
        return Step(ScanState.INITIAL, pushback=1, end_of_input=True)

    entry = BRANCH_ENTRIES.get(category)
    if entry is None:
        return _fail(UnrecognizedSymbolError(char, lexeme))

    if entry in _REREAD_BRANCHES:
        return _goto(entry, append=False, pushback=1)
    return _goto(entry)


# =============================================================================
# Number Branch
# =============================================================================

def _integer(lexeme: str, char: str, reserved_words: AbstractSet[str]) -> Step:
    if is_digit(char):
        return _goto(ScanState.INTEGER)
    if is_dot(char):
        return _goto(ScanState.DECIMAL_POINT)
    if is_letter(char):
        return _fail(MalformedNumberError(char, lexeme))
    return _goto(ScanState.INTEGER_ACCEPT, append=False, pushback=1)


def _decimal_point(lexeme: str, char: str, reserved_words: AbstractSet[str]) -> Step:
    if is_digit(char):
        return _goto(ScanState.FRACTION)
    return _fail(MalformedNumberError(char, lexeme))


def _fraction(lexeme: str, char: str, reserved_words: AbstractSet[str]) -> Step:
    if is_digit(char):
        return _goto(ScanState.FRACTION)
    if is_letter(char):
        return _fail(MalformedNumberError(char, lexeme))
    return _goto(ScanState.REAL_ACCEPT, append=False, pushback=1)


# =============================================================================
# Identifier Branch
# =============================================================================

def _identifier(lexeme: str, char: str, reserved_words: AbstractSet[str]) -> Step:
    if is_identifier_part(char):
        return _goto(ScanState.IDENTIFIER)
    if is_delimiter(char):
        return _goto(ScanState.IDENTIFIER_ACCEPT, append=False, pushback=1)
    return _fail(MalformedIdentifierError(char, lexeme))


def _identifier_accept(lexeme: str, char: str, reserved_words: AbstractSet[str]) -> Step:
    if is_reserved_word(lexeme, reserved_words):
        return _emit(TokenKind.RESERVED_WORD)
    return _emit(TokenKind.IDENTIFIER)


# =============================================================================
# Equals Branch
# =============================================================================

def _equals(lexeme: str, char: str, reserved_words: AbstractSet[str]) -> Step:
    if is_equals(char):
        return _goto(ScanState.EQUAL_ACCEPT)
    return _goto(ScanState.ASSIGN_ACCEPT, append=False, pushback=1)


# =============================================================================
# Arithmetic Branch
# =============================================================================

def _arithmetic(lexeme: str, char: str, reserved_words: AbstractSet[str]) -> Step:
    # Always a single-character token; the lookahead char goes back
    kind = ARITHMETIC_KINDS.get(lexeme)
    if kind is None:
        return _fail(UnrecognizedSymbolError(char, lexeme))
    return _emit(kind)


# =============================================================================
# Punctuation Branch
# =============================================================================

def _punctuation(lexeme: str, char: str, reserved_words: AbstractSet[str]) -> Step:
    kind = PUNCTUATION_KINDS.get(char)
    if kind is None:
        return _fail(UnrecognizedSymbolError(char, lexeme))
    return _emit(kind, append=True, pushback=0)


# =============================================================================
# Relational Branch
# =============================================================================

_RELATIONAL_STARTS = {
    "<": ScanState.LESS,
    ">": ScanState.GREATER,
    "!": ScanState.NOT,
}


def _relational(lexeme: str, char: str, reserved_words: AbstractSet[str]) -> Step:
    state = _RELATIONAL_STARTS.get(char)
    if state is None:
        return _fail(UnrecognizedSymbolError(char, lexeme))
    return _goto(state)


def _less(lexeme: str, char: str, reserved_words: AbstractSet[str]) -> Step:
    if is_equals(char):
        return _goto(ScanState.LESS_EQUAL_ACCEPT)
    return _goto(ScanState.LESS_ACCEPT, append=False, pushback=1)


def _greater(lexeme: str, char: str, reserved_words: AbstractSet[str]) -> Step:
    if is_equals(char):
        return _goto(ScanState.GREATER_EQUAL_ACCEPT)
    return _goto(ScanState.GREATER_ACCEPT, append=False, pushback=1)


def _not(lexeme: str, char: str, reserved_words: AbstractSet[str]) -> Step:
    if is_equals(char):
        return _goto(ScanState.NOT_EQUAL_ACCEPT)
    return _fail(UnrecognizedSymbolError(char, lexeme))


# =============================================================================
# Transition Table
# =============================================================================

TRANSITIONS: dict[ScanState, Handler] = {
    ScanState.INITIAL: _initial,
    # Number
    ScanState.INTEGER: _integer,
    ScanState.INTEGER_ACCEPT: _accept(TokenKind.INTEGER_LITERAL),
    ScanState.DECIMAL_POINT: _decimal_point,
    ScanState.FRACTION: _fraction,
    ScanState.REAL_ACCEPT: _accept(TokenKind.REAL_LITERAL),
    # Identifier
    ScanState.IDENTIFIER: _identifier,
    ScanState.IDENTIFIER_ACCEPT: _identifier_accept,
    # Equals
    ScanState.EQUALS: _equals,
    ScanState.ASSIGN_ACCEPT: _accept(TokenKind.ASSIGN),
    ScanState.EQUAL_ACCEPT: _accept(TokenKind.EQUAL),
    # Arithmetic
    ScanState.ARITHMETIC: _arithmetic,
    # Punctuation
    ScanState.PUNCTUATION: _punctuation,
    # Relational
    ScanState.RELATIONAL: _relational,
    ScanState.LESS: _less,
    ScanState.LESS_EQUAL_ACCEPT: _accept(TokenKind.LESS_EQUAL),
    ScanState.LESS_ACCEPT: _accept(TokenKind.LESS_THAN),
    ScanState.GREATER: _greater,
    ScanState.GREATER_EQUAL_ACCEPT: _accept(TokenKind.GREATER_EQUAL),
    ScanState.GREATER_ACCEPT: _accept(TokenKind.GREATER_THAN),
    ScanState.NOT: _not,
    ScanState.NOT_EQUAL_ACCEPT: _accept(TokenKind.NOT_EQUAL),
}


def step(
    state: ScanState,
    lexeme: str,
    char: str,
    reserved_words: AbstractSet[str] = RESERVED_WORDS,
) -> Step:
    """
    Feed one character to the automaton.

    Args:
        state: Current automaton state
        lexeme: Characters accumulated for the token in progress
        char: The character just read ("" at end of input)
        reserved_words: Table consulted when an identifier completes

    Returns:
        The Step to apply to the scan session

    Raises:
        InvariantViolation: If the state has no transition defined
    """
    handler = TRANSITIONS.get(state)
    if handler is None:
        raise InvariantViolation(f"no transition defined for state {state!r}", state)
    return handler(lexeme, char, reserved_words)
