"""
Token definitions for the Lox scanner.

This module defines every token type the scanner can produce:
- Single-character punctuation
- One or two character operators
- Literals (identifiers, strings, numbers)
- Reserved keywords
- The end-of-input sentinel

The set is closed. Each member belongs to exactly one of the category sets
at the bottom of this module, and the test suite checks that partition.
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    SLASH = auto()                  # /
    STAR = auto()                   # *

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = auto()                   # !
    BANG_EQUAL = auto()             # !=
    EQUAL = auto()                  # =
    EQUAL_EQUAL = auto()            # ==
    GREATER = auto()                # >
    GREATER_EQUAL = auto()          # >=
    LESS = auto()                   # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # orchid, _tmp, x1
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.14

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # ========================================================================
    # Special
    # ========================================================================
    EOF = auto()                    # End of input


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for diagnostics. Lines and columns are 1-based; offset is the
    character index into the scanned string.
    """
    filename: str
    line: int
    column: int
    offset: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Lox language.

    ``literal`` is only set for STRING and NUMBER tokens: the text between
    the quotes for a string, the matched digits for a number. ``line`` is
    the line on which the token's first character appears.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    literal: Optional[str]          # Payload for STRING / NUMBER, else None
    line: int

    def __str__(self) -> str:
        literal = f"Some({self.literal})" if self.literal is not None else "None"
        return f"type: {self.type.name}, lexeme: {self.lexeme}, literal: {literal}, line: {self.line}"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, {self.line})"

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a literal payload."""
        return self.type in (TokenType.STRING, TokenType.NUMBER)

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved word."""
        return self.type in KEYWORD_TOKENS

    @property
    def is_eof(self) -> bool:
        return self.type is TokenType.EOF


# ============================================================================
# Lookup tables
# ============================================================================

SINGLE_CHARACTERS: Mapping[str, TokenType] = MappingProxyType({
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
})

# Operators whose meaning changes when followed by '='.
# Value is (kind alone, kind with trailing '=').
ONE_OR_TWO_CHARACTERS: Mapping[str, Tuple[TokenType, TokenType]] = MappingProxyType({
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
})

# Reserved words. Built once, read-only, shared by every Scanner.
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
})

# ============================================================================
# Categories (together these cover every TokenType exactly once)
# ============================================================================

# SLASH is dispatched separately because '/' may also open a comment.
SINGLE_CHARACTER_TOKENS = frozenset(SINGLE_CHARACTERS.values()) | {TokenType.SLASH}

OPERATOR_TOKENS = frozenset(
    kind for pair in ONE_OR_TWO_CHARACTERS.values() for kind in pair
)

LITERAL_TOKENS = frozenset({TokenType.IDENTIFIER, TokenType.STRING, TokenType.NUMBER})

KEYWORD_TOKENS = frozenset(KEYWORDS.values())

SPECIAL_TOKENS = frozenset({TokenType.EOF})
