"""
Lox Lexer Package

Implements the lexical analyzer (scanner) for the Lox scripting language.
Turns source text into a flat list of tokens for the parser.

Key Features:
- One-character lookahead for two-character operators
- Line and block comments
- String and number literals, keywords and identifiers
- Non-fatal diagnostics with line and column
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS
from .scanner import Scanner, ScanResult, scan_source, scan_file
from .errors import (
    Diagnostic, LexerError, UnexpectedCharacterError, UnterminatedStringError, ErrorReporter
)

__all__ = [
    "Scanner",
    "ScanResult",
    "scan_source",
    "scan_file",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "Diagnostic",
    "LexerError",
    "UnexpectedCharacterError",
    "UnterminatedStringError",
    "ErrorReporter",
]
