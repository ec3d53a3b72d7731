"""
loxscan

Scanner front end for the Lox scripting language.

Architecture:
    loxscan/
    ├── lexer/           # Tokens, diagnostics and the scanner
    └── cli.py           # REPL and file runner
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, scan_source, scan_file

__all__ = [
    "Scanner",
    "Token",
    "TokenType",
    "scan_source",
    "scan_file",

    # Version info
    "__version__",
    "__license__",
]
