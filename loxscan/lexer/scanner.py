"""
Lox scanner - turns source text into a flat list of tokens.

One Scanner per source string. It walks the text once, left to right,
keeping a start offset (first character of the token being built), a
current offset (next unread character) and the current line. Bad input is
reported and skipped; the scan always runs to the end and always finishes
with exactly one EOF token.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, SINGLE_CHARACTERS, ONE_OR_TWO_CHARACTERS
)
from .errors import (
    LexerError, UnexpectedCharacterError, UnterminatedStringError, ErrorReporter
)

logger = logging.getLogger(__name__)

WHITESPACE = (" ", "\r", "\t")


def is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_alpha(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char == "_"


def is_alphanumeric(char: str) -> bool:
    return is_alpha(char) or is_digit(char)


class Scanner:
    """
    Lox lexical analyzer.

    Single use: construct it with one source string, call ``scan()`` once,
    read ``tokens`` and ``errors`` afterwards.
    """

    def __init__(
        self,
        source: str,
        filename: str = "<stdin>",
        keywords: Mapping[str, TokenType] = KEYWORDS,
        reporter: Optional[ErrorReporter] = None,
        strict_block_comments: bool = False,
    ):
        """
        Initialize the scanner with source code.

        Args:
            source: Source code string
            filename: Name used in diagnostics
            keywords: Reserved word table, shared read-only between scanners
            reporter: Where diagnostics are written as they are found
            strict_block_comments: Require an exact ``*/`` to close a block
                comment instead of stopping at the first ``*``
        """
        self.source = source
        self.filename = filename
        self.keywords = keywords
        self.reporter = reporter
        self.strict_block_comments = strict_block_comments

        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

        # Cursor
        self.start = 0
        self.current = 0
        self.line = 1
        self._line_start = 0

        # Where the token being built began
        self._token_line = 1
        self._token_column = 1

        self._scanned = False

    def scan(self) -> List[Token]:
        """
        Scan the whole source.

        Returns:
            List of tokens, always ending with a single EOF token
        """
        if self._scanned:
            raise RuntimeError("Scanner.scan() can only be called once per scanner")
        self._scanned = True

        logger.debug("Scanning %s (%d characters)", self.filename, len(self.source))

        while not self._is_at_end():
            self.start = self.current
            self._token_line = self.line
            self._token_column = self.start - self._line_start + 1
            try:
                self._scan_token()
            except LexerError as e:
                self._record(e)

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))

        logger.debug(
            "Scanned %s: %d tokens, %d errors", self.filename, len(self.tokens), len(self.errors)
        )
        return self.tokens

    def has_errors(self) -> bool:
        """Check if the scan encountered any errors."""
        return len(self.errors) > 0

    def _scan_token(self):
        char = self._advance()

        if char in SINGLE_CHARACTERS:
            self._add_token(SINGLE_CHARACTERS[char])
        elif char in ONE_OR_TWO_CHARACTERS:
            alone, with_equal = ONE_OR_TWO_CHARACTERS[char]
            self._add_token(with_equal if self._match("=") else alone)
        elif char == "/":
            if self._match("/"):
                self._skip_line_comment()
            elif self._match("*"):
                self._skip_block_comment()
            else:
                self._add_token(TokenType.SLASH)
        elif char in WHITESPACE or char == "\n":
            # _advance() already counted the newline
            pass
        elif char == '"':
            self._string()
        elif is_digit(char):
            self._number()
        elif is_alpha(char):
            self._identifier()
        else:
            raise UnexpectedCharacterError(char, self._token_location())

    def _skip_line_comment(self):
        while self._peek() != "\n" and not self._is_at_end():
            self._advance()

    def _skip_block_comment(self):
        """Skip the body of a ``/* ... */`` comment (opening already consumed)."""
        if self.strict_block_comments:
            while not self._is_at_end():
                if self._peek() == "*" and self._peek_next() == "/":
                    self._advance()
                    self._advance()
                    return
                self._advance()
            return

        # Lenient: the first '*' closes the comment and the character after
        # it is taken to be the '/', whatever it actually is.
        while self._peek() != "*" and not self._is_at_end():
            self._advance()
        for _ in range(2):
            if not self._is_at_end():
                self._advance()

    def _string(self):
        while self._peek() != '"' and not self._is_at_end():
            self._advance()

        if self._is_at_end():
            raise UnterminatedStringError(self._token_location())

        self._advance()  # closing quote

        # No escape sequences: the payload is the raw text between the quotes.
        self._add_token(TokenType.STRING, self.source[self.start + 1:self.current - 1])

    def _number(self):
        while is_digit(self._peek()):
            self._advance()

        # A '.' only belongs to the number when a digit follows it.
        if self._peek() == "." and is_digit(self._peek_next()):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, self.source[self.start:self.current])

    def _identifier(self):
        while is_alphanumeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(self.keywords.get(text, TokenType.IDENTIFIER))

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def _advance(self) -> str:
        """Consume one character, keeping the line count current."""
        char = self.source[self.current]
        self.current += 1
        if char == "\n":
            self.line += 1
            self._line_start = self.current
        return char

    def _match(self, expected: str) -> bool:
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self._advance()
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def _add_token(self, token_type: TokenType, literal: Optional[str] = None):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self._token_line))

    def _token_location(self) -> SourceLocation:
        return SourceLocation(self.filename, self._token_line, self._token_column, self.start)

    def _record(self, error: LexerError):
        self.errors.append(error)
        logger.debug("Scan error at %s: %s", error.location, error.message)
        if self.reporter is not None:
            self.reporter.report(error)


@dataclass
class ScanResult:
    """Tokens and errors from one scan."""
    tokens: List[Token]
    errors: List[LexerError] = field(default_factory=list)

    def has_errors(self) -> bool:
        return len(self.errors) > 0


def scan_source(
    source: str,
    filename: str = "<string>",
    reporter: Optional[ErrorReporter] = None,
    strict_block_comments: bool = False,
    keywords: Mapping[str, TokenType] = KEYWORDS,
) -> ScanResult:
    """
    Convenience function to scan a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting
        reporter: Optional diagnostics channel
        strict_block_comments: See ``Scanner``
        keywords: Reserved word table

    Returns:
        ScanResult with every token recognized and every error found
    """
    scanner = Scanner(
        source,
        filename=filename,
        keywords=keywords,
        reporter=reporter,
        strict_block_comments=strict_block_comments,
    )
    tokens = scanner.scan()
    return ScanResult(tokens, list(scanner.errors))


def scan_file(filepath: str, **options) -> ScanResult:
    """
    Convenience function to scan a source file.

    Args:
        filepath: Path to source file
        **options: Passed through to ``scan_source``

    Raises:
        OSError: If the file cannot be read
    """
    with open(filepath, "r", encoding="utf-8") as f:
        source = f.read()

    options.setdefault("filename", str(filepath))
    return scan_source(source, **options)
