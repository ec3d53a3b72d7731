"""
Error handling for the Lox scanner.

Scanning errors never stop a scan. Each one is raised by the routine that
detects it, caught by the scan loop, recorded, and forwarded to an
ErrorReporter, which writes it to a stream separate from the token output.
"""

import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """A single scanner diagnostic."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class LexerError(Exception):
    """
    Base class for errors found while scanning.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.location = location
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnterminatedStringError(LexerError):
    """End of input was reached before a string's closing quote."""

    def __init__(self, location: SourceLocation):
        super().__init__(
            "Unterminated string.",
            location,
            code="L002",
            help_text='String literals must be closed with a matching " quote.',
        )


class UnexpectedCharacterError(LexerError):
    """A character that starts no token."""

    def __init__(self, char: str, location: SourceLocation):
        if char.isprintable():
            help_text = f"The character {char!r} is not valid in Lox source code."
        else:
            help_text = f"Non-printable character (U+{ord(char):04X}) is not allowed."
        super().__init__(
            "Unexpected character.",
            location,
            code="L001",
            help_text=help_text,
        )
        self.char = char


class ErrorReporter:
    """
    Diagnostics channel.

    Writes each reported error to ``stream`` (stderr unless told otherwise)
    and remembers whether anything was reported, so batch callers can pick
    an exit status.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self.errors: List[LexerError] = []

    @property
    def stream(self) -> TextIO:
        # Looked up per write; sys.stderr may be replaced after construction.
        return self._stream if self._stream is not None else sys.stderr

    @property
    def had_error(self) -> bool:
        return len(self.errors) > 0

    def report(self, error: LexerError) -> None:
        self.errors.append(error)
        self.stream.write(str(error))
        self.stream.flush()

    def reset(self) -> None:
        """Forget earlier errors (the REPL calls this between lines)."""
        self.errors.clear()
