"""
Command line driver for the Lox scanner.

    loxscan              interactive prompt, one line scanned at a time
    loxscan script.lox   scan a whole file once

Tokens go to stdout, diagnostics to stderr.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .lexer import ErrorReporter, Scanner

logger = logging.getLogger(__name__)

# sysexits.h
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66

PROMPT = "> "
LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"

_log_handler: Optional[logging.Handler] = None


class UsageError(Exception):
    """Bad command line arguments."""


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def configure_logging(verbose: bool, stream: TextIO) -> None:
    """Send the package's log records to ``stream``, replacing any earlier setup."""
    global _log_handler
    package_logger = logging.getLogger("loxscan")
    if _log_handler is not None:
        package_logger.removeHandler(_log_handler)
    _log_handler = logging.StreamHandler(stream)
    _log_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(_log_handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def run(source: str, reporter: ErrorReporter, out: TextIO,
        filename: str = "<stdin>", strict_block_comments: bool = False) -> None:
    """Scan one unit of source and print its tokens."""
    scanner = Scanner(
        source,
        filename=filename,
        reporter=reporter,
        strict_block_comments=strict_block_comments,
    )
    for token in scanner.scan():
        print(token, file=out)


def run_file(path: str, reporter: ErrorReporter, out: TextIO,
             strict_block_comments: bool = False) -> int:
    try:
        with open(path, "r", encoding="utf-8") as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Could not read {path}: {e}", file=reporter.stream)
        return EX_NOINPUT

    run(source, reporter, out, filename=path, strict_block_comments=strict_block_comments)
    if reporter.had_error:
        logger.info("%s: %d scan error(s)", path, len(reporter.errors))
        return EX_DATAERR
    return 0


def run_prompt(reporter: ErrorReporter, stdin: TextIO, out: TextIO,
               strict_block_comments: bool = False) -> int:
    while True:
        out.write(PROMPT)
        out.flush()
        try:
            line = stdin.readline()
        except KeyboardInterrupt:
            print(file=out)
            break
        if not line:
            break

        run(line.rstrip("\r\n"), reporter, out, strict_block_comments=strict_block_comments)
        # Error status is per line.
        reporter.reset()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="loxscan",
        description="Scan Lox source into tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    loxscan                       # Interactive prompt
    loxscan hello.lox             # Scan a file
    loxscan --strict-comments a.lox
        """
    )
    parser.add_argument('script', nargs='*',
                        help='Source file to scan (omit for the interactive prompt)')
    parser.add_argument('--strict-comments', action='store_true',
                        help='Require an exact */ to close block comments')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log scanner activity to stderr')
    return parser


def main(argv: Optional[List[str]] = None,
         stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None,
         stderr: Optional[TextIO] = None) -> int:
    """Entry point. Returns the process exit status."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    try:
        args = build_parser().parse_args(argv)
    except UsageError as e:
        print(f"loxscan: {e}", file=stderr)
        print("Usage: loxscan [script]", file=stderr)
        return EX_USAGE

    configure_logging(args.verbose, stderr)

    if len(args.script) > 1:
        print("Usage: loxscan [script]", file=stderr)
        return EX_USAGE

    reporter = ErrorReporter(stderr)
    if args.script:
        return run_file(args.script[0], reporter, stdout, args.strict_comments)
    return run_prompt(reporter, stdin, stdout, args.strict_comments)


if __name__ == "__main__":
    sys.exit(main())
