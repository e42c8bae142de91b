#!/usr/bin/env python3
import sys
from typing import List, Optional, TextIO

from clox.scanner import Scanner
from clox.token import Token


class Lox:
    """Lox session control and error reporting.

    A session runs sources through the Scanner, prints the resulting Tokens and
    reports errors to the user. Error state lives on the session rather than
    being process wide, so the caller decides when to reset it (for example
    between lines of the interactive prompt).

    Sessions are DiagnosticSinks, and are passed to the Scanner as its reporter.

    Args:
        out: Optional[TextIO]. Where scanned Tokens are printed, stdout by default.
        err: Optional[TextIO]. Where errors are printed, stderr by default.

    Public Attributes:
        had_error: bool. Whether or not an error was reported via report() since
            the session was created or last reset.
    """

    def __init__(
        self, out: Optional[TextIO] = None, err: Optional[TextIO] = None
    ) -> None:
        self.out = sys.stdout if out is None else out
        self.err = sys.stderr if err is None else err
        self.had_error = False

    def run(self, source: str) -> List[Token]:
        """Scan a source and print each Token on its own line.

        Args:
            source: str. Complete source text, a whole file or one prompt line.

        Returns:
            tokens: List[Token]. The scanned Tokens.
        """

        tokens = Scanner(source, self).scan_tokens()

        for token in tokens:
            print(token, file=self.out)

        return tokens

    def report(self, line: int, message: str) -> None:
        """Report an error to the user.

        This does not stop the current phase, it only sets had_error, so that
        subsequent errors in the same source are reported as well.

        Args:
            line: int. Line number where the error was encountered.
            message: str. Error message for the user, printed to err.
        """

        print(f"[line {line}] Error: {message}", file=self.err)
        self.had_error = True

    def reset(self) -> None:
        self.had_error = False
