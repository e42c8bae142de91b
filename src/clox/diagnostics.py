#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Protocol


class DiagnosticKind(Enum):
    """Lexical errors the Scanner can report, valued by their message."""

    UNEXPECTED_CHARACTER = "Unexpected character."
    UNTERMINATED_STRING = "Unterminated string."


@dataclass(frozen=True)
class Diagnostic:
    """A single reported error.

    Args:
        line: int. Line the error was reported on.
        message: str. Message for the user.
    """

    line: int
    message: str

    @property
    def kind(self) -> Optional[DiagnosticKind]:
        """The DiagnosticKind for this message, or None if it isn't a lexical one."""

        try:
            return DiagnosticKind(self.message)
        except ValueError:
            return None

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


class DiagnosticSink(Protocol):
    """Anything the Scanner can report errors to.

    Reporting is fire and forget: the Scanner never looks at what the sink does
    with a report, and keeps scanning regardless.
    """

    def report(self, line: int, message: str) -> None:
        ...


@dataclass
class DiagnosticCollector:
    """DiagnosticSink which records every report, in order.

    This is the default sink for a Scanner, and keeps error state scoped to
    whoever owns the collector instead of the whole process.

    Public Attributes:
        diagnostics: List[Diagnostic]. Every report received so far.
    """

    diagnostics: List[Diagnostic] = field(default_factory=list)

    def report(self, line: int, message: str) -> None:
        self.diagnostics.append(Diagnostic(line, message))

    @property
    def had_error(self) -> bool:
        return bool(self.diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)
