"""Diagnostic sinks for lexical errors.

The scanner never raises for malformed source. Each problem is pushed to
a sink through ``report(line, message)`` at the point of detection, and
scanning continues. What happens next (collecting, printing, failing the
run) is up to whoever owns the sink.

Usage:
    >>> from loxscan.diagnostics import DiagnosticCollector
    >>> from loxscan.lexer import Scanner
    >>> sink = DiagnosticCollector()
    >>> tokens = Scanner("@", sink=sink).scan_tokens()
    >>> sink.diagnostics
    (Diagnostic(line=1, message='Unexpected character.'),)

"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, TextIO, runtime_checkable


@runtime_checkable
class DiagnosticSink(Protocol):
    """Receiver for lexical errors.

    Called once per detected error, in source order, synchronously
    from inside the scan loop.

    """

    def report(self, line: int, message: str) -> None:
        """Record a lexical error at a 1-indexed line."""
        ...


class DiagnosticKind(Enum):
    """Lexical error categories. The value is the reported message."""

    UNEXPECTED_CHARACTER = "Unexpected character."
    UNTERMINATED_STRING = "Unterminated string."


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single reported lexical error.

    Attributes:
        line: Line number (1-indexed)
        message: Human-readable description

    """

    line: int
    message: str

    @property
    def kind(self) -> DiagnosticKind | None:
        """The matching DiagnosticKind, or None for messages from elsewhere."""
        try:
            return DiagnosticKind(self.message)
        except ValueError:
            return None

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


class DiagnosticCollector:
    """Sink that keeps every diagnostic in report order."""

    __slots__ = ("_diagnostics",)

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def report(self, line: int, message: str) -> None:
        self._diagnostics.append(Diagnostic(line, message))

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Snapshot of collected diagnostics."""
        return tuple(self._diagnostics)

    @property
    def had_error(self) -> bool:
        return bool(self._diagnostics)

    def clear(self) -> None:
        self._diagnostics.clear()

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._diagnostics)


class StreamReporter:
    """Sink that prints ``[line N] Error: message`` to a text stream.

    Tracks whether anything was reported so the host can pick an exit
    status. ``reset()`` clears the flag between independent inputs
    (for example, each line typed at the prompt).

    Args:
        stream: Destination stream; defaults to ``sys.stderr`` looked up
            at report time so test harnesses that swap it are honored.

    """

    __slots__ = ("_stream", "had_error")

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.had_error = False

    def report(self, line: int, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        print(Diagnostic(line, message), file=stream)
        self.had_error = True

    def reset(self) -> None:
        self.had_error = False


__all__ = [
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticKind",
    "DiagnosticSink",
    "StreamReporter",
]
