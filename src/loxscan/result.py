"""Combined scanner output for callers that want tokens and errors together."""

from __future__ import annotations

from dataclasses import dataclass

from loxscan.diagnostics import Diagnostic
from loxscan.errors import ScanError
from loxscan.tokens import Token


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Tokens and diagnostics from one scan.

    Attributes:
        tokens: Tokens in source order, ending with EOF
        diagnostics: Lexical errors in the order they were reported

    """

    tokens: tuple[Token, ...]
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def ok(self) -> bool:
        """True when no diagnostics were reported."""
        return not self.diagnostics

    def raise_for_diagnostics(self, source_file: str | None = None) -> None:
        """Raise ScanError if any diagnostic was reported.

        The error carries the first diagnostic's message and line, plus
        the full tuple of diagnostics.

        Raises:
            ScanError: If the scan reported at least one diagnostic.
        """
        if not self.diagnostics:
            return
        first = self.diagnostics[0]
        message = first.message
        if len(self.diagnostics) > 1:
            message = f"{message} (and {len(self.diagnostics) - 1} more)"
        raise ScanError(
            message,
            lineno=first.line,
            source_file=source_file,
            diagnostics=self.diagnostics,
        )
