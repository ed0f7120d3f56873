"""Exception classes for loxscan.

The scanner itself never raises for malformed source; lexical problems
are reported through a diagnostic sink. These exceptions cover host-side
policy (turning diagnostics into a failure) and malformed serialized data.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loxscan.diagnostics import Diagnostic


class LoxscanError(Exception):
    """Base exception for all loxscan errors.

    Subclass this for specific error categories.
    """

    pass


class ScanError(LoxscanError):
    """Source text produced one or more lexical diagnostics.

    Raised by hosts that treat any diagnostic as fatal, never by the
    scanner itself.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        source_file: str | None = None,
        diagnostics: tuple[Diagnostic, ...] = (),
    ) -> None:
        """Initialize scan error with optional location.

        Args:
            message: Error description
            lineno: Line number where the error occurred (1-indexed)
            source_file: Path to source file (optional)
            diagnostics: Every diagnostic reported during the scan
        """
        self.message = message
        self.lineno = lineno
        self.source_file = source_file
        self.diagnostics = diagnostics

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class SerializationError(LoxscanError, ValueError):
    """Serialized token data is malformed or inconsistent."""

    pass
