"""Line comment scanner mixin."""

from __future__ import annotations


class CommentScannerMixin:
    """Mixin providing line comment skipping.

    A comment runs from ``//`` to the end of the line. The newline itself
    is left for the main loop so line counting stays in one place.

    """

    # These will be set by the Scanner class
    _source: str
    _current: int

    def _skip_line_comment(self) -> None:
        """Consume up to, but not including, the next newline or end of input.

        Called after both slashes have been consumed.
        """
        newline = self._source.find("\n", self._current)
        self._current = newline if newline != -1 else len(self._source)
