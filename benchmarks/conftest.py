"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest

_SNIPPET = """\
class Point {
  init(x, y) {
    this.x = x; // coordinates
    this.y = y;
  }

  dist(other) {
    var dx = this.x - other.x;
    var dy = this.y - other.y;
    return dx * dx + dy * dy >= 0.5 and !(dx == 0);
  }
}

fun greet(name) { print "hello, " + name; }
"""


@pytest.fixture
def large_source() -> str:
    """Generate a large Lox source (~100KB)."""
    return _SNIPPET * (100_000 // len(_SNIPPET) + 1)


@pytest.fixture
def long_string_source() -> str:
    """One string literal spanning many lines."""
    return '"' + "line of text\n" * 5_000 + '"'
