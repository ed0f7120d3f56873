"""Benchmark full scans of realistic and string-heavy sources.

Run with:
    pytest benchmarks/benchmark_scanner.py -v --benchmark-only
"""

import pytest

from loxscan.lexer import Scanner
from loxscan.tokens import TokenType


@pytest.mark.benchmark(group="scan")
def test_benchmark_scan_large_source(benchmark, large_source):
    """Scan ~100KB of mixed declarations, operators, and comments."""
    tokens = benchmark(lambda: Scanner(large_source).scan_tokens())
    assert tokens[-1].type == TokenType.EOF


@pytest.mark.benchmark(group="scan")
def test_benchmark_scan_long_string(benchmark, long_string_source):
    """Scan a single multi-line string literal."""
    tokens = benchmark(lambda: Scanner(long_string_source).scan_tokens())
    assert tokens[0].type == TokenType.STRING
