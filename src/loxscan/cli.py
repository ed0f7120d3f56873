"""Command-line driver: scan a script file or lines typed at a prompt.

Usage:
    loxscan [script] [--format text|json] [--prompt TEXT] [-v]

With a script path, scans the whole file and prints its tokens. Without
one, reads lines from stdin, scanning and printing each line on its own.

Exit status:
    0   success (or prompt reached end of input)
    64  usage error (more than one script given)
    65  the script had lexical errors
    66  the script could not be read
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path
from typing import TextIO

from loxscan.config import TOKEN_FORMATS, get_scan_config, scan_config_context
from loxscan.diagnostics import StreamReporter
from loxscan.lexer import Scanner
from loxscan.serialization import tokens_to_json
from loxscan.tokens import Token
from loxscan.utils.logger import get_logger

logger = get_logger(__name__)

EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66


def run(source: str, *, reporter: StreamReporter, out: TextIO | None = None) -> list[Token]:
    """Scan source and write its tokens in the configured format.

    Args:
        source: Source text to scan
        reporter: Sink that prints diagnostics and tracks errors
        out: Destination for tokens (defaults to stdout)

    Returns:
        The scanned tokens.
    """
    out = out if out is not None else sys.stdout
    tokens = Scanner(source, sink=reporter).scan_tokens()

    if get_scan_config().token_format == "json":
        print(tokens_to_json(tokens), file=out)
    else:
        for token in tokens:
            print(token, file=out)
    return tokens


def run_file(path: str | Path, *, reporter: StreamReporter, out: TextIO | None = None) -> int:
    """Scan a script file.

    Returns:
        EX_DATAERR if any lexical error was reported, else EX_OK.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid in the configured encoding.
    """
    encoding = get_scan_config().encoding
    logger.info("Scanning %s (%s)", path, encoding)
    source = Path(path).read_text(encoding=encoding)
    run(source, reporter=reporter, out=out)
    if reporter.had_error:
        return EX_DATAERR
    return EX_OK


def run_prompt(
    *,
    reporter: StreamReporter,
    stdin: TextIO | None = None,
    out: TextIO | None = None,
) -> int:
    """Read, scan, and print lines until end of input.

    Errors on one line do not affect the next: the reporter's error flag
    is cleared after every line.
    """
    stdin = stdin if stdin is not None else sys.stdin
    out = out if out is not None else sys.stdout
    prompt = get_scan_config().prompt

    while True:
        out.write(prompt)
        out.flush()
        line = stdin.readline()
        if not line:
            break
        run(line.rstrip("\n"), reporter=reporter, out=out)
        reporter.reset()
    return EX_OK


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loxscan",
        description="Scan Lox source into tokens",
    )
    parser.add_argument("script", nargs="*", help="Script file to scan (omit for a prompt)")
    parser.add_argument(
        "--format",
        dest="token_format",
        choices=sorted(TOKEN_FORMATS),
        default=None,
        help="Token output format",
    )
    parser.add_argument("--prompt", default=None, help="Prompt text in interactive mode")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if len(args.script) > 1:
        print("Usage: loxscan [script]", file=sys.stderr)
        return EX_USAGE

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    overrides = {"token_format": args.token_format, "prompt": args.prompt}
    config = replace(
        get_scan_config(),
        **{k: v for k, v in overrides.items() if v is not None},
    )

    reporter = StreamReporter()
    with scan_config_context(config):
        if args.script:
            try:
                return run_file(args.script[0], reporter=reporter)
            except (OSError, UnicodeDecodeError) as e:
                print(f"loxscan: cannot read {args.script[0]}: {e}", file=sys.stderr)
                return EX_NOINPUT
        return run_prompt(reporter=reporter)


if __name__ == "__main__":
    sys.exit(main())
