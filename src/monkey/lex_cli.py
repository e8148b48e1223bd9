"""Simple CLI to lex a monkey source file and print tokens."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .lexer import Lexer, LexerError
from .token import Token


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Lex a monkey source file")
    parser.add_argument("path", help="Path to monkey source, or '-' to read stdin")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Stop with an error at the first illegal character",
    )
    parser.add_argument(
        "--format",
        choices=["plain", "table"],
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--positions",
        action="store_true",
        help="Append line:col to each token in plain format",
    )
    args = parser.parse_args(argv)

    if args.path == "-":
        source = sys.stdin.buffer.read()
    else:
        try:
            source = Path(args.path).read_bytes()
        except FileNotFoundError:
            log_error(f"file not found: {args.path}")
            return 1
        except OSError as e:
            log_error(f"cannot read {args.path}: {e.strerror}")
            return 1

    try:
        tokens = Lexer(source).scan(strict=args.strict)
    except LexerError as e:
        log_error(f"lexer error: {e}")
        return 1

    for t in tokens:
        print(format_token(t, args.format, args.positions))
    return 0


def format_token(tok: Token, fmt: str = "table", positions: bool = False) -> str:
    if fmt == "table":
        return f"{tok.kind.name}\t{tok.literal!r}\t(line {tok.line})"
    if positions:
        return f"{tok}\t{tok.line}:{tok.col}"
    return str(tok)


def log_error(msg: str, file=None) -> None:
    print(f"[monkey:error] {msg}", file=file)


if __name__ == "__main__":
    raise SystemExit(main())
