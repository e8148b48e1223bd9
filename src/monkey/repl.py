"""Interactive read-lex-print loop: one fresh lexer per input line."""

from __future__ import annotations

import argparse
import sys
from typing import BinaryIO, List, Optional, TextIO

from .lex_cli import log_error
from .lexer import Lexer, LexerError

PROMPT = ">> "


def run_repl(
    stdin: BinaryIO, stdout: TextIO, prompt: str = PROMPT, strict: bool = False
) -> int:
    """Lex ``stdin`` line by line; lines are read as raw bytes."""
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            # End of input: finish the prompt line and leave quietly.
            stdout.write("\n")
            return 0
        try:
            tokens = Lexer(line).scan(strict)
        except LexerError as e:
            log_error(str(e), file=stdout)
            continue
        for tok in tokens:
            print(tok, file=stdout)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Interactive monkey token printer")
    ap.add_argument("--prompt", default=PROMPT, help=f"Prompt text (default: {PROMPT!r})")
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Report a line with an illegal character as an error instead of printing its tokens",
    )
    args = ap.parse_args(argv)

    print("type monkey code, Ctrl-D to exit", file=sys.stderr)
    try:
        return run_repl(sys.stdin.buffer, sys.stdout, args.prompt, args.strict)
    except KeyboardInterrupt:
        print()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
