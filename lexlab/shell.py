"""Scanner for shell scripts that lists the functions declared with ``function``."""

from __future__ import annotations

import argparse
import sys

from lexlab.scanner import (
    SYMBOL_TABLE_TITLE,
    Scanner,
    Token,
    collect_declared_functions,
    format_symbol_table,
)

_DEFAULT_SOURCE = "q2shell.txt"


class ShellScanner(Scanner):
    """Scanner for shell scripts: ``#`` lines starting in column one are comments."""

    KEYWORDS = frozenset({"function"})
    QUOTES = "\"'"

    def skip_ignored(self) -> None:
        reader = self.reader
        while reader.current is not None:
            self._skip_whitespace()
            if reader.col == 1 and reader.current == "#":
                self._skip_line()
                continue
            break


def main(argv: list[str] | None = None) -> int:
    """Scan a shell script and print its tokens and function names."""
    parser = argparse.ArgumentParser(
        prog="lexlab-shell",
        description="List the tokens and declared functions of a shell script.",
    )
    parser.add_argument("source", nargs="?", default=_DEFAULT_SOURCE, help="file to scan")
    args = parser.parse_args(argv)
    try:
        with open(args.source, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError:
        print(f"Cannot open file {args.source}")
        return 1
    print("Scanning shell script tokens and building symbol table for function names...\n")
    tokens: list[Token] = []
    for token in ShellScanner(text).tokens():
        print(token.format())
        tokens.append(token)
    print()
    symbols = collect_declared_functions(tokens, "function")
    print(format_symbol_table(SYMBOL_TABLE_TITLE, symbols), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())