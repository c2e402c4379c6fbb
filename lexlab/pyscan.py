"""Scanner for Python sources that lists the functions defined with ``def``."""

from __future__ import annotations

import argparse
import sys

from lexlab.scanner import Scanner, Token, collect_declared_functions, format_symbol_table

_DEFAULT_SOURCE = "q2python.cpp"
_TITLE = "Symbol Table for Python Function Names"


class PythonScanner(Scanner):
    """Scanner for Python: ``#`` comments, single or double quoted strings."""

    KEYWORDS = frozenset(
        {
            "def", "if", "else", "elif", "while", "for", "return",
            "import", "from", "as", "print", "class",
        }
    )
    QUOTES = "\"'"

    def skip_ignored(self) -> None:
        reader = self.reader
        while reader.current is not None:
            self._skip_whitespace()
            if reader.current == "#":
                self._skip_line()
                continue
            break


def main(argv: list[str] | None = None) -> int:
    """Scan a Python source file and print its tokens and function names."""
    parser = argparse.ArgumentParser(
        prog="lexlab-python",
        description="List the tokens and defined functions of a Python source file.",
    )
    parser.add_argument(
        "source", nargs="?", default=_DEFAULT_SOURCE, help="file to scan"
    )
    args = parser.parse_args(argv)
    try:
        with open(args.source, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError:
        print("Cannot open file")
        return 1
    print("Scanning Python tokens and building symbol table for function names...\n")
    tokens: list[Token] = []
    for token in PythonScanner(text).tokens():
        print(token.format())
        tokens.append(token)
    print()
    print(format_symbol_table(_TITLE, collect_declared_functions(tokens, "def")), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())