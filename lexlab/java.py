"""Scanner for Java sources that lists identifiers used as function names."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable

from lexlab.scanner import (
    MAX_SYMBOLS,
    SYMBOL_TABLE_TITLE,
    FunctionSymbol,
    Scanner,
    Token,
    TokenType,
    format_symbol_table,
)

_DEFAULT_SOURCE = "q2java.txt"
_HEADER_PREFIXES = ("import", "package")
_HEADER_LIMIT = 99


class JavaScanner(Scanner):
    """Scanner for Java that also skips ``import`` and ``package`` lines."""

    KEYWORDS = frozenset(
        {
            "public", "private", "protected", "static", "void", "int", "boolean",
            "if", "else", "for", "while", "class", "new", "import", "package", "return",
        }
    )

    def _line_ahead(self) -> str:
        """Return the rest of the current line, at most ``_HEADER_LIMIT`` characters."""
        reader = self.reader
        if reader.current is None or reader.current == "\n":
            return ""
        chars = [reader.current]
        offset = 0
        while len(chars) < _HEADER_LIMIT:
            c = reader.peek(offset)
            if c is None or c == "\n":
                break
            chars.append(c)
            offset += 1
        return "".join(chars)

    def skip_ignored(self) -> None:
        reader = self.reader
        while reader.current is not None:
            self._skip_whitespace()
            if reader.col == 1 and reader.current is not None:
                line = self._line_ahead()
                if line.startswith(_HEADER_PREFIXES):
                    for _ in line:
                        reader.advance()
                    reader.advance()
                    continue
            if self._skip_c_comment():
                continue
            break


def collect_called_functions(tokens: Iterable[Token]) -> list[FunctionSymbol]:
    """Return every identifier that is directly followed by ``(``."""
    symbols: list[FunctionSymbol] = []
    previous = ""
    previous_was_identifier = False
    for token in tokens:
        if token.kind is TokenType.IDENTIFIER:
            previous = token.lexeme
            previous_was_identifier = True
            continue
        if previous_was_identifier and token.lexeme == "(" and len(symbols) < MAX_SYMBOLS:
            symbols.append(FunctionSymbol(previous))
        previous_was_identifier = False
    return symbols


def main(argv: list[str] | None = None) -> int:
    """Scan a Java source file and print its tokens and function names."""
    parser = argparse.ArgumentParser(
        prog="lexlab-java",
        description="List the tokens and function names of a Java source file.",
    )
    parser.add_argument("source", nargs="?", default=_DEFAULT_SOURCE, help="file to scan")
    args = parser.parse_args(argv)
    try:
        with open(args.source, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError:
        print(f"Cannot open file {args.source}")
        return 1
    print("Scanning tokens (for Java) and building symbol table for function names...\n")
    tokens: list[Token] = []
    for token in JavaScanner(text).tokens():
        print(token.format())
        tokens.append(token)
    print()
    print(format_symbol_table(SYMBOL_TABLE_TITLE, collect_called_functions(tokens)), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())