"""Scanner for PHP sources that lists the functions declared with ``function``."""

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

_DEFAULT_SOURCE = "q2php.txt"


class PhpScanner(Scanner):
    """Scanner for PHP: skips ``<?`` opening lines and ``//``, ``/* */`` and ``#`` comments.

    A ``<`` that does not open a ``<?`` tag is dropped, and the character after
    it is taken as the next token start.
    """

    KEYWORDS = frozenset(
        {
            "function", "echo", "if", "else", "while", "for", "return",
            "class", "public", "private", "protected", "static", "var",
        }
    )

    def skip_ignored(self) -> None:
        reader = self.reader
        while reader.current is not None:
            self._skip_whitespace()
            if reader.current == "<":
                reader.advance()
                if reader.current == "?":
                    self._skip_line()
                    continue
            if self._skip_c_comment():
                continue
            if reader.current == "#":
                self._skip_line()
                continue
            break


def collect_php_functions(tokens: Iterable[Token]) -> list[FunctionSymbol]:
    """Return the identifier that immediately follows each ``function`` keyword."""
    symbols: list[FunctionSymbol] = []
    expecting_name = False
    for token in tokens:
        if token.kind is TokenType.KEYWORD and token.lexeme == "function":
            expecting_name = True
            continue
        if expecting_name:
            if token.kind is TokenType.IDENTIFIER and len(symbols) < MAX_SYMBOLS:
                symbols.append(FunctionSymbol(token.lexeme))
            expecting_name = False
    return symbols


def main(argv: list[str] | None = None) -> int:
    """Scan a PHP source file and print its tokens and function names."""
    parser = argparse.ArgumentParser(
        prog="lexlab-php",
        description="List the tokens and declared functions of a PHP source file.",
    )
    parser.add_argument("source", nargs="?", default=_DEFAULT_SOURCE, help="file to scan")
    args = parser.parse_args(argv)
    try:
        with open(args.source, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError:
        print("Cannot open file ")
        return 1
    print("Scanning PHP tokens and building symbol table for function names...\n")
    tokens: list[Token] = []
    for token in PhpScanner(text).tokens():
        print(token.format())
        tokens.append(token)
    print()
    print(format_symbol_table(SYMBOL_TABLE_TITLE, collect_php_functions(tokens)), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())