"""Scanners for JavaScript and jQuery sources that list function names."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterable

from lexlab.scanner import (
    MAX_SYMBOLS,
    SYMBOL_TABLE_TITLE,
    FunctionSymbol,
    Scanner,
    Token,
    TokenType,
    collect_declared_functions,
    format_symbol_table,
)

_JS_SOURCE = "q2js.txt"
_JQUERY_SOURCE = "q2jq.txt"
_JQUERY_NAMES = frozenset({"$", "jQuery"})


class JavaScriptScanner(Scanner):
    """Scanner for JavaScript: ``$`` in identifiers, both quote styles, shebang lines."""

    KEYWORDS = frozenset(
        {"function", "var", "let", "const", "if", "else", "for", "while", "return"}
    )
    QUOTES = "\"'"
    IDENTIFIER_EXTRA = "_$"

    def skip_ignored(self) -> None:
        reader = self.reader
        while reader.current is not None:
            self._skip_whitespace()
            if reader.col == 1 and reader.current == "#":
                self._skip_line()
                continue
            if self._skip_c_comment():
                continue
            break


def collect_jquery_functions(tokens: Iterable[Token]) -> list[FunctionSymbol]:
    """Collect names after ``function`` and ``$``/``jQuery`` identifiers called with ``(``."""
    symbols: list[FunctionSymbol] = []

    def add(symbol: FunctionSymbol) -> None:
        if len(symbols) < MAX_SYMBOLS:
            symbols.append(symbol)

    expecting_name = False
    expecting_call = False
    callee = ""
    for token in tokens:
        if token.kind is TokenType.KEYWORD and token.lexeme == "function":
            expecting_name = True
            continue
        if expecting_name and token.kind is TokenType.IDENTIFIER:
            add(FunctionSymbol(token.lexeme))
            expecting_name = False
            continue
        if token.kind is TokenType.IDENTIFIER and token.lexeme in _JQUERY_NAMES:
            callee = token.lexeme
            expecting_call = True
            continue
        if expecting_call:
            if token.kind is TokenType.SPECIAL and token.lexeme == "(":
                add(FunctionSymbol(callee, "jQuery"))
            expecting_call = False
    return symbols


def _run(
    argv: list[str] | None,
    prog: str,
    default_source: str,
    language: str,
    collect: Callable[[list[Token]], list[FunctionSymbol]],
) -> int:
    parser = argparse.ArgumentParser(
        prog=prog,
        description=f"List the tokens and function names of a {language} source file.",
    )
    parser.add_argument("source", nargs="?", default=default_source, help="file to scan")
    args = parser.parse_args(argv)
    try:
        with open(args.source, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError:
        print(f"Cannot open file {args.source}")
        return 1
    print(f"Scanning {language} tokens and building symbol table for function names...\n")
    tokens: list[Token] = []
    for token in JavaScriptScanner(text).tokens():
        print(token.format())
        tokens.append(token)
    print()
    print(format_symbol_table(SYMBOL_TABLE_TITLE, collect(tokens)), end="")
    return 0


def js_main(argv: list[str] | None = None) -> int:
    """Scan a JavaScript file and list the functions declared with ``function``."""
    return _run(
        argv,
        "lexlab-js",
        _JS_SOURCE,
        "JavaScript",
        lambda tokens: collect_declared_functions(tokens, "function"),
    )


def jquery_main(argv: list[str] | None = None) -> int:
    """Scan a JavaScript/jQuery file and list declared functions and jQuery calls."""
    return _run(
        argv, "lexlab-jquery", _JQUERY_SOURCE, "JavaScript/jQuery", collect_jquery_functions
    )


if __name__ == "__main__":
    sys.exit(js_main())