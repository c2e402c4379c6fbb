"""Token stream, symbol table and function table for preprocessed C sources."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from lexlab.ctokens import (
    ARITHMETIC_OP,
    ASSIGNMENT_OP,
    IDENTIFIER,
    KEYWORD,
    NUMERIC,
    RELATIONAL_OP,
    STRING_LITERAL,
    CToken,
    SymbolEntry,
    datatype_size,
    format_symbol_table,
    is_keyword,
)

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_INPUT_NAME = "s4.txt"
_PLAIN_OUTPUT_NAME = "s7.txt"
_REUSE_OUTPUT_NAME = "s8.txt"


def _is_space(c: str | None) -> bool:
    return c is not None and c in _WHITESPACE


def _is_digit(c: str | None) -> bool:
    return c is not None and c in _DIGITS


def _is_alpha(c: str | None) -> bool:
    return c is not None and c.isascii() and c.isalpha()


def _starts_identifier(c: str | None) -> bool:
    return _is_alpha(c) or c == "_"


def _continues_identifier(c: str | None) -> bool:
    return _is_alpha(c) or _is_digit(c) or c == "_"


@dataclass(frozen=True)
class FunctionEntry:
    sno: int
    name: str
    return_type: str
    parameters: str
    param_count: int


class _CharStream:
    """Character source with push-back, yielding None at end of input."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._pushed: list[str] = []

    def getc(self) -> str | None:
        if self._pushed:
            return self._pushed.pop()
        if self._pos < len(self._text):
            c = self._text[self._pos]
            self._pos += 1
            return c
        return None

    def ungetc(self, c: str | None) -> None:
        if c is not None:
            self._pushed.append(c)


def _read_array_size(stream: _CharStream, default: int) -> int:
    """Read ``<integer>]`` after an opening bracket, as a ``%d]`` scan would."""
    c = stream.getc()
    while _is_space(c):
        c = stream.getc()
    sign = ""
    if c in ("+", "-"):
        sign = c
        c = stream.getc()
    digits: list[str] = []
    while _is_digit(c):
        digits.append(c)
        c = stream.getc()
    stream.ungetc(c)
    if not digits:
        return default
    closing = stream.getc()
    if closing != "]":
        stream.ungetc(closing)
    return int(sign + "".join(digits))


def _read_parameters(stream: _CharStream) -> tuple[str, int]:
    """Read a parenthesised parameter list; return its text and parameter count.

    The count is the number of commas plus one, or zero when there is no comma.
    """
    chars: list[str] = []
    commas = 0
    c = stream.getc()
    while c is not None and c != ")":
        chars.append(c)
        if c == ",":
            commas += 1
        c = stream.getc()
    chars.append(")")
    return "".join(chars), (commas + 1 if commas else 0)


class FunctionLexer:
    """Tokenises preprocessed C text, recording variables and defined or called functions.

    With ``reuse_ids`` an identifier seen before is listed by the index of its
    first occurrence instead of by name.
    """

    def __init__(self, text: str, reuse_ids: bool = False) -> None:
        self._text = text
        self.reuse_ids = reuse_ids
        self.tokens: list[CToken] = []
        self.symbols: list[SymbolEntry] = []
        self.functions: list[FunctionEntry] = []

    def _emit(self, text: str, kind: str, start: tuple[int, int]) -> None:
        row, col = start
        self.tokens.append(CToken(len(self.tokens) + 1, text, row, col, kind))

    def _first_index_of(self, word: str) -> int | None:
        return next((t.index for t in self.tokens if t.token == word), None)

    def _add_symbol(self, lexeme: str, datatype: str, array_size: int) -> None:
        if any(entry.lexeme == lexeme for entry in self.symbols):
            return
        size = datatype_size(datatype) * array_size
        self.symbols.append(SymbolEntry(len(self.symbols) + 1, lexeme, datatype, size))

    def _add_function(self, name: str, return_type: str, parameters: str, count: int) -> None:
        if any(entry.name == name for entry in self.functions):
            return
        self.functions.append(
            FunctionEntry(len(self.functions) + 1, name, return_type, parameters, count)
        )

    def run(self) -> list[CToken]:
        """Scan the whole text; return the tokens and fill ``symbols`` and ``functions``."""
        self.tokens = []
        self.symbols = []
        self.functions = []
        stream = _CharStream(self._text)
        row, col = 1, 1
        datatype = ""

        while (c := stream.getc()) is not None:
            if _is_space(c):
                if c == "\n":
                    row += 1
                    col = 1
                else:
                    col += 1
                continue
            start = (row, col)

            if c in "+-*/%":
                self._emit(c, ARITHMETIC_OP, start)
                col += 1

            if c in "=><!":
                following = stream.getc()
                if following == "=":
                    self._emit(c + following, RELATIONAL_OP, start)
                    col += 2
                else:
                    stream.ungetc(following)
                    self._emit(c, ASSIGNMENT_OP if c == "=" else RELATIONAL_OP, start)
                    col += 1

            if _is_digit(c):
                chars = [c]
                c = stream.getc()
                while _is_digit(c) or c == ".":
                    chars.append(c)
                    c = stream.getc()
                self._emit("".join(chars), NUMERIC, start)
                col += len(chars) + 1

            if _starts_identifier(c):
                chars = [c]
                c = stream.getc()
                while _continues_identifier(c):
                    chars.append(c)
                    c = stream.getc()
                word = "".join(chars)
                stream.ungetc(c)
                if is_keyword(word):
                    self._emit(word, KEYWORD, start)
                    datatype = word
                    col += len(chars) + 1
                elif c == "(":
                    parameters, count = _read_parameters(stream)
                    self._add_function(word, datatype, parameters, count)
                    c = ")"
                    col += 1 + 2 * len(parameters)
                else:
                    array_size = 1
                    c = stream.getc()
                    if c == "[":
                        array_size = _read_array_size(stream, array_size)
                    else:
                        stream.ungetc(c)
                    if datatype:
                        self._add_symbol(word, datatype, array_size)
                    shown = word
                    if self.reuse_ids:
                        previous = self._first_index_of(word)
                        if previous is not None:
                            shown = str(previous)
                    self._emit(shown, IDENTIFIER, start)
                    col += len(chars) + 1

            if c == '"':
                chars = ['"']
                c = stream.getc()
                while c is not None and c != '"':
                    chars.append(c)
                    c = stream.getc()
                chars.append('"')
                self._emit("".join(chars), STRING_LITERAL, start)
                col += len(chars) + 1

        return list(self.tokens)


def format_function_table(functions: Iterable[FunctionEntry]) -> str:
    """Render the function table."""
    lines = ["Function Table:", "S.No\tfunction\tReturnType\tParameters\tParamcount"]
    lines.extend(
        f"{entry.sno}\t{entry.name}\t\t{entry.return_type}\t\t"
        f"{entry.parameters}\t\t{entry.param_count}"
        for entry in functions
    )
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Tokenise s4.txt into s7.txt (or s8.txt) and print the symbol and function tables."""
    parser = argparse.ArgumentParser(
        prog="lexlab-cfunctions",
        description="List the tokens of s4.txt and print its symbol and function tables.",
    )
    parser.add_argument(
        "-d", "--directory", default=".", help="directory holding s4.txt (default: current)"
    )
    parser.add_argument(
        "--reuse-ids",
        action="store_true",
        help="list repeated identifiers by the index of their first token (writes s8.txt)",
    )
    args = parser.parse_args(argv)
    base = Path(args.directory)
    source = base / _INPUT_NAME
    try:
        with open(source, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError:
        print(f"Cannot open file {source}", file=sys.stderr)
        return 1
    lexer = FunctionLexer(text, args.reuse_ids)
    tokens = lexer.run()
    output = base / (_REUSE_OUTPUT_NAME if args.reuse_ids else _PLAIN_OUTPUT_NAME)
    with open(output, "w", encoding="utf-8", newline="") as handle:
        handle.writelines(token.format() + "\n" for token in tokens)
    print(format_symbol_table(lexer.symbols), end="")
    print()
    print(format_function_table(lexer.functions), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())