"""Token stream and symbol table for preprocessed C sources."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

KEYWORDS = frozenset(
    {
        "int", "float", "double", "char", "if", "else", "for", "return",
        "while", "void", "switch", "case", "break", "continue",
        "default", "struct", "union", "enum", "long", "short", "const",
        "sizeof", "printf", "scanf",
    }
)
_DATATYPE_SIZES = {"int": 4, "float": 4, "double": 8, "char": 1}

ARITHMETIC_OP = "Arithmetic Op"
RELATIONAL_OP = "Relational Op"
ASSIGNMENT_OP = "Assignment Op"
NUMERIC = "Numeric"
KEYWORD = "Keyword"
IDENTIFIER = "Identifier"
STRING_LITERAL = "String Literal"

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_INPUT_NAME = "s4.txt"
_OUTPUT_NAME = "s6.txt"


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


def is_keyword(word: str) -> bool:
    """Tell whether a word is one of the recognised C keywords."""
    return word in KEYWORDS


def datatype_size(word: str) -> int:
    """Size in bytes of a basic C type; 0 for anything else."""
    return _DATATYPE_SIZES.get(word, 0)


@dataclass(frozen=True)
class CToken:
    index: int
    token: str
    row: int
    col: int
    kind: str

    def format(self) -> str:
        """Render the token as one line of the token listing."""
        return f"<{self.index}, '{self.token}', {self.row}, {self.col}, '{self.kind}'>"


@dataclass(frozen=True)
class SymbolEntry:
    sno: int
    lexeme: str
    datatype: str
    size: int


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


class CLexer:
    """Splits preprocessed C text into tokens and records declared variables."""

    def __init__(self, text: str) -> None:
        self._text = text
        self.tokens: list[CToken] = []
        self.symbols: list[SymbolEntry] = []

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

    @staticmethod
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

    def run(self) -> list[CToken]:
        """Scan the whole text; return the tokens and fill ``symbols``."""
        self.tokens = []
        self.symbols = []
        stream = _CharStream(self._text)
        row, col = 1, 1
        datatype = ""
        is_func = False

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
                if c == "(":
                    is_func = True
                if is_keyword(word):
                    self._emit(word, KEYWORD, start)
                    datatype = word
                elif is_func:
                    is_func = False
                else:
                    array_size = 1
                    c = stream.getc()
                    if c == "[":
                        array_size = self._read_array_size(stream, array_size)
                    else:
                        stream.ungetc(c)
                    if datatype:
                        self._add_symbol(word, datatype, array_size)
                    previous = self._first_index_of(word)
                    shown = word if previous is None else str(previous)
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


def format_symbol_table(symbols: Iterable[SymbolEntry]) -> str:
    """Render the variable symbol table."""
    lines = ["Symbol Table:", "S.No\tLexeme\tDataType\tSize"]
    lines.extend(
        f"{entry.sno}\t{entry.lexeme}\t{entry.datatype}\t\t{entry.size}" for entry in symbols
    )
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Tokenise s4.txt into s6.txt and print the symbol table."""
    parser = argparse.ArgumentParser(
        prog="lexlab-ctokens",
        description="List the tokens of s4.txt in s6.txt and print the symbol table.",
    )
    parser.add_argument(
        "-d", "--directory", default=".", help="directory holding s4.txt (default: current)"
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
    lexer = CLexer(text)
    tokens = lexer.run()
    with open(base / _OUTPUT_NAME, "w", encoding="utf-8", newline="") as handle:
        handle.writelines(token.format() + "\n" for token in tokens)
    print(format_symbol_table(lexer.symbols), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())