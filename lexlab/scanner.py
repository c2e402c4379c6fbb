"""A small scanner for C-like sources and function-name symbol tables."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Iterator

MAX_SYMBOLS = 50
SYMBOL_TABLE_TITLE = "Symbol Table for Function Names"
CPP_TYPE_KEYWORDS = frozenset({"int", "void", "char", "bool", "float", "double"})
_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _is_space(c: str | None) -> bool:
    return c is not None and c in _WHITESPACE


def _is_digit(c: str | None) -> bool:
    return c is not None and c in _DIGITS


def _is_alpha(c: str | None) -> bool:
    return c is not None and c.isascii() and c.isalpha()


def _is_alnum(c: str | None) -> bool:
    return _is_alpha(c) or _is_digit(c)


class TokenType(Enum):
    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    NUMERIC = "NUMERIC"
    STRING_LITERAL = "STRING_LITERAL"
    SPECIAL = "SPECIAL"
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    lexeme: str
    kind: TokenType
    row: int
    col: int

    def format(self) -> str:
        """Render the token the way the scanners print it."""
        return f"<{self.lexeme}, {self.kind.value}, row: {self.row}, col: {self.col}>"


@dataclass(frozen=True)
class FunctionSymbol:
    name: str
    return_type: str = "unknown"


class SourceReader:
    """Character cursor over a text that tracks row and column of the current character."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self.current: str | None = None
        self.row = 1
        self.col = 0
        self.advance()

    def advance(self) -> str | None:
        """Move to the next character and update the position counters."""
        if self._pos < len(self._text):
            self.current = self._text[self._pos]
            self._pos += 1
        else:
            self.current = None
        if self.current == "\n":
            self.row += 1
            self.col = 0
        else:
            self.col += 1
        return self.current

    def peek(self, offset: int = 0) -> str | None:
        """Return a character after the current one without moving."""
        index = self._pos + offset
        if 0 <= index < len(self._text):
            return self._text[index]
        return None

    def _discard(self, count: int = 1) -> None:
        """Step over look-ahead characters without counting them in the column."""
        self._pos = min(self._pos + count, len(self._text))


class Scanner:
    """Splits source text into keyword, identifier, number, string and special tokens."""

    KEYWORDS: frozenset[str] = frozenset()
    QUOTES = '"'
    IDENTIFIER_EXTRA = "_"

    def __init__(self, text: str) -> None:
        self.reader = SourceReader(text)

    def _skip_whitespace(self) -> None:
        reader = self.reader
        while _is_space(reader.current):
            reader.advance()

    def _skip_line(self) -> None:
        reader = self.reader
        while reader.current is not None and reader.current != "\n":
            reader.advance()

    def _skip_c_comment(self) -> bool:
        """Skip a ``//`` or ``/* */`` comment at the cursor; report whether one was found."""
        reader = self.reader
        if reader.current != "/":
            return False
        following = reader.peek()
        if following == "/":
            reader._discard()
            self._skip_line()
            return True
        if following != "*":
            return False
        reader._discard()
        reader.advance()
        while reader.current is not None:
            if reader.current == "*" and reader.peek() == "/":
                reader._discard()
                reader.advance()
                break
            reader.advance()
        return True

    def skip_ignored(self) -> None:
        """Skip whitespace and comments before the next token."""
        while self.reader.current is not None:
            self._skip_whitespace()
            if self._skip_c_comment():
                continue
            break

    def _starts_identifier(self, c: str | None) -> bool:
        return _is_alpha(c) or (c is not None and c in self.IDENTIFIER_EXTRA)

    def _continues_identifier(self, c: str | None) -> bool:
        return _is_alnum(c) or (c is not None and c in self.IDENTIFIER_EXTRA)

    def next_token(self) -> Token:
        """Read one token; an EOF token once the text is used up."""
        reader = self.reader
        row, col = reader.row, reader.col
        self.skip_ignored()
        if reader.current is None:
            return Token("EOF", TokenType.EOF, row, col)
        row, col = reader.row, reader.col
        current = reader.current
        chars: list[str] = []

        if current in self.QUOTES:
            quote = current
            chars.append(quote)
            reader.advance()
            while reader.current is not None and reader.current != quote:
                chars.append(reader.current)
                reader.advance()
            if reader.current == quote:
                chars.append(quote)
                reader.advance()
            return Token("".join(chars), TokenType.STRING_LITERAL, row, col)

        if _is_digit(current):
            while _is_digit(reader.current):
                chars.append(reader.current)
                reader.advance()
            return Token("".join(chars), TokenType.NUMERIC, row, col)

        if self._starts_identifier(current):
            while self._continues_identifier(reader.current):
                chars.append(reader.current)
                reader.advance()
            lexeme = "".join(chars)
            kind = TokenType.KEYWORD if lexeme in self.KEYWORDS else TokenType.IDENTIFIER
            return Token(lexeme, kind, row, col)

        reader.advance()
        return Token(current, TokenType.SPECIAL, row, col)

    def tokens(self) -> Iterator[Token]:
        """Yield every token up to, but not including, the end of input."""
        while True:
            token = self.next_token()
            if token.kind is TokenType.EOF:
                return
            yield token


class CppScanner(Scanner):
    """Scanner for C++ that also skips preprocessor lines starting in column one."""

    KEYWORDS = frozenset(
        {
            "int", "void", "char", "bool", "float", "double",
            "if", "else", "for", "while", "return", "class", "using", "namespace",
        }
    )

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


class KotlinScanner(Scanner):
    """Scanner for Kotlin sources."""

    KEYWORDS = frozenset(
        {"fun", "val", "var", "if", "else", "for", "while", "when", "return", "class", "object"}
    )


def _add_symbol(symbols: list[FunctionSymbol], symbol: FunctionSymbol) -> None:
    if len(symbols) < MAX_SYMBOLS:
        symbols.append(symbol)


def collect_cpp_functions(tokens: Iterable[Token]) -> list[FunctionSymbol]:
    """Find ``<type keyword> <identifier> (`` sequences and return the identifiers."""
    symbols: list[FunctionSymbol] = []
    state = 0
    candidate = ""
    for token in tokens:
        if state == 0:
            if token.kind is TokenType.KEYWORD and token.lexeme in CPP_TYPE_KEYWORDS:
                state = 1
        elif state == 1:
            if token.kind is TokenType.IDENTIFIER:
                candidate = token.lexeme
                state = 2
            else:
                state = 0
        else:
            if token.kind is TokenType.SPECIAL and token.lexeme == "(":
                _add_symbol(symbols, FunctionSymbol(candidate))
            state = 0
    return symbols


def collect_declared_functions(tokens: Iterable[Token], keyword: str) -> list[FunctionSymbol]:
    """Return the first identifier after each occurrence of a declaring keyword."""
    symbols: list[FunctionSymbol] = []
    expecting_name = False
    for token in tokens:
        if token.kind is TokenType.KEYWORD and token.lexeme == keyword:
            expecting_name = True
            continue
        if expecting_name and token.kind is TokenType.IDENTIFIER:
            _add_symbol(symbols, FunctionSymbol(token.lexeme))
            expecting_name = False
    return symbols


def format_symbol_table(title: str, symbols: Iterable[FunctionSymbol]) -> str:
    """Render a numbered function-name table under a title."""
    lines = [f"{title}:", "SlNo\tFunction Name\tReturn Type"]
    lines.extend(
        f"{number}\t{symbol.name}\t\t{symbol.return_type}"
        for number, symbol in enumerate(symbols, 1)
    )
    return "\n".join(lines) + "\n"


def _read_source(path: str) -> str:
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        return handle.read()


def _report(
    text: str,
    language: str,
    scanner_class: type[Scanner],
    collect: Callable[[list[Token]], list[FunctionSymbol]],
    title: str = SYMBOL_TABLE_TITLE,
) -> None:
    print(f"Scanning {language} tokens and building symbol table for function names...\n")
    tokens: list[Token] = []
    for token in scanner_class(text).tokens():
        print(token.format())
        tokens.append(token)
    print()
    print(format_symbol_table(title, collect(tokens)), end="")


def _run_on_file(
    argv: list[str] | None,
    language: str,
    usage_name: str,
    scanner_class: type[Scanner],
    collect: Callable[[list[Token]], list[FunctionSymbol]],
) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        prog = os.path.basename(sys.argv[0]) or "lexlab"
        print(f"Usage: {prog} <{usage_name}>")
        return 1
    path = args[0]
    try:
        text = _read_source(path)
    except OSError:
        print(f"Cannot open file {path}")
        return 1
    _report(text, language, scanner_class, collect)
    return 0


def cpp_main(argv: list[str] | None = None) -> int:
    """Scan a C++ file named on the command line and list its function names."""
    return _run_on_file(argv, "C++", "cpp_source_file", CppScanner, collect_cpp_functions)


def kotlin_main(argv: list[str] | None = None) -> int:
    """Scan a Kotlin file named on the command line and list its function names."""
    return _run_on_file(
        argv,
        "Kotlin",
        "kotlin_source_file",
        KotlinScanner,
        lambda tokens: collect_declared_functions(tokens, "fun"),
    )