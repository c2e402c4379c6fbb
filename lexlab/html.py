"""Scanner for HTML sources that lists tags and text runs and collects tag names."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator

TAG = "TAG"
TEXT = "TEXT"
MAX_TAGS = 50
TAG_TABLE_TITLE = "Symbol Table for HTML Tags"

_DEFAULT_SOURCE = "q2html.txt"
_WHITESPACE = " \t\n\v\f\r"
_LOOKAHEAD = 4


def _is_space(c: str | None) -> bool:
    return c is not None and c in _WHITESPACE


def _is_tag_char(c: str | None) -> bool:
    return c is not None and ((c.isascii() and c.isalnum()) or c in "-_")


@dataclass(frozen=True)
class HtmlToken:
    lexeme: str
    kind: str
    row: int
    col: int

    def format(self) -> str:
        """Render the token the way the scanner prints it."""
        return f"<{self.lexeme}, {self.kind}, row: {self.row}, col: {self.col}>"


class _Cursor:
    """Character cursor that counts rows and columns of characters it steps onto.

    Characters passed over with ``skip`` are consumed without being counted.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self.current: str | None = None
        self.row = 1
        self.col = 0
        self.advance()

    def advance(self) -> None:
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

    def peek(self, offset: int = 0) -> str | None:
        index = self._pos + offset
        if 0 <= index < len(self._text):
            return self._text[index]
        return None

    def skip(self, count: int) -> None:
        self._pos = min(self._pos + count, len(self._text))


class HtmlScanner:
    """Splits HTML into TAG and TEXT tokens, skipping comments and ``<!...>`` declarations.

    While tokens are produced, the distinct tag names seen are gathered in ``tags``
    (at most ``MAX_TAGS`` of them).
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self.tags: list[str] = []

    def _add_tag(self, name: str) -> None:
        if name in self.tags or len(self.tags) >= MAX_TAGS:
            return
        self.tags.append(name)

    @staticmethod
    def _skip_whitespace(cursor: _Cursor) -> None:
        while _is_space(cursor.current):
            cursor.advance()

    @staticmethod
    def _skip_comment(cursor: _Cursor) -> None:
        while cursor.current is not None:
            if cursor.current == "-" and cursor.peek(0) == "-" and cursor.peek(1) == ">":
                cursor.skip(2)
                cursor.advance()
                return
            cursor.advance()

    @staticmethod
    def _skip_declaration(cursor: _Cursor) -> None:
        while cursor.current is not None and cursor.current != ">":
            cursor.advance()
        if cursor.current == ">":
            cursor.advance()

    def _skip_comments_and_headers(self, cursor: _Cursor) -> None:
        while cursor.current is not None:
            self._skip_whitespace(cursor)
            if cursor.current != "<" or cursor.peek() != "!":
                break
            prefix: list[str] = []
            for offset in range(_LOOKAHEAD):
                c = cursor.peek(offset)
                if c is None:
                    break
                prefix.append(c)
            cursor.skip(len(prefix))
            if "".join(prefix).startswith("!--"):
                self._skip_comment(cursor)
            else:
                self._skip_declaration(cursor)

    def _next_token(self, cursor: _Cursor) -> HtmlToken | None:
        self._skip_comments_and_headers(cursor)
        self._skip_whitespace(cursor)
        if cursor.current is None:
            return None
        chars: list[str] = []
        if cursor.current == "<":
            cursor.advance()
            if cursor.current == "/":
                cursor.advance()
            while _is_tag_char(cursor.current):
                chars.append(cursor.current)
                cursor.advance()
            name = "".join(chars)
            token = HtmlToken(name, TAG, cursor.row, cursor.col)
            if name:
                self._add_tag(name)
            while cursor.current is not None and cursor.current != ">":
                cursor.advance()
            if cursor.current == ">":
                cursor.advance()
            return token
        while cursor.current is not None and cursor.current != "<":
            chars.append(cursor.current)
            cursor.advance()
        return HtmlToken("".join(chars), TEXT, cursor.row, cursor.col)

    def tokens(self) -> Iterator[HtmlToken]:
        """Yield every token of the text, refilling ``tags`` from scratch."""
        self.tags = []
        cursor = _Cursor(self._text)
        while (token := self._next_token(cursor)) is not None:
            yield token


def _is_blank(text: str) -> bool:
    return all(c in _WHITESPACE for c in text)


def _format_tag_table(tags: Iterable[str]) -> str:
    lines = [f"{TAG_TABLE_TITLE}:", "SlNo\tTag Name"]
    lines.extend(f"{number}\t{tag}" for number, tag in enumerate(tags, 1))
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Scan an HTML file and print its tokens and the table of tag names."""
    parser = argparse.ArgumentParser(
        prog="lexlab-html",
        description="List the tokens and tag names of an HTML file.",
    )
    parser.add_argument("source", nargs="?", default=_DEFAULT_SOURCE, help="file to scan")
    args = parser.parse_args(argv)
    try:
        with open(args.source, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError:
        print("Cannot open file ")
        return 1
    print("Scanning HTML tokens...")
    scanner = HtmlScanner(text)
    for token in scanner.tokens():
        if token.kind == TEXT and _is_blank(token.lexeme):
            continue
        print(token.format())
    print()
    print(_format_tag_table(scanner.tags), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())