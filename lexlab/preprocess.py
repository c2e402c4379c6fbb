"""Source clean-up passes: strip comments, drop directive lines, squeeze blanks."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Iterator

_STAGES = ("s1.txt", "s2.txt", "s3.txt", "s4.txt")
_LINE = re.compile(r"[^\n]*\n|[^\n]+")
_BLANK_RUN = re.compile(r" +|\t+")


def _skip_block_comment(chars: Iterator[str]) -> None:
    """Consume characters up to and including the closing ``*/``."""
    after_star = False
    for c in chars:
        if after_star and c == "/":
            return
        after_star = c == "*"


def remove_comments(text: str) -> str:
    """Remove ``//`` comments (with their newline) and ``/* */`` comments."""
    out: list[str] = []
    chars = iter(text)
    for c in chars:
        if c != "/":
            out.append(c)
            continue
        d = next(chars, None)
        if d == "/":
            for skipped in chars:
                if skipped == "\n":
                    break
        elif d == "*":
            _skip_block_comment(chars)
        else:
            out.append(c)
            if d is not None:
                out.append(d)
    return "".join(out)


def remove_headers(text: str) -> str:
    """Drop every line whose first character is ``#``."""
    return "".join(
        match.group() for match in _LINE.finditer(text) if not match.group().startswith("#")
    )


def remove_spaces(text: str) -> str:
    """Replace each run of spaces, and each run of tabs, with a single space."""
    return _BLANK_RUN.sub(" ", text)


def preprocess(text: str) -> str:
    """Run all three passes in order."""
    return remove_spaces(remove_headers(remove_comments(text)))


def _read(path: Path) -> str:
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        return handle.read()


def _write(path: Path, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)


def main(argv: list[str] | None = None) -> int:
    """Read s1.txt and write the result of each pass to s2.txt, s3.txt and s4.txt."""
    parser = argparse.ArgumentParser(
        prog="lexlab-preprocess",
        description="Strip comments, directive lines and repeated blanks from s1.txt.",
    )
    parser.add_argument(
        "-d", "--directory", default=".", help="directory holding s1.txt (default: current)"
    )
    args = parser.parse_args(argv)
    base = Path(args.directory)
    source = base / _STAGES[0]
    try:
        text = _read(source)
    except OSError:
        print(f"Cannot open file {source}", file=sys.stderr)
        return 1
    passes = (remove_comments, remove_headers, remove_spaces)
    for name, stage in zip(_STAGES[1:], passes):
        text = stage(text)
        _write(base / name, text)
    return 0


if __name__ == "__main__":
    sys.exit(main())