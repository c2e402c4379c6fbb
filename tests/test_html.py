import pytest

from lexlab.html import MAX_TAGS, TAG, TEXT, HtmlScanner, HtmlToken, main


def _pairs(text):
    return [(t.lexeme, t.kind) for t in HtmlScanner(text).tokens()]


def test_token_format():
    paragraph = HtmlToken("p", TAG, 1, 3)
    assert paragraph.format() == "<p, TAG, row: 1, col: 3>"


def test_simple_document_tokens():
    text = "<html><body><p>Hello</p></body></html>"
    assert _pairs(text) == [
        ("html", TAG),
        ("body", TAG),
        ("p", TAG),
        ("Hello", TEXT),
        ("p", TAG),
        ("body", TAG),
        ("html", TAG),
    ]


def test_tags_are_unique_in_first_seen_order():
    scanner = HtmlScanner("<html><body><p>Hello</p></body></html>")
    list(scanner.tokens())
    assert scanner.tags == ["html", "body", "p"]


def test_tag_position_is_after_name():
    scanned = list(HtmlScanner("<p>").tokens())
    assert scanned == [HtmlToken("p", TAG, 1, 3)]


def test_comment_is_skipped():
    assert _pairs("<!-- note -->\n<p>x</p>") == [("p", TAG), ("x", TEXT), ("p", TAG)]


def test_doctype_is_skipped():
    scanner = HtmlScanner("<!DOCTYPE html>\n<html></html>")
    assert [(t.lexeme, t.kind) for t in scanner.tokens()] == [("html", TAG), ("html", TAG)]
    assert scanner.tags == ["html"]


def test_attributes_are_ignored():
    scanner = HtmlScanner('<a href="x">link</a>')
    assert [(t.lexeme, t.kind) for t in scanner.tokens()] == [
        ("a", TAG),
        ("link", TEXT),
        ("a", TAG),
    ]
    assert scanner.tags == ["a"]


def test_tag_name_allows_dash_and_underscore():
    scanner = HtmlScanner("<my-tag_1 x='y'>")
    assert [t.lexeme for t in scanner.tokens()] == ["my-tag_1"]
    assert scanner.tags == ["my-tag_1"]


def test_empty_tag_name_not_collected():
    scanner = HtmlScanner("<>text")
    assert [(t.lexeme, t.kind) for t in scanner.tokens()] == [("", TAG), ("text", TEXT)]
    assert scanner.tags == []


def test_text_keeps_inner_whitespace():
    scanned = list(HtmlScanner("<p>hello world\n</p>").tokens())
    assert scanned[1].lexeme == "hello world\n"
    assert scanned[1].kind == TEXT


def test_text_runs_to_end_of_input():
    assert _pairs("abc") == [("abc", TEXT)]


def test_trailing_open_bracket_gives_empty_tag():
    assert _pairs("text<") == [("text", TEXT), ("", TAG)]


def test_tag_table_is_capped():
    text = "".join(f"<t{i}>" for i in range(MAX_TAGS + 10))
    scanner = HtmlScanner(text)
    scanned = list(scanner.tokens())
    assert len(scanned) == MAX_TAGS + 10
    assert scanner.tags == [f"t{i}" for i in range(MAX_TAGS)]


def test_tokens_can_be_iterated_again():
    scanner = HtmlScanner("<html><p>Hi</p></html>")
    first = list(scanner.tokens())
    second = list(scanner.tokens())
    assert first == second
    assert scanner.tags == ["html", "p"]


@pytest.mark.parametrize("text", ["", "   \n\t  ", "<!-- only a comment -->"])
def test_nothing_to_scan(text):
    assert list(HtmlScanner(text).tokens()) == []


def test_main_prints_tokens_and_table(tmp_path, capsys):
    source = tmp_path / "page.html"
    source.write_text("<html><p>Hi</p></html>", encoding="utf-8")
    assert main([str(source)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Scanning HTML tokens...\n")
    assert "<Hi, TEXT, row: 1" in out
    assert "Symbol Table for HTML Tags:\nSlNo\tTag Name\n1\thtml\n2\tp\n" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.html")]) == 1
    assert "Cannot open file" in capsys.readouterr().out