from lexlab.php import PhpScanner, collect_php_functions, main
from lexlab.scanner import FunctionSymbol, TokenType


def lexemes(text):
    return [token.lexeme for token in PhpScanner(text).tokens()]


def test_opening_tag_line_is_skipped():
    text = "<?php\nfunction greet() {}\n?>"
    tokens = list(PhpScanner(text).tokens())
    assert [t.lexeme for t in tokens] == ["function", "greet", "(", ")", "{", "}", "?", ">"]
    assert tokens[0].kind is TokenType.KEYWORD
    assert tokens[0].row == 2


def test_comments_are_skipped():
    text = "# hash\necho 1; // line\n/* block */ echo 2;"
    assert lexemes(text) == ["echo", "1", ";", "echo", "2", ";"]


def test_lone_less_than_is_dropped():
    assert lexemes("a < b") == ["a", " ", "b"]
    assert lexemes("a<b") == ["a", "b"]


def test_dollar_is_special():
    tokens = list(PhpScanner("$x = 1;").tokens())
    assert tokens[0].lexeme == "$"
    assert tokens[0].kind is TokenType.SPECIAL
    assert tokens[1].lexeme == "x"
    assert tokens[1].kind is TokenType.IDENTIFIER


def test_string_literal():
    tokens = list(PhpScanner('echo "hello world";').tokens())
    assert tokens[1].lexeme == '"hello world"'
    assert tokens[1].kind is TokenType.STRING_LITERAL


def test_collect_php_functions():
    tokens = PhpScanner("function foo() {} function (bar)").tokens()
    assert collect_php_functions(tokens) == [FunctionSymbol("foo")]


def test_collect_php_functions_ignores_keyword_names():
    assert collect_php_functions(PhpScanner("function echo() {}").tokens()) == []


def test_collect_php_functions_is_capped():
    text = " ".join(f"function f{n}() {{}}" for n in range(60))
    symbols = collect_php_functions(PhpScanner(text).tokens())
    assert len(symbols) == 50
    assert symbols[-1].name == "f49"


def test_main_prints_tokens_and_table(tmp_path, capsys):
    source = tmp_path / "page.php"
    source.write_text("<?php\nfunction render() { echo 1; }\n")
    assert main([str(source)]) == 0
    out = capsys.readouterr().out
    assert "<function, KEYWORD, row: 2, col: 1>" in out
    assert "1\trender\t\tunknown" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.php")]) == 1
    assert "Cannot open file" in capsys.readouterr().out