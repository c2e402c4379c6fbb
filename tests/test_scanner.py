import pytest

from lexlab.scanner import (
    MAX_SYMBOLS,
    CppScanner,
    FunctionSymbol,
    KotlinScanner,
    Scanner,
    SourceReader,
    Token,
    TokenType,
    collect_cpp_functions,
    collect_declared_functions,
    cpp_main,
    format_symbol_table,
    kotlin_main,
)


def lexemes(scanner):
    return [token.lexeme for token in scanner.tokens()]


def test_token_format():
    token = Token("int", TokenType.KEYWORD, 1, 1)
    assert token.format() == "<int, KEYWORD, row: 1, col: 1>"


def test_reader_peek_does_not_move():
    reader = SourceReader("xyz")
    assert reader.current == "x"
    assert reader.peek() == "y"
    assert reader.peek(1) == "z"
    assert reader.peek(2) is None
    assert reader.current == "x"


def test_reader_newline_bumps_row():
    reader = SourceReader("ab\nc")
    start_row = reader.row
    reader.advance()
    reader.advance()
    assert reader.current == "\n"
    assert reader.row == start_row + 1
    reader.advance()
    assert reader.current == "c"
    assert reader.advance() is None


def test_cpp_token_kinds():
    tokens = list(CppScanner('int main() { return 0; }').tokens())
    assert [t.lexeme for t in tokens] == ["int", "main", "(", ")", "{", "return", "0", ";", "}"]
    assert [t.kind for t in tokens] == [
        TokenType.KEYWORD,
        TokenType.IDENTIFIER,
        TokenType.SPECIAL,
        TokenType.SPECIAL,
        TokenType.SPECIAL,
        TokenType.KEYWORD,
        TokenType.NUMERIC,
        TokenType.SPECIAL,
        TokenType.SPECIAL,
    ]


def test_positions_point_at_lexemes():
    text = 'int x = 42;\n  float y_1;\nchar s = "hi there";\n'
    lines = text.split("\n")
    tokens = list(CppScanner(text).tokens())
    assert tokens
    for token in tokens:
        assert lines[token.row - 1][token.col - 1 :].startswith(token.lexeme)


def test_cpp_skips_directives_and_comments():
    text = "#include <iostream>\nint a; // trailing\n/* block\n comment */ float b;\n"
    assert lexemes(CppScanner(text)) == ["int", "a", ";", "float", "b", ";"]


def test_hash_away_from_first_column_is_special():
    tokens = list(CppScanner("  #x").tokens())
    assert [(t.lexeme, t.kind) for t in tokens] == [
        ("#", TokenType.SPECIAL),
        ("x", TokenType.IDENTIFIER),
    ]


def test_kotlin_does_not_skip_hash_lines():
    assert lexemes(KotlinScanner("#x")) == ["#", "x"]


def test_block_comment_characters_not_counted_in_column():
    token = next(KotlinScanner("/* c */ x").tokens())
    assert token.lexeme == "x"
    assert token.col == 7


def test_unterminated_string_runs_to_end():
    tokens = list(KotlinScanner('val s = "open').tokens())
    assert tokens[-1].lexeme == '"open'
    assert tokens[-1].kind is TokenType.STRING_LITERAL


def test_digits_then_letters_split():
    tokens = list(CppScanner("12ab").tokens())
    assert [(t.lexeme, t.kind) for t in tokens] == [
        ("12", TokenType.NUMERIC),
        ("ab", TokenType.IDENTIFIER),
    ]


def test_kotlin_keywords():
    tokens = list(KotlinScanner("fun when object").tokens())
    assert all(t.kind is TokenType.KEYWORD for t in tokens)
    assert len(tokens) == 3


def test_eof_repeats():
    scanner = Scanner("")
    assert scanner.next_token().kind is TokenType.EOF
    assert scanner.next_token().lexeme == "EOF"
    assert list(Scanner("   \n ").tokens()) == []


def test_collect_cpp_functions():
    text = "int add(int a, int b) { return a; }\nvoid run() {}\nint x = 1;\n"
    symbols = collect_cpp_functions(CppScanner(text).tokens())
    assert symbols == [FunctionSymbol("add", "unknown"), FunctionSymbol("run", "unknown")]


@pytest.mark.parametrize("text", ["int int f(", "int f = g(", "x f(", "int x;"])
def test_cpp_pattern_breaks(text):
    assert collect_cpp_functions(CppScanner(text).tokens()) == []


def test_collect_declared_functions_kotlin():
    text = "fun main() { val x = 1 }\nfun greet(name: String) {}\n"
    symbols = collect_declared_functions(KotlinScanner(text).tokens(), "fun")
    assert [s.name for s in symbols] == ["main", "greet"]


def test_symbol_table_is_capped():
    text = "\n".join(f"fun f{n}() {{}}" for n in range(MAX_SYMBOLS + 10))
    symbols = collect_declared_functions(KotlinScanner(text).tokens(), "fun")
    assert len(symbols) == MAX_SYMBOLS
    assert symbols[0].name == "f0"


def test_format_symbol_table():
    table = format_symbol_table("Symbol Table for Function Names", [FunctionSymbol("main")])
    assert table == (
        "Symbol Table for Function Names:\n"
        "SlNo\tFunction Name\tReturn Type\n"
        "1\tmain\t\tunknown\n"
    )


def test_cpp_main_requires_argument(capsys):
    assert cpp_main([]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_cpp_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "absent.cpp"
    assert cpp_main([str(missing)]) == 1
    assert "Cannot open file" in capsys.readouterr().out


def test_cpp_main_reports(tmp_path, capsys):
    source = tmp_path / "prog.cpp"
    source.write_text("#include <x>\nint main() {}\n")
    assert cpp_main([str(source)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Scanning C++ tokens")
    assert "<main, IDENTIFIER, row: 2" in out
    assert out.endswith("1\tmain\t\tunknown\n")


def test_kotlin_main_reports(tmp_path, capsys):
    source = tmp_path / "app.kt"
    source.write_text("fun hello() {}\n")
    assert kotlin_main([str(source)]) == 0
    out = capsys.readouterr().out
    assert "<fun, KEYWORD, row: 1, col: 1>" in out
    assert out.endswith("1\thello\t\tunknown\n")