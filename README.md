# lexlab

A set of small lexical analysers. Each one reads source text, splits it into
tokens with their row and column, and builds a table of what it found:
variables and their sizes for C, function names for several other languages,
and tag names for HTML.

The analysers follow a handful of fixed rules for each language rather than a
full grammar, which keeps them easy to read and to reason about.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The C pipeline

Three commands work together on files in one directory (the current one, or
the one given with `-d/--directory`):

1. `lexlab-preprocess` reads `s1.txt` and writes the result of each pass:
   comments removed to `s2.txt`, then lines starting with `#` removed to
   `s3.txt`, then every run of spaces and every run of tabs squeezed to one
   space in `s4.txt`.
2. `lexlab-ctokens` reads `s4.txt`, writes one token per line to `s6.txt` and
   prints the symbol table. An identifier seen before is listed by the index
   of its first token instead of by name.
3. `lexlab-cfunctions` reads `s4.txt`, writes the tokens to `s7.txt` and prints
   both the symbol table and a function table. With `--reuse-ids` it lists
   repeated identifiers by index, as `lexlab-ctokens` does, and writes
   `s8.txt` instead.

C tokens are written as

```
<index, 'token', row, col, 'type'>
```

with the types `Keyword`, `Identifier`, `Numeric`, `String Literal`,
`Arithmetic Op`, `Relational Op` and `Assignment Op`. The symbol table lists
each identifier declared after a keyword, with that keyword as its data type
and its size in bytes (`int` and `float` 4, `double` 8, `char` 1, anything
else 0), multiplied by the array length for `name[N]`. The function table
lists each non-keyword name followed by `(`, with the last keyword seen as its
return type, the parameter text up to `)` and the parameter count (commas plus
one, or 0 when there is no comma). Names followed by `(` are not written as
tokens.

## The language scanners

| Command         | What it does                                                         |
|-----------------|----------------------------------------------------------------------|
| `lexlab-cpp`    | Tokenises C++, skipping `#` lines and comments, and lists functions written as `type name(` |
| `lexlab-kotlin` | Tokenises Kotlin and lists functions declared with `fun`             |
| `lexlab-python` | Tokenises Python, skipping `#` comments, and lists functions declared with `def` |
| `lexlab-js`     | Tokenises JavaScript and lists functions declared with `function`    |
| `lexlab-jquery` | Tokenises JavaScript and lists `function` declarations and `$(` / `jQuery(` calls |
| `lexlab-java`   | Tokenises Java, skipping `import` and `package` lines, and lists every name followed by `(` |
| `lexlab-php`    | Tokenises PHP, skipping `<?` tag lines and comments, and lists functions declared with `function` |
| `lexlab-html`   | Tokenises HTML into tags and text, skipping comments and `<!...>` declarations, and lists the tag names |
| `lexlab-shell`  | Tokenises a shell script, skipping `#` lines, and lists functions declared with `function` |

`lexlab-cpp` and `lexlab-kotlin` need the file to scan as their argument. The
others take it as an optional argument and otherwise read `q2python.cpp`,
`q2js.txt`, `q2jq.txt`, `q2java.txt`, `q2php.txt`, `q2html.txt` or
`q2shell.txt` from the current directory.

Tokens are printed one per line as

```
<name, TYPE, row: R, col: C>
```

with the types `KEYWORD`, `IDENTIFIER`, `NUMERIC`, `STRING_LITERAL` and
`SPECIAL` (any other single character), followed by the table of names found.
HTML tokens are `TAG` or `TEXT`; text made only of whitespace is not printed.

## Using the library

Every scanner takes the source text and yields tokens:

```python
from lexlab.scanner import CppScanner, collect_cpp_functions, format_symbol_table

source = "int main() { return 0; }"
tokens = list(CppScanner(source).tokens())
for token in tokens:
    print(token.format())

functions = collect_cpp_functions(tokens)
print(format_symbol_table("Symbol Table for Function Names", functions))
```

The other scanners are `KotlinScanner` (in `lexlab.scanner`),
`PythonScanner` (`lexlab.pyscan`), `JavaScriptScanner` (`lexlab.javascript`),
`JavaScanner` (`lexlab.java`), `PhpScanner` (`lexlab.php`), `ShellScanner`
(`lexlab.shell`) and `HtmlScanner` (`lexlab.html`), which fills its `tags`
list as it yields tokens. The function lists come from
`collect_declared_functions`, `collect_jquery_functions`,
`collect_called_functions` and `collect_php_functions`; each keeps at most 50
names.

The C preprocessing passes work on plain strings:

```python
from lexlab.preprocess import preprocess

print(repr(preprocess("#include <stdio.h>\nint  x; // counter\n")))  # 'int x; '
```

`remove_comments`, `remove_headers` and `remove_spaces` are available
separately from the same module. For C tables, `lexlab.ctokens.CLexer` and
`lexlab.cfunctions.FunctionLexer` do the tokenising; after `run()` they hold
`symbols` (and, for `FunctionLexer`, `functions`).

## What it does not do

The analysers only tokenise and collect names. They do not parse, check types
or report syntax errors, and the C analysers expect text that has already been
through `lexlab-preprocess`.