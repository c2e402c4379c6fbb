[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lexlab"
version = "0.1.0"
description = "Small lexical analysers that tokenise source code and build symbol and function tables"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "lexer",
    "tokenizer",
    "lexical-analysis",
    "symbol-table",
    "compiler",
    "preprocessor",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lexlab-preprocess = "lexlab.preprocess:main"
lexlab-ctokens = "lexlab.ctokens:main"
lexlab-cfunctions = "lexlab.cfunctions:main"
lexlab-cpp = "lexlab.scanner:cpp_main"
lexlab-kotlin = "lexlab.scanner:kotlin_main"
lexlab-python = "lexlab.pyscan:main"
lexlab-js = "lexlab.javascript:js_main"
lexlab-jquery = "lexlab.javascript:jquery_main"
lexlab-java = "lexlab.java:main"
lexlab-php = "lexlab.php:main"
lexlab-html = "lexlab.html:main"
lexlab-shell = "lexlab.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["lexlab"]

[tool.hatch.build.targets.sdist]
include = ["lexlab", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
