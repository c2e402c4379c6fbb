"""Small lexical analysers: C preprocessing, C symbol and function tables, and
token scanners for C++, Kotlin, Python, JavaScript, Java, PHP, HTML and shell."""

__version__ = "0.1.0"