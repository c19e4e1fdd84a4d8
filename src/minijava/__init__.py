"""
MiniJava - Lexical Analysis for a Java Teaching Subset
======================================================

This package provides the front end of a MiniJava toolchain: a lexer that
turns source text into classified tokens, each tagged with the line and
column where it starts.

Main Components
---------------
- **lexer**: the scanner (Lexer, tokenize), token kinds and keyword table
- **cli**: the ``mjlex`` command, which prints the token list of a file

Quick Start
-----------
    >>> from minijava import tokenize
    >>> for token in tokenize("class Main { }"):
    ...     print(token)
    Token(CLASS, 'class', 1:1)
    Token(ID, 'Main', 1:7)
    Token(LBRACE, '{', 1:12)
    Token(RBRACE, '}', 1:14)
    Token(EOF, '', 1:15)

Or use the command-line tool:
    $ mjlex Factorial.java
    $ mjlex --sample
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from minijava.errors import MiniJavaError, SourceLocation
from minijava.lexer import (
    Lexer,
    LexerOptions,
    Token,
    TokenType,
    KEYWORDS,
    tokenize,
    LexicalError,
    LexicalErrorReport,
    InvalidCharacterError,
    UnterminatedCommentError,
    DiagnosticCollector,
)

__all__ = [
    "__version__",
    # Lexer
    "Lexer",
    "LexerOptions",
    "Token",
    "TokenType",
    "KEYWORDS",
    "tokenize",
    # Exception hierarchy
    "MiniJavaError",
    "SourceLocation",
    "LexicalError",
    "LexicalErrorReport",
    "InvalidCharacterError",
    "UnterminatedCommentError",
    "DiagnosticCollector",
]
