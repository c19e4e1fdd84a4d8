"""
MiniJava Lexer
==============

Lexical analysis for the MiniJava teaching language: source text in,
an ordered list of located tokens out.

Pipeline
--------
    Source → Cursor → Lexer.next_token() → Token ... → EOF

Usage
-----
>>> from minijava.lexer import tokenize
>>> [str(t) for t in tokenize("123")]
["Token(INTEGER_LITERAL, '123', 1:1)", "Token(EOF, '', 1:4)"]
"""

from minijava.lexer.cursor import Cursor, CursorState, END_OF_INPUT
from minijava.lexer.errors import (
    LexicalError,
    LexicalErrorReport,
    InvalidCharacterError,
    UnterminatedCommentError,
    DiagnosticCollector,
)
from minijava.lexer.keywords import KEYWORDS, lookup_keyword
from minijava.lexer.options import LexerOptions
from minijava.lexer.scanner import Lexer, tokenize
from minijava.lexer.tokens import (
    Token,
    TokenType,
    KEYWORD_TYPES,
    OPERATOR_TYPES,
    DELIMITER_TYPES,
)

__all__ = [
    # Scanner
    "Lexer",
    "tokenize",
    "LexerOptions",
    # Cursor
    "Cursor",
    "CursorState",
    "END_OF_INPUT",
    # Tokens
    "Token",
    "TokenType",
    "KEYWORDS",
    "KEYWORD_TYPES",
    "OPERATOR_TYPES",
    "DELIMITER_TYPES",
    "lookup_keyword",
    # Errors
    "LexicalError",
    "LexicalErrorReport",
    "InvalidCharacterError",
    "UnterminatedCommentError",
    "DiagnosticCollector",
]
