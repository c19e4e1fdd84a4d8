"""
MiniJava Lexer (Tokenizer)
==========================

This module implements the lexer for the MiniJava teaching language.
It converts source text into a stream of tokens for a parser.

Token Categories
----------------
- Keywords: class, public, static, void, main, String, extends, return,
  int, boolean, if, else, while, length, true, false, this, new
- Identifiers: letter or underscore, then letters, digits, underscores
- Integer literals: unsigned decimal digit sequences, kept as text
- Operators: && < + - * ! = .
- Delimiters: ( ) { } [ ] ; ,

Comments
--------
- Single-line: // comment
- Multi-line: /* comment */ (not nested; an unclosed comment runs to
  the end of input)

Errors
------
The lexer never raises on bad input. A character that starts no token
becomes an ERROR token holding just that character, and scanning resumes
with the next one. Every ERROR token is also recorded in
``Lexer.diagnostics`` for callers that prefer formatted reports.

Example Usage
-------------
>>> from minijava.lexer import Lexer
>>> for token in Lexer("if(x<10){}").tokenize():
...     print(token)
Token(IF, 'if', 1:1)
Token(LPAREN, '(', 1:3)
Token(ID, 'x', 1:4)
Token(LESS_THAN, '<', 1:5)
Token(INTEGER_LITERAL, '10', 1:6)
Token(RPAREN, ')', 1:8)
Token(LBRACE, '{', 1:9)
Token(RBRACE, '}', 1:10)
Token(EOF, '', 1:11)
"""

import logging
from typing import Iterator, List, Optional

from minijava.lexer.cursor import Cursor
from minijava.lexer.errors import (
    DiagnosticCollector,
    InvalidCharacterError,
    UnterminatedCommentError,
)
from minijava.lexer.keywords import lookup_keyword
from minijava.lexer.options import LexerOptions
from minijava.lexer.tokens import Token, TokenType


logger = logging.getLogger(__name__)


# Symbols made of exactly one character
SINGLE_CHAR_SYMBOLS = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.TIMES,
    "!": TokenType.NOT,
    "<": TokenType.LESS_THAN,
    "=": TokenType.EQUALS,
}


def _is_digit(char: str) -> bool:
    return char.isdecimal()


def _is_ident_start(char: str) -> bool:
    return char.isalpha() or char == "_"


def _is_ident_char(char: str) -> bool:
    return char.isalpha() or char.isdecimal() or char == "_"


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes MiniJava source code.

    Tokens can be pulled one at a time with next_token(), produced lazily
    by iterating over the lexer, or collected with tokenize(). All three
    give the same sequence, ending with a single EOF token.

    Usage:
        lexer = Lexer(source_text, "Factorial.java")
        tokens = lexer.tokenize()

    Attributes:
        source: The source code being tokenized
        filename: Name of the source (for tokens and diagnostics)
        options: The LexerOptions in effect
        diagnostics: Errors and warnings found so far
    """

    def __init__(
        self,
        source: str,
        filename: Optional[str] = None,
        options: Optional[LexerOptions] = None,
    ):
        """
        Initialize the lexer with source code.

        Args:
            source: The MiniJava source code to tokenize
            filename: Name of the source; overrides options.filename
            options: Lexer configuration (uses defaults if None)
        """
        self.options = options or LexerOptions()
        self.source = source
        self.filename = filename if filename is not None else self.options.filename
        self.diagnostics = DiagnosticCollector(max_errors=self.options.max_errors)
        self._cursor = Cursor(source)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens lazily, stopping after the EOF token."""
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    # =========================================================================
    # Token Stream
    # =========================================================================

    def tokenize(self) -> List[Token]:
        """
        Scan the rest of the source into a list of tokens.

        Returns:
            All remaining tokens, the last one being EOF
        """
        tokens = list(self)
        logger.debug(
            f"{self.filename}: {len(tokens)} tokens, "
            f"{self.diagnostics.error_count()} errors"
        )
        return tokens

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Once the input is exhausted every call returns an EOF token at
        the final position.
        """
        cursor = self._cursor

        while not cursor.at_end():
            char = cursor.current

            if char.isspace():
                self.skip_whitespace()
                continue

            if char == "/" and cursor.peek(1) in ("/", "*"):
                self.skip_comment()
                continue

            start_line = cursor.line
            start_column = cursor.column

            if _is_digit(char):
                return self.scan_integer()

            if _is_ident_start(char):
                return self.scan_identifier_or_keyword()

            token = self.scan_symbol()
            if token is not None:
                return token

            # Nothing matched: one ERROR token per offending character
            return self._error_token(start_line, start_column)

        return self._make_token(TokenType.EOF, "", cursor.line, cursor.column)

    def peek_token(self) -> Token:
        """
        Return the next token without consuming it.

        Cursor position and diagnostics are left untouched.
        """
        saved_state = self._cursor.save()
        saved_diagnostics = self.diagnostics
        self.diagnostics = DiagnosticCollector(max_errors=self.options.max_errors)

        try:
            return self.next_token()
        finally:
            self._cursor.restore(saved_state)
            self.diagnostics = saved_diagnostics

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def skip_whitespace(self) -> None:
        """Skip spaces, tabs, newlines and any other whitespace."""
        while self._cursor.current.isspace():
            self._cursor.advance()

    def skip_comment(self) -> None:
        """
        Skip a // or /* */ comment starting at the cursor.

        Does nothing if the cursor is not on a comment opener. A line
        comment stops before its newline. A block comment that is never
        closed consumes the rest of the input.
        """
        cursor = self._cursor

        if cursor.current != "/":
            return

        if cursor.peek(1) == "/":
            while not cursor.at_end() and cursor.current != "\n":
                cursor.advance()
            return

        if cursor.peek(1) != "*":
            return

        start = cursor.location(self.filename)
        start_line_text = cursor.current_line_text()

        cursor.advance()  # consume /
        cursor.advance()  # consume *

        while not cursor.at_end():
            if cursor.current == "*" and cursor.peek(1) == "/":
                cursor.advance()  # consume *
                cursor.advance()  # consume /
                return
            cursor.advance()

        logger.debug(f"{start}: block comment runs to end of input")
        if self.options.strict_comments:
            error = UnterminatedCommentError(start, start_line_text)
            self.diagnostics.add_warning(error.message, error.location)

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def scan_integer(self) -> Token:
        """
        Scan an unsigned decimal integer literal.

        The digits are kept as text; a leading '-' is a separate MINUS token.
        """
        cursor = self._cursor
        start_line = cursor.line
        start_column = cursor.column

        chars = []
        while _is_digit(cursor.current):
            chars.append(cursor.advance())

        return self._make_token(
            TokenType.INTEGER_LITERAL, "".join(chars), start_line, start_column
        )

    def scan_identifier_or_keyword(self) -> Token:
        """
        Scan an identifier or keyword.

        The caller has already checked that the current character is a
        letter or underscore. Keywords are found by exact lookup.
        """
        cursor = self._cursor
        start_line = cursor.line
        start_column = cursor.column

        chars = []
        while _is_ident_char(cursor.current):
            chars.append(cursor.advance())

        name = "".join(chars)
        token_type = lookup_keyword(name) or TokenType.ID
        return self._make_token(token_type, name, start_line, start_column)

    def scan_symbol(self) -> Optional[Token]:
        """
        Scan an operator or delimiter.

        Returns:
            The token, or None (with nothing consumed) when the current
            character is not a MiniJava symbol. A lone '&' is not a symbol.
        """
        cursor = self._cursor
        start_line = cursor.line
        start_column = cursor.column
        char = cursor.current

        if char == "&":
            if cursor.peek(1) != "&":
                return None
            cursor.advance()
            cursor.advance()
            return self._make_token(TokenType.AND, "&&", start_line, start_column)

        token_type = SINGLE_CHAR_SYMBOLS.get(char)
        if token_type is None:
            return None

        cursor.advance()
        return self._make_token(token_type, char, start_line, start_column)

    # =========================================================================
    # Token Creation
    # =========================================================================

    def _make_token(
        self,
        token_type: TokenType,
        text: str,
        line: int,
        column: int,
    ) -> Token:
        return Token(
            type=token_type,
            text=text,
            line=line,
            column=column,
            filename=self.filename,
        )

    def _error_token(self, start_line: int, start_column: int) -> Token:
        """Consume the current character and return it as an ERROR token."""
        source_line = self._cursor.current_line_text()
        char = self._cursor.advance()

        token = self._make_token(TokenType.ERROR, char, start_line, start_column)
        logger.debug(f"{token.location}: invalid character {char!r}")
        self.diagnostics.add(InvalidCharacterError(char, token.location, source_line))
        return token


def tokenize(
    source: str,
    filename: Optional[str] = None,
    options: Optional[LexerOptions] = None,
) -> List[Token]:
    """
    Tokenize MiniJava source in one call.

    >>> [t.type.name for t in tokenize("a && b")]
    ['ID', 'AND', 'ID', 'EOF']
    """
    return Lexer(source, filename, options).tokenize()
