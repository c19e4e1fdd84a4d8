"""
MiniJava reserved words.

The table is consulted once per identifier lexeme, with an exact,
case-sensitive match. ``String`` is a keyword, ``string`` is not.

The ``System.out.println`` entry can never match: the identifier scanner
stops at '.', so that source text lexes as ID DOT ID DOT ID. The entry is
kept so the table lists every spelling that maps to PRINT; recognizing the
print statement is left to the parser.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from minijava.lexer.tokens import TokenType


KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    # Declarations
    "class": TokenType.CLASS,
    "public": TokenType.PUBLIC,
    "static": TokenType.STATIC,
    "void": TokenType.VOID,
    "main": TokenType.MAIN,
    "String": TokenType.STRING,
    "extends": TokenType.EXTENDS,
    "return": TokenType.RETURN,

    # Types
    "int": TokenType.INT,
    "boolean": TokenType.BOOLEAN,

    # Control flow
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "while": TokenType.WHILE,

    # Statements and expressions
    "System.out.println": TokenType.PRINT,
    "length": TokenType.LENGTH,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "this": TokenType.THIS,
    "new": TokenType.NEW,
})


def lookup_keyword(text: str) -> Optional[TokenType]:
    """Return the keyword kind for ``text``, or None for a plain identifier."""
    return KEYWORDS.get(text)
