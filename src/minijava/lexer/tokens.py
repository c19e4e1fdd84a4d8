"""
MiniJava Token Definitions
==========================

Token kinds and the immutable token record produced by the lexer.

The kind set is closed: 19 keywords, identifiers and integer literals,
8 operators, 8 delimiters, and the two special kinds EOF and ERROR.
"""

from dataclasses import dataclass
from enum import Enum, auto

from minijava.errors import SourceLocation


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Token types for the MiniJava language."""

    # === Keywords ===
    CLASS = auto()          # class
    PUBLIC = auto()         # public
    STATIC = auto()         # static
    VOID = auto()           # void
    MAIN = auto()           # main
    STRING = auto()         # String
    EXTENDS = auto()        # extends
    RETURN = auto()         # return
    INT = auto()            # int
    BOOLEAN = auto()        # boolean
    IF = auto()             # if
    ELSE = auto()           # else
    WHILE = auto()          # while
    PRINT = auto()          # System.out.println
    LENGTH = auto()         # length
    TRUE = auto()           # true
    FALSE = auto()          # false
    THIS = auto()           # this
    NEW = auto()            # new

    # === Identifiers and Literals ===
    ID = auto()
    INTEGER_LITERAL = auto()

    # === Operators ===
    AND = auto()            # &&
    LESS_THAN = auto()      # <
    PLUS = auto()           # +
    MINUS = auto()          # -
    TIMES = auto()          # *
    NOT = auto()            # !
    EQUALS = auto()         # =
    DOT = auto()            # .

    # === Delimiters ===
    LPAREN = auto()         # (
    RPAREN = auto()         # )
    LBRACE = auto()         # {
    RBRACE = auto()         # }
    LBRACKET = auto()       # [
    RBRACKET = auto()       # ]
    SEMICOLON = auto()      # ;
    COMMA = auto()          # ,

    # === Special ===
    EOF = auto()            # End of input
    ERROR = auto()          # Unrecognized character


KEYWORD_TYPES = frozenset({
    TokenType.CLASS,
    TokenType.PUBLIC,
    TokenType.STATIC,
    TokenType.VOID,
    TokenType.MAIN,
    TokenType.STRING,
    TokenType.EXTENDS,
    TokenType.RETURN,
    TokenType.INT,
    TokenType.BOOLEAN,
    TokenType.IF,
    TokenType.ELSE,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.LENGTH,
    TokenType.TRUE,
    TokenType.FALSE,
    TokenType.THIS,
    TokenType.NEW,
})

OPERATOR_TYPES = frozenset({
    TokenType.AND,
    TokenType.LESS_THAN,
    TokenType.PLUS,
    TokenType.MINUS,
    TokenType.TIMES,
    TokenType.NOT,
    TokenType.EQUALS,
    TokenType.DOT,
})

DELIMITER_TYPES = frozenset({
    TokenType.LPAREN,
    TokenType.RPAREN,
    TokenType.LBRACE,
    TokenType.RBRACE,
    TokenType.LBRACKET,
    TokenType.RBRACKET,
    TokenType.SEMICOLON,
    TokenType.COMMA,
})


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from MiniJava source code.

    Attributes:
        type: The TokenType classification
        text: The exact lexeme consumed (empty for EOF)
        line: Line of the token's first character (1-indexed)
        column: Column of the token's first character (1-indexed)
        filename: Name of the source file
    """
    type: TokenType
    text: str
    line: int
    column: int
    filename: str = "<input>"

    def __str__(self) -> str:
        """Printable form used by the command line tool and in tests."""
        return f"Token({self.type.name}, {self.text!r}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    def is_keyword(self) -> bool:
        return self.type in KEYWORD_TYPES

    def is_operator(self) -> bool:
        return self.type in OPERATOR_TYPES

    def is_delimiter(self) -> bool:
        return self.type in DELIMITER_TYPES

    def is_error(self) -> bool:
        return self.type is TokenType.ERROR

    def is_eof(self) -> bool:
        return self.type is TokenType.EOF
