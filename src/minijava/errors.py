"""
MiniJava Error Hierarchy
========================

This module defines the root of the exception hierarchy for the MiniJava
toolkit. All exceptions inherit from MiniJavaError, allowing callers to
catch every toolkit error with a single except clause if desired.

Exception Hierarchy
-------------------
MiniJavaError (base)
└── LexicalError (see minijava.lexer.errors)
    ├── InvalidCharacterError - unrecognized character in source
    ├── UnterminatedCommentError - block comment runs to end of input
    └── LexicalErrorReport - aggregate report of several errors

Note that the lexer itself never raises for malformed input: it emits
ERROR tokens and keeps going. These exceptions exist for callers (the
command line tool, a parser) that decide an ERROR token is fatal.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass


# =============================================================================
# Base Exception Class
# =============================================================================

class MiniJavaError(Exception):
    """
    Base exception for all MiniJava toolkit errors.

        try:
            report_errors(tokens)
        except MiniJavaError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"
