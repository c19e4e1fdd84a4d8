"""
MiniJava Lexer Errors
=====================

Exceptions and diagnostic collection for lexical analysis.

The lexer reports problems as data: an unrecognized character becomes an
ERROR token and an unterminated block comment is swallowed. The classes in
this module turn that data into readable diagnostics for callers that want
them, such as the ``mjlex --strict`` command.

Example:
    Factorial.java:3:17: error: invalid character '#' (0x23)
        int x = 1 # 2;
                  ^
    hint: remove the character or replace it with a valid operator
"""

from typing import List, Optional

from minijava.errors import MiniJavaError, SourceLocation


# =============================================================================
# Base Lexical Exception
# =============================================================================

class LexicalError(MiniJavaError):
    """
    Base exception for lexical errors in MiniJava source.

    Attributes:
        message: The error description
        location: Where in the source the error occurred
        hint: A suggestion for fixing the error
        source_line: The actual source text at the error location
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

            Main.java:5:12: error: invalid character '@' (0x40)
                int x = @;
                        ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class LexicalErrorReport(LexicalError):
    """
    Aggregate error containing several lexical errors.

    The message is an already formatted report from DiagnosticCollector
    and is passed through unchanged.
    """

    def _format_message(self) -> str:
        return self.message


class InvalidCharacterError(LexicalError):
    """
    Character that starts no MiniJava token.

    Produced for every ERROR token, e.g. '@', '#', or a lone '&'.
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        if char == "&":
            hint = "MiniJava only has the '&&' operator"
        else:
            hint = "remove the character or replace it with a valid operator"
        super().__init__(
            f"invalid character {char!r} (0x{ord(char):02X})",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class UnterminatedCommentError(LexicalError):
    """
    Block comment that is never closed.

    The lexer does not fail on this; with strict comment checking it is
    recorded as a warning pointing at the opening '/*'.
    """

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated block comment",
            location=location,
            hint="add closing */ to terminate the comment",
            source_line=source_line,
        )


# =============================================================================
# Diagnostic Collection
# =============================================================================

class DiagnosticCollector:
    """
    Collects lexical errors and warnings for batch reporting.

    Example:
        lexer = Lexer(source, "Main.java")
        tokens = lexer.tokenize()
        if lexer.diagnostics.has_errors():
            print(lexer.diagnostics.report())
    """

    def __init__(self, max_errors: int = 100):
        """
        Initialize the collector.

        Args:
            max_errors: Maximum errors to keep; further errors are only counted
        """
        self.errors: List[LexicalError] = []
        self.warnings: List[str] = []
        self.max_errors = max_errors
        self.suppressed = 0

    def add(self, error: LexicalError) -> None:
        """Add an error, or count it as suppressed once the limit is hit."""
        if self.should_stop():
            self.suppressed += 1
            return
        self.errors.append(error)

    def add_warning(self, message: str, location: Optional[SourceLocation] = None) -> None:
        """Add a warning message."""
        if location:
            self.warnings.append(f"{location}: warning: {message}")
        else:
            self.warnings.append(f"warning: {message}")

    def has_errors(self) -> bool:
        """Return True if any errors have been seen, including suppressed ones."""
        return self.error_count() > 0

    def should_stop(self) -> bool:
        """Return True if max_errors has been reached."""
        return len(self.errors) >= self.max_errors

    def error_count(self) -> int:
        """Return the number of errors seen, including suppressed ones."""
        return len(self.errors) + self.suppressed

    def warning_count(self) -> int:
        return len(self.warnings)

    def report(self) -> str:
        """Format all errors and warnings for display."""
        lines = []

        for error in self.errors:
            lines.append(str(error))
            lines.append("")

        for warning in self.warnings:
            lines.append(warning)

        if self.suppressed:
            lines.append(f"({self.suppressed} more errors not shown)")

        count = self.error_count()
        error_word = "error" if count == 1 else "errors"
        warning_word = "warning" if len(self.warnings) == 1 else "warnings"
        lines.append(f"\n{count} {error_word}, {len(self.warnings)} {warning_word}")

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all collected errors and warnings."""
        self.errors.clear()
        self.warnings.clear()
        self.suppressed = 0

    def raise_if_errors(self) -> None:
        """Raise a LexicalErrorReport if any errors were collected."""
        if self.has_errors():
            raise LexicalErrorReport(self.report())
