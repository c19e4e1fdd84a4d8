"""
Character cursor over a MiniJava source buffer.

The cursor is the only code that moves through the source. It keeps the
current offset, line and column in step, and reports the end of input as
the empty string (END_OF_INPUT) rather than raising.
"""

from typing import NamedTuple

from minijava.errors import SourceLocation


# Returned by peek()/advance() once the buffer is exhausted.
END_OF_INPUT = ""


class CursorState(NamedTuple):
    """Snapshot of a cursor position, used to rewind after lookahead."""
    position: int
    line: int
    column: int
    line_start: int


class Cursor:
    """
    Tracks the scanning position within a source string.

    Attributes:
        source: The text being scanned
        position: Offset of the current character (0-indexed)
        line: Current line number (1-indexed)
        column: Current column number (1-indexed)
    """

    def __init__(self, source: str, line: int = 1, column: int = 1):
        self.source = source
        self.position = 0
        self.line = line
        self.column = column

        # Offset where the current line starts, for diagnostics
        self._line_start = 0

    @property
    def current(self) -> str:
        """The character under the cursor, or END_OF_INPUT."""
        return self.peek()

    def at_end(self) -> bool:
        """Check if the whole source has been consumed."""
        return self.position >= len(self.source)

    def peek(self, offset: int = 0) -> str:
        """
        Look at the character at position + offset without consuming it.

        Returns END_OF_INPUT for any offset outside the buffer.
        """
        pos = self.position + offset
        if pos < 0 or pos >= len(self.source):
            return END_OF_INPUT
        return self.source[pos]

    def advance(self) -> str:
        """
        Consume and return the current character.

        A newline moves to column 1 of the next line; any other character
        moves one column right. At end of input nothing changes.
        """
        if self.at_end():
            return END_OF_INPUT

        char = self.source[self.position]
        self.position += 1

        if char == "\n":
            self.line += 1
            self.column = 1
            self._line_start = self.position
        else:
            self.column += 1

        return char

    def location(self, filename: str = "<input>") -> SourceLocation:
        """Return the current position as a SourceLocation."""
        return SourceLocation(filename, self.line, self.column)

    def current_line_text(self) -> str:
        """Get the text of the line the cursor is on, without its newline."""
        line_end = self.source.find("\n", self._line_start)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[self._line_start:line_end]

    def save(self) -> CursorState:
        return CursorState(self.position, self.line, self.column, self._line_start)

    def restore(self, state: CursorState) -> None:
        self.position, self.line, self.column, self._line_start = state
