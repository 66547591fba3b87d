"""
Buffer module for the quill text editor.

Defines the Buffer class holding the document as a list of lines, with the
character- and line-level edits the editor performs (insert, delete, split, join).
The buffer always holds at least one line; an empty document is [""].
"""

def split_text(text: str) -> list:
    """
    Split file contents into lines at newlines only. A final newline adds no
    extra line and the carriage return of a CRLF ending is dropped. Any other
    character stays in its line, including form feeds and lone carriage returns.
    """
    pieces = text.split("\n")
    if text.endswith("\n"):
        pieces.pop()
    return [p[:-1] if p.endswith("\r") else p for p in pieces]

class Buffer:
    """Represents a text buffer (file content) with editing operations."""
    def __init__(self, filename: str = None, lines=None):
        self.filename = filename  # Path to file or None for an unnamed buffer
        self.lines = list(lines) if lines is not None else [""]

        # there's always at least one line, even if lines=[]
        if not self.lines:
            self.lines = [""]

    @classmethod
    def from_text(cls, filename: str, text: str) -> "Buffer":
        """Build a buffer from raw file contents."""
        return cls(filename, split_text(text))

    def line_count(self) -> int:
        return len(self.lines)

    def line_length(self, row: int) -> int:
        return len(self.lines[row])

    def insert_char(self, row: int, col: int, ch: str):
        """Insert `ch` at `col` in `row`; a column at or past the end appends."""
        line = self.lines[row]
        if col >= len(line):
            self.lines[row] = line + ch
        else:
            self.lines[row] = line[:col] + ch + line[col:]

    def delete_char(self, row: int, col: int):
        """Delete the character at `col` in `row`. Out-of-range columns are ignored."""
        line = self.lines[row]
        if 0 <= col < len(line):
            self.lines[row] = line[:col] + line[col + 1:]

    def split_line(self, row: int, col: int):
        """Split `row` at `col`, moving the remainder to a new line below."""
        line = self.lines[row]
        self.lines[row] = line[:col]
        self.lines.insert(row + 1, line[col:])

    def join_with_previous(self, row: int) -> int:
        """
        Remove `row` and append its content to the line above.
        Returns the column where the two lines meet (the previous line's
        length before the join). Row 0 has nothing above it and is left alone.
        """
        if row <= 0:
            return 0
        join_point = len(self.lines[row - 1])
        current = self.lines.pop(row)
        self.lines[row - 1] += current
        return join_point

    def to_text(self) -> str:
        """Serialize the document: lines joined by a single newline."""
        return "\n".join(self.lines)
