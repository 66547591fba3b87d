"""
Cursor and viewport model for the quill text editor.

The cursor lives in buffer coordinates (cx = column, cy = row). The viewport
maps buffer rows onto the screen: the last screen row is reserved for the
status line, the rest are body rows starting at `row_offset`.
"""

LEFT = "left"
DOWN = "down"
UP = "up"
RIGHT = "right"

# Normal mode movement keys
DIRECTION_KEYS = {
    ord('h'): LEFT,
    ord('j'): DOWN,
    ord('k'): UP,
    ord('l'): RIGHT,
}

# Used when the terminal cannot report its size
FALLBACK_SIZE = (80, 24)


class Cursor:
    """Cursor position inside a Buffer."""
    def __init__(self, cx: int = 0, cy: int = 0):
        self.cx = cx
        self.cy = cy

    def move(self, direction: str, buf):
        """Move one step; moves past a boundary are ignored. The column is clamped afterwards."""
        if direction == LEFT:
            if self.cx > 0:
                self.cx -= 1
        elif direction == DOWN:
            if self.cy < buf.line_count() - 1:
                self.cy += 1
        elif direction == UP:
            if self.cy > 0:
                self.cy -= 1
        elif direction == RIGHT:
            if self.cx < buf.line_length(self.cy):
                self.cx += 1
        self.cx = min(self.cx, buf.line_length(self.cy))

    def clamp(self, buf):
        """Pull the cursor back inside the buffer after rows or characters were removed."""
        self.cy = max(0, min(self.cy, buf.line_count() - 1))
        self.cx = max(0, min(self.cx, buf.line_length(self.cy)))

    def __repr__(self):
        return f"Cursor(cx={self.cx}, cy={self.cy})"


class Viewport:
    """Visible window onto the buffer."""
    def __init__(self, screen_cols: int = FALLBACK_SIZE[0], screen_rows: int = FALLBACK_SIZE[1]):
        self.screen_cols = screen_cols
        self.screen_rows = screen_rows
        self.row_offset = 0

    @property
    def body_rows(self) -> int:
        # A 0 or 1 row terminal still gets one body row
        return max(1, self.screen_rows - 1)

    def resize(self, screen_cols: int, screen_rows: int):
        self.screen_cols = screen_cols
        self.screen_rows = screen_rows

    def scroll(self, cy: int):
        """Scroll just far enough to bring row `cy` into view."""
        if cy < self.row_offset:
            self.row_offset = cy
        if cy >= self.row_offset + self.body_rows:
            self.row_offset = cy - self.body_rows + 1
