"""
Render planning for the quill text editor.

plan_frame() turns the editor context into a RenderPlan: the text of every body
row, the status line, and where the cursor should end up. It does no drawing;
ui.screen paints the plan with curses.
"""
from dataclasses import dataclass

from quill.modes import CommandMode


@dataclass
class RenderPlan:
    lines: list
    status: str
    status_highlighted: bool
    cursor: tuple  # (screen row, screen column), zero-based

    def one_based_cursor(self) -> tuple:
        """Cursor position for terminals that number rows and columns from 1."""
        row, col = self.cursor
        return row + 1, col + 1


def status_line(context) -> str:
    """Text of the bottom line for the current mode."""
    width = context.viewport.screen_cols
    if isinstance(context.mode, CommandMode):
        return f"{context.mode.label}{context.mode.buffer}"[:width]
    status = (f"{context.mode.label} | Pos: {context.cursor.cx},{context.cursor.cy}"
              f" | {context.status_message}")
    # Fill the whole row so the highlighted bar spans the screen
    return status[:width].ljust(width)


def plan_frame(context) -> RenderPlan:
    """Describe the next frame. Expects context.scroll() to have been called."""
    viewport = context.viewport
    lines = context.buffer.lines
    body = []
    for i in range(viewport.body_rows):
        row = viewport.row_offset + i
        if row < len(lines):
            body.append(lines[row][:viewport.screen_cols])
        else:
            body.append(context.settings.empty_line)

    cursor = (context.cursor.cy - viewport.row_offset, context.cursor.cx)
    return RenderPlan(
        lines=body,
        status=status_line(context),
        status_highlighted=not isinstance(context.mode, CommandMode),
        cursor=cursor,
    )
