"""
quill/ui/screen.py

Paints a RenderPlan onto the curses screen: body rows, the status bar, and the
cursor. The terminal cursor is hidden while the frame is drawn and everything
is pushed out with a single refresh, so the update doesn't flicker.
"""
import curses
import unicodedata

from wcwidth import wcwidth

from quill import logger

def cell_width(ch):
    # non-printing characters report -1; they take no cell
    return max(0, wcwidth(ch))

def visible_char(ch):
    # curses rejects NUL and would act on other control characters
    return "?" if unicodedata.category(ch) == "Cc" else ch

def clip_line(text, width):
    """Trim a string to at most `width` screen cells, showing control characters as '?'."""
    out = []
    used = 0
    for ch in map(visible_char, text):
        cells = cell_width(ch)
        if used + cells > width:
            break
        out.append(ch)
        used += cells
    return "".join(out)

def pad_line(text, width):
    """Pad or trim a string to match the visual width."""
    clipped = clip_line(text, width)
    return clipped + " " * (width - sum(cell_width(ch) for ch in clipped))

def set_cursor_visibility(visibility: int):
    try:
        curses.curs_set(visibility)
    except curses.error:
        # Some terminals can't hide the cursor
        pass

def draw_status_bar(stdscr, y, width, plan):
    """Draw the status bar; a highlighted bar fills the whole row in reverse video."""
    if width <= 0:
        return
    if not plan.status_highlighted:
        logger.safe_addstr(stdscr, y, 0, clip_line(plan.status, width))
        return
    text = pad_line(plan.status, width)
    # addstr can't write the bottom-right cell without erroring, so insert the last one
    logger.safe_addstr(stdscr, y, 0, text[:-1], curses.A_REVERSE)
    logger.safe_insstr(stdscr, y, width - cell_width(text[-1]), text[-1], curses.A_REVERSE)

def display(stdscr, plan):
    """Re-draw the entire screen from a RenderPlan."""
    height, width = stdscr.getmaxyx()
    set_cursor_visibility(0)
    stdscr.erase()

    body_height = max(0, min(len(plan.lines), height - 1))
    for y in range(body_height):
        logger.safe_addstr(stdscr, y, 0, clip_line(plan.lines[y], width))

    draw_status_bar(stdscr, max(0, height - 1), width, plan)

    cursor_y, cursor_x = plan.cursor
    try:
        stdscr.move(min(cursor_y, max(0, height - 1)), min(cursor_x, max(0, width - 1)))
    except curses.error:
        pass
    set_cursor_visibility(1)
    stdscr.refresh()
