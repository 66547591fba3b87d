"""
Terminal access for the quill text editor: blocking byte input and screen size.

Raw mode itself is owned by curses.wrapper() in quill.__main__; this class only
wraps the window it hands us.
"""
import curses

from quill.cursor import FALLBACK_SIZE


class InputClosedError(EOFError):
    """The terminal stopped delivering input."""


class Terminal:
    def __init__(self, stdscr):
        self.stdscr = stdscr

    def setup(self):
        """Deliver keys as raw bytes: no keypad translation, no echo, no ESC delay."""
        self.stdscr.keypad(False)
        curses.noecho()
        curses.cbreak()

    def size(self) -> tuple:
        """Return (columns, rows), or the 80x24 fallback if curses can't tell."""
        try:
            rows, cols = self.stdscr.getmaxyx()
        except curses.error:
            return FALLBACK_SIZE
        if rows <= 0 or cols <= 0:
            return FALLBACK_SIZE
        return cols, rows

    def read_byte(self):
        """
        Block until the next input byte and return it.
        Returns None when there is nothing to dispatch (e.g. the terminal was
        resized), raises InputClosedError when input is gone.
        """
        try:
            key = self.stdscr.getch()
        except curses.error as e:
            raise InputClosedError(str(e)) from e
        if key == curses.KEY_RESIZE:
            curses.update_lines_cols()
            return None
        if key < 0:
            raise InputClosedError("no more input")
        if key > 255:
            # not a byte (keypad is off, so only stray curses codes end up here)
            return None
        return key

    def clear(self):
        self.stdscr.erase()
        self.stdscr.refresh()
