"""
Logger module for the quill text editor.

A plain append-only log file for debugging and error tracking, plus safe wrappers
around curses output calls that log curses errors instead of raising them.
"""
import curses
import datetime

# Log file path; replaced by the configured one at startup
LOG_FILE_PATH = "quill.log"

def configure(path: str) -> None:
    """Point the logger at a different log file."""
    global LOG_FILE_PATH
    LOG_FILE_PATH = path

def log(message: str) -> None:
    """Append a timestamped message to the log file."""
    try:
        with open(LOG_FILE_PATH, 'a', encoding='utf-8') as f:
            timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            f.write(f"[{timestamp}] {message}\n")
    except OSError:
        # An unwritable log must never take the editor down.
        pass

# curses.error covers writes outside the window; ValueError covers text
# curses refuses outright, such as an embedded NUL
DRAW_ERRORS = (curses.error, ValueError)

def safe_addstr(window, y: int, x: int, text: str, attr: int = 0) -> None:
    """
    Safely add a string to the curses window at the given position.
    A failed write is logged and skipped; drawing never stops the editor.
    """
    try:
        window.addstr(y, x, text, attr)
    except DRAW_ERRORS as e:
        log(f"addstr failed at ({y},{x}) for {text!r}: {e}")

def safe_insstr(window, y: int, x: int, text: str, attr: int = 0) -> None:
    """
    Insert a string without advancing the cursor, so the bottom-right cell
    can be filled. Failures are logged like safe_addstr's.
    """
    try:
        window.insstr(y, x, text, attr)
    except DRAW_ERRORS as e:
        log(f"insstr failed at ({y},{x}) for {text!r}: {e}")
