"""
Main entry point and editor context for the quill text editor.
"""
import curses
import sys

from quill import buffer, config, logger, render, storage
from quill.cursor import Cursor, Viewport
from quill.modes import NormalMode
from quill.terminal import InputClosedError, Terminal
import quill.ui.input as ui_input
import quill.ui.screen as ui_screen

class EditorContext:
    """
    Holds the whole state of the editor: the buffer, cursor, viewport, mode and
    status line. Handlers receive it explicitly; nothing lives in module globals.
    """
    def __init__(self, settings=None, size=None, buf=None):
        self.settings = settings or config.Settings()

        self.buffer = buf or buffer.Buffer()
        self.cursor = Cursor()
        self.viewport = Viewport(*size) if size else Viewport()

        # Editor modes: NormalMode, InsertMode, CommandMode(buffer)
        self.mode = NormalMode()

        self.status_message = self.settings.welcome

    def open_file(self, filename: str):
        """
        Load `filename` into the buffer. A missing or unreadable file starts a new,
        empty document under that name.
        """
        text = storage.load_text(filename)
        if text is None:
            self.buffer = buffer.Buffer(filename)
            self.status_message = f"New file: {filename}"
            logger.log(f"new file: {filename}")
        else:
            self.buffer = buffer.Buffer.from_text(filename, text)
            self.status_message = f"Opened: {filename}"
            logger.log(f"file opened: {filename} ({len(self.buffer.lines)} lines)")
        self.cursor = Cursor()
        self.viewport.row_offset = 0

    def scroll(self):
        """Keep the cursor inside the buffer and the viewport on the cursor."""
        self.cursor.clamp(self.buffer)
        self.viewport.scroll(self.cursor.cy)

def event_loop(context, terminal, draw):
    """
    Run until a command asks to stop: redraw, read one byte, dispatch it.
    `draw` receives each RenderPlan. InputClosedError propagates to the caller.
    """
    terminal.clear()
    while True:
        context.viewport.resize(*terminal.size())
        context.scroll()
        draw(render.plan_frame(context))

        key = terminal.read_byte()
        if key is None:
            continue
        if not ui_input.handle_key(context, key):
            break
    terminal.clear()

def main(stdscr, filename=None, settings=None):
    terminal = Terminal(stdscr)
    terminal.setup()
    context = EditorContext(settings, terminal.size())

    # If started with a filename argument, try to open it
    if filename:
        context.open_file(filename)

    event_loop(context, terminal, lambda plan: ui_screen.display(stdscr, plan))
    logger.log("Editor exited.")

def run():
    """
    Start the editor inside curses.wrapper(), which restores the terminal on
    every way out, including errors.
    """
    settings = config.load_settings()
    logger.configure(settings.log_file)
    filename = sys.argv[1] if len(sys.argv) > 1 else None
    logger.log(f"Editor started ({filename or 'no file'}).")
    try:
        curses.wrapper(main, filename, settings)
    except InputClosedError as e:
        logger.log(f"input closed: {e}")
        print(f"quill: input closed: {e}", file=sys.stderr)
        sys.exit(1)
    except curses.error as e:
        logger.log(f"terminal error: {e}")
        print(f"quill: terminal error: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    run()
