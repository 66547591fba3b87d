import sys

import pytest

from conftest import make_context
from quill import __main__ as app
from quill import storage
from quill.modes import NormalMode
from quill.terminal import InputClosedError


class ScriptedTerminal:
    """Stands in for the curses terminal: replays keys, records clears."""
    def __init__(self, keys, size=(10, 4)):
        self.keys = list(keys)
        self._size = size
        self.clears = 0

    def size(self):
        return self._size

    def read_byte(self):
        if not self.keys:
            raise InputClosedError("script exhausted")
        key = self.keys.pop(0)
        if key is None:
            return None
        return ord(key) if isinstance(key, str) else key

    def clear(self):
        self.clears += 1


def test_loop_draws_each_frame_and_stops_on_quit():
    ctx = make_context(["abc"])
    terminal = ScriptedTerminal(":q\r")
    frames = []
    app.event_loop(ctx, terminal, frames.append)
    # one frame before each of the three keys
    assert len(frames) == 3
    assert frames[-1].status == ":q"
    assert terminal.clears == 2


def test_loop_picks_up_terminal_size():
    ctx = make_context(["abc"], size=(80, 24))
    terminal = ScriptedTerminal(":q\r", size=(20, 6))
    frames = []
    app.event_loop(ctx, terminal, frames.append)
    assert ctx.viewport.screen_cols == 20
    assert len(frames[0].lines) == 5
    assert len(frames[0].status) == 20


def test_loop_redraws_on_resize_without_dispatching():
    ctx = make_context(["abc"])
    terminal = ScriptedTerminal([None, ":", "q", "\r"])
    frames = []
    app.event_loop(ctx, terminal, frames.append)
    assert len(frames) == 4
    assert ctx.mode == NormalMode()


def test_closed_input_propagates():
    ctx = make_context()
    with pytest.raises(InputClosedError):
        app.event_loop(ctx, ScriptedTerminal("ihello"), lambda plan: None)
    assert ctx.buffer.lines == ["hello"]


def test_editing_session_end_to_end(monkeypatch):
    saved = {}

    def fake_save(path, text):
        saved[path] = text
        return len(text)

    monkeypatch.setattr(storage, "save_text", fake_save)
    ctx = make_context(filename="out.txt")
    keys = "ihi\rthere\x1b:wq\r"
    app.event_loop(ctx, ScriptedTerminal(keys), lambda plan: None)
    assert saved["out.txt"] == "hi\nthere"


def test_open_existing_file(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("one\ntwo\n", encoding="utf-8")
    ctx = app.EditorContext()
    ctx.open_file(str(path))
    assert ctx.buffer.lines == ["one", "two"]
    assert ctx.buffer.filename == str(path)
    assert ctx.status_message == f"Opened: {path}"


def test_open_file_keeps_form_feeds_and_crlf_endings(tmp_path):
    path = tmp_path / "paged.txt"
    path.write_bytes(b"page one\x0cpage two\r\nend\r\n")
    ctx = app.EditorContext()
    ctx.open_file(str(path))
    assert ctx.buffer.lines == ["page one\x0cpage two", "end"]


def test_open_missing_file_starts_new_named_document(tmp_path):
    path = tmp_path / "new.txt"
    ctx = app.EditorContext()
    ctx.open_file(str(path))
    assert ctx.buffer.lines == [""]
    assert ctx.buffer.filename == str(path)
    assert ctx.status_message == f"New file: {path}"


def test_new_context_shows_welcome():
    ctx = app.EditorContext()
    assert ctx.status_message == "WELCOME! :q to quit"
    assert (ctx.viewport.screen_cols, ctx.viewport.screen_rows) == (80, 24)


def test_scroll_clamps_cursor_first():
    ctx = make_context(["ab"], size=(10, 4))
    ctx.cursor.cx, ctx.cursor.cy = 9, 5
    ctx.scroll()
    assert (ctx.cursor.cx, ctx.cursor.cy) == (2, 0)
    assert ctx.viewport.row_offset == 0


def test_run_exits_with_status_one_when_input_closes(monkeypatch, tmp_path, capsys):
    def fake_wrapper(func, *args):
        raise InputClosedError("stdin closed")

    monkeypatch.setattr(app.curses, "wrapper", fake_wrapper)
    monkeypatch.setattr(app.config, "load_settings",
                        lambda: app.config.Settings(log_file=str(tmp_path / "q.log")))
    monkeypatch.setattr(sys, "argv", ["quill"])
    with pytest.raises(SystemExit) as exc:
        app.run()
    assert exc.value.code == 1
    assert "input closed" in capsys.readouterr().err


def test_run_passes_filename_to_main(monkeypatch, tmp_path):
    seen = {}

    def fake_wrapper(func, *args):
        seen["func"] = func
        seen["args"] = args

    monkeypatch.setattr(app.curses, "wrapper", fake_wrapper)
    monkeypatch.setattr(app.config, "load_settings",
                        lambda: app.config.Settings(log_file=str(tmp_path / "q.log")))
    monkeypatch.setattr(sys, "argv", ["quill", "doc.txt"])
    app.run()
    assert seen["func"] is app.main
    assert seen["args"][0] == "doc.txt"
