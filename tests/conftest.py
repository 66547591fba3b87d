import pytest

from quill import logger
from quill.__main__ import EditorContext
from quill.buffer import Buffer
from quill.config import Settings
from quill.ui.input import handle_key


@pytest.fixture(autouse=True)
def log_to_tmp(tmp_path, monkeypatch):
    # keep test runs from writing quill.log into the working directory
    monkeypatch.setattr(logger, "LOG_FILE_PATH", str(tmp_path / "quill.log"))


def make_context(lines=None, size=(80, 24), filename=None):
    return EditorContext(Settings(), size, Buffer(filename, lines))


def feed(context, keys):
    """Send a string (or list of byte values) through the key handler; return the last signal."""
    running = True
    for key in keys:
        running = handle_key(context, ord(key) if isinstance(key, str) else key)
    return running
