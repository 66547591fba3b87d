"""
File loading and saving for the quill text editor.
"""
import os
import shutil
import tempfile

from quill import logger

def load_text(path: str):
    """
    Read `path` and return its contents untouched (no newline translation),
    or None if the file is missing or unreadable.
    """
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.log(f"error opening file {path}: {e}")
        return None

def save_text(path: str, text: str) -> int:
    """
    Write `text` to `path`. The data goes to a temp file next to the real target
    and is then moved over it, so a reader never sees a half-written file.
    Symlinks are followed and an existing file keeps its permission bits.
    Returns the number of bytes written; raises OSError on failure.
    """
    data = text.encode('utf-8')
    target = os.path.realpath(path)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{os.path.basename(target)}.",
                                    suffix=".tmp",
                                    dir=os.path.dirname(target))
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
        if os.path.exists(target):
            shutil.copymode(target, tmp_name)
        os.replace(tmp_name, target)
    except OSError:
        try:
            os.remove(tmp_name)
        except OSError:
            pass
        raise
    return len(data)
