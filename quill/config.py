"""
Configuration for the quill text editor.

Settings are read from a small key=value file:

    # ~/.config/quill/quill.conf
    log_file=/tmp/quill.log
    empty_line=~
    welcome=WELCOME! :q to quit

Unknown keys, blank lines and comments are ignored. A missing file gives the
defaults; an unreadable one gives the defaults and a log entry.
"""
import os
from dataclasses import dataclass

from quill import logger

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "quill")
CONFIG_PATH = os.path.join(CONFIG_DIR, "quill.conf")

# default settings
LOG_FILE_DEFAULT = "quill.log"
EMPTY_LINE_DEFAULT = "~"
WELCOME_DEFAULT = "WELCOME! :q to quit"


@dataclass
class Settings:
    log_file: str = LOG_FILE_DEFAULT
    empty_line: str = EMPTY_LINE_DEFAULT
    welcome: str = WELCOME_DEFAULT


def parse_settings(text: str) -> Settings:
    """Build Settings from the text of a config file."""
    settings = Settings()
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if key == "log_file" and value:
            settings.log_file = os.path.expanduser(value)
        elif key == "empty_line" and value:
            # one cell per placeholder row
            settings.empty_line = value[0]
        elif key == "welcome":
            settings.welcome = value
    return settings


def load_settings(path: str = None) -> Settings:
    """
    Load settings from `path` (default: CONFIG_PATH).
    Returns the defaults if the file does not exist or cannot be read.
    """
    path = path or CONFIG_PATH
    if not os.path.isfile(path):
        return Settings()
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.log(f"config: could not read {path}: {e}")
        return Settings()
    return parse_settings(text)
