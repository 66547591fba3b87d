"""
Editor modes.

Each mode is its own small dataclass; only CommandMode carries data (the text
typed so far on the ':' line), so a command buffer cannot exist outside it.
"""
from dataclasses import dataclass


@dataclass
class NormalMode:
    label = "-- NORMAL --"


@dataclass
class InsertMode:
    label = "-- INSERT --"


@dataclass
class CommandMode:
    buffer: str = ""
    label = ":"
