"""
Input handling for the quill text editor.

Processes one input byte at a time for each mode (normal, insert, command)
and updates the context accordingly. Every handler returns whether the editor
should keep running.
"""
import unicodedata

from quill import commands
from quill.cursor import DIRECTION_KEYS
from quill.modes import CommandMode, InsertMode, NormalMode

ESC = 27
ENTER_KEYS = (10, 13)
BACKSPACE_KEYS = (8, 127)

def is_printable(key: int) -> bool:
    """True for bytes that are not control characters (0x00-0x1F, 0x7F-0x9F)."""
    return unicodedata.category(chr(key)) != "Cc"

def handle_key(context, key: int) -> bool:
    """Route a key to the handler for the active mode."""
    if isinstance(context.mode, NormalMode):
        return handle_normal_mode(context, key)
    if isinstance(context.mode, InsertMode):
        return handle_insert_mode(context, key)
    return handle_command_mode(context, key)

def handle_normal_mode(context, key: int) -> bool:
    """Handle a key press in normal mode."""
    if key == ord('i'):
        context.mode = InsertMode()
        return True

    if key == ord(':'):
        context.mode = CommandMode()
        return True

    if key in DIRECTION_KEYS:
        context.cursor.move(DIRECTION_KEYS[key], context.buffer)
    return True

def delete_before_cursor(context):
    """Backspace: delete the character left of the cursor, or join with the line above."""
    cursor = context.cursor
    if cursor.cx == 0 and cursor.cy == 0:
        return
    if cursor.cx > 0:
        context.buffer.delete_char(cursor.cy, cursor.cx - 1)
        cursor.cx -= 1
    else:
        # join point is measured before the lines are merged
        cursor.cx = context.buffer.join_with_previous(cursor.cy)
        cursor.cy -= 1

def handle_insert_mode(context, key: int) -> bool:
    """Handle a key press in insert mode."""
    cursor = context.cursor
    # Ensure the cursor is still inside the buffer
    cursor.clamp(context.buffer)

    if key == ESC:
        context.mode = NormalMode()
        return True

    if key in ENTER_KEYS:
        context.buffer.split_line(cursor.cy, cursor.cx)
        cursor.cy += 1
        cursor.cx = 0
        return True

    if key in BACKSPACE_KEYS:
        delete_before_cursor(context)
        return True

    if is_printable(key):
        context.buffer.insert_char(cursor.cy, cursor.cx, chr(key))
        cursor.cx += 1
    return True

def handle_command_mode(context, key: int) -> bool:
    """Handle a key press in command (:) mode."""
    if key == ESC:
        context.mode = NormalMode()
        return True

    if key in ENTER_KEYS:
        cmd = context.mode.buffer.strip()
        context.mode = NormalMode()
        return commands.process_command(context, cmd)

    if key in BACKSPACE_KEYS:
        context.mode.buffer = context.mode.buffer[:-1]
    elif is_printable(key):
        context.mode.buffer += chr(key)
    return True
