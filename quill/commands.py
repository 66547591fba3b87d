"""
Command parsing and execution for the quill text editor.

This module handles command-line mode input (':' mode) once it is submitted and
applies it to the editor context. Every command returns whether the editor
should keep running; only the quit commands stop it.
"""
from quill import logger, storage

NO_FILENAME_MESSAGE = "No file name! Start quill with a filename to save."

def save_buffer(context) -> bool:
    """
    Write the current buffer to its file and report the outcome in the status line.
    Returns True if the file was written.
    """
    filename = context.buffer.filename
    if not filename:
        context.status_message = NO_FILENAME_MESSAGE
        logger.log("w: no filename")
        return False
    try:
        num_bytes = storage.save_text(filename, context.buffer.to_text())
    except OSError as e:
        context.status_message = f"Error: {e}"
        logger.log(f"w: error saving {filename}: {e}")
        return False
    context.status_message = f"Saved to {filename}"
    logger.log(f"w: write ({num_bytes} bytes)")
    return True

def process_command(context, command: str) -> bool:
    """Execute a submitted ':' command. Returns False when the editor should stop."""
    cmd = command.strip()
    if not cmd:
        return True

    if cmd == "w":
        save_buffer(context)
        return True

    if cmd == "q":
        logger.log("q: quit")
        return False

    if cmd == "wq":
        # Quit even if the write failed
        if not save_buffer(context):
            logger.log("wq: quitting without a successful write")
        else:
            logger.log("wq: write+quit")
        return False

    context.status_message = f"Unknown: {cmd}"
    logger.log(f"unknown command: {cmd}")
    return True
