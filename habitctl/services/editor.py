"""
Editor Service - Opens the habits file or the log in an external editor
"""
from pathlib import Path
from typing import Union
import logging
import shlex
import subprocess

from habitctl.core.exceptions import EditorError

logger = logging.getLogger(__name__)


def open_in_editor(path: Union[str, Path], editor_command: str) -> int:
    """
    Open a file in the editor and wait for it to exit

    Args:
        path: File to edit
        editor_command: Editor command line, e.g. "vim" or "code --wait"

    Returns:
        The editor's exit code

    Raises:
        EditorError: If the editor command is empty or can't be started
    """
    args = shlex.split(editor_command)
    if not args:
        raise EditorError("No editor configured. Set $HABITCTL_EDITOR or $EDITOR")

    logger.debug(f"Running {args} on {path}")
    try:
        process = subprocess.Popen([*args, str(path)])
    except OSError as e:
        logger.error(f"Could not start editor {args[0]}: {e}")
        raise EditorError(f"Failed to start editor '{args[0]}': {e}")

    return process.wait()
