"""Shell history extraction for prompt context."""

from __future__ import annotations

import logging
import os
from collections import deque
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

DELIMITER = ";"
DEFAULT_HISTORY_FILE = ".zsh_history"


def history_path(environ: Mapping[str, str] | None = None) -> Path:
    """Return $HISTFILE if set, otherwise ~/.zsh_history."""
    if environ is None:
        environ = os.environ
    override = environ.get("HISTFILE")
    if override:
        return Path(override).expanduser()
    return Path.home() / DEFAULT_HISTORY_FILE


def read_history(n: int, path: str | Path | None = None) -> list[str]:
    """Return the last ``n`` commands recorded in a shell history file.

    Each record is ``<metadata>;<command>``, as written by zsh's extended
    history. Only the first ``;`` separates the two, so commands containing
    ``;`` come back intact. Records without a ``;`` are skipped.

    Args:
        n: Maximum number of commands to return. Must be positive.
        path: History file. Defaults to :func:`history_path`.

    Returns:
        Up to ``n`` commands, oldest first.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    if n < 1:
        raise ValueError(f"n must be a positive integer, got {n}")
    if path is None:
        path = history_path()

    commands: deque[str] = deque(maxlen=n)
    with open(path, encoding="utf-8", errors="replace") as fh:
        for line in fh:
            _, sep, command = line.rstrip("\r\n").partition(DELIMITER)
            if sep:
                commands.append(command)

    logger.debug("Read %d history entries from %s", len(commands), path)
    return list(commands)
