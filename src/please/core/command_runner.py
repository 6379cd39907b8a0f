"""Shell execution for the accepted suggestion."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass

from please.exceptions import ExecutionError

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Result of a completed command."""
    command: str
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


def run_command(command: str, shell: str = "bash") -> CommandResult:
    """Run a command through ``shell -c`` and wait for it to finish.

    The child inherits stdin, stdout and stderr, so its output goes straight
    to the user's terminal.

    Args:
        command: The shell command to execute.
        shell: Shell binary used to interpret the command.

    Returns:
        CommandResult with the exit code.

    Raises:
        ExecutionError: If the shell cannot be started.
    """
    logger.debug("Running %r with %s", command, shell)
    try:
        proc = subprocess.run([shell, "-c", command])
    except OSError as e:
        raise ExecutionError(command, shell, e) from e

    logger.debug("Command %r exited with %d", command, proc.returncode)
    return CommandResult(command=command, exit_code=proc.returncode)
