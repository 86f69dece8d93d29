"""Runs external commands and captures their outcome."""

import logging
import subprocess
from typing import List, Sequence

from ..models.result import CommandResult
from ..utils.constants import COMMAND_NOT_RUN

logger = logging.getLogger(__name__)


class CommandRunner:
    """Executes one command at a time and never raises on failure.

    Commands run to completion with no timeout; a hung package or service
    manager hangs the caller.
    """

    def run(self, command: Sequence[str]) -> CommandResult:
        """Run a command and capture its output.

        Args:
            command: Argument vector to execute

        Returns:
            CommandResult; a command that cannot be launched reports exit status 127
        """
        cmd: List[str] = list(command)
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
            )
        except (OSError, ValueError) as e:
            # ValueError: argv the OS cannot accept, e.g. an embedded NUL byte
            logger.error(f"Could not run {cmd[0]}: {e}")
            return CommandResult(command=cmd, returncode=COMMAND_NOT_RUN, diagnostic=str(e))

        logger.debug(f"{cmd[0]} exited with status {result.returncode}")
        return CommandResult(
            command=cmd,
            returncode=result.returncode,
            output=result.stdout or "",
            diagnostic=result.stderr or "",
        )
