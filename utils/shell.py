"""
shell.py - Run external macOS tools
ONE RESPONSIBILITY: Spawn a command and hand back its exit status and output

Every component takes a ``runner`` argument defaulting to ``run_command``
so tests can substitute a fake without touching real system utilities.
"""

import subprocess

from core import constants
from utils import logger


class CommandResult:
    def __init__(self, returncode, stdout="", stderr=""):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

    def __repr__(self):
        return f"CommandResult(returncode={self.returncode!r})"


def run_command(cmd, cwd=None, quiet=False):
    """
    Run a command to completion.

    Args:
        cmd: Argument list (e.g., ['diskutil', 'info', '-plist', '/'])
        cwd: Working directory for the child process
        quiet: Discard stdout/stderr instead of capturing them

    Returns:
        CommandResult: exit status plus captured text output
    """
    logger.log_debug(f"Running: {' '.join(cmd)}")

    output = subprocess.DEVNULL if quiet else subprocess.PIPE
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            stdout=output,
            stderr=output,
            text=True,
            errors='replace'
        )
    except FileNotFoundError:
        logger.log_warning(f"Command not found: {cmd[0]}")
        return CommandResult(constants.COMMAND_NOT_FOUND, "", f"{cmd[0]}: command not found")

    logger.log_debug(f"{cmd[0]} exited with {result.returncode}")
    return CommandResult(result.returncode, result.stdout or "", result.stderr or "")


def which(tool):
    """Check if a tool resolves on PATH."""
    return subprocess.run(['which', tool], capture_output=True).returncode == 0
