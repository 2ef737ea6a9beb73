"""Shell execution utilities.

Provides subprocess execution with proper error handling and the
"open in file manager" collaborator used by the open/reveal commands.
"""

import logging
import os
import shutil
import subprocess
import sys
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


class OpenPathError(Exception):
    """Raised when a path cannot be opened in the file manager."""


def run_command(
    args: list[str],
    *,
    timeout: float | None = 60.0,
) -> CommandResult:
    """Execute a shell command and return the result.

    Args:
        args: Command and arguments to execute.
        timeout: Maximum time in seconds to wait for command.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=False,
        timeout=timeout,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None


def build_open_command(path: str, *, reveal: bool = False, platform: str | None = None) -> list[str]:
    """Build the command that shows ``path`` in the desktop file manager.

    On macOS ``open`` is used (``open -R`` to reveal). Elsewhere
    ``xdg-open`` opens the directory itself, or its parent when revealing.

    Args:
        path: Directory to open.
        reveal: Select the path inside its parent instead of opening it.
        platform: Platform name, defaults to ``sys.platform``.

    Returns:
        Command and arguments.
    """
    platform = platform or sys.platform
    if platform == "darwin":
        return ["open", "-R", path] if reveal else ["open", path]
    if reveal:
        return ["xdg-open", os.path.dirname(path.rstrip(os.sep)) or os.sep]
    return ["xdg-open", path]


def open_path(path: str, *, reveal: bool = False) -> None:
    """Open or reveal ``path`` in the desktop file manager.

    Args:
        path: Directory to open.
        reveal: Reveal the path in its parent instead of opening it.

    Raises:
        OpenPathError: If the opener is missing, times out or fails.
    """
    args = build_open_command(path, reveal=reveal)
    if not command_exists(args[0]):
        raise OpenPathError(f"{args[0]} not found in PATH")

    logger.debug("Opening %s with %s", path, args[0])
    try:
        result = run_command(args, timeout=15.0)
    except (FileNotFoundError, OSError) as e:
        raise OpenPathError(f"Cannot run {args[0]}: {e}") from e
    except subprocess.TimeoutExpired as e:
        raise OpenPathError(f"{args[0]} timed out") from e

    if not result.success:
        detail = result.stderr.strip() or f"exit code {result.returncode}"
        raise OpenPathError(f"{args[0]} failed: {detail}")
