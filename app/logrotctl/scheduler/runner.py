"""Rotation tool invocation.

Runs logrotate with the rendered configuration file as its sole
positional argument. A non-zero exit is reported to the caller and never
retried here.
"""

import fcntl
import logging
import os
import shutil
import subprocess
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_BINARY = "logrotate"


def resolve_binary(binary: str) -> str | None:
    """Resolve the rotation tool to an absolute path, or None if it is not installed."""
    return shutil.which(binary)


class RunnerError(Exception):
    """Base exception for rotation tool invocation errors."""


class ToolNotFoundError(RunnerError):
    """Raised when the rotation tool cannot be found."""


class RunLockedError(RunnerError):
    """Raised when another rotation pass still holds the run lock."""


@dataclass(frozen=True, slots=True)
class RunResult:
    """Outcome of one rotation tool invocation.

    Attributes:
        config_path: Rendered configuration the tool was run against.
        returncode: Exit code of the tool.
        stdout: Standard output from the tool.
        stderr: Standard error from the tool.
    """

    config_path: Path
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        """Check if the tool exited with code 0."""
        return self.returncode == 0


@contextmanager
def run_lock(path: Path) -> Iterator[None]:
    """Hold an exclusive lock for the duration of one rotation pass.

    The lock is taken without blocking: if a previous pass is still
    running, the new pass refuses to start.

    Args:
        path: Lock file path. Created if missing.

    Raises:
        RunLockedError: If the lock is held by another pass.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o644)
    try:
        try:
            fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
        except BlockingIOError as e:
            raise RunLockedError(f"Another rotation pass is running (lock {path})") from e
        os.ftruncate(fd, 0)
        os.write(fd, f"{os.getpid()}\n".encode())
        try:
            yield
        finally:
            fcntl.flock(fd, fcntl.LOCK_UN)
    finally:
        os.close(fd)


class RotationRunner:
    """Invokes the external rotation tool.

    Attributes:
        binary: Command name or path of the rotation tool.
        timeout: Maximum time in seconds one invocation may take.

    Example:
        >>> runner = RotationRunner()
        >>> if runner.is_available():
        ...     result = runner.run(Path("/var/lib/logrotctl/logrotate.conf"))
        ...     print(result.success)
    """

    # Timeout for a single rotation pass (1 hour, the default schedule interval)
    _TIMEOUT: float = 3600.0

    def __init__(self, binary: str = DEFAULT_BINARY, timeout: float | None = _TIMEOUT) -> None:
        self._binary = binary
        self._timeout = timeout

    @property
    def binary(self) -> str:
        """Command name or path of the rotation tool."""
        return self._binary

    def is_available(self) -> bool:
        """Check if the rotation tool can be found."""
        return resolve_binary(self._binary) is not None

    def run(self, config_path: Path) -> RunResult:
        """Run the rotation tool against a rendered configuration.

        Args:
            config_path: Rendered configuration file.

        Returns:
            RunResult with the tool's exit code and output.

        Raises:
            ToolNotFoundError: If the rotation tool is not installed.
            RunnerError: If the tool exceeds its timeout.
        """
        if not self.is_available():
            msg = f"Rotation tool not found: {self._binary}"
            raise ToolNotFoundError(msg)

        args = [self._binary, str(config_path)]
        logger.info("Running %s", " ".join(args))
        try:
            completed = subprocess.run(
                args,
                capture_output=True,
                text=True,
                check=False,
                timeout=self._timeout,
            )
        except FileNotFoundError as e:
            raise ToolNotFoundError(f"Rotation tool not found: {self._binary}") from e
        except subprocess.TimeoutExpired as e:
            raise RunnerError(f"{self._binary} timed out after {self._timeout}s") from e

        result = RunResult(
            config_path=config_path,
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
        if result.success:
            logger.debug("%s finished successfully", self._binary)
        else:
            logger.warning(
                "%s exited with code %d: %s",
                self._binary,
                result.returncode,
                result.stderr.strip(),
            )
        return result
