"""Tests for rotation tool invocation."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from logrotctl.scheduler.runner import (
    RotationRunner,
    RunLockedError,
    RunnerError,
    RunResult,
    ToolNotFoundError,
    resolve_binary,
    run_lock,
)


class TestRunResult:
    """Tests for RunResult dataclass."""

    def test_success(self) -> None:
        assert RunResult(config_path=Path("/x"), returncode=0).success is True

    def test_failure(self) -> None:
        assert RunResult(config_path=Path("/x"), returncode=1).success is False


class TestRotationRunner:
    """Tests for RotationRunner class."""

    @patch("logrotctl.scheduler.runner.resolve_binary", return_value="/usr/sbin/logrotate")
    @patch("logrotctl.scheduler.runner.subprocess.run")
    def test_passes_config_as_sole_argument(
        self, mock_run: MagicMock, mock_resolve: MagicMock
    ) -> None:
        mock_run.return_value = subprocess.CompletedProcess([], 0, "", "")

        result = RotationRunner().run(Path("/state/logrotate.conf"))

        assert mock_run.call_args.args[0] == ["logrotate", "/state/logrotate.conf"]
        assert result.success is True
        assert result.config_path == Path("/state/logrotate.conf")

    @patch("logrotctl.scheduler.runner.resolve_binary", return_value="/usr/sbin/logrotate")
    @patch("logrotctl.scheduler.runner.subprocess.run")
    def test_custom_binary(self, mock_run: MagicMock, mock_resolve: MagicMock) -> None:
        mock_run.return_value = subprocess.CompletedProcess([], 0, "", "")

        RotationRunner(binary="/usr/sbin/logrotate").run(Path("/c"))

        assert mock_run.call_args.args[0] == ["/usr/sbin/logrotate", "/c"]

    @patch("logrotctl.scheduler.runner.resolve_binary", return_value="/usr/sbin/logrotate")
    @patch("logrotctl.scheduler.runner.subprocess.run")
    def test_nonzero_exit_reported(self, mock_run: MagicMock, mock_resolve: MagicMock) -> None:
        mock_run.return_value = subprocess.CompletedProcess([], 1, "", "error: bad")

        result = RotationRunner().run(Path("/c"))

        assert result.success is False
        assert result.returncode == 1
        assert result.stderr == "error: bad"
        mock_run.assert_called_once()

    @patch("logrotctl.scheduler.runner.shutil.which", return_value="/usr/sbin/logrotate")
    def test_is_available_looks_up_path(self, mock_which: MagicMock) -> None:
        assert RotationRunner().is_available() is True
        mock_which.assert_called_once_with("logrotate")

    @patch("logrotctl.scheduler.runner.shutil.which", return_value=None)
    def test_resolve_binary_missing(self, mock_which: MagicMock) -> None:
        assert resolve_binary("logrotate") is None

    @patch("logrotctl.scheduler.runner.resolve_binary", return_value=None)
    def test_tool_missing(self, mock_resolve: MagicMock) -> None:
        with pytest.raises(ToolNotFoundError):
            RotationRunner().run(Path("/c"))

    @patch("logrotctl.scheduler.runner.resolve_binary", return_value="/usr/sbin/logrotate")
    @patch("logrotctl.scheduler.runner.subprocess.run")
    def test_timeout(self, mock_run: MagicMock, mock_resolve: MagicMock) -> None:
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="logrotate", timeout=1)

        with pytest.raises(RunnerError, match="timed out"):
            RotationRunner(timeout=1).run(Path("/c"))

    @patch("logrotctl.scheduler.runner.resolve_binary", return_value="/usr/sbin/logrotate")
    @patch("logrotctl.scheduler.runner.subprocess.run")
    def test_file_not_found_during_run(self, mock_run: MagicMock, mock_resolve: MagicMock) -> None:
        mock_run.side_effect = FileNotFoundError("logrotate")

        with pytest.raises(ToolNotFoundError):
            RotationRunner().run(Path("/c"))


class TestRunLock:
    """Tests for run_lock context manager."""

    def test_creates_lock_file_with_pid(self, tmp_path: Path) -> None:
        lock_path = tmp_path / "state" / "run.lock"

        with run_lock(lock_path):
            assert lock_path.read_text().strip().isdigit()

    def test_refuses_second_holder(self, tmp_path: Path) -> None:
        """A second pass cannot start while the first still holds the lock."""
        lock_path = tmp_path / "run.lock"

        with run_lock(lock_path), pytest.raises(RunLockedError), run_lock(lock_path):
            pass

    def test_released_after_exit(self, tmp_path: Path) -> None:
        lock_path = tmp_path / "run.lock"

        with run_lock(lock_path):
            pass
        with run_lock(lock_path):
            pass

    def test_released_after_error(self, tmp_path: Path) -> None:
        lock_path = tmp_path / "run.lock"

        with pytest.raises(ValueError), run_lock(lock_path):
            raise ValueError("boom")
        with run_lock(lock_path):
            pass
