"""Unit tests for run command."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

from logrotctl.cli.main import app
from logrotctl.scheduler.runner import run_lock
from typer.testing import CliRunner

runner = CliRunner()


class TestRunCommand:
    """Tests for logrotctl run command."""

    @patch("logrotctl.scheduler.runner.resolve_binary", return_value="/usr/sbin/logrotate")
    @patch("logrotctl.scheduler.runner.subprocess.run")
    def test_renders_then_runs(
        self,
        mock_run: MagicMock,
        mock_resolve: MagicMock,
        config_file: Path,
        xdg_dirs: tuple[Path, Path],
    ) -> None:
        _, state_home = xdg_dirs
        rendered = state_home / "logrotctl" / "logrotate.conf"
        mock_run.return_value = subprocess.CompletedProcess([], 0, "", "")

        result = runner.invoke(app, ["--config", str(config_file), "run"])

        assert result.exit_code == 0
        assert rendered.exists()
        assert mock_run.call_args.args[0] == ["logrotate", str(rendered)]

    @patch("logrotctl.scheduler.runner.resolve_binary", return_value="/usr/sbin/logrotate")
    @patch("logrotctl.scheduler.runner.subprocess.run")
    def test_tool_failure_propagates_exit_code(
        self,
        mock_run: MagicMock,
        mock_resolve: MagicMock,
        config_file: Path,
        xdg_dirs: tuple[Path, Path],
    ) -> None:
        mock_run.return_value = subprocess.CompletedProcess([], 3, "", "error: [x] bad")

        result = runner.invoke(app, ["--config", str(config_file), "run"])

        assert result.exit_code == 3
        assert "exited with code 3" in result.output

    @patch("logrotctl.scheduler.runner.resolve_binary", return_value="/usr/sbin/logrotate")
    @patch("logrotctl.scheduler.runner.subprocess.run")
    def test_validation_error_skips_tool(
        self,
        mock_run: MagicMock,
        mock_resolve: MagicMock,
        tmp_path: Path,
        xdg_dirs: tuple[Path, Path],
    ) -> None:
        path = tmp_path / "logrotate.toml"
        path.write_text('[paths.bad]\npath = "/b"\nuser = "root"\n')

        result = runner.invoke(app, ["--config", str(path), "run"])

        assert result.exit_code == 1
        mock_run.assert_not_called()

    @patch("logrotctl.scheduler.runner.resolve_binary", return_value="/usr/sbin/logrotate")
    @patch("logrotctl.scheduler.runner.subprocess.run")
    def test_no_render_uses_existing_file(
        self, mock_run: MagicMock, mock_resolve: MagicMock, tmp_path: Path
    ) -> None:
        rendered = tmp_path / "existing.conf"
        rendered.write_text("hand placed\n")
        mock_run.return_value = subprocess.CompletedProcess([], 0, "", "")

        result = runner.invoke(
            app,
            [
                "run",
                "--no-render",
                "--rendered",
                str(rendered),
                "--lock",
                str(tmp_path / "run.lock"),
            ],
        )

        assert result.exit_code == 0
        assert rendered.read_text() == "hand placed\n"
        assert mock_run.call_args.args[0] == ["logrotate", str(rendered)]

    def test_no_render_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "run",
                "--no-render",
                "--rendered",
                str(tmp_path / "missing.conf"),
                "--lock",
                str(tmp_path / "run.lock"),
            ],
        )

        assert result.exit_code == 1
        assert "not found" in result.output

    @patch("logrotctl.scheduler.runner.resolve_binary", return_value=None)
    def test_tool_missing(
        self, mock_resolve: MagicMock, config_file: Path, xdg_dirs: tuple[Path, Path]
    ) -> None:
        result = runner.invoke(app, ["--config", str(config_file), "run"])

        assert result.exit_code == 1
        assert "not found" in result.output

    @patch("logrotctl.scheduler.runner.subprocess.run")
    def test_refuses_while_locked(
        self,
        mock_run: MagicMock,
        config_file: Path,
        tmp_path: Path,
        xdg_dirs: tuple[Path, Path],
    ) -> None:
        lock_path = tmp_path / "run.lock"

        with run_lock(lock_path):
            result = runner.invoke(
                app, ["--config", str(config_file), "run", "--lock", str(lock_path)]
            )

        assert result.exit_code == 1
        mock_run.assert_not_called()
