"""Unit tests for show command."""

import json
from pathlib import Path

from logrotctl.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestShowCommand:
    """Tests for logrotctl show command."""

    def test_table(self, config_file: Path) -> None:
        result = runner.invoke(app, ["--config", str(config_file), "show"])

        assert result.exit_code == 0
        assert "Rotation Entries" in result.stdout
        assert result.stdout.index("myapp") < result.stdout.index("httpd")

    def test_json(self, config_file: Path) -> None:
        result = runner.invoke(app, ["--config", str(config_file), "show", "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [entry["name"] for entry in data] == ["myapp", "httpd"]
        assert data[0]["frequency"] == "weekly"
        assert data[1]["user"] == "www-data"

    def test_no_enabled_entries(self, tmp_path: Path) -> None:
        path = tmp_path / "logrotate.toml"
        path.write_text('[paths.off]\npath = "/off"\nenable = false\n')

        result = runner.invoke(app, ["--config", str(path), "show"])

        assert result.exit_code == 0
        assert "No enabled entries" in result.stdout

    def test_validation_errors(self, tmp_path: Path) -> None:
        path = tmp_path / "logrotate.toml"
        path.write_text('[paths.bad]\npath = "/b"\ngroup = "adm"\n')

        result = runner.invoke(app, ["--config", str(path), "show"])

        assert result.exit_code == 1
        assert "bad" in result.output

    def test_bracket_glob_shown_literally(self, tmp_path: Path) -> None:
        path = tmp_path / "logrotate.toml"
        path.write_text('[paths.web]\npath = "/l/[ab]*.log"\n')

        result = runner.invoke(app, ["--config", str(path), "show"])

        assert result.exit_code == 0
        assert "/l/[ab]*.log" in result.stdout
