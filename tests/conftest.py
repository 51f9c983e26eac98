"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from logrotctl.models.path_spec import PathSpec


@pytest.fixture
def xdg_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> tuple[Path, Path]:
    """Point XDG config and state homes into tmp_path."""
    config_home = tmp_path / "config"
    state_home = tmp_path / "state"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("XDG_STATE_HOME", str(state_home))
    return config_home, state_home


@pytest.fixture
def sample_toml() -> str:
    """Declaration file with two entries and trailing text."""
    return '''extra_config = """
include /etc/logrotate.d
"""

[paths.httpd]
path = "/var/log/httpd/*.log"
user = "www-data"
group = "www-data"
keep = 7

[paths.myapp]
path = "/var/log/myapp/*.log"
frequency = "weekly"
keep = 5
priority = 1
extra_config = "compress"
'''


@pytest.fixture
def config_file(tmp_path: Path, sample_toml: str) -> Path:
    """Write the sample declaration file and return its path."""
    path = tmp_path / "logrotate.toml"
    path.write_text(sample_toml)
    return path


@pytest.fixture
def make_spec():
    """Factory for named PathSpec instances."""

    def _make(name: str, **fields: object) -> PathSpec:
        fields.setdefault("path", f"/var/log/{name}/*.log")
        return PathSpec.from_mapping(fields, name=name)

    return _make
