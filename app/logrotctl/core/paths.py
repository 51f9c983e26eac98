"""XDG-compliant path management for logrotctl.

This module provides standardized paths following the XDG Base Directory
Specification for configuration and state storage.

XDG defaults:
- Config: ~/.config/logrotctl/
- State: ~/.local/state/logrotctl/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "logrotctl"

CONFIG_FILENAME = "logrotate.toml"
DROPIN_DIRNAME = "conf.d"
RENDERED_FILENAME = "logrotate.conf"
LOCK_FILENAME = "run.lock"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/logrotctl/ (or XDG_CONFIG_HOME/logrotctl/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_state_dir() -> Path:
    """Get the state directory path.

    State data is the rendered logrotate file and the run lock. It is
    regenerated from configuration on every render.

    Returns:
        Path to ~/.local/state/logrotctl/ (or XDG_STATE_HOME/logrotctl/).
    """
    return _get_xdg_dir("XDG_STATE_HOME", ".local/state")


def get_config_path() -> Path:
    """Get the default declaration file path.

    Returns:
        Path to ~/.config/logrotctl/logrotate.toml.
    """
    return get_config_dir() / CONFIG_FILENAME


def get_dropin_dir(config_path: Path | None = None) -> Path:
    """Get the drop-in directory that sits beside a declaration file.

    Args:
        config_path: Main declaration file. If None, uses the default.

    Returns:
        Path to the conf.d/ directory next to the declaration file.
    """
    return (config_path or get_config_path()).parent / DROPIN_DIRNAME


def get_rendered_path() -> Path:
    """Get the rendered logrotate configuration path.

    Returns:
        Path to ~/.local/state/logrotctl/logrotate.conf.
    """
    return get_state_dir() / RENDERED_FILENAME


def get_lock_path() -> Path:
    """Get the run lock path.

    Returns:
        Path to ~/.local/state/logrotctl/run.lock.
    """
    return get_state_dir() / LOCK_FILENAME


def _ensure_dir(path: Path, name: str) -> Path:
    """Create directory if it doesn't exist.

    Args:
        path: Directory path to create.
        name: Human-readable name for error messages.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create {name} directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {name} directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path


def ensure_config_dir() -> Path:
    """Create the configuration directory if it doesn't exist.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    return _ensure_dir(get_config_dir(), "config")


def ensure_state_dir() -> Path:
    """Create the state directory if it doesn't exist.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    return _ensure_dir(get_state_dir(), "state")
