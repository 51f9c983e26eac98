"""Declaration file I/O operations.

This module loads declaration layers from TOML files, validates them with
Pydantic models, and merges them into a single RotationConfig. The main
file is applied first, then every ``*.toml`` file of the drop-in directory
in file-name order.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from logrotctl.core.compiler import RotationConfig
from logrotctl.core.merge import PathDeclaration, merge_declarations, merge_extra_config
from logrotctl.core.paths import get_config_path, get_dropin_dir
from logrotctl.models.path_spec import InvalidFieldError

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Base exception for declaration file errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the declaration file is not found."""


class ConfigParseError(ConfigError):
    """Raised when a declaration file cannot be parsed."""


class ConfigSchemaError(ConfigError):
    """Raised when a declaration file does not match the expected layout."""


class ConfigLayer(BaseModel):
    """Content of a single declaration file.

    Attributes:
        paths: Partial entry declarations keyed by name.
        extra_config: Global text appended after all blocks.
    """

    model_config = ConfigDict(extra="forbid")

    paths: Annotated[
        dict[str, PathDeclaration],
        Field(default_factory=dict, description="Path declarations keyed by name"),
    ]
    extra_config: Annotated[str, Field(description="Trailing logrotate configuration")] = ""


def load_layer(path: Path) -> ConfigLayer:
    """Load and validate one declaration file.

    Args:
        path: Path to the TOML file.

    Returns:
        Validated ConfigLayer.

    Raises:
        ConfigNotFoundError: If the file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigSchemaError: If the layout doesn't match the schema.
        InvalidFieldError: If an entry field is outside its domain.
    """
    if not path.exists():
        raise ConfigNotFoundError(f"Config not found: {path}")

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read {path}: {e}") from e

    try:
        return ConfigLayer.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        loc = first.get("loc", ())
        # Errors inside paths.<name>.<field> are field domain errors
        if len(loc) >= 3 and loc[0] == "paths":
            raise InvalidFieldError(str(loc[1]), str(loc[2]), first.get("msg", "")) from e
        raise ConfigSchemaError(f"Invalid config content in {path}: {e}") from e


def discover_layers(path: Path | None = None, dropin_dir: Path | None = None) -> list[Path]:
    """List declaration files in the order they apply.

    Args:
        path: Main declaration file. If None, uses the default.
        dropin_dir: Drop-in directory. If None, uses conf.d/ beside the main file.

    Returns:
        The main file followed by drop-in files sorted by name.
    """
    config_path = path or get_config_path()
    dropins = dropin_dir or get_dropin_dir(config_path)
    layers = [config_path]
    if dropins.is_dir():
        layers.extend(sorted(p for p in dropins.glob("*.toml") if p.is_file()))
    return layers


def load_config(path: Path | None = None, dropin_dir: Path | None = None) -> RotationConfig:
    """Load every declaration layer and merge them.

    Args:
        path: Main declaration file. If None, uses the default.
        dropin_dir: Drop-in directory. If None, uses conf.d/ beside the main file.

    Returns:
        Merged RotationConfig.

    Raises:
        ConfigError: If a layer cannot be loaded.
        InvalidFieldError: If a merged entry field is outside its domain.
    """
    layers = [load_layer(p) for p in discover_layers(path, dropin_dir)]
    logger.debug("Loaded %d declaration layer(s)", len(layers))
    return RotationConfig(
        paths=merge_declarations(layer.paths for layer in layers),
        extra_config=merge_extra_config(layer.extra_config for layer in layers),
    )


def save_layer(layer: ConfigLayer, path: Path | None = None) -> Path:
    """Save a declaration layer to a TOML file.

    The file is written atomically by first writing to a temporary file
    in the same directory and then using os.replace() for atomic rename.

    Args:
        layer: The layer to save.
        path: Destination. If None, uses the default declaration path.

    Returns:
        Path where the layer was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = _layer_to_dict(layer)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f, multiline_strings=True)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_exists(path: Path | None = None) -> bool:
    """Check if a declaration file exists."""
    return (path or get_config_path()).exists()


def require_config(config_path: Path | None = None) -> RotationConfig:
    """Load configuration or exit with helpful error message.

    This is a convenience wrapper around load_config() that handles
    common error cases by printing user-friendly messages and exiting.

    Args:
        config_path: Optional custom declaration file path.

    Returns:
        Merged RotationConfig.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    import typer

    from logrotctl.utils.formatting import print_error, print_info

    path = config_path or get_config_path()
    try:
        return load_config(path)
    except ConfigNotFoundError as e:
        print_error(f"Config not found: {path}")
        print_info("Run 'logrotctl init' to create a starter configuration.")
        raise typer.Exit(code=1) from e
    except (ConfigError, InvalidFieldError) as e:
        print_error(f"Failed to load config: {e}")
        raise typer.Exit(code=1) from e


def _layer_to_dict(layer: ConfigLayer) -> dict[str, Any]:
    """Convert a ConfigLayer to a dictionary suitable for TOML serialization."""
    result: dict[str, Any] = {}
    if layer.extra_config:
        result["extra_config"] = layer.extra_config
    result["paths"] = {
        name: declaration.model_dump(mode="json", exclude_none=True)
        for name, declaration in layer.paths.items()
    }
    return result
