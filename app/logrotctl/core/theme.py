"""Console styles for logrotctl output.

The bundled theme defines every style name used by tables and messages.
A user theme file may restyle any of those names; it cannot add new ones.
"""

import logging
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path

from rich.errors import StyleSyntaxError
from rich.style import Style
from rich.theme import Theme

from logrotctl.core.paths import get_config_dir

logger = logging.getLogger(__name__)

THEME_FILENAME = "theme.toml"


def get_user_theme_path() -> Path:
    """Get the user theme path (~/.config/logrotctl/theme.toml)."""
    return get_config_dir() / THEME_FILENAME


def parse_styles(text: str, source: str) -> dict[str, Style]:
    """Parse the [styles] table of a theme file.

    Definitions Rich cannot parse are logged and skipped.

    Args:
        text: TOML document.
        source: Where the text came from, for log messages.

    Returns:
        Mapping of style name to parsed Rich style.

    Raises:
        tomllib.TOMLDecodeError: If text is not valid TOML.
    """
    table = tomllib.loads(text).get("styles", {})
    if not isinstance(table, dict):
        logger.warning("Ignoring [styles] in %s: not a table", source)
        return {}

    styles: dict[str, Style] = {}
    for name, definition in table.items():
        try:
            styles[name] = Style.parse(str(definition))
        except StyleSyntaxError as e:
            logger.warning("Ignoring style %r in %s: %s", name, source, e)
    return styles


def _bundled_styles() -> dict[str, Style]:
    resource = resources.files("logrotctl.data").joinpath(THEME_FILENAME)
    return parse_styles(resource.read_text(encoding="utf-8"), "bundled theme")


def _user_styles(path: Path, known: set[str]) -> dict[str, Style]:
    """Read restyled entries from a user theme, keeping only known names."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as e:
        logger.warning("Cannot read theme %s: %s", path, e)
        return {}

    try:
        styles = parse_styles(text, str(path))
    except tomllib.TOMLDecodeError as e:
        logger.warning("Ignoring theme %s: %s", path, e)
        return {}

    for name in sorted(styles.keys() - known):
        logger.warning("Ignoring unknown style %r in %s", name, path)
    return {name: style for name, style in styles.items() if name in known}


def build_theme(user_path: Path | None = None) -> Theme:
    """Build the console theme.

    Args:
        user_path: User theme file. Defaults to get_user_theme_path().

    Returns:
        Rich Theme with bundled styles, restyled by the user file.
    """
    styles = _bundled_styles()
    overrides = _user_styles(user_path or get_user_theme_path(), set(styles))
    if overrides:
        logger.debug("Restyled %s from user theme", ", ".join(sorted(overrides)))
    styles.update(overrides)
    return Theme(styles)


@cache
def get_theme() -> Theme:
    """Get the console theme, built once per process."""
    return build_theme()
