"""Publishing of rendered configuration to storage.

The rendered text is written to a temporary file in the destination
directory and then renamed over the target, so the current file is always
either the previous complete render or the new complete render.
"""

import logging
import os
from pathlib import Path
from tempfile import NamedTemporaryFile

logger = logging.getLogger(__name__)


class RenderIOError(Exception):
    """Raised when rendered configuration cannot be persisted."""


def _is_current(text: str, path: Path) -> bool:
    """Check whether the file at path already holds exactly this text."""
    try:
        return path.read_bytes() == text.encode("utf-8")
    except FileNotFoundError:
        return False
    except OSError as e:
        logger.debug("Could not read existing %s: %s", path, e)
        return False


def write_config(text: str, path: Path) -> bool:
    """Atomically publish rendered configuration text.

    Args:
        text: Rendered configuration.
        path: Destination file.

    Returns:
        True if the file was written, False if it already held this text.

    Raises:
        RenderIOError: If the file cannot be written. The previous file,
            if any, is left in place.
    """
    if _is_current(text, path):
        logger.debug("Rendered config unchanged: %s", path)
        return False

    tmp_path: Path | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            prefix=f".{path.name}.",
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            f.write(text.encode("utf-8"))
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_path, 0o644)
        os.replace(str(tmp_path), str(path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise RenderIOError(f"Failed to write {path}: {e}") from e

    logger.info("Wrote rendered config to %s", path)
    return True
