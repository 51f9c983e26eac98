"""Collection of enabled path entries.

Disabled entries are dropped here and never reach validation, ordering,
or rendering.
"""

import logging
from collections.abc import Mapping

from logrotctl.models.path_spec import PathSpec

logger = logging.getLogger(__name__)


def collect_enabled(entries: Mapping[str, PathSpec]) -> list[PathSpec]:
    """Filter out disabled entries and attach each entry's name.

    Args:
        entries: Mapping of entry name to PathSpec.

    Returns:
        Enabled entries with ``name`` set to their mapping key, in the
        mapping's iteration order.
    """
    collected: list[PathSpec] = []
    for name, spec in entries.items():
        if not spec.enable:
            logger.debug("Skipping disabled entry paths.%s", name)
            continue
        collected.append(spec if spec.name == name else spec.with_name(name))
    return collected
