"""Deterministic ordering of collected entries."""

from collections.abc import Iterable

from logrotctl.models.path_spec import PathSpec


def sort_key(spec: PathSpec) -> tuple[int, str]:
    """Composite sort key: priority first, entry name as tie-break."""
    return (spec.priority, spec.name or "")


def order_paths(entries: Iterable[PathSpec]) -> list[PathSpec]:
    """Order entries by ascending priority, then by ascending name.

    The result does not depend on the iteration order of the input.

    Args:
        entries: Collected (enabled, named) entries.

    Returns:
        New list in render order.
    """
    return sorted(entries, key=sort_key)
