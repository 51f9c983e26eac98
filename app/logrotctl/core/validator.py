"""Cross-field validation of collected entries.

All violations across all entries are collected before anything is
reported, so one pass surfaces every problem at once.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from logrotctl.models.path_spec import PathSpec


@dataclass(frozen=True, slots=True)
class PathValidationError:
    """A single invariant violation attributed to an entry.

    Attributes:
        name: Name of the offending entry.
        reason: Human-readable description of the violation.
    """

    name: str
    reason: str

    def __str__(self) -> str:
        return f"paths.{self.name}: {self.reason}"


class ConfigValidationError(Exception):
    """Raised when one or more entries violate a cross-field invariant.

    Attributes:
        errors: Every violation found, in entry order.
    """

    def __init__(self, errors: list[PathValidationError]) -> None:
        self.errors = errors
        lines = "\n".join(f"  - {e}" for e in errors)
        super().__init__(f"{len(errors)} validation error(s):\n{lines}")


def _ownership_message(name: str) -> str:
    return (
        f"If either of `paths.{name}.user` or `paths.{name}.group` are specified "
        "then *both* must be specified."
    )


def validate_paths(entries: Iterable[PathSpec]) -> list[PathValidationError]:
    """Check every entry and return all violations found.

    Args:
        entries: Collected (enabled, named) entries.

    Returns:
        List of violations; empty when the collection is valid.
    """
    errors: list[PathValidationError] = []
    for spec in entries:
        name = spec.name or spec.path
        if (spec.user is None) != (spec.group is None):
            errors.append(PathValidationError(name=name, reason=_ownership_message(name)))
    return errors


def ensure_valid(entries: Iterable[PathSpec]) -> None:
    """Raise ConfigValidationError if any entry violates an invariant.

    Raises:
        ConfigValidationError: With the complete list of violations.
    """
    errors = validate_paths(entries)
    if errors:
        raise ConfigValidationError(errors)
