"""Layered declaration merging.

Each configuration layer declares partial entries keyed by name. Layers are
folded in declaration order: fields set by a later layer overwrite earlier
values, ``extra_config`` text accumulates, and ``enable = false`` suppresses
an entry declared by an earlier layer.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

from logrotctl.models.path_spec import InvalidFieldError, PathSpec

logger = logging.getLogger(__name__)


class PathDeclaration(BaseModel):
    """Partial declaration of one entry as written in a single layer.

    Every field is optional; unset fields leave the accumulated value
    (or the PathSpec default) untouched. Only value types are checked here;
    domain checks such as the frequency name run when an enabled entry is
    resolved into a PathSpec.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    enable: Annotated[bool | None, Field(description="Whether to rotate this path")] = None
    path: Annotated[str | None, Field(description="Path or glob of files to rotate")] = None
    user: Annotated[str | None, Field(description="User account used for rotation")] = None
    group: Annotated[str | None, Field(description="Group used for rotation")] = None
    frequency: Annotated[str | None, Field(description="How often to rotate")] = None
    keep: Annotated[int | None, Field(strict=True, description="Rotations to keep")] = None
    extra_config: Annotated[str | None, Field(description="Extra logrotate directives")] = None
    priority: Annotated[int | None, Field(strict=True, description="Block order")] = None

    def updates(self) -> dict[str, Any]:
        """Return only the fields this declaration explicitly sets."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


def join_lines(*parts: str) -> str:
    """Concatenate multi-line text values, one part after the other.

    Empty parts are skipped and each part is separated by a single newline.
    """
    return "\n".join(p.strip("\n") for p in parts if p and p.strip("\n"))


def merge_declarations(
    layers: Iterable[Mapping[str, PathDeclaration]],
) -> dict[str, PathSpec]:
    """Fold declaration layers into resolved entries.

    Args:
        layers: Declaration mappings in the order they apply.

    Returns:
        Mapping of entry name to PathSpec. Entries whose final state is
        disabled are kept with ``enable=False`` when they are complete,
        and dropped when they never received a path.

    Raises:
        InvalidFieldError: If an enabled entry is incomplete or a merged
            field fails its domain check.
    """
    accumulated: dict[str, dict[str, Any]] = {}

    for index, layer in enumerate(layers):
        for name, declaration in layer.items():
            fields = declaration.updates()
            current = accumulated.setdefault(name, {})
            extra = fields.pop("extra_config", None)
            if extra is not None:
                current["extra_config"] = join_lines(current.get("extra_config", ""), extra)
            if fields:
                logger.debug("Layer %d sets %s on paths.%s", index, sorted(fields), name)
            current.update(fields)

    resolved: dict[str, PathSpec] = {}
    for name, fields in accumulated.items():
        enabled = fields.get("enable", True)
        if not enabled and "path" not in fields:
            logger.debug("Dropping disabled incomplete entry paths.%s", name)
            continue
        if "path" not in fields:
            raise InvalidFieldError(name, "path", "Field required")
        if not enabled:
            # Disabled entries are never validated beyond what construction needs
            resolved[name] = PathSpec.model_construct(name=name, **fields)
            continue
        resolved[name] = PathSpec.from_mapping(fields, name=name)

    return resolved


def merge_extra_config(values: Iterable[str]) -> str:
    """Concatenate the global trailing text of every layer in order."""
    return join_lines(*values)
