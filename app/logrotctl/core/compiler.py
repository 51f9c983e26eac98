"""Configuration compiler.

Runs the full pipeline from declared entries to rendered text:
collect enabled entries, validate them as a batch, order them, render.
Any validation error stops the pass before rendering.
"""

import logging
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from logrotctl.core.collector import collect_enabled
from logrotctl.core.ordering import order_paths
from logrotctl.core.renderer import render_config
from logrotctl.core.validator import ensure_valid
from logrotctl.models.path_spec import PathSpec

logger = logging.getLogger(__name__)


class RotationConfig(BaseModel):
    """Declared state for one render pass.

    Attributes:
        paths: Mapping of entry name to PathSpec.
        extra_config: Global text appended after all path blocks.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    paths: Annotated[
        dict[str, PathSpec],
        Field(default_factory=dict, description="Paths to rotate, keyed by name"),
    ]
    extra_config: Annotated[str, Field(description="Trailing logrotate configuration")] = ""

    @property
    def enabled_count(self) -> int:
        """Number of entries that will be rendered."""
        return sum(1 for spec in self.paths.values() if spec.enable)


def plan_paths(config: RotationConfig) -> list[PathSpec]:
    """Collect, validate, and order the entries of a configuration.

    Args:
        config: Declared configuration.

    Returns:
        Enabled entries in render order.

    Raises:
        ConfigValidationError: If any enabled entry violates an invariant.
    """
    collected = collect_enabled(config.paths)
    ensure_valid(collected)
    ordered = order_paths(collected)
    logger.debug(
        "Planned %d of %d entries: %s",
        len(ordered),
        len(config.paths),
        [spec.name for spec in ordered],
    )
    return ordered


def compile_config(config: RotationConfig, annotate: bool = False) -> str:
    """Compile a configuration into logrotate text.

    Args:
        config: Declared configuration.
        annotate: Prefix each block with a comment naming its entry.

    Returns:
        Rendered configuration text.

    Raises:
        ConfigValidationError: If any enabled entry violates an invariant.
            Nothing is rendered in that case.
    """
    return render_config(plan_paths(config), config.extra_config, annotate=annotate)
