"""Rendering of ordered entries into logrotate configuration text.

Rendering is pure: the same ordered entries and trailing text always
produce byte-identical output, and nothing here touches the filesystem.
"""

from collections.abc import Iterable

from logrotctl.models.path_spec import PathSpec

INDENT = "  "


def _body_lines(spec: PathSpec) -> list[str]:
    """Build the directive lines of one block, without indentation."""
    lines: list[str] = []
    # Mixed user/group is rejected by validation, so only emit when both are set
    if spec.has_ownership:
        lines.append(f"su {spec.user} {spec.group}")
    lines.append(spec.frequency.value)
    lines.append(f"rotate {spec.keep}")
    # Caller text is opaque: keep its own indentation and blank lines
    lines.extend(spec.directives.splitlines())
    return lines


def render_block(spec: PathSpec, annotate: bool = False) -> str:
    """Render a single entry as a logrotate block.

    Args:
        spec: The entry to render.
        annotate: Prefix the block with a comment naming its entry.

    Returns:
        Block text ending with a newline.
    """
    out: list[str] = []
    if annotate:
        out.append(f"# generated by logrotctl from paths.{spec.name}")
    out.append(f'"{spec.path}" {{')
    out.extend(f"{INDENT}{line}" if line else "" for line in _body_lines(spec))
    out.append("}")
    return "\n".join(out) + "\n"


def render_config(
    ordered: Iterable[PathSpec],
    extra_config: str = "",
    annotate: bool = False,
) -> str:
    """Render the complete configuration file.

    Blocks appear in the given order separated by one blank line; the
    global trailing text follows once after the last block.

    Args:
        ordered: Entries already in render order.
        extra_config: Global text appended after all blocks.
        annotate: Prefix each block with a comment naming its entry.

    Returns:
        Full configuration text.
    """
    segments = [render_block(spec, annotate=annotate) for spec in ordered]
    if extra_config and not extra_config.endswith("\n"):
        extra_config += "\n"
    segments.append(extra_config)
    return "\n".join(segments)
