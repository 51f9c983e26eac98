"""Init command implementation.

Creates a starter declaration file with one example entry.
"""

from pathlib import Path
from typing import Annotated

import typer

from logrotctl.cli.types import get_config_option
from logrotctl.core.config import ConfigError, ConfigLayer, config_exists, save_layer
from logrotctl.core.merge import PathDeclaration
from logrotctl.core.paths import ensure_config_dir, get_config_path
from logrotctl.models.path_spec import Frequency
from logrotctl.utils.formatting import print_error, print_info, print_success, print_warning

app = typer.Typer(
    help="Create a starter declaration file.",
    invoke_without_command=True,
)


def create_starter_layer() -> ConfigLayer:
    """Build the declaration written by ``logrotctl init``."""
    return ConfigLayer(
        paths={
            "example": PathDeclaration(
                path="/var/log/example/*.log",
                frequency=Frequency.WEEKLY.value,
                keep=4,
                extra_config="compress\ndelaycompress",
            ),
        },
    )


@app.callback(invoke_without_command=True)
def init_config(
    ctx: typer.Context,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path for the declaration file.",
        ),
    ] = None,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing declaration file.",
        ),
    ] = False,
) -> None:
    """Initialize a new declaration file.

    Examples:
        logrotctl init                  # Create in the default location
        logrotctl init --output a.toml  # Create at a custom path
        logrotctl init --force          # Overwrite an existing file
    """
    if ctx.invoked_subcommand is not None:
        return

    output_path = output or get_config_option(ctx)
    if output_path is None:
        try:
            ensure_config_dir()
        except RuntimeError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e
        output_path = get_config_path()

    if config_exists(output_path):
        if not force:
            print_error(f"Config already exists: {output_path}")
            print_info("Use --force to overwrite or specify a different path with --output.")
            raise typer.Exit(code=1)
        print_warning(f"Overwriting existing config: {output_path}")

    try:
        saved_path = save_layer(create_starter_layer(), output_path)
    except ConfigError as e:
        print_error(f"Failed to save config: {e}")
        raise typer.Exit(code=1) from e

    print_success(f"Config created: {saved_path}")
    print_info("Edit the [paths] tables, then run 'logrotctl check' and 'logrotctl render'.")
