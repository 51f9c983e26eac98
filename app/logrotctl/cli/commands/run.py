"""Run command implementation.

Renders the declarations and runs logrotate against the rendered file.
Intended to be started by a timer; refuses to start while a previous
pass still holds the run lock.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from logrotctl.cli.display import print_validation_errors
from logrotctl.cli.types import get_config_option
from logrotctl.core.compiler import compile_config
from logrotctl.core.config import require_config
from logrotctl.core.paths import ensure_state_dir, get_lock_path, get_rendered_path
from logrotctl.core.validator import ConfigValidationError
from logrotctl.core.writer import RenderIOError, write_config
from logrotctl.scheduler.runner import (
    DEFAULT_BINARY,
    RotationRunner,
    RunLockedError,
    RunnerError,
    run_lock,
)
from logrotctl.utils.formatting import err_console, print_error, print_success

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Render the configuration and run logrotate on it.",
    invoke_without_command=True,
)


def _render_to(ctx: typer.Context, output_path: Path) -> None:
    """Compile the declarations and publish them to output_path."""
    config = require_config(get_config_option(ctx))
    try:
        text = compile_config(config)
    except ConfigValidationError as e:
        print_validation_errors(e.errors)
        raise typer.Exit(code=1) from e

    try:
        changed = write_config(text, output_path)
    except RenderIOError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    logger.debug("Rendered config %s: %s", "updated" if changed else "unchanged", output_path)


@app.callback(invoke_without_command=True)
def run_rotation(
    ctx: typer.Context,
    binary: Annotated[
        str,
        typer.Option(
            "--binary",
            "-b",
            help="Rotation tool to run.",
        ),
    ] = DEFAULT_BINARY,
    rendered: Annotated[
        Path | None,
        typer.Option(
            "--rendered",
            "-r",
            help="Rendered file path (default: ~/.local/state/logrotctl/logrotate.conf).",
        ),
    ] = None,
    no_render: Annotated[
        bool,
        typer.Option(
            "--no-render",
            help="Run against the existing rendered file without re-rendering.",
        ),
    ] = False,
    lock: Annotated[
        Path | None,
        typer.Option(
            "--lock",
            help="Run lock path (default: ~/.local/state/logrotctl/run.lock).",
        ),
    ] = None,
) -> None:
    """Run one rotation pass.

    Exits with the rotation tool's exit code when it fails.
    """
    if ctx.invoked_subcommand is not None:
        return

    if rendered is None or lock is None:
        try:
            ensure_state_dir()
        except RuntimeError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e

    rendered_path = rendered or get_rendered_path()
    runner = RotationRunner(binary=binary)

    try:
        with run_lock(lock or get_lock_path()):
            if not no_render:
                _render_to(ctx, rendered_path)
            elif not rendered_path.exists():
                print_error(f"Rendered config not found: {rendered_path}")
                raise typer.Exit(code=1)

            result = runner.run(rendered_path)
    except RunLockedError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    except RunnerError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    except OSError as e:
        print_error(f"Cannot take run lock: {e}")
        raise typer.Exit(code=1) from e

    if result.stdout.strip():
        typer.echo(result.stdout.rstrip())

    if not result.success:
        print_error(f"{binary} exited with code {result.returncode}")
        if result.stderr.strip():
            err_console.print(result.stderr.strip(), style="muted", markup=False, highlight=False)
        raise typer.Exit(code=result.returncode)

    print_success(f"Rotation pass completed using {rendered_path}")
