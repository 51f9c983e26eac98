"""Units command implementation.

Prints or writes the systemd service and timer that run logrotate on the
rendered file at a fixed interval.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from logrotctl.core.paths import get_rendered_path
from logrotctl.core.writer import RenderIOError, write_config
from logrotctl.scheduler.runner import DEFAULT_BINARY, resolve_binary
from logrotctl.scheduler.systemd import UnitSettings, render_service_unit, render_timer_unit
from logrotctl.utils.formatting import print_error, print_info, print_success

app = typer.Typer(
    help="Generate systemd units that run logrotate on a schedule.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def generate_units(
    ctx: typer.Context,
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            "-o",
            help="Write the unit files into this directory instead of printing them.",
        ),
    ] = None,
    on_calendar: Annotated[
        str,
        typer.Option(
            "--on-calendar",
            help="Systemd calendar expression for the timer.",
        ),
    ] = "hourly",
    exec_path: Annotated[
        str | None,
        typer.Option(
            "--exec-path",
            help="Rotation tool executable (default: resolved from PATH).",
        ),
    ] = None,
    rendered: Annotated[
        Path | None,
        typer.Option(
            "--rendered",
            "-r",
            help="Rendered file the service passes to logrotate.",
        ),
    ] = None,
    user: Annotated[
        str,
        typer.Option(
            "--user",
            help="Account the service runs as.",
        ),
    ] = "root",
) -> None:
    """Generate the logrotate service and timer units."""
    if ctx.invoked_subcommand is not None:
        return

    overrides: dict[str, str] = {"on_calendar": on_calendar, "user": user}
    resolved = exec_path or resolve_binary(DEFAULT_BINARY)
    if resolved:
        overrides["exec_path"] = resolved

    try:
        settings = UnitSettings(**overrides)
    except ValidationError as e:
        print_error(f"Invalid unit settings: {e}")
        raise typer.Exit(code=1) from e

    config_path = (rendered or get_rendered_path()).resolve()
    service = render_service_unit(settings, config_path)
    timer = render_timer_unit(settings)

    if output_dir is None:
        typer.echo(f"# {settings.service_filename}")
        typer.echo(service)
        typer.echo(f"# {settings.timer_filename}")
        typer.echo(timer, nl=False)
        return

    try:
        for filename, text in (
            (settings.service_filename, service),
            (settings.timer_filename, timer),
        ):
            target = output_dir / filename
            if write_config(text, target):
                print_success(f"Wrote {target}")
            else:
                print_info(f"Unchanged: {target}")
    except RenderIOError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_info(f"Enable with: systemctl enable --now {settings.timer_filename}")
