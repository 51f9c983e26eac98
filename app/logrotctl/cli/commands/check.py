"""Check command implementation.

Loads and merges every declaration layer and reports all validation
errors at once.
"""

import typer

from logrotctl.cli.display import print_validation_errors
from logrotctl.cli.types import get_config_option
from logrotctl.core.collector import collect_enabled
from logrotctl.core.config import require_config
from logrotctl.core.validator import validate_paths
from logrotctl.utils.formatting import print_success

app = typer.Typer(
    help="Validate the declared configuration.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def check_config(ctx: typer.Context) -> None:
    """Validate declarations without rendering anything.

    Exits with code 1 if any entry is invalid.
    """
    if ctx.invoked_subcommand is not None:
        return

    config = require_config(get_config_option(ctx))
    collected = collect_enabled(config.paths)

    errors = validate_paths(collected)
    if errors:
        print_validation_errors(errors)
        raise typer.Exit(code=1)

    disabled = len(config.paths) - len(collected)
    print_success(f"Configuration is valid: {len(collected)} enabled, {disabled} disabled.")
