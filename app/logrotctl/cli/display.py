"""Shared Rich display functions for entries and validation results.

Provides reusable table builders and printers used by the check, show,
render, and run commands.
"""

from rich.markup import escape
from rich.table import Table

from logrotctl.core.validator import PathValidationError
from logrotctl.models.path_spec import PathSpec
from logrotctl.utils.formatting import console, create_entries_table, err_console, print_error


def create_validation_table(errors: list[PathValidationError]) -> Table:
    """Create a Rich table listing validation errors by entry name.

    Args:
        errors: Violations to display.

    Returns:
        Rich Table with one row per violation.
    """
    table = Table(
        title="Validation Errors",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Entry", style="entry.name", no_wrap=True)
    table.add_column("Problem")

    for error in errors:
        table.add_row(escape(error.name), f"[muted]{escape(error.reason)}[/muted]")

    return table


def print_validation_errors(errors: list[PathValidationError]) -> None:
    """Print all validation errors followed by a summary line."""
    err_console.print(create_validation_table(errors))
    print_error(f"{len(errors)} validation error(s) found. Nothing was rendered.")


def print_entries(entries: list[PathSpec], title: str = "Rotation Entries") -> None:
    """Print entries as a table in the order given.

    Args:
        entries: Entries already in render order.
        title: Table title.
    """
    table = create_entries_table(title)
    for spec in entries:
        owner = escape(f"{spec.user}:{spec.group}") if spec.has_ownership else "-"
        table.add_row(
            str(spec.priority),
            escape(spec.name or "-"),
            escape(spec.path),
            spec.frequency.value,
            str(spec.keep),
            owner,
        )
    console.print(table)
