"""Systemd unit rendering for periodic rotation.

A oneshot service runs the rotation tool against the rendered file and a
timer fires it on a fixed calendar interval.
"""

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UnitSettings(BaseModel):
    """Settings for the generated service and timer units.

    Attributes:
        unit_name: Base name of the units (``<unit_name>.service``/``.timer``).
        description: Unit description.
        exec_path: Rotation tool executable.
        on_calendar: Systemd calendar expression for the timer.
        user: Account the service runs as.
        wanted_by: Target the service is installed into.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    unit_name: Annotated[str, Field(description="Base unit name")] = "logrotate"
    description: Annotated[str, Field(description="Unit description")] = "Logrotate Service"
    exec_path: Annotated[str, Field(description="Rotation tool executable")] = (
        "/usr/sbin/logrotate"
    )
    on_calendar: Annotated[str, Field(description="Timer calendar expression")] = "hourly"
    user: Annotated[str, Field(description="Service user")] = "root"
    wanted_by: Annotated[str, Field(description="Install target")] = "multi-user.target"

    @field_validator("*")
    @classmethod
    def validate_single_line(cls, v: str) -> str:
        """Unit values must be non-empty single lines."""
        if not v.strip() or "\n" in v:
            msg = "must be a non-empty single line"
            raise ValueError(msg)
        return v

    @property
    def service_filename(self) -> str:
        """File name of the service unit."""
        return f"{self.unit_name}.service"

    @property
    def timer_filename(self) -> str:
        """File name of the timer unit."""
        return f"{self.unit_name}.timer"


def render_service_unit(settings: UnitSettings, config_path: Path) -> str:
    """Render the oneshot service that runs the rotation tool once."""
    return (
        "[Unit]\n"
        f"Description={settings.description}\n"
        "\n"
        "[Service]\n"
        "Type=oneshot\n"
        f"ExecStart={settings.exec_path} {config_path}\n"
        "Restart=no\n"
        f"User={settings.user}\n"
        "\n"
        "[Install]\n"
        f"WantedBy={settings.wanted_by}\n"
    )


def render_timer_unit(settings: UnitSettings) -> str:
    """Render the timer that starts the service on schedule."""
    return (
        "[Unit]\n"
        f"Description={settings.description} timer\n"
        "\n"
        "[Timer]\n"
        f"OnCalendar={settings.on_calendar}\n"
        "Persistent=true\n"
        f"Unit={settings.service_filename}\n"
        "\n"
        "[Install]\n"
        "WantedBy=timers.target\n"
    )
