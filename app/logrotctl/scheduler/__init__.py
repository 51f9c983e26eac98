"""Periodic invocation of the rotation tool.

The scheduler wrapper runs the external logrotate binary against the
rendered file and describes the systemd units that trigger it.
"""

from logrotctl.scheduler.runner import (
    RotationRunner,
    RunLockedError,
    RunnerError,
    RunResult,
    ToolNotFoundError,
    run_lock,
)
from logrotctl.scheduler.systemd import UnitSettings, render_service_unit, render_timer_unit

__all__ = [
    "RotationRunner",
    "RunLockedError",
    "RunResult",
    "RunnerError",
    "ToolNotFoundError",
    "UnitSettings",
    "render_service_unit",
    "render_timer_unit",
    "run_lock",
]
