"""Data models for logrotctl.

This module exports the core data structures used throughout the application.
"""

from logrotctl.models.path_spec import (
    DEFAULT_EXTRA_CONFIG,
    Frequency,
    InvalidFieldError,
    PathSpec,
)

__all__ = [
    "DEFAULT_EXTRA_CONFIG",
    "Frequency",
    "InvalidFieldError",
    "PathSpec",
]
