"""Core module - settings, exceptions, and utilities."""

from .config import Settings, get_settings, set_settings
from .exceptions import (
    CaptureConfigError,
    InvalidArgumentError,
    OutOfMemoryError,
    Status,
    ValidationError,
)
from .utils import configure_logging, parse_int, parse_variable

__all__ = [
    "Settings",
    "get_settings",
    "set_settings",
    "Status",
    "CaptureConfigError",
    "InvalidArgumentError",
    "OutOfMemoryError",
    "ValidationError",
    "configure_logging",
    "parse_int",
    "parse_variable",
]
