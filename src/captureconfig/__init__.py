"""Capture Config - configuration container for pluggable packet-capture backends."""

__version__ = "0.1.0"
__author__ = "Capture Config Team"

from .capture import CaptureConfig, Flag, Mode, ModuleDescriptor, ModuleRef, VariableDictionary
from .core import CaptureConfigError, InvalidArgumentError, OutOfMemoryError, Status

__all__ = [
    "__version__",
    "__author__",
    "CaptureConfig",
    "VariableDictionary",
    "ModuleDescriptor",
    "ModuleRef",
    "Mode",
    "Flag",
    "Status",
    "CaptureConfigError",
    "InvalidArgumentError",
    "OutOfMemoryError",
]
