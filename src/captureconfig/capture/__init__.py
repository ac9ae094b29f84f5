"""Capture module configuration - variable dictionary and configuration object."""

from .config import CaptureConfig, apply_defaults
from .dictionary import DictionaryIterator, Entry, VariableDictionary
from .module import Flag, Mode, ModuleDescriptor, ModuleRef

__all__ = [
    "CaptureConfig",
    "apply_defaults",
    "Entry",
    "VariableDictionary",
    "DictionaryIterator",
    "Mode",
    "Flag",
    "ModuleDescriptor",
    "ModuleRef",
]
