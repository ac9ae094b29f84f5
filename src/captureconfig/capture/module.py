"""Capture modes, configuration flags and borrowed module handles."""

import weakref
from dataclasses import dataclass
from enum import Enum, IntFlag

from ..core.exceptions import ValidationError


class Mode(Enum):
    """Operating mode of a capture module."""

    NONE = "none"
    PASSIVE = "passive"
    INLINE = "inline"
    READ_FILE = "read-file"

    @classmethod
    def parse(cls, name: str) -> "Mode":
        """Look up a mode by value or member name, case-insensitively."""
        normalized = name.strip().lower().replace("_", "-")
        for mode in cls:
            if mode.value == normalized:
                return mode
        choices = ", ".join(mode.value for mode in cls)
        raise ValidationError(f"Unknown mode: {name}", f"expected one of {choices}")


class Flag(IntFlag):
    """Known configuration flags. Any integer bit is accepted by set_flag."""

    PROMISC = 0x01


@dataclass(eq=False)
class ModuleDescriptor:
    """Describes a pluggable capture backend.

    Descriptors are owned by whatever loaded the backend. Configurations only
    ever hold a ModuleRef to one.
    """

    name: str


class ModuleRef:
    """Non-owning handle to a ModuleDescriptor.

    The descriptor must outlive every configuration holding a handle to it.
    resolve() returns None once the owner has released the descriptor.
    """

    __slots__ = ("_ref", "name")

    def __init__(self, descriptor: ModuleDescriptor):
        self._ref = weakref.ref(descriptor)
        self.name = descriptor.name

    def resolve(self) -> ModuleDescriptor | None:
        return self._ref()

    @property
    def alive(self) -> bool:
        return self._ref() is not None

    def __repr__(self) -> str:
        state = "alive" if self.alive else "released"
        return f"ModuleRef({self.name!r}, {state})"
