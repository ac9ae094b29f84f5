"""Capture backend configuration object."""

import logging
from collections.abc import Iterator

from ..core.config import Settings, get_settings
from ..core.exceptions import InvalidArgumentError
from .dictionary import VariableDictionary
from .module import Mode, ModuleDescriptor, ModuleRef

logger = logging.getLogger(__name__)


class CaptureConfig:
    """Settings used to instantiate a capture module.

    Holds a borrowed handle to the module descriptor, the scalar capture
    settings and a dictionary of backend-specific variables. Scalar setters
    do not validate ranges; variable values are opaque strings.
    """

    def __init__(self, module: ModuleDescriptor | ModuleRef):
        if module is None:
            raise InvalidArgumentError("module")
        self._module = module if isinstance(module, ModuleRef) else ModuleRef(module)
        self.input: str | None = None
        self.snaplen: int = 0
        self.timeout: int = 0
        self.mode: Mode = Mode.NONE
        self.flags: int = 0
        self._variables = VariableDictionary()
        logger.debug("Created capture configuration for module '%s'", self._module.name)

    @classmethod
    def create(cls, module: ModuleDescriptor | ModuleRef | None) -> "CaptureConfig":
        """Create a configuration bound to module.

        Raises:
            InvalidArgumentError: module is None.
        """
        return cls(module)

    # Module

    @property
    def module_ref(self) -> ModuleRef:
        return self._module

    def get_module(self) -> ModuleDescriptor | None:
        """Return the module descriptor, or None if its owner released it."""
        descriptor = self._module.resolve()
        if descriptor is None:
            logger.warning("Module '%s' was released before its configuration", self._module.name)
        return descriptor

    # Scalars

    def set_input(self, text: str | None) -> None:
        self.input = text

    def get_input(self) -> str | None:
        return self.input

    def set_snaplen(self, snaplen: int) -> None:
        self.snaplen = snaplen

    def get_snaplen(self) -> int:
        return self.snaplen

    def set_timeout(self, timeout: int) -> None:
        self.timeout = timeout

    def get_timeout(self) -> int:
        return self.timeout

    def set_mode(self, mode: Mode) -> None:
        self.mode = mode

    def get_mode(self) -> Mode:
        return self.mode

    def set_flag(self, flag: int) -> None:
        """Add flag to the bitmask. Flags cannot be removed once set."""
        self.flags |= int(flag)

    def get_flags(self) -> int:
        return self.flags

    # Variables

    @property
    def variables(self) -> VariableDictionary:
        return self._variables

    def set_variable(self, key: str, value: str | None = None) -> None:
        """Set or replace a variable. A value of None keeps the key with no value.

        Raises:
            InvalidArgumentError: key is None.
            OutOfMemoryError: a new entry could not be allocated.
        """
        if key is None:
            raise InvalidArgumentError("key")
        self._variables.upsert(key, value)

    def get_variable(self, key: str) -> str | None:
        entry = self._variables.find(key)
        if entry is None:
            return None
        return entry.value

    def delete_variable(self, key: str) -> None:
        if key is None:
            return
        self._variables.delete(key)

    def first_variable(self) -> tuple[str | None, str | None]:
        entry = self._variables.first()
        if entry is None:
            return None, None
        return entry.as_pair()

    def next_variable(self) -> tuple[str | None, str | None]:
        entry = self._variables.next()
        if entry is None:
            return None, None
        return entry.as_pair()

    def iter_variables(self) -> Iterator[tuple[str, str | None]]:
        """Walk variables with a private position, independent of first/next."""
        for entry in self._variables.iterate():
            yield entry.as_pair()

    def clear_variables(self) -> None:
        self._variables.clear()

    # Lifecycle

    def destroy(self) -> None:
        """Drop the input string and all variables.

        The module descriptor is borrowed and left untouched.
        """
        logger.debug("Destroying capture configuration for module '%s'", self._module.name)
        self.input = None
        self._variables.clear()

    def __enter__(self) -> "CaptureConfig":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.destroy()

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "module": self._module.name,
            "input": self.input,
            "snaplen": self.snaplen,
            "timeout": self.timeout,
            "mode": self.mode.value,
            "flags": self.flags,
            "variables": [{"key": key, "value": value} for key, value in self._variables.items()],
        }

    def __repr__(self) -> str:
        return (
            f"CaptureConfig(module={self._module.name!r}, input={self.input!r}, "
            f"snaplen={self.snaplen}, timeout={self.timeout}, mode={self.mode.value!r}, "
            f"flags={self.flags:#x}, variables={len(self._variables)})"
        )


def apply_defaults(cfg: CaptureConfig, settings: Settings | None = None) -> None:
    """Write the toolkit's default snaplen, timeout and mode into cfg."""
    settings = settings or get_settings()
    cfg.set_snaplen(settings.default_snaplen)
    cfg.set_timeout(settings.default_timeout)
    cfg.set_mode(Mode.parse(settings.default_mode))
