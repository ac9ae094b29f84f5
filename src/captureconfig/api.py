"""Status-returning functional interface to capture configurations.

Every function accepts ``cfg=None``. Setters report
``Status.INVALID_ARGUMENT`` for a missing configuration; accessors return a
harmless default instead, so read sites can stay unguarded.
"""

from .capture.config import CaptureConfig
from .capture.module import Mode, ModuleDescriptor, ModuleRef
from .core.exceptions import CaptureConfigError, Status


def config_new(module: ModuleDescriptor | ModuleRef | None) -> tuple[Status, CaptureConfig | None]:
    """Create a configuration. Returns the status and the new object (or None)."""
    try:
        return Status.SUCCESS, CaptureConfig.create(module)
    except CaptureConfigError as e:
        return e.status, None


def config_get_module(cfg: CaptureConfig | None) -> ModuleDescriptor | None:
    if cfg is None:
        return None
    return cfg.get_module()


def config_set_input(cfg: CaptureConfig | None, text: str | None) -> Status:
    if cfg is None:
        return Status.INVALID_ARGUMENT
    cfg.set_input(text)
    return Status.SUCCESS


def config_get_input(cfg: CaptureConfig | None) -> str | None:
    if cfg is None:
        return None
    return cfg.get_input()


def config_set_snaplen(cfg: CaptureConfig | None, snaplen: int) -> Status:
    if cfg is None:
        return Status.INVALID_ARGUMENT
    cfg.set_snaplen(snaplen)
    return Status.SUCCESS


def config_get_snaplen(cfg: CaptureConfig | None) -> int:
    if cfg is None:
        return 0
    return cfg.get_snaplen()


def config_set_timeout(cfg: CaptureConfig | None, timeout: int) -> Status:
    if cfg is None:
        return Status.INVALID_ARGUMENT
    cfg.set_timeout(timeout)
    return Status.SUCCESS


def config_get_timeout(cfg: CaptureConfig | None) -> int:
    if cfg is None:
        return 0
    return cfg.get_timeout()


def config_set_mode(cfg: CaptureConfig | None, mode: Mode) -> Status:
    if cfg is None:
        return Status.INVALID_ARGUMENT
    cfg.set_mode(mode)
    return Status.SUCCESS


def config_get_mode(cfg: CaptureConfig | None) -> Mode:
    if cfg is None:
        return Mode.NONE
    return cfg.get_mode()


def config_set_flag(cfg: CaptureConfig | None, flag: int) -> Status:
    if cfg is None:
        return Status.INVALID_ARGUMENT
    cfg.set_flag(flag)
    return Status.SUCCESS


def config_get_flags(cfg: CaptureConfig | None) -> int:
    if cfg is None:
        return 0
    return cfg.get_flags()


def config_set_variable(cfg: CaptureConfig | None, key: str | None, value: str | None) -> Status:
    if cfg is None or key is None:
        return Status.INVALID_ARGUMENT
    try:
        cfg.set_variable(key, value)
    except CaptureConfigError as e:
        return e.status
    return Status.SUCCESS


def config_get_variable(cfg: CaptureConfig | None, key: str | None) -> str | None:
    if cfg is None or key is None:
        return None
    return cfg.get_variable(key)


def config_delete_variable(cfg: CaptureConfig | None, key: str | None) -> None:
    if cfg is None or key is None:
        return
    cfg.delete_variable(key)


def config_first_variable(cfg: CaptureConfig | None) -> tuple[Status, str | None, str | None]:
    """Start the shared traversal. Returns (status, key, value)."""
    if cfg is None:
        return Status.INVALID_ARGUMENT, None, None
    key, value = cfg.first_variable()
    return Status.SUCCESS, key, value


def config_next_variable(cfg: CaptureConfig | None) -> tuple[Status, str | None, str | None]:
    """Continue the shared traversal. (SUCCESS, None, None) marks the end."""
    if cfg is None:
        return Status.INVALID_ARGUMENT, None, None
    key, value = cfg.next_variable()
    return Status.SUCCESS, key, value


def config_clear_variables(cfg: CaptureConfig | None) -> None:
    if cfg is None:
        return
    cfg.clear_variables()


def config_destroy(cfg: CaptureConfig | None) -> None:
    if cfg is None:
        return
    cfg.destroy()
