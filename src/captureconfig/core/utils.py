"""Utility functions for Capture Config."""

import logging

from rich.logging import RichHandler

from .exceptions import ValidationError


def configure_logging(verbose: bool = False) -> None:
    """Route package logging through rich. Debug level when verbose."""
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger("captureconfig")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)


def parse_variable(text: str) -> tuple[str, str | None]:
    """Split a 'key=value' or bare 'key' string into its parts.

    Only the first '=' separates; the value may contain more. A bare key
    yields a value of None, 'key=' an empty string.
    """
    key, sep, value = text.partition("=")
    key = key.strip()
    if not key:
        raise ValidationError(f"Invalid variable: {text!r}", "expected KEY or KEY=VALUE")
    return key, value if sep else None


def parse_int(text: str) -> int:
    """Parse a decimal, hex (0x) or binary (0b) non-negative integer."""
    try:
        value = int(text.strip(), 0)
    except ValueError as e:
        raise ValidationError(f"Invalid integer: {text!r}", str(e)) from e
    if value < 0:
        raise ValidationError(f"Value must not be negative: {text!r}")
    return value
