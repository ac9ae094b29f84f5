"""Custom exceptions and status codes for Capture Config."""

from enum import IntEnum


class Status(IntEnum):
    """Result codes returned by the functional API."""

    SUCCESS = 0
    INVALID_ARGUMENT = 1
    OUT_OF_MEMORY = 2


class CaptureConfigError(Exception):
    """Base exception for all Capture Config errors."""

    status: Status = Status.INVALID_ARGUMENT

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class InvalidArgumentError(CaptureConfigError):
    """A required argument was absent."""

    status = Status.INVALID_ARGUMENT

    def __init__(self, argument: str, details: str | None = None):
        message = f"Missing required argument: {argument}"
        super().__init__(message, details)
        self.argument = argument


class OutOfMemoryError(CaptureConfigError):
    """Allocation of an entry or string failed."""

    status = Status.OUT_OF_MEMORY

    def __init__(self, operation: str, details: str | None = None):
        message = f"Out of memory during {operation}"
        super().__init__(message, details)
        self.operation = operation


class ValidationError(CaptureConfigError):
    """Input validation error."""

    pass
