"""Errors raised by prompts."""

from __future__ import annotations

# OS error numbers reported when the input device cannot be put into raw mode:
# ENOTTY (25) and ENXIO (6).
_NOT_A_TTY_ERRNOS = frozenset({25, 6})


class InquireError(Exception):
    """Base class of every error a prompt may raise."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NotTTYError(InquireError):
    """The input device is not a TTY, so raw-mode input is not possible."""

    def __init__(self) -> None:
        super().__init__("The input device is not a TTY")


class InvalidConfigurationError(InquireError):
    """The prompt was configured in a way that cannot work."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"The prompt configuration is invalid: {detail}")
        self.detail = detail


class InquireIOError(InquireError):
    """An input/output operation failed."""

    def __init__(self, error: OSError) -> None:
        super().__init__(f"IO error: {error}")
        self.error = error
        self.__cause__ = error


class OperationCanceledError(InquireError):
    """The user canceled the prompt, e.g. by pressing ESC."""

    def __init__(self) -> None:
        super().__init__("Operation was canceled by the user")


class OperationInterruptedError(InquireError):
    """The user interrupted the prompt with Ctrl+C."""

    def __init__(self) -> None:
        super().__init__("Operation was interrupted by the user")


class CustomUserError(InquireError):
    """Wraps an exception raised by a user-supplied callback."""

    def __init__(self, error: BaseException) -> None:
        super().__init__(f"User-provided error: {error}")
        self.error = error
        self.__cause__ = error


def from_os_error(err: OSError) -> InquireError:
    """Convert an OS error into the matching prompt error."""
    if err.errno in _NOT_A_TTY_ERRNOS:
        result: InquireError = NotTTYError()
        result.__cause__ = err
        return result
    return InquireIOError(err)