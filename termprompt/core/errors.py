from __future__ import annotations


class PromptError(Exception):
    """Base class for every error raised by the prompt engine."""


class PromptCancelled(PromptError):
    """The user pressed Ctrl+C. The terminal has already been restored."""

    def __init__(self, message: str = "input cancelled by user") -> None:
        super().__init__(message)


class PromptReadError(PromptError):
    pass


class RawModeUnavailable(PromptError):
    """Raw mode cannot be entered, e.g. stdin is a pipe."""


class PromptConfigError(PromptError, ValueError):
    pass


class FormFieldError(PromptError):
    def __init__(self, key: str, cause: BaseException) -> None:
        super().__init__(f"field {key!r} failed: {cause}")
        self.key = key
        self.cause = cause


class FormValidationError(PromptError):
    pass
