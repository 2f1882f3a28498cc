"""Errors, navigation and logging shared by every prompt."""

from .errors import (
    FormFieldError,
    FormValidationError,
    PromptCancelled,
    PromptConfigError,
    PromptError,
    PromptReadError,
    RawModeUnavailable,
)
from .navigation import NavigationHandler
from .session_log import PromptLogger, get_active_logger, set_active_logger

__all__ = [
    "FormFieldError",
    "FormValidationError",
    "NavigationHandler",
    "PromptCancelled",
    "PromptConfigError",
    "PromptError",
    "PromptLogger",
    "PromptReadError",
    "RawModeUnavailable",
    "get_active_logger",
    "set_active_logger",
]
