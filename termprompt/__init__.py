"""termprompt: interactive terminal prompts on raw mode and ANSI sequences."""

from importlib.metadata import version

from .builders import Confirm, Input, MultiSelect, Password, Select
from .config import PromptConfig, Theme, get_theme, reset_theme, set_theme
from .config.manager import get_config_manager, reset_global_config, set_global_config
from .core.errors import (
    FormFieldError,
    FormValidationError,
    PromptCancelled,
    PromptConfigError,
    PromptError,
    PromptReadError,
    RawModeUnavailable,
)
from .form import FormBuilder, FormResult, ask_form
from .widgets import (
    Alignment,
    Message,
    Spinner,
    Table,
    ask_confirm,
    ask_input,
    ask_multiselect,
    ask_password,
    ask_select,
)

__all__ = [
    "Alignment",
    "Confirm",
    "FormBuilder",
    "FormFieldError",
    "FormResult",
    "FormValidationError",
    "Input",
    "Message",
    "MultiSelect",
    "Password",
    "PromptCancelled",
    "PromptConfig",
    "PromptConfigError",
    "PromptError",
    "PromptReadError",
    "RawModeUnavailable",
    "Select",
    "Spinner",
    "Table",
    "Theme",
    "ask_confirm",
    "ask_form",
    "ask_input",
    "ask_multiselect",
    "ask_password",
    "ask_select",
    "get_config_manager",
    "get_theme",
    "reset_global_config",
    "reset_theme",
    "set_global_config",
    "set_theme",
]

# Single source of truth comes from package metadata defined in pyproject.toml
__version__ = version("termprompt")
