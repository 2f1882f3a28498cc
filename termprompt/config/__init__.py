"""Prompt configuration: formatter records, layering and the theme."""

from .manager import (
    ConfigManager,
    build_config,
    get_config_manager,
    reset_global_config,
    set_global_config,
)
from .prompt_config import PromptConfig, fill_defaults, merge_config, with_result_title
from .theme import DEFAULT_THEME, Theme, get_theme, reset_theme, set_theme

__all__ = [
    "ConfigManager",
    "DEFAULT_THEME",
    "PromptConfig",
    "Theme",
    "build_config",
    "fill_defaults",
    "get_config_manager",
    "get_theme",
    "merge_config",
    "reset_global_config",
    "reset_theme",
    "set_global_config",
    "set_theme",
    "with_result_title",
]
