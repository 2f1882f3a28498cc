from __future__ import annotations

from .prompt_config import PromptConfig, ensure_complete, fill_defaults, merge_config
from .rwlock import ReadWriteLock
from .theme import theme_prompt_config


class ConfigManager:
    """Three-layer prompt configuration.

    Precedence is call-local, then the process-wide override, then the
    system default. The merged result always has the formatters every
    prompt calls unconditionally.
    """

    def __init__(self, default_config: PromptConfig) -> None:
        self._default_config = default_config
        self._global_config = PromptConfig()
        self._lock = ReadWriteLock()

    @property
    def default_config(self) -> PromptConfig:
        return self._default_config

    def set_global_config(self, config: PromptConfig) -> None:
        with self._lock.write():
            self._global_config = config

    def get_global_config(self) -> PromptConfig:
        with self._lock.read():
            return self._global_config

    def reset_global_config(self) -> None:
        self.set_global_config(PromptConfig())

    def build_config(self, local_config: PromptConfig | None = None) -> PromptConfig:
        with self._lock.read():
            merged = fill_defaults(self._global_config, self._default_config)
        merged = merge_config(merged, local_config)
        return ensure_complete(merged)


_manager = ConfigManager(theme_prompt_config())


def get_config_manager() -> ConfigManager:
    return _manager


def build_config(local_config: PromptConfig | None = None) -> PromptConfig:
    return _manager.build_config(local_config)


def set_global_config(config: PromptConfig) -> None:
    _manager.set_global_config(config)


def reset_global_config() -> None:
    _manager.reset_global_config()
