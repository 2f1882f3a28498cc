from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Callable, Optional

DEFAULT_QUESTION_PREFIX = "? "
DEFAULT_ANSWER_PREFIX = "> "


@dataclass(frozen=True)
class PromptConfig:
    """Formatting callbacks used by every prompt.

    Each field is optional; ``None`` means "not set on this layer".

    - ``format_prompt(message)``: the question text.
    - ``format_answer(value)``: the resolved answer and highlighted rows.
    - ``format_error(message)``: inline validation errors.
    - ``format_hint(message)``: key hints, ``[Y/n]`` markers, placeholders.
    - ``format_question_prefix()``: marker printed before a question.
    - ``format_answer_prefix()``: marker printed before a resolved answer.
    - ``format_result_title(message, value)``: replaces the question text in
      the resolved line, e.g. to shorten a long question to a label.
    """

    format_prompt: Optional[Callable[[str], str]] = None
    format_answer: Optional[Callable[[str], str]] = None
    format_error: Optional[Callable[[str], str]] = None
    format_hint: Optional[Callable[[str], str]] = None
    format_question_prefix: Optional[Callable[[], str]] = None
    format_answer_prefix: Optional[Callable[[], str]] = None
    format_result_title: Optional[Callable[[str, str], str]] = None

    def is_empty(self) -> bool:
        return all(getattr(self, item.name) is None for item in fields(self))


def _identity(text: str) -> str:
    return text


def _plain_error(message: str) -> str:
    return f"* {message}"


def merge_config(base: PromptConfig | None, override: PromptConfig | None) -> PromptConfig:
    """Field by field merge where any value set on ``override`` wins."""
    if base is None:
        base = PromptConfig()
    if override is None:
        return base
    changes = {}
    for item in fields(PromptConfig):
        value = getattr(override, item.name)
        if value is not None:
            changes[item.name] = value
    return replace(base, **changes)


def fill_defaults(config: PromptConfig | None, defaults: PromptConfig) -> PromptConfig:
    """Use ``defaults`` for every field ``config`` leaves unset."""
    return merge_config(defaults, config)


def ensure_complete(config: PromptConfig) -> PromptConfig:
    """Guarantee the formatters every prompt calls unconditionally."""
    return replace(
        config,
        format_prompt=config.format_prompt or _identity,
        format_answer=config.format_answer or _identity,
        format_hint=config.format_hint or _identity,
        format_error=config.format_error or _plain_error,
    )


def with_result_title(config: PromptConfig, title: str | None) -> PromptConfig:
    if not title:
        return config

    def _title(_message: str, _value: str) -> str:
        return title

    return replace(config, format_result_title=_title)


def question_prefix(config: PromptConfig) -> str:
    if config.format_question_prefix is not None:
        return config.format_question_prefix()
    return DEFAULT_QUESTION_PREFIX


def answer_prefix(config: PromptConfig) -> str:
    if config.format_answer_prefix is not None:
        return config.format_answer_prefix()
    return DEFAULT_ANSWER_PREFIX
