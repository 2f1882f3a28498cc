from __future__ import annotations

from dataclasses import dataclass

from ..config.manager import build_config
from ..config.prompt_config import PromptConfig, question_prefix, with_result_title
from ..config.theme import format_placeholder, get_theme
from ..core.render import resolved_line
from ..core.session_log import log_prompt_event
from ..terminal.base import StdTerminal, TerminalIO
from .editor import Echo, LineEditor, Validator, plain_echo, validation_message

INPUT_PREFIX = "> "
PASSWORD_MASK = "****"
MAX_PASSWORD_DISPLAY_LENGTH = 20


def password_echo(text: str) -> str:
    """Mask echo capped so long tokens do not wrap the input row."""
    return "*" * min(len(text), MAX_PASSWORD_DISPLAY_LENGTH)


def lenient_validator(validator: Validator | None, default: str) -> Validator | None:
    """Let an empty buffer through when a default will stand in for it."""
    if validator is None or not default:
        return validator

    def _validate(value: str) -> None:
        if not value.strip():
            return
        validator(value)

    return _validate


def title_line(config: PromptConfig, message: str, default: str, is_password: bool) -> str:
    text = f"{question_prefix(config)}{config.format_prompt(message)}"
    if default:
        theme = get_theme()
        shown = PASSWORD_MASK if is_password else default
        text += f"{theme.input_bracket_left}{shown}{theme.input_bracket_right}"
    return text


def _show_input_error(terminal: TerminalIO, config: PromptConfig, message: str) -> None:
    terminal.move_up(1)
    terminal.move_to_start()
    terminal.clear_line()
    terminal.print("\n")
    terminal.print(config.format_error(message))
    terminal.reset_format()


def _clear_error_and_input(terminal: TerminalIO) -> None:
    terminal.move_to_start()
    terminal.clear_line()
    terminal.move_up(1)
    terminal.move_to_start()
    terminal.clear_line()


def _replace_with_result(terminal: TerminalIO, line: str) -> None:
    # cursor sits on the row below the input row; the title is one above that
    terminal.move_up(2)
    terminal.move_to_start()
    terminal.clear_to_end()
    terminal.print(line)
    terminal.print("\r\n")
    terminal.reset_format()


def _ask_text(
    terminal: TerminalIO,
    message: str,
    default: str,
    validator: Validator | None,
    placeholder: str,
    config: PromptConfig,
    is_password: bool,
) -> str:
    source = "password" if is_password else "input"
    echo: Echo = password_echo if is_password else plain_echo
    log_prompt_event(source, "prompt.start", {"message": message})
    terminal.println(title_line(config, message, default, is_password))

    effective = lenient_validator(validator, default)
    had_error = False
    while True:
        if had_error:
            _clear_error_and_input(terminal)
        editor = LineEditor(
            terminal,
            INPUT_PREFIX,
            validator=effective,
            echo=echo,
            placeholder="" if is_password else placeholder,
            format_error=config.format_error,
            format_placeholder=format_placeholder,
        )
        value = editor.run()
        if default and not value.strip():
            value = default

        error = validation_message(validator, value)
        if error is not None:
            if editor.line_mode:
                terminal.println(config.format_error(error))
            else:
                _show_input_error(terminal, config, error)
                had_error = True
            continue

        shown = PASSWORD_MASK if is_password else value
        line = resolved_line(config, message, shown)
        if editor.line_mode:
            terminal.println(line)
        else:
            _replace_with_result(terminal, line)
        log_prompt_event(source, "prompt.resolve", {"value": shown})
        return value


@dataclass(frozen=True)
class InputRequest:
    message: str
    default: str = ""
    validator: Validator | None = None
    placeholder: str = ""
    config: PromptConfig | None = None
    result_title: str | None = None

    def run(self, terminal: TerminalIO | None = None) -> str:
        config = with_result_title(build_config(self.config), self.result_title)
        return _ask_text(
            terminal or StdTerminal(),
            self.message,
            self.default,
            self.validator,
            self.placeholder,
            config,
            is_password=False,
        )


@dataclass(frozen=True)
class PasswordRequest:
    message: str
    default: str = ""
    validator: Validator | None = None
    config: PromptConfig | None = None
    result_title: str | None = None

    def run(self, terminal: TerminalIO | None = None) -> str:
        config = with_result_title(build_config(self.config), self.result_title)
        return _ask_text(
            terminal or StdTerminal(),
            self.message,
            self.default,
            self.validator,
            "",
            config,
            is_password=True,
        )


def ask_input(
    message: str,
    default: str = "",
    validator: Validator | None = None,
    placeholder: str = "",
    config: PromptConfig | None = None,
    terminal: TerminalIO | None = None,
    *,
    result_title: str | None = None,
) -> str:
    request = InputRequest(
        message=message,
        default=default,
        validator=validator,
        placeholder=placeholder,
        config=config,
        result_title=result_title,
    )
    return request.run(terminal)


def ask_password(
    message: str,
    validator: Validator | None = None,
    default: str = "",
    config: PromptConfig | None = None,
    terminal: TerminalIO | None = None,
    *,
    result_title: str | None = None,
) -> str:
    request = PasswordRequest(
        message=message,
        default=default,
        validator=validator,
        config=config,
        result_title=result_title,
    )
    return request.run(terminal)
