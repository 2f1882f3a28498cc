from __future__ import annotations

import argparse
import errno
import time
from pathlib import Path
from typing import Callable

from .builders import Confirm, Input, MultiSelect, Password, Select
from .config.theme import Theme, set_theme
from .core.errors import PromptCancelled, PromptError
from .core.session_log import PromptLogger, log_exception, set_active_logger
from .form import FormBuilder
from .widgets import Alignment, Message, Spinner, Table
from .widgets import validators

LANGUAGES = ["Python", "Go", "Rust", "TypeScript"]


def demo_confirm(msg: Message) -> None:
    answer = Confirm().prompt("Continue with the demo?").default(True).run()
    msg.success(f"confirm -> {answer}")


def demo_select(msg: Message) -> None:
    index = Select().prompt("Pick a language").options(LANGUAGES).cyclic().run()
    msg.success(f"select -> {LANGUAGES[index]} (index {index})")


def demo_multiselect(msg: Message) -> None:
    indices = MultiSelect().prompt("Pick languages").options(LANGUAGES).defaults([0]).run()
    picked = ", ".join(LANGUAGES[i] for i in indices) or "(none)"
    msg.success(f"multiselect -> {picked}")


def demo_input(msg: Message) -> None:
    name = (
        Input()
        .prompt("Project name")
        .default_value("demo")
        .placeholder("lowercase letters and dashes")
        .validate(validators.regex(r"^[a-z][a-z-]*$", "Use lowercase letters and dashes"))
        .run()
    )
    email = Input().prompt("Email").validate(validators.email()).run()
    msg.success(f"input -> {name} <{email}>")


def demo_password(msg: Message) -> None:
    secret = Password().prompt("API token").validate(validators.min_length(4)).run()
    msg.success(f"password -> {len(secret)} characters")


def demo_form(msg: Message) -> None:
    address = (
        FormBuilder(title="Address")
        .add_input("city", "City")
        .add_input("street", "Street")
    )

    def check(result) -> None:
        if result.get_bool("create") and not result.get_string("name"):
            raise ValueError("a name is required when creating a user")

    result = (
        FormBuilder(title="New user")
        .add_confirm("create", "Create a user?", True)
        .add_input("name", "Name", validator=validators.required())
        .condition(lambda r: r.get_bool("create"))
        .add_select("role", "Role", ["Admin", "User"], 1)
        .result_title("Role")
        .add_multiselect("langs", "Languages", LANGUAGES, [0])
        .add_form("address", "Address", address)
        .condition(lambda r: r.get_bool("create"))
        .validate(check)
        .run()
    )
    for key, value in result.to_dict().items():
        msg.print(f"  {key}: {value}")


def demo_spinner(msg: Message) -> None:
    spinner = Spinner("Working...")
    with spinner:
        time.sleep(0.6)
        spinner.update_message("Almost done...")
        time.sleep(0.6)
    spinner.success("spinner finished")


def demo_table(msg: Message) -> None:
    table = Table(["Language", "Typing", "Since"])
    table.add_row("Python", "dynamic", 1991)
    table.add_row("Go", "static", 2009)
    table.add_row("Rust", "static")
    table.set_row_line(True).set_alignment(Alignment.LEFT)
    table.render(msg.console)


def demo_message(msg: Message) -> None:
    msg.info("an informational line")
    msg.success("a success line")
    msg.warning("a warning line")
    msg.error("an error line")
    msg.debug("a debug line, shown with --verbose")
    msg.rule("=", 40, "section")


DEMOS: dict[str, Callable[[Message], None]] = {
    "confirm": demo_confirm,
    "select": demo_select,
    "multiselect": demo_multiselect,
    "input": demo_input,
    "password": demo_password,
    "form": demo_form,
    "spinner": demo_spinner,
    "table": demo_table,
    "message": demo_message,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termprompt", description="termprompt - interactive terminal prompts"
    )
    parser.add_argument("-v", "--version", action="store_true", help="Show version and exit")
    parser.add_argument(
        "--debug",
        help="Write a session log: all, prompt, or a level such as info/warn/error",
    )
    parser.add_argument(
        "--log-dir", default=".termprompt/logs", help="Directory for session logs"
    )
    parser.add_argument("--verbose", action="store_true", help="Show debug messages")
    parser.add_argument(
        "--no-color", action="store_true", help="Disable colors (NO_COLOR is also honoured)"
    )
    subparsers = parser.add_subparsers(dest="command")
    demo = subparsers.add_parser("demo", help="Run an interactive widget demo")
    demo.add_argument("widget", choices=sorted(DEMOS), help="Widget to demonstrate")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.version:
        from termprompt import __version__

        print(f"termprompt {__version__}")
        return
    if args.command != "demo":
        parser.print_help()
        return

    theme = Theme.from_env()
    if args.no_color:
        theme = Theme(enable_color=False)
    set_theme(theme)

    logger = PromptLogger(Path(args.log_dir), args.debug) if args.debug else None
    set_active_logger(logger)
    msg = Message(verbose=args.verbose)
    try:
        DEMOS[args.widget](msg)
    except PromptCancelled:
        msg.warning("cancelled")
        raise SystemExit(130)
    except PromptError as exc:
        log_exception("cli", exc)
        msg.error(str(exc))
        raise SystemExit(1)
    except BrokenPipeError:
        return
    except KeyboardInterrupt:
        return
    except OSError as exc:
        if exc.errno == errno.EPIPE:
            return
        log_exception("cli", exc)
        raise
    finally:
        if logger is not None:
            logger.close()
        set_active_logger(None)


if __name__ == "__main__":
    main()
