import io
import unittest

from rich.console import Console

from termprompt.config import DEFAULT_THEME, Theme, reset_theme, set_theme
from termprompt.config.theme import without_color
from termprompt.widgets import Message
from termprompt.widgets.message import rule_text


class MessageTests(unittest.TestCase):
    def setUp(self) -> None:
        set_theme(without_color(DEFAULT_THEME))
        self.console = Console(record=True, width=80, color_system=None, file=io.StringIO())

    def tearDown(self) -> None:
        reset_theme()

    def lines(self) -> list[str]:
        return self.console.export_text().splitlines()

    def test_status_prefixes(self) -> None:
        message = Message(console=self.console)
        message.info("hello")
        message.success("saved")
        message.warning("careful")
        message.error("broken")
        self.assertEqual(self.lines(), ["ℹ hello", "✓ saved", "! careful", "x broken"])

    def test_empty_theme_prefixes_use_symbols(self) -> None:
        set_theme(Theme(prefix_warn="", prefix_error="", enable_color=False))
        message = Message(console=self.console)
        message.warning("careful")
        message.error("broken")
        self.assertEqual(self.lines(), ["⚠ careful", "✗ broken"])

    def test_debug_only_when_verbose(self) -> None:
        Message(console=self.console).debug("hidden")
        Message(verbose=True, console=self.console).debug("shown")
        self.assertEqual(self.lines(), ["DEBUG: shown"])

    def test_print_keeps_markup_literal(self) -> None:
        Message(console=self.console).print("[bold]x[/bold]")
        self.assertEqual(self.lines(), ["[bold]x[/bold]"])

    def test_rule(self) -> None:
        Message(console=self.console).rule("=", 20, "log")
        self.assertEqual(self.lines(), ["======= log ======="])


class RuleTextTests(unittest.TestCase):
    def test_plain_rule(self) -> None:
        self.assertEqual(rule_text("*", 5), "*****")
        self.assertEqual(len(rule_text()), 80)

    def test_rule_with_text(self) -> None:
        self.assertEqual(rule_text("=", 20, "log"), "======= log =======")

    def test_invalid_arguments_fall_back(self) -> None:
        self.assertEqual(rule_text("", 3), "---")
        self.assertEqual(rule_text("ab", 0), "a" * 80)


if __name__ == "__main__":
    unittest.main()
