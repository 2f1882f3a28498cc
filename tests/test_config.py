import os
import threading
import time
import unittest
from unittest import mock

from rich.style import Style

from termprompt.config import (
    DEFAULT_THEME,
    ConfigManager,
    PromptConfig,
    Theme,
    fill_defaults,
    get_theme,
    merge_config,
    reset_theme,
    set_theme,
    with_result_title,
)
from termprompt.config.prompt_config import answer_prefix, ensure_complete, question_prefix
from termprompt.config.rwlock import ReadWriteLock
from termprompt.config.theme import format_error, format_message, format_prompt, without_color


def upper(text: str) -> str:
    return text.upper()


def bracket(text: str) -> str:
    return f"[{text}]"


class PromptConfigTests(unittest.TestCase):
    def test_merge_prefers_override_fields(self) -> None:
        base = PromptConfig(format_prompt=upper, format_answer=upper)
        override = PromptConfig(format_answer=bracket)
        merged = merge_config(base, override)
        self.assertIs(merged.format_prompt, upper)
        self.assertIs(merged.format_answer, bracket)

    def test_merge_with_missing_layers(self) -> None:
        config = PromptConfig(format_hint=upper)
        self.assertEqual(merge_config(None, config), config)
        self.assertEqual(merge_config(config, None), config)

    def test_fill_defaults_only_fills_unset(self) -> None:
        filled = fill_defaults(PromptConfig(format_prompt=bracket), PromptConfig(format_prompt=upper, format_hint=upper))
        self.assertIs(filled.format_prompt, bracket)
        self.assertIs(filled.format_hint, upper)

    def test_ensure_complete_falls_back_to_identity(self) -> None:
        config = ensure_complete(PromptConfig())
        self.assertEqual(config.format_prompt("a"), "a")
        self.assertEqual(config.format_answer("b"), "b")
        self.assertEqual(config.format_hint("c"), "c")
        self.assertEqual(config.format_error("bad"), "* bad")
        self.assertTrue(PromptConfig().is_empty())
        self.assertFalse(config.is_empty())

    def test_prefixes(self) -> None:
        self.assertEqual(question_prefix(PromptConfig()), "? ")
        self.assertEqual(answer_prefix(PromptConfig()), "> ")
        custom = PromptConfig(
            format_question_prefix=lambda: "Q ", format_answer_prefix=lambda: "A "
        )
        self.assertEqual(question_prefix(custom), "Q ")
        self.assertEqual(answer_prefix(custom), "A ")

    def test_with_result_title(self) -> None:
        config = with_result_title(PromptConfig(), "Name")
        self.assertEqual(config.format_result_title("Enter your name", "bob"), "Name")
        self.assertEqual(with_result_title(PromptConfig(), None), PromptConfig())


class ConfigManagerTests(unittest.TestCase):
    def test_precedence_local_global_default(self) -> None:
        manager = ConfigManager(PromptConfig(format_prompt=upper, format_answer=upper))
        manager.set_global_config(PromptConfig(format_answer=bracket))
        built = manager.build_config(PromptConfig(format_prompt=bracket))
        self.assertEqual(built.format_prompt("x"), "[x]")
        self.assertEqual(built.format_answer("x"), "[x]")
        self.assertEqual(built.format_hint("x"), "x")

    def test_reset_global_config(self) -> None:
        manager = ConfigManager(PromptConfig(format_answer=upper))
        manager.set_global_config(PromptConfig(format_answer=bracket))
        manager.reset_global_config()
        self.assertTrue(manager.get_global_config().is_empty())
        self.assertEqual(manager.build_config().format_answer("x"), "X")


class ThemeTests(unittest.TestCase):
    def tearDown(self) -> None:
        reset_theme()

    def test_set_and_reset_theme(self) -> None:
        custom = Theme(prefix_warn="W")
        set_theme(custom)
        self.assertIs(get_theme(), custom)
        reset_theme()
        self.assertIs(get_theme(), DEFAULT_THEME)

    def test_formatters_read_current_theme(self) -> None:
        self.assertIn("\033[", format_prompt("Question"))
        set_theme(without_color(DEFAULT_THEME))
        self.assertEqual(format_prompt("Question"), "Question")
        self.assertEqual(format_error("bad"), "* bad")
        self.assertEqual(format_message("✓", "done", Style(color="green")), "✓ done")

    def test_from_env_honours_no_color(self) -> None:
        with mock.patch.dict(os.environ, {"NO_COLOR": "1"}):
            self.assertFalse(Theme.from_env().enable_color)
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertTrue(Theme.from_env().enable_color)

    def test_render_skips_empty_text(self) -> None:
        self.assertEqual(DEFAULT_THEME.render("", DEFAULT_THEME.info_style), "")


class ReadWriteLockTests(unittest.TestCase):
    def test_writer_waits_for_reader(self) -> None:
        lock = ReadWriteLock()
        written = threading.Event()

        def writer() -> None:
            with lock.write():
                written.set()

        with lock.read():
            thread = threading.Thread(target=writer)
            thread.start()
            time.sleep(0.05)
            self.assertFalse(written.is_set())
        thread.join(timeout=1)
        self.assertTrue(written.is_set())

    def test_readers_share_the_lock(self) -> None:
        lock = ReadWriteLock()
        with lock.read():
            entered = threading.Event()

            def reader() -> None:
                with lock.read():
                    entered.set()

            thread = threading.Thread(target=reader)
            thread.start()
            thread.join(timeout=1)
            self.assertTrue(entered.is_set())


if __name__ == "__main__":
    unittest.main()
