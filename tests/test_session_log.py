import tempfile
import unittest
from pathlib import Path

from termprompt.core.session_log import (
    PromptLogger,
    log_info,
    log_prompt_event,
    resolve_debug_config,
    set_active_logger,
)
from termprompt.terminal import ScriptedTerminal
from termprompt.widgets import ask_confirm


class PromptLoggerTests(unittest.TestCase):
    def tearDown(self) -> None:
        set_active_logger(None)

    def test_logger_disabled_creates_no_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            logs_dir = Path(tmp) / "logs"
            logger = PromptLogger(logs_dir, None)
            logger.log_prompt_event("confirm", "prompt.start", {"message": "hi"})
            self.assertFalse(logs_dir.exists())

    def test_log_prompt_event_writes_markdown(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            logs_dir = Path(tmp) / "logs"
            logger = PromptLogger(logs_dir, "prompt")
            logger.log_prompt_event("select", "prompt.start", {"message": "Pick"})
            logger.close()
            files = list(logs_dir.glob("termprompt_session_*.md"))
            self.assertEqual(len(files), 1)
            text = files[0].read_text(encoding="utf-8")
            self.assertIn("# termprompt Session Log", text)
            self.assertIn("prompt.start", text)
            self.assertIn("Pick", text)

    def test_log_exception(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            logs_dir = Path(tmp) / "logs"
            logger = PromptLogger(logs_dir, "error")
            try:
                raise ValueError("boom")
            except Exception as exc:  # noqa: BLE001
                logger.log_exception("form", exc)
            logger.close()
            text = next(logs_dir.glob("termprompt_session_*.md")).read_text(encoding="utf-8")
            self.assertIn("exception", text)
            self.assertIn("ValueError", text)

    def test_log_order_newest_first(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            logs_dir = Path(tmp) / "logs"
            logger = PromptLogger(logs_dir, "all")
            logger.log_prompt_event("confirm", "prompt.start")
            logger.log_level("confirm", "info", "prompt.second")
            logger.close()
            text = next(logs_dir.glob("termprompt_session_*.md")).read_text(encoding="utf-8")
            self.assertLess(text.index("prompt.second"), text.index("prompt.start"))

    def test_resolve_debug_config_levels(self) -> None:
        selection = resolve_debug_config(["prompt", "info"])
        self.assertIn("prompt", selection.enabled_types)
        self.assertIn("error", selection.enabled_levels)
        self.assertIn("warn", selection.enabled_levels)
        self.assertIn("info", selection.enabled_levels)
        self.assertNotIn("debug", selection.enabled_levels)

    def test_resolve_debug_config_comma_string(self) -> None:
        selection = resolve_debug_config("prompt, warn")
        self.assertEqual(selection.enabled_types, frozenset({"prompt"}))
        self.assertEqual(selection.enabled_levels, frozenset({"error", "warn"}))
        self.assertFalse(resolve_debug_config("off").enabled_levels)
        self.assertEqual(len(resolve_debug_config(True).enabled_levels), 4)

    def test_module_helpers_are_silent_without_logger(self) -> None:
        set_active_logger(None)
        log_prompt_event("confirm", "prompt.start")
        log_info("rawmode", "rawmode.fallback")

    def test_prompts_log_through_active_logger(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            logs_dir = Path(tmp) / "logs"
            set_active_logger(PromptLogger(logs_dir, "all"))
            ask_confirm("Continue?", terminal=ScriptedTerminal.with_lines("y"))
            text = next(logs_dir.glob("termprompt_session_*.md")).read_text(encoding="utf-8")
            self.assertIn("rawmode.fallback", text)
            self.assertIn("prompt.resolve", text)

    def test_write_failure_disables_logger(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("x", encoding="utf-8")
            logger = PromptLogger(blocker / "logs", "all")
            logger.log_prompt_event("confirm", "prompt.start")
            self.assertFalse(logger.enabled)


if __name__ == "__main__":
    unittest.main()
