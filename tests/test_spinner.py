import io
import unittest

from rich.spinner import SPINNERS

from termprompt.config import DEFAULT_THEME, reset_theme, set_theme
from termprompt.config.theme import without_color
from termprompt.terminal.base import HIDE_CURSOR, SHOW_CURSOR
from termprompt.widgets import Spinner
from termprompt.widgets.spinner import DEFAULT_FRAMES


class SpinnerTests(unittest.TestCase):
    def setUp(self) -> None:
        set_theme(without_color(DEFAULT_THEME))
        self.output = io.StringIO()

    def tearDown(self) -> None:
        reset_theme()

    def make_spinner(self, **kwargs) -> Spinner:
        kwargs.setdefault("interval", 10)
        return Spinner("Loading", writer=self.output, **kwargs)

    def test_start_and_stop_toggle_cursor(self) -> None:
        spinner = self.make_spinner()
        spinner.start()
        self.assertTrue(spinner.running)
        spinner.stop()
        self.assertFalse(spinner.running)
        text = self.output.getvalue()
        self.assertTrue(text.startswith(HIDE_CURSOR))
        self.assertTrue(text.endswith(SHOW_CURSOR))

    def test_stop_is_idempotent(self) -> None:
        spinner = self.make_spinner()
        spinner.stop()
        spinner.start()
        spinner.stop()
        spinner.stop()
        self.assertEqual(self.output.getvalue().count(SHOW_CURSOR), 1)

    def test_render_frame_cycles(self) -> None:
        spinner = self.make_spinner(frames=["a", "b"])
        self.assertEqual(spinner.render_frame(), "a Loading")
        self.assertEqual(spinner.render_frame(), "b Loading")
        self.assertEqual(spinner.render_frame(), "a Loading")

    def test_restart_resets_frames(self) -> None:
        spinner = self.make_spinner(frames=["a", "b"])
        spinner.start()
        spinner.render_frame()
        spinner.stop()
        spinner.start()
        self.assertEqual(spinner.render_frame(), "a Loading")
        spinner.stop()

    def test_default_frames_follow_rich_dots(self) -> None:
        self.assertEqual(DEFAULT_FRAMES, tuple(SPINNERS["dots"]["frames"]))
        spinner = Spinner("Loading", writer=self.output, interval=10)
        self.assertEqual(spinner.render_frame(), f"{DEFAULT_FRAMES[0]} Loading")

    def test_update_message(self) -> None:
        spinner = self.make_spinner(frames=["a"])
        spinner.update_message("Almost")
        self.assertEqual(spinner.message, "Almost")
        self.assertEqual(spinner.render_frame(), "a Almost")

    def test_success_stops_and_reports(self) -> None:
        spinner = self.make_spinner()
        spinner.start()
        spinner.success("done")
        self.assertFalse(spinner.running)
        self.assertTrue(self.output.getvalue().endswith("✓ done\n"))

    def test_error_and_info_lines(self) -> None:
        spinner = self.make_spinner()
        spinner.error("failed")
        spinner.info("note")
        self.assertEqual(self.output.getvalue(), "✗ failed\nℹ note\n")

    def test_run_returns_value(self) -> None:
        spinner = self.make_spinner()
        self.assertEqual(spinner.run(lambda: 42), 42)
        self.assertFalse(spinner.running)

    def test_run_stops_when_function_raises(self) -> None:
        spinner = self.make_spinner()

        def boom() -> None:
            raise RuntimeError("boom")

        with self.assertRaises(RuntimeError):
            spinner.run(boom)
        self.assertFalse(spinner.running)
        self.assertTrue(self.output.getvalue().endswith(SHOW_CURSOR))

    def test_background_thread_draws_frames(self) -> None:
        spinner = Spinner("Work", frames=["*"], interval=0.01, writer=self.output)
        with spinner:
            spinner._thread.join(timeout=0.1)
        self.assertIn("* Work\r", self.output.getvalue())


if __name__ == "__main__":
    unittest.main()
