import unittest

from termprompt.core.errors import PromptCancelled, PromptReadError
from termprompt.terminal import ScriptedTerminal
from termprompt.widgets.editor import EditorBuffer, LineEditor, mask_echo, plain_echo


def too_short(value: str) -> None:
    if len(value) < 3:
        raise ValueError("too short")


def make_editor(data: bytes, **kwargs) -> tuple[LineEditor, ScriptedTerminal]:
    terminal = ScriptedTerminal(data)
    kwargs.setdefault("format_error", lambda message: f"! {message}")
    kwargs.setdefault("format_placeholder", lambda text: text)
    return LineEditor(terminal, "> ", **kwargs), terminal


class EditorBufferTests(unittest.TestCase):
    def test_insert_and_backspace_at_cursor(self) -> None:
        buffer = EditorBuffer()
        for char in "ac":
            buffer.insert(char)
        buffer.move_left()
        buffer.insert("b")
        self.assertEqual(buffer.text, "abc")
        self.assertEqual(buffer.cursor, 2)
        self.assertTrue(buffer.backspace())
        self.assertEqual(buffer.text, "ac")
        self.assertEqual(buffer.cursor, 1)

    def test_backspace_at_start_is_no_op(self) -> None:
        buffer = EditorBuffer("ab")
        buffer.cursor = 0
        self.assertFalse(buffer.backspace())
        self.assertEqual(buffer.text, "ab")

    def test_cursor_stays_in_range(self) -> None:
        buffer = EditorBuffer("ab")
        self.assertFalse(buffer.move_right())
        self.assertTrue(buffer.move_left())
        self.assertTrue(buffer.move_left())
        self.assertFalse(buffer.move_left())
        self.assertEqual(buffer.cursor, 0)

    def test_tail_width_counts_wide_characters(self) -> None:
        buffer = EditorBuffer("a中b")
        buffer.cursor = 1
        self.assertEqual(buffer.tail_width(), 3)
        buffer.cursor = 3
        self.assertEqual(buffer.tail_width(), 0)

    def test_echo_strategies(self) -> None:
        self.assertEqual(plain_echo("héllo"), "héllo")
        self.assertEqual(mask_echo("héllo"), "*****")
        self.assertEqual(mask_echo(""), "")


class LineEditorTests(unittest.TestCase):
    def test_enter_returns_trimmed_text(self) -> None:
        editor, terminal = make_editor(b" abc \r")
        self.assertEqual(editor.run(), "abc")
        self.assertIn("> \x20abc \r\n", terminal.output)
        self.assertEqual(terminal.restore_calls, 1)

    def test_editing_in_the_middle(self) -> None:
        editor, terminal = make_editor(b"ac\x1b[Db\r")
        self.assertEqual(editor.run(), "abc")
        self.assertIn("> abc\b", terminal.output)

    def test_backspace_removes_previous_character(self) -> None:
        editor, _ = make_editor(b"abd\x7fc\r")
        self.assertEqual(editor.run(), "abc")

    def test_utf8_input_is_decoded(self) -> None:
        editor, _ = make_editor("héllo\r".encode("utf-8"))
        self.assertEqual(editor.run(), "héllo")

    def test_ctrl_c_cancels(self) -> None:
        editor, terminal = make_editor(b"ab\x03")
        with self.assertRaises(PromptCancelled):
            editor.run()
        self.assertIn("> \r\n", terminal.output)
        self.assertEqual(terminal.restore_calls, 1)

    def test_live_validation_shows_and_clears_error(self) -> None:
        editor, terminal = make_editor(b"ab\rc\r", validator=too_short)
        self.assertEqual(editor.run(), "abc")
        self.assertIn("! too short", terminal.output)
        self.assertFalse(editor.error_shown)

    def test_read_failure_returns_partial_input(self) -> None:
        editor, _ = make_editor(b"ab")
        self.assertEqual(editor.run(), "ab")

    def test_read_failure_on_empty_buffer_raises(self) -> None:
        editor, _ = make_editor(b"")
        with self.assertRaises(PromptReadError):
            editor.run()

    def test_masked_echo_hides_input(self) -> None:
        editor, terminal = make_editor(b"secret\r", echo=mask_echo)
        self.assertEqual(editor.run(), "secret")
        self.assertNotIn("secret", terminal.output)
        self.assertIn("******", terminal.output)

    def test_placeholder_right_arrow_starts_editing(self) -> None:
        editor, terminal = make_editor(b"\x1b[Cx\r", placeholder="type here")
        self.assertEqual(editor.run(), "x")
        self.assertIn("> type here" + "\b" * 9, terminal.output)

    def test_placeholder_ignores_left_and_backspace(self) -> None:
        editor, _ = make_editor(b"\x1b[D\x7fz\r", placeholder="type here")
        self.assertEqual(editor.run(), "z")

    def test_placeholder_returns_when_buffer_empties(self) -> None:
        editor, terminal = make_editor(b"a\x7f\r", placeholder="type here")
        self.assertEqual(editor.run(), "")
        self.assertGreaterEqual(terminal.output.count("type here"), 2)

    def test_line_mode_fallback(self) -> None:
        terminal = ScriptedTerminal.with_lines("  typed  ")
        editor = LineEditor(terminal, "> ")
        self.assertEqual(editor.run(), "typed")
        self.assertEqual(terminal.output, "> ")

    def test_line_mode_eof_raises(self) -> None:
        editor = LineEditor(ScriptedTerminal.with_lines(), "> ")
        with self.assertRaises(PromptReadError):
            editor.run()


if __name__ == "__main__":
    unittest.main()
