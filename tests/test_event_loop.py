import importlib
import sys
import tempfile
import types
import unittest
from pathlib import Path
from unittest import mock

from _support import FakeScreen, install_fake_curses, restore_curses, write_file


class EventLoopTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls._prev_curses = install_fake_curses()
        cls.curses = sys.modules["curses"]
        cls.event_loop = importlib.import_module("shadefm.core.event_loop")
        cls.rendering = importlib.import_module("shadefm.core.rendering")
        cls.app_mod = importlib.import_module("shadefm.core.app")
        cls.modes = importlib.import_module("shadefm.core.modes")

    @classmethod
    def tearDownClass(cls):
        restore_curses(cls._prev_curses)

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.base = Path(self._tmp.name)
        (self.base / "folder").mkdir()
        write_file(self.base / "a.txt", "first line\nsecond line", mtime=1_000)
        self.app = self.app_mod.ShadeFM.create(self.base, "abcde")
        self.screen = FakeScreen()
        self.app.stdscr = self.screen

    def test_read_input_key_returns_none_on_error(self):
        self.assertIsNone(self.event_loop.read_input_key(FakeScreen()))
        self.assertEqual(self.event_loop.read_input_key(FakeScreen(keys=["x"])), "x")

    def test_dispatch_input_ignores_none_and_handles_resize(self):
        app = types.SimpleNamespace(handle_key=mock.Mock())
        self.event_loop.dispatch_input(app, None)
        with mock.patch.object(self.curses, "update_lines_cols") as update:
            self.event_loop.dispatch_input(app, self.curses.KEY_RESIZE)
        update.assert_called_once_with()
        app.handle_key.assert_not_called()

        self.event_loop.dispatch_input(app, "a")
        app.handle_key.assert_called_once_with("a")

    def test_run_app_loop_exits_on_escape_and_cleans_up(self):
        app = types.SimpleNamespace(
            running=True,
            stdscr=FakeScreen(keys=["x", "\x1b"]),
            cleanup=mock.Mock(),
        )

        def handle_key(key):
            if key == "\x1b":
                app.running = False

        app.handle_key = handle_key
        with mock.patch.object(self.event_loop, "draw_frame") as draw:
            self.event_loop.run_app_loop(app)
        self.assertEqual(draw.call_count, 2)
        app.cleanup.assert_called_once_with()

    def test_run_app_loop_cleans_up_on_error(self):
        app = types.SimpleNamespace(running=True, stdscr=FakeScreen(), cleanup=mock.Mock())
        with mock.patch.object(self.event_loop, "draw_frame", side_effect=RuntimeError("draw")):
            with self.assertRaises(RuntimeError):
                self.event_loop.run_app_loop(app)
        app.cleanup.assert_called_once_with()

    def test_session_run_drives_loop_until_exit(self):
        screen = FakeScreen(keys=[self.curses.KEY_DOWN, "\x1b"])
        with (
            mock.patch.object(self.app_mod, "disable_flow_control", return_value=["saved"]),
            mock.patch.object(self.app_mod, "restore_flow_control") as restore,
        ):
            self.app.run(screen)
        self.assertFalse(self.app.running)
        self.assertEqual(self.app.manager.selected, 0)
        self.assertIn(("keypad", True), screen.calls)
        restore.assert_called_once_with(["saved"])

    def test_draw_frame_manager_mode(self):
        self.event_loop.draw_frame(self.app)
        text = self.screen.text()
        self.assertIn("ShadeFM", text)
        self.assertIn(str(self.app.manager.root), text)
        self.assertIn("folder", text)
        self.assertIn("a.txt", text)
        self.assertIn("Manager mode", text)
        self.assertEqual(self.screen.calls[0], "erase")
        self.assertIn("noutrefresh", self.screen.calls)

    def test_draw_frame_viewer_mode(self):
        self.app.handle_key(self.curses.KEY_DOWN)
        self.app.handle_key(self.curses.KEY_DOWN)
        self.app.handle_key("\n")
        self.event_loop.draw_frame(self.app)
        text = self.screen.text()
        self.assertIn("first line", text)
        self.assertIn("second line", text)
        self.assertIn("Viewer mode", text)

    def test_draw_frame_editor_mode(self):
        self.app.handle_key("n")
        for ch in "typed":
            self.app.handle_key(ch)
        self.event_loop.draw_frame(self.app)
        text = self.screen.text()
        self.assertIn("typed", text)
        self.assertIn("Editor mode", text)
        self.assertIn("Ln 1, Col 6", text)

    def test_draw_frame_shows_error_status(self):
        self.app.handle_key(self.curses.KEY_DOWN)
        self.app.handle_key("d")
        self.event_loop.draw_frame(self.app)
        text = self.screen.text()
        self.assertIn("Cannot delete a folder", text)
        self.assertNotIn("Manager mode", text)

    def test_draw_frame_survives_tiny_screen(self):
        self.app.stdscr = FakeScreen(height=3, width=10)
        self.event_loop.draw_frame(self.app)

    def test_selected_row_is_highlighted(self):
        self.app.handle_key(self.curses.KEY_DOWN)
        self.event_loop.draw_frame(self.app)
        selected_attr = self.curses.color_pair(7) | self.curses.A_BOLD
        rows = [w for w in self.screen.writes if w[2].startswith("folder")]
        self.assertTrue(rows)
        self.assertEqual(rows[0][3], selected_attr)


class RenderingHelperTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls._prev_curses = install_fake_curses()
        cls.rendering = importlib.import_module("shadefm.core.rendering")

    @classmethod
    def tearDownClass(cls):
        restore_curses(cls._prev_curses)

    def test_layout_splits_screen(self):
        rects = self.rendering.layout(24, 80)
        self.assertEqual(rects["manager"], (0, 1, 20, 19))
        self.assertEqual(rects["content"], (20, 1, 60, 19))
        self.assertEqual(rects["status"], (0, 20, 80, 4))

    def test_layout_small_screen_never_negative(self):
        rects = self.rendering.layout(2, 5)
        for rect in rects.values():
            self.assertTrue(all(value >= 0 for value in rect))

    def test_wrap_lines(self):
        self.assertEqual(self.rendering.wrap_lines(["abcdef", "", "x"], 4), ["abcd", "ef", "", "x"])
        self.assertEqual(self.rendering.wrap_lines(["\tx"], 10), ["    x"])
        self.assertEqual(self.rendering.wrap_lines(["x"], 0), [])


if __name__ == "__main__":
    unittest.main()
