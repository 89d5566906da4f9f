"""End-to-end behavior across config loading, dispatch, hit-testing and rendering.

These tests wire the real pieces together the way ``run_demo`` does, minus
the terminal: config file -> settings and bindings -> state -> events.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from tuistarter.input.bindings import Action
from tuistarter.input.dispatch import InputDispatcher
from tuistarter.input.keyspec import CTRL_C, ESC, KeyChord, NamedKey
from tuistarter.input.reader import MouseEvent, MouseKind
from tuistarter.layout import partition_screen
from tuistarter.render.screen import compose_frame
from tuistarter.runtime import config as config_mod
from tuistarter.runtime.config import resolve_runtime
from tuistarter.runtime.settings import CliOverrides
from tuistarter.state import AppState, Panel
from tuistarter.ui_theme import ThemeName


class ConfiguredSessionTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.path = Path(self._tmp.name) / "config.toml"
        self.path.write_text(
            '[demo]\ntheme = "mono"\nreduced_motion = true\n\n[keys]\ncycle_theme = "n"\nquit = "x"\n',
            encoding="utf-8",
        )

    def _session(self, cli: CliOverrides | None = None, environ: dict | None = None):
        runtime = resolve_runtime(cli or CliOverrides(), self.path, environ or {})
        state = AppState.from_settings(runtime.settings, mouse_enabled=True)
        return runtime, state, InputDispatcher(state, runtime.bindings)

    def test_file_values_seed_the_session(self) -> None:
        runtime, state, _ = self._session()
        self.assertEqual(runtime.settings.theme, ThemeName.MONO)
        self.assertTrue(state.reduced_motion)
        self.assertEqual(state.spinner_frame(), "*")

    def test_rebound_keys(self) -> None:
        _, state, dispatcher = self._session()
        dispatcher.handle_key(KeyChord("t"))
        self.assertEqual(state.theme_name, ThemeName.MONO)
        dispatcher.handle_key(KeyChord("n"))
        self.assertEqual(state.theme_name, ThemeName.SOLAR)

        dispatcher.handle_key(KeyChord("q"))
        self.assertFalse(state.should_quit)
        dispatcher.handle_key(KeyChord("x"))
        self.assertTrue(state.should_quit)

    def test_esc_and_ctrl_c_still_quit(self) -> None:
        for chord in (ESC, CTRL_C):
            _, state, dispatcher = self._session()
            self.assertIs(dispatcher.handle_key(chord), Action.QUIT)
            self.assertTrue(state.should_quit)

    def test_rendered_labels_follow_the_config(self) -> None:
        runtime, state, _ = self._session()
        text = "\n".join(
            compose_frame(state, runtime.bindings, 80, 24).row_text(y) for y in range(24)
        )
        self.assertIn("Press n to cycle themes.", text)
        self.assertIn("Use x/esc to exit.", text)

    def test_cli_overrides_file_and_env(self) -> None:
        runtime, _, _ = self._session(
            CliOverrides(theme=ThemeName.AURORA, reduced_motion=False),
            environ={"NO_COLOR": "1"},
        )
        self.assertEqual(runtime.settings.theme, ThemeName.AURORA)
        self.assertFalse(runtime.settings.reduced_motion)
        self.assertTrue(runtime.settings.no_color)


class MouseAt80x24Tests(unittest.TestCase):
    def setUp(self) -> None:
        missing = Path(tempfile.gettempdir()) / "tui-starter-absent" / "config.toml"
        with mock.patch.object(config_mod, "DEFAULT_CONFIG_PATH", missing):
            runtime = resolve_runtime(CliOverrides(), None, {})
        self.bindings = runtime.bindings
        self.state = AppState.from_settings(runtime.settings, mouse_enabled=True)
        self.dispatcher = InputDispatcher(self.state, self.bindings, screen_size=lambda: (80, 24))
        self.regions = partition_screen(80, 24)

    def click(self, x: int, y: int) -> bool:
        return self.dispatcher.handle_mouse(MouseEvent(MouseKind.LEFT_DOWN, x, y))

    def test_tab_strip_click_switches_panels(self) -> None:
        self.assertTrue(self.click(60, 10))
        self.assertIs(self.state.panel, Panel.LIST)
        self.assertTrue(self.click(5, 10))
        self.assertIs(self.state.panel, Panel.OVERVIEW)

    def test_row_click_after_scrolling(self) -> None:
        self.click(60, 10)
        for _ in range(8):
            self.dispatcher.handle_key(KeyChord(NamedKey.DOWN))
        self.assertEqual(self.state.selection.selected, 8)

        self.assertTrue(self.click(10, 14))
        self.assertEqual(self.state.selection.selected, 7)

    def test_clicked_row_is_the_rendered_row(self) -> None:
        self.click(60, 10)
        for _ in range(12):
            self.dispatcher.handle_key(KeyChord("j"))
        viewport = self.regions.showcase_list
        target_y = viewport.y + 1
        before = compose_frame(self.state, self.bindings, 80, 24).row_text(target_y)[viewport.x:]
        self.assertTrue(before.startswith("  10  "))

        self.assertTrue(self.click(viewport.x + 3, target_y))
        self.assertEqual(self.state.selection.selected, 9)
        # The window is recomputed from the new selection, which sits on the last visible row.
        after = compose_frame(self.state, self.bindings, 80, 24).row_text(viewport.bottom - 1)[viewport.x:]
        self.assertTrue(after.startswith("> 10  "))

    def test_clicks_outside_targets_do_nothing(self) -> None:
        self.assertFalse(self.click(5, 2))
        self.assertFalse(self.click(0, 10))
        self.assertIs(self.state.panel, Panel.OVERVIEW)


if __name__ == "__main__":
    unittest.main()
