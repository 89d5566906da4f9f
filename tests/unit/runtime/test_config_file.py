"""Tests for config file lookup, strict parsing, and the starter template."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from tuistarter.errors import ConfigError, ConfigNotFoundError
from tuistarter.input.bindings import Action
from tuistarter.input.keyspec import KeyChord
from tuistarter.runtime import config as config_mod
from tuistarter.runtime.settings import CliOverrides
from tuistarter.ui_theme import ThemeName


class ConfigFileTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.path = self.root / "config.toml"

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, text: str) -> Path:
        self.path.write_text(text, encoding="utf-8")
        return self.path

    def test_unreachable_bindings_are_accepted_with_a_warning(self) -> None:
        path = self._write('[keys]\ncycle_theme = ["shift+t", "n"]\nlist_down = "ctrl+j"\n')
        with self.assertLogs("tuistarter.runtime.config", level="WARNING") as logs:
            loaded = config_mod.load_config_file(path)
        self.assertEqual(loaded.keys[Action.CYCLE_THEME], (KeyChord("t", shift=True), KeyChord("n")))
        output = "\n".join(logs.output)
        self.assertIn("shift+t never fires", output)
        self.assertIn("ctrl+j never fires", output)
        self.assertNotIn(" n never fires", output)

    def test_missing_default_file_means_no_values(self) -> None:
        missing = self.root / "nope" / "config.toml"
        with mock.patch.object(config_mod, "DEFAULT_CONFIG_PATH", missing):
            loaded = config_mod.load_config_file()
        self.assertIsNone(loaded.source)
        self.assertEqual(loaded.keys, {})

    def test_missing_explicit_file_is_an_error_with_hint(self) -> None:
        with self.assertRaises(ConfigNotFoundError) as ctx:
            config_mod.load_config_file(self.root / "absent.toml")
        self.assertIn("absent.toml", str(ctx.exception))
        self.assertIn("config init", str(ctx.exception))

    def test_default_path_is_used_when_present(self) -> None:
        self._write('[demo]\ntheme = "mono"\n')
        with mock.patch.object(config_mod, "DEFAULT_CONFIG_PATH", self.path):
            runtime = config_mod.resolve_runtime(CliOverrides(), environ={})
        self.assertEqual(runtime.settings.theme, ThemeName.MONO)
        self.assertEqual(runtime.config_path, self.path)

    def test_demo_section_values(self) -> None:
        loaded = config_mod.load_config_file(
            self._write('[demo]\ntheme = " Solar "\nno_color = true\nreduced_motion = false\n')
        )
        self.assertEqual(loaded.demo.theme, ThemeName.SOLAR)
        self.assertTrue(loaded.demo.no_color)
        self.assertFalse(loaded.demo.reduced_motion)
        self.assertIsNone(loaded.demo.high_contrast)

    def test_invalid_theme_lists_choices_and_path(self) -> None:
        with self.assertRaises(ConfigError) as ctx:
            config_mod.load_config_file(self._write('[demo]\ntheme = "neon"\n'))
        message = str(ctx.exception)
        self.assertIn("neon", message)
        self.assertIn("aurora, mono, solar", message)
        self.assertIn(str(self.path), message)

    def test_wrong_bool_type_is_rejected(self) -> None:
        with self.assertRaisesRegex(ConfigError, "high_contrast"):
            config_mod.load_config_file(self._write('[demo]\nhigh_contrast = "yes"\n'))

    def test_unknown_fields_and_sections_are_rejected(self) -> None:
        with self.assertRaisesRegex(ConfigError, "unknown field 'colour'"):
            config_mod.load_config_file(self._write("[demo]\ncolour = true\n"))
        with self.assertRaisesRegex(ConfigError, "unknown field 'extra'"):
            config_mod.load_config_file(self._write("[extra]\nx = 1\n"))
        with self.assertRaisesRegex(ConfigError, "unknown field 'jump'"):
            config_mod.load_config_file(self._write('[keys]\njump = "g"\n'))

    def test_malformed_toml(self) -> None:
        with self.assertRaisesRegex(ConfigError, "invalid config TOML"):
            config_mod.load_config_file(self._write("[demo\n"))

    def test_key_overrides(self) -> None:
        loaded = config_mod.load_config_file(self._write('[keys]\ncycle_theme = "n"\nquit = ["q", "x"]\n'))
        self.assertEqual(loaded.keys[Action.CYCLE_THEME], (KeyChord("n"),))
        bindings = config_mod.bindings_from_file(loaded)
        self.assertEqual(bindings.label(Action.QUIT), "q/x/esc")
        self.assertEqual(bindings.keys_for(Action.TOGGLE_HELP), (KeyChord("?"),))

    def test_bad_key_spec_names_action_and_file(self) -> None:
        with self.assertRaises(ConfigError) as ctx:
            config_mod.load_config_file(self._write('[keys]\ntoggle_help = "hyper+h"\n'))
        message = str(ctx.exception)
        self.assertIn("toggle_help", message)
        self.assertIn(str(self.path), message)

    def test_wrong_key_value_type(self) -> None:
        with self.assertRaisesRegex(ConfigError, r"\[keys\]\.quit"):
            config_mod.load_config_file(self._write("[keys]\nquit = 3\n"))

    def test_binding_errors_mention_the_file(self) -> None:
        cases = {
            '[keys]\ntoggle_color = "esc"\n': "reserved",
            '[keys]\ncycle_theme = "q"\n': "duplicate",
            "[keys]\nquit = []\n": "must not be empty",
        }
        for text, fragment in cases.items():
            with self.subTest(text=text):
                loaded = config_mod.load_config_file(self._write(text))
                with self.assertRaises(ConfigError) as ctx:
                    config_mod.bindings_from_file(loaded)
                self.assertIn(fragment, str(ctx.exception))
                self.assertIn(str(self.path), str(ctx.exception))

    def test_validate_config_file(self) -> None:
        runtime = config_mod.validate_config_file(self._write('[keys]\ncycle_theme = "n"\n'))
        self.assertEqual(runtime.bindings.label(Action.CYCLE_THEME), "n")
        self.assertEqual(runtime.config_path, self.path)


class StarterConfigTests(unittest.TestCase):
    def test_starter_config_validates(self) -> None:
        text = config_mod.starter_config_toml()
        parsed = config_mod.parse_config_text(text, Path("starter.toml"))
        bindings = config_mod.bindings_from_file(parsed)
        for action in Action:
            self.assertIn(f"{action.value} = ", text)
            self.assertTrue(bindings.keys_for(action))
        self.assertIn("# no_color = false", text)
        self.assertEqual(parsed.demo.theme, ThemeName.AURORA)

    def test_write_refuses_to_overwrite_without_force(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "nested" / "config.toml"
            config_mod.write_starter_config(path)
            self.assertTrue(path.exists())
            path.write_text("# edited\n", encoding="utf-8")
            with self.assertRaisesRegex(ConfigError, "already exists"):
                config_mod.write_starter_config(path)
            self.assertEqual(path.read_text(encoding="utf-8"), "# edited\n")
            config_mod.write_starter_config(path, force=True)
            self.assertEqual(path.read_text(encoding="utf-8"), config_mod.starter_config_toml())


if __name__ == "__main__":
    unittest.main()
