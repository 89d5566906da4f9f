"""Tests for the key-spec language.

Covers modifier parsing, named keys, literal-character case rules, and the
canonical display form used by help text and the ``keys`` command.
"""

from __future__ import annotations

import unittest

from tuistarter.errors import KeySpecError
from tuistarter.input.keyspec import (
    KeyChord,
    NamedKey,
    key_list_display,
    key_spec_display,
    parse_key_spec,
    parse_key_specs,
    unreachable_reason,
)


class ParseKeySpecTests(unittest.TestCase):
    def test_plain_character(self) -> None:
        self.assertEqual(parse_key_spec("t"), KeyChord("t"))

    def test_surrounding_whitespace_is_ignored(self) -> None:
        self.assertEqual(parse_key_spec("  q "), KeyChord("q"))

    def test_uppercase_character_keeps_case_without_modifiers(self) -> None:
        self.assertEqual(parse_key_spec("T"), KeyChord("T"))

    def test_ctrl_lowercases_character(self) -> None:
        self.assertEqual(parse_key_spec("Ctrl+C"), KeyChord("c", ctrl=True))

    def test_alt_lowercases_character(self) -> None:
        self.assertEqual(parse_key_spec("alt+X"), KeyChord("x", alt=True))

    def test_control_alias(self) -> None:
        self.assertEqual(parse_key_spec("control+n"), KeyChord("n", ctrl=True))

    def test_named_keys_are_case_insensitive(self) -> None:
        self.assertEqual(parse_key_spec("ESC"), KeyChord(NamedKey.ESC))
        self.assertEqual(parse_key_spec("Escape"), KeyChord(NamedKey.ESC))
        self.assertEqual(parse_key_spec("Return"), KeyChord(NamedKey.ENTER))
        self.assertEqual(parse_key_spec("BackTab"), KeyChord(NamedKey.BACKTAB))

    def test_space_is_a_named_token(self) -> None:
        self.assertEqual(parse_key_spec("space"), KeyChord(" "))

    def test_shift_tab(self) -> None:
        self.assertEqual(parse_key_spec("shift+tab"), KeyChord(NamedKey.TAB, shift=True))

    def test_multiple_modifiers(self) -> None:
        self.assertEqual(
            parse_key_spec("ctrl+alt+shift+up"),
            KeyChord(NamedKey.UP, ctrl=True, alt=True, shift=True),
        )

    def test_bare_plus_is_the_plus_key(self) -> None:
        self.assertEqual(parse_key_spec("+"), KeyChord("+"))

    def test_empty_spec_is_rejected(self) -> None:
        with self.assertRaises(KeySpecError):
            parse_key_spec("   ")

    def test_unknown_modifier_is_rejected(self) -> None:
        with self.assertRaisesRegex(KeySpecError, "unsupported modifier 'hyper'"):
            parse_key_spec("hyper+a")

    def test_missing_key_after_modifier_is_rejected(self) -> None:
        with self.assertRaisesRegex(KeySpecError, "missing key"):
            parse_key_spec("ctrl+")

    def test_multi_character_key_is_rejected(self) -> None:
        with self.assertRaisesRegex(KeySpecError, "multi-character"):
            parse_key_spec("ab")

    def test_parse_key_specs_accepts_string_or_list(self) -> None:
        self.assertEqual(parse_key_specs("j"), (KeyChord("j"),))
        self.assertEqual(parse_key_specs(["j", "down"]), (KeyChord("j"), KeyChord(NamedKey.DOWN)))


class KeySpecDisplayTests(unittest.TestCase):
    def test_display_orders_modifiers(self) -> None:
        chord = KeyChord("x", ctrl=True, alt=True, shift=True)
        self.assertEqual(key_spec_display(chord), "ctrl+alt+shift+x")

    def test_display_round_trips_named_keys(self) -> None:
        for spec in ("esc", "tab", "backtab", "left", "alt+enter"):
            self.assertEqual(key_spec_display(parse_key_spec(spec)), spec)

    def test_space_displays_by_name(self) -> None:
        self.assertEqual(key_spec_display(KeyChord(" ")), "space")

    def test_chord_str_uses_display_form(self) -> None:
        self.assertEqual(str(parse_key_spec("Ctrl+K")), "ctrl+k")

    def test_key_list_display_removes_duplicates(self) -> None:
        chords = parse_key_specs(["j", "down", "j"])
        self.assertEqual(key_list_display(chords), "j/down")


class UnreachableChordTests(unittest.TestCase):
    def test_control_bytes_shared_with_named_keys(self) -> None:
        self.assertIn("enter", unreachable_reason(parse_key_spec("ctrl+j")))
        self.assertIn("enter", unreachable_reason(parse_key_spec("ctrl+m")))
        self.assertIn("tab", unreachable_reason(parse_key_spec("ctrl+i")))

    def test_shift_only_reported_on_arrows(self) -> None:
        self.assertIsNotNone(unreachable_reason(parse_key_spec("shift+T")))
        self.assertIsNotNone(unreachable_reason(parse_key_spec("alt+shift+x")))
        self.assertIsNone(unreachable_reason(parse_key_spec("shift+up")))

    def test_ordinary_chords_are_reachable(self) -> None:
        for spec in ("T", "ctrl+n", "alt+t", "backtab", "enter"):
            self.assertIsNone(unreachable_reason(parse_key_spec(spec)), spec)


if __name__ == "__main__":
    unittest.main()
