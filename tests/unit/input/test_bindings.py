"""Tests for binding-table construction and validation."""

from __future__ import annotations

import unittest

from tuistarter.errors import DuplicateBindingError, EmptyBindingError, ReservedKeyError
from tuistarter.input.bindings import (
    ACTION_PRIORITY,
    Action,
    BindingTable,
    build_bindings,
    default_bindings,
    validate_bindings,
)
from tuistarter.input.keyspec import CTRL_C, ESC, KeyChord, NamedKey, parse_key_specs


class DefaultBindingTests(unittest.TestCase):
    def test_defaults_validate(self) -> None:
        table = default_bindings()
        self.assertIs(validate_bindings(table), table)

    def test_every_action_has_keys(self) -> None:
        table = default_bindings()
        for action in Action:
            self.assertTrue(table.keys_for(action), action)

    def test_default_labels(self) -> None:
        table = default_bindings()
        self.assertEqual(table.label(Action.CYCLE_THEME), "t")
        self.assertEqual(table.label(Action.NEXT_PANEL), "tab/right")
        self.assertEqual(table.label(Action.LIST_DOWN), "down/j")
        self.assertEqual(table.label(Action.QUIT), "q/esc")

    def test_quit_is_first_in_priority(self) -> None:
        self.assertIs(ACTION_PRIORITY[0], Action.QUIT)
        self.assertEqual(set(ACTION_PRIORITY), set(Action))

    def test_reserved_chords_always_match_quit(self) -> None:
        table = default_bindings()
        self.assertTrue(table.matches(Action.QUIT, ESC))
        self.assertTrue(table.matches(Action.QUIT, CTRL_C))
        self.assertIs(table.action_for(ESC), Action.QUIT)

    def test_matching_requires_exact_modifiers(self) -> None:
        table = default_bindings()
        self.assertIs(table.action_for(KeyChord("t")), Action.CYCLE_THEME)
        self.assertIsNone(table.action_for(KeyChord("t", alt=True)))
        self.assertIsNone(table.action_for(KeyChord("T")))

    def test_table_is_read_only(self) -> None:
        table = default_bindings()
        with self.assertRaises(TypeError):
            table.chords[Action.QUIT] = ()  # type: ignore[index]


class BuildBindingTests(unittest.TestCase):
    def test_override_replaces_only_that_action(self) -> None:
        table = build_bindings({Action.CYCLE_THEME: parse_key_specs("n")})
        self.assertEqual(table.keys_for(Action.CYCLE_THEME), (KeyChord("n"),))
        self.assertEqual(table.keys_for(Action.QUIT), (KeyChord("q"),))

    def test_quit_override_keeps_esc_label(self) -> None:
        table = build_bindings({Action.QUIT: parse_key_specs("x")})
        self.assertEqual(table.quit_labels(), ["x", "esc"])
        self.assertTrue(table.matches(Action.QUIT, ESC))
        self.assertFalse(table.matches(Action.QUIT, KeyChord("q")))

    def test_quit_may_list_esc_explicitly(self) -> None:
        table = build_bindings({Action.QUIT: parse_key_specs(["q", "esc"])})
        self.assertEqual(table.quit_labels(), ["q", "esc"])

    def test_empty_list_is_rejected(self) -> None:
        with self.assertRaises(EmptyBindingError) as ctx:
            build_bindings({Action.TOGGLE_HELP: ()})
        self.assertIn("toggle_help", str(ctx.exception))

    def test_reserved_key_on_other_action_is_rejected(self) -> None:
        with self.assertRaises(ReservedKeyError) as ctx:
            build_bindings({Action.TOGGLE_COLOR: parse_key_specs("ctrl+c")})
        self.assertIn("toggle_color", str(ctx.exception))
        self.assertIn("ctrl+c", str(ctx.exception))

    def test_esc_on_other_action_is_rejected(self) -> None:
        with self.assertRaises(ReservedKeyError):
            build_bindings({Action.TOGGLE_HELP: (KeyChord(NamedKey.ESC),)})

    def test_cross_action_duplicate_is_rejected(self) -> None:
        with self.assertRaises(DuplicateBindingError) as ctx:
            build_bindings({Action.CYCLE_THEME: parse_key_specs("q")})
        message = str(ctx.exception)
        self.assertIn("'q'", message)
        self.assertIn("cycle_theme", message)
        self.assertIn("quit", message)

    def test_override_can_take_a_default_key_of_another_action_once_freed(self) -> None:
        table = build_bindings(
            {
                Action.CYCLE_THEME: parse_key_specs("h"),
                Action.TOGGLE_HIGH_CONTRAST: parse_key_specs("H"),
            }
        )
        self.assertIs(table.action_for(KeyChord("h")), Action.CYCLE_THEME)
        self.assertIs(table.action_for(KeyChord("H")), Action.TOGGLE_HIGH_CONTRAST)

    def test_repeat_within_one_action_is_tolerated(self) -> None:
        table = build_bindings({Action.LIST_UP: parse_key_specs(["k", "k", "up"])})
        self.assertEqual(table.labels(Action.LIST_UP), ["k", "up"])

    def test_missing_actions_are_empty_in_raw_table(self) -> None:
        table = BindingTable({Action.QUIT: (KeyChord("q"),)})
        self.assertEqual(table.keys_for(Action.CYCLE_THEME), ())
        with self.assertRaises(EmptyBindingError):
            validate_bindings(table)


if __name__ == "__main__":
    unittest.main()
