"""Input-layer public API: key specs, bindings, raw decoding, and dispatch.

Exports are split between the pure binding core (`parse_key_spec`,
`BindingTable`) and the runtime pieces used by the event loop (`read_event`,
`InputDispatcher`).
"""

from .bindings import Action, BindingTable, build_bindings, default_bindings, validate_bindings
from .dispatch import InputDispatcher
from .keyspec import KeyChord, NamedKey, key_list_display, key_spec_display, parse_key_spec, parse_key_specs
from .mouse import NO_TARGET, ListRowHit, TabHit, hit_test
from .reader import ESC_SEQUENCE_TIMEOUT_MS, MouseEvent, MouseKind, read_event

__all__ = [
    "Action",
    "BindingTable",
    "build_bindings",
    "default_bindings",
    "validate_bindings",
    "InputDispatcher",
    "KeyChord",
    "NamedKey",
    "key_list_display",
    "key_spec_display",
    "parse_key_spec",
    "parse_key_specs",
    "NO_TARGET",
    "ListRowHit",
    "TabHit",
    "hit_test",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "MouseEvent",
    "MouseKind",
    "read_event",
]
