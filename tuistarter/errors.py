"""Error taxonomy shared by the CLI, config loader, and binding validator.

Every failure that should stop startup derives from ``TuiStarterError`` so the
CLI can turn it into a single ``error: ...`` line and a non-zero exit.
"""

from __future__ import annotations


class TuiStarterError(Exception):
    """Base class for user-facing startup failures."""


class KeySpecError(TuiStarterError):
    """A key-spec string could not be parsed."""


class BindingError(TuiStarterError):
    """A binding table violates a validation rule."""


class EmptyBindingError(BindingError):
    def __init__(self, action: str) -> None:
        super().__init__(f"key binding '{action}' must not be empty")
        self.action = action


class ReservedKeyError(BindingError):
    def __init__(self, action: str, key: str) -> None:
        super().__init__(f"key '{key}' is reserved for quitting and cannot be used for '{action}'")
        self.action = action
        self.key = key


class DuplicateBindingError(BindingError):
    def __init__(self, key: str, first_action: str, second_action: str) -> None:
        super().__init__(
            f"duplicate key binding '{key}' used for both '{first_action}' and '{second_action}'"
        )
        self.key = key
        self.actions = (first_action, second_action)


class ConfigError(TuiStarterError):
    """Configuration file is malformed or holds invalid values."""


class ConfigNotFoundError(ConfigError):
    """An explicitly requested configuration file does not exist."""


class TerminalUnavailableError(TuiStarterError):
    """Interactive mode was requested without a real terminal."""


__all__ = [
    "TuiStarterError",
    "KeySpecError",
    "BindingError",
    "EmptyBindingError",
    "ReservedKeyError",
    "DuplicateBindingError",
    "ConfigError",
    "ConfigNotFoundError",
    "TerminalUnavailableError",
]
