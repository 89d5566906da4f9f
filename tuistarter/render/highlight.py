"""Shell-command highlighting for the Commands panel via Pygments tokens."""

from __future__ import annotations

from functools import lru_cache

from pygments.lexers import BashLexer
from pygments.token import Comment, Keyword, Name, Number, Operator, Punctuation, String, Whitespace

from ..ui_theme import UITheme

EXAMPLE_COMMANDS: tuple[str, ...] = (
    "tui-starter demo --theme aurora",
    "tui-starter themes",
    "tui-starter keys",
    "tui-starter config init",
)


@lru_cache(maxsize=1)
def _lexer() -> BashLexer:
    return BashLexer(stripnl=False, ensurenl=False)


def _style_for_token(tok_type, value: str, first_word: bool, theme: UITheme) -> str:
    if first_word:
        return theme.accent + theme.bold
    if value.startswith("-"):
        return theme.muted
    if tok_type in String or tok_type in Number:
        return theme.success
    if tok_type in Keyword or tok_type in Name.Builtin:
        return theme.accent
    if tok_type in Operator or tok_type in Punctuation or tok_type in Comment:
        return theme.muted
    return theme.fg


def command_segments(command: str, theme: UITheme) -> list[tuple[str, str]]:
    """Split ``command`` into ``(text, style)`` runs.

    The program name takes the accent color, flags are muted, and the rest
    follows the lexer's token class.
    """
    segments: list[tuple[str, str]] = []
    seen_word = False
    for tok_type, value in _lexer().get_tokens(command):
        if not value:
            continue
        if tok_type in Whitespace or value.isspace():
            segments.append((value, theme.fg))
            continue
        segments.append((value, _style_for_token(tok_type, value, not seen_word, theme)))
        seen_word = True
    return segments


__all__ = ["EXAMPLE_COMMANDS", "command_segments"]
