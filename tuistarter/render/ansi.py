"""ANSI-aware text measurement and a cell canvas for frame composition.

The canvas stores one ``(char, style)`` pair per terminal cell so panels can
be painted independently and then serialized with minimal style switches.
"""

from __future__ import annotations

import re
import unicodedata

from ..layout import Rect

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
RESET = "\033[0m"

UNICODE_BOX = {"tl": "┌", "tr": "┐", "bl": "└", "br": "┘", "h": "─", "v": "│"}
ASCII_BOX = {"tl": "+", "tr": "+", "bl": "+", "br": "+", "h": "-", "v": "|"}

# Placeholder occupying the right half of a wide character.
_WIDE_TAIL = ""


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    plain = ANSI_ESCAPE_RE.sub("", text)
    return sum(char_display_width(ch) for ch in plain)


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


class Canvas:
    """Fixed-size grid of styled cells."""

    def __init__(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self._cells: list[list[tuple[str, str]]] = [
            [(" ", "") for _ in range(self.width)] for _ in range(self.height)
        ]

    def put(self, x: int, y: int, ch: str, style: str = "") -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self._cells[y][x] = (ch, style)

    def text(self, x: int, y: int, text: str, style: str = "", max_width: int | None = None) -> int:
        """Write ``text`` starting at ``(x, y)``; return the number of columns used."""
        limit = self.width - x if max_width is None else min(max_width, self.width - x)
        col = 0
        for ch in text:
            w = char_display_width(ch)
            if w == 0:
                continue
            if col + w > limit:
                break
            self.put(x + col, y, ch, style)
            if w == 2:
                self.put(x + col + 1, y, _WIDE_TAIL, style)
            col += w
        return col

    def fill(self, rect: Rect, ch: str = " ", style: str = "") -> None:
        for y in range(rect.y, rect.bottom):
            for x in range(rect.x, rect.right):
                self.put(x, y, ch, style)

    def box(self, rect: Rect, title: str = "", style: str = "", title_style: str = "", ascii: bool = False) -> None:
        """Draw a single-line border around ``rect`` with an optional title."""
        if rect.width < 2 or rect.height < 2:
            return
        glyphs = ASCII_BOX if ascii else UNICODE_BOX
        right = rect.right - 1
        bottom = rect.bottom - 1
        for x in range(rect.x + 1, right):
            self.put(x, rect.y, glyphs["h"], style)
            self.put(x, bottom, glyphs["h"], style)
        for y in range(rect.y + 1, bottom):
            self.put(rect.x, y, glyphs["v"], style)
            self.put(right, y, glyphs["v"], style)
        self.put(rect.x, rect.y, glyphs["tl"], style)
        self.put(right, rect.y, glyphs["tr"], style)
        self.put(rect.x, bottom, glyphs["bl"], style)
        self.put(right, bottom, glyphs["br"], style)
        if title:
            self.text(rect.x + 1, rect.y, title, title_style or style, max_width=rect.width - 2)

    def row_text(self, y: int) -> str:
        """Plain characters of one row, for tests and hit-debugging."""
        return "".join(ch for ch, _style in self._cells[y])

    def to_lines(self, *, trim: bool = False) -> list[str]:
        """Serialize rows to ANSI strings, switching styles only when they change.

        With ``trim`` set, trailing unstyled blanks are dropped from each row.
        """
        lines: list[str] = []
        for row in self._cells:
            end = len(row)
            if trim:
                while end > 0 and row[end - 1] == (" ", ""):
                    end -= 1
            out: list[str] = []
            active = ""
            for ch, style in row[:end]:
                if style != active:
                    if active:
                        out.append(RESET)
                    if style:
                        out.append(style)
                    active = style
                out.append(ch)
            if active:
                out.append(RESET)
            lines.append("".join(out))
        return lines


__all__ = [
    "ANSI_ESCAPE_RE",
    "RESET",
    "Canvas",
    "char_display_width",
    "display_width",
    "strip_ansi",
]
