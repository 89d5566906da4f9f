"""Rendering package: cell canvas, panels, help overlay, and static preview."""

from .ansi import Canvas, display_width, strip_ansi
from .help import centered_popup_rect, help_lines
from .screen import (
    clamp_preview_size,
    compose_frame,
    frame_to_terminal,
    render_frame,
    render_static_preview,
)

__all__ = [
    "Canvas",
    "display_width",
    "strip_ansi",
    "centered_popup_rect",
    "help_lines",
    "clamp_preview_size",
    "compose_frame",
    "frame_to_terminal",
    "render_frame",
    "render_static_preview",
]
