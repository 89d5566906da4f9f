"""Runtime orchestration: settings resolution, config file, terminal session, loop.

Entry points are imported lazily so ``tuistarter.state`` can depend on
``runtime.settings`` without pulling in the loop and renderer.
"""

from __future__ import annotations


def run_demo(*args, **kwargs):
    """Lazily import the demo entry point to avoid package-import cycles."""
    from .app import run_demo as _run_demo

    return _run_demo(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


__all__ = ["run_demo", "run_main_loop"]
