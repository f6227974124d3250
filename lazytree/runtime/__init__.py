"""Public runtime orchestration entry points.

This package groups the session bootstrap (`build_tree_view`,
`run_tree_view`) and the lower-level event loop contracts used by tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming


def build_tree_view(*args, **kwargs):
    """Lazily import the bootstrap helpers to keep package imports light."""
    from .app import build_tree_view as _build_tree_view

    return _build_tree_view(*args, **kwargs)


def run_tree_view(*args, **kwargs):
    from .app import run_tree_view as _run_tree_view

    return _run_tree_view(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


def __getattr__(name: str):
    if name in {"RuntimeLoopCallbacks", "RuntimeLoopTiming"}:
        from . import loop as _loop

        return getattr(_loop, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "build_tree_view",
    "run_tree_view",
    "RuntimeLoopCallbacks",
    "RuntimeLoopTiming",
    "run_main_loop",
]
