"""Public package surface for lazytree.

Exports the tree model (``Node``, ``tree_root``, ``attach``), the embeddable
``TreeView`` widget with its command/event types, and ``main`` for
programmatic CLI invocation.
"""

from __future__ import annotations

from .tree_model import Node, attach, recompute_layout, set_open, tree_root
from .tree_pane import Command, Resize, TreeSnapshot, TreeView, UpdateResult


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "Node",
    "tree_root",
    "attach",
    "set_open",
    "recompute_layout",
    "TreeView",
    "Command",
    "Resize",
    "TreeSnapshot",
    "UpdateResult",
    "main",
]
