"""Tree-model nodes, layout passes, flattening, and builders.

Defines ``Node`` and the whole-tree recomputation that keeps each node's
depth, visible size, and line offset current.
"""

from __future__ import annotations

from .build import (
    DirectoryChild,
    JsonScalar,
    close_below,
    list_directory_children,
    load_json_tree,
    tree_from_directory,
    tree_from_object,
)
from .context import DEFAULT_CLOSED_CHARACTER, DEFAULT_OPEN_CHARACTER, RenderContext
from .flatten import apply_render_context, find_by_offset, flatten, visible_nodes
from .layout import recompute_layout, set_depths, set_offsets, set_sizes
from .node import Node, attach, attach_all, set_open, tree_root

__all__ = [
    "Node",
    "tree_root",
    "attach",
    "attach_all",
    "set_open",
    "recompute_layout",
    "set_depths",
    "set_sizes",
    "set_offsets",
    "flatten",
    "visible_nodes",
    "find_by_offset",
    "apply_render_context",
    "RenderContext",
    "DEFAULT_OPEN_CHARACTER",
    "DEFAULT_CLOSED_CHARACTER",
    "DirectoryChild",
    "JsonScalar",
    "close_below",
    "list_directory_children",
    "load_json_tree",
    "tree_from_directory",
    "tree_from_object",
]
