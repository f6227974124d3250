"""Tree-pane widget: navigation, viewport following, and row rendering."""

from .events import Command, Resize, SnapshotRow, TreeSnapshot, UpdateResult
from .navigator import Navigator
from .rendering import (
    Styles,
    TreeRenderer,
    default_enumerator,
    default_indenter,
    default_styles,
    rounded_enumerator,
    selection_style_func,
)
from .view import TreeView
from .viewport import Viewport

__all__ = [
    "Command",
    "Resize",
    "SnapshotRow",
    "TreeSnapshot",
    "UpdateResult",
    "Navigator",
    "Viewport",
    "TreeView",
    "Styles",
    "TreeRenderer",
    "default_enumerator",
    "default_indenter",
    "default_styles",
    "rounded_enumerator",
    "selection_style_func",
]
