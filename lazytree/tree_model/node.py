"""Tree node type and structural mutations.

A ``Node`` owns its children exclusively and carries the layout cache
(``depth``, ``size``, ``offset``) that ``tree_model.layout`` rewrites after
every mutation. The tree only grows: nodes are attached, never removed.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .context import EMPTY_RENDER_CONTEXT, RenderContext


class Node:
    """One entry in the tree: payload, ordered children, and open state."""

    def __init__(self, value: Any, *, open: bool = False) -> None:
        self.value = value
        self.children: list[Node] = []
        self.open = open
        self.is_root = False
        self.depth = 0
        self.size = 1
        self.offset = 0
        self.context: RenderContext = EMPTY_RENDER_CONTEXT

    def __repr__(self) -> str:
        state = "open" if self.open else "closed"
        return f"Node({self.value!r}, {state}, depth={self.depth}, size={self.size}, offset={self.offset})"

    @property
    def label(self) -> str:
        """Display text for the payload."""
        return str(self.value)

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    @property
    def is_selected(self) -> bool:
        """Return whether this node sits under the cursor of the last render context."""
        return self.offset == self.context.cursor_offset

    def child(self, *children: Any) -> Node:
        """Attach each of ``children`` in order and return ``self`` for chaining.

        Raw payloads become closed leaves. ``Node`` instances are adopted as
        whole subtrees with their own open state.
        """
        for child_spec in children:
            attach(self, child_spec)
        return self

    def close(self) -> Node:
        set_open(self, False)
        return self

    def expand(self) -> Node:
        set_open(self, True)
        return self


def tree_root(value: Any) -> Node:
    """Create the single root node of a new tree (open, size 1)."""
    root = Node(value, open=True)
    root.is_root = True
    return root


def attach(parent: Node, child_spec: Any) -> Node:
    """Append ``child_spec`` under ``parent`` and return the attached node.

    A parent that gains a child is marked open, matching how freshly built
    trees display every branch expanded. This operation cannot fail.
    """
    if isinstance(child_spec, Node):
        child = child_spec
        child.is_root = False
    else:
        child = Node(child_spec, open=False)
    parent.children.append(child)
    parent.size += child.size
    parent.open = parent.size > 1
    return child


def attach_all(parent: Node, child_specs: Iterable[Any]) -> Node:
    """Attach every item of ``child_specs`` and return ``parent``."""
    for child_spec in child_specs:
        attach(parent, child_spec)
    return parent


def set_open(node: Node, open: bool) -> None:
    """Set ``node.open`` without touching any descendant's flag."""
    node.open = bool(open)
