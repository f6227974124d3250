"""Pre-order listings, offset lookup, and render-context distribution."""

from __future__ import annotations

from .context import RenderContext
from .node import Node


def flatten(root: Node) -> list[Node]:
    """Return every node in pre-order, hidden ones included.

    Each call builds a fresh list, so callers may mutate the result freely.
    """
    nodes: list[Node] = []

    def walk(node: Node) -> None:
        nodes.append(node)
        for child in node.children:
            walk(child)

    walk(root)
    return nodes


def visible_nodes(root: Node) -> list[Node]:
    """Return the nodes currently on screen lines, in pre-order.

    Children of closed nodes are skipped. After ``recompute_layout`` the node
    at index ``i`` has offset ``i``.
    """
    nodes: list[Node] = []

    def walk(node: Node) -> None:
        nodes.append(node)
        if not node.open:
            return
        for child in node.children:
            walk(child)

    walk(root)
    return nodes


def find_by_offset(root: Node, offset: int, *, include_hidden: bool = False) -> Node | None:
    """Depth-first search for the first node whose cached offset equals ``offset``.

    By default the search stays out of closed subtrees, whose descendants can
    carry offsets that collide with visible lines. ``include_hidden=True``
    searches every node.
    """
    if root.offset == offset:
        return root
    if not root.open and not include_hidden:
        return None
    for child in root.children:
        found = find_by_offset(child, offset, include_hidden=include_hidden)
        if found is not None:
            return found
    return None


def apply_render_context(root: Node, context: RenderContext) -> list[Node]:
    """Hand ``context`` to every node of the tree and return the flat listing."""
    nodes = flatten(root)
    for node in nodes:
        node.context = context
    return nodes
