"""Layout passes deriving depth, size, and offset for every node.

The whole tree is re-walked on every mutation; there is no incremental patching.
Interactive trees are small next to terminal I/O latency, so the O(n) walk per
event is the accepted scalability bound.
"""

from __future__ import annotations

from .node import Node


def set_depths(node: Node, depth: int = 0) -> None:
    """Assign ``depth`` in pre-order (root is 0, child is parent + 1)."""
    node.depth = depth
    for child in node.children:
        set_depths(child, depth + 1)


def set_sizes(node: Node) -> int:
    """Assign ``size`` in post-order and return it.

    A closed node occupies exactly one line whatever it contains. An open node
    occupies its own line plus every child's size, which is itself 1 for a
    closed child.
    """
    child_sizes = [set_sizes(child) for child in node.children]
    node.size = 1 + sum(child_sizes) if node.open else 1
    return node.size


def set_offsets(node: Node) -> None:
    """Assign ``offset`` in pre-order from the sizes of earlier siblings.

    Descendants of closed nodes are walked too and receive offsets that the
    size pass never reserved, so a hidden node can share its offset with a
    later visible node. Lookups that must resolve visible lines go through
    ``flatten.find_by_offset`` which skips hidden subtrees.
    """
    above = 0
    for child in node.children:
        child.offset = node.offset + 1 + above
        set_offsets(child)
        above += child.size


def recompute_layout(root: Node) -> Node:
    """Run the depth, size, and offset passes over the whole tree."""
    root.offset = 0
    set_depths(root, 0)
    set_sizes(root)
    set_offsets(root)
    return root
