"""Tree construction from JSON documents and directory listings."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .node import Node, attach, tree_root

logger = logging.getLogger(__name__)

KEY_VALUE_SEPARATOR = ": "


@dataclass(frozen=True)
class JsonScalar:
    """Leaf payload for one JSON scalar.

    ``text`` is the scalar re-encoded as JSON. ``key`` is the member name or
    ``[index]`` it was found under, or ``None`` for a bare scalar document.
    """

    key: str | None
    text: str

    def __str__(self) -> str:
        if self.key is None:
            return self.text
        return f"{self.key}{KEY_VALUE_SEPARATOR}{self.text}"


@dataclass(frozen=True)
class DirectoryChild:
    """One directory-child record used to build directory trees."""

    name: str
    path: Path
    is_dir: bool


def close_below(node: Node, max_open_depth: int, depth: int = 0) -> Node:
    """Close every branch deeper than ``max_open_depth`` (root is depth 0)."""
    if node.children and depth > max_open_depth:
        node.open = False
    for child in node.children:
        close_below(child, max_open_depth, depth + 1)
    return node


def _scalar_text(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def _attach_json_value(parent: Node, label: str, value: Any) -> None:
    """Attach ``value`` under ``parent`` as a branch or a ``JsonScalar`` leaf."""
    if isinstance(value, dict):
        branch = Node(label)
        for key, item in value.items():
            _attach_json_value(branch, str(key), item)
        attach(parent, branch)
        return
    if isinstance(value, list):
        branch = Node(f"{label} [{len(value)}]")
        for idx, item in enumerate(value):
            _attach_json_value(branch, f"[{idx}]", item)
        attach(parent, branch)
        return
    attach(parent, JsonScalar(label, _scalar_text(value)))


def tree_from_object(data: Any, label: str = "root", max_open_depth: int | None = None) -> Node:
    """Build a tree from decoded JSON data.

    Objects and arrays become branches, scalars become ``key: value`` leaves.
    A scalar document yields a root with one leaf.
    """
    root = tree_root(label)
    if isinstance(data, dict):
        for key, item in data.items():
            _attach_json_value(root, str(key), item)
    elif isinstance(data, list):
        for idx, item in enumerate(data):
            _attach_json_value(root, f"[{idx}]", item)
    else:
        attach(root, JsonScalar(None, _scalar_text(data)))
    if max_open_depth is not None:
        close_below(root, max_open_depth)
    return root


def load_json_tree(path: Path, max_open_depth: int | None = None) -> Node:
    """Read ``path`` as JSON and build its tree.

    Raises ``OSError`` when the file cannot be read and ``ValueError`` when it
    is not valid JSON.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    return tree_from_object(data, label=path.name, max_open_depth=max_open_depth)


def list_directory_children(directory: Path, show_hidden: bool) -> tuple[list[DirectoryChild], Exception | None]:
    """List children sorted directories first, then by case-folded name.

    Returns ``(children, scan_error)``; ``scan_error`` is set when the
    directory cannot be scanned.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                name = entry.name
                if not show_hidden and name.startswith("."):
                    continue
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                children.append(DirectoryChild(name=name, path=Path(entry.path), is_dir=is_dir))
    except OSError as exc:
        return [], exc

    children.sort(key=lambda item: (not item.is_dir, item.name.lower()))
    return children, None


def tree_from_directory(
    root: Path,
    show_hidden: bool = False,
    max_depth: int | None = None,
    max_open_depth: int = 0,
) -> Node:
    """Build a tree mirroring the directory structure under ``root``.

    Directories are labelled with a trailing ``/``. Recursion stops below
    ``max_depth`` levels when given. Branches deeper than ``max_open_depth``
    start closed.
    """
    root = root.resolve()
    tree = tree_root(f"{root.name or str(root)}/")

    def walk(directory: Path, parent: Node, depth: int) -> None:
        children, scan_error = list_directory_children(directory, show_hidden)
        if scan_error is not None:
            logger.debug("skipping unreadable directory %s: %s", directory, scan_error)
            return
        for child in children:
            if not child.is_dir:
                attach(parent, child.name)
                continue
            branch = Node(f"{child.name}/")
            if max_depth is None or depth < max_depth:
                walk(child.path, branch, depth + 1)
            attach(parent, branch)

    walk(root, tree, 1)
    return close_below(tree, max_open_depth)
