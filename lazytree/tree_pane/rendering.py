"""Tree-row rendering: branch glyphs, open/closed markers, and per-row styles.

Styling is conditioned through callbacks invoked as ``func(siblings, index)``;
each node reads the cursor from the render context it was handed, so no
callback ever needs to capture live cursor state.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..render.ansi import clip_ansi_line
from ..tree_model import Node
from ..ui_theme import DEFAULT_THEME, UITheme

StyleFunc = Callable[[Sequence[Node], int], str]
Enumerator = Callable[[Sequence[Node], int], str]
Indenter = Callable[[Sequence[Node], int], str]
LabelFormatter = Callable[[Node], str]


def _is_last(children: Sequence[Node], index: int) -> bool:
    return index == len(children) - 1


def default_enumerator(children: Sequence[Node], index: int) -> str:
    """Classic branch markers.

    ├── Foo
    └── Bar
    """
    return "└── " if _is_last(children, index) else "├── "


def rounded_enumerator(children: Sequence[Node], index: int) -> str:
    """Branch markers with a rounded last elbow.

    ├── Foo
    ╰── Bar
    """
    return "╰── " if _is_last(children, index) else "├── "


def default_indenter(children: Sequence[Node], index: int) -> str:
    """Connect later siblings with a vertical bar; the last child gets none."""
    return "    " if _is_last(children, index) else "│   "


@dataclass(frozen=True)
class Styles:
    """Row styles as ANSI prefixes, optionally computed per row.

    ``node_style_func``/``selected_node_style_func`` take precedence over the
    static styles when set.
    """

    node_style: str = ""
    selected_node_style: str = ""
    root_style: str = ""
    node_style_func: StyleFunc | None = None
    selected_node_style_func: StyleFunc | None = None


def default_styles(theme: UITheme | None = None) -> Styles:
    active_theme = theme or DEFAULT_THEME
    return Styles(
        node_style=active_theme.node,
        selected_node_style=active_theme.selected,
        root_style=active_theme.root,
    )


def selection_style_func(styles: Styles) -> StyleFunc:
    """Build the row-style callback choosing selected vs. normal style."""

    def node_func(children: Sequence[Node], index: int) -> str:
        if styles.node_style_func is not None:
            return styles.node_style_func(children, index)
        if children[index].is_root and styles.root_style:
            return styles.root_style
        return styles.node_style

    def selected_func(children: Sequence[Node], index: int) -> str:
        if styles.selected_node_style_func is not None:
            return styles.selected_node_style_func(children, index)
        return styles.selected_node_style

    def style(children: Sequence[Node], index: int) -> str:
        if children[index].is_selected:
            return selected_func(children, index)
        return node_func(children, index)

    return style


class TreeRenderer:
    """Render the visible tree lines of a laid-out tree.

    Nodes must already carry the current render context (see
    ``tree_model.apply_render_context``); the renderer only reads it.
    """

    def __init__(
        self,
        styles: Styles | None = None,
        theme: UITheme | None = None,
        enumerator: Enumerator = default_enumerator,
        indenter: Indenter = default_indenter,
        label_formatter: LabelFormatter | None = None,
    ) -> None:
        self.theme = theme or DEFAULT_THEME
        self.styles = styles or default_styles(self.theme)
        self.enumerator = enumerator
        self.indenter = indenter
        self.label_formatter = label_formatter
        self.style_func = selection_style_func(self.styles)

    def _label(self, node: Node, style: str) -> str:
        label = node.label
        # Selected rows stay plain so the selection style covers the whole label.
        if self.label_formatter is not None and not node.has_children and not node.is_selected:
            label = self.label_formatter(node)
        if not style:
            return label
        return f"{style}{label}{self.theme.reset}"

    def _glyph(self, node: Node, always: bool = False) -> str:
        if not node.has_children and not always:
            return ""
        glyph = node.context.glyph_for(node.open)
        return f"{self.theme.glyph}{glyph}{self.theme.reset} "

    def render_row(self, siblings: Sequence[Node], index: int, prefix: str = "", *, top: bool = False) -> str:
        """Render one row for ``siblings[index]`` below branch prefix ``prefix``."""
        node = siblings[index]
        style = self.style_func(siblings, index)
        if top:
            return f"{self._glyph(node, always=True)}{self._label(node, style)}"
        branch = f"{self.theme.branch}{prefix}{self.enumerator(siblings, index)}{self.theme.reset}"
        return f"{branch}{self._glyph(node)}{self._label(node, style)}"

    def render_lines(self, root: Node, width: int = 0) -> list[str]:
        """Return every visible line in offset order, clipped to ``width`` when positive."""
        lines: list[str] = [self.render_row([root], 0, top=True)]

        def walk(node: Node, prefix: str) -> None:
            if not node.open:
                return
            children = node.children
            for index, child in enumerate(children):
                lines.append(self.render_row(children, index, prefix))
                walk(child, prefix + self.indenter(children, index))

        walk(root, "")
        if width > 0:
            return [clip_ansi_line(line, width) for line in lines]
        return lines
