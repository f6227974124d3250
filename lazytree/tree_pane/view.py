"""Embeddable tree-view widget.

``TreeView`` wires the navigator, viewport, key map, and renderer together.
A host forwards commands, raw key tokens, or resize events to ``update`` and
asks ``view`` (text frame) or ``snapshot`` (structured rows) for output.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..input.key_map import KeyBinding, KeyMap, default_key_map
from ..render.help import help_lines, help_row_count
from ..tree_model import (
    DEFAULT_CLOSED_CHARACTER,
    DEFAULT_OPEN_CHARACTER,
    Node,
    RenderContext,
    apply_render_context,
    flatten,
    visible_nodes,
)
from ..ui_theme import DEFAULT_THEME, UITheme
from .events import Command, Resize, SnapshotRow, TreeSnapshot, UpdateResult
from .navigator import Navigator
from .rendering import (
    Enumerator,
    Indenter,
    LabelFormatter,
    Styles,
    TreeRenderer,
    default_enumerator,
    default_indenter,
    default_styles,
)
from .viewport import Viewport

logger = logging.getLogger(__name__)

HelpBindings = Callable[[], Sequence[KeyBinding]]


class TreeView:
    """Navigable, scrollable tree widget for one session."""

    def __init__(
        self,
        root: Node,
        width: int = 80,
        height: int = 24,
        *,
        key_map: KeyMap | None = None,
        styles: Styles | None = None,
        theme: UITheme | None = None,
        open_character: str = DEFAULT_OPEN_CHARACTER,
        closed_character: str = DEFAULT_CLOSED_CHARACTER,
        scroll_off: int = 0,
        show_help: bool = True,
        enumerator: Enumerator = default_enumerator,
        indenter: Indenter = default_indenter,
        label_formatter: LabelFormatter | None = None,
        additional_short_help: HelpBindings | None = None,
        additional_full_help: HelpBindings | None = None,
    ) -> None:
        self.root = root
        self.theme = theme or DEFAULT_THEME
        self.styles = styles or default_styles(self.theme)
        self.open_character = open_character
        self.closed_character = closed_character
        self.enumerator = enumerator
        self.indenter = indenter
        self.label_formatter = label_formatter
        self.additional_short_help = additional_short_help
        self.additional_full_help = additional_full_help
        self.show_help = show_help
        self.show_full_help = False
        self.quit_requested = False
        self.width = max(0, width)
        self.height = max(0, height)
        self.key_map = key_map or default_key_map()
        self.navigator = Navigator(root)
        self.viewport = Viewport(self._tree_height(), scroll_off)
        self._handlers: dict[Command, Callable[[], bool]] = {
            Command.MOVE_DOWN: lambda: self.navigator.move(1),
            Command.MOVE_UP: lambda: self.navigator.move(-1),
            Command.PAGE_DOWN: lambda: self.navigator.page_move(1, self.viewport.height),
            Command.PAGE_UP: lambda: self.navigator.page_move(-1, self.viewport.height),
            Command.HALF_PAGE_DOWN: lambda: self.navigator.half_page_move(1, self.viewport.height),
            Command.HALF_PAGE_UP: lambda: self.navigator.half_page_move(-1, self.viewport.height),
            Command.GOTO_TOP: self.navigator.goto_top,
            Command.GOTO_BOTTOM: self.navigator.goto_bottom,
            Command.TOGGLE_NODE: self.navigator.toggle,
            Command.OPEN_NODE: self.navigator.open,
            Command.CLOSE_NODE: self.navigator.close,
            Command.TOGGLE_HELP: self._toggle_full_help,
            Command.QUIT: self._request_quit,
        }
        self._sync()

    @property
    def cursor_offset(self) -> int:
        return self.navigator.cursor_offset

    @property
    def scroll_off(self) -> int:
        return self.viewport.scroll_off

    @scroll_off.setter
    def scroll_off(self, value: int) -> None:
        self.viewport.scroll_off = max(0, value)
        self._sync()

    def _host_help(self, source: HelpBindings | None) -> Sequence[KeyBinding]:
        return source() if source is not None else ()

    def _tree_height(self) -> int:
        help_rows = help_row_count(
            self.key_map,
            self.show_help,
            self.show_full_help,
            self._host_help(self.additional_full_help),
        )
        return max(0, self.height - help_rows)

    def _render_context(self) -> RenderContext:
        return RenderContext(
            cursor_offset=self.navigator.cursor_offset,
            open_character=self.open_character,
            closed_character=self.closed_character,
        )

    def _sync(self) -> None:
        """Re-clamp the cursor, follow it with the viewport, and hand out render context."""
        self.navigator.refresh()
        self.viewport.resize(self._tree_height())
        self.viewport.sync(self.navigator.cursor_offset, self.root.size)
        apply_render_context(self.root, self._render_context())

    def _toggle_full_help(self) -> bool:
        self.show_full_help = not self.show_full_help
        return True

    def _request_quit(self) -> bool:
        self.quit_requested = True
        return False

    def apply(self, command: Command) -> bool:
        """Run one command and return whether visible state changed."""
        prev_top = self.viewport.top
        changed = self._handlers[command]()
        self._sync()
        return changed or self.viewport.top != prev_top

    def update(self, event: Command | Resize | str) -> UpdateResult:
        """Process one host event.

        Strings are key tokens looked up in the key map; unbound keys are
        ignored. The result's ``quit`` flag is set only for the quit command.
        """
        if isinstance(event, Resize):
            changed = self.set_size(event.width, event.height)
            return UpdateResult(changed=changed)
        if isinstance(event, Command):
            command: Command | None = event
        else:
            command = self.key_map.command_for(event)
        if command is None:
            return UpdateResult()
        changed = self.apply(command)
        return UpdateResult(changed=changed, quit=command is Command.QUIT)

    def set_size(self, width: int, height: int) -> bool:
        changed = (max(0, width), max(0, height)) != (self.width, self.height)
        self.width = max(0, width)
        self.height = max(0, height)
        self._sync()
        if changed:
            logger.debug("tree view resized to %dx%d", self.width, self.height)
        return changed

    def set_width(self, width: int) -> bool:
        return self.set_size(width, self.height)

    def set_height(self, height: int) -> bool:
        return self.set_size(self.width, height)

    def set_show_help(self, show_help: bool) -> None:
        self.show_help = bool(show_help)
        self._sync()

    def set_styles(self, styles: Styles) -> None:
        self.styles = styles

    def set_key_map(self, key_map: KeyMap) -> None:
        self.key_map = key_map
        self._sync()

    def refresh(self) -> None:
        """Recompute everything after the host attached nodes to the tree."""
        self._sync()

    def node(self, offset: int) -> Node | None:
        return self.navigator.node_at(offset)

    def node_at_cursor(self) -> Node | None:
        return self.navigator.node_at_cursor()

    def flat_nodes(self) -> list[Node]:
        return flatten(self.root)

    def snapshot(self) -> TreeSnapshot:
        rows = tuple(
            SnapshotRow(
                label=node.label,
                depth=node.depth,
                offset=node.offset,
                is_open=node.open,
                is_selected=node.is_selected,
                has_children=node.has_children,
            )
            for node in visible_nodes(self.root)
        )
        return TreeSnapshot(
            rows=rows,
            cursor_offset=self.navigator.cursor_offset,
            window_top=self.viewport.top,
            window_height=self.viewport.height,
        )

    def renderer(self) -> TreeRenderer:
        return TreeRenderer(
            styles=self.styles,
            theme=self.theme,
            enumerator=self.enumerator,
            indenter=self.indenter,
            label_formatter=self.label_formatter,
        )

    def tree_lines(self) -> list[str]:
        """Rendered lines inside the viewport window."""
        lines = self.renderer().render_lines(self.root, self.width)
        window = self.viewport.window(len(lines))
        return lines[window.start:window.stop]

    def view(self) -> str:
        """Render the current text frame (tree window plus help)."""
        out = self.tree_lines()
        if self.show_help:
            out.append("")
            out.extend(
                help_lines(
                    self.key_map,
                    self.width,
                    self.show_full_help,
                    self.theme,
                    extra_short=self._host_help(self.additional_short_help),
                    extra_full=self._host_help(self.additional_full_help),
                )
            )
        return "\n".join(out)
