"""NiceGUI tags input backed by a TagCollectionManager.

Renders each tag as a coloured chip followed by a text input. Typing a
comma or pressing enter creates a tag, the chip's remove icon deletes it,
dragging a chip onto another reorders, and ctrl-click opens the editor.
All state changes go through the manager; this module only translates
browser events and redraws the chips after each committed change.

Drag-and-drop follows the same pattern as the annotation cards in
github.com/zauberzeug/nicegui/discussions/932: per-widget drag state set
on dragstart, ``dragover.prevent`` on targets, work done on drop.
"""

from __future__ import annotations

import logging
import random
import re
from typing import TYPE_CHECKING, Any

from nicegui import ui

from tagpalette.config import get_settings
from tagpalette.manager import TagCollectionManager
from tagpalette.models import KeyCodes, ManagedTag, Tag, TagClick
from tagpalette.pages.tag_editor import TagEditorDialog

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

logger = logging.getLogger(__name__)

_HEX_COLOUR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


# ── Pure helpers ─────────────────────────────────────────────────────


def split_entries(text: str) -> tuple[list[str], str]:
    """Split raw input on commas into finished tag names and the remainder.

    Everything before the last comma is finished; blank entries are
    dropped. The text after the last comma stays in the input.

    >>> split_entries("a, b,c")
    (['a', 'b'], 'c')
    """
    *complete, remainder = text.split(",")
    return [name.strip() for name in complete if name.strip()], remainder


def text_colour_for(background: str) -> str:
    """Pick black or white text for legibility on ``background``.

    Non-hex colours (Quasar or CSS names) get white text.
    """
    if not _HEX_COLOUR.match(background):
        return "white"
    digits = background[1:]
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    luminance = 0.299 * r + 0.587 * g + 0.114 * b
    return "black" if luminance > 186 else "white"


def click_from_args(name: str, args: Any) -> TagClick:
    """Read modifier keys from a NiceGUI click event's args."""
    if not isinstance(args, dict):
        return TagClick(name=name)
    return TagClick(
        name=name,
        ctrl=bool(args.get("ctrlKey")),
        shift=bool(args.get("shiftKey")),
    )


class DragState:
    """Per-widget drag state tracking the chip currently being dragged."""

    __slots__ = ("_index", "_tag")

    def __init__(self) -> None:
        self._tag: Tag | None = None
        self._index: int | None = None

    def set_dragged(self, tag: Tag, index: int) -> None:
        self._tag = tag
        self._index = index

    def get_dragged(self) -> tuple[Tag, int] | None:
        """Return the dragged tag and its original position, or None."""
        if self._tag is None or self._index is None:
            return None
        return self._tag, self._index

    def clear(self) -> None:
        self._tag = None
        self._index = None


# ── Widget ───────────────────────────────────────────────────────────


class TagsInput:
    """Chip-style tags input.

    Args:
        tags: Initial tags, or None for an empty input.
        on_change: Called with the full tag list after every committed change.
        on_tag_click: Called with the tag on a plain click.
        on_tag_shift_click: Called with the tag on a shift-click.
        palette: Colours for new tags; defaults to the configured palette.
        rng: Random source for the starting colour; defaults to one seeded
            from ``PALETTE__SEED`` when that is set.
    """

    def __init__(
        self,
        tags: Sequence[Tag] | None,
        on_change: Callable[[list[Tag]], None],
        *,
        on_tag_click: Callable[[Tag], None] | None = None,
        on_tag_shift_click: Callable[[Tag], None] | None = None,
        palette: Sequence[str] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        palette_config = get_settings().palette
        if rng is None and palette_config.seed is not None:
            rng = random.Random(palette_config.seed)

        self._on_change = on_change
        self._drag_state = DragState()
        self.manager = TagCollectionManager(
            tags,
            palette if palette is not None else palette_config.colors,
            on_change=self._handle_committed,
            on_tag_click=on_tag_click,
            on_tag_shift_click=on_tag_shift_click,
            payload_factory=lambda tag: text_colour_for(tag.color),
            rng=rng,
        )

        with ui.column().classes("gap-1 w-full"):
            self._chips = ui.row().classes("gap-1 items-center flex-wrap")
            self._input = (
                ui.input(
                    placeholder="Add new tag",
                    on_change=self._handle_input_change,
                )
                .props('dense data-testid="tags-input-field"')
                .classes("w-full")
            )
            self._input.on("keydown.enter", self._handle_enter)
            self._input.on("keydown.backspace", self._handle_backspace)

        self._editor = TagEditorDialog(self.manager, self.manager.palette)
        self._render_chips()

    @property
    def tags(self) -> list[Tag]:
        return self.manager.tags

    def set_tags(self, tags: Sequence[Tag] | None) -> None:
        """Sync from the owner's tag list without reporting a change."""
        if self.manager.refresh(tags):
            self._render_chips()
            if self._editor.is_open and not self.manager.editing:
                self._editor.close()

    # ── Rendering ────────────────────────────────────────────────────

    def _render_chips(self) -> None:
        self._chips.clear()
        with self._chips:
            for index, managed in enumerate(self.manager.managed_tags):
                self._render_chip(index, managed)

    def _render_chip(self, index: int, managed: ManagedTag) -> ui.chip:
        def on_remove(e: Any) -> None:
            if not e.value:
                self.manager.delete(index)

        def on_click(e: Any) -> None:
            self._handle_click(click_from_args(managed.name, e.args))

        def on_dragstart() -> None:
            self._drag_state.set_dragged(managed.tag, index)

        def on_drop() -> None:
            self._handle_drop(index)

        chip = ui.chip(
            managed.name,
            color=managed.color,
            text_color=managed.payload,
            removable=True,
            on_value_change=on_remove,
        ).props(f'draggable data-testid="tag-chip-{index}"')
        chip.on("click", on_click, ["ctrlKey", "shiftKey"])
        chip.on("dragstart", on_dragstart)
        # dragover.prevent marks as valid drop target.
        chip.on("dragover.prevent", lambda: None, throttle=0.05)
        chip.on("drop", on_drop)
        return chip

    # ── Event handlers ───────────────────────────────────────────────

    def _handle_committed(self, tags: list[Tag]) -> None:
        self._render_chips()
        self._on_change(tags)

    def _handle_click(self, click: TagClick) -> None:
        self.manager.handle_click(click.name, ctrl=click.ctrl, shift=click.shift)
        if click.ctrl and self.manager.selection is not None:
            self._editor.open(self.manager.selection)

    def _handle_drop(self, target_index: int) -> None:
        dragged = self._drag_state.get_dragged()
        if dragged is None:
            logger.warning("Drop event with no dragged tag")
            return
        self._drag_state.clear()
        tag, from_index = dragged
        if from_index == target_index:
            return
        self.manager.reorder(tag, from_index, target_index)

    def _handle_input_change(self, e: Any) -> None:
        value = e.value or ""
        if "," not in value:
            return
        names, remainder = split_entries(value)
        for name in names:
            self.manager.add(name)
        self._input.value = remainder

    def _handle_enter(self) -> None:
        name = (self._input.value or "").strip()
        if not name:
            return
        self.manager.add(name)
        self._input.value = ""

    def _handle_backspace(self) -> None:
        # Backspace in an empty input asks to delete the last tag; the
        # manager refuses deletes triggered by backspace.
        if self._input.value or not len(self.manager):
            return
        self.manager.delete(len(self.manager) - 1, key_code=KeyCodes.BACKSPACE)
