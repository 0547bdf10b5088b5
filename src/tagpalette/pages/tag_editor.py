"""Tag editor dialog and colour picker.

Opened by ctrl-clicking a tag chip. Saving goes through
``TagCollectionManager.update_tag``; when the manager rejects the edit
(the new name belongs to another tag) the dialog stays open.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nicegui import ui

from tagpalette.models import Tag

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tagpalette.manager import TagCollectionManager

logger = logging.getLogger(__name__)

_SWATCH_BASE = "w-8 h-8 min-w-0 p-0 rounded-full"
_SWATCH_SELECTED = f"{_SWATCH_BASE} ring-2 ring-offset-1 ring-black"


def _edited_tag(name: str | None, color: str | None) -> Tag | None:
    """Build the replacement tag from raw dialog values.

    Returns ``None`` when the name is blank or no colour is set.
    """
    if not name or not name.strip() or not color:
        return None
    return Tag(name=name.strip(), color=color)


class TagEditorDialog:
    """Modal dialog for renaming and recolouring the selected tag."""

    def __init__(self, manager: TagCollectionManager, palette: Sequence[str]) -> None:
        self._manager = manager
        self._palette = tuple(palette)
        self._selected_color: list[str] = [self._palette[0]]
        self._swatch_buttons: list[ui.button] = []
        # Map button id -> colour to avoid reading NiceGUI private _style
        self._swatch_colours: dict[int, str] = {}

        with (
            ui.dialog() as self._dialog,
            ui.card().classes("w-96").props("data-testid=tag-editor-dialog"),
        ):
            ui.label("Edit Tag").classes("text-lg font-bold mb-2")
            self._name_input = (
                ui.input("Tag name")
                .props('data-testid="tag-editor-name-input"')
                .classes("w-full")
            )
            self._build_colour_picker()
            with ui.row().classes("w-full justify-end gap-2 mt-4"):
                ui.button("Cancel", on_click=self.close).props("flat")
                ui.button("OK", on_click=self._save).props("color=primary")

        # Escape and backdrop clicks close the dialog without a save.
        self._dialog.on("hide", self._manager.cancel_edit)

    @property
    def is_open(self) -> bool:
        return bool(self._dialog.value)

    def _build_colour_picker(self) -> None:
        """Build preset swatch row and custom colour input."""
        ui.label("Colour").classes("text-sm text-gray-600 mt-2")

        with ui.row().classes("gap-1 flex-wrap"):
            for preset in self._palette:
                btn = ui.button(
                    "",
                    on_click=lambda _e, c=preset: self._select_swatch(c),
                )
                btn.style(f"background-color: {preset} !important")
                btn.classes(_SWATCH_BASE)
                self._swatch_buttons.append(btn)
                self._swatch_colours[id(btn)] = preset

        def _on_custom_color(e: object) -> None:
            val = getattr(e, "value", None)
            if val:
                self._selected_color[0] = val
                self._highlight_swatch(val)

        self._color_input = ui.color_input(
            label="Custom",
            value=self._selected_color[0],
            preview=True,
            on_change=_on_custom_color,
        )

    def _select_swatch(self, color: str) -> None:
        self._selected_color[0] = color
        self._color_input.value = color
        self._highlight_swatch(color)

    def _highlight_swatch(self, color: str) -> None:
        for btn in self._swatch_buttons:
            is_active = self._swatch_colours.get(id(btn)) == color
            btn.classes(replace=_SWATCH_SELECTED if is_active else _SWATCH_BASE)

    def open(self, tag: Tag) -> None:
        """Populate the fields from ``tag`` and show the dialog."""
        self._name_input.value = tag.name
        self._select_swatch(tag.color)
        self._dialog.open()

    def close(self) -> None:
        self._manager.cancel_edit()
        self._dialog.close()

    def _save(self) -> None:
        new_tag = _edited_tag(self._name_input.value, self._selected_color[0])
        if new_tag is None:
            return
        if self._manager.update_tag(new_tag):
            self._dialog.close()
        else:
            logger.debug("Edit to %r rejected, keeping editor open", new_tag.name)
