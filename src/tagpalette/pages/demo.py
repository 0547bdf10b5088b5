"""Demo page showing a tags input and the list it reports."""

from __future__ import annotations

import logging

from nicegui import ui

from tagpalette.models import Tag
from tagpalette.pages.tags_input import TagsInput

logger = logging.getLogger(__name__)

_SAMPLE_TAGS: tuple[Tag, ...] = (
    Tag(name="Jurisdiction", color="#1f77b4"),
    Tag(name="Legal Issues", color="#ff7f0e"),
    Tag(name="Reasons", color="#2ca02c"),
)


def _describe(tags: list[Tag]) -> str:
    if not tags:
        return "No tags"
    return ", ".join(f"{tag.name} ({tag.color})" for tag in tags)


@ui.page("/")
def demo_page() -> None:
    """Tags input with click callbacks and a live summary of the tag list."""
    ui.label("Tags").classes("text-2xl font-bold mb-2")
    ui.label(
        "Type a name and press enter or comma. Ctrl-click a tag to edit it, "
        "drag tags to reorder."
    ).classes("text-sm text-gray-600")

    summary = ui.label(_describe(list(_SAMPLE_TAGS))).props(
        'data-testid="tags-summary"'
    )

    def on_change(tags: list[Tag]) -> None:
        logger.debug("Demo tags changed: %s", _describe(tags))
        summary.text = _describe(tags)

    TagsInput(
        list(_SAMPLE_TAGS),
        on_change,
        on_tag_click=lambda tag: ui.notify(f"Clicked '{tag.name}'"),
        on_tag_shift_click=lambda tag: ui.notify(f"Shift-clicked '{tag.name}'"),
    )
