"""Ordered, uniquely-named tag collection with palette colour assignment.

``TagCollectionManager`` owns the tag list, the colour cursor and the edit
selection. Every mutating operation builds a new list, commits it with a
single assignment, and only then reports the committed tags to
``on_change``. Rejected operations (blank or duplicate names, the backspace
delete gesture, out-of-range positions) leave the list untouched, fire nothing,
and return ``False``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from tagpalette.models import KeyCodes, ManagedTag, Tag, TagNotFoundError
from tagpalette.palette import ColorCursor

if TYPE_CHECKING:
    import random
    from collections.abc import Callable, Sequence

    from typing import TypeAlias

    ChangeHandler: TypeAlias = Callable[[list[Tag]], None]
    TagHandler: TypeAlias = Callable[[Tag], None]
    PayloadFactory: TypeAlias = Callable[[Tag], Any]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _reinsert(
    items: Sequence[T], old_index: int, new_index: int, item: T
) -> list[T]:
    """Drop the element at old_index, then insert ``item`` at new_index.

    ``item`` is inserted as given rather than re-read from old_index.
    Returns a new list.
    """
    result = list(items)
    del result[old_index]
    result.insert(new_index, item)
    return result


class TagCollectionManager:
    """Owns an ordered tag collection and the policy for changing it.

    Usage:
        manager = TagCollectionManager(tags, palette, on_change=save)
        manager.add("Jurisdiction")
        manager.begin_edit("Jurisdiction")
        manager.update_tag(Tag("Jurisdiction", "#d62728"))
    """

    def __init__(
        self,
        tags: Sequence[Tag] | None,
        palette: Sequence[str],
        *,
        on_change: ChangeHandler | None = None,
        on_tag_click: TagHandler | None = None,
        on_tag_shift_click: TagHandler | None = None,
        payload_factory: PayloadFactory | None = None,
        start_index: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._cursor = ColorCursor(palette, start=start_index, rng=rng)
        self._on_change = on_change
        self._on_tag_click = on_tag_click
        self._on_tag_shift_click = on_tag_shift_click
        self._payload_factory = payload_factory
        self._source = tags
        self._tags: list[ManagedTag] = self._wrap_all(tags)
        self._selection: Tag | None = None
        logger.debug(
            "Tag manager created with %d tags, cursor at %d of %d",
            len(self._tags),
            self._cursor.index,
            len(self._cursor.palette),
        )

    # ── State access ─────────────────────────────────────────────────

    @property
    def tags(self) -> list[Tag]:
        """Committed tags in display order, without render payload."""
        return [managed.tag for managed in self._tags]

    @property
    def managed_tags(self) -> tuple[ManagedTag, ...]:
        return tuple(self._tags)

    @property
    def cursor(self) -> int:
        return self._cursor.index

    @property
    def palette(self) -> tuple[str, ...]:
        return self._cursor.palette

    @property
    def next_color(self) -> str:
        return self._cursor.color

    @property
    def selection(self) -> Tag | None:
        """The tag currently open for editing, or None."""
        return self._selection

    @property
    def editing(self) -> bool:
        return self._selection is not None

    def __len__(self) -> int:
        return len(self._tags)

    def __contains__(self, name: object) -> bool:
        return any(managed.name == name for managed in self._tags)

    def get_tag(self, name: str) -> ManagedTag:
        """Return the managed tag with the given name.

        Raises:
            TagNotFoundError: If no tag has that name.
        """
        for managed in self._tags:
            if managed.name == name:
                return managed
        raise TagNotFoundError(name)

    # ── Inbound sync ─────────────────────────────────────────────────

    def refresh(self, tags: Sequence[Tag] | None) -> bool:
        """Replace the collection with a new authoritative list from the owner.

        Only acts when ``tags`` is a different object from the list last
        supplied. Keeps the colour cursor and does not call ``on_change``.
        An edit selection whose tag is no longer present is cleared.
        """
        if tags is self._source:
            return False
        self._source = tags
        self._tags = self._wrap_all(tags)
        if self._selection is not None and self._selection.name not in self:
            logger.debug("Selected tag %r dropped by refresh", self._selection.name)
            self._selection = None
        logger.debug("Tag collection refreshed from owner: %d tags", len(self._tags))
        return True

    # ── Operations ───────────────────────────────────────────────────

    def add(self, name: str, payload: Any = None) -> bool:
        """Append a new tag coloured from the cursor.

        Blank and duplicate names are ignored. ``payload`` overrides the
        payload factory for this tag.
        """
        if not name.strip():
            logger.debug("Ignoring blank tag name")
            return False
        if name in self:
            logger.debug("Ignoring duplicate tag %r", name)
            return False

        tag = Tag(name=name, color=self._cursor.color)
        managed = self._wrap(tag) if payload is None else ManagedTag(tag, payload)
        self._commit([*self._tags, managed])
        self._cursor.advance()
        logger.info("Added tag %r with colour %s", tag.name, tag.color)
        self._notify()
        return True

    def begin_edit(self, name: str) -> Tag:
        """Select the named tag for editing and return it.

        Raises:
            TagNotFoundError: If no tag has that name.
        """
        self._selection = self.get_tag(name).tag
        return self._selection

    def cancel_edit(self) -> None:
        self._selection = None

    def update_tag(self, new_tag: Tag) -> bool:
        """Replace the selected tag with ``new_tag`` in the same position.

        Renaming onto another existing tag's name, or to a blank name, is
        rejected and the edit stays open.
        """
        selected = self._selection
        if selected is None:
            logger.warning("update_tag called with no tag selected for edit")
            return False
        if not new_tag.name.strip():
            logger.debug("Rejecting rename of %r to a blank name", selected.name)
            return False
        if new_tag.name != selected.name and new_tag.name in self:
            logger.debug(
                "Rejecting rename of %r to existing name %r",
                selected.name,
                new_tag.name,
            )
            return False

        position = next(
            (
                i
                for i, managed in enumerate(self._tags)
                if managed.name == selected.name
            ),
            None,
        )
        if position is None:
            logger.warning(
                "Selected tag %r is no longer in the collection", selected.name
            )
            return False

        updated = list(self._tags)
        updated[position] = self._wrap(new_tag)
        self._selection = None
        self._commit(updated)
        logger.info(
            "Updated tag %r -> %r (%s)", selected.name, new_tag.name, new_tag.color
        )
        self._notify()
        return True

    def delete(self, index: int, key_code: int | None = None) -> bool:
        """Remove the tag at ``index``.

        Deletions triggered by the backspace key are ignored, so holding
        backspace in an empty input cannot wipe out the tags.
        """
        if key_code == KeyCodes.BACKSPACE:
            logger.debug("Ignoring backspace delete at index %d", index)
            return False
        if not 0 <= index < len(self._tags):
            logger.debug("Ignoring delete at out-of-range index %d", index)
            return False

        removed = self._tags[index]
        self._commit([m for i, m in enumerate(self._tags) if i != index])
        logger.info("Deleted tag %r", removed.name)
        self._notify()
        return True

    def reorder(self, tag: Tag, from_index: int, to_index: int) -> bool:
        """Move a tag from ``from_index`` to ``to_index``.

        The element at ``from_index`` is removed and ``tag`` is inserted at
        ``to_index`` in the shortened list. A ``from_index`` outside the
        list, or a ``tag`` whose name would clash with a remaining tag, is
        ignored.
        """
        if not 0 <= from_index < len(self._tags):
            logger.debug("Ignoring reorder from out-of-range index %d", from_index)
            return False
        remaining = self._tags[:from_index] + self._tags[from_index + 1 :]
        if any(managed.name == tag.name for managed in remaining):
            logger.debug("Ignoring reorder that would duplicate %r", tag.name)
            return False

        self._commit(
            _reinsert(self._tags, from_index, max(to_index, 0), self._wrap(tag))
        )
        logger.debug("Moved tag %r from %d to %d", tag.name, from_index, to_index)
        self._notify()
        return True

    def handle_click(
        self, name: str, *, ctrl: bool = False, shift: bool = False
    ) -> None:
        """Dispatch a click on a rendered tag.

        Ctrl-click opens the tag for editing. Shift-click goes to
        ``on_tag_shift_click`` when configured; every other click goes to
        ``on_tag_click`` when configured.

        Raises:
            TagNotFoundError: If no tag has that name.
        """
        tag = self.get_tag(name).tag
        if ctrl:
            self._selection = tag
        elif shift and self._on_tag_shift_click is not None:
            self._on_tag_shift_click(tag)
        elif self._on_tag_click is not None:
            self._on_tag_click(tag)

    # ── Internals ────────────────────────────────────────────────────

    def _wrap(self, tag: Tag) -> ManagedTag:
        payload = self._payload_factory(tag) if self._payload_factory else None
        return ManagedTag(tag, payload)

    def _wrap_all(self, tags: Sequence[Tag] | None) -> list[ManagedTag]:
        return [self._wrap(tag) for tag in tags or ()]

    def _commit(self, tags: list[ManagedTag]) -> None:
        self._tags = tags

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.tags)
