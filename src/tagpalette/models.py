"""Plain data types shared by the tag collection manager and its widget.

``Tag`` is the record callers see and receive in change notifications.
``ManagedTag`` pairs a Tag with whatever the presentation layer needs to
render it; the payload never takes part in equality.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class TagNotFoundError(LookupError):
    """Raised when a tag name is looked up that is not in the collection.

    Callers only ever look up names they have just displayed, so this
    signals a bug in the caller rather than bad user input.
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"No tag by name: {name}")
        self.name = name


class KeyCodes(IntEnum):
    """Key codes the tag text input reacts to."""

    BACKSPACE = 8
    ENTER = 13
    COMMA = 188


# Keys that end the current entry and create a new tag.
DELIMITERS: tuple[KeyCodes, ...] = (KeyCodes.COMMA, KeyCodes.ENTER)


@dataclass(frozen=True, slots=True)
class Tag:
    """A named, coloured tag.

    Attributes:
        name: Display name, unique within a collection (e.g. "Jurisdiction").
        color: Palette colour identifier (e.g. "#1f77b4").
    """

    name: str
    color: str


@dataclass(frozen=True, slots=True)
class ManagedTag:
    """A Tag as held by the manager, with an opaque render payload."""

    tag: Tag
    payload: Any = field(default=None, compare=False, repr=False)

    @property
    def name(self) -> str:
        return self.tag.name

    @property
    def color(self) -> str:
        return self.tag.color


@dataclass(frozen=True, slots=True)
class TagClick:
    """Modifier state of a click on a rendered tag."""

    name: str
    ctrl: bool = False
    shift: bool = False
