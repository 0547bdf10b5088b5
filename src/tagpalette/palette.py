"""Colour palette loading and the rotating colour cursor.

New tags take the colour under the cursor, and the cursor then moves one
step along the palette. The starting position is random so that sessions do
not all begin with the same colour.
"""

from __future__ import annotations

import json
import logging
import random
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_PALETTE: tuple[str, ...] = (
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
    "#e377c2",
    "#7f7f7f",
    "#bcbd22",
    "#17becf",
)


def validate_palette(colors: Sequence[str]) -> tuple[str, ...]:
    """Return ``colors`` as an immutable tuple, rejecting empty or bad entries.

    Raises:
        ValueError: If the palette is empty or contains a non-string or
            blank colour.
    """
    palette = tuple(colors)
    if not palette:
        msg = "Palette must contain at least one colour"
        raise ValueError(msg)
    for color in palette:
        if not isinstance(color, str) or not color.strip():
            msg = f"Invalid palette colour: {color!r}"
            raise ValueError(msg)
    return palette


def load_palette(path: Path) -> tuple[str, ...]:
    """Load an ordered palette from a JSON file holding an array of strings.

    Raises:
        ValueError: If the file is not a JSON array of colour strings.
        OSError: If the file cannot be read.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        msg = f"Palette file {path} is not valid JSON: {exc}"
        raise ValueError(msg) from exc

    if not isinstance(data, list):
        msg = f"Palette file {path} must contain a JSON array"
        raise ValueError(msg)

    palette = validate_palette(data)
    logger.info("Loaded %d palette colours from %s", len(palette), path)
    return palette


class ColorCursor:
    """Index into a fixed palette, advanced once per newly created tag."""

    __slots__ = ("_index", "_palette")

    def __init__(
        self,
        palette: Sequence[str],
        start: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._palette = validate_palette(palette)
        if start is None:
            start = (rng or random).randrange(len(self._palette))
        elif not 0 <= start < len(self._palette):
            msg = f"Cursor start {start} outside palette of {len(self._palette)}"
            raise ValueError(msg)
        self._index = start

    @property
    def palette(self) -> tuple[str, ...]:
        return self._palette

    @property
    def index(self) -> int:
        return self._index

    @property
    def color(self) -> str:
        """Colour the next new tag will receive."""
        return self._palette[self._index]

    def advance(self) -> None:
        self._index = (self._index + 1) % len(self._palette)
