"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest

from tagpalette.manager import TagCollectionManager
from tagpalette.models import Tag

# Small palette used by the worked scenarios
RGB_PALETTE: tuple[str, ...] = ("red", "blue", "green")


class ChangeRecorder:
    """Callable on_change observer that keeps every reported tag list."""

    def __init__(self) -> None:
        self.calls: list[list[Tag]] = []

    def __call__(self, tags: list[Tag]) -> None:
        self.calls.append(tags)

    @property
    def last(self) -> list[Tag]:
        return self.calls[-1]


@pytest.fixture
def recorder() -> ChangeRecorder:
    return ChangeRecorder()


@pytest.fixture
def make_manager(recorder: ChangeRecorder):
    """Factory building a manager over RGB_PALETTE with the cursor at 0.

    Changes go to ``recorder`` unless an ``on_change`` is passed.
    """

    def _make(
        tags: list[Tag] | None = None,
        *,
        palette: tuple[str, ...] = RGB_PALETTE,
        start_index: int = 0,
        **kwargs,
    ) -> TagCollectionManager:
        return TagCollectionManager(
            tags,
            palette,
            on_change=kwargs.pop("on_change", recorder),
            start_index=start_index,
            **kwargs,
        )

    return _make


def names(tags: list[Tag]) -> list[str]:
    return [tag.name for tag in tags]
