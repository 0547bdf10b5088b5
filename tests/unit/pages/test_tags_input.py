"""Unit tests for the NiceGUI tags input helpers.

Full widget interaction needs a browser; these tests cover the pure
helpers the widget relies on (entry splitting, chip text colour, click
modifiers, drag state) and the module structure.
"""

from __future__ import annotations

import inspect

import pytest

from tagpalette.models import Tag, TagClick
from tagpalette.pages.tags_input import (
    DragState,
    TagsInput,
    click_from_args,
    split_entries,
    text_colour_for,
)


class TestSplitEntries:
    """Comma-delimited input becomes finished names plus a remainder."""

    def test_no_comma(self) -> None:
        """Text without a comma is all remainder."""
        assert split_entries("draft") == ([], "draft")

    def test_trailing_comma(self) -> None:
        """A trailing comma finishes the entry and empties the input."""
        assert split_entries("Jurisdiction,") == (["Jurisdiction"], "")

    def test_multiple_entries_trimmed(self) -> None:
        """Pasted lists split into trimmed names."""
        assert split_entries(" a , b,c") == (["a", "b"], "c")

    def test_blank_entries_dropped(self) -> None:
        """Consecutive commas do not create empty tags."""
        assert split_entries("a,, ,b,") == (["a", "b"], "")

    def test_remainder_kept_verbatim(self) -> None:
        """The unfinished text is left exactly as typed."""
        assert split_entries("a, part") == (["a"], " part")


class TestTextColourFor:
    """Chip text colour contrasts with the chip background."""

    @pytest.mark.parametrize(
        ("background", "expected"),
        [
            ("#ffffff", "black"),
            ("#FFF", "black"),
            ("#ffff00", "black"),
            ("#000000", "white"),
            ("#1f77b4", "white"),
            ("#d62728", "white"),
        ],
    )
    def test_hex_colours(self, background: str, expected: str) -> None:
        """Light backgrounds get black text, dark ones white."""
        assert text_colour_for(background) == expected

    @pytest.mark.parametrize("background", ["red", "primary", "#12", "#gggggg"])
    def test_non_hex_gets_white(self, background: str) -> None:
        """Named or malformed colours fall back to white text."""
        assert text_colour_for(background) == "white"


class TestClickFromArgs:
    """Modifier keys are read from event args."""

    def test_plain_click(self) -> None:
        """No modifiers set."""
        click = click_from_args("A", {"ctrlKey": False, "shiftKey": False})
        assert click == TagClick("A")

    def test_ctrl_and_shift(self) -> None:
        """Both modifiers are read."""
        click = click_from_args("A", {"ctrlKey": True, "shiftKey": True})
        assert click.ctrl is True
        assert click.shift is True

    def test_missing_keys(self) -> None:
        """Absent modifier keys count as not pressed."""
        assert click_from_args("A", {}) == TagClick("A")

    def test_non_dict_args(self) -> None:
        """Events without a dict payload are plain clicks."""
        assert click_from_args("A", None) == TagClick("A")


class TestDragState:
    """Per-widget drag tracking."""

    def test_initial_state_is_none(self) -> None:
        """A fresh drag state has nothing dragged."""
        assert DragState().get_dragged() is None

    def test_tracks_tag_and_index(self) -> None:
        """dragstart records the tag and where it came from."""
        state = DragState()
        state.set_dragged(Tag("A", "red"), 2)
        assert state.get_dragged() == (Tag("A", "red"), 2)

    def test_clear(self) -> None:
        """Clearing after a drop forgets the tag."""
        state = DragState()
        state.set_dragged(Tag("A", "red"), 0)
        state.clear()
        assert state.get_dragged() is None

    def test_independent_instances(self) -> None:
        """Two widgets do not share drag state."""
        first, second = DragState(), DragState()
        first.set_dragged(Tag("A", "red"), 0)
        assert second.get_dragged() is None


class TestTagsInputStructure:
    """Module structure of the widget."""

    def test_import_from_pages(self) -> None:
        """TagsInput is exported from the pages package."""
        from tagpalette.pages import TagsInput as exported

        assert exported is TagsInput

    def test_accepts_callbacks(self) -> None:
        """The constructor takes the click callbacks as keyword arguments."""
        params = inspect.signature(TagsInput).parameters
        assert params["on_tag_click"].kind is inspect.Parameter.KEYWORD_ONLY
        assert params["on_tag_shift_click"].default is None
        assert list(params)[:2] == ["tags", "on_change"]

    def test_empty_palette_rejected(self) -> None:
        """An explicitly empty palette is an error, not a cue to use the default."""
        with pytest.raises(ValueError, match="at least one colour"):
            TagsInput([], lambda tags: None, palette=[])
