"""Tests for the package's public interface, entry point and logging setup."""

from __future__ import annotations

import inspect
import logging
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

import pytest

import tagpalette

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


class TestPublicInterface:
    """Names re-exported from the package root."""

    def test_exports(self) -> None:
        """Core types are importable from tagpalette."""
        for name in ("Tag", "TagCollectionManager", "TagNotFoundError", "KeyCodes"):
            assert hasattr(tagpalette, name)

    def test_version(self) -> None:
        """A version string is set."""
        assert tagpalette.__version__ == "0.1.0"

    def test_main_debug_defaults_off(self) -> None:
        """main() works as a console script; debug is opt-in."""
        params = inspect.signature(tagpalette.main).parameters
        assert list(params) == ["debug"]
        assert params["debug"].default is False


@pytest.fixture
def root_logger(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point the log dir at tmp_path and restore root handlers afterwards."""
    monkeypatch.setenv("APP__LOG_DIR", str(tmp_path))
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class TestSetupLogging:
    """One file handler and one console handler per setup."""

    def _added(self, before: list[logging.Handler]) -> list[logging.Handler]:
        return [h for h in logging.getLogger().handlers if h not in before]

    def test_default_console_level_info(
        self, root_logger: None, tmp_path: Path
    ) -> None:
        """The console logs INFO by default; the file logs DEBUG under log_dir."""
        before = list(logging.getLogger().handlers)
        tagpalette._setup_logging()

        added = self._added(before)
        files = [h for h in added if isinstance(h, RotatingFileHandler)]
        consoles = [h for h in added if not isinstance(h, RotatingFileHandler)]
        assert len(files) == 1
        assert len(consoles) == 1
        assert files[0].level == logging.DEBUG
        assert consoles[0].level == logging.INFO
        assert list(tmp_path.glob("tagpalette.*.log"))

    def test_debug_console_level(self, root_logger: None) -> None:
        """Debug runs lower the single console handler instead of adding one."""
        before = list(logging.getLogger().handlers)
        tagpalette._setup_logging(logging.DEBUG)

        consoles = [
            h
            for h in self._added(before)
            if not isinstance(h, RotatingFileHandler)
        ]
        assert [h.level for h in consoles] == [logging.DEBUG]
