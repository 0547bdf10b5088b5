"""NiceGUI pages and widgets for tagpalette.

Import this module to register the demo page route with NiceGUI.
"""

from tagpalette.pages import demo
from tagpalette.pages.tags_input import TagsInput

__all__ = ["TagsInput", "demo"]

# Touch the module to prevent linter from removing the "unused" import.
# It registers an @ui.page decorator as a side effect.
_PAGES = (demo,)
