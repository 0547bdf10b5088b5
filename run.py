#!/usr/bin/env python
"""Launch the tagpalette demo page with debug logging and hot reload."""

from tagpalette import main

if __name__ in {"__main__", "__mp_main__"}:
    main(debug=True)
