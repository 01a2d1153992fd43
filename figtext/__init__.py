"""
figtext - render text as FIGlet banners

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import sys as _sys
assert _sys.version_info >= (3, 9)

from .constants import VERSION as __version__
from .magic import FormatError, NotFoundError
from .chars import decode_char
from .font import FontInfo, load_flf
from .controls import load_flc, parse_flc
from .renderer import render, render_text, transform
from .storage import (
    load_font, load_controls, load_control_chain,
    list_fonts, list_controls, find_file,
)
