"""colour-kit — conversions between Color, bytes, packed integers and hex strings."""

from colour_kit.convert import (
    alpha_blend,
    describe,
    from_argb,
    from_argb_bytes,
    from_argb_html,
    from_argb_int,
    from_rgb,
    from_rgb_bytes,
    from_rgb_html,
    from_rgb_int,
    from_rgba,
    from_rgba_bytes,
    from_rgba_html,
    from_rgba_int,
    pack,
    parse_value,
    to_argb,
    to_argb_html_string_lower,
    to_argb_html_string_upper,
    to_html_string,
    to_rgb,
    to_rgb_html_string_lower,
    to_rgb_html_string_upper,
    to_rgba,
    to_rgba_html_string_lower,
    to_rgba_html_string_upper,
    unpack,
)
from colour_kit.core.html import parse_html_string, try_parse_html_string
from colour_kit.core.layout import ARGB, LAYOUTS, RGB, RGBA, Layout, get_layout
from colour_kit.core.types import (
    BLACK,
    BLUE,
    CLEAR,
    CYAN,
    GREEN,
    GREY,
    MAGENTA,
    RED,
    WHITE,
    YELLOW,
    Color,
    ColourParseError,
)

__version__ = '0.1.0'

__all__ = [
    'ARGB',
    'BLACK',
    'BLUE',
    'CLEAR',
    'CYAN',
    'GREEN',
    'GREY',
    'LAYOUTS',
    'MAGENTA',
    'RED',
    'RGB',
    'RGBA',
    'WHITE',
    'YELLOW',
    'Color',
    'ColourParseError',
    'Layout',
    'alpha_blend',
    'describe',
    'from_argb',
    'from_argb_bytes',
    'from_argb_html',
    'from_argb_int',
    'from_rgb',
    'from_rgb_bytes',
    'from_rgb_html',
    'from_rgb_int',
    'from_rgba',
    'from_rgba_bytes',
    'from_rgba_html',
    'from_rgba_int',
    'get_layout',
    'pack',
    'parse_html_string',
    'parse_value',
    'to_argb',
    'to_argb_html_string_lower',
    'to_argb_html_string_upper',
    'to_html_string',
    'to_rgb',
    'to_rgb_html_string_lower',
    'to_rgb_html_string_upper',
    'to_rgba',
    'to_rgba_html_string_lower',
    'to_rgba_html_string_upper',
    'try_parse_html_string',
    'unpack',
]
