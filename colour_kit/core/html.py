"""HTML-style colour string parser.

Accepts, case-insensitively and with surrounding whitespace ignored:
  #RGB  #RGBA  #RRGGBB  #RRGGBBAA   (the '#' is optional)
  a colour name from colour_kit.core.palette.NAMED

Short forms duplicate each digit (#f80 == #ff8800). Alpha defaults to ff.
The digit order is always R, G, B, A; callers wanting #AARRGGBB use
parse_argb_string.
"""

import re

from colour_kit.core.palette import resolve_name
from colour_kit.core.types import Color, ColourParseError

_HEX_RE = re.compile(r'#?([0-9a-fA-F]+)')


def _expand(digits: str) -> str | None:
    """Normalise 3/4/6/8 hex digits to 8 (RRGGBBAA). None for any other length."""
    if len(digits) in (3, 4):
        digits = ''.join(c * 2 for c in digits)
    if len(digits) == 6:
        return digits + 'ff'
    if len(digits) == 8:
        return digits
    return None


def _to_color(rrggbbaa: str) -> Color:
    inv = 1.0 / 255.0
    return Color(
        int(rrggbbaa[0:2], 16) * inv,
        int(rrggbbaa[2:4], 16) * inv,
        int(rrggbbaa[4:6], 16) * inv,
        int(rrggbbaa[6:8], 16) * inv,
    )


def try_parse_html_string(text: str) -> Color | None:
    """Parse a hex or named colour. Returns None if the text is not a colour."""
    if not isinstance(text, str):
        return None
    s = text.strip()
    m = _HEX_RE.fullmatch(s)
    if m:
        expanded = _expand(m.group(1))
        if expanded is not None:
            return _to_color(expanded)
        # Without '#', an all-hex word of another length may still be a name
        if s.startswith('#'):
            return None
    named = resolve_name(s)
    if named is not None:
        return _to_color(named[1:] + 'ff')
    return None


def parse_html_string(text: str) -> Color:
    """Parse a hex or named colour, raising ColourParseError on failure."""
    color = try_parse_html_string(text)
    if color is None:
        raise ColourParseError(str(text))
    return color


def parse_argb_string(text: str) -> Color:
    """Parse an #AARRGGBB (or #ARGB) string. Six-digit and named input are read as RGB."""
    s = text.strip() if isinstance(text, str) else ''
    m = _HEX_RE.fullmatch(s)
    if m and len(m.group(1)) in (4, 8):
        expanded = _expand(m.group(1))
        # AARRGGBB -> RRGGBBAA
        return _to_color(expanded[2:] + expanded[:2])
    return parse_html_string(text)
