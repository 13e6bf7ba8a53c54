"""Conversions between Color and bytes, packed integers and hex strings.

Constructors:
    from_rgb(0xFF8000)          -> Color(1.0, 0.50196, 0.0, 1.0)
    from_rgba(0xFF8000FF)       -> Color(1.0, 0.50196, 0.0, 1.0)
    from_argb(0xFFFF8000)       -> Color(1.0, 0.50196, 0.0, 1.0)
    from_rgb(255, 128, 0)       -> Color(1.0, 0.50196, 0.0, 1.0)
    from_rgb('#FF8000')         -> Color(1.0, 0.50196, 0.0, 1.0)

Serializers:
    to_rgb(RED)                      -> 0xFF0000
    to_rgb_html_string_lower(RED)    -> 'ff0000'
    to_argb_html_string_upper(RED)   -> 'FFFF0000'

Channels are scaled by 1/255 on the way in and rounded half-to-even on the
way out. Nothing is clamped: out-of-range channels produce out-of-range
bytes that are still shifted into the packed integer.
"""

from __future__ import annotations

import math
import re

from colour_kit.core.html import parse_argb_string, parse_html_string
from colour_kit.core.layout import ARGB, RGB, RGBA, Layout, get_layout
from colour_kit.core.palette import nearest_colour
from colour_kit.core.types import Color, ColourParseError

_INV = 1.0 / 255.0
_UINT64 = (1 << 64) - 1
_MISSING = object()
_DECIMAL_RE = re.compile(r'[0-9]+')


# -- bytes ------------------------------------------------------------------


def _check_byte(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f'{name} must be an int in 0..255, got {value!r}')
    return value


def from_rgb_bytes(r: int, g: int, b: int) -> Color:
    """Color from 0–255 channels. Alpha is 1.0."""
    return Color(_check_byte('r', r) * _INV, _check_byte('g', g) * _INV, _check_byte('b', b) * _INV, 1.0)


def from_rgba_bytes(r: int, g: int, b: int, a: int) -> Color:
    return Color(
        _check_byte('r', r) * _INV,
        _check_byte('g', g) * _INV,
        _check_byte('b', b) * _INV,
        _check_byte('a', a) * _INV,
    )


def from_argb_bytes(a: int, r: int, g: int, b: int) -> Color:
    return from_rgba_bytes(r, g, b, a)


# -- packed integers --------------------------------------------------------


def unpack(value: int, layout: str | Layout) -> Color:
    """Decode a packed integer with the given layout. Higher bits are ignored."""
    layout = get_layout(layout)
    channels = {'a': 1.0}
    for ch, shift in layout.shifts.items():
        channels[ch] = _INV * ((value >> shift) & 0xFF)
    return Color(channels['r'], channels['g'], channels['b'], channels['a'])


def pack(color: Color, layout: str | Layout) -> int:
    """Encode a colour as a packed integer with the given layout.

    Each channel is round(channel * 255). Out-of-range bytes are OR-ed in
    unmasked, so the result for channels outside [0, 1] is undefined.
    A NaN or infinite channel raises ValueError.
    """
    layout = get_layout(layout)
    value = 0
    for ch, shift in layout.shifts.items():
        channel = getattr(color, ch)
        if not math.isfinite(channel):
            raise ValueError(f'channel {ch} is not finite: {channel!r}')
        value |= round(channel * 255) << shift
    return value


def from_rgb_int(value: int) -> Color:
    """Color from 0xRRGGBB. Alpha is 1.0."""
    return unpack(value, RGB)


def from_rgba_int(value: int) -> Color:
    """Color from 0xRRGGBBAA."""
    return unpack(value, RGBA)


def from_argb_int(value: int) -> Color:
    """Color from 0xAARRGGBB."""
    return unpack(value, ARGB)


def to_rgb(color: Color) -> int:
    return pack(color, RGB)


def to_rgba(color: Color) -> int:
    return pack(color, RGBA)


def to_argb(color: Color) -> int:
    return pack(color, ARGB)


# -- strings ----------------------------------------------------------------


def from_rgb_html(text: str, default: Color | object = _MISSING) -> Color:
    """Color from '#RRGGBB' (or any form colour_kit.core.html accepts).

    Raises ColourParseError on malformed input unless a default is given.
    """
    try:
        return parse_html_string(text)
    except ColourParseError:
        if default is _MISSING:
            raise
        return default  # type: ignore[return-value]


def from_rgba_html(text: str, default: Color | object = _MISSING) -> Color:
    """Color from '#RRGGBBAA'. Same rules as from_rgb_html."""
    return from_rgb_html(text, default=default)


def from_argb_html(text: str, default: Color | object = _MISSING) -> Color:
    """Color from '#AARRGGBB'."""
    try:
        return parse_argb_string(text)
    except ColourParseError:
        if default is _MISSING:
            raise
        return default  # type: ignore[return-value]


def to_html_string(color: Color, layout: str | Layout = RGB, upper: bool = False, prefix: bool = False) -> str:
    """Format the packed value as zero-padded hex.

    Negative packed values (only reachable from out-of-range channels) are
    shown as 64-bit two's complement.
    """
    layout = get_layout(layout)
    value = pack(color, layout)
    if value < 0:
        value &= _UINT64
    text = f'{value:0{layout.digits}{"X" if upper else "x"}}'
    return f'#{text}' if prefix else text


def to_rgb_html_string_lower(color: Color) -> str:
    return to_html_string(color, RGB)


def to_rgba_html_string_lower(color: Color) -> str:
    return to_html_string(color, RGBA)


def to_argb_html_string_lower(color: Color) -> str:
    return to_html_string(color, ARGB)


def to_rgb_html_string_upper(color: Color) -> str:
    return to_html_string(color, RGB, upper=True)


def to_rgba_html_string_upper(color: Color) -> str:
    return to_html_string(color, RGBA, upper=True)


def to_argb_html_string_upper(color: Color) -> str:
    return to_html_string(color, ARGB, upper=True)


# -- dispatching constructors -----------------------------------------------


def _dispatch(layout: Layout, args: tuple) -> Color:
    if len(args) == 1:
        (value,) = args
        if isinstance(value, str):
            return from_argb_html(value) if layout is ARGB else from_rgb_html(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return unpack(value, layout)
    elif len(args) == len(layout.channels) and all(isinstance(v, int) for v in args):
        channels = dict(zip(layout.channels, args))
        if layout is RGB:
            return from_rgb_bytes(channels['r'], channels['g'], channels['b'])
        return from_rgba_bytes(channels['r'], channels['g'], channels['b'], channels['a'])
    names = ', '.join(layout.channels)
    raise TypeError(f'from_{layout.name}() takes ({names}) bytes, a packed int or a hex string; got {args!r}')


def from_rgb(*args: int | str) -> Color:
    """from_rgb(r, g, b) | from_rgb(0xRRGGBB) | from_rgb('#RRGGBB')."""
    return _dispatch(RGB, args)


def from_rgba(*args: int | str) -> Color:
    """from_rgba(r, g, b, a) | from_rgba(0xRRGGBBAA) | from_rgba('#RRGGBBAA')."""
    return _dispatch(RGBA, args)


def from_argb(*args: int | str) -> Color:
    """from_argb(a, r, g, b) | from_argb(0xAARRGGBB) | from_argb('#AARRGGBB')."""
    return _dispatch(ARGB, args)


# -- blending ---------------------------------------------------------------


def alpha_blend(background: Color, overlap: Color, alpha: float) -> Color:
    """Linear interpolation background -> overlap, all four channels, unclamped."""
    return background + (overlap - background) * alpha


# -- reporting --------------------------------------------------------------


def describe(color: Color, upper: bool = False, prefix: bool = False) -> dict:
    """Every representation of a colour, as a JSON-ready dict."""
    r, g, b, a = color.as_bytes()
    name, dist = nearest_colour((r, g, b), threshold=math.inf)
    return {
        'channels': list(color.as_tuple()),
        'bytes': [r, g, b, a],
        'packed': {layout.name: pack(color, layout) for layout in (RGB, RGBA, ARGB)},
        'hex': {
            layout.name: to_html_string(color, layout, upper=upper, prefix=prefix) for layout in (RGB, RGBA, ARGB)
        },
        'nearest': name,
        'nearest_distance': round(dist, 1),
    }


def parse_value(text: str, layout: str | Layout = RGB) -> Color:
    """Parse command-line style input.

    Rules, in order:
      '0x'-prefixed text   packed integer in hex, decoded with layout
      all decimal digits   packed integer in decimal, decoded with layout
      anything else        HTML parser ('#AARRGGBB' when layout is argb)

    A hex colour made only of digits, such as 808080, therefore needs its '#'.
    """
    layout = get_layout(layout)
    s = text.strip()
    if s[:2].lower() == '0x':
        try:
            return unpack(int(s, 16), layout)
        except ValueError:
            raise ColourParseError(text, 'not a hex integer') from None
    if _DECIMAL_RE.fullmatch(s):
        return unpack(int(s), layout)
    if layout is ARGB:
        return parse_argb_string(s)
    return parse_html_string(s)
