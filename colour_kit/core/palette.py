"""Named HTML colours and RGB distance helpers.

The names are the set accepted by game-engine HTML colour parsers. Note that
'green' is the HTML #008000, not pure green; use 'lime' for #00ff00.
"""

import math

NAMED: dict[str, str] = {
    'red': '#ff0000',
    'cyan': '#00ffff',
    'blue': '#0000ff',
    'darkblue': '#0000a0',
    'lightblue': '#add8e6',
    'purple': '#800080',
    'yellow': '#ffff00',
    'lime': '#00ff00',
    'fuchsia': '#ff00ff',
    'white': '#ffffff',
    'silver': '#c0c0c0',
    'grey': '#808080',
    'black': '#000000',
    'orange': '#ffa500',
    'brown': '#a52a2a',
    'maroon': '#800000',
    'green': '#008000',
    'olive': '#808000',
    'navy': '#000080',
    'teal': '#008080',
    'aqua': '#00ffff',
    'magenta': '#ff00ff',
}


def _hex_bytes(hex_val: str) -> tuple[int, int, int]:
    h = hex_val.lstrip('#')
    return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))


_NAMED_RGB: dict[str, tuple[int, int, int]] = {name: _hex_bytes(v) for name, v in NAMED.items()}


def resolve_name(name: str) -> str | None:
    """Return the '#rrggbb' value for a colour name, or None if unknown."""
    return NAMED.get(name.strip().lower())


def rgb_distance(a: tuple[int, int, int], b: tuple[int, int, int]) -> float:
    """Euclidean distance between two byte triples."""
    return math.sqrt(sum((int(x) - int(y)) ** 2 for x, y in zip(a, b)))


def nearest_colour(rgb: tuple[int, int, int], threshold: float = 30.0) -> tuple[str | None, float]:
    """Find the nearest named colour.

    Returns (name, distance). Name is None when nothing lies within threshold.
    Aliases (aqua/cyan, fuchsia/magenta) resolve to the first name listed.
    """
    best_name: str | None = None
    best_dist = float('inf')
    for name, ref in _NAMED_RGB.items():
        d = rgb_distance(rgb, ref)
        if d < best_dist:
            best_name, best_dist = name, d
    if best_dist > threshold:
        return None, best_dist
    return best_name, best_dist
