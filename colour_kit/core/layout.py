"""Packed channel layouts: which byte of an integer holds which channel.

The first channel in a layout occupies the most significant byte:

    RGB   0xRRGGBB     24 bits, alpha implied 1.0
    RGBA  0xRRGGBBAA   32 bits
    ARGB  0xAARRGGBB   32 bits

Bits above the layout width are ignored when unpacking.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Layout:
    name: str
    channels: tuple[str, ...]  # most significant byte first
    digits: int  # hex digits when formatted

    @property
    def shifts(self) -> dict[str, int]:
        """Bit offset of each channel's byte, e.g. {'r': 16, 'g': 8, 'b': 0}."""
        last = len(self.channels) - 1
        return {ch: 8 * (last - i) for i, ch in enumerate(self.channels)}

    @property
    def has_alpha(self) -> bool:
        return 'a' in self.channels


RGB = Layout(name='rgb', channels=('r', 'g', 'b'), digits=6)
RGBA = Layout(name='rgba', channels=('r', 'g', 'b', 'a'), digits=8)
ARGB = Layout(name='argb', channels=('a', 'r', 'g', 'b'), digits=8)

LAYOUTS: dict[str, Layout] = {layout.name: layout for layout in (RGB, RGBA, ARGB)}


def get_layout(name: str | Layout) -> Layout:
    """Look up a layout by name (case-insensitive). Layout instances pass through."""
    if isinstance(name, Layout):
        return name
    key = name.lower()
    if key not in LAYOUTS:
        raise KeyError(f'Unknown layout: {name}. Available: {", ".join(sorted(LAYOUTS))}')
    return LAYOUTS[key]
