"""Render colours as a horizontal strip of square swatches and save as PNG.

Each VALUE becomes one --size x --size square, left to right, saved to
<out_dir>/swatch.png (RGBA, so translucent colours keep their alpha).
Channels outside [0, 1] are clipped when written to the image.

Example:
    colour-kit swatch ./tmp '#ff8000' navy 0x80FF0000 --size 32
"""

import os

import numpy as np
from PIL import Image

from colour_kit.batch import to_image_array
from colour_kit.convert import describe, parse_value
from colour_kit.core.types import Command, Report

command = Command(
    name='swatch',
    help='Render colours as a PNG strip of square swatches.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('out_dir', help='Directory for swatch.png')
    parser.add_argument('values', nargs='+', metavar='VALUE', help='Colours to render')
    parser.add_argument('--size', type=int, default=64, metavar='PX', help='Swatch edge in pixels (default 64)')


def render(channels: np.ndarray, size: int) -> Image.Image:
    """(N, 4) float channels -> RGBA image of N squares."""
    if size < 1:
        raise ValueError(f'--size must be positive, got {size}')
    strip = to_image_array(channels)[np.newaxis, :, :]  # (1, N, 4)
    arr = np.repeat(np.repeat(strip, size, axis=0), size, axis=1)
    return Image.fromarray(arr)


@command.run
def run(args, report: Report, settings) -> None:
    colors = [parse_value(v) for v in args.values]
    image = render(np.array([c.as_tuple() for c in colors]), args.size)

    os.makedirs(args.out_dir, exist_ok=True)
    path = os.path.join(args.out_dir, 'swatch.png')
    image.save(path)

    for value, color in zip(args.values, colors):
        report.add(value, describe(color, upper=settings.upper, prefix=settings.prefix))
    report.note('file', path)
    report.note('size', f'{image.width}x{image.height}')
