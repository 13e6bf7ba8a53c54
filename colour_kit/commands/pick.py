"""Read one pixel from an image and print every representation of it.

The image is converted to RGBA first, so palette and greyscale images work
and opaque formats report alpha 255.

Example:
    colour-kit pick screenshot.png 10 20
"""

import os

import numpy as np
from PIL import Image

from colour_kit.batch import from_image_array
from colour_kit.convert import describe
from colour_kit.core.types import Color, Command, Report

command = Command(
    name='pick',
    help='Read the pixel at X Y from an image.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('image', help='Path to PNG/JPG')
    parser.add_argument('x', type=int, help='Column')
    parser.add_argument('y', type=int, help='Row')


@command.run
def run(args, report: Report, settings) -> None:
    if not os.path.isfile(args.image):
        raise FileNotFoundError(f'image not found: {args.image}')

    with Image.open(args.image) as img:
        arr = np.array(img.convert('RGBA'))
    h, w = arr.shape[:2]
    if not (0 <= args.x < w and 0 <= args.y < h):
        raise ValueError(f'pixel ({args.x}, {args.y}) outside image {w}x{h}')

    channels = from_image_array(arr[args.y : args.y + 1, args.x : args.x + 1])[0, 0]
    color = Color(*(float(c) for c in channels))
    report.add(f'{args.x},{args.y}', describe(color, upper=settings.upper, prefix=settings.prefix))
    report.note('image', f'{args.image} ({w}x{h})')
