"""Build a colour from 0–255 byte channels.

Three bytes are R G B (alpha 255). Four bytes are read in --order,
rgba (default) or argb.

Example:
    colour-kit encode 255 128 0
    colour-kit encode 128 255 0 0 --order argb
"""

from colour_kit.convert import describe, from_argb_bytes, from_rgb_bytes, from_rgba_bytes
from colour_kit.core.types import Command, Report

command = Command(
    name='encode',
    help='Build a colour from R G B [A] bytes. Print all representations.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('channels', nargs='+', type=int, metavar='BYTE', help='3 or 4 byte channels (0-255)')
    parser.add_argument('-o', '--order', choices=['rgba', 'argb'], default='rgba', help='Order of 4 channels')


@command.run
def run(args, report: Report, settings) -> None:
    channels = args.channels
    if len(channels) == 3:
        color = from_rgb_bytes(*channels)
    elif len(channels) == 4 and args.order == 'argb':
        color = from_argb_bytes(*channels)
    elif len(channels) == 4:
        color = from_rgba_bytes(*channels)
    else:
        raise ValueError(f'expected 3 or 4 byte channels, got {len(channels)}')
    label = ' '.join(str(c) for c in channels)
    report.add(label, describe(color, upper=settings.upper, prefix=settings.prefix))
