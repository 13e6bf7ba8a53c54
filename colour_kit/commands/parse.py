"""Parse a colour value and print every representation of it.

VALUE may be:
  - a packed integer, decoded with --layout (default rgb): hex with a 0x
    prefix, or plain decimal digits (16744448 is 0xFF8000)
  - a hex string: #RGB, #RGBA, #RRGGBB, #RRGGBBAA
  - a colour name: red, orange, darkblue, ...

The '#' may be dropped from hex strings that contain a letter (ff8000).
Digit-only hex such as #808080 keeps its '#', since 808080 is decimal.

With --layout argb, hex strings are read as #AARRGGBB.

Example:
    colour-kit parse '#FF8000'
    colour-kit parse 0xFFFF8000 --layout argb
    colour-kit parse 16744448
    colour-kit --json parse orange
"""

from colour_kit.convert import describe, parse_value
from colour_kit.core.layout import LAYOUTS
from colour_kit.core.types import Command, Report

command = Command(
    name='parse',
    help='Parse a hex string, colour name or packed integer. Print all representations.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('values', nargs='+', metavar='VALUE', help='Colour value(s) to parse')
    parser.add_argument('-l', '--layout', choices=sorted(LAYOUTS), default='rgb', help='Layout for packed integers')


@command.run
def run(args, report: Report, settings) -> None:
    for value in args.values:
        color = parse_value(value, args.layout)
        report.add(value, describe(color, upper=settings.upper, prefix=settings.prefix))
