"""List the colour names the parser understands, with their hex values.

Example:
    colour-kit names
    colour-kit --json names
"""

from colour_kit.convert import describe, parse_value
from colour_kit.core.palette import NAMED
from colour_kit.core.types import Command, Report

command = Command(
    name='names',
    help='List known colour names.',
)


@command.run
def run(args, report: Report, settings) -> None:
    for name in sorted(NAMED):
        report.add(name, describe(parse_value(name), upper=settings.upper, prefix=settings.prefix))
