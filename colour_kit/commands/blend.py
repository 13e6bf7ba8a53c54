"""Alpha-blend an overlap colour onto a background.

result = background + (overlap - background) * alpha, per channel including
alpha. Neither alpha nor the result is clamped.

With --steps N, prints N evenly spaced blends from alpha 0 up to ALPHA.

Example:
    colour-kit blend black white 0.5
    colour-kit blend '#102030' '#ff8000' 1.0 --steps 5
"""

from colour_kit.convert import alpha_blend, describe, parse_value
from colour_kit.core.types import Command, Report

command = Command(
    name='blend',
    help='Alpha-blend OVERLAP onto BACKGROUND by ALPHA.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('background', help='Background colour')
    parser.add_argument('overlap', help='Overlap colour')
    parser.add_argument('alpha', type=float, help='Blend factor (not clamped)')
    parser.add_argument('-s', '--steps', type=int, default=None, metavar='N', help='Emit N blends from 0 to ALPHA')


@command.run
def run(args, report: Report, settings) -> None:
    background = parse_value(args.background)
    overlap = parse_value(args.overlap)

    if args.steps is None:
        alphas = [args.alpha]
    elif args.steps < 2:
        raise ValueError(f'--steps must be at least 2, got {args.steps}')
    else:
        alphas = [args.alpha * i / (args.steps - 1) for i in range(args.steps)]

    for alpha in alphas:
        color = alpha_blend(background, overlap, alpha)
        report.add(f'alpha={alpha:g}', describe(color, upper=settings.upper, prefix=settings.prefix))
