"""colour-kit — Convert colours between bytes, packed integers and hex strings.

Usage: colour-kit [--json] [--upper] [--prefix] <command> [args]

Commands are auto-discovered from colour_kit/commands/.
Each command module's docstring is its documentation.
Run `colour-kit help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, colour-kit looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
  Command-line flags override COLOUR_KIT_* settings.
"""

import argparse
import dataclasses
import sys

from colour_kit import registry
from colour_kit.core.env import load_env, load_settings
from colour_kit.core.report import format_json, format_text
from colour_kit.core.types import Report


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  colour-kit parse '#FF8000'\n"
        '  colour-kit parse 0xFFFF8000 --layout argb\n'
        '  colour-kit parse 16744448\n'
        '  colour-kit encode 255 128 0\n'
        '  colour-kit blend black white 0.5\n'
        "  colour-kit swatch ./tmp '#ff8000' navy\n"
        '  colour-kit pick screenshot.png 10 20\n'
        '  colour-kit --json --upper parse orange\n'
        '  colour-kit help parse\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  COLOUR_KIT_HEX_CASE=lower|upper\n'
        '  COLOUR_KIT_OUTPUT=text|json\n'
        '  COLOUR_KIT_PREFIX=1\n'
    )
    parser = argparse.ArgumentParser(
        prog='colour-kit',
        description='Convert colours between bytes, packed integers and hex strings.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    parser.add_argument('-u', '--upper', action='store_true', help='Uppercase hex digits')
    parser.add_argument('-p', '--prefix', action='store_true', help="Prefix hex strings with '#'")
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=cmd.summary)
        cmd.add_arguments(p)

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<8} {cmd.summary}')
        print('\nRun: colour-kit help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = commands[topic].doc
    print(doc if doc else f'(No module docs for {topic!r})')


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before reading settings — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'colour-kit: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    settings = load_settings()
    settings = dataclasses.replace(
        settings,
        upper=settings.upper or args.upper,
        prefix=settings.prefix or args.prefix,
        output='json' if args.json else settings.output,
    )

    report = Report(command=args.command)
    try:
        registry.get(args.command).execute(args, report, settings)
    except (ValueError, OSError) as e:
        # ColourParseError is a ValueError
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    if settings.output == 'json':
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
