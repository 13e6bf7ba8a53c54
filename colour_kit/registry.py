"""Command lookup.

Each non-private module in colour_kit.commands exposes a module-level
`command` (a Command). The module docstring becomes the command's long
help, and its first line the one-line summary shown by `colour-kit help`.
"""

import functools
import importlib
import pkgutil

import colour_kit.commands
from colour_kit.core.types import Command


def _command_modules() -> list[str]:
    prefix = colour_kit.commands.__name__ + '.'
    return sorted(
        info.name
        for info in pkgutil.iter_modules(colour_kit.commands.__path__, prefix)
        if not info.name.rpartition('.')[2].startswith('_')
    )


@functools.cache
def discover() -> dict[str, Command]:
    """Import every command module once and map command names to commands."""
    found: dict[str, Command] = {}
    for modname in _command_modules():
        module = importlib.import_module(modname)
        cmd = getattr(module, 'command', None)
        if not isinstance(cmd, Command):
            continue
        if cmd.name in found:
            raise RuntimeError(f'Command {cmd.name!r} defined twice ({modname})')
        cmd.doc = (module.__doc__ or '').strip()
        found[cmd.name] = cmd
    return found


def get(name: str) -> Command:
    commands = discover()
    try:
        return commands[name]
    except KeyError:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(commands))}') from None


def all_commands() -> dict[str, Command]:
    return discover()
