"""Command discovery.

Each module in hexcolour/commands/ that defines a module-level `command`
(a Command instance) becomes a CLI subcommand under that command's name.
Modules starting with an underscore are ignored.

pkgutil finds nothing inside frozen binaries, so the known module names
below are imported instead when the scan comes back empty.
"""

import importlib
import pkgutil

from hexcolour.core.types import Command

_KNOWN_MODULES = ('compose', 'decompose', 'palette', 'sample', 'shade', 'swatch', 'tint')

_commands: dict[str, Command] = {}


def _module_names() -> list[str]:
    import hexcolour.commands as pkg

    names = [info.name for info in pkgutil.iter_modules(pkg.__path__) if not info.name.startswith('_')]
    return names or list(_KNOWN_MODULES)


def discover() -> dict[str, Command]:
    """Import every command module once and return name -> Command."""
    if _commands:
        return _commands

    for modname in _module_names():
        cmd = getattr(importlib.import_module(f'hexcolour.commands.{modname}'), 'command', None)
        if not isinstance(cmd, Command):
            continue
        if cmd.name in _commands:
            raise RuntimeError(f'Command name {cmd.name!r} registered twice (second in {modname})')
        _commands[cmd.name] = cmd
    return _commands


def get(name: str) -> Command:
    """Look up one command; KeyError lists what is available."""
    commands = discover()
    try:
        return commands[name]
    except KeyError:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(commands))}') from None


def all_commands() -> dict[str, Command]:
    return discover()
