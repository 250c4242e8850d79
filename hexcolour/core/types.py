"""Shared types for hexcolour: Colour, Command, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

# Normalized (r, g, b, a), each in [0.0, 1.0]
RGBA = tuple[float, float, float, float]

# Colour-space model tags
RGB = 'rgb'
MONOCHROME = 'monochrome'


@dataclass(frozen=True)
class Colour:
    """A colour descriptor: a colour-space model tag and its raw components.

    RGB components are (r, g, b, a); monochrome components are (gray, a).
    Other models carry whatever components they have and cannot be packed.
    """

    model: str
    components: tuple[float, ...]

    @classmethod
    def from_rgba(cls, rgba: RGBA) -> Colour:
        return cls(RGB, tuple(rgba))


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='tint', help='Mix colours toward white')

        @command.run
        def run(args, report):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, args: Any, report: Report) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(args, report)


@dataclass
class Report:
    """Accumulates per-colour results for text/JSON output."""

    command: str = ''
    entries: dict[str, dict[str, Any]] = field(default_factory=dict)
    unrepresentable: int = 0

    def add(self, label: str, data: dict[str, Any]) -> None:
        """Add (or merge) results for one input colour."""
        if label not in self.entries:
            self.entries[label] = {}
        self.entries[label].update(data)

    def record_unrepresentable(self, label: str) -> None:
        self.unrepresentable += 1
        self.add(label, {'representable': False})
