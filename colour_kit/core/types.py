"""Shared types for colour-kit: Color, ColourParseError, Command, Report."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field, replace
from typing import Any


class ColourParseError(ValueError):
    """Raised when a string cannot be parsed as a colour."""

    def __init__(self, text: str, reason: str = 'not a hex colour or known colour name'):
        self.text = text
        self.reason = reason
        super().__init__(f'Cannot parse colour {text!r}: {reason}')


@dataclass(frozen=True)
class Color:
    """An RGBA colour with float channels, nominally in [0.0, 1.0].

    Arithmetic is component-wise over all four channels and never clamps,
    so intermediate values outside [0, 1] survive blending and scaling.
    """

    r: float
    g: float
    b: float
    a: float = 1.0

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b, self.a + other.a)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r - other.r, self.g - other.g, self.b - other.b, self.a - other.a)

    def __mul__(self, other: Color | float) -> Color:
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b, self.a * other.a)
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other, self.a * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: float) -> Color:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Color(self.r / other, self.g / other, self.b / other, self.a / other)

    def __iter__(self) -> Iterator[float]:
        return iter((self.r, self.g, self.b, self.a))

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def as_bytes(self) -> tuple[int, int, int, int]:
        """Channels scaled to 0–255 with half-to-even rounding. Not clamped.

        Raises ValueError if any channel is NaN or infinite.
        """
        if not all(math.isfinite(c) for c in self):
            raise ValueError(f'cannot convert non-finite channels to bytes: {self!r}')
        return (round(self.r * 255), round(self.g * 255), round(self.b * 255), round(self.a * 255))

    def with_alpha(self, a: float) -> Color:
        return replace(self, a=a)

    def approx_equal(self, other: Color, tol: float = 1e-6) -> bool:
        return all(math.isclose(x, y, abs_tol=tol) for x, y in zip(self, other))


BLACK = Color(0.0, 0.0, 0.0, 1.0)
WHITE = Color(1.0, 1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0, 1.0)
GREEN = Color(0.0, 1.0, 0.0, 1.0)
BLUE = Color(0.0, 0.0, 1.0, 1.0)
CLEAR = Color(0.0, 0.0, 0.0, 0.0)
GREY = Color(0.5, 0.5, 0.5, 1.0)
YELLOW = Color(1.0, 235 / 255, 4 / 255, 1.0)  # engine yellow, not #ffff00
CYAN = Color(0.0, 1.0, 1.0, 1.0)
MAGENTA = Color(1.0, 0.0, 1.0, 1.0)


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='parse', help='Parse a colour value')

        @command.arguments
        def arguments(parser):
            parser.add_argument('value')

        @command.run
        def run(args, report, settings):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self.doc = ''
        self._run_fn: Callable | None = None
        self._arguments_fn: Callable | None = None

    @property
    def summary(self) -> str:
        """First line of the module docs, falling back to the help string."""
        return self.doc.splitlines()[0] if self.doc else self.help

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the argparse setup function."""
        self._arguments_fn = fn
        return fn

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def add_arguments(self, parser: Any) -> None:
        if self._arguments_fn is not None:
            self._arguments_fn(parser)

    def execute(self, args: Any, report: Report, settings: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(args, report, settings)


@dataclass
class Report:
    """Accumulates colour entries and free-form notes for text/JSON output."""

    command: str = ''
    entries: list[dict[str, Any]] = field(default_factory=list)
    notes: dict[str, Any] = field(default_factory=dict)

    def add(self, label: str, data: dict[str, Any]) -> None:
        """Add one colour entry under a label."""
        self.entries.append({'label': label, **data})

    def note(self, key: str, value: Any) -> None:
        self.notes[key] = value
