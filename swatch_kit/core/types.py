"""Shared types for swatch-tool: colour values, harmonies, Command, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class RGB:
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class HSL:
    h: int  # degrees, [0, 360)
    s: int  # percent, as is l
    l: int  # noqa: E741


@dataclass(frozen=True)
class CMYK:
    c: int
    m: int
    y: int
    k: int  # 100 = pure black, c/m/y forced to 0


class HarmonyKind(Enum):
    """Named harmony variants, in the order they are enumerated for display.

    TETRADIC and SQUARE share the same hue offsets. They are kept as separate
    members because both names are offered to users.
    """

    COMPLEMENTARY = 'Complementary'
    ANALOGOUS = 'Analogous'
    TRIADIC = 'Triadic'
    SPLIT_COMPLEMENTARY = 'Split-Complementary'
    TETRADIC = 'Tetradic'
    SQUARE = 'Square'
    MONOCHROMATIC = 'Monochromatic'

    @property
    def slug(self) -> str:
        return self.value.lower()

    @classmethod
    def from_slug(cls, slug: str) -> HarmonyKind:
        for kind in cls:
            if kind.slug == slug.lower():
                return kind
        raise ValueError(f'Unknown harmony: {slug}. Available: {", ".join(k.slug for k in cls)}')


@dataclass(frozen=True)
class ColorHarmony:
    name: str
    colors: tuple[str, ...]


@dataclass(frozen=True)
class ContrastResult:
    """WCAG contrast of a foreground/background pair."""

    ratio: float  # rounded to 2 decimals
    aa: bool
    aaa: bool
    aa_large: bool
    aaa_large: bool


@dataclass(frozen=True)
class SimilarColor:
    hex: str
    id: str
    distance: float


@dataclass(frozen=True)
class Palette:
    """An ordered set of colours to export."""

    name: str
    colors: tuple[str, ...]
    created_at: datetime


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='convert', help='Convert a colour between models')

        @command.run
        def run(colour, report, args):
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

    def execute(self, colour: str, report: Report, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(colour, report, args)


@dataclass
class Report:
    """Accumulates results from commands for text/JSON output."""

    colour: str = ''
    sections: dict[str, dict[str, Any]] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0

    def add(self, command_name: str, data: dict[str, Any]) -> None:
        """Add (or replace) the results of a command."""
        self.sections[command_name] = data

    def record_pass(self) -> None:
        self.pass_count += 1

    def record_fail(self) -> None:
        self.fail_count += 1
