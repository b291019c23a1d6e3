"""Tint and shade ramps.

Tints step lightness up toward 95%, shades step it down toward 5%, each in
--count equal increments (default 5, or SWATCH_STEPS).

Example:
    uv run swatch-tool tints '#336699' --count 8
"""

from swatch_kit.commands._settings import step_count
from swatch_kit.core.harmony import get_shades, get_tints
from swatch_kit.core.types import Command, Report

command = Command(
    name='tints',
    help='Lighter tints and darker shades of a colour.',
)


@command.run
def run(colour: str, report: Report, args) -> None:
    count = step_count(args)
    report.add('tints', {'tints': get_tints(colour, count), 'shades': get_shades(colour, count)})
