"""Nearest colour name and hue family.

The name is the closest of 40 reference colours by RGB distance, prefixed
by Very Light / Light / Dark / Very Dark from the colour's own lightness.
The family is a coarse hue bucket (Red .. Pink), or White / Gray / Black
for near-neutral colours.

Example:
    uv run swatch-tool name '#1E90FF'
"""

from swatch_kit.core.palette import get_color_family, get_color_name
from swatch_kit.core.types import Command, Report

command = Command(
    name='name',
    help='Nearest named colour and hue family.',
)


@command.run
def run(colour: str, report: Report, args) -> None:
    report.add('name', {'name': get_color_name(colour), 'family': get_color_family(colour)})
