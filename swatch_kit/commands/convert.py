"""Convert a hex colour to RGB, HSL and CMYK.

Prints the canonical hex (uppercase, leading #) and the three models in
their CSS-like notations:

    rgb(r, g, b)   hsl(h, s%, l%)   cmyk(c%, m%, y%, k%)

A malformed hex (anything but 6 hex digits, optional #) is reported as N/A
in every field.

Example:
    uv run swatch-tool convert '#1E90FF'
    uv run swatch-tool convert 1e90ff --json
"""

from dataclasses import asdict

from swatch_kit.core.convert import (
    format_cmyk,
    format_hsl,
    format_rgb,
    hex_to_cmyk,
    hex_to_hsl,
    hex_to_rgb,
    normalize_hex,
)
from swatch_kit.core.types import Command, Report

command = Command(
    name='convert',
    help='Convert a hex colour to RGB, HSL and CMYK.',
)

NOT_AVAILABLE = 'N/A'


@command.run
def run(colour: str, report: Report, args) -> None:
    rgb = hex_to_rgb(colour)
    if rgb is None:
        report.add('convert', {key: NOT_AVAILABLE for key in ('hex', 'rgb', 'hsl', 'cmyk')})
        return

    hsl = hex_to_hsl(colour)
    cmyk = hex_to_cmyk(colour)
    report.add(
        'convert',
        {
            'hex': normalize_hex(colour),
            'rgb': format_rgb(rgb),
            'hsl': format_hsl(hsl),
            'cmyk': format_cmyk(cmyk),
            'values': {'rgb': asdict(rgb), 'hsl': asdict(hsl), 'cmyk': asdict(cmyk)},
        },
    )
