"""Export a harmony as CSS, SCSS, JSON or a Tailwind config.

The palette is the --kind harmony of the colour (default monochromatic,
with --count steps). Formats (--format, default css):

    css        :root { --color-1: #...; }
    scss       $color-1: #...;
    json       {"name", "colors", "createdAt"}
    tailwind   module.exports with theme.extend.colors brand-1..N

Prints the text. With --out-dir also writes it there, named after the
palette (e.g. monochromatic-ff0000.css) or tailwind.config.js.

Example:
    uv run swatch-tool export '#FF0000' --kind triadic --format scss
    uv run swatch-tool export '#FF0000' --format tailwind --out-dir ./build
"""

import os
from datetime import datetime, timezone

from swatch_kit.commands._settings import step_count
from swatch_kit.core.convert import normalize_hex
from swatch_kit.core.export import export_palette
from swatch_kit.core.harmony import get_harmony
from swatch_kit.core.types import Command, HarmonyKind, Palette, Report

command = Command(
    name='export',
    help='Export a harmony palette as CSS, SCSS, JSON or Tailwind config.',
)


def build_palette(colour: str, kind: HarmonyKind, count: int) -> Palette:
    harmony = get_harmony(kind, colour, count)
    label = (normalize_hex(colour) or colour).lstrip('#')
    return Palette(
        name=f'{harmony.name} {label}',
        colors=harmony.colors,
        created_at=datetime.now(timezone.utc),
    )


@command.run
def run(colour: str, report: Report, args) -> None:
    kind_slug = getattr(args, 'kind', None)
    kind = HarmonyKind.from_slug(kind_slug) if kind_slug else HarmonyKind.MONOCHROMATIC
    fmt = getattr(args, 'format', None) or 'css'

    palette = build_palette(colour, kind, step_count(args))
    content, filename = export_palette(palette, fmt)
    data = {'palette': palette.name, 'format': fmt, 'filename': filename, 'content': content}

    out_dir = getattr(args, 'out_dir', None)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
        path = os.path.join(out_dir, filename)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content + '\n')
        data['file'] = path

    report.add('export', data)
