"""Palette export as CSS custom properties, SCSS variables, JSON or a Tailwind config."""

import json
import re
from datetime import timezone

from swatch_kit.core.types import Palette

FORMATS = ('css', 'scss', 'json', 'tailwind')

_EXTENSIONS = {'css': 'css', 'scss': 'scss', 'json': 'json'}


def export_css(palette: Palette) -> str:
    css_vars = '\n'.join(f'  --color-{i}: {hex_val};' for i, hex_val in enumerate(palette.colors, start=1))
    return f':root {{\n{css_vars}\n}}'


def export_scss(palette: Palette) -> str:
    return '\n'.join(f'$color-{i}: {hex_val};' for i, hex_val in enumerate(palette.colors, start=1))


def _iso_utc(palette: Palette) -> str:
    created = palette.created_at
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return created.astimezone(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def export_json(palette: Palette) -> str:
    data = {
        'name': palette.name,
        'colors': list(palette.colors),
        'createdAt': _iso_utc(palette),
    }
    return json.dumps(data, indent=2)


def export_tailwind(palette: Palette) -> str:
    colors = {f'brand-{i}': hex_val for i, hex_val in enumerate(palette.colors, start=1)}
    return (
        'module.exports = {\n'
        '  theme: {\n'
        '    extend: {\n'
        f'      colors: {json.dumps(colors, indent=8)}\n'
        '    }\n'
        '  }\n'
        '}'
    )


def export_filename(palette: Palette, fmt: str) -> str:
    if fmt == 'tailwind':
        return 'tailwind.config.js'
    slug = re.sub(r'\s+', '-', palette.name.lower())
    slug = re.sub(r'[^0-9a-z-]', '', slug)
    return f'{slug}.{_EXTENSIONS[fmt]}'


_EXPORTERS = {
    'css': export_css,
    'scss': export_scss,
    'json': export_json,
    'tailwind': export_tailwind,
}


def export_palette(palette: Palette, fmt: str) -> tuple[str, str]:
    """Return (content, filename) for the given format."""
    if fmt not in _EXPORTERS:
        raise ValueError(f'Unknown export format: {fmt}. Available: {", ".join(FORMATS)}')
    return _EXPORTERS[fmt](palette), export_filename(palette, fmt)
