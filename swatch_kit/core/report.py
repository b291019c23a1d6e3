"""Report builder — text and JSON output for swatch-tool results."""

import json
from typing import Any

from swatch_kit.core.types import Report


def _mark(flag: bool) -> str:
    return '✓' if flag else '✗'


def _swatches(colors: list[str]) -> str:
    return '  '.join(colors)


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = [f'swatch-tool: {report.colour}', '']

    for name, data in report.sections.items():
        lines.append(f'── {name}')

        if 'error' in data:
            lines.append(f'  error: {data["error"]}')
        elif name == 'convert':
            for key in ('hex', 'rgb', 'hsl', 'cmyk'):
                lines.append(f'  {key:<5} {data[key]}')
        elif name == 'name':
            lines.append(f'  name:   {data["name"]}')
            lines.append(f'  family: {data["family"]}')
        elif name == 'harmony':
            for h in data['harmonies']:
                lines.append(f'  {h["name"]:<20} {_swatches(h["colors"])}')
        elif name == 'tints':
            lines.append(f'  tints:  {_swatches(data["tints"])}')
            lines.append(f'  shades: {_swatches(data["shades"])}')
        elif name == 'similar':
            if not data['matches']:
                lines.append(f'  no colours within {data["max_distance"]}')
            for m in data['matches']:
                lines.append(f'  {m["hex"]}  {m["id"]:<16} Δ={m["distance"]}')
        elif name == 'contrast':
            lines.append(f'  {data["foreground"]} on {data["background"]}  {data["formatted"]}')
            lines.append(
                f'  AA {_mark(data["aa"])}  AAA {_mark(data["aaa"])}  '
                f'AA-large {_mark(data["aa_large"])}  AAA-large {_mark(data["aaa_large"])}'
            )
            lines.append(f'  target {data["target"]}  {_mark(data["pass"])}')
            lines.append(f'  suggested text: {data["suggested_text"]}')
        elif name == 'fix':
            lines.append(f'  {data["foreground"]} → {data["fixed"]}  {data["formatted"]}')
        elif name == 'export':
            if data.get('file'):
                lines.append(f'  wrote {data["file"]}')
            lines.append(data['content'])
        else:
            # Generic fallback
            for k, v in data.items():
                lines.append(f'  {name}.{k}: {v}')

        lines.append('')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total} checks  FAIL {report.fail_count}/{total} checks')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'colour': report.colour,
        'commands': report.sections,
        'summary': {
            'total': report.pass_count + report.fail_count,
            'pass': report.pass_count,
            'fail': report.fail_count,
        },
    }
    return json.dumps(obj, indent=2)
