"""Find catalogued colours close to a target.

Candidates come from --candidates, a JSON file holding a list of
{"hex": "#RRGGBB", "id": "..."} objects (the shape the colour history is
stored in). Without --candidates, the 40 named reference colours are
searched, with their names as ids.

Keeps candidates within --max-distance (RGB Euclidean, default 50 or
SWATCH_MAX_DISTANCE), drops the target itself, and sorts nearest first.
Equal distances keep file order.

Example:
    uv run swatch-tool similar '#FF1010' --candidates history.json
    uv run swatch-tool similar '#FF1010' --max-distance 80
"""

import json

from swatch_kit.commands._settings import max_distance
from swatch_kit.core.palette import NAMED_COLOURS, find_similar_colors
from swatch_kit.core.types import Command, Report

command = Command(
    name='similar',
    help='Colours within an RGB distance of the target, nearest first.',
)


def load_candidates(path: str) -> list[tuple[str, str]]:
    """Read [{"hex": ..., "id": ...}, ...] into (hex, id) pairs."""
    with open(path, encoding='utf-8') as f:
        records = json.load(f)
    if not isinstance(records, list):
        raise ValueError(f'{path}: expected a JSON list of {{"hex", "id"}} objects')
    return [(str(r['hex']), str(r['id'])) for r in records]


@command.run
def run(colour: str, report: Report, args) -> None:
    radius = max_distance(args)
    path = getattr(args, 'candidates', None)
    if path:
        try:
            candidates = load_candidates(path)
        except (OSError, ValueError, KeyError, TypeError) as e:
            report.add('similar', {'error': f'cannot read candidates: {e}'})
            return
    else:
        candidates = [(hex_val, name) for name, hex_val in NAMED_COLOURS]

    matches = find_similar_colors(colour, candidates, radius)
    report.add(
        'similar',
        {
            'max_distance': radius,
            'matches': [{'hex': m.hex, 'id': m.id, 'distance': round(m.distance, 1)} for m in matches],
        },
    )
