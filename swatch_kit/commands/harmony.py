"""Colour harmonies from a seed hue.

Rotates the seed's hue with saturation and lightness held:

    complementary         0, 180
    analogous           -30, 0, +30
    triadic               0, 120, 240
    split-complementary   0, 150, 210
    tetradic / square     0, 90, 180, 270
    monochromatic         --count lightness steps from 10% to 90%

Without --kind every harmony is listed. A malformed seed yields a
single-colour harmony holding the input as given.

Example:
    uv run swatch-tool harmony '#FF0000'
    uv run swatch-tool harmony '#FF0000' --kind triadic
    uv run swatch-tool harmony '#FF0000' --kind monochromatic --count 7
"""

from dataclasses import asdict

from swatch_kit.commands._settings import step_count
from swatch_kit.core.harmony import get_harmony
from swatch_kit.core.types import Command, HarmonyKind, Report

command = Command(
    name='harmony',
    help='Complementary, analogous, triadic, split, tetradic, square and monochromatic sets.',
)


@command.run
def run(colour: str, report: Report, args) -> None:
    kind = getattr(args, 'kind', None)
    kinds = [HarmonyKind.from_slug(kind)] if kind else list(HarmonyKind)
    count = step_count(args)
    harmonies = [asdict(get_harmony(k, colour, count)) for k in kinds]
    for h in harmonies:
        h['colors'] = list(h['colors'])
    report.add('harmony', {'harmonies': harmonies})
