"""Adjust the colour's lightness until it meets a contrast target.

Keeps hue and saturation and bisects HSL lightness for 10 rounds: darker on
a light --background, lighter on a dark one. Returns the passing lightness
closest to the original. If no round passes, falls back to black (light
background) or white (dark background). A colour that already passes is
returned unchanged.

Target is --target (default 4.5, or SWATCH_TARGET_RATIO).

Example:
    uv run swatch-tool fix '#777777' --background '#FFFFFF'
    uv run swatch-tool fix '#444444' -b '#111111' --target 7
"""

from swatch_kit.commands._settings import target_ratio
from swatch_kit.core.contrast import WHITE, check_contrast, format_contrast_ratio, get_contrast_fixed_color
from swatch_kit.core.types import Command, Report

command = Command(
    name='fix',
    help='Nearest lightness variant of the colour that meets the contrast target.',
)


@command.run
def run(colour: str, report: Report, args) -> None:
    background = getattr(args, 'background', None) or WHITE
    target = target_ratio(args)
    fixed = get_contrast_fixed_color(colour, background, target)
    result = check_contrast(fixed, background)
    report.add(
        'fix',
        {
            'foreground': colour,
            'background': background,
            'target': target,
            'fixed': fixed,
            'changed': fixed != colour,
            'ratio': result.ratio,
            'formatted': format_contrast_ratio(result.ratio),
        },
    )
