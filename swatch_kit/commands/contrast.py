"""WCAG contrast of the colour (as text) against --background.

Reports the ratio (2 decimals) and the four grades:

    AA >= 4.5   AAA >= 7   AA-large >= 3   AAA-large >= 4.5

plus pass/fail against --target (default 4.5, or SWATCH_TARGET_RATIO) and
the better of white or black text for the background. With
--fail-on-contrast the process exits 1 when the target is missed.

A malformed colour on either side counts as no contrast (1.00:1).

Example:
    uv run swatch-tool contrast '#777777' --background '#FFFFFF'
    uv run swatch-tool contrast '#777777' -b '#FFFFFF' --target 7 --fail-on-contrast
"""

from dataclasses import asdict

from swatch_kit.commands._settings import target_ratio
from swatch_kit.core.contrast import WHITE, check_contrast, format_contrast_ratio, get_suggested_text_color
from swatch_kit.core.types import Command, Report

command = Command(
    name='contrast',
    help='WCAG contrast ratio and AA/AAA grades against a background.',
)


@command.run
def run(colour: str, report: Report, args) -> None:
    background = getattr(args, 'background', None) or WHITE
    target = target_ratio(args)
    result = check_contrast(colour, background)
    passed = result.ratio >= target

    data = {
        'foreground': colour,
        'background': background,
        **asdict(result),
        'formatted': format_contrast_ratio(result.ratio),
        'target': target,
        'pass': passed,
        'suggested_text': get_suggested_text_color(background),
    }
    if passed:
        report.record_pass()
    else:
        report.record_fail()
    report.add('contrast', data)
