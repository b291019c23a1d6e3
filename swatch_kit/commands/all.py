"""Run every colour command, combine into a single report.

Runs: convert, name, harmony, tints.
Runs contrast too if --background is provided.
Skips: similar, fix, export, sample (run explicitly).

Example:
    uv run swatch-tool all '#1E90FF'
    uv run swatch-tool all '#1E90FF' --background '#FFFFFF' --json
    uv run swatch-tool all '#1E90FF' -b '#FFFFFF' --fail-on-contrast
"""

from swatch_kit.core.types import Command, Report

command = Command(
    name='all',
    help='Run convert, name, harmony, tints (and contrast with --background).',
)

ORDER = ('convert', 'name', 'harmony', 'tints', 'contrast')


@command.run
def run(colour: str, report: Report, args) -> None:
    from swatch_kit.registry import all_commands

    commands = all_commands()
    has_background = bool(getattr(args, 'background', None))
    for name in ORDER:
        # contrast only runs when --background is provided
        if name == 'contrast' and not has_background:
            continue
        commands[name].execute(colour, report, args)
