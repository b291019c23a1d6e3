"""swatch-tool — Colour conversion, harmonies, naming and WCAG contrast.

Usage: uv run swatch-tool <command> <colour> [options]

<colour> is a 6-digit hex string, with or without '#', any case. The
`sample` command takes an image path instead and reads one pixel of it.

Commands are auto-discovered from swatch_kit/commands/.
Each command module's docstring is its documentation.
Run `swatch-tool help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, swatch-tool looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import os
import sys

from swatch_kit import registry
from swatch_kit.core.convert import hex_to_rgb
from swatch_kit.core.env import load_env
from swatch_kit.core.export import FORMATS
from swatch_kit.core.report import format_json, format_text
from swatch_kit.core.types import HarmonyKind, Report


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'swatch_kit.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  swatch-tool convert '#1E90FF'\n"
        "  swatch-tool harmony '#FF0000' --kind triadic\n"
        "  swatch-tool contrast '#777777' --background '#FFFFFF' --fail-on-contrast\n"
        "  swatch-tool fix '#777777' -b '#FFFFFF' --target 7\n"
        "  swatch-tool similar '#FF1010' --candidates history.json\n"
        "  swatch-tool export '#FF0000' --format tailwind --out-dir ./build\n"
        '  swatch-tool sample frame.jpg --point 120,48\n'
        "  swatch-tool all '#1E90FF' -b '#FFFFFF' --json\n"
        '  swatch-tool help fix\n'
        '\n'
        'Settings (set in .env or environment; flags win):\n'
        '  SWATCH_TARGET_RATIO   contrast target, default 4.5\n'
        '  SWATCH_STEPS          tint/shade/monochromatic steps, default 5\n'
        '  SWATCH_MAX_DISTANCE   similar-colour radius, default 50\n'
    )
    parser = argparse.ArgumentParser(
        prog='swatch-tool',
        description='Colour conversion, harmonies, naming and WCAG contrast.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        p.add_argument('colour', help='Hex colour, e.g. #1E90FF (image path for sample)')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('-b', '--background', help='Background hex for contrast/fix (default #FFFFFF)')
        p.add_argument('-t', '--target', type=float, default=None, help='Target contrast ratio')
        p.add_argument('-n', '--count', type=int, default=None, help='Steps for tints/shades/monochromatic')
        p.add_argument('-d', '--max-distance', type=float, default=None, help='RGB radius for similar')
        p.add_argument('-c', '--candidates', help='JSON list of {"hex", "id"} objects for similar')
        p.add_argument('-k', '--kind', choices=[k.slug for k in HarmonyKind], help='Harmony kind')
        p.add_argument('-f', '--format', choices=FORMATS, default=None, help='Export format (default css)')
        p.add_argument('-o', '--out-dir', help='Directory to write the export file into')
        p.add_argument('-p', '--point', metavar='X,Y', help='Pixel to sample (default: image centre)')
        p.add_argument(
            '--fail-on-contrast',
            action='store_true',
            help='Exit 1 if any contrast check misses its target (CI gating)',
        )

    # `help` subcommand: prints full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: swatch-tool help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _check_fail_on_contrast(report: Report) -> bool:
    """Return True if any contrast check in the report missed its target."""
    if report.fail_count == 0:
        return False
    data = report.sections.get('contrast', {})
    print(
        f'\nFAIL: {report.fail_count} contrast check(s) below target {data.get("target")}'
        f' (got {data.get("formatted", "?")})'
    )
    return True


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'swatch-tool: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(getattr(args, 'topic', None))
        return

    if args.command == 'sample':
        if not os.path.isfile(args.colour):
            print(f'Error: image not found: {args.colour}', file=sys.stderr)
            sys.exit(1)
    elif hex_to_rgb(args.colour) is None:
        # Not fatal: every command degrades to N/A / single-colour results
        print(f'swatch-tool: {args.colour!r} is not a 6-digit hex colour', file=sys.stderr)

    report = Report(colour=args.colour)
    registry.get(args.command).execute(args.colour, report, args)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    # CI gate: must happen after output so report is visible even on failure
    if args.fail_on_contrast and _check_fail_on_contrast(report):
        sys.exit(1)


if __name__ == '__main__':
    main()
