"""Environment variable loading and typed settings for swatch-tool.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Walking stops at .git so we never load a .env from outside the repo.
Only sets variables that are NOT already in os.environ.

Settings read by the CLI:
  SWATCH_TARGET_RATIO   contrast target for contrast/fix (default 4.5)
  SWATCH_STEPS          tint/shade/monochromatic step count (default 5)
  SWATCH_MAX_DISTANCE   RGB radius for similar (default 50)
"""

import os
import sys
from pathlib import Path

TARGET_RATIO = 'SWATCH_TARGET_RATIO'
STEPS = 'SWATCH_STEPS'
MAX_DISTANCE = 'SWATCH_MAX_DISTANCE'


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value and KEY="value"."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        if '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        value = raw_value.strip().strip('"').strip("'")
        if key:
            result[key] = value
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        if key not in os.environ:
            os.environ[key] = value

    return path


def _get(key: str, default, cast):
    raw = os.environ.get(key)
    if raw is None or raw.strip() == '':
        return default
    try:
        return cast(raw)
    except ValueError:
        print(f'swatch-tool: ignoring {key}={raw!r}, using {default}', file=sys.stderr)
        return default


def get_float(key: str, default: float) -> float:
    return _get(key, default, float)


def get_int(key: str, default: int) -> int:
    return _get(key, default, int)
