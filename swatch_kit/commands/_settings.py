"""Resolve command options: CLI flag first, then environment, then built-in default."""

from swatch_kit.core import env
from swatch_kit.core.contrast import AA_NORMAL

DEFAULT_STEPS = 5
DEFAULT_MAX_DISTANCE = 50.0


def target_ratio(args) -> float:
    value = getattr(args, 'target', None)
    return value if value is not None else env.get_float(env.TARGET_RATIO, AA_NORMAL)


def step_count(args) -> int:
    value = getattr(args, 'count', None)
    return value if value is not None else env.get_int(env.STEPS, DEFAULT_STEPS)


def max_distance(args) -> float:
    value = getattr(args, 'max_distance', None)
    return value if value is not None else env.get_float(env.MAX_DISTANCE, DEFAULT_MAX_DISTANCE)
