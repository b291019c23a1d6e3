"""Named colour table and RGB-distance matching.

Distances are plain Euclidean in raw sRGB space, not perceptually uniform.
The table and its numpy mirror are built once at import and never mutated.
"""

import math
from collections.abc import Iterable

import numpy as np

from swatch_kit.core.convert import hex_to_hsl, hex_to_rgb, normalize_hex
from swatch_kit.core.types import RGB, SimilarColor

# Order matters: the first entry wins distance ties
NAMED_COLOURS: tuple[tuple[str, str], ...] = (
    ('Red', '#FF0000'),
    ('Crimson', '#DC143C'),
    ('Coral', '#FF7F50'),
    ('Salmon', '#FA8072'),
    ('Pink', '#FFC0CB'),
    ('Rose', '#FF007F'),
    ('Maroon', '#800000'),
    ('Orange', '#FFA500'),
    ('Tangerine', '#F28500'),
    ('Peach', '#FFE5B4'),
    ('Yellow', '#FFFF00'),
    ('Gold', '#FFD700'),
    ('Lemon', '#FFF44F'),
    ('Cream', '#FFFDD0'),
    ('Green', '#008000'),
    ('Lime', '#00FF00'),
    ('Mint', '#98FF98'),
    ('Emerald', '#50C878'),
    ('Teal', '#008080'),
    ('Olive', '#808000'),
    ('Forest', '#228B22'),
    ('Blue', '#0000FF'),
    ('Sky Blue', '#87CEEB'),
    ('Navy', '#000080'),
    ('Turquoise', '#40E0D0'),
    ('Cyan', '#00FFFF'),
    ('Azure', '#007FFF'),
    ('Purple', '#800080'),
    ('Violet', '#8F00FF'),
    ('Lavender', '#E6E6FA'),
    ('Magenta', '#FF00FF'),
    ('Plum', '#DDA0DD'),
    ('Brown', '#A52A2A'),
    ('Tan', '#D2B48C'),
    ('Beige', '#F5F5DC'),
    ('Chocolate', '#D2691E'),
    ('Black', '#000000'),
    ('Gray', '#808080'),
    ('Silver', '#C0C0C0'),
    ('White', '#FFFFFF'),
)


def _table_array() -> np.ndarray:
    rows = []
    for _name, hex_val in NAMED_COLOURS:
        rgb = hex_to_rgb(hex_val)
        rows.append((rgb.r, rgb.g, rgb.b))
    arr = np.array(rows, dtype=int)
    arr.setflags(write=False)
    return arr


_NAMED_RGB = _table_array()

# (hue upper bound, family); red wraps around 345..15
_FAMILY_BOUNDS: tuple[tuple[int, str], ...] = (
    (15, 'Red'),
    (45, 'Orange'),
    (70, 'Yellow'),
    (150, 'Green'),
    (200, 'Cyan'),
    (260, 'Blue'),
    (290, 'Purple'),
    (345, 'Pink'),
)


def rgb_distance(a: tuple[int, int, int], b: tuple[int, int, int]) -> float:
    """Euclidean RGB distance. Works on ints so (0 - 200) never wraps like uint8."""
    diff = np.array(a, dtype=int) - np.array(b, dtype=int)
    return float(np.linalg.norm(diff))


def _as_tuple(rgb: RGB) -> tuple[int, int, int]:
    return (rgb.r, rgb.g, rgb.b)


def color_distance(hex1: str, hex2: str) -> float:
    """RGB distance between two hex colours; inf if either is malformed."""
    rgb1 = hex_to_rgb(hex1)
    rgb2 = hex_to_rgb(hex2)
    if rgb1 is None or rgb2 is None:
        return math.inf
    return rgb_distance(_as_tuple(rgb1), _as_tuple(rgb2))


def nearest_named(rgb: tuple[int, int, int]) -> tuple[str, float]:
    """Return (name, distance) of the closest table entry."""
    dists = np.linalg.norm(_NAMED_RGB - np.array(rgb, dtype=int), axis=-1)
    idx = int(np.argmin(dists))
    return NAMED_COLOURS[idx][0], float(dists[idx])


def get_color_name(hex_str: str) -> str:
    """Nearest table name, qualified by the query's own HSL lightness.

    A malformed query is infinitely far from every entry, so nothing beats
    the first entry and it is returned bare.
    """
    rgb = hex_to_rgb(hex_str)
    if rgb is None:
        return NAMED_COLOURS[0][0]

    name, _dist = nearest_named(_as_tuple(rgb))
    hsl = hex_to_hsl(hex_str)
    if hsl.l > 90:
        return f'Very Light {name}'
    if hsl.l > 70:
        return f'Light {name}'
    if hsl.l < 20:
        return f'Very Dark {name}'
    if hsl.l < 40:
        return f'Dark {name}'
    return name


def get_color_family(hex_str: str) -> str:
    hsl = hex_to_hsl(hex_str)
    if hsl is None:
        return 'Unknown'

    if hsl.s < 10:
        if hsl.l > 90:
            return 'White'
        if hsl.l < 10:
            return 'Black'
        return 'Gray'

    if hsl.h >= 345:
        return 'Red'
    for upper, family in _FAMILY_BOUNDS:
        if hsl.h < upper:
            return family
    return 'Unknown'


def find_similar_colors(
    target: str,
    candidates: Iterable[tuple[str, str]],
    max_distance: float = 50,
) -> list[SimilarColor]:
    """Candidates within max_distance of target, nearest first.

    candidates are (hex, id) pairs. The target is excluded by canonical hex,
    so a '#ff0000' candidate is dropped for a '#FF0000' target even though
    the strings differ. Equal distances keep their input order.
    """
    pairs = list(candidates)
    target_rgb = hex_to_rgb(target)
    if target_rgb is None or not pairs:
        return []

    target_hex = normalize_hex(target)
    parsed = [hex_to_rgb(hex_val) for hex_val, _id in pairs]
    valid = [i for i, rgb in enumerate(parsed) if rgb is not None]

    dists = np.full(len(pairs), np.inf)
    if valid:
        arr = np.array([_as_tuple(parsed[i]) for i in valid], dtype=int)
        dists[valid] = np.linalg.norm(arr - np.array(_as_tuple(target_rgb), dtype=int), axis=-1)

    results = []
    for i in np.argsort(dists, kind='stable'):
        hex_val, id_ = pairs[i]
        dist = float(dists[i])
        if dist <= max_distance and normalize_hex(hex_val) != target_hex:
            results.append(SimilarColor(hex=hex_val, id=id_, distance=dist))
    return results
