"""Harmony, tint and shade generation from a seed colour.

Each harmony converts the seed to HSL, rotates the hue by fixed offsets while
keeping saturation and lightness, and converts back. The seed slot always
holds the caller's string unchanged. An unparseable seed degrades to a
single-colour harmony containing just that string.
"""

from swatch_kit.core.convert import hex_to_hsl, hsl_to_hex, normalize_hue, round_half_up
from swatch_kit.core.types import ColorHarmony, HarmonyKind

# Hue offsets in output order; 0 marks the seed
HUE_OFFSETS: dict[HarmonyKind, tuple[int, ...]] = {
    HarmonyKind.COMPLEMENTARY: (0, 180),
    HarmonyKind.ANALOGOUS: (-30, 0, 30),
    HarmonyKind.TRIADIC: (0, 120, 240),
    HarmonyKind.SPLIT_COMPLEMENTARY: (0, 150, 210),
    HarmonyKind.TETRADIC: (0, 90, 180, 270),
    HarmonyKind.SQUARE: (0, 90, 180, 270),
}

MONO_MIN_LIGHTNESS = 10
MONO_MAX_LIGHTNESS = 90
TINT_CEILING = 95
SHADE_FLOOR = 5


def _rotate(hex_str: str, kind: HarmonyKind) -> ColorHarmony:
    hsl = hex_to_hsl(hex_str)
    if hsl is None:
        return ColorHarmony(kind.value, (hex_str,))

    colors = tuple(
        hex_str if offset == 0 else hsl_to_hex(normalize_hue(hsl.h + offset), hsl.s, hsl.l)
        for offset in HUE_OFFSETS[kind]
    )
    return ColorHarmony(kind.value, colors)


def get_complementary(hex_str: str) -> ColorHarmony:
    return _rotate(hex_str, HarmonyKind.COMPLEMENTARY)


def get_analogous(hex_str: str) -> ColorHarmony:
    return _rotate(hex_str, HarmonyKind.ANALOGOUS)


def get_triadic(hex_str: str) -> ColorHarmony:
    return _rotate(hex_str, HarmonyKind.TRIADIC)


def get_split_complementary(hex_str: str) -> ColorHarmony:
    return _rotate(hex_str, HarmonyKind.SPLIT_COMPLEMENTARY)


def get_tetradic(hex_str: str) -> ColorHarmony:
    return _rotate(hex_str, HarmonyKind.TETRADIC)


def get_square(hex_str: str) -> ColorHarmony:
    return _rotate(hex_str, HarmonyKind.SQUARE)


def get_monochromatic(hex_str: str, count: int = 5) -> ColorHarmony:
    """Lightness ramp from 10% to 90% at the seed's hue and saturation.

    count == 1 yields only the 10% entry.
    """
    name = HarmonyKind.MONOCHROMATIC.value
    hsl = hex_to_hsl(hex_str)
    if hsl is None:
        return ColorHarmony(name, (hex_str,))
    if count <= 0:
        return ColorHarmony(name, ())

    step = (MONO_MAX_LIGHTNESS - MONO_MIN_LIGHTNESS) / (count - 1) if count > 1 else 0
    colors = tuple(
        hsl_to_hex(hsl.h, hsl.s, round_half_up(MONO_MIN_LIGHTNESS + step * i)) for i in range(count)
    )
    return ColorHarmony(name, colors)


def get_harmony(kind: HarmonyKind, hex_str: str, count: int = 5) -> ColorHarmony:
    """Dispatch by kind. count only applies to MONOCHROMATIC."""
    if kind is HarmonyKind.MONOCHROMATIC:
        return get_monochromatic(hex_str, count)
    return _rotate(hex_str, kind)


def get_all_harmonies(hex_str: str) -> list[ColorHarmony]:
    """Every harmony, in HarmonyKind order (Complementary .. Monochromatic)."""
    return [get_harmony(kind, hex_str) for kind in HarmonyKind]


def get_tints(hex_str: str, count: int = 5) -> list[str]:
    """count colours stepping lightness up toward 95%, lightest last."""
    hsl = hex_to_hsl(hex_str)
    if hsl is None:
        return [hex_str]
    if count <= 0:
        return []

    step = (TINT_CEILING - hsl.l) / count
    return [
        hsl_to_hex(hsl.h, hsl.s, round_half_up(min(TINT_CEILING, hsl.l + step * i))) for i in range(1, count + 1)
    ]


def get_shades(hex_str: str, count: int = 5) -> list[str]:
    """count colours stepping lightness down toward 5%, darkest last."""
    hsl = hex_to_hsl(hex_str)
    if hsl is None:
        return [hex_str]
    if count <= 0:
        return []

    step = hsl.l / count
    return [hsl_to_hex(hsl.h, hsl.s, round_half_up(max(SHADE_FLOOR, hsl.l - step * i))) for i in range(1, count + 1)]
