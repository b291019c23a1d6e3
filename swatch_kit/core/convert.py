"""Conversion between hex, RGB, HSL and CMYK, plus display formatting.

Every function is pure. Malformed hex input never raises: the hex parsers
return None and the composed wrappers propagate it.

All rounding is half-up (0.5 goes up), so 127.5 becomes 128 and 2.5 becomes 3.
"""

import math
import re

from swatch_kit.core.types import CMYK, HSL, RGB

_HEX_RE = re.compile(r'^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$', re.IGNORECASE)


def round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def hex_to_rgb(hex_str: str) -> RGB | None:
    """Parse '#RRGGBB' or 'RRGGBB' (any case). Shorthand and alpha are rejected."""
    m = _HEX_RE.match(hex_str)
    if not m:
        return None
    return RGB(int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Pack integer channels in [0, 255] into canonical '#RRGGBB'.

    Out-of-range channels are not clamped; the caller owns that precondition.
    """
    return f'#{r:02X}{g:02X}{b:02X}'


def normalize_hex(hex_str: str) -> str | None:
    rgb = hex_to_rgb(hex_str)
    return rgb_to_hex(rgb.r, rgb.g, rgb.b) if rgb else None


def normalize_hue(hue: float) -> float:
    return hue % 360


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    rf, gf, bf = r / 255, g / 255, b / 255
    hi = max(rf, gf, bf)
    lo = min(rf, gf, bf)
    h = s = 0.0
    light = (hi + lo) / 2

    if hi != lo:
        d = hi - lo
        s = d / (2 - hi - lo) if light > 0.5 else d / (hi + lo)
        if hi == rf:
            h = ((gf - bf) / d + (6 if gf < bf else 0)) / 6
        elif hi == gf:
            h = ((bf - rf) / d + 2) / 6
        else:
            h = ((rf - gf) / d + 4) / 6

    # h rounds to 360 only for hues a hair below red; wrap it back to 0
    return HSL(round_half_up(h * 360) % 360, round_half_up(s * 100), round_half_up(light * 100))


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:  # noqa: E741
    """Inverse of rgb_to_hsl. Fractional h/s/l are accepted."""
    h /= 360
    s /= 100
    l /= 100  # noqa: E741

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RGB(round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255))


def rgb_to_cmyk(r: int, g: int, b: int) -> CMYK:
    c = 1 - r / 255
    m = 1 - g / 255
    y = 1 - b / 255
    k = min(c, m, y)

    if k == 1:
        return CMYK(0, 0, 0, 100)

    return CMYK(
        round_half_up((c - k) / (1 - k) * 100),
        round_half_up((m - k) / (1 - k) * 100),
        round_half_up((y - k) / (1 - k) * 100),
        round_half_up(k * 100),
    )


def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> RGB:
    c, m, y, k = c / 100, m / 100, y / 100, k / 100
    return RGB(
        round_half_up(255 * (1 - c) * (1 - k)),
        round_half_up(255 * (1 - m) * (1 - k)),
        round_half_up(255 * (1 - y) * (1 - k)),
    )


def hex_to_hsl(hex_str: str) -> HSL | None:
    rgb = hex_to_rgb(hex_str)
    return rgb_to_hsl(rgb.r, rgb.g, rgb.b) if rgb else None


def hsl_to_hex(h: float, s: float, l: float) -> str:  # noqa: E741
    rgb = hsl_to_rgb(h, s, l)
    return rgb_to_hex(rgb.r, rgb.g, rgb.b)


def hex_to_cmyk(hex_str: str) -> CMYK | None:
    rgb = hex_to_rgb(hex_str)
    return rgb_to_cmyk(rgb.r, rgb.g, rgb.b) if rgb else None


def format_rgb(rgb: RGB) -> str:
    return f'rgb({rgb.r}, {rgb.g}, {rgb.b})'


def format_hsl(hsl: HSL) -> str:
    return f'hsl({hsl.h}, {hsl.s}%, {hsl.l}%)'


def format_cmyk(cmyk: CMYK) -> str:
    return f'cmyk({cmyk.c}%, {cmyk.m}%, {cmyk.y}%, {cmyk.k}%)'
