"""WCAG 2.x contrast: relative luminance, ratio, grading and automatic fixing.

Thresholds:
  AA         >= 4.5     normal text
  AAA        >= 7       normal text
  AA-large   >= 3       large text (18pt, or 14pt bold)
  AAA-large  >= 4.5     large text; same bar as AA for normal text

Malformed hex on either side is treated as no contrast (ratio 1).

Auto-fix (get_contrast_fixed_color) bisects the foreground's HSL lightness,
holding hue and saturation, for exactly SEARCH_ITERATIONS rounds. A light
background (HSL lightness > 50) darkens the foreground, a dark one lightens
it. A passing midpoint becomes the best candidate and the search narrows
back toward the original lightness, looking for a closer pass; a failing
midpoint pushes the search toward the extreme. If no midpoint passed, the
achromatic extreme is returned instead.
"""

from swatch_kit.core.convert import hex_to_hsl, hex_to_rgb, hsl_to_hex, round_half_up
from swatch_kit.core.types import RGB, ContrastResult

AA_NORMAL = 4.5
AAA_NORMAL = 7.0
AA_LARGE = 3.0
AAA_LARGE = 4.5

SEARCH_ITERATIONS = 10

WHITE = '#FFFFFF'
BLACK = '#000000'


def _linearize(channel: int) -> float:
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: RGB) -> float:
    return 0.2126 * _linearize(rgb.r) + 0.7152 * _linearize(rgb.g) + 0.0722 * _linearize(rgb.b)


def get_contrast_ratio(hex1: str, hex2: str) -> float:
    rgb1 = hex_to_rgb(hex1)
    rgb2 = hex_to_rgb(hex2)
    if rgb1 is None or rgb2 is None:
        return 1.0

    lum1 = relative_luminance(rgb1)
    lum2 = relative_luminance(rgb2)
    lighter, darker = max(lum1, lum2), min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def check_contrast(foreground: str, background: str) -> ContrastResult:
    ratio = get_contrast_ratio(foreground, background)
    return ContrastResult(
        ratio=round_half_up(ratio * 100) / 100,
        aa=ratio >= AA_NORMAL,
        aaa=ratio >= AAA_NORMAL,
        aa_large=ratio >= AA_LARGE,
        aaa_large=ratio >= AAA_LARGE,
    )


def get_suggested_text_color(background: str) -> str:
    """White or black, whichever contrasts more with background (black on a tie)."""
    white = get_contrast_ratio(background, WHITE)
    black = get_contrast_ratio(background, BLACK)
    return WHITE if white > black else BLACK


def format_contrast_ratio(ratio: float) -> str:
    return f'{ratio:.2f}:1'


def get_contrast_fixed_color(foreground: str, background: str, target_ratio: float = AA_NORMAL) -> str:
    """Closest lightness variant of foreground that meets target_ratio on background."""
    if check_contrast(foreground, background).ratio >= target_ratio:
        return foreground

    hsl = hex_to_hsl(foreground)
    bg_hsl = hex_to_hsl(background)
    if hsl is None or bg_hsl is None:
        return foreground

    bg_is_light = bg_hsl.l > 50
    if bg_is_light:
        low, high = 0.0, float(hsl.l)
    else:
        low, high = float(hsl.l), 100.0

    best = foreground
    for _ in range(SEARCH_ITERATIONS):
        mid = (low + high) / 2
        candidate = hsl_to_hex(hsl.h, hsl.s, mid)
        if check_contrast(candidate, background).ratio >= target_ratio:
            best = candidate
            # passed: move back toward the original lightness
            if bg_is_light:
                low = mid
            else:
                high = mid
        elif bg_is_light:
            high = mid
        else:
            low = mid

    if check_contrast(best, background).ratio < target_ratio:
        return BLACK if bg_is_light else WHITE
    return best
