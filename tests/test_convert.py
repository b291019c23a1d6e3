"""Tests for swatch_kit.core.convert — hex/RGB/HSL/CMYK conversion and formatting."""

from swatch_kit.core.convert import (
    cmyk_to_rgb,
    format_cmyk,
    format_hsl,
    format_rgb,
    hex_to_cmyk,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    normalize_hex,
    normalize_hue,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    round_half_up,
)
from swatch_kit.core.types import CMYK, HSL, RGB


class TestHexToRgb:
    def test_white(self):
        assert hex_to_rgb('#ffffff') == RGB(255, 255, 255)

    def test_black(self):
        assert hex_to_rgb('#000000') == RGB(0, 0, 0)

    def test_dodger_blue(self):
        assert hex_to_rgb('#2563eb') == RGB(37, 99, 235)

    def test_uppercase(self):
        assert hex_to_rgb('#FFFFFF') == RGB(255, 255, 255)

    def test_no_hash(self):
        assert hex_to_rgb('ff0000') == RGB(255, 0, 0)

    def test_short_hex_rejected(self):
        assert hex_to_rgb('#fff') is None

    def test_alpha_rejected(self):
        assert hex_to_rgb('#ffffffff') is None

    def test_garbage_returns_none(self):
        assert hex_to_rgb('notacolor') is None
        assert hex_to_rgb('') is None
        assert hex_to_rgb(' #ffffff') is None
        assert hex_to_rgb('#gg0000') is None


class TestRgbToHex:
    def test_canonical_uppercase(self):
        assert rgb_to_hex(37, 99, 235) == '#2563EB'

    def test_zero_padded(self):
        assert rgb_to_hex(0, 0, 0) == '#000000'
        assert rgb_to_hex(1, 2, 3) == '#010203'

    def test_round_trip(self):
        for r, g, b in [(0, 0, 0), (255, 255, 255), (1, 128, 254), (17, 34, 51)]:
            assert hex_to_rgb(rgb_to_hex(r, g, b)) == RGB(r, g, b)

    def test_normalize_hex(self):
        assert normalize_hex('ff00aa') == '#FF00AA'
        assert normalize_hex('#fff') is None


class TestRoundHalfUp:
    def test_half_goes_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(127.5) == 128

    def test_below_half(self):
        assert round_half_up(2.49) == 2


class TestHsl:
    def test_red(self):
        assert rgb_to_hsl(255, 0, 0) == HSL(0, 100, 50)

    def test_blue(self):
        assert rgb_to_hsl(0, 0, 255) == HSL(240, 100, 50)

    def test_achromatic(self):
        assert rgb_to_hsl(0, 0, 0) == HSL(0, 0, 0)
        assert rgb_to_hsl(255, 255, 255) == HSL(0, 0, 100)
        assert rgb_to_hsl(128, 128, 128) == HSL(0, 0, 50)

    def test_steel_blue(self):
        assert rgb_to_hsl(51, 102, 153) == HSL(210, 50, 40)

    def test_hue_just_below_360_wraps_to_0(self):
        assert rgb_to_hsl(255, 0, 1).h == 0

    def test_hsl_to_rgb_red(self):
        assert hsl_to_rgb(0, 100, 50) == RGB(255, 0, 0)

    def test_hsl_to_rgb_gray_rounds_half_up(self):
        assert hsl_to_rgb(0, 0, 50) == RGB(128, 128, 128)

    def test_hsl_to_rgb_blue(self):
        assert hsl_to_rgb(240, 100, 50) == RGB(0, 0, 255)

    def test_fractional_lightness(self):
        assert hsl_to_rgb(0, 0, 23.5) == RGB(60, 60, 60)

    def test_round_trip_exact_for_primaries(self):
        for hex_val in ['#FF0000', '#00FFFF', '#FFFF00', '#000000', '#FFFFFF']:
            hsl = hex_to_hsl(hex_val)
            assert hsl_to_hex(hsl.h, hsl.s, hsl.l) == hex_val

    def test_round_trip_drift_example(self):
        """Integer HSL loses precision on saturated mid tones: green moves by 5."""
        hsl = hex_to_hsl('#03E4EA')
        assert hsl == HSL(182, 97, 46)
        assert hex_to_rgb(hsl_to_hex(hsl.h, hsl.s, hsl.l)) == RGB(4, 223, 231)

    def test_round_trip_drift_bounded_over_grid(self):
        worst = 0
        for r in range(0, 256, 15):
            for g in range(0, 256, 15):
                for b in range(0, 256, 15):
                    hsl = rgb_to_hsl(r, g, b)
                    back = hsl_to_rgb(hsl.h, hsl.s, hsl.l)
                    worst = max(worst, abs(back.r - r), abs(back.g - g), abs(back.b - b))
        assert worst <= 5


class TestCmyk:
    def test_red(self):
        assert rgb_to_cmyk(255, 0, 0) == CMYK(0, 100, 100, 0)

    def test_black_special_case(self):
        assert rgb_to_cmyk(0, 0, 0) == CMYK(0, 0, 0, 100)

    def test_white(self):
        assert rgb_to_cmyk(255, 255, 255) == CMYK(0, 0, 0, 0)

    def test_cmyk_to_rgb(self):
        assert cmyk_to_rgb(0, 100, 100, 0) == RGB(255, 0, 0)
        assert cmyk_to_rgb(0, 0, 0, 100) == RGB(0, 0, 0)
        assert cmyk_to_rgb(0, 0, 0, 50) == RGB(128, 128, 128)


class TestWrappers:
    def test_hex_to_hsl(self):
        assert hex_to_hsl('#ff0000') == HSL(0, 100, 50)

    def test_hsl_to_hex(self):
        assert hsl_to_hex(0, 100, 50) == '#FF0000'

    def test_hex_to_cmyk(self):
        assert hex_to_cmyk('#000000') == CMYK(0, 0, 0, 100)

    def test_malformed_propagates_none(self):
        assert hex_to_hsl('notacolor') is None
        assert hex_to_cmyk('#12345') is None

    def test_normalize_hue(self):
        assert normalize_hue(-30) == 330
        assert normalize_hue(360) == 0
        assert normalize_hue(450) == 90


class TestFormatting:
    def test_rgb(self):
        assert format_rgb(RGB(255, 0, 0)) == 'rgb(255, 0, 0)'

    def test_hsl(self):
        assert format_hsl(HSL(0, 100, 50)) == 'hsl(0, 100%, 50%)'

    def test_cmyk(self):
        assert format_cmyk(CMYK(0, 100, 100, 0)) == 'cmyk(0%, 100%, 100%, 0%)'
