"""Tests for button_painter.core.colors: literal parsing, luminance, contrast."""

import numpy as np
import pytest
from button_painter.core.colors import (
    contrast_ratio,
    luminance_array,
    parse_rgb,
    relative_luminance,
    resolve_contrast,
)

DARK = '#111111'
LIGHT = '#eeeeee'


def _wcag(r: int, g: int, b: int) -> float:
    def lin(c: int) -> float:
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * lin(r) + 0.7152 * lin(g) + 0.0722 * lin(b)


class TestParseRgb:
    def test_long_hex(self):
        assert parse_rgb('#2563eb') == (37, 99, 235)

    def test_uppercase_hex(self):
        assert parse_rgb('#FFFFFF') == (255, 255, 255)

    def test_short_hex_doubles_nibbles(self):
        assert parse_rgb('#abc') == (0xAA, 0xBB, 0xCC)

    def test_rgb(self):
        assert parse_rgb('rgb(1,2,3)') == (1, 2, 3)

    def test_rgb_with_spaces(self):
        assert parse_rgb('rgb( 10 , 20 , 30 )') == (10, 20, 30)

    def test_rgba_ignores_alpha(self):
        assert parse_rgb('rgba(255, 255, 255, 0.1)') == (255, 255, 255)

    @pytest.mark.parametrize(
        'literal',
        [
            '#ff',
            '#ffff',
            '#ffffffff',
            '#ggg',
            '#f_f',
            '#',
            'ffffff',
            'hsl(0, 0%, 0%)',
            'var(--brand)',
            'red',
            'rgb(256, 0, 0)',
            'rgb(1.5, 2, 3)',
            'rgb()',
            '',
        ],
    )
    def test_unparseable(self, literal):
        assert parse_rgb(literal) is None

    def test_non_string(self):
        assert parse_rgb(0xFFFFFF) is None  # type: ignore[arg-type]


class TestRelativeLuminance:
    def test_white(self):
        assert relative_luminance((255, 255, 255)) == pytest.approx(1.0)

    def test_black(self):
        assert relative_luminance((0, 0, 0)) == 0.0

    def test_green_dominates(self):
        assert relative_luminance((0, 255, 0)) > relative_luminance((255, 0, 0)) > relative_luminance((0, 0, 255))

    def test_low_channels_linear(self):
        # 10/255 is below the 0.03928 knee
        assert relative_luminance((10, 0, 0)) == pytest.approx(0.2126 * (10 / 255) / 12.92)

    def test_array_matches_scalar(self):
        rgbs = [(0, 0, 0), (255, 255, 255), (37, 99, 235), (10, 200, 40), (254, 240, 138)]
        lums = luminance_array(np.array(rgbs))
        assert lums.shape == (5,)
        for rgb, lum in zip(rgbs, lums):
            assert lum == pytest.approx(relative_luminance(rgb))


class TestContrastRatio:
    def test_black_on_white(self):
        assert contrast_ratio((0, 0, 0), (255, 255, 255)) == pytest.approx(21.0)

    def test_same_colour(self):
        assert contrast_ratio((120, 40, 90), (120, 40, 90)) == pytest.approx(1.0)

    def test_symmetry(self):
        a, b = (100, 50, 200), (250, 240, 10)
        assert contrast_ratio(a, b) == contrast_ratio(b, a)


class TestResolveContrast:
    def test_white_rgb_gets_dark(self):
        assert resolve_contrast('rgb(255,255,255)', DARK, LIGHT) == DARK

    def test_black_rgb_gets_light(self):
        assert resolve_contrast('rgb(0,0,0)', DARK, LIGHT) == LIGHT

    def test_hsl_falls_back_to_light(self):
        assert resolve_contrast('hsl(0,0%,0%)', DARK, LIGHT) == LIGHT

    def test_css_variable_falls_back_to_light(self):
        assert resolve_contrast('var(--surface)', DARK, LIGHT) == LIGHT

    def test_white_background_named_still_light(self):
        # named colours are opaque, even when obviously light
        assert resolve_contrast('white', DARK, LIGHT) == LIGHT

    def test_short_and_long_hex_agree(self):
        for short in ['#abc', '#fff', '#000', '#f80', '#9cf', '#777', '#888']:
            long = '#' + ''.join(ch * 2 for ch in short[1:])
            assert resolve_contrast(short, DARK, LIGHT) == resolve_contrast(long, DARK, LIGHT)

    def test_yellow_gets_dark(self):
        assert resolve_contrast('#ffff00', DARK, LIGHT) == DARK

    def test_blue_gets_light(self):
        assert resolve_contrast('#0000ff', DARK, LIGHT) == LIGHT

    def test_threshold_is_strict(self):
        # mid grey sits just under 0.5; the first grey above it flips to dark
        assert _wcag(187, 187, 187) < 0.5 < _wcag(188, 188, 188)
        assert resolve_contrast('#bbbbbb', DARK, LIGHT) == LIGHT
        assert resolve_contrast('#bcbcbc', DARK, LIGHT) == DARK

    def test_dark_iff_luminance_above_half(self):
        steps = range(0, 256, 15)
        for r in steps:
            for g in steps:
                for b in steps:
                    expected = DARK if _wcag(r, g, b) > 0.5 else LIGHT
                    assert resolve_contrast(f'#{r:02x}{g:02x}{b:02x}', DARK, LIGHT) == expected, (r, g, b)
