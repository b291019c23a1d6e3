"""Tests for swatch_kit.core.export — CSS/SCSS/JSON/Tailwind palette text."""

import json
from datetime import datetime, timezone

import pytest

from swatch_kit.core.export import (
    export_css,
    export_filename,
    export_json,
    export_palette,
    export_scss,
    export_tailwind,
)
from swatch_kit.core.types import Palette

PALETTE = Palette(
    name='Ocean  Breeze',
    colors=('#112233', '#445566'),
    created_at=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
)


class TestExportText:
    def test_css(self):
        assert export_css(PALETTE) == ':root {\n  --color-1: #112233;\n  --color-2: #445566;\n}'

    def test_scss(self):
        assert export_scss(PALETTE) == '$color-1: #112233;\n$color-2: #445566;'

    def test_json(self):
        data = json.loads(export_json(PALETTE))
        assert data == {
            'name': 'Ocean  Breeze',
            'colors': ['#112233', '#445566'],
            'createdAt': '2024-01-02T03:04:05.000Z',
        }

    def test_json_naive_datetime_is_utc(self):
        naive = Palette(name='x', colors=(), created_at=datetime(2024, 1, 2, 3, 4, 5))
        assert json.loads(export_json(naive))['createdAt'] == '2024-01-02T03:04:05.000Z'

    def test_tailwind(self):
        text = export_tailwind(PALETTE)
        assert text.startswith('module.exports = {\n  theme: {\n    extend: {\n      colors: {\n')
        assert '        "brand-1": "#112233",\n' in text
        assert '        "brand-2": "#445566"\n' in text
        assert text.endswith('}\n    }\n  }\n}')


class TestExportPalette:
    def test_filenames(self):
        assert export_filename(PALETTE, 'css') == 'ocean-breeze.css'
        assert export_filename(PALETTE, 'scss') == 'ocean-breeze.scss'
        assert export_filename(PALETTE, 'json') == 'ocean-breeze.json'
        assert export_filename(PALETTE, 'tailwind') == 'tailwind.config.js'

    def test_filename_drops_path_characters(self):
        palette = Palette(name='Monochromatic ../ab/cd', colors=('../ab/cd',), created_at=PALETTE.created_at)
        assert export_filename(palette, 'css') == 'monochromatic-abcd.css'

    def test_dispatch(self):
        content, filename = export_palette(PALETTE, 'scss')
        assert content == export_scss(PALETTE)
        assert filename == 'ocean-breeze.scss'

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            export_palette(PALETTE, 'xml')
