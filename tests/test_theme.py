"""Tests for button_painter.core.theme: flattening, lookups, fallbacks, loading."""

import json
import os
from pathlib import Path

import pytest
from button_painter.core.palette import TAILWIND
from button_painter.core.theme import Theme, ThemeError, expand_autocomplete, flatten_colors, load_theme

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), 'fixtures')
THEME_JSON = os.path.join(FIXTURES_DIR, 'theme.json')

SHADES = [50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950]


class TestFlattenColors:
    def test_default_collapses_to_group(self):
        assert flatten_colors({'a': {'b': '#fff', 'DEFAULT': '#000'}}) == {'a-b': '#fff', 'a': '#000'}

    def test_empty(self):
        assert flatten_colors({}) == {}

    def test_none(self):
        assert flatten_colors(None) == {}

    def test_top_level_leaf(self):
        assert flatten_colors({'black': '#000'}) == {'black': '#000'}

    def test_int_shades_stringified(self):
        assert flatten_colors({'blue': {500: '#3B82F6'}, 'black': '#000'}) == {
            'blue-500': '#3B82F6',
            'black': '#000',
        }

    def test_deep_nesting(self):
        tree = {'brand': {'accent': {100: '#eee', 'DEFAULT': '#ccc'}}}
        assert flatten_colors(tree) == {'brand-accent-100': '#eee', 'brand-accent': '#ccc'}

    def test_non_string_leaves_pass_through(self):
        marker = object()
        flat = flatten_colors({'x': {1: 42, 2: None, 3: marker}})
        assert flat == {'x-1': 42, 'x-2': None, 'x-3': marker}

    def test_input_untouched(self):
        tree = {'a': {'DEFAULT': '#000'}}
        flatten_colors(tree)
        assert tree == {'a': {'DEFAULT': '#000'}}


class TestExpandAutocomplete:
    def test_expands_colors(self):
        colors = {'blue': {500: '#00f'}, 'black': '#000'}
        assert expand_autocomplete('button-$colors', colors) == ['button-blue-500', 'button-black']

    def test_no_token(self):
        assert expand_autocomplete('button-[color]', {'blue': {500: '#00f'}}) == ['button-[color]']

    def test_empty_theme(self):
        assert expand_autocomplete('button-$colors', {}) == []


class TestThemeLookup:
    def test_shade_int_key(self):
        theme = Theme.from_colors({'blue': {500: '#112233'}})
        assert theme.shade('blue', '500') == '#112233'
        assert theme.shade('blue', 500) == '#112233'

    def test_shade_str_key(self):
        theme = Theme.from_colors({'blue': {'500': '#112233'}})
        assert theme.shade('blue', '500') == '#112233'
        assert theme.shade('blue', 500) == '#112233'

    def test_missing_shade(self):
        theme = Theme.from_colors({'blue': {500: '#112233'}})
        assert theme.shade('blue', '999') is None

    def test_missing_group(self):
        assert Theme.from_colors({}).shade('blue', '500') is None

    def test_leaf_group_has_no_shades(self):
        assert Theme.from_colors({'black': '#000'}).shade('black', '500') is None

    def test_empty_value_is_missing(self):
        assert Theme.from_colors({'blue': {500: ''}}).shade('blue', 500) is None

    def test_padded_shade_not_coerced(self):
        assert Theme.from_colors({'blue': {500: '#112233'}}).shade('blue', '0500') is None

    def test_no_colors_key(self):
        assert Theme({}).colors == {}
        assert Theme({'colors': 'nope'}).colors == {}


class TestTextFallbacks:
    def test_defaults(self):
        theme = Theme.from_colors({})
        assert theme.dark_text() == '#000000'
        assert theme.light_text() == '#ffffff'

    def test_gray(self):
        theme = Theme.from_colors({'gray': {100: '#f3f4f6', 900: '#111827'}})
        assert theme.dark_text() == '#111827'
        assert theme.light_text() == '#f3f4f6'

    def test_primary_and_secondary_win(self):
        theme = Theme.from_colors(
            {
                'primary': {900: '#0c4a6e'},
                'secondary': {100: '#fef3c7'},
                'gray': {100: '#f3f4f6', 900: '#111827'},
            }
        )
        assert theme.dark_text() == '#0c4a6e'
        assert theme.light_text() == '#fef3c7'

    def test_primary_without_900_falls_through(self):
        theme = Theme.from_colors({'primary': {500: '#0ea5e9'}, 'gray': {900: '#111827'}})
        assert theme.dark_text() == '#111827'

    def test_string_primary_ignored(self):
        assert Theme.from_colors({'primary': '#0ea5e9'}).dark_text() == '#000000'


class TestLoadTheme:
    def test_fixture(self):
        theme = load_theme(THEME_JSON)
        assert theme.shade('primary', 500) == '#0ea5e9'
        assert theme.dark_text() == '#0c4a6e'
        assert theme.light_text() == '#fef3c7'
        assert theme.flat()['primary'] == '#0284c7'

    def test_bare_colors_mapping(self, tmp_path: Path) -> None:
        f = tmp_path / 'colors.json'
        f.write_text(json.dumps({'blue': {'500': '#112233'}}))
        assert load_theme(f).shade('blue', 500) == '#112233'

    def test_invalid_json(self, tmp_path: Path) -> None:
        f = tmp_path / 'bad.json'
        f.write_text('{"colors": ')
        with pytest.raises(ThemeError, match='invalid JSON'):
            load_theme(f)

    def test_not_an_object(self, tmp_path: Path) -> None:
        f = tmp_path / 'list.json'
        f.write_text('["#fff"]')
        with pytest.raises(ThemeError, match='expected a JSON object'):
            load_theme(f)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        f = tmp_path / 'latin1.json'
        f.write_bytes(b'{"colors": {"blue": {"500": "\xff"}}}')
        with pytest.raises(ThemeError, match='not valid UTF-8'):
            load_theme(f)

    def test_unreadable_path(self, tmp_path: Path) -> None:
        with pytest.raises(ThemeError, match='cannot read'):
            load_theme(tmp_path)

    def test_theme_error_is_value_error(self):
        assert issubclass(ThemeError, ValueError)


class TestTailwindPalette:
    def test_has_black_and_white(self):
        assert TAILWIND['black'] == '#000000'
        assert TAILWIND['white'] == '#ffffff'

    def test_groups_have_every_shade(self):
        groups = [name for name, value in TAILWIND.items() if isinstance(value, dict)]
        assert len(groups) == 22
        for name in groups:
            assert sorted(TAILWIND[name]) == SHADES, name

    def test_values_are_long_hex(self):
        for key, value in flatten_colors(TAILWIND).items():
            assert value.startswith('#'), key
            assert len(value) == 7, key

    def test_tailwind_theme_is_a_copy(self):
        theme = Theme.tailwind()
        assert theme.shade('blue', 500) == '#3b82f6'
        assert theme.dark_text() == '#111827'
        assert theme.light_text() == '#f3f4f6'
        theme.colors['blue'][500] = '#000000'
        assert TAILWIND['blue'][500] == '#3b82f6'
