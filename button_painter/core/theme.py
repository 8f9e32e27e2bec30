"""Theme access: flattening, shade lookup, text fallbacks, JSON loading."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from button_painter.core.palette import tailwind_theme

DEFAULT_KEY = 'DEFAULT'
COLORS_TOKEN = '$colors'

DARK_TEXT_FALLBACK = '#000000'
LIGHT_TEXT_FALLBACK = '#ffffff'


class ThemeError(ValueError):
    """Raised when a theme file cannot be read as a colour theme."""


def flatten_colors(tree: Mapping[Any, Any] | None) -> dict[str, Any]:
    """Flatten a nested colour theme into dash-joined keys.

    {'a': {'b': '#fff', 'DEFAULT': '#000'}} -> {'a-b': '#fff', 'a': '#000'}

    Non-mapping values are leaves and pass through untouched. The tree must
    be acyclic.
    """
    flat: dict[str, Any] = {}
    if not tree:
        return flat
    for key, value in tree.items():
        name = str(key)
        if isinstance(value, Mapping):
            for child_key, leaf in flatten_colors(value).items():
                flat[name if child_key == DEFAULT_KEY else f'{name}-{child_key}'] = leaf
        else:
            flat[name] = value
    return flat


def expand_autocomplete(template: str, colors: Mapping[Any, Any] | None) -> list[str]:
    """Expand `$colors` in an autocomplete template to every flat colour key."""
    if COLORS_TOKEN not in template:
        return [template]
    return [template.replace(COLORS_TOKEN, key) for key in flatten_colors(colors)]


def _lookup_shade(group: Mapping[Any, Any], shade: str | int) -> Any:
    key = str(shade)
    if key in group:
        return group[key]
    # Python themes key shades by int; only canonical digit strings map onto them
    if key.isdigit() and str(int(key)) == key:
        return group.get(int(key))
    return None


class Theme:
    """Read-only view over a host theme mapping ({'colors': {...}})."""

    def __init__(self, data: Mapping[str, Any] | None = None):
        self._data = data or {}

    @classmethod
    def from_colors(cls, colors: Mapping[Any, Any]) -> Theme:
        return cls({'colors': colors})

    @classmethod
    def tailwind(cls) -> Theme:
        return cls(tailwind_theme())

    @property
    def colors(self) -> Mapping[Any, Any]:
        colors = self._data.get('colors')
        return colors if isinstance(colors, Mapping) else {}

    def group(self, name: str) -> Any:
        return self.colors.get(name)

    def shade(self, name: str, shade: str | int) -> Any:
        """Colour at group `name`, shade `shade`; None when absent or empty."""
        group = self.group(name)
        if not isinstance(group, Mapping):
            return None
        return _lookup_shade(group, shade) or None

    def dark_text(self) -> Any:
        """Text colour for light backgrounds: primary-900, gray-900, then black."""
        return self.shade('primary', 900) or self.shade('gray', 900) or DARK_TEXT_FALLBACK

    def light_text(self) -> Any:
        """Text colour for dark backgrounds: secondary-100, gray-100, then white."""
        return self.shade('secondary', 100) or self.shade('gray', 100) or LIGHT_TEXT_FALLBACK

    def flat(self) -> dict[str, Any]:
        return flatten_colors(self.colors)


def load_theme(path: str | Path) -> Theme:
    """Load a JSON theme file.

    Accepts either a host theme ({"colors": {...}}) or a bare colours mapping.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise ThemeError(f'{path}: invalid JSON ({e.msg} at line {e.lineno})') from e
    except UnicodeDecodeError as e:
        raise ThemeError(f'{path}: not valid UTF-8 (byte {e.start})') from e
    except OSError as e:
        raise ThemeError(f'{path}: cannot read ({e.strerror or e})') from e
    if not isinstance(data, dict):
        raise ThemeError(f'{path}: expected a JSON object, got {type(data).__name__}')
    if isinstance(data.get('colors'), dict):
        return Theme(data)
    return Theme.from_colors(data)
