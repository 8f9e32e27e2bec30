"""button-painter: solid and ghost button rules generated from a colour theme."""

from button_painter.core.colors import resolve_contrast
from button_painter.core.theme import Theme, flatten_colors
from button_painter.core.types import Properties, RawBlock
from button_painter.rules import preset_button_painter, resolve

__all__ = [
    'Properties',
    'RawBlock',
    'Theme',
    'flatten_colors',
    'preset_button_painter',
    'resolve',
    'resolve_contrast',
]
