"""button_painter.core: Foundation layer.

Contains the colour maths, theme access, built-in palette, type definitions,
candidate scanning and report builder. This module has NO dependencies on
button_painter.rules, button_painter.commands or button_painter.registry.
Only stdlib and numpy are allowed here.
"""
