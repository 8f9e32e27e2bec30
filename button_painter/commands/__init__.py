"""Button-painter commands.

Every .py file in this package that defines a `command` object is
auto-registered by button_painter.registry.discover().
"""
