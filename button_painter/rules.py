"""Button colour rules and the preset that bundles them.

Generates:
  button-{color}-{shade}         solid button from the theme (button-blue-500)
  button-ghost-{color}-{shade}   outline button, fills on :hover/:focus
  button-[{literal}]             solid button from an arbitrary colour
  button-ghost-[{literal}]       ghost button from an arbitrary colour

Text colour:
  Theme colours go by shade number: shade <= 400 gets the dark text colour,
  anything darker gets the light one. The colour value itself is not looked
  at, so a theme whose shades don't darken monotonically can get poor
  contrast (see `button-painter audit`).
  Arbitrary colours go by WCAG relative luminance (core.colors).

Dark text is primary-900, then gray-900, then #000000.
Light text is secondary-100, then gray-100, then #ffffff.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from button_painter.core.colors import resolve_contrast
from button_painter.core.report import escape_selector
from button_painter.core.theme import Theme, expand_autocomplete
from button_painter.core.types import Preset, Properties, RawBlock, Rule, RuleContext, RuleResult

PRESET_NAME = 'unocss-preset-button-painter'

DARK_TEXT_MAX_SHADE = 400


@dataclass(frozen=True)
class ButtonStyle:
    """Colours a matched class resolves to, before rendering.

    `color` is the background/border for solid buttons and the border/text
    for ghost ones. `text` is the text colour on a filled background: always
    for solid buttons, on :hover/:focus for ghost ones.
    """

    variant: str
    color: str
    text: str


def shade_text(theme: Theme, shade: str | int) -> str:
    """Text colour for a theme shade, by shade number alone."""
    return theme.dark_text() if int(shade) <= DARK_TEXT_MAX_SHADE else theme.light_text()


def _named_color(m: re.Match, theme: Theme) -> tuple[str, str] | None:
    name, shade = m.groups()
    color = theme.shade(name, shade)
    if color is None:
        return None
    return color, shade_text(theme, shade)


def _arbitrary_color(m: re.Match, theme: Theme) -> tuple[str, str] | None:
    value = m.group(1)
    return value, resolve_contrast(value, theme.dark_text(), theme.light_text())


def _render_solid(style: ButtonStyle, ctx: RuleContext) -> RuleResult:
    return Properties(
        {
            'color': style.text,
            'border-color': style.color,
            'background-color': style.color,
        }
    )


def _render_ghost(style: ButtonStyle, ctx: RuleContext) -> RuleResult:
    # Properties can't carry pseudo-classes, so ghost buttons emit CSS text
    sel = escape_selector(ctx.raw_selector)
    c = style.color
    return RawBlock(
        f'.{sel} {{\n'
        f'  color: {c};\n'
        f'  border-color: {c};\n'
        f'  background-color: transparent;\n'
        f'}}\n'
        f'.{sel}:hover,\n'
        f'.{sel}:focus {{\n'
        f'  background-color: {c};\n'
        f'  border-color: {c};\n'
        f'  color: {style.text};\n'
        f'}}\n'
    )


_Resolver = Callable[[re.Match, Theme], tuple[str, str] | None]
_Renderer = Callable[[ButtonStyle, RuleContext], RuleResult]

_RENDERERS: dict[str, _Renderer] = {
    'solid': _render_solid,
    'ghost': _render_ghost,
}

# Declaration order is match order
_SHAPES: list[tuple[re.Pattern, str, _Resolver, dict]] = [
    (re.compile(r'^button-([a-z]+)-(\d+)$'), 'solid', _named_color, {'autocomplete': ['button-$colors']}),
    (re.compile(r'^button-ghost-([a-z]+)-(\d+)$'), 'ghost', _named_color, {'autocomplete': ['button-ghost-$colors']}),
    (re.compile(r'^button-\[(.+)\]$'), 'solid', _arbitrary_color, {}),
    (re.compile(r'^button-ghost-\[(.+)\]$'), 'ghost', _arbitrary_color, {}),
]


def _style(variant: str, resolver: _Resolver, m: re.Match, theme: Theme) -> ButtonStyle | None:
    found = resolver(m, theme)
    if found is None:
        return None
    color, text = found
    return ButtonStyle(variant=variant, color=color, text=text)


def _make_handler(variant: str, resolver: _Resolver):
    render = _RENDERERS[variant]

    def handler(m: re.Match, ctx: RuleContext) -> RuleResult | None:
        style = _style(variant, resolver, m, ctx.theme)
        if style is None:
            return None
        return render(style, ctx)

    return handler


def preset_button_painter() -> Preset:
    """Build the button preset: four rules in match order."""
    return Preset(
        name=PRESET_NAME,
        rules=[
            Rule(pattern=pattern, handler=_make_handler(variant, resolver), meta=dict(meta))
            for pattern, variant, resolver, meta in _SHAPES
        ],
    )


def match_rules(rules: list[Rule], candidate: str, ctx: RuleContext) -> RuleResult | None:
    """First rule whose pattern matches and whose handler yields a value wins."""
    for rule in rules:
        m = rule.pattern.fullmatch(candidate)
        if m is None:
            continue
        result = rule.handler(m, ctx)
        if result is not None:
            return result
    return None


def resolve(candidate: str, theme: Theme, preset: Preset | None = None) -> RuleResult | None:
    """Run one class name through the preset, as the host framework would."""
    preset = preset or preset_button_painter()
    return match_rules(preset.rules, candidate, RuleContext(theme=theme, raw_selector=candidate))


def describe(candidate: str, theme: Theme) -> ButtonStyle | None:
    """Resolve a class name to its colours without rendering CSS."""
    for pattern, variant, resolver, _meta in _SHAPES:
        m = pattern.fullmatch(candidate)
        if m is None:
            continue
        style = _style(variant, resolver, m, theme)
        if style is not None:
            return style
    return None


def suggestions(theme: Theme, preset: Preset | None = None) -> list[str]:
    """Autocomplete hints for every rule, with $colors expanded from the theme."""
    preset = preset or preset_button_painter()
    out: list[str] = []
    for rule in preset.rules:
        for template in rule.autocomplete:
            out.extend(expand_autocomplete(template, theme.colors))
    return out
