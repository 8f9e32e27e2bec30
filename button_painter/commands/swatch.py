"""Render a PNG preview of button class names.

One row per resolved candidate. Solid buttons are drawn filled with their
computed text colour. Ghost buttons are drawn twice: at rest (outline and
coloured text on the page background) and on :hover/:focus (filled).

Colours that neither Pillow nor parse_rgb can read (CSS variables, for one)
are skipped with a warning on stderr. Unresolved candidates are skipped
silently unless --verbose is given.

Example:
    button-painter swatch button-blue-500 button-ghost-rose-300 -o buttons.png
    button-painter swatch --input index.html --theme theme.json
"""

import json
import os
import sys

from PIL import Image, ImageColor, ImageDraw, ImageFont

from button_painter.core.colors import parse_rgb
from button_painter.core.types import Command
from button_painter.rules import ButtonStyle, describe

command = Command(
    name='swatch',
    help='Render a PNG preview of the resolved buttons.',
)

DEFAULT_OUTPUT = 'button-swatch.png'

BUTTON_W = 260
BUTTON_H = 40
PAD = 12
BORDER = 2
PAGE_BG = (255, 255, 255)


def _rgb(color: str) -> tuple[int, int, int]:
    """Pillow's colour parser, then the rule parser (which also takes fractional rgba alpha)."""
    try:
        return ImageColor.getrgb(color)[:3]
    except ValueError:
        rgb = parse_rgb(color)
        if rgb is None:
            raise
        return rgb


def _draw_button(
    draw: ImageDraw.ImageDraw,
    x: int,
    y: int,
    label: str,
    fill: tuple[int, int, int],
    outline: tuple[int, int, int],
    text: tuple[int, int, int],
    font,
) -> None:
    draw.rectangle((x, y, x + BUTTON_W, y + BUTTON_H), fill=fill, outline=outline, width=BORDER)
    left, top, right, bottom = draw.textbbox((0, 0), label, font=font)
    tx = x + (BUTTON_W - (right - left)) // 2 - left
    ty = y + (BUTTON_H - (bottom - top)) // 2 - top
    draw.text((tx, ty), label, fill=text, font=font)


def render_swatch(styles: list[tuple[str, ButtonStyle]]) -> Image.Image:
    """Draw one row per (class name, style); ghost rows get a hover column."""
    cols = 2 if any(style.variant == 'ghost' for _name, style in styles) else 1
    width = PAD + cols * (BUTTON_W + PAD)
    height = PAD + max(len(styles), 1) * (BUTTON_H + PAD)
    image = Image.new('RGB', (width, height), PAGE_BG)
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default()

    for i, (name, style) in enumerate(styles):
        y = PAD + i * (BUTTON_H + PAD)
        color = _rgb(style.color)
        text = _rgb(style.text)
        if style.variant == 'solid':
            _draw_button(draw, PAD, y, name, color, color, text, font)
        else:
            _draw_button(draw, PAD, y, name, PAGE_BG, color, color, font)
            _draw_button(draw, 2 * PAD + BUTTON_W, y, ':hover', color, color, text, font)
    return image


def collect_styles(theme, candidates: list[str], verbose: bool = False) -> list[tuple[str, ButtonStyle]]:
    styles = []
    for candidate in candidates:
        style = describe(candidate, theme)
        if style is None:
            if verbose:
                print(f'button-painter: no rule matched {candidate!r}', file=sys.stderr)
            continue
        try:
            _rgb(style.color)
            _rgb(style.text)
        except ValueError:
            print(f'button-painter: cannot draw {candidate!r}: {style.color} / {style.text}', file=sys.stderr)
            continue
        styles.append((candidate, style))
    return styles


@command.run
def run(theme, candidates: list[str], args) -> int:
    styles = collect_styles(theme, candidates, verbose=getattr(args, 'verbose', False))
    output = getattr(args, 'output', None) or DEFAULT_OUTPUT

    parent = os.path.dirname(output)
    if parent:
        os.makedirs(parent, exist_ok=True)
    image = render_swatch(styles)
    image.save(output)

    if args.json:
        print(json.dumps({'file': output, 'buttons': len(styles), 'width': image.width, 'height': image.height}, indent=2))
    else:
        print(f'button-painter: wrote {len(styles)} button(s) to {output}')
    return 0
