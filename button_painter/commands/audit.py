"""Audit theme shades: shade-number text colour vs luminance text colour.

Theme buttons (button-{color}-{shade}) pick their text colour from the shade
number alone: <= 400 gets dark text. Arbitrary colours use WCAG relative
luminance instead. This command runs both policies over every shaded theme
colour and flags where they disagree, together with the WCAG contrast ratio
of the text colour the theme button actually gets.

Ratios below 4.5 fail WCAG AA for normal text. Opaque colours (hsl(), CSS
variables, named colours) have no luminance and are reported as such.

Output is unchanged by the audit; the shade rule stays as it is.

Example:
    button-painter audit --theme theme.json
    button-painter audit --theme theme.json --json --fail-on-mismatch
"""

import json
import re
import sys
from typing import Any

import numpy as np

from button_painter.core.colors import LUMINANCE_THRESHOLD, contrast_ratio, luminance_array, parse_rgb
from button_painter.core.types import Command
from button_painter.rules import shade_text

command = Command(
    name='audit',
    help='Compare shade-number text colours against WCAG luminance for each theme shade.',
)

_SHADED_KEY = re.compile(r'^([a-z]+)-(\d+)$')

AA_NORMAL = 4.5


def audit_theme(theme) -> list[dict[str, Any]]:
    """One row per shaded theme colour, in theme order."""
    dark, light = theme.dark_text(), theme.light_text()

    rows: list[dict[str, Any]] = []
    for key, color in theme.flat().items():
        m = _SHADED_KEY.match(key)
        if m is None or not isinstance(color, str):
            continue
        rows.append(
            {
                'name': key,
                'shade': int(m.group(2)),
                'color': color,
                'rgb': parse_rgb(color),
                'shade_text': shade_text(theme, m.group(2)),
            }
        )

    parsed = [row for row in rows if row['rgb'] is not None]
    lums = luminance_array(np.array([row['rgb'] for row in parsed])) if parsed else np.empty(0)
    for row, lum in zip(parsed, lums):
        row['luminance'] = round(float(lum), 4)

    for row in rows:
        rgb = row.pop('rgb')
        lum = row.setdefault('luminance', None)
        row['luminance_text'] = dark if lum is not None and lum > LUMINANCE_THRESHOLD else light
        row['agree'] = row['shade_text'] == row['luminance_text']
        text_rgb = parse_rgb(row['shade_text'])
        row['ratio'] = round(contrast_ratio(rgb, text_rgb), 2) if rgb and text_rgb else None
    return rows


def _format_text(rows: list[dict[str, Any]]) -> str:
    lines = []
    for row in rows:
        lum = 'opaque' if row['luminance'] is None else f'{row["luminance"]:.3f}'
        ratio = '?' if row['ratio'] is None else f'{row["ratio"]:.2f}'
        mark = '✓' if row['agree'] else '✗'
        warn = '  AA-fail' if row['ratio'] is not None and row['ratio'] < AA_NORMAL else ''
        lines.append(
            f'{row["name"]:<20} {row["color"]:<10} L={lum:<7} '
            f'shade→{row["shade_text"]:<9} luminance→{row["luminance_text"]:<9} '
            f'ratio={ratio:<6} {mark}{warn}'
        )
    mismatches = sum(1 for row in rows if not row['agree'])
    lines.append('')
    lines.append(f'{len(rows)} shades, {mismatches} disagree')
    return '\n'.join(lines)


@command.run
def run(theme, candidates: list[str], args) -> int:
    rows = audit_theme(theme)
    mismatches = [row for row in rows if not row['agree']]

    if args.json:
        print(
            json.dumps(
                {
                    'shades': rows,
                    'summary': {'total': len(rows), 'disagree': len(mismatches)},
                },
                indent=2,
            )
        )
    else:
        print(_format_text(rows))

    if getattr(args, 'fail_on_mismatch', False) and mismatches:
        print(f'\nFAIL: {len(mismatches)} shade(s) disagree with luminance', file=sys.stderr)
        return 1
    return 0
