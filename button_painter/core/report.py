"""Report builder: CSS text and JSON output for matched button rules."""

import json
from typing import Any

from button_painter.core.types import Properties, RawBlock, Report, RuleResult

_IDENT_PUNCT = frozenset('-_')


def escape_selector(raw: str) -> str:
    """Escape a raw class name for use after '.' in a CSS selector.

    button-[#fff] -> button-\\[\\#fff\\]
    """
    out = []
    for i, ch in enumerate(raw):
        if ch.isascii() and (ch.isalnum() or ch in _IDENT_PUNCT):
            if i == 0 and ch.isdigit():
                out.append(f'\\3{ch} ')
            else:
                out.append(ch)
        else:
            out.append('\\' + ch)
    return ''.join(out)


def render_properties(selector: str, properties: dict[str, str]) -> str:
    body = ''.join(f'  {prop}: {value};\n' for prop, value in properties.items())
    return f'.{escape_selector(selector)} {{\n{body}}}'


def render_rule(selector: str, result: RuleResult) -> str:
    """Render one matched rule as CSS text."""
    if isinstance(result, Properties):
        return render_properties(selector, result.properties)
    return result.css.strip()


def format_text(report: Report) -> str:
    """Format report as a CSS stylesheet."""
    lines = []
    if report.preset:
        lines.append(f'/* {report.preset} */')
    lines.extend(render_rule(selector, result) for selector, result in report.rules)
    return '\n\n'.join(lines) + '\n' if lines else ''


def _rule_json(selector: str, result: RuleResult) -> dict[str, Any]:
    if isinstance(result, Properties):
        return {'selector': selector, 'kind': 'properties', 'properties': dict(result.properties)}
    if isinstance(result, RawBlock):
        return {'selector': selector, 'kind': 'raw', 'css': result.css.strip()}
    raise TypeError(f'Unknown rule result: {result!r}')


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'preset': report.preset,
        'rules': [_rule_json(selector, result) for selector, result in report.rules],
        'unmatched': list(report.unmatched),
        'summary': {
            'matched': len(report.rules),
            'unmatched': len(report.unmatched),
        },
    }
    return json.dumps(obj, indent=2)
