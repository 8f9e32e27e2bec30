"""Generate CSS for button class names.

Each candidate is run through the preset's rules in order; the first rule
that matches and resolves a colour wins. Solid buttons render as a plain
rule, ghost buttons as a base rule plus :hover/:focus.

Candidates that no rule resolves (unknown colour, missing shade, other
utilities) are left out of the output. Use --verbose to list them on stderr,
--fail-on-unmatched to exit 1 when there are any.

Example:
    button-painter css button-blue-500 button-ghost-red-300 'button-[#0ea5e9]'
    button-painter css --input index.html --theme theme.json
    button-painter css --input index.html --json
"""

import sys

from button_painter.core.report import format_json, format_text
from button_painter.core.types import Command, Report
from button_painter.rules import preset_button_painter, resolve

command = Command(
    name='css',
    help='Generate CSS for button class names (solid, ghost, arbitrary colours).',
)


def build_report(theme, candidates: list[str]) -> Report:
    preset = preset_button_painter()
    report = Report(preset=preset.name)
    for candidate in candidates:
        result = resolve(candidate, theme, preset)
        if result is None:
            report.record_unmatched(candidate)
        else:
            report.add(candidate, result)
    return report


@command.run
def run(theme, candidates: list[str], args) -> int:
    report = build_report(theme, candidates)

    if getattr(args, 'verbose', False):
        for candidate in report.unmatched:
            print(f'button-painter: no rule matched {candidate!r}', file=sys.stderr)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report), end='')

    if getattr(args, 'fail_on_unmatched', False) and report.unmatched:
        print(f'\nFAIL: {len(report.unmatched)} class name(s) unmatched', file=sys.stderr)
        return 1
    return 0
