"""List autocomplete suggestions for the button rules.

Expands each rule's hint template ($colors becomes every flattened theme key,
DEFAULT shades collapsing to the bare group name). Arbitrary-value rules carry
no hints.

Example:
    button-painter autocomplete --theme theme.json
    button-painter autocomplete --prefix button-ghost-blue
"""

import json

from button_painter.core.types import Command
from button_painter.rules import suggestions

command = Command(
    name='autocomplete',
    help='List autocomplete suggestions expanded from the theme colours.',
)


@command.run
def run(theme, candidates: list[str], args) -> int:
    hints = suggestions(theme)
    prefix = getattr(args, 'prefix', None)
    if prefix:
        hints = [h for h in hints if h.startswith(prefix)]

    if args.json:
        print(json.dumps({'suggestions': hints}, indent=2))
    else:
        for hint in hints:
            print(hint)
    return 0
