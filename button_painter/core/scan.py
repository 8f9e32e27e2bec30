"""Pull candidate class names out of markup or templates.

Tokens are split on whitespace, quotes, backticks, '<', '>' and '=', the same
loose extraction a utility-CSS host applies before trying its rules.
Arbitrary values containing spaces (rgb(1, 2, 3)) are not recovered.
"""

import re
from pathlib import Path

_SPLIT_RE = re.compile(r'[\s\'"`<>=]+')

DEFAULT_PREFIX = 'button-'


def extract_candidates(text: str, prefix: str = DEFAULT_PREFIX) -> list[str]:
    """Unique tokens starting with `prefix`, in first-seen order."""
    seen: dict[str, None] = {}
    for token in _SPLIT_RE.split(text):
        if token.startswith(prefix):
            seen.setdefault(token, None)
    return list(seen)


def scan_file(path: str | Path, prefix: str = DEFAULT_PREFIX) -> list[str]:
    with open(path, encoding='utf-8') as f:
        return extract_candidates(f.read(), prefix)
