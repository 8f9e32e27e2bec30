"""Colour literal parsing and WCAG luminance / contrast helpers.

Supported literals:
  #rgb         each nibble doubled (#abc == #aabbcc)
  #rrggbb      byte pairs
  rgb()/rgba() first three integer channels, alpha ignored

Anything else (hsl(), var(--x), named colours, #rgba, #rrggbbaa) is opaque:
parse_rgb() returns None and resolve_contrast() picks the light fallback.
"""

import re

import numpy as np

RGB = tuple[int, int, int]

_HEX_RE = re.compile(r'[0-9a-fA-F]+')
_RGB_RE = re.compile(r'rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)')

# WCAG 2.0 sRGB linearisation knee and channel weights
_KNEE = 0.03928
_WEIGHTS = (0.2126, 0.7152, 0.0722)

LUMINANCE_THRESHOLD = 0.5


def parse_rgb(color: str) -> RGB | None:
    """Parse a hex or rgb()/rgba() literal into an (r, g, b) triple, else None."""
    if not isinstance(color, str):
        return None

    if color.startswith('#'):
        digits = color[1:]
        if not _HEX_RE.fullmatch(digits):
            return None
        if len(digits) == 3:
            return (int(digits[0] * 2, 16), int(digits[1] * 2, 16), int(digits[2] * 2, 16))
        if len(digits) == 6:
            return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
        return None

    if color.startswith('rgb'):
        m = _RGB_RE.match(color)
        if not m:
            return None
        channels = tuple(int(v) for v in m.groups())
        if any(c > 255 for c in channels):
            return None
        return channels  # type: ignore[return-value]

    return None


def _linearize(channel: int) -> float:
    c = channel / 255
    return c / 12.92 if c <= _KNEE else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: RGB) -> float:
    """WCAG relative luminance of an (r, g, b) triple, in [0, 1]."""
    r, g, b = rgb
    wr, wg, wb = _WEIGHTS
    return wr * _linearize(r) + wg * _linearize(g) + wb * _linearize(b)


def luminance_array(rgbs: np.ndarray) -> np.ndarray:
    """Vectorised relative_luminance() over an (N, 3) array of channels."""
    c = np.asarray(rgbs, dtype=float).reshape(-1, 3) / 255.0
    linear = np.where(c <= _KNEE, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)
    return linear @ np.array(_WEIGHTS)


def contrast_ratio(a: RGB, b: RGB) -> float:
    """WCAG contrast ratio between two colours, 1.0 to 21.0."""
    la = relative_luminance(a)
    lb = relative_luminance(b)
    lighter, darker = max(la, lb), min(la, lb)
    return (lighter + 0.05) / (darker + 0.05)


def resolve_contrast(candidate: str, dark: str, light: str) -> str:
    """Pick the text colour that reads best on `candidate`.

    Returns `dark` when the background's luminance exceeds 0.5, otherwise
    `light`. Unparseable backgrounds always get `light`.
    """
    rgb = parse_rgb(candidate)
    if rgb is None:
        return light
    return dark if relative_luminance(rgb) > LUMINANCE_THRESHOLD else light
