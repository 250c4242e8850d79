"""Named colours and hex string parsing.

NAMED is the flat UI palette plus white/black/transparent, keyed by
lowercase name. parse_colour() accepts any of:

    emerald        palette name (case-insensitive)
    #2ecc71        RGB, alpha forced to 0xFF
    #2ecc71ff      RGBA
    #2c7           short RGB
    0x2ECC71FF     0x prefix, or bare hex digits

and always returns a packed RGBA value.
"""

import math
import string

from hexcolour.core.codec import MAX_PACKED

NAMED: dict[str, str] = {
    'turquoise': '#1abc9c',
    'greensea': '#16a085',
    'emerald': '#2ecc71',
    'nephritis': '#27ae60',
    'peterriver': '#3498db',
    'belizehole': '#2980b9',
    'amethyst': '#9b59b6',
    'wisteria': '#8e44ad',
    'wetasphalt': '#34495e',
    'midnightblue': '#2c3e50',
    'sunflower': '#f1c40f',
    'orange': '#f39c12',
    'carrot': '#e67e22',
    'pumpkin': '#d35400',
    'alizarin': '#e74c3c',
    'pomegranate': '#c0392b',
    'clouds': '#ecf0f1',
    'silver': '#bdc3c7',
    'concrete': '#95a5a6',
    'asbestos': '#7f8c8d',
    'white': '#ffffff',
    'black': '#000000',
    'transparent': '#00000000',
}


class ColourParseError(ValueError):
    """Raised when a string is neither a hex colour nor a palette name."""


def _strip_prefix(text: str) -> str:
    if text.startswith('#'):
        return text[1:]
    if text.startswith('0x'):
        return text[2:]
    return text


def parse_colour(text: str) -> int:
    """Parse a hex string or palette name into a packed RGBA value."""
    key = text.strip().lower()
    if key in NAMED:
        key = NAMED[key]
    digits = _strip_prefix(key)
    if len(digits) == 3:
        digits = ''.join(ch * 2 for ch in digits)
    if len(digits) not in (6, 8):
        raise ColourParseError(f'Not a colour: {text!r} (expected #rrggbb, #rrggbbaa or a palette name)')
    # int(..., 16) alone would also take signs, underscores and whitespace
    if not all(ch in string.hexdigits for ch in digits):
        raise ColourParseError(f'Not a colour: {text!r} (invalid hex digits)')
    value = int(digits, 16)
    if len(digits) == 6:
        return (value << 8) + 255
    return value


def format_hex(packed: int, alpha: bool = True) -> str:
    """Format a packed RGBA value as '#rrggbbaa' (or '#rrggbb' without alpha)."""
    s = min(int(packed), MAX_PACKED)
    if alpha:
        return f'#{s:08x}'
    return f'#{s >> 8:06x}'


def rgb_distance(a: int, b: int) -> float:
    """Euclidean RGB distance between two packed values. Alpha is ignored."""
    da = [(a >> shift) & 0xFF for shift in (24, 16, 8)]
    db = [(b >> shift) & 0xFF for shift in (24, 16, 8)]
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(da, db)))


def nearest_name(packed: int, threshold: float = 30.0) -> tuple[str | None, float]:
    """Find the closest palette name within `threshold`.

    Returns (name, distance), or (None, distance) if nothing is close enough.
    """
    best_name: str | None = None
    best_dist = float('inf')
    for name, hex_val in NAMED.items():
        dist = rgb_distance(packed, parse_colour(hex_val))
        if dist < best_dist:
            best_name, best_dist = name, dist
    if best_dist > threshold:
        return None, best_dist
    return best_name, best_dist
