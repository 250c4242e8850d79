"""hexcolour — pack, unpack, tint and shade 32-bit RGBA hex colours."""

from hexcolour.core.codec import (
    compose_8bit_rgba,
    decompose_rgb,
    decompose_rgba,
    encode_8bit,
    shade_rgb,
    shade_rgba,
    tint_rgb,
    tint_rgba,
    to_rgba,
)
from hexcolour.core.types import Colour

__all__ = [
    'Colour',
    'compose_8bit_rgba',
    'decompose_rgb',
    'decompose_rgba',
    'encode_8bit',
    'shade_rgb',
    'shade_rgba',
    'tint_rgb',
    'tint_rgba',
    'to_rgba',
]
