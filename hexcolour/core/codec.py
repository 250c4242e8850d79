"""Hex colour codec — pack/unpack 32-bit RGBA values, derive tints and shades.

A packed value holds four 8-bit channels, most-significant byte first:

    0xRRGGBBAA

Normalized channels are floats in [0.0, 1.0] (the 8-bit value divided by 255).
Out-of-range input is always clamped, never rejected. The only operation with
a "no value" outcome is to_rgba(), which returns None for colour-space models
that cannot be expressed as RGBA.

Scalar functions work on plain ints/floats. unpack_array() and pack_array()
are the numpy forms used for whole images and swatch rendering.
"""

from __future__ import annotations

import numpy as np

from hexcolour.core.types import MONOCHROME, RGB, RGBA, Colour

MAX_PACKED = 0xFFFFFFFF
# Absorbs float error in value * 255 so n / 255 maps back to n and k.5 stays a half
_FLOAT_TOLERANCE = 1e-9


def _clamp_channel(value: int) -> int:
    # Negative channels clamp to 0 instead of wrapping like unsigned maths would
    return max(0, min(255, int(value)))


def _clamp_unit(value: float) -> float:
    return min(1.0, max(0.0, float(value)))


def decompose_rgba(packed: int) -> RGBA:
    """Return normalized (r, g, b, a) for an RGBA hex value (0xRRGGBBAA)."""
    s = min(int(packed), MAX_PACKED)
    red = ((s & 0xFF000000) >> 24) / 255.0
    green = ((s & 0x00FF0000) >> 16) / 255.0
    blue = ((s & 0x0000FF00) >> 8) / 255.0
    alpha = (s & 0x000000FF) / 255.0
    return (red, green, blue, alpha)


def decompose_rgb(packed: int) -> RGBA:
    """Return normalized (r, g, b, a) for an RGB hex value (0xRRGGBB), alpha 1.0."""
    return decompose_rgba((int(packed) << 8) + 255)


def compose_8bit_rgba(red: int, green: int, blue: int, alpha: float = 1.0) -> int:
    """Pack 8-bit channels and a 0.0-1.0 opacity into an RGBA hex value.

    Channels are clamped to [0, 255], alpha to [0.0, 1.0]. Alpha is scaled by
    255 and rounded half up (2.5 -> 3, not to the even 2), so compose then
    decompose is exact for 8-bit alphas.
    """
    r = _clamp_channel(red)
    g = _clamp_channel(green)
    b = _clamp_channel(blue)
    a = int(_clamp_unit(alpha) * 255 + 0.5 + _FLOAT_TOLERANCE)
    return (r << 24) + (g << 16) + (b << 8) + a


def encode_8bit(red8: int, green8: int, blue8: int, alpha: float = 1.0) -> RGBA:
    """Normalize explicit 8-bit channels without going through a packed value."""
    return (
        _clamp_channel(red8) / 255.0,
        _clamp_channel(green8) / 255.0,
        _clamp_channel(blue8) / 255.0,
        _clamp_unit(alpha),
    )


def tint_rgba(packed: int, amount: float) -> RGBA:
    """Mix an RGBA hex value toward white.

    `amount` (clamped to [0, 1]) is added to each of r, g, b and each channel
    is capped at 1.0. Alpha is left alone.
    """
    x = _clamp_unit(amount)
    r, g, b, a = decompose_rgba(packed)
    return (min(r + x, 1.0), min(g + x, 1.0), min(b + x, 1.0), a)


def tint_rgb(packed: int, amount: float) -> RGBA:
    return tint_rgba((int(packed) << 8) + 255, amount)


def shade_rgba(packed: int, amount: float) -> RGBA:
    """Mix an RGBA hex value toward black, flooring each of r, g, b at 0.0."""
    x = _clamp_unit(amount)
    r, g, b, a = decompose_rgba(packed)
    return (max(r - x, 0.0), max(g - x, 0.0), max(b - x, 0.0), a)


def shade_rgb(packed: int, amount: float) -> RGBA:
    return shade_rgba((int(packed) << 8) + 255, amount)


def _to_8bit(value: float) -> int:
    return int(value * 255 + _FLOAT_TOLERANCE)


def compose_normalized(rgba: RGBA) -> int:
    """Pack a normalized (r, g, b, a) tuple, truncating channels like to_rgba."""
    r, g, b, a = rgba
    return compose_8bit_rgba(_to_8bit(r), _to_8bit(g), _to_8bit(b), a)


def to_rgba(colour: Colour) -> int | None:
    """Return the RGBA hex value of a colour descriptor.

    RGB colours pack their (r, g, b, a) components directly; monochrome
    colours broadcast (gray, a) to all three channels. Any other model
    returns None: the colour has no RGBA representation.

    Channels scale by 255 and truncate (gray 0.5 -> 0x7F). A 1e-9 tolerance is
    added before truncating so components that came from 8-bit values, such as
    46 / 255, land back on 46 rather than 45 after float error.
    """
    c = colour.components
    if colour.model == RGB:
        return compose_normalized((c[0], c[1], c[2], c[3]))
    if colour.model == MONOCHROME:
        return compose_normalized((c[0], c[0], c[0], c[1]))
    return None


def unpack_array(packed: np.ndarray) -> np.ndarray:
    """Unpack an array of RGBA hex values into uint8 channels (trailing axis of 4)."""
    # int64 keeps values above 0xFFFFFFFF intact until the clamp
    arr = np.minimum(np.asarray(packed, dtype=np.int64), MAX_PACKED)
    shifts = np.array([24, 16, 8, 0], dtype=np.int64)
    return ((arr[..., np.newaxis] >> shifts) & 0xFF).astype(np.uint8)


def pack_array(channels: np.ndarray) -> np.ndarray:
    """Pack 8-bit channels (trailing axis of 3 or 4) into uint32 RGBA hex values.

    A trailing axis of 3 is treated as opaque RGB. Channels are clipped to
    [0, 255] first.
    """
    arr = np.clip(np.asarray(channels, dtype=np.int64), 0, 255)
    if arr.shape[-1] == 3:
        alpha = np.full(arr.shape[:-1] + (1,), 255, dtype=np.int64)
        arr = np.concatenate([arr, alpha], axis=-1)
    elif arr.shape[-1] != 4:
        raise ValueError(f'Expected 3 or 4 channels, got {arr.shape[-1]}')
    packed = (arr[..., 0] << 24) + (arr[..., 1] << 16) + (arr[..., 2] << 8) + arr[..., 3]
    return packed.astype(np.uint32)
