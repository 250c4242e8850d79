"""Pillow boundary: map pixels to Colour descriptors and codec output to Pillow colours.

Pillow has no colour object of its own. A colour is an image mode plus a
pixel tuple, so the mode decides the colour-space model:

    RGB, RGBA, RGBX, RGBa, P      -> 'rgb'
    L, LA, La, 1                  -> 'monochrome'
    CMYK, YCbCr, LAB, HSV, I, F   -> not representable as RGBA

Palette ('P') and premultiplied-alpha ('RGBa', 'La') images are converted to
straight alpha before sampling, for single pixels and whole images alike.
"""

from __future__ import annotations

import numpy as np
from PIL import Image

from hexcolour.core.codec import compose_normalized, decompose_rgba, pack_array
from hexcolour.core.types import MONOCHROME, RGB, RGBA, Colour

MODE_MODELS: dict[str, str] = {
    'RGB': RGB,
    'RGBA': RGB,
    'RGBX': RGB,
    'RGBa': RGB,
    'P': RGB,
    'L': MONOCHROME,
    'LA': MONOCHROME,
    'La': MONOCHROME,
    '1': MONOCHROME,
    'CMYK': 'cmyk',
    'YCbCr': 'ycbcr',
    'LAB': 'lab',
    'HSV': 'hsv',
    'I': 'integer',
    'F': 'float',
}

# Modes whose last band is alpha
_ALPHA_MODES = {'RGBA', 'RGBa', 'LA', 'La'}

# Modes converted before their pixels are read
_STRAIGHT_MODES = {'P': 'RGBA', 'RGBa': 'RGBA', 'La': 'LA'}


def colour_from_pixel(mode: str, pixel: int | float | tuple) -> Colour:
    """Build a Colour from a Pillow mode and the value getpixel() returned.

    Alpha is taken as straight; colour_at() un-premultiplies RGBa/La first.
    """
    model = MODE_MODELS.get(mode, mode.lower())
    values = pixel if isinstance(pixel, tuple) else (pixel,)

    if mode == '1':
        # Bilevel pixels are 0 or 255 (some Pillow versions return bool-ish 1)
        values = (255 if values[0] else 0,)
    if model not in (RGB, MONOCHROME):
        return Colour(model, tuple(float(v) for v in values))

    norm = [v / 255.0 for v in values]
    if mode in _ALPHA_MODES:
        colour, alpha = norm[:-1], norm[-1]
    else:
        colour, alpha = norm, 1.0
    if model == RGB:
        return Colour.from_rgba((colour[0], colour[1], colour[2], alpha))
    return Colour(MONOCHROME, (colour[0], alpha))


def _straight(image: Image.Image) -> Image.Image:
    mode = _STRAIGHT_MODES.get(image.mode)
    return image.convert(mode) if mode else image


def colour_at(image: Image.Image, xy: tuple[int, int]) -> Colour:
    """Sample one pixel of an image as a Colour."""
    image = _straight(image)
    return colour_from_pixel(image.mode, image.getpixel(xy))


def to_pil_colour(rgba: RGBA) -> tuple[int, int, int, int]:
    """8-bit (r, g, b, a) for Image.new()/ImageDraw from a normalized tuple."""
    return pil_colour(compose_normalized(rgba))


def pil_colour(packed: int) -> tuple[int, int, int, int]:
    """8-bit (r, g, b, a) for a packed RGBA value."""
    r, g, b, a = decompose_rgba(packed)
    return (round(r * 255), round(g * 255), round(b * 255), round(a * 255))


def pack_image(image: Image.Image) -> np.ndarray | None:
    """Pack every pixel of an image into RGBA hex values (shape height x width).

    Returns None for modes with no RGBA representation, the same outcome
    to_rgba() gives for a single pixel of such an image.
    """
    if MODE_MODELS.get(image.mode) not in (RGB, MONOCHROME):
        return None
    return pack_array(np.asarray(_straight(image).convert('RGBA')))
