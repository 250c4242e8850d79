"""Render a shade-to-tint ramp for each colour as a PNG.

The ramp runs from the darkest shade through the base colour to the
lightest tint: --steps cells on each side (default HEXCOLOUR_STEPS or 4),
each --amount further from the base (default HEXCOLOUR_AMOUNT or 0.2).
Amounts past 1.0 clamp, so outer cells saturate at black and white.

Saves to <out>/<rrggbbaa>_swatch.png (--out or HEXCOLOUR_OUT_DIR).

Example:
    hexcolour swatch emerald alizarin --steps 3 --out ./tmp
"""

import os

import numpy as np
from PIL import Image

from hexcolour.core.codec import compose_normalized, shade_rgba, tint_rgba, unpack_array
from hexcolour.core.palette import format_hex, parse_colour
from hexcolour.core.types import Command, Report

command = Command(
    name='swatch',
    help='Render a shade -> base -> tint ramp PNG per colour.',
)

CELL = 48


def ramp(packed: int, steps: int, amount: float) -> list[int]:
    """Packed values from darkest shade to lightest tint, base in the middle."""
    shades = [compose_normalized(shade_rgba(packed, amount * k)) for k in range(steps, 0, -1)]
    tints = [compose_normalized(tint_rgba(packed, amount * k)) for k in range(1, steps + 1)]
    return shades + [packed] + tints


def render(values: list[int], cell: int = CELL) -> Image.Image:
    """One cell x cell square per packed value, left to right."""
    row = unpack_array(np.array(values, dtype=np.int64))[np.newaxis]
    pixels = np.repeat(np.repeat(row, cell, axis=0), cell, axis=1)
    return Image.fromarray(pixels)


@command.run
def run(args, report: Report) -> None:
    os.makedirs(args.out, exist_ok=True)
    for value in args.values:
        packed = parse_colour(value)
        values = ramp(packed, args.steps, args.amount)
        path = os.path.join(args.out, f'{format_hex(packed)[1:]}_swatch.png')
        render(values).save(path)
        report.add(
            value,
            {
                'file': path,
                'ramp': [format_hex(v) for v in values],
            },
        )
