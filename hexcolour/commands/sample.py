"""Pack image pixels as RGBA hex values.

With --at x,y, reads one pixel. The image mode decides how it is read:
RGB(A) pixels pack directly, grayscale (L, LA, 1) pixels broadcast gray to
red, green and blue. Any other mode (CMYK, YCbCr, LAB, HSV, I, F) has no
RGBA form and is reported as not representable rather than converted.

Without --at, packs the whole image and reports the 5 most common colours
with their share of the pixels.

Example:
    hexcolour sample screenshot.png --at 120,40
    hexcolour sample screenshot.png --json
"""

import os

import numpy as np
from PIL import Image

from hexcolour.core.adapter import colour_at, pack_image
from hexcolour.core.codec import to_rgba
from hexcolour.core.palette import format_hex
from hexcolour.core.report import colour_fields
from hexcolour.core.types import Command, Report

command = Command(
    name='sample',
    help='Pack image pixels as RGBA hex (or report them as not representable).',
)

TOP_N = 5


def _parse_xy(text: str) -> tuple[int, int]:
    x, sep, y = text.partition(',')
    if not sep:
        raise ValueError(f'--at expects x,y, got {text!r}')
    return int(x), int(y)


def _sample_pixel(image: Image.Image, path: str, xy: tuple[int, int], report: Report) -> None:
    if not (0 <= xy[0] < image.width and 0 <= xy[1] < image.height):
        raise ValueError(f'--at {xy[0]},{xy[1]} is outside {image.width}x{image.height} image {path}')
    colour = colour_at(image, xy)
    label = f'{path}@{xy[0]},{xy[1]}'
    report.add(label, {'mode': image.mode, 'model': colour.model})

    packed = to_rgba(colour)
    if packed is None:
        report.record_unrepresentable(label)
    else:
        report.add(label, colour_fields(packed))


def _sample_image(image: Image.Image, path: str, report: Report) -> None:
    report.add(path, {'mode': image.mode})
    packed = pack_image(image)
    if packed is None:
        report.record_unrepresentable(path)
        return

    unique, counts = np.unique(packed.ravel(), return_counts=True)
    order = np.argsort(-counts, kind='stable')[:TOP_N]
    total = int(counts.sum())
    top = [{'hex': format_hex(int(unique[i])), 'pct': round(float(counts[i]) / total * 100.0, 1)} for i in order]
    report.add(path, {'pixels': total, 'top': top})


@command.run
def run(args, report: Report) -> None:
    xy = _parse_xy(args.at) if args.at else None
    for path in args.values:
        if not os.path.isfile(path):
            raise FileNotFoundError(f'image not found: {path}')

        with Image.open(path) as image:
            if xy is None:
                _sample_image(image, path, report)
            else:
                _sample_pixel(image, path, xy, report)
