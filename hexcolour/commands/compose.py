"""Pack 8-bit red, green, blue and an optional 0.0-1.0 opacity into a hex value.

Channels are clamped to [0, 255] (negative values clamp to 0), opacity to
[0.0, 1.0]. Opacity defaults to 1.0.

Example:
    hexcolour compose 46 204 113
    hexcolour compose 46 204 113 0.5 --json
"""

from hexcolour.core.codec import compose_8bit_rgba, encode_8bit
from hexcolour.core.report import colour_fields
from hexcolour.core.types import Command, Report

command = Command(
    name='compose',
    help='Pack 8-bit r g b [alpha] into an RGBA hex value.',
)


@command.run
def run(args, report: Report) -> None:
    if len(args.values) not in (3, 4):
        raise ValueError(f'compose takes r g b [alpha], got {len(args.values)} value(s)')
    red, green, blue = (int(v) for v in args.values[:3])
    alpha = float(args.values[3]) if len(args.values) == 4 else 1.0

    packed = compose_8bit_rgba(red, green, blue, alpha)
    data = colour_fields(packed)
    data['normalized'] = [round(v, 4) for v in encode_8bit(red, green, blue, alpha)]
    report.add(' '.join(args.values), data)
