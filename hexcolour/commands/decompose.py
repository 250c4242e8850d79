"""Unpack hex colours into normalized and 8-bit channels.

Each value is a hex string or palette name. Six-digit values are RGB with
alpha forced to 0xFF; eight-digit values are RGBA.

Output per colour: packed hex and int, normalized (r, g, b, a),
8-bit (r, g, b, a), and the nearest palette name within distance 30.

Example:
    hexcolour decompose '#2ecc71' 0x34495ebf peterriver
"""

from hexcolour.core.palette import parse_colour
from hexcolour.core.report import colour_fields
from hexcolour.core.types import Command, Report

command = Command(
    name='decompose',
    help='Unpack hex colours into normalized and 8-bit channels.',
)


@command.run
def run(args, report: Report) -> None:
    for value in args.values:
        report.add(value, colour_fields(parse_colour(value)))
