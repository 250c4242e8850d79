"""Mix colours toward black.

Subtracts --amount (0.0-1.0, default HEXCOLOUR_AMOUNT or 0.2) from each of
the normalized red, green and blue channels, flooring each at 0.0. Opacity
is unchanged.

Example:
    hexcolour shade '#e74c3c' --amount 0.1
"""

from hexcolour.core.codec import compose_normalized, shade_rgba
from hexcolour.core.palette import format_hex, parse_colour
from hexcolour.core.report import colour_fields
from hexcolour.core.types import Command, Report

command = Command(
    name='shade',
    help='Mix colours toward black by --amount.',
)


@command.run
def run(args, report: Report) -> None:
    for value in args.values:
        packed = parse_colour(value)
        shaded = shade_rgba(packed, args.amount)
        data = {'base': format_hex(packed), 'amount': args.amount}
        data.update(colour_fields(compose_normalized(shaded)))
        report.add(value, data)
