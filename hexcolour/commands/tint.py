"""Mix colours toward white.

Adds --amount (0.0-1.0, default HEXCOLOUR_AMOUNT or 0.2) to each of the
normalized red, green and blue channels, capping each at 1.0. Opacity is
unchanged.

Example:
    hexcolour tint emerald --amount 0.3
"""

from hexcolour.core.codec import compose_normalized, tint_rgba
from hexcolour.core.palette import format_hex, parse_colour
from hexcolour.core.report import colour_fields
from hexcolour.core.types import Command, Report

command = Command(
    name='tint',
    help='Mix colours toward white by --amount.',
)


@command.run
def run(args, report: Report) -> None:
    for value in args.values:
        packed = parse_colour(value)
        tinted = tint_rgba(packed, args.amount)
        data = {'base': format_hex(packed), 'amount': args.amount}
        data.update(colour_fields(compose_normalized(tinted)))
        report.add(value, data)
