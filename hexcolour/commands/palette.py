"""List the named colours accepted anywhere a colour value is expected."""

from hexcolour.core.palette import NAMED, parse_colour
from hexcolour.core.report import colour_fields
from hexcolour.core.types import Command, Report

command = Command(
    name='palette',
    help='List named colours.',
)


@command.run
def run(args, report: Report) -> None:
    for name, hex_val in NAMED.items():
        data = colour_fields(parse_colour(hex_val))
        data.pop('nearest', None)
        report.add(name, data)
