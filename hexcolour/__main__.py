"""hexcolour — Pack, unpack, tint and shade 32-bit RGBA hex colours.

Usage: hexcolour <command> [values...] [options]

Commands are auto-discovered from hexcolour/commands/.
Each command module's docstring is its documentation.
Run `hexcolour help <command>` for full module docs.

Colour values are hex strings (#rrggbb, #rrggbbaa, #rgb, 0x prefix or bare
digits) or palette names (`hexcolour palette`).

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, hexcolour looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys

from hexcolour import registry
from hexcolour.core.env import load_env, settings
from hexcolour.core.report import format_json, format_text
from hexcolour.core.types import Report


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'hexcolour.commands.{name}')


def _short_doc(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  hexcolour decompose "#2ecc71" 0x34495ebf\n'
        '  hexcolour compose 46 204 113 0.5\n'
        '  hexcolour tint emerald --amount 0.3 --json\n'
        '  hexcolour shade alizarin -a 0.1\n'
        '  hexcolour sample screenshot.png --at 120,40\n'
        '  hexcolour swatch emerald --steps 3 --out ./tmp\n'
        '  hexcolour help tint\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  HEXCOLOUR_FORMAT=text|json  HEXCOLOUR_AMOUNT=0.2\n'
        '  HEXCOLOUR_STEPS=4           HEXCOLOUR_OUT_DIR=.\n'
    )
    parser = argparse.ArgumentParser(
        prog='hexcolour',
        description='Pack, unpack, tint and shade 32-bit RGBA hex colours.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_doc(name, cmd.help))
        p.add_argument('values', nargs='*', help='Colours, channel values or image paths')
        p.add_argument('-j', '--json', action='store_true', default=None, help='Output JSON instead of text')
        p.add_argument('-a', '--amount', type=float, default=None, help='Tint/shade amount, 0.0-1.0')
        p.add_argument('-s', '--steps', type=int, default=None, help='Swatch cells on each side of the base')
        p.add_argument('-o', '--out', default=None, help='Directory for swatch PNGs')
        p.add_argument('--at', default=None, metavar='X,Y', help='Pixel to sample (default 0,0)')

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('name', nargs='?', help='Command name')

    return parser


def _print_help(name: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if name is None:
        print('Available commands:\n')
        for cmd_name, cmd in sorted(commands.items()):
            print(f'  {cmd_name:<11} {_short_doc(cmd_name, cmd.help)}')
        print('\nRun: hexcolour help <command> for full docs.')
        return

    if name not in commands:
        print(f'Unknown command: {name}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(name).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {name!r})')
        return
    print(doc)


def _apply_settings(args: argparse.Namespace) -> None:
    """Fill options left unset on the command line from HEXCOLOUR_* settings."""
    cfg = settings()
    if args.json is None:
        args.json = cfg.format == 'json'
    if args.amount is None:
        args.amount = cfg.amount
    if args.steps is None:
        args.steps = cfg.steps
    if args.out is None:
        args.out = cfg.out_dir


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'hexcolour: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.name)
        return

    _apply_settings(args)
    report = Report(command=args.command)
    try:
        registry.get(args.command).execute(args, report)
    except (ValueError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
