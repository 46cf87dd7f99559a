## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# strfmt — Python 3 like string formatting, from the command line.
#

import sys
import json
import logging
from dataclasses import dataclass

import click

from .config import FormatterConfig
from .engine import Formatter
from .errors import FormatError, FormatIndexError, FormatRecursionError, FormatTypeError
from .formatting import write_without_ansi, format_item


@dataclass(frozen=True)
class CliConfig:
    as_json: bool
    plain: bool
    verbose: int


_BANNERS = {
    FormatIndexError: "INDEX ERROR.",
    FormatRecursionError: "RECURSION ERROR.",
    FormatTypeError: "TYPE ERROR.",
}


def _decode_argument(raw: str, as_json: bool):
    if not as_json: return raw
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _report_error(exc: FormatError) -> None:
    banner = next((b for cls, b in _BANNERS.items() if isinstance(exc, cls)), "FORMAT ERROR.")
    print(f'\033[30;43m {banner} \033[0m {exc} (Exception: \033[33m{type(exc).__name__}\033[0m)', file=sys.stderr)
    print(f'\033[97m  Template\033[0m  {format_item(exc.template)}', file=sys.stderr)
    print(f'\033[97m  Matched\033[0m   {format_item(exc.match)}', file=sys.stderr)
    if exc.index is not None:
        print(f'\033[97m  Index\033[0m     {exc.index} (of {len(exc.arguments or ())} arguments)', file=sys.stderr)
    if exc.replacement is not None:
        print(f'\033[97m  Value\033[0m     {format_item(exc.replacement, width=72)}', file=sys.stderr)
    print(f'\033[1;33m  Arguments are\033[0;33m {format_item(list(exc.arguments or ()), width=72)}\033[0m', file=sys.stderr)


@click.command(context_settings={'ignore_unknown_options': True})
@click.option('--json', '-j', 'as_json', is_flag=True, help='Decode each argument as JSON (numbers, lists, objects).')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes and redirect stderr to stdout.')
@click.option('--verbose', '-v', default=0, count=True, help='Enable logging, repeat for debug output.')
@click.argument('template')
@click.argument('arguments', nargs=-1)
@click.pass_context
def cli(ctx: click.Context, as_json: bool, plain: bool, verbose: int, template: str, arguments: tuple[str, ...]) -> None:
    config = CliConfig(as_json=as_json, plain=plain, verbose=verbose)
    if config.plain:
        writer = write_without_ansi(sys.stdout.write)
        sys.stdout.write, sys.stderr.write = writer, writer
    if config.verbose:
        logging.basicConfig(level=logging.DEBUG if config.verbose > 1 else logging.INFO,
                            format='%(levelname)s %(name)s: %(message)s', stream=sys.stderr)

    if template == '-':
        template = sys.stdin.read().rstrip('\n')

    formatter = Formatter(FormatterConfig.from_env())
    values = [_decode_argument(a, config.as_json) for a in arguments]
    try:
        result = formatter.format(template, *values)
    except FormatError as exc:
        _report_error(exc)
        ctx.exit(1)
    print(result)


def main(argv: list[str] | None = None) -> None:
    cli.main(args=list(sys.argv[1:] if argv is None else argv), prog_name='strfmt')


if __name__ == "__main__":
    main()
