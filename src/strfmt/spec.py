## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# strfmt — Interpreter for the `:`-prefixed format specification mini-language.
#

import sys
import math
import logging
from decimal import Decimal
from dataclasses import dataclass
from typing import Any

import lark

from .converters import RADIXES, is_number, is_numeric, to_number


log = logging.getLogger(__name__)


# Each field is a single token, so the contextual lexer resolves `fill` vs. `align`
# ambiguities by terminal priority: FILL_ALIGN first, then ZERO before WIDTH.
GRAMMAR = r"""
spec: REPEAT? FILL_ALIGN? SIGN? ALTERNATE? ZERO? WIDTH? GROUPING? PRECISION? TYPE?

REPEAT: /\*\d+/
FILL_ALIGN.3: /.?[<>=^]/
SIGN: /[ +\-]/
ALTERNATE: "#"
ZERO.2: "0"
WIDTH: /\d+/
GROUPING: ","
PRECISION: /\.\d+/
TYPE: /[bcdeEfFgGosxX%]/
"""

_PARSER = lark.Lark(GRAMMAR, start='spec', parser='lalr', lexer='contextual')


@dataclass(frozen=True)
class FormatSpec:
    repeat: int | None = None
    fill: str | None = None
    align: str | None = None
    sign: str | None = None
    alternate: bool = False
    zero: bool = False
    width: int | None = None
    grouping: bool = False
    precision: int | None = None
    type: str | None = None


def parse_spec(text: str) -> FormatSpec | None:
    """Parse a format specification, or return `None` when the text does not follow the grammar."""
    try:
        tree = _PARSER.parse(text)
    except lark.exceptions.UnexpectedInput:
        log.debug("Format specification `%s` not understood, value left as-is.", text)
        return None

    fields = {tok.type: tok.value for tok in tree.children if isinstance(tok, lark.Token)}
    fill_align = fields.get('FILL_ALIGN', '')
    return FormatSpec(
        repeat=int(fields['REPEAT'][1:]) if 'REPEAT' in fields else None,
        fill=fill_align[:-1] or None,
        align=fill_align[-1:] or None,
        sign=fields.get('SIGN'),
        alternate='ALTERNATE' in fields,
        zero='ZERO' in fields,
        width=int(fields['WIDTH']) if 'WIDTH' in fields else None,
        grouping='GROUPING' in fields,
        precision=int(fields['PRECISION'][1:]) if 'PRECISION' in fields else None,
        type=fields.get('TYPE'),
    )


def apply_spec(value: Any, text: str) -> Any:
    if (spec := parse_spec(text)) is None:
        return value
    return render(value, spec)


## RENDERING
def _group_thousands(text: str) -> str:
    count = len(text) - len(text.lstrip('0123456789'))
    whole, tail = text[:count], text[count:]
    head = len(whole) % 3 or 3
    groups = [whole[:head]] + [whole[i:i+3] for i in range(head, len(whole), 3)]
    return ','.join(groups) + tail

_BASE_CODES = {2: 'b', 8: 'o', 10: 'd', 16: 'x'}

def _round_half_up(x: int | float) -> int:
    return x if isinstance(x, int) else math.floor(float(x) + 0.5)

def _render_magnitude(magnitude: int | float, type_: str, precision: int | None) -> str:
    if not isinstance(magnitude, int) and not math.isfinite(magnitude):
        return str(magnitude)

    match type_.lower():
        case 'b' | 'o' | 'x' | 'd':
            return format(_round_half_up(magnitude), _BASE_CODES[RADIXES[type_]])
        case 'c':
            code = _round_half_up(magnitude)
            return chr(code) if code <= sys.maxunicode else str(math.nan)
        case 'e':
            exact = Decimal(magnitude) if isinstance(magnitude, int) else Decimal(repr(float(magnitude)))
            return format(exact, f'.{precision}e') if precision is not None else format(exact.normalize(), 'e')
        case _:
            if type_ == '%': magnitude = magnitude * 100
            # Without a precision the number keeps Python's own text form, e.g. `3.0` or `1e-05`.
            text = f'{magnitude:.{precision}f}' if precision is not None else str(magnitude)
            return text + '%' if type_ == '%' else text


def render(value: Any, spec: FormatSpec) -> Any:
    if not (is_number(value) or isinstance(value, str)):
        return value

    type_ = spec.type or ('g' if is_numeric(value) else 's')
    align = spec.align or ('<' if type_ == 's' else '>')
    fill = spec.fill or ' '
    if spec.zero:
        fill, align = '0', '='

    sign = ''
    if type_ == 's':
        text = str(value)
        if spec.precision is not None:
            text = text[:spec.precision]
    else:
        number = to_number(value)
        negative = not math.isnan(number) and number < 0
        sign = '+' if spec.sign == '+' else ('-' if negative else '')
        if isinstance(value, str) and type_ in 'fFgG' and spec.precision is None and is_numeric(value):
            # Numeric text is shown as written, only its sign is split off.
            text = value.strip()
            if text[0] in '+-':
                sign = sign or text[0]
                text = text[1:]
        else:
            text = _render_magnitude(abs(number), type_, spec.precision)
        if type_.isupper():
            text = text.upper()
        if spec.grouping:
            text = _group_thousands(text)
        if sign and align != '=':
            text, sign = sign + text, ''

    if spec.repeat:
        text = text * spec.repeat

    if spec.width is not None:
        target = min(spec.width, spec.precision) if type_ == 's' and spec.precision is not None else spec.width
        padding = target - len(text) - len(sign)
        while padding > 0:
            padding -= 1
            if align == '<' or (align == '^' and padding % 2):
                text += fill
            else:
                text = fill + text

    return sign + text
