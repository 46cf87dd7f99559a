## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# strfmt — Single-character converters applied after `!` inside a placeholder.
#

import re
import math
import numbers
from types import MappingProxyType
from typing import Any, Callable, Mapping


RADIXES: Mapping[str, int] = MappingProxyType({'b': 2, 'o': 8, 'd': 10, 'x': 16, 'X': 16})

_DECIMAL_RE = re.compile(r'\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*')
_DIGITS = {2: '01', 8: '0-7', 10: '0-9', 16: '0-9a-fA-F'}
_PREFIXES = {16: '0[xX]'}
_INTEGER_RE = {radix: re.compile(rf'\s*([+-]?)(?:{_PREFIXES[radix]})?([{digits}]+)' if radix in _PREFIXES
                                  else rf'\s*([+-]?)([{digits}]+)')
               for radix, digits in _DIGITS.items()}


def is_number(x: Any) -> bool:
    return isinstance(x, numbers.Number) and not isinstance(x, (bool, complex))

def is_numeric(x: Any) -> bool:
    """True for finite numbers, and strings that spell out a finite decimal number."""
    if is_number(x):
        return not isinstance(x, float) or math.isfinite(x)
    return isinstance(x, str) and _DECIMAL_RE.fullmatch(x) is not None

def to_number(x: Any) -> int | float:
    if isinstance(x, bool): return int(x)
    if is_number(x): return x
    if isinstance(x, str) and _DECIMAL_RE.fullmatch(x):
        text = x.strip()
        return int(text) if text.lstrip('+-').isdigit() else float(text)
    return math.nan


def parse_integer(x: Any, radix: int) -> int | float:
    """Lenient integer parsing of the leading digits, NaN when there are none."""
    if is_number(x) and radix == 10:
        return int(x) if math.isfinite(x) else math.nan
    if (m := _INTEGER_RE[radix].match(str(x))) is None:
        return math.nan
    sign, digits = m.groups()
    return int(sign + digits, radix)


## CONVERTERS
def conv_s(x: Any) -> str: return str(x)
def conv_neg(x: Any) -> int | float: return -to_number(x)

def _make_radix_converter(radix: int) -> Callable[[Any], int | float]:
    def conv(x: Any) -> int | float: return parse_integer(x, radix)
    conv.__name__ = f'conv_base{radix}'
    return conv


def load_converters(extra: Mapping[str, Callable[[Any], Any]] | None = None) -> Mapping[str, Callable[[Any], Any]]:
    table: dict[str, Callable[[Any], Any]] = {'s': conv_s, '-': conv_neg}
    for code, radix in RADIXES.items():
        table[code] = _make_radix_converter(radix)
    for code, fn in (extra or {}).items():
        assert len(code) == 1, f"Converter code `{code}` must be a single character."
        table[code] = fn
    return MappingProxyType(table)


CONVERTERS = load_converters()
