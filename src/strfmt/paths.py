## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# strfmt — Dotted/bracketed property paths with literal-argument method calls.
#

import re
import numbers
import logging
from typing import Any, NamedTuple
from collections.abc import Mapping, Sequence

import lark


log = logging.getLogger(__name__)


GRAMMAR = r"""
path: segment*
?segment: "." member
        | "[" member "]"
member: NAME call?
call: "(" (arg ("," arg)*)? ")"
?arg: QUOTED | BARE

NAME: /[^\s\[\]\.\(\),|!:'"]+/
QUOTED: /'[^']*'|"[^"]*"/
BARE: /[^\s\(\),'"]+/

%ignore " "
"""

_PARSER = lark.Lark(GRAMMAR, start='path', parser='lalr', lexer='contextual')
_INTEGER_RE = re.compile(r'-?\d+')


class Segment(NamedTuple):
    name: str
    args: tuple | None = None

    @property
    def is_call(self) -> bool:
        return self.args is not None


# Values of these types have no mutating methods, so any public method may be called.
_IMMUTABLE_TYPES = (str, bytes, tuple, frozenset, numbers.Number)
# Read-only lookups callable on any other value, e.g. `dict.get` or `list.index`.
_READ_ONLY_METHODS = frozenset({'get', 'keys', 'values', 'items', 'index', 'count'})
# These would reach into their own arguments with a new template.
_REFUSED_METHODS = frozenset({'format', 'format_map'})


# Returned by `get_member` when a name cannot be reached on a value.
MISSING = object()


def _literal(tok: lark.Token) -> Any:
    if tok.type == 'QUOTED': return tok.value[1:-1]
    return int(tok.value) if _INTEGER_RE.fullmatch(tok.value) else tok.value

def parse_path(text: str) -> tuple[Segment, ...] | None:
    try:
        tree = _PARSER.parse(text)
    except lark.exceptions.UnexpectedInput:
        log.debug("Property path `%s` not understood, resolving to None.", text)
        return None

    segments = []
    for member in tree.children:
        name, *call = member.children
        args = tuple(_literal(tok) for tok in call[0].children) if call else None
        segments.append(Segment(str(name), args))
    return tuple(segments)


def get_member(value: Any, name: str) -> Any:
    """Look up `name` on `value` as a mapping key, sequence index, or public attribute."""
    if name.startswith('_'):
        return MISSING
    is_index = _INTEGER_RE.fullmatch(name) is not None
    if isinstance(value, Mapping):
        if name in value: return value[name]
        if is_index and int(name) in value: return value[int(name)]
    elif isinstance(value, Sequence) and is_index:
        try:
            return value[int(name)]
        except IndexError:
            return MISSING
    return getattr(value, name, MISSING)


def can_call(value: Any, name: str) -> bool:
    """Whether the method `name` may be invoked on `value` without changing it."""
    if name.startswith('_') or name in _REFUSED_METHODS:
        return False
    return isinstance(value, _IMMUTABLE_TYPES) or name in _READ_ONLY_METHODS


def resolve(value: Any, path: tuple[Segment, ...] | None) -> Any:
    if path is None:
        return None
    for segment in path:
        if value is None:
            break
        if segment.is_call:
            method = getattr(value, segment.name, None) if can_call(value, segment.name) else None
            if not callable(method):
                log.debug("Method `%s` cannot be called on %s, resolving to None.", segment.name, type(value).__name__)
                return None
            value = method(*segment.args)
        else:
            member = get_member(value, segment.name)
            value = None if member is MISSING else member
    return value
