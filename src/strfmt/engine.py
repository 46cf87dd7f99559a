## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# strfmt — Python 3 like string formatting, with property paths and converters.
#

import re
import logging
from typing import Any, Callable, Mapping

from .config import FormatterConfig
from .errors import FormatIndexError, FormatRecursionError, FormatTypeError
from .converters import CONVERTERS, load_converters, is_number
from .modifiers import parse_modifiers
from .paths import parse_path, resolve
from .spec import apply_spec


log = logging.getLogger(__name__)

# `{index modifiers}`, where modifiers may hold one level of `{index ...}` groups.
PLACEHOLDER_RE = re.compile(r'\{(\d+)((?:[^{}]|\{\d[^{}]*\})*)\}')
EMBEDDED_RE = re.compile(r'\{\d')


class Formatter:
    """Substitutes indexed placeholders in templates; immutable once built and safe to share."""

    def __init__(self, config: FormatterConfig | None = None, converters: Mapping[str, Callable[[Any], Any]] | None = None):
        self.config = config or FormatterConfig()
        self.converters = load_converters(converters) if converters else CONVERTERS

    def format(self, template, *args) -> str:
        if not args:
            # Single argument is either a finished string, or a packed `[template, *args]`.
            return template if isinstance(template, str) else self.format(*template)
        return self._format(template, args, depth=0)

    # Scanning ────────────────────────────────────────────────────────────────────────────────
    def _format(self, template: str, args: tuple, depth: int) -> str:
        if depth > self.config.max_depth:
            raise FormatRecursionError(f"Templates nested deeper than {self.config.max_depth} levels.",
                                       template=template, args=args, match=template)
        return PLACEHOLDER_RE.sub(lambda m: self._substitute(m, template, args, depth), template)

    def _expand_modifiers(self, text: str, template: str, args: tuple, depth: int) -> str:
        if not EMBEDDED_RE.search(text):
            return text
        for attempt in range(1, self.config.max_passes + 1):
            expanded = self._format(text, args, depth + 1)
            if expanded == text:
                return text
            if attempt == self.config.max_passes:
                raise FormatRecursionError("Too many recursions.", template=template, args=args, match=text, replacement=expanded)
            log.debug("Modifier pass %d: `%s` -> `%s`", attempt, text, expanded)
            text = expanded

    # Resolution ──────────────────────────────────────────────────────────────────────────────
    def _substitute(self, match: re.Match, template: str, args: tuple, depth: int) -> str:
        field, index = match.group(0), int(match.group(1))
        if index >= len(args):
            raise FormatIndexError("Invalid index.", template=template, args=args, match=field, index=index)

        modifiers = parse_modifiers(self._expand_modifiers(match.group(2), template, args, depth))

        value = args[index]
        if isinstance(value, str) and EMBEDDED_RE.search(value):
            value = self._format(value, args, depth + 1)
        if modifiers.path is not None:
            value = resolve(value, parse_path(modifiers.path))
        if modifiers.alt is not None and not value:
            value = modifiers.alt
        for code in modifiers.converters or '':
            if (convert := self.converters.get(code)) is None:
                log.debug("Unknown converter `%s` in `%s`, skipped.", code, field)
                continue
            value = convert(value)
        if modifiers.spec is not None:
            value = apply_spec(value, modifiers.spec)

        if not (isinstance(value, str) or is_number(value)):
            raise FormatTypeError("Replacement is not a string or number.", template=template, args=args, match=field, replacement=value)
        return str(value) + modifiers.rest
