## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# strfmt — Splits a placeholder's modifier text into path, alternate, converters and spec.
#

from dataclasses import dataclass


@dataclass(frozen=True)
class Modifiers:
    path: str | None = None
    alt: str | None = None
    converters: str | None = None
    spec: str | None = None
    rest: str = ''


class _ModifierParser:
    """Recursive-descent reader over `[path] [|alt] [!converters] [:spec]`, each group optional."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        return self.text[self.pos:self.pos+1]

    def take_until(self, stops: str) -> str:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] not in stops:
            self.pos += 1
        return self.text[start:self.pos]

    def path(self) -> str | None:
        if self.peek() not in ('.', '['): return None
        start, depth, quote = self.pos, 0, None
        while self.pos < len(self.text):
            ch = self.text[self.pos]
            if quote:
                if ch == quote: quote = None
            elif ch in '\'"' and depth > 0: quote = ch
            elif ch == '(': depth += 1
            elif ch == ')': depth = max(0, depth - 1)
            elif ch in '|!:' and depth == 0: break
            self.pos += 1
        return self.text[start:self.pos]

    def alt(self) -> str | None:
        if self.peek() != '|': return None
        self.pos += 1
        return self.take_until('!:')

    def converters(self) -> str | None:
        # A bare `!` directly followed by `:` or the end is not a converter group.
        if self.peek() != '!' or self.text[self.pos+1:self.pos+2] in ('', ':'): return None
        self.pos += 1
        return self.take_until(':')

    def spec(self) -> str | None:
        if self.peek() != ':' or self.pos + 1 >= len(self.text): return None
        start, self.pos = self.pos + 1, len(self.text)
        return self.text[start:]

    def parse(self) -> Modifiers:
        path, alt, converters, spec = self.path(), self.alt(), self.converters(), self.spec()
        return Modifiers(path=path, alt=alt, converters=converters, spec=spec, rest=self.text[self.pos:])


def parse_modifiers(text: str) -> Modifiers:
    return _ModifierParser(text).parse()
