## strfmt — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .config import FormatterConfig
from .errors import *
from .engine import Formatter

_FORMATTER = Formatter(FormatterConfig.from_env())

def format(template, *args) -> str:
    return _FORMATTER.format(template, *args)

def __getattr__(name):
    return getattr(_FORMATTER, name)
