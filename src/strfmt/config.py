## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class FormatterConfig:
    max_passes: int = 10    # Modifier expansion passes before giving up on a fixpoint.
    max_depth: int = 32     # Nesting of arguments that are themselves templates.

    @classmethod
    def from_env(cls, environ=None) -> "FormatterConfig":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            max_passes=int(env.get('STRFMT_MAX_PASSES', defaults.max_passes)),
            max_depth=int(env.get('STRFMT_MAX_DEPTH', defaults.max_depth)),
        )
