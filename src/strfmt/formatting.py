## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))


def format_item(it, width=None) -> str:
    if isinstance(it, (list, tuple)):
        text = '[' + ', '.join(format_item(i) for i in it) + ']'
    elif isinstance(it, dict):
        text = '{' + ', '.join(f'{format_item(k)}: {format_item(v)}' for k, v in it.items()) + '}'
    elif isinstance(it, str):
        text = '"' + it.replace('"', '\\"') + '"'
    elif it is None:
        text = 'null'
    elif isinstance(it, bool):
        text = str(it).lower()
    else:
        text = str(it)
    if width is not None and len(text) > width:
        text = text[:width-2] + ' …'
    return text
