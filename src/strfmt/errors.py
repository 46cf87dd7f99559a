## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class FormatError(Exception):
    def __init__(self, message: str = "", *, template=None, args=None, match=None, index=None, replacement=None):
        """Base class for all errors raised while substituting a template."""
        super().__init__(message)
        self.template: str = template
        self.arguments: tuple = args
        self.match: str = match
        self.index: int = index
        self.replacement: object = replacement


class FormatIndexError(FormatError, IndexError):
    """Placeholder refers to an argument position that was not supplied."""
    pass

class FormatRecursionError(FormatError, RecursionError):
    """Modifier expansion or nested templates did not settle within the configured bounds."""
    pass

class FormatTypeError(FormatError, TypeError):
    """Final replacement is neither a string nor a number."""
    pass
