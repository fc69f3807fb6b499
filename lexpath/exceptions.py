"""
Provides exceptions classes thrown by the raising entry points of lexpath.

The core operations never raise; they return ``None`` when there is no
result. These exceptions are for callers that opt into raising, such as
:meth:`lexpath.Path.from_string` and the ``/`` operator.
"""


class LexpathError(Exception):
    """The top-level exception thrown by lexpath."""
    pass


class InvalidPathError(LexpathError, ValueError):
    """Thrown when a string cannot be parsed into a path.

    Attributes:
        raw (str): The string that failed to parse.
    """
    def __init__(self, message, raw=None):
        super(InvalidPathError, self).__init__(message)
        self.raw = raw
