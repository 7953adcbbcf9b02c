# errors.py

from typing import Optional


class TermGridError(Exception):
    """Base class for every error raised by termgrid."""


class UnsupportedFeatureError(TermGridError, KeyError):
    """A feature or control name is not present in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Feature '{self.name}' is not supported!"


class InvalidDimensionError(TermGridError, ValueError):
    """A canvas was requested with a zero or negative size."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        super().__init__(f"Invalid canvas size {width}x{height}: both dimensions must be >= 1")


class InvalidScaleError(TermGridError, ValueError):
    """A plot scale of zero was requested."""


class FileAccessError(TermGridError, OSError):
    """A file could not be opened, created or written."""

    def __init__(self, filename: str, reason: Optional[str] = None):
        message = f"Could not open file '{filename}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.filename = filename

    def __str__(self) -> str:
        # OSError would otherwise render "[Errno None] None: <filename>"
        return self.args[0]
