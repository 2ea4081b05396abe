"""Exceptions raised by progress bar operations."""


class ProgressBarError(Exception):
    """Base exception for progress bar operations."""
    pass


class OutputWriteError(ProgressBarError):
    """Raised when the progress bar cannot be written to its output stream."""
    pass


class InvalidColorError(ProgressBarError, ValueError):
    """Raised when a color name is not recognised."""
    pass
