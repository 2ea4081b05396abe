"""Rich Progress Bar - colored console progress bars."""

__version__ = "0.1.0"

from .core.errors import ProgressBarError, OutputWriteError, InvalidColorError
from .core.progress_bar import ProgressBar, DisplayMode
from .ui.colors import Colors

__all__ = [
    "ProgressBar", "DisplayMode", "Colors",
    "ProgressBarError", "OutputWriteError", "InvalidColorError",
]
