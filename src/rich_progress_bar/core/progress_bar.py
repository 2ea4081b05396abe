"""Console progress bar."""

import logging
import math
import os
import sys
from enum import Enum
from typing import Optional, TextIO, Union

from ..ui.colors import Colors, colorize, parse_color
from .errors import OutputWriteError

# Configure logging
logger = logging.getLogger(__name__)

FILL_CHAR = "="
EMPTY_CHAR = " "

# Column width the bar is padded to in new-line mode
NEW_LINE_BAR_WIDTH = 50


class DisplayMode(str, Enum):
    """How each update is written to the console."""

    INLINE = "inline"
    NEW_LINE = "newline"


def parse_display_mode(value: Union[DisplayMode, str]) -> DisplayMode:
    """Resolve a DisplayMode member or name ("inline", "newline", "new-line").

    Raises:
        ValueError: If the name does not match any mode
    """
    if isinstance(value, DisplayMode):
        return value

    normalized = str(value).strip().lower().replace("-", "").replace("_", "")
    try:
        return DisplayMode(normalized)
    except ValueError:
        raise ValueError(
            f"Unknown display mode '{value}'. Valid modes: "
            f"{', '.join(mode.value for mode in DisplayMode)}"
        ) from None


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3)."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def _require_non_negative(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


class ProgressBar:
    """A progress bar that renders to the console.

    Configuration is fluent; every ``set_*`` method returns the bar itself::

        progress = ProgressBar()
        progress.set_color(Colors.RED).set_bar_length(80).set_total(100)

        for _ in range(100):
            progress.increment()

    In inline mode each render overwrites the current line and is colored.
    In new-line mode each render is printed on its own line without color.
    """

    def __init__(
        self,
        total: int = 100,
        bar_length: int = 90,
        color: Union[Colors, str] = Colors.WHITE,
        display_mode: Union[DisplayMode, str] = DisplayMode.INLINE,
        stream: Optional[TextIO] = None,
        use_color: Optional[bool] = None
    ):
        """Initialize progress bar.

        Args:
            total: Count that represents 100% completion
            bar_length: Number of character cells in the bar
            color: Color used in inline mode
            display_mode: Inline or new-line rendering
            stream: Output stream, defaults to sys.stdout at render time
            use_color: Force coloring on or off; by default coloring is
                disabled when NO_COLOR is set to a non-empty value
        """
        self._current = 0
        self._total = _require_non_negative("total", total)
        self._bar_length = _require_non_negative("bar_length", bar_length)
        self._color = parse_color(color)
        self._display_mode = parse_display_mode(display_mode)
        self._stream = stream

        if use_color is None:
            use_color = not os.environ.get("NO_COLOR")
        self.use_color = use_color

    def get_current(self) -> int:
        """Get the number of completed units."""
        return self._current

    def get_total(self) -> int:
        """Get the count that represents 100% completion."""
        return self._total

    def get_color(self) -> Colors:
        """Get the inline mode color."""
        return self._color

    def get_display_mode(self) -> DisplayMode:
        """Get the display mode."""
        return self._display_mode

    def get_bar_length(self) -> int:
        """Get the bar width in characters."""
        return self._bar_length

    def set_color(self, color: Union[Colors, str]) -> "ProgressBar":
        """Set the color of the bar.

        Args:
            color: Colors member or color name

        Returns:
            This progress bar

        Raises:
            InvalidColorError: If the color name is unknown
        """
        self._color = parse_color(color)
        logger.debug(f"Progress bar color set to {self._color.value}")
        return self

    def set_total(self, total: int) -> "ProgressBar":
        """Set the count that represents 100% completion.

        Lowering the total below the current count also lowers the
        current count, so it never exceeds the total.

        Args:
            total: New total

        Returns:
            This progress bar
        """
        self._total = _require_non_negative("total", total)
        if self._current > self._total:
            self._current = self._total
        logger.debug(f"Progress bar total set to {self._total}")
        return self

    def set_display_mode(self, display_mode: Union[DisplayMode, str]) -> "ProgressBar":
        """Set inline or new-line rendering.

        Args:
            display_mode: DisplayMode member or mode name

        Returns:
            This progress bar
        """
        self._display_mode = parse_display_mode(display_mode)
        logger.debug(f"Progress bar display mode set to {self._display_mode.value}")
        return self

    def set_bar_length(self, bar_length: int) -> "ProgressBar":
        """Set the bar width in characters.

        A zero length renders an empty bracket pair.

        Args:
            bar_length: Number of character cells

        Returns:
            This progress bar
        """
        self._bar_length = _require_non_negative("bar_length", bar_length)
        logger.debug(f"Progress bar length set to {self._bar_length}")
        return self

    def is_complete(self) -> bool:
        """Check whether the current count has reached the total."""
        return self._current >= self._total

    def percentage(self) -> float:
        """Get the fill ratio in [0, 1]. A zero total counts as complete."""
        if self._total == 0:
            return 1.0
        return min(max(self._current / self._total, 0.0), 1.0)

    def filled_length(self) -> int:
        """Get the number of fill characters for the current ratio."""
        filled = round_half_away_from_zero(self._bar_length * self.percentage())
        return min(max(filled, 0), self._bar_length)

    def build_bar(self) -> str:
        """Build the bar cells, exactly bar_length characters wide."""
        filled = self.filled_length()
        return FILL_CHAR * filled + EMPTY_CHAR * (self._bar_length - filled)

    def percent_text(self) -> str:
        """Get the whole percentage as text, without the percent sign."""
        return str(round_half_away_from_zero(self.percentage() * 100))

    def format_line(self) -> str:
        """Format the text written by the next render."""
        bar = self.build_bar()
        percent = f"{self.percent_text()}%"

        if self._display_mode is DisplayMode.NEW_LINE:
            return f"[{bar:<{NEW_LINE_BAR_WIDTH}}] {percent}\n"

        return (
            f"\r[{colorize(bar, self._color, self.use_color)}] "
            f"{colorize(percent, self._color, self.use_color)}"
        )

    def increment(self) -> None:
        """Advance by one unit and render.

        The count stops at the total; the bar is rendered on every call,
        including calls made after completion.

        Raises:
            OutputWriteError: If the output stream cannot be written
        """
        if self._current < self._total:
            self._current += 1
        self.render()

    def render(self) -> None:
        """Write the bar for the current state and flush the stream.

        Raises:
            OutputWriteError: If the output stream cannot be written
        """
        self._write(self.format_line())

    def _write(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        try:
            stream.write(text)
            stream.flush()
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to write progress bar: {e}")
            raise OutputWriteError(f"Failed to write progress bar: {e}") from e
