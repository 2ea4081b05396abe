"""Terminal colors for progress bar output."""

from enum import Enum
from typing import Union

from rich.color import ColorSystem
from rich.style import Style

from ..core.errors import InvalidColorError


class Colors(str, Enum):
    """Standard terminal colors and their bright variants.

    Values are rich color names, so each member can be handed straight
    to ``rich.style.Style``.
    """

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    BRIGHT_BLACK = "bright_black"
    BRIGHT_RED = "bright_red"
    BRIGHT_GREEN = "bright_green"
    BRIGHT_YELLOW = "bright_yellow"
    BRIGHT_BLUE = "bright_blue"
    BRIGHT_MAGENTA = "bright_magenta"
    BRIGHT_CYAN = "bright_cyan"
    BRIGHT_WHITE = "bright_white"


def color_names() -> list:
    """Return all color names in declaration order."""
    return [color.value for color in Colors]


def parse_color(value: Union[Colors, str]) -> Colors:
    """Resolve a color member or name to a Colors member.

    Args:
        value: Colors member, or a name such as "red", "Bright-Blue"

    Returns:
        Matching Colors member

    Raises:
        InvalidColorError: If the name does not match any color
    """
    if isinstance(value, Colors):
        return value

    if not isinstance(value, str):
        raise InvalidColorError(f"Color must be a Colors member or a name, got {value!r}")

    normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return Colors(normalized)
    except ValueError:
        raise InvalidColorError(
            f"Unknown color '{value}'. Valid colors: {', '.join(color_names())}"
        ) from None


def colorize(text: str, color: Union[Colors, str], enabled: bool = True) -> str:
    """Wrap text in ANSI color codes.

    Uses the 8/16 color standard palette so the escape sequences do not
    depend on the detected terminal.

    Args:
        text: Text to color
        color: Colors member or color name
        enabled: When False the text is returned unchanged

    Returns:
        Colored text
    """
    if not enabled or not text:
        return text

    style = Style(color=parse_color(color).value)
    return style.render(text, color_system=ColorSystem.STANDARD)
