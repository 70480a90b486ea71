"""
ANSI SGR escape codes used by PrettyTerm.

Every style the inline tag engine understands maps to exactly one "Select
Graphic Rendition" sequence of the form ``ESC [ <n> m``. The lookup table is
wrapped in a MappingProxyType so it cannot be mutated at runtime.
"""

from types import MappingProxyType

# Foreground colors
FG_BLACK = "\x1b[30m"
FG_RED = "\x1b[31m"
FG_GREEN = "\x1b[32m"
FG_YELLOW = "\x1b[33m"
FG_BLUE = "\x1b[34m"
FG_MAGENTA = "\x1b[35m"
FG_CYAN = "\x1b[36m"
FG_WHITE = "\x1b[37m"

# Background colors
BG_BLACK = "\x1b[40m"
BG_RED = "\x1b[41m"
BG_GREEN = "\x1b[42m"
BG_YELLOW = "\x1b[43m"
BG_BLUE = "\x1b[44m"
BG_MAGENTA = "\x1b[45m"
BG_CYAN = "\x1b[46m"
BG_WHITE = "\x1b[47m"

# Text styles
STYLE_BOLD = "\x1b[1m"
STYLE_FADED = "\x1b[2m"
STYLE_ITALIC = "\x1b[3m"
STYLE_UNDERLINE = "\x1b[4m"
STYLE_BLINKING = "\x1b[5m"
STYLE_CROSSED_OUT = "\x1b[9m"

# Resets every color and style
RESET_COLOR = "\x1b[0m"

STYLE_CODES = MappingProxyType(
    {
        "red": FG_RED,
        "green": FG_GREEN,
        "blue": FG_BLUE,
        "yellow": FG_YELLOW,
        "magenta": FG_MAGENTA,
        "cyan": FG_CYAN,
        "white": FG_WHITE,
        "black": FG_BLACK,
        "bg-red": BG_RED,
        "bg-green": BG_GREEN,
        "bg-blue": BG_BLUE,
        "bg-yellow": BG_YELLOW,
        "bg-magenta": BG_MAGENTA,
        "bg-cyan": BG_CYAN,
        "bg-white": BG_WHITE,
        "bg-black": BG_BLACK,
        "bold": STYLE_BOLD,
        "italic": STYLE_ITALIC,
        "underline": STYLE_UNDERLINE,
        "faded": STYLE_FADED,
        "blinking": STYLE_BLINKING,
        "crossedout": STYLE_CROSSED_OUT,
    }
)


def get_style_code(name: str) -> str:
    """Return the SGR code for a style name, or "" when the name is unknown."""
    return STYLE_CODES.get(name.lower(), "")
