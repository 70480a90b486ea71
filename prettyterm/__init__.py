"""PrettyTerm - inline style tags and width-aware tree/table printing for terminals"""

from .colors import (
    BG_BLACK,
    BG_BLUE,
    BG_CYAN,
    BG_GREEN,
    BG_MAGENTA,
    BG_RED,
    BG_WHITE,
    BG_YELLOW,
    FG_BLACK,
    FG_BLUE,
    FG_CYAN,
    FG_GREEN,
    FG_MAGENTA,
    FG_RED,
    FG_WHITE,
    FG_YELLOW,
    RESET_COLOR,
    STYLE_BLINKING,
    STYLE_BOLD,
    STYLE_CODES,
    STYLE_CROSSED_OUT,
    STYLE_FADED,
    STYLE_ITALIC,
    STYLE_UNDERLINE,
    get_style_code,
)
from .common_types import Status
from .console import console, print_ansi
from .logger import Component, Log, Logger, LoggerPrintStyle, LogTime
from .stylish import StyleToken, expand, iter_style_tokens, process_style_tags, sty
from .theme_config import (
    ColorTheme,
    DisplayConfig,
    IconsTheme,
    TerminalColors,
    get_terminal_size,
)
from .tree_printer import Branch, BranchStyle
from .utils import get_version, iter_visual_units, visual_len, visual_width

__all__ = [
    # Colors
    "BG_BLACK",
    "BG_BLUE",
    "BG_CYAN",
    "BG_GREEN",
    "BG_MAGENTA",
    "BG_RED",
    "BG_WHITE",
    "BG_YELLOW",
    "FG_BLACK",
    "FG_BLUE",
    "FG_CYAN",
    "FG_GREEN",
    "FG_MAGENTA",
    "FG_RED",
    "FG_WHITE",
    "FG_YELLOW",
    "RESET_COLOR",
    "STYLE_BLINKING",
    "STYLE_BOLD",
    "STYLE_CODES",
    "STYLE_CROSSED_OUT",
    "STYLE_FADED",
    "STYLE_ITALIC",
    "STYLE_UNDERLINE",
    "get_style_code",
    # Common types
    "Status",
    # Console
    "console",
    "print_ansi",
    # Logger
    "Component",
    "Log",
    "LogTime",
    "Logger",
    "LoggerPrintStyle",
    # Style tags
    "StyleToken",
    "expand",
    "iter_style_tokens",
    "process_style_tags",
    "sty",
    # Theme
    "ColorTheme",
    "DisplayConfig",
    "IconsTheme",
    "TerminalColors",
    "get_terminal_size",
    # Tree printer
    "Branch",
    "BranchStyle",
    # Utils
    "get_version",
    "iter_visual_units",
    "visual_len",
    "visual_width",
]
