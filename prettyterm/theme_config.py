"""
Display configuration: color theme, icon theme and terminal size.

These are read-only snapshots. The layout engine receives a DisplayConfig once
and never mutates it; child branches share the same frozen instance.
"""

import shutil
from dataclasses import dataclass, field
from enum import Enum

from .colors import FG_BLACK, FG_BLUE, FG_CYAN, FG_GREEN, FG_MAGENTA, FG_RED, FG_WHITE, FG_YELLOW
from .common_types import Status
from .config import DEFAULT_CONFIG, get_optional_int_setting, get_setting
from .console import console

# Used when the real terminal size cannot be determined (piped output, CI)
DEFAULT_TERMINAL_SIZE = (80, 24)


class TerminalColors(Enum):
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"

    @property
    def code(self) -> str:
        """Foreground SGR code for this color."""
        return _FOREGROUND_CODES[self]

    @property
    def tag(self) -> str:
        """Inline style tag name for this color."""
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "TerminalColors":
        return cls(name.strip().lower())


_FOREGROUND_CODES = {
    TerminalColors.BLACK: FG_BLACK,
    TerminalColors.RED: FG_RED,
    TerminalColors.GREEN: FG_GREEN,
    TerminalColors.YELLOW: FG_YELLOW,
    TerminalColors.BLUE: FG_BLUE,
    TerminalColors.MAGENTA: FG_MAGENTA,
    TerminalColors.CYAN: FG_CYAN,
    TerminalColors.WHITE: FG_WHITE,
}


@dataclass(frozen=True)
class ColorTheme:
    hint_color: TerminalColors = TerminalColors.BLUE
    error_color: TerminalColors = TerminalColors.RED
    success_color: TerminalColors = TerminalColors.GREEN
    warning_color: TerminalColors = TerminalColors.YELLOW

    def color_for(self, status: Status) -> TerminalColors:
        """Pick the theme color matching a status."""
        if status is Status.OK:
            return self.success_color
        if status in (Status.ERROR, Status.FATAL):
            return self.error_color
        if status is Status.WARN:
            return self.warning_color
        return self.hint_color


@dataclass(frozen=True)
class IconsTheme:
    hint_icon: str = "🛈"
    error_icon: str = "✗"
    success_icon: str = "✓"
    warning_icon: str = "⚠"

    def icon_for(self, status: Status) -> str:
        """Pick the theme icon matching a status."""
        if status is Status.OK:
            return self.success_icon
        if status in (Status.ERROR, Status.FATAL):
            return self.error_icon
        if status is Status.WARN:
            return self.warning_icon
        return self.hint_icon


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal, falling back to 80x24."""
    size = shutil.get_terminal_size(fallback=DEFAULT_TERMINAL_SIZE)
    if size.columns <= 0 or size.lines <= 0:
        return DEFAULT_TERMINAL_SIZE
    return size.columns, size.lines


def _color_setting(key: str) -> TerminalColors:
    default = DEFAULT_CONFIG[key]
    value = get_setting(key, default)
    try:
        return TerminalColors.from_name(value)
    except ValueError:
        console.print(
            f"[yellow]Warning: Unknown color for {key}: {value}, using default {default}[/yellow]"
        )
        return TerminalColors(default)


@dataclass(frozen=True)
class DisplayConfig:
    color_theme: ColorTheme = field(default_factory=ColorTheme)
    icons_theme: IconsTheme = field(default_factory=IconsTheme)
    terminal_size: tuple[int, int] = field(default_factory=get_terminal_size)

    @property
    def terminal_width(self) -> int:
        return self.terminal_size[0]

    @property
    def terminal_height(self) -> int:
        return self.terminal_size[1]

    @classmethod
    def from_settings(cls) -> "DisplayConfig":
        """Build a DisplayConfig from env vars / config file, detecting the terminal size.

        TERMINAL_WIDTH and TERMINAL_HEIGHT override the detected size one
        dimension at a time; every theme entry falls back to its default.
        """
        columns, rows = get_terminal_size()
        columns = get_optional_int_setting("TERMINAL_WIDTH") or columns
        rows = get_optional_int_setting("TERMINAL_HEIGHT") or rows

        color_theme = ColorTheme(
            hint_color=_color_setting("HINT_COLOR"),
            error_color=_color_setting("ERROR_COLOR"),
            success_color=_color_setting("SUCCESS_COLOR"),
            warning_color=_color_setting("WARNING_COLOR"),
        )
        icons_theme = IconsTheme(
            hint_icon=get_setting("HINT_ICON", DEFAULT_CONFIG["HINT_ICON"]),
            error_icon=get_setting("ERROR_ICON", DEFAULT_CONFIG["ERROR_ICON"]),
            success_icon=get_setting("SUCCESS_ICON", DEFAULT_CONFIG["SUCCESS_ICON"]),
            warning_icon=get_setting("WARNING_ICON", DEFAULT_CONFIG["WARNING_ICON"]),
        )
        return cls(color_theme=color_theme, icons_theme=icons_theme, terminal_size=(columns, rows))
