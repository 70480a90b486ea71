"""
Utility functions for PrettyTerm.

This module contains shared helpers used across the package:
  - Visual width measurement (for padding and wrapping already-styled text)
  - Package version lookup
  - Welcome header display for the CLI

Visual width is a column count of Unicode code points with SGR escape
sequences skipped. Wide CJK characters and combining marks are deliberately
counted as one column each; this is a known simplification, not a bug.
"""

from collections.abc import Iterator
from importlib.metadata import PackageNotFoundError, version

from rich import box
from rich.panel import Panel

from .config import CONFIG_FILE
from .console import console
from .theme_config import DisplayConfig

ESCAPE = "\x1b"


def get_version() -> str:
    """Get the installed package version from Python package metadata.

    Returns "dev" when running from source without installing.
    """
    try:
        return version("prettyterm")
    except PackageNotFoundError:
        return "dev"


def iter_visual_units(s: str) -> Iterator[tuple[str, int]]:
    """Split a string into (text, width) units.

    An SGR sequence (``ESC [`` up to and including the next ``m``) is a single
    zero-width unit; an unterminated one runs to the end of the string. Every
    other character, a lone ``ESC`` included, is its own unit of width 1.
    """
    pos = 0
    length = len(s)
    while pos < length:
        if s[pos] == ESCAPE and s.startswith("[", pos + 1):
            end = s.find("m", pos + 2)
            end = length if end == -1 else end + 1
            yield s[pos:end], 0
            pos = end
        else:
            yield s[pos], 1
            pos += 1


def visual_len(s: str) -> int:
    """Number of terminal columns s occupies, ignoring SGR escape sequences."""
    return sum(width for _, width in iter_visual_units(s))


visual_width = visual_len


def print_header():
    """Print the CLI welcome header: version, detected display and config file."""
    display = DisplayConfig.from_settings()
    columns, rows = display.terminal_size

    header_text = f"""[bold]PrettyTerm[/bold] [dim]v{get_version()}[/dim]
[dim]Terminal: {columns}x{rows}[/dim]
[dim]Config: {CONFIG_FILE}[/dim]

Run [green]prettyterm help[/green] for the list of commands."""

    console.print(Panel(header_text, box=box.ROUNDED, expand=False))
