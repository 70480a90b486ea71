"""
Shared Rich Console singleton for terminal output.

Every line PrettyTerm prints (branch connectors, log dumps, CLI output and
config warnings) goes through this one Console instead of bare print().
Tests patch `console` in the module under test to capture output.

Usage:
    from .console import console
    console.print("[green]Success![/green]")

Strings that already contain ANSI escape codes (the output of the tag engine)
are wrapped with `rich.text.Text.from_ansi` before printing, so Rich keeps the
styling and drops it when the output is not a terminal.
"""

from rich.console import Console
from rich.text import Text

console = Console()


def print_ansi(line: str) -> None:
    """Print a pre-styled line verbatim, without Rich markup or wrapping."""
    console.print(Text.from_ansi(line), soft_wrap=True)
