import sys
from collections.abc import Callable

from rich.markup import escape

from .commands import find_command, get_help_text
from .console import console, print_ansi
from .handlers import cmd_config, cmd_demo, cmd_help, cmd_style, cmd_width
from .utils import print_header

HANDLERS: dict[str, Callable[[list[str]], int]] = {
    "help": cmd_help,
    "style": cmd_style,
    "width": cmd_width,
    "demo": cmd_demo,
    "config": cmd_config,
}


def main(argv: list[str] | None = None) -> int:
    """Run one `prettyterm` command and return its exit code."""
    args = sys.argv[1:] if argv is None else argv

    if not args:
        print_header()
        return 0

    command = find_command(args[0])
    if command is None:
        console.print(f"[red]Unknown command: {escape(args[0])}[/red]")
        print_ansi(get_help_text())
        return 1

    handler = HANDLERS[command["triggers"][0]]
    return handler(args[1:])
