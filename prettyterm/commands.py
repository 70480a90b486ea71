"""
Command registry for the `prettyterm` command line.

This module only holds command metadata (names and descriptions). The code
that runs for each command lives in handlers.py, and main.py maps the first
command-line argument onto it.

The help text is written with PrettyTerm's own inline style tags and expanded
by the tag engine, so `prettyterm help` doubles as a smoke test of it.
"""

from typing import TypedDict

from .stylish import sty
from .utils import visual_len


class CommandInfo(TypedDict):
    triggers: list[str]  # Command names (e.g., ["help"] or ["style", "tags"])
    usage: str  # Arguments shown after the trigger in help output
    description: str  # One-line description for help output


COMMANDS: list[CommandInfo] = [
    {
        "triggers": ["help"],
        "usage": "",
        "description": "Show all available commands",
    },
    {
        "triggers": ["style"],
        "usage": "TEXT...",
        "description": "Expand <tag>inline tags</tag> and print the result",
    },
    {
        "triggers": ["width"],
        "usage": "TEXT...",
        "description": "Print the visual width of TEXT after tag expansion",
    },
    {
        "triggers": ["demo"],
        "usage": "[--save]",
        "description": "Render a sample tree; --save also writes its log file",
    },
    {
        "triggers": ["config"],
        "usage": "list|get|set",
        "description": "Manage configuration settings",
    },
]


def get_help_text() -> str:
    """Generate the help listing, already expanded into ANSI codes.

    Descriptions contain literal `<` and `>`, which the tag engine would treat
    as tags, so only the fixed parts of each line carry markup.
    """
    lines = [sty("<bold>Usage:</bold> prettyterm <cyan>COMMAND</cyan> [ARGS]"), ""]
    lines.append(sty("<bold>Commands:</bold>"))

    for cmd in COMMANDS:
        trigger_str = ", ".join(cmd["triggers"])
        label = sty("  <cyan>{}</cyan> {}", trigger_str, cmd["usage"]).rstrip()
        # Pad on visual width, the label already carries escape codes
        padding = " " * max(1, 28 - visual_len(label))
        lines.append(f"{label}{padding}- {cmd['description']}")

    lines.append("")
    lines.append(sty("<bold>Config subcommands:</bold>"))
    lines.append(sty("  <cyan>config list</cyan>               - Show current configuration"))
    lines.append(sty("  <cyan>config get</cyan> KEY            - Show a specific configuration value"))
    lines.append(sty("  <cyan>config set</cyan> KEY VALUE      - Set a configuration value"))

    return "\n".join(lines)


def find_command(trigger: str) -> CommandInfo | None:
    """Look up a command by any of its triggers."""
    for cmd in COMMANDS:
        if trigger in cmd["triggers"]:
            return cmd
    return None
