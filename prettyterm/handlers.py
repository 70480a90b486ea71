"""
Command handlers for the `prettyterm` command line.

Each handler receives the remaining command-line arguments (the command name
itself already stripped) and returns a process exit code. Output goes through
the shared console: Rich markup for status messages, `print_ansi` for text
produced by the tag engine or the tree printer.
"""

from rich.markup import escape

from .commands import get_help_text
from .common_types import Status
from .config import CONFIG_FILE, DEFAULT_CONFIG, LOG_FILE, get_setting, load_config, save_config
from .console import console, print_ansi
from .logger import Component, Logger, LoggerPrintStyle, LogTime
from .stylish import process_style_tags, sty
from .theme_config import DisplayConfig, TerminalColors
from .tree_printer import Branch, BranchStyle
from .utils import visual_len

DEMO_TEXT = (
    "PrettyTerm pads and wraps by <bold>visual</bold> width, so inline "
    "<green|underline>style tags</green|underline> never push the right-hand "
    "border out of line, however long the paragraph gets."
)

DEMO_CODE = """from prettyterm import Branch, sty

root = Branch.root()
child = root.enter_branch(sty("<cyan>build</cyan>"))
print(child.format_table_line("done"))"""


def cmd_help(_args: list[str]) -> int:
    """Handle `help`: list every command."""
    print_ansi(get_help_text())
    return 0


def cmd_style(args: list[str]) -> int:
    """Handle `style TEXT...`: print the expanded text."""
    print_ansi(process_style_tags(" ".join(args)))
    return 0


def cmd_width(args: list[str]) -> int:
    """Handle `width TEXT...`: print the visual width of the expanded text."""
    console.print(visual_len(process_style_tags(" ".join(args))))
    return 0


def _status_line(display: DisplayConfig, status: Status, text: str) -> str:
    """Prefix text with the theme's icon for status, in the theme's color."""
    color = display.color_theme.color_for(status)
    icon = display.icons_theme.icon_for(status)
    return sty("<{0}>{1}</{0}> {2}", color.tag, icon, text)


def cmd_demo(args: list[str]) -> int:
    """Handle `demo [--save]`: render a sample tree and its log.

    The tree uses the configured BRANCH_STYLE; the log uses LOGGER_STYLE and is
    written to LOG_FILE when --save is given.
    """
    display = DisplayConfig.from_settings()
    try:
        style = BranchStyle.from_name(get_setting("BRANCH_STYLE", DEFAULT_CONFIG["BRANCH_STYLE"]))
    except ValueError:
        style = BranchStyle.UNICODE
    try:
        log_style = LoggerPrintStyle.from_name(get_setting("LOGGER_STYLE", DEFAULT_CONFIG["LOGGER_STYLE"]))
    except ValueError:
        log_style = LoggerPrintStyle.TINY

    logger = Logger(LogTime.now(), printable_in_terminal=True, style=log_style)
    component = Component("handlers.py", "cmd_demo", "prettyterm")

    root = Branch.root(display, style)
    project = root.enter_branch(sty("<bold>demo</bold>"))
    logger.add_log("entered demo branch", component, Status.INFO)

    print_ansi(project.format_table_header(sty("<cyan>Wrapped text</cyan>")))
    print_ansi(project.format_table_multi_line(sty(DEMO_TEXT)))
    print_ansi(project.format_table_footer())

    print_ansi(project.format_table_header(sty("<cyan>Code</cyan>")))
    print_ansi(project.format_table_code_multi_line(1, DEMO_CODE))
    print_ansi(project.format_table_footer())

    nested = project.enter_branch("nested")
    print_ansi(nested.format_branch_line(_status_line(display, Status.WARN, "a warning"), "├─ "))
    print_ansi(nested.leave_branch(_status_line(display, Status.OK, "nested done"), Status.OK))
    logger.add_log("rendered nested branch", component, Status.OK)

    print_ansi(project.leave_branch(_status_line(display, Status.OK, "demo done"), Status.OK))

    save = "--save" in args
    if save:
        # LOG_FILE may live outside PRETTYTERM_DIR, so create its own parent
        try:
            LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            console.print(
                f"[red]Could not create log directory {escape(str(LOG_FILE.parent))}: {escape(str(e))}[/red]"
            )
            return 1

    try:
        logger.destroy(LOG_FILE, write_to_file=save, print_everything_now=True)
    except OSError:
        return 1
    return 0


def _validate_setting(key: str, value: str) -> str | None:
    """Return an error message when value is not acceptable for key."""
    if key.endswith("_COLOR"):
        try:
            TerminalColors.from_name(value)
        except ValueError:
            return f"Invalid color: {value} (choose from {', '.join(c.value for c in TerminalColors)})"
    elif key == "BRANCH_STYLE":
        try:
            BranchStyle.from_name(value)
        except ValueError:
            return f"Invalid branch style: {value} (choose from unicode, indent)"
    elif key == "LOGGER_STYLE":
        try:
            LoggerPrintStyle.from_name(value)
        except ValueError:
            return f"Invalid logger style: {value} (choose from flat, tiny, full)"
    elif key in ("TERMINAL_WIDTH", "TERMINAL_HEIGHT") and value:
        if not value.isdigit() or int(value) <= 0:
            return f"Invalid size for {key}: {value} (positive integer, or empty to detect)"
    return None


def cmd_config(args: list[str]) -> int:
    """Handle `config`: list, get or set configuration settings.

    Supports three subcommands:
      config list           - Show all current settings
      config get KEY        - Show a specific setting's value
      config set KEY VALUE  - Validate and persist a setting to the config file
    """
    if not args or args[0] == "list":
        lines = ["Configuration:"]
        for key, default in DEFAULT_CONFIG.items():
            lines.append(f"  {key + ':':<16} {escape(get_setting(key, default))}")
        lines.append(f"  {'Config File:':<16} {escape(str(CONFIG_FILE))}")
        console.print("\n".join(lines))
        return 0

    if args[0] == "get" and len(args) >= 2:
        key = args[1].upper()
        if key not in DEFAULT_CONFIG:
            console.print(
                f"[red]Unknown setting: {escape(key)}\nAvailable settings: {', '.join(DEFAULT_CONFIG)}[/red]"
            )
            return 1
        console.print(f"{key} = {escape(get_setting(key, DEFAULT_CONFIG[key]))}")
        return 0

    if args[0] == "set" and len(args) >= 2:
        key = args[1].upper()
        # Join remaining args as value to support values with spaces
        value = " ".join(args[2:])
        if key not in DEFAULT_CONFIG:
            console.print(
                f"[red]Unknown setting: {escape(key)}\nAvailable keys: {', '.join(DEFAULT_CONFIG)}[/red]"
            )
            return 1

        error = _validate_setting(key, value)
        if error:
            console.print(f"[red]{escape(error)}[/red]")
            return 1

        config = load_config()
        config[key] = value
        if not save_config(config):
            return 1
        console.print(f"[green]Updated {key} in {escape(str(CONFIG_FILE))}[/green]")
        return 0

    console.print(
        "Usage:\n"
        "  prettyterm config list               - Show current configuration\n"
        "  prettyterm config get <KEY>          - Get a specific configuration value\n"
        "  prettyterm config set <KEY> <VALUE>  - Set a configuration value"
    )
    return 1
