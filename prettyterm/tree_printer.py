"""
Tree printer: branches, boxed tables and numbered code listings.

A Branch is an immutable cursor at one indent level of a printed tree.
Entering a child prints the connector line immediately and hands back a new
Branch one level deeper; the parent value is left untouched, so a caller can
keep both around and keep formatting at either level.

Every width computation goes through `visual_len`, so content that already
carries ANSI codes (for example the output of `process_style_tags`) pads and
wraps by what the terminal shows rather than by string length. All padding is
floored at zero: content wider than the terminal overflows, it is never
truncated.

Layout of a boxed table at indent level 1 with a 24-column terminal:

    │  ├─ Title─────────── ╮
    │  │ some content      │
    │  ├───────────────────╯
"""

from dataclasses import dataclass, field, replace
from enum import Enum

from .common_types import Status
from .console import print_ansi
from .theme_config import DisplayConfig
from .utils import iter_visual_units, visual_len

# Every indent level is three columns wide, whatever the branch style.
INDENT_WIDTH = 3


class BranchStyle(Enum):
    """How indent levels are drawn."""

    # Vertical guide lines with ├─ connectors
    UNICODE = "unicode"
    # Blank padding with ╰─ connectors
    INDENT = "indent"

    def as_str(self) -> str:
        """The per-level indent token."""
        return "│  " if self is BranchStyle.UNICODE else "   "

    @property
    def connector(self) -> str:
        return "╰" if self is BranchStyle.INDENT else "├"

    @classmethod
    def from_name(cls, name: str) -> "BranchStyle":
        return cls(name.strip().lower())


def _split_lines(text: str) -> list[str]:
    """Split on LF and CRLF only; other characters str.splitlines breaks on stay in the line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


# Hard breaks cut at limit, one column short of the limit + 1 soft-break window.
def _wrap_units(units: list[tuple[str, int]], limit: int) -> list[str]:
    """Greedy word-wrap over visual units so no segment is wider than limit.

    Breaks at the last space within limit + 1 columns (a space sitting right on
    the boundary still counts) and consumes it; with no such space the segment
    is cut hard at limit columns.
    """
    segments = []
    pos = 0
    count = len(units)

    while pos < count:
        width = 0
        end = pos
        last_space = None
        while end < count:
            text, unit_width = units[end]
            if width + unit_width > limit:
                break
            if text == " ":
                last_space = end
            width += unit_width
            end += 1

        if end >= count:
            next_pos = count
        elif units[end][0] == " ":
            next_pos = end + 1
        elif last_space is not None and last_space > pos:
            end = last_space
            next_pos = last_space + 1
        else:
            next_pos = end

        segments.append("".join(text for text, _ in units[pos:end]))
        pos = next_pos

    return segments


@dataclass(frozen=True)
class Branch:
    name: str = ""
    message: str = ""
    indent_level: int = 0
    display_config: DisplayConfig = field(default_factory=DisplayConfig)
    style: BranchStyle = BranchStyle.UNICODE

    @classmethod
    def root(
        cls,
        display_config: DisplayConfig | None = None,
        style: BranchStyle = BranchStyle.UNICODE,
    ) -> "Branch":
        """Create the indent-0 root of a tree."""
        if display_config is None:
            display_config = DisplayConfig.from_settings()
        return cls(display_config=display_config, style=style)

    @property
    def terminal_width(self) -> int:
        return self.display_config.terminal_width

    @property
    def _indent_width(self) -> int:
        return self.indent_level * INDENT_WIDTH

    def enter_branch(self, name: str) -> "Branch":
        """Print the connector line for `name` and return the child branch.

        The line is printed at the current level before the child exists.
        """
        print_ansi(f"{self.format_indent()}{self.style.connector}─ {name}")
        return replace(self, name=name, message="", indent_level=self.indent_level + 1)

    def leave_branch(self, text: str, status: Status) -> str:
        """Closing line for this branch. `status` does not affect the output yet."""
        return f"{self.format_indent()}╰─ {text}"

    def format_indent(self) -> str:
        return self.style.as_str() * self.indent_level

    def format_branch_line(self, text: str, prefix: str) -> str:
        return f"{self.format_indent()}{prefix}{text}"

    def format_table_line(self, line: str) -> str:
        """Box one line of content, padded to fill the terminal width."""
        spaces_needed = max(0, self.terminal_width - (visual_len(line) + 4 + self._indent_width))
        return f"{self.format_indent()}│ {line} {' ' * spaces_needed}│"

    def format_table_multi_line(self, lines: str) -> str:
        """Word-wrap multi-line text into boxed table lines.

        Each source line is trimmed first; lines left empty produce no output.
        """
        max_line_width = max(0, self.terminal_width - (3 + self._indent_width))
        # The right-hand pad of a table line takes one of those columns.
        limit = max(1, max_line_width - 1)

        result = []
        for orig_line in _split_lines(lines):
            line = orig_line.strip()
            if not line:
                continue
            units = list(iter_visual_units(line))
            for chunk in _wrap_units(units, limit):
                result.append(self.format_table_line(chunk))

        return "\n".join(result)

    def format_code_line(self, line_num: int, code_line: str, line_num_indent: int) -> str:
        """Right-align the line number in a gutter of `line_num_indent` columns."""
        line_num_str = str(line_num)
        indent_len = max(0, line_num_indent - len(line_num_str))
        return f"{' ' * indent_len}{line_num_str}| {code_line}"

    def format_table_code_multi_line(self, line_num_first: int, code_snippet: str) -> str:
        """Number and box every line of a code snippet, starting at `line_num_first`."""
        code_lines = _split_lines(code_snippet)
        if not code_lines:
            return ""

        line_num_last = line_num_first + len(code_lines) - 1
        line_num_indent = len(str(line_num_last))
        result = []

        for i, code_line in enumerate(code_lines):
            formatted = self.format_code_line(line_num_first + i, code_line, line_num_indent)
            spaces_needed = max(0, self.terminal_width - (self._indent_width + visual_len(formatted) + 4))
            result.append(f"{self.format_indent()}│ {formatted}{' ' * spaces_needed} │")

        return "\n".join(result)

    def format_table_header(self, text: str) -> str:
        dashes_needed = max(0, self.terminal_width - (visual_len(text) + 5 + self._indent_width))
        return f"{self.format_branch_line(text, '├─ ')}{'─' * dashes_needed} ╮"

    def format_table_footer(self) -> str:
        dashes_needed = max(0, self.terminal_width - (3 + self._indent_width))
        return f"{self.format_branch_line('', '├─')}{'─' * dashes_needed}╯"
