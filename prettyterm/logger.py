"""
In-memory logger with three print styles and optional file persistence.

Logs are buffered in `Logger.logs` for the lifetime of the logger and only
written out when `Logger.destroy` is called. Formatted lines are plain text,
so the tree printer's width helpers work on them directly.

Print styles:
  TINY: ``Ok: message | from file.py-func:main, time is 10:20:30``
  FLAT: ``Ok: message | file file.py | time 10:20:30``
  FULL: ``[Ok|10:20:30][/src/file.py-main]: message``
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path

from rich.markup import escape

from .common_types import Status
from .console import console


@dataclass
class LogTime:
    hour: int
    minute: int
    seconds: int

    @classmethod
    def now(cls) -> "LogTime":
        """Current local time."""
        time = datetime.now()
        return cls(time.hour, time.minute, time.second)

    def format(self) -> str:
        # Not zero-padded: 9:05:03 is rendered as "9:5:3"
        return f"{self.hour}:{self.minute}:{self.seconds}"


@dataclass
class Component:
    """Where a log came from."""

    file_name: str
    func_name: str
    dir_path: str


class LoggerPrintStyle(Enum):
    # Words instead of symbols
    FLAT = "flat"
    # Compact, simplified output
    TINY = "tiny"
    # Every field, bracketed
    FULL = "full"

    @classmethod
    def from_name(cls, name: str) -> "LoggerPrintStyle":
        return cls(name.strip().lower())


@dataclass
class Log:
    status: Status
    message: str
    component: Component
    time: LogTime

    def format(self, style: LoggerPrintStyle) -> str:
        """Render this log as a single line in the given style."""
        if style is LoggerPrintStyle.TINY:
            return (
                f"{self.status}: {self.message} | from {self.component.file_name}"
                f"-func:{self.component.func_name}, time is {self.time.format()}"
            )
        if style is LoggerPrintStyle.FLAT:
            return (
                f"{self.status}: {self.message} | file {self.component.file_name}"
                f" | time {self.time.format()}"
            )
        return (
            f"[{self.status}|{self.time.format()}]"
            f"[{self.component.dir_path}/{self.component.file_name}-{self.component.func_name}]"
            f": {self.message}"
        )


@dataclass
class Logger:
    creation_time: LogTime
    printable_in_terminal: bool
    style: LoggerPrintStyle = LoggerPrintStyle.TINY
    logs: list[Log] = field(default_factory=list)
    destruction_time: LogTime | None = None

    def add_log(
        self,
        message: str,
        component: Component,
        status: Status,
        time: LogTime | None = None,
    ) -> str | None:
        """Record a log, stamped with the current time unless `time` is given.

        Returns:
            The formatted line when the logger is printable in the terminal,
            otherwise None. Nothing is printed here; the caller decides.
        """
        log = Log(status, message, component, time or LogTime.now())
        self.logs.append(log)
        if self.printable_in_terminal:
            return log.format(self.style)
        return None

    def destroy(self, file_for_logs: str | Path, write_to_file: bool, print_everything_now: bool):
        """Finish the logger: stamp its end time, then print and/or persist every log.

        The file is created if missing and overwritten if present.

        Raises:
            OSError: The log file could not be created or written. The error is
                reported on the console first.
        """
        self.destruction_time = LogTime.now()
        formatted_logs = [log.format(self.style) for log in self.logs]

        if print_everything_now:
            for line in formatted_logs:
                console.print(line, markup=False, highlight=False, soft_wrap=True)

        if write_to_file:
            path = Path(file_for_logs)
            try:
                path.write_text("\n".join(formatted_logs), encoding="utf-8")
            except OSError as e:
                console.print(f"[red]Error writing log file {escape(str(path))}: {escape(str(e))}[/red]")
                raise
