from enum import Enum


class Status(Enum):
    """Outcome of an operation, shown in log lines and branch footers."""

    OK = "Ok"
    ERROR = "Error"
    FATAL = "Fatal"
    INFO = "Info"
    WARN = "Warning"

    def __str__(self) -> str:
        return self.value
