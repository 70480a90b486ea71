"""
Inline style tags: turn ``<red|bold>text</red|bold>`` into ANSI escape codes.

Tag syntax:
  - ``<name>`` or ``<name1|name2|...>`` opens a style scope. Names are looked up
    case-insensitively in ``colors.STYLE_CODES``; unknown names emit nothing.
  - ``</anything>`` closes the innermost open scope. The body of a closing
    tag is ignored, only the ``/`` matters.

How closing works:
  Terminals have no "undo the last SGR code" instruction, so a close emits a
  full reset and then replays every scope that is still open, bottom to top,
  in the order its names were declared. Nothing is diffed or merged.

  A close with nothing open is consumed silently. Scopes still open at the end
  of the input get a single trailing reset.

There is no escape for a literal ``<``: every ``<`` starts a tag, and a ``<``
without a later ``>`` swallows the rest of the input as its tag body.
"""

from collections.abc import Iterator
from typing import NamedTuple

from .colors import RESET_COLOR, get_style_code


class StyleToken(NamedTuple):
    """One opening or closing tag occurrence."""

    is_closing: bool
    names: list[str]


def iter_style_tokens(text: str) -> Iterator[str | StyleToken]:
    """Split text into plain-text runs and StyleTokens, in input order."""
    pos = 0
    length = len(text)
    while pos < length:
        start = text.find("<", pos)
        if start == -1:
            yield text[pos:]
            return
        if start > pos:
            yield text[pos:start]

        body_start = start + 1
        is_closing = text.startswith("/", body_start)
        if is_closing:
            body_start += 1

        end = text.find(">", body_start)
        if end == -1:
            body = text[body_start:]
            pos = length
        else:
            body = text[body_start:end]
            pos = end + 1

        yield StyleToken(is_closing, body.split("|"))


def _codes_for(names: list[str]) -> str:
    return "".join(get_style_code(name) for name in names)


def process_style_tags(text: str) -> str:
    """Expand inline style tags in text into ANSI escape sequences.

    Never fails: malformed input degrades to a no-op rather than an error.

    Example:
        >>> process_style_tags("<red>A<bold>B</bold>C</red>")
        '\\x1b[31mA\\x1b[1mB\\x1b[0m\\x1b[31mC\\x1b[0m'
    """
    result: list[str] = []
    style_stack: list[list[str]] = []

    for token in iter_style_tokens(text):
        if isinstance(token, str):
            result.append(token)
        elif token.is_closing:
            if style_stack:
                style_stack.pop()
                result.append(RESET_COLOR)
                for names in style_stack:
                    result.append(_codes_for(names))
        else:
            style_stack.append(token.names)
            result.append(_codes_for(token.names))

    if style_stack:
        result.append(RESET_COLOR)

    return "".join(result)


expand = process_style_tags


def sty(fmt: str, *args, **kwargs) -> str:
    """Format a string with str.format, then expand its style tags.

    With no arguments the string is expanded as-is, so literal braces are safe.
    """
    if args or kwargs:
        fmt = fmt.format(*args, **kwargs)
    return process_style_tags(fmt)
