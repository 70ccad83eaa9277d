"""
Best-effort location of Ruby method definitions in raw source text.

This is a line scanner, not a parser. It finds the closest `def <name>` line
before the cursor and walks forward to the cursor looking for a bare `end` line
indented no deeper than that definition, which is taken to close the method.

Known limits, also exposed as the capability flags below:
-   Block-closing `end` lines of nested `if`/`case`/`do` blocks are only told
    apart from the method's own `end` by indentation, so badly indented code
    can be misread.
-   One-line definitions (`def show; end`, `def show = ...`) never close, so a
    cursor after them is still reported as inside them.
-   Heredocs and keywords inside strings are scanned like code.
"""

from __future__ import annotations

import re

from loguru import logger

from ..core import logs as ls
from ..data_models.models import DEFAULT_CONVENTIONS, NavigationConventions
from ..infrastructure.decorators import timing_decorator
from ..utils.text_utils import clamp_offset, leading_whitespace

HANDLES_NESTED_BLOCK_ENDS = False
HANDLES_ONE_LINE_METHODS = False


def _definition_pattern(keyword: str, name: str = r"\w+") -> re.Pattern[str]:
    return re.compile(
        rf"^(?P<indent>[ \t]*){re.escape(keyword)}[ \t]+(?P<name>{name})\b",
        re.MULTILINE,
    )


def _closes_method(line: str, def_indent: int, end_keyword: str) -> bool:
    return line.strip() == end_keyword and leading_whitespace(line) <= def_indent


@timing_decorator
def find_enclosing_method(
    text: str,
    cursor_offset: int,
    conventions: NavigationConventions = DEFAULT_CONVENTIONS,
) -> str | None:
    """
    Returns the name of the method whose body contains `cursor_offset`.

    Args:
        text (str): The full source text.
        cursor_offset (int): The cursor position; clamped into the text.
        conventions (NavigationConventions): Supplies the `def`/`end` keywords.

    Returns:
        str | None: The enclosing method name, or None when the cursor is before
            the first definition or after the closing `end` of the closest one.
    """
    cursor_offset = clamp_offset(text, cursor_offset)
    before_cursor = text[:cursor_offset]

    pattern = _definition_pattern(conventions.method_keyword)
    definitions = list(pattern.finditer(before_cursor))
    if not definitions:
        logger.debug(ls.NO_DEF_BEFORE_CURSOR.format(offset=cursor_offset))
        return None

    last_def = definitions[-1]
    # Re-match on the full text so a cursor inside the name yields the whole name.
    full_def = pattern.match(text, last_def.start())
    name = full_def.group("name") if full_def else last_def.group("name")
    def_indent = len(last_def.group("indent"))

    # The definition line itself is skipped; only lines after it can close it.
    span_lines = text[last_def.start() : cursor_offset].split("\n")
    for line_no, line in enumerate(span_lines[1:], start=1):
        if _closes_method(line.rstrip("\r"), def_indent, conventions.block_end_keyword):
            logger.debug(
                ls.METHOD_CLOSED.format(
                    name=name,
                    line=before_cursor.count("\n", 0, last_def.start()) + line_no + 1,
                    offset=cursor_offset,
                )
            )
            return None

    logger.debug(ls.ENCLOSING_METHOD.format(offset=cursor_offset, name=name))
    return name


def find_method_offset(
    text: str,
    action: str,
    conventions: NavigationConventions = DEFAULT_CONVENTIONS,
) -> int | None:
    """
    Finds the first `def <action>` line in `text`.

    The returned offset sits right after the method name, so calling
    `find_enclosing_method` at that offset yields `action` again.

    Args:
        text (str): The full source text.
        action (str): The method name to look for; matched literally.
        conventions (NavigationConventions): Supplies the `def` keyword.

    Returns:
        int | None: The offset just past the method name, or None if absent.
    """
    pattern = _definition_pattern(conventions.method_keyword, re.escape(action))
    match = pattern.search(text)
    if match is None:
        logger.debug(ls.METHOD_NOT_LOCATED.format(name=action))
        return None
    logger.debug(ls.METHOD_LOCATED.format(name=action, offset=match.end("name")))
    return match.end("name")
