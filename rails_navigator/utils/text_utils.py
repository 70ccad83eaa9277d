def clamp_offset(text: str, offset: int) -> int:
    return max(0, min(offset, len(text)))


def offset_to_position(text: str, offset: int) -> tuple[int, int]:
    """Converts a character offset to a 1-based (line, column) pair."""
    offset = clamp_offset(text, offset)
    line_start = text.rfind("\n", 0, offset) + 1
    line = text.count("\n", 0, offset) + 1
    return line, offset - line_start + 1


def position_to_offset(text: str, line: int, column: int) -> int:
    """
    Converts a 1-based (line, column) pair to a character offset.

    Lines past the end of the text map to the end of the text; columns past the
    end of a line map to the end of that line.
    """
    line_start = 0
    for _ in range(max(line, 1) - 1):
        newline = text.find("\n", line_start)
        if newline == -1:
            return len(text)
        line_start = newline + 1
    line_end = text.find("\n", line_start)
    if line_end == -1:
        line_end = len(text)
    return min(line_start + max(column, 1) - 1, line_end)


def leading_whitespace(line: str) -> int:
    return len(line) - len(line.lstrip())
