"""Position utilities for JSON documents.

Converts the character offsets reported by parse errors into line/column
positions and source excerpts for error reporting and editor integration.
"""


def line_offset(source: str, pos: int) -> int:
    """Get 0-based line number from character offset.

    Args:
        source: Complete JSON document
        pos: Character offset in source

    Returns:
        0-based line number

    Example:
        >>> source = '{\\n  "a": 1\\n}'
        >>> line_offset(source, 0)
        0
        >>> line_offset(source, 4)
        1
        >>> line_offset(source, 12)
        2

    Note:
        - Counts LF characters before position, so CRLF documents count
          one line per CRLF
        - Positions past the end are clamped to the document length
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))

    return source.count("\n", 0, pos)


def column_offset(source: str, pos: int) -> int:
    """Get 0-based column number from character offset.

    Args:
        source: Complete JSON document
        pos: Character offset in source

    Returns:
        0-based column number (characters from line start)

    Example:
        >>> source = '[1,\\n 2]'
        >>> column_offset(source, 1)
        1
        >>> column_offset(source, 5)
        1
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))

    line_start = source.rfind("\n", 0, pos)
    if line_start == -1:
        return pos

    return pos - line_start - 1


def format_position(source: str, pos: int, zero_based: bool = True) -> str:
    """Format position as human-readable line:column string.

    Args:
        source: Complete JSON document
        pos: Character offset in source
        zero_based: If True, use 0-based indexing; if False, use 1-based

    Returns:
        Position string like "line:col" (e.g., "2:5" or "3:6")

    Example:
        >>> format_position('{\\n  "a" 1\\n}', 8, zero_based=False)
        '2:7'
    """
    line = line_offset(source, pos)
    col = column_offset(source, pos)

    if not zero_based:
        line += 1
        col += 1

    return f"{line}:{col}"


def get_line_content(source: str, line_number: int, zero_based: bool = True) -> str:
    """Extract the content of a specific line (without its line ending)."""
    if not zero_based:
        line_number -= 1

    if line_number < 0:
        msg = f"Line number must be >= 0, got {line_number}"
        raise ValueError(msg)

    lines = [line.removesuffix("\r") for line in source.split("\n")]

    if line_number >= len(lines):
        msg = f"Line {line_number} out of range (source has {len(lines)} lines)"
        raise ValueError(msg)

    return lines[line_number]


def get_error_context(source: str, pos: int, context_lines: int = 2, marker: str = "^") -> str:
    """Get formatted error context showing position in source.

    Creates a multi-line string showing the error location with
    surrounding context lines and a marker pointing to the error.

    Args:
        source: Complete JSON document
        pos: Character offset of error
        context_lines: Number of lines to show before/after error
        marker: Character to use for error marker

    Returns:
        Formatted error context string

    Example:
        >>> source = '{\\n  "a": 1,\\n  "b" 2\\n}'
        >>> print(get_error_context(source, 18, context_lines=1))
          "a": 1,
          "b" 2
              ^
        }
    """
    line_num = line_offset(source, pos)
    col_num = column_offset(source, pos)

    # Split on LF only so line numbers agree with line_offset() for CRLF input.
    lines = [line.removesuffix("\r") for line in source.split("\n")]

    start_line = max(0, line_num - context_lines)
    end_line = min(len(lines), line_num + context_lines + 1)

    context = []
    for i in range(start_line, end_line):
        context.append(lines[i])
        if i == line_num:
            context.append(" " * col_num + marker)

    return "\n".join(context)
