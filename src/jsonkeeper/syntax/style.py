"""Whitespace style detection and attachment.

A document's indent unit and newline sequence are detected from its leading
characters before decoding, then stored on the decoded object or array so
that stringify() can reproduce them. The style lives on the composite
instance itself (a dict or list subclass with one extra slot), so it
follows the value through every reference the caller holds, survives
in-place mutation, and never shows up in iteration or equality.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from jsonkeeper.constants import DEFAULT_INDENT, DEFAULT_NEWLINE

__all__ = ["FormatStyle", "JSONArray", "JSONObject", "attach_style", "detect_style", "style_of"]

# In both patterns group 1 is the newline run and group 2 (when present)
# the indent. Indentation only counts when the opening delimiter is
# followed by a line break; otherwise the document is treated as compact.
_FORMAT_RE = re.compile(r"^\s*[{\[]((?:\r?\n)+)([ \t]*)")
_EMPTY_RE = re.compile(r"(?:\{\}|\[\])((?:\r?\n)+)?")


@dataclass(frozen=True, slots=True)
class FormatStyle:
    """Whitespace style of a JSON document.

    Attributes:
        indent: Indent unit ("  ", "\\t", ...); empty for compact documents
        newline: Newline sequence ("\\n", "\\r\\n", ...); empty for compact documents
    """

    indent: str
    newline: str


class JSONObject(dict[str, Any]):
    """dict carrying the FormatStyle of the document it was parsed from."""

    __slots__ = ("style",)

    def __init__(self, members: Any = (), /, style: FormatStyle | None = None) -> None:
        super().__init__(members)
        self.style = style


class JSONArray(list[Any]):
    """list carrying the FormatStyle of the document it was parsed from."""

    __slots__ = ("style",)

    def __init__(self, items: Any = (), /, style: FormatStyle | None = None) -> None:
        super().__init__(items)
        self.style = style


def detect_style(text: str) -> FormatStyle:
    """Detect indent unit and newline sequence from the start of a document.

    Args:
        text: JSON document (BOM already stripped)

    Returns:
        Detected style; ``FormatStyle("", "")`` when the document does not
        break the line after its opening delimiter

    Example:
        >>> detect_style('{\\r\\n\\t"a": 1\\r\\n}')
        FormatStyle(indent='\\t', newline='\\r\\n')
        >>> detect_style("[]")
        FormatStyle(indent='  ', newline='\\n')
        >>> detect_style('{"a": 1}')
        FormatStyle(indent='', newline='')
    """
    empty = _EMPTY_RE.fullmatch(text)
    if empty is not None:
        # No content line to inspect: use the default indent.
        return FormatStyle(indent=DEFAULT_INDENT, newline=empty.group(1) or DEFAULT_NEWLINE)

    leading = _FORMAT_RE.match(text)
    if leading is not None:
        return FormatStyle(indent=leading.group(2), newline=leading.group(1))

    return FormatStyle(indent="", newline="")


def attach_style(value: Any, style: FormatStyle) -> Any:
    """Return value tagged with style.

    Objects and arrays are returned as JSONObject/JSONArray carrying style;
    values that already are one are tagged in place. Scalars are returned
    unchanged, since they are never indented.

    Example:
        >>> tagged = attach_style({"a": 1}, FormatStyle("\\t", "\\n"))
        >>> tagged == {"a": 1}, style_of(tagged).indent
        (True, '\\t')
    """
    match value:
        case JSONObject() | JSONArray():
            value.style = style
            return value
        case dict():
            return JSONObject(value, style=style)
        case list():
            return JSONArray(value, style=style)
        case _:
            return value


def style_of(value: Any) -> FormatStyle | None:
    """Style attached to value, or None for scalars and untagged values."""
    if isinstance(value, JSONObject | JSONArray):
        return value.style
    return None
