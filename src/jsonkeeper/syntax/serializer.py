"""Format-preserving JSON serialization.

stringify() writes a value back to text using the indent unit and newline
sequence recorded on it by parse(), so an unchanged document round-trips
byte for byte. An explicit indent always wins over the recorded style.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

import json
import math
from collections.abc import Callable, Iterable
from typing import Any, TypeAlias

from jsonkeeper.constants import DEFAULT_NEWLINE, MAX_INDENT
from jsonkeeper.core import DepthGuard
from jsonkeeper.diagnostics.templates import ErrorTemplate

from .style import style_of

__all__ = ["Replacer", "stringify"]

Replacer: TypeAlias = Callable[[str | int, Any], Any] | Iterable[str | int]

# Same separators JSON.stringify emits, so compact documents round-trip.
_COMPACT_SEPARATORS = (",", ":")
_INDENTED_SEPARATORS = (",", ": ")


def _json_indent(space: str | int | None) -> str | int | None:
    """Map an indent argument to json.dumps(indent=...); None means compact.

    Integer indents are capped at MAX_INDENT spaces and string indents
    truncated to MAX_INDENT characters.

    Raises:
        TypeError: If space is a bool or any other non-str, non-int value
    """
    match space:
        case None:
            return None
        case int() if not isinstance(space, bool):
            return min(space, MAX_INDENT) if space > 0 else None
        case str():
            return space[:MAX_INDENT] or None
        case _:
            raise TypeError(ErrorTemplate.invalid_indent(space))


def _replace(
    key: str | int, value: Any, replacer: Callable[[str | int, Any], Any], guard: DepthGuard
) -> Any:
    value = replacer(key, value)
    with guard:
        if isinstance(value, dict):
            return {name: _replace(name, member, replacer, guard) for name, member in value.items()}
        if isinstance(value, list | tuple):
            return [_replace(index, item, replacer, guard) for index, item in enumerate(value)]
    return value


def _select(value: Any, allowed: list[str], guard: DepthGuard) -> Any:
    with guard:
        if isinstance(value, dict):
            return {name: _select(value[name], allowed, guard) for name in allowed if name in value}
        if isinstance(value, list | tuple):
            return [_select(item, allowed, guard) for item in value]
    return value


def _apply_replacer(value: Any, replacer: Replacer | None) -> Any:
    """Return a copy of value with replacer applied; value is never mutated.

    A callable is invoked top-down as replacer(key, value), starting with
    key "" for the root, and serialization continues into whatever it
    returns. An iterable of keys keeps only those object members, in that
    order, at every depth; arrays are kept whole.
    """
    if replacer is None:
        return value
    if callable(replacer):
        return _replace("", value, replacer, DepthGuard())
    allowed = list(dict.fromkeys(str(key) for key in replacer))
    return _select(value, allowed, DepthGuard())


def _finite_key(name: Any) -> Any:
    if isinstance(name, float) and not math.isfinite(name):
        # "NaN", "Infinity" or "-Infinity", the string form of the key.
        return json.dumps(name)
    return name


def _finite(value: Any, guard: DepthGuard, active: set[int]) -> Any:
    """Copy of value with NaN and the infinities replaced by None."""
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if not isinstance(value, dict | list | tuple):
        return value
    if id(value) in active:
        raise ValueError(ErrorTemplate.circular_reference())
    active.add(id(value))
    with guard:
        if isinstance(value, dict):
            copy: Any = {
                _finite_key(name): _finite(member, guard, active) for name, member in value.items()
            }
        else:
            copy = [_finite(item, guard, active) for item in value]
    active.discard(id(value))
    return copy


def _encode(value: Any, json_indent: str | int | None) -> str:
    """json.dumps with JSON.stringify's handling of non-finite numbers."""
    options: dict[str, Any] = {
        "ensure_ascii": False,
        "allow_nan": False,
        "indent": json_indent,
        "separators": _COMPACT_SEPARATORS if json_indent is None else _INDENTED_SEPARATORS,
    }
    try:
        return json.dumps(value, **options)
    except ValueError:
        # NaN and the infinities have no JSON spelling and are written as null.
        return json.dumps(_finite(value, DepthGuard(), set()), **options)


def stringify(
    value: Any,
    replacer: Replacer | None = None,
    indent: str | int | None = None,
) -> str:
    """Serialize value, reproducing the whitespace style recorded by parse().

    Args:
        value: Value to serialize, usually one returned by parse()
        replacer: Callable replacer(key, value) or an allow-list of keys
        indent: Indent unit or number of spaces, at most 10 of either. None
            uses the style recorded on value; "" or 0 forces compact output.

    Returns:
        JSON text. Indented output uses the recorded newline sequence
        (default "\\n") and ends with one trailing newline; compact output
        has no trailing newline. NaN and the infinities are written as null.

    Raises:
        TypeError: If indent is a bool or another non-str, non-int value,
            or if value holds a type JSON cannot represent
        ValueError: If value contains itself

    Example:
        >>> from jsonkeeper.syntax.parser import parse
        >>> text = '{\\r\\n\\t"a": 1\\r\\n}\\r\\n'
        >>> stringify(parse(text)) == text
        True
        >>> stringify(parse(text), indent="")
        '{"a":1}'
    """
    style = style_of(value)
    space = (style.indent if style is not None else None) if indent is None else indent
    json_indent = _json_indent(space)

    result = _encode(_apply_replacer(value, replacer), json_indent)
    if json_indent is None:
        return result

    newline = (style.newline if style is not None else "") or DEFAULT_NEWLINE
    if newline != DEFAULT_NEWLINE:
        result = result.replace(DEFAULT_NEWLINE, newline)
    return result + newline
