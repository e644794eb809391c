"""Strict JSON decoding primitive.

Wraps the standard library decoder so that it accepts strict JSON only:
the NaN, Infinity and -Infinity literals that json.loads() tolerates by
default are rejected with an ordinary JSONDecodeError pointing at the
literal. Also provides the reviver-style walk that applies a value
transform to a decoded document.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from typing import Any, TypeAlias

__all__ = ["DECODER_FAILURES", "Transform", "decode", "internalize"]

Transform: TypeAlias = Callable[[str | int, Any], Any]

# Exceptions meaning "the decoder rejected this text". ValueError covers
# JSONDecodeError and integer literals longer than the interpreter's digit
# limit; RecursionError covers documents nested too deeply to decode.
DECODER_FAILURES: tuple[type[Exception], ...] = (ValueError, RecursionError)


class _NonStandardConstant(ValueError):
    """NaN/Infinity literal seen by the decoder."""

    def __init__(self, literal: str) -> None:
        super().__init__(literal)
        self.literal = literal


def _reject_constant(literal: str) -> Any:
    raise _NonStandardConstant(literal)


def _find_literal(text: str, literal: str) -> int:
    """Offset of the first occurrence of literal outside string values."""
    in_string = escaped = False
    for index, char in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif text.startswith(literal, index):
            return index
    return 0


_DECODER = json.JSONDecoder(parse_constant=_reject_constant)


def decode(text: Any) -> Any:
    """Decode strict JSON text.

    Args:
        text: JSON document. Anything other than str makes the decoder raise
            its own TypeError, which callers trap to describe the input.

    Returns:
        Decoded value

    Raises:
        json.JSONDecodeError: If text is not valid JSON
        ValueError: If an integer literal exceeds the interpreter digit limit
        RecursionError: If text nests deeper than the interpreter allows
        TypeError: If text is not a str
    """
    try:
        return _DECODER.decode(text)
    except _NonStandardConstant as e:
        raise json.JSONDecodeError(
            "Expecting value", text, _find_literal(text, e.literal)
        ) from None


def _members(value: Any) -> Iterator[tuple[str | int, Any]]:
    """Snapshot of (key, child) pairs of a composite; empty for scalars."""
    if isinstance(value, dict):
        return iter(list(value.items()))
    if isinstance(value, list):
        return iter(list(enumerate(value)))
    return iter(())


def internalize(value: Any, transform: Transform) -> Any:
    """Apply transform to every member of a decoded document.

    Members are visited bottom-up: children are transformed before the
    container holding them, and the root is visited last with key "".
    Object members receive their str key, array items their int index.
    The value returned by transform replaces the visited value in place.

    The walk keeps its own stack instead of recursing, so any document the
    decoder accepted can be transformed regardless of nesting depth.

    Args:
        value: Freshly decoded document (mutated in place)
        transform: Callback invoked as transform(key, value)

    Returns:
        Result of transform("", root)

    Example:
        >>> internalize({"a": [1, 2]}, lambda k, v: v * 10 if isinstance(v, int) else v)
        {'a': [10, 20]}
    """
    root: dict[str | int, Any] = {"": value}
    # Each frame is (holder, key, pending children of holder[key]).
    stack: list[tuple[Any, str | int, Iterator[tuple[str | int, Any]]]] = [
        (root, "", _members(value))
    ]
    while stack:
        holder, key, pending = stack[-1]
        member = next(pending, None)
        if member is None:
            stack.pop()
            holder[key] = transform(key, holder[key])
        else:
            name, child = member
            stack.append((holder[key], name, _members(child)))
    return root[""]
