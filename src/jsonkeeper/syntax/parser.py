"""Format-preserving JSON parsing.

parse() decodes strict JSON, records the document's indent unit and newline
sequence on the resulting object or array, and turns decoder failures into
JSONParseError with a located, human-readable message.

parse_safe() is the non-raising variant: it returns a default (None) for
anything that parse() would raise on, and records no style.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import Any, TypeAlias

from jsonkeeper.constants import BYTE_ORDER_MARK, DEFAULT_CONTEXT
from jsonkeeper.diagnostics import JSONParseError, UnparseableInputError
from jsonkeeper.diagnostics.templates import ErrorTemplate

from .decoder import DECODER_FAILURES, Transform, decode, internalize
from .style import attach_style, detect_style

__all__ = ["parse", "parse_safe"]

logger = logging.getLogger(__name__)

Source: TypeAlias = str | bytes | bytearray | memoryview


def _to_text(source: Any) -> Any:
    """Decode byte input and strip a single leading BOM.

    Anything that is neither text nor bytes is returned unchanged so that
    the decoder rejects it with its own TypeError.
    """
    match source:
        case str():
            text = source
        case bytes() | bytearray() | memoryview():
            # Undecodable bytes become U+FFFD and fail as an unexpected token.
            text = bytes(source).decode("utf-8", errors="replace")
        case _:
            return source
    return text.removeprefix(BYTE_ORDER_MARK)


def _describe(source: Any) -> str:
    if isinstance(source, list | tuple) and not source:
        return "an empty array"
    return str(source)


def parse(
    source: Source,
    transform: Transform | None = None,
    context: int | None = DEFAULT_CONTEXT,
) -> Any:
    """Parse JSON text, remembering its whitespace style.

    Args:
        source: JSON document as text or UTF-8 bytes (a leading BOM is ignored)
        transform: Optional callback applied to every member as
            transform(key, value), bottom-up, root last with key ""
        context: Characters quoted on each side of a failure in error
            messages; 0 or None selects the default of 20

    Returns:
        Decoded value. Objects and arrays are returned as JSONObject and
        JSONArray carrying the detected FormatStyle.

    Raises:
        JSONParseError: If source is text or bytes but not valid JSON, or if
            transform raises (the transform's exception becomes ``cause``)
        UnparseableInputError: If source is not text or bytes at all

    Example:
        >>> value = parse('{\\n    "name": "demo"\\n}\\n')
        >>> value == {"name": "demo"}
        True
        >>> value.style
        FormatStyle(indent='    ', newline='\\n')
    """
    context = context or DEFAULT_CONTEXT
    text = _to_text(source)

    try:
        result = decode(text)
    except TypeError as e:
        raise UnparseableInputError(ErrorTemplate.cannot_parse(_describe(source)), e) from e
    except DECODER_FAILURES as e:
        raise JSONParseError(e, text, context) from e

    if transform is not None:
        try:
            result = internalize(result, transform)
        except Exception as e:
            raise JSONParseError(e, text, context) from e

    style = detect_style(text)
    logger.debug(
        "Parsed %s with indent=%r newline=%r", type(result).__name__, style.indent, style.newline
    )
    return attach_style(result, style)


def parse_safe(
    source: Source, transform: Transform | None = None, default: Any = None
) -> Any:
    """Parse JSON text, returning default instead of raising.

    Decoder failures, non-text input and exceptions raised by transform
    all yield default. No style is recorded on the result.

    Args:
        source: JSON document as text or UTF-8 bytes (a leading BOM is ignored)
        transform: Optional callback, as for parse()
        default: Value returned when source is not valid JSON text; pass a
            sentinel to tell a failure apart from a document that is "null"

    Returns:
        Decoded value, or default if source is not valid JSON text

    Example:
        >>> parse_safe("not json") is None
        True
        >>> parse_safe(b'{"ok": true}')
        {'ok': True}
    """
    try:
        result = decode(_to_text(source))
        if transform is not None:
            result = internalize(result, transform)
    except Exception as e:
        logger.debug("parse_safe discarded input: %s: %s", type(e).__name__, e)
        return default
    return result
