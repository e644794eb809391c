"""Translate decoder failures into located, human-readable diagnostics.

The standard library decoder reports failures as free text plus an offset.
This module is the only place that inspects failure text: describe_failure()
renders a decoder failure into a small signature vocabulary, and translate()
recovers the offending token and offset from that vocabulary by pattern
matching. Failures from other sources contribute their message unchanged and
go through the same matching, so a decoder with richer error reporting only
needs a new branch in describe_failure().

Signatures (case-insensitive):
    Unexpected token X ...            offending token, rewritten with hex codes
    ... at position N ...             offset of the failure
    Unexpected end of JSON ...        offset is the last character
    Unterminated string in JSON ...   offset is the last character
    ... is not valid JSON             offset is 0

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
import re

from jsonkeeper.constants import DEFAULT_CONTEXT

from .codes import Diagnostic
from .templates import ErrorTemplate

__all__ = ["describe_failure", "hexify", "translate"]

logger = logging.getLogger(__name__)

# Group 1 captures the quoted form ("Unexpected token 'x', ..."),
# group 2 the bare form ("Unexpected token x in JSON at position 3").
_TOKEN_RE = re.compile(r"^Unexpected token (?:'(.)'(?=,)|(.))", re.IGNORECASE | re.DOTALL)
_POSITION_RE = re.compile(r"at positions? (\d+)", re.IGNORECASE)
_END_OF_INPUT_RE = re.compile(
    r"^Unexpected end of JSON|Unterminated string in JSON", re.IGNORECASE
)
_NOT_VALID_RE = re.compile(r"is not valid JSON$", re.IGNORECASE)


def hexify(token: str) -> str:
    """Render each character of token as an upper-case 0xHH code point.

    Example:
        >>> hexify("f")
        '0x66'
        >>> hexify("\\b\\ufeff")
        '0x080xFEFF'
    """
    return "".join(f"0x{ord(char):02X}" for char in token)


def describe_failure(error: BaseException, text: str) -> str:
    """Render a decoder failure as a message in the signature vocabulary.

    Args:
        error: Exception raised by the decoder (or any other exception)
        text: Document that was being decoded

    Returns:
        Message text for signature matching
    """
    if not isinstance(error, json.JSONDecodeError):
        return str(error)

    if error.msg.startswith("Unterminated string"):
        return f"Unterminated string in JSON at position {error.pos}"
    if error.pos >= len(text):
        return "Unexpected end of JSON input"

    detail = error.msg.removesuffix(" at")
    detail = detail[:1].lower() + detail[1:]
    return f"Unexpected token {text[error.pos]} in JSON at position {error.pos} ({detail})"


def _locate(message: str, text: str) -> int | None:
    """Resolve the error offset from message signatures, None if unknown."""
    if _END_OF_INPUT_RE.search(message):
        return len(text) - 1

    at_position = _POSITION_RE.search(message)
    if at_position is not None:
        return int(at_position.group(1))

    # Generic "not valid JSON" failures carry no offset; 0 is reported as-is.
    if _NOT_VALID_RE.search(message):
        return 0

    return None


def _expand_token(message: str) -> str:
    """Replace the "Unexpected token X" phrase with quoted and hex forms."""
    bad_token = _TOKEN_RE.match(message)
    if bad_token is None:
        return message

    token = bad_token.group(1) or bad_token.group(2)
    return ErrorTemplate.unexpected_token(token, hexify(token)) + message[bad_token.end() :]


def translate(error: BaseException, text: str, context: int = DEFAULT_CONTEXT) -> Diagnostic:
    """Compute a human-readable message and offset for a parse failure.

    Args:
        error: Exception raised while decoding text
        text: Document that failed to decode (BOM already stripped)
        context: Characters quoted on each side of the error offset

    Returns:
        Diagnostic with translated message and 0-based position

    Example:
        >>> import json
        >>> try:
        ...     json.loads("abcde")
        ... except json.JSONDecodeError as e:
        ...     translate(e, "abcde", 2).message
        'Unexpected token "a" (0x61) in JSON at position 0 (expecting value) while parsing near "ab..."'
    """
    raw = describe_failure(error, text)
    if not text:
        return Diagnostic(message=ErrorTemplate.empty_input(raw), position=0)

    err_idx = _locate(raw, text)
    message = _expand_token(raw)

    if err_idx is None:
        logger.debug("No offset signature in parse failure: %s", raw)
        return Diagnostic(message=ErrorTemplate.unlocated(message, text[: context * 2]), position=0)

    start = 0 if err_idx <= context else err_idx - context
    end = len(text) if err_idx + context >= len(text) else err_idx + context

    excerpt = (
        ("" if start == 0 else "...")
        + text[start:end]
        + ("" if end == len(text) else "...")
    )

    return Diagnostic(
        message=ErrorTemplate.located(message, excerpt, near=excerpt != text),
        position=err_idx,
    )
