"""jsonkeeper exception hierarchy.

Two failure kinds are raised from parse() and never conflated:

- JSONParseError: the input was text or bytes but is not valid JSON.
  Carries a translated message, the offset of the failure and the
  decoder's own exception as ``cause``.
- UnparseableInputError: the input was not text or bytes at all.
  Carries the trapped decoder exception as ``system_error`` and has no
  position.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

import json

from jsonkeeper.constants import DEFAULT_CONTEXT

from .codes import ErrorCode
from .position import (
    column_offset,
    format_position,
    get_error_context,
    get_line_content,
    line_offset,
)
from .translator import translate


class JSONKeeperError(Exception):
    """Base exception for all jsonkeeper errors."""


class JSONParseError(JSONKeeperError, json.JSONDecodeError):
    """Malformed JSON text.

    Subclasses ``json.JSONDecodeError`` so that code which catches the
    standard library's decode error (or ``ValueError``) also catches this
    one, while ``name`` and ``repr()`` report the dedicated kind.

    Attributes:
        message: Translated message, including a quoted excerpt of the text
        position: 0-based character offset of the failure (also ``pos``)
        code: Always ``ErrorCode.EJSONPARSE``
        cause: Exception raised by the decoder or by the transform callback
        diagnostic: Diagnostic the message and position were taken from
        doc: Text that failed to parse
        lineno: 1-based line of ``position``
        colno: 1-based column of ``position``
        location: ``"lineno:colno"``
        line: Source line holding ``position``

    Example:
        >>> from jsonkeeper import parse
        >>> try:
        ...     parse("[1, 2")
        ... except JSONParseError as err:
        ...     (err.name, err.position)
        ('JSONParseError', 4)
    """

    code = ErrorCode.EJSONPARSE

    def __init__(
        self, cause: BaseException, text: str, context: int = DEFAULT_CONTEXT
    ) -> None:
        """Initialize JSONParseError.

        Args:
            cause: Exception raised while decoding text
            text: Document that failed to decode
            context: Characters quoted on each side of the failure offset
        """
        diagnostic = translate(cause, text, context)
        # JSONDecodeError.__init__ would append its own line/column suffix.
        ValueError.__init__(self, diagnostic.message)
        self.diagnostic = diagnostic
        self.cause = cause
        self.context = context
        self.msg = diagnostic.message
        self.doc = text
        self.pos = diagnostic.position
        self.lineno = line_offset(text, self.pos) + 1
        self.colno = column_offset(text, self.pos) + 1

    def __reduce__(self) -> tuple[type[JSONParseError], tuple[BaseException, str, int]]:
        return self.__class__, (self.cause, self.doc, self.context)

    @property
    def message(self) -> str:
        """Translated error message."""
        return self.msg

    @property
    def position(self) -> int:
        """0-based character offset of the failure, 0 when undetermined."""
        return self.pos

    @property
    def name(self) -> str:
        """Kind name of this error; assignments are ignored."""
        return type(self).__name__

    @name.setter
    def name(self, _value: str) -> None:
        pass

    @property
    def location(self) -> str:
        """1-based "line:column" of the failure, as editors display it."""
        return format_position(self.doc, self.pos, zero_based=False)

    @property
    def line(self) -> str:
        """Text of the line holding the failure, without its line ending."""
        return get_line_content(self.doc, self.lineno, zero_based=False)

    def excerpt(self, context_lines: int = 2) -> str:
        """Lines surrounding the failure with a caret under its column."""
        return get_error_context(self.doc, self.pos, context_lines)


class UnparseableInputError(JSONKeeperError, TypeError):
    """Input that is not text or bytes at all.

    Distinct in shape from JSONParseError: there is no position and no
    ``cause`` attribute. The decoder's exception is kept as ``system_error``.

    Attributes:
        code: Always ``ErrorCode.EJSONPARSE``
        system_error: Exception trapped when the input was handed to the decoder
    """

    code = ErrorCode.EJSONPARSE

    def __init__(self, message: str, system_error: BaseException) -> None:
        """Initialize UnparseableInputError.

        Args:
            message: Description of the rejected input
            system_error: Exception trapped while attempting to decode it
        """
        super().__init__(message)
        self.system_error = system_error
