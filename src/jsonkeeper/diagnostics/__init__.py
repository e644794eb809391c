"""Diagnostic system for jsonkeeper errors.

Provides the error taxonomy raised by parse(), the translator that turns
decoder failures into located messages, and position helpers for
rendering excerpts.

Python 3.12+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCode
from .errors import JSONKeeperError, JSONParseError, UnparseableInputError
from .templates import ErrorTemplate
from .translator import describe_failure, hexify, translate

__all__ = [
    "Diagnostic",
    "ErrorCode",
    "ErrorTemplate",
    "JSONKeeperError",
    "JSONParseError",
    "UnparseableInputError",
    "describe_failure",
    "hexify",
    "translate",
]
