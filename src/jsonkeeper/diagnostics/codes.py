"""Diagnostic codes and data structures.

Defines the error code and the diagnostic record produced when parse
errors are translated into human-readable form.
Python 3.12+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum

from jsonkeeper.constants import ERROR_CODE

__all__ = [
    "Diagnostic",
    "ErrorCode",
]


class ErrorCode(StrEnum):
    """Error codes carried by jsonkeeper exceptions.

    Inherits from ``StrEnum`` so that ``err.code == "EJSONPARSE"`` holds and
    log aggregation receives the plain string rather than the
    ``"ErrorCode.EJSONPARSE"`` repr that a plain ``Enum`` would produce.
    """

    EJSONPARSE = ERROR_CODE


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Translated parse failure.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. For multi-byte UTF-8 input decoded from bytes, the
        character offset differs from the byte offset.

    Attributes:
        message: Human-readable error description including context
        position: 0-based character offset, 0 when undetermined
        code: Error code
    """

    message: str
    position: int = 0
    code: ErrorCode = ErrorCode.EJSONPARSE

    def __post_init__(self) -> None:
        """Validate Diagnostic invariants.

        Raises:
            ValueError: If position is negative.
        """
        if self.position < 0:
            msg = f"Diagnostic.position must be >= 0, got {self.position}"
            raise ValueError(msg)

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message
