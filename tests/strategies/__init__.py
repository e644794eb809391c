"""Hypothesis strategies for jsonkeeper property-based testing.

Usage:
    from tests.strategies import formatted_documents, json_values
"""

from .documents import (
    INDENT_UNITS,
    NEWLINES,
    formatted_documents,
    indent_units,
    json_composites,
    json_scalars,
    json_values,
    newline_styles,
    render,
)

__all__ = [
    "INDENT_UNITS",
    "NEWLINES",
    "formatted_documents",
    "indent_units",
    "json_composites",
    "json_scalars",
    "json_values",
    "newline_styles",
    "render",
]
