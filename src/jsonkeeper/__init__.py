"""jsonkeeper - JSON parsing with precise errors and preserved formatting.

Parses strict JSON, reports syntax failures with a located, human-readable
message, and remembers each document's indent unit and newline sequence so
that an unchanged value stringifies back to the exact original text.

Public API:
    parse - Parse JSON text or bytes, recording the document's style
    parse_safe - Parse without raising; returns a default on failure
    stringify - Serialize a value in its recorded style
    FormatStyle - Indent unit and newline sequence of a document
    JSONObject / JSONArray - dict/list carrying a FormatStyle

Exceptions:
    JSONKeeperError - Base exception class
    JSONParseError - Malformed JSON text (message, position, cause)
    UnparseableInputError - Input that is not text or bytes
    DepthLimitExceededError - Transform/replacer walk nested too deeply

Submodules:
    jsonkeeper.syntax - Decoder, style detection, parse/stringify
    jsonkeeper.diagnostics - Error types, message translation, positions
    jsonkeeper.core - Depth limiting
"""

from .core import DepthLimitExceededError
from .diagnostics import (
    ErrorCode,
    JSONKeeperError,
    JSONParseError,
    UnparseableInputError,
)
from .syntax import FormatStyle, JSONArray, JSONObject, parse, parse_safe, stringify

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("jsonkeeper")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DepthLimitExceededError",
    "ErrorCode",
    "FormatStyle",
    "JSONArray",
    "JSONKeeperError",
    "JSONObject",
    "JSONParseError",
    "UnparseableInputError",
    "__version__",
    "parse",
    "parse_safe",
    "stringify",
]
