"""JSON parsing and serialization package.

Provides the strict decoder, whitespace style detection, and the
format-preserving parse/stringify pair.

Python 3.12+.
"""

from .decoder import DECODER_FAILURES, Transform, decode, internalize
from .parser import parse, parse_safe
from .serializer import Replacer, stringify
from .style import FormatStyle, JSONArray, JSONObject, attach_style, detect_style, style_of

__all__ = [
    "DECODER_FAILURES",
    "FormatStyle",
    "JSONArray",
    "JSONObject",
    "Replacer",
    "Transform",
    "attach_style",
    "decode",
    "detect_style",
    "internalize",
    "parse",
    "parse_safe",
    "stringify",
    "style_of",
]
