"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.12+. Zero external dependencies.
"""

import json


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps the wording of every error case testable and documented in
    one place.
    """

    @staticmethod
    def empty_input(message: str) -> str:
        """Parse failure on an empty document.

        Args:
            message: Message produced for the underlying failure

        Returns:
            Message with the empty-input suffix
        """
        return f"{message} while parsing empty string"

    @staticmethod
    def located(message: str, excerpt: str, *, near: bool) -> str:
        """Parse failure with a known offset.

        Args:
            message: Message produced for the underlying failure
            excerpt: Text surrounding the offset, with ellipsis markers
            near: True when the excerpt is only part of the document

        Returns:
            Message quoting the excerpt as a JSON string
        """
        prefix = "near " if near else ""
        quoted = json.dumps(excerpt, ensure_ascii=False)
        return f"{message} while parsing {prefix}{quoted}"

    @staticmethod
    def unlocated(message: str, head: str) -> str:
        """Parse failure whose offset could not be determined.

        Args:
            message: Message produced for the underlying failure
            head: Leading characters of the document

        Returns:
            Message quoting the head of the document
        """
        return f"{message} while parsing '{head}'"

    @staticmethod
    def unexpected_token(token: str, hex_codes: str) -> str:
        """Offending token shown as a JSON string and as code points.

        Args:
            token: Offending character(s)
            hex_codes: Concatenated 0xHH rendering of the token

        Returns:
            Expanded "Unexpected token" phrase
        """
        quoted = json.dumps(token, ensure_ascii=False)
        return f"Unexpected token {quoted} ({hex_codes})"

    @staticmethod
    def cannot_parse(description: str) -> str:
        """Input is not text or bytes at all.

        Args:
            description: Textual description of the rejected input

        Returns:
            Type-mismatch message
        """
        return f"Cannot parse {description}"

    @staticmethod
    def depth_exceeded(max_depth: int) -> str:
        """Transform or replacer walk nested too deeply.

        Args:
            max_depth: Configured depth limit

        Returns:
            Depth limit message
        """
        return f"Maximum nesting depth exceeded ({max_depth})"

    @staticmethod
    def circular_reference() -> str:
        """Value passed to stringify() contains itself.

        Returns:
            Same wording the standard library encoder uses
        """
        return "Circular reference detected"

    @staticmethod
    def invalid_indent(indent: object) -> str:
        """Indent argument that is neither a string nor a number of spaces.

        Args:
            indent: Rejected indent argument

        Returns:
            Type-mismatch message
        """
        return f"indent must be str or int, not {type(indent).__name__}"
