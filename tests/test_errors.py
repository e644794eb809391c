"""Tests for diagnostics/errors.py: the exception hierarchy.

JSONParseError and UnparseableInputError are raised by parse() for two
distinct failure kinds and must never be conflated.
"""

from __future__ import annotations

import json
import pickle

import pytest

from jsonkeeper import (
    ErrorCode,
    JSONKeeperError,
    JSONParseError,
    UnparseableInputError,
    parse,
)
from jsonkeeper.diagnostics import Diagnostic

_LINE_THREE = '{\n  "a": 1,\n  "b": x\n}'


def _parse_error(source: str, context: int = 20) -> JSONParseError:
    with pytest.raises(JSONParseError) as exc_info:
        parse(source, None, context)
    return exc_info.value


def _unparseable(source: object) -> UnparseableInputError:
    with pytest.raises(UnparseableInputError) as exc_info:
        parse(source)  # type: ignore[arg-type]
    return exc_info.value


class TestJSONParseError:
    """Shape of errors raised for malformed text."""

    def test_hierarchy(self) -> None:
        err = _parse_error("{")
        assert isinstance(err, JSONKeeperError)
        assert isinstance(err, json.JSONDecodeError)
        assert isinstance(err, ValueError)

    def test_caught_as_stdlib_decode_error(self) -> None:
        with pytest.raises(json.JSONDecodeError):
            parse("[1,]")

    def test_name_is_read_only(self) -> None:
        err = _parse_error("{")
        err.name = "Other"
        assert err.name == "JSONParseError"

    def test_code(self) -> None:
        err = _parse_error("{")
        assert err.code is ErrorCode.EJSONPARSE
        assert err.code == "EJSONPARSE"

    def test_cause_is_decoder_error(self) -> None:
        err = _parse_error("[1, foo]")
        assert isinstance(err.cause, json.JSONDecodeError)
        assert err.cause.pos == 4
        assert err.__cause__ is err.cause

    def test_message_and_str_agree(self) -> None:
        err = _parse_error("[1, foo]")
        assert str(err) == err.message == err.msg
        assert err.message == (
            'Unexpected token "f" (0x66) in JSON at position 4 (expecting value)'
            ' while parsing "[1, foo]"'
        )

    def test_position_aliases_pos(self) -> None:
        err = _parse_error("[1, foo]")
        assert err.position == err.pos == 4
        assert err.doc == "[1, foo]"

    def test_diagnostic(self) -> None:
        err = _parse_error("[1, foo]")
        assert isinstance(err.diagnostic, Diagnostic)
        assert err.diagnostic.position == err.position
        assert err.diagnostic.message == err.message

    def test_line_and_column(self) -> None:
        err = _parse_error(_LINE_THREE)
        assert err.position == 19
        assert (err.lineno, err.colno) == (3, 8)

    def test_excerpt(self) -> None:
        err = _parse_error(_LINE_THREE)
        assert err.excerpt(context_lines=1) == '  "a": 1,\n  "b": x\n       ^\n}'

    def test_location_and_line(self) -> None:
        err = _parse_error(_LINE_THREE)
        assert err.location == "3:8"
        assert err.line == '  "b": x'

    def test_line_drops_carriage_return(self) -> None:
        err = _parse_error('[\r\n  1,\r\n  x\r\n]')
        assert err.location == "3:3"
        assert err.line == "  x"

    def test_location_of_empty_document(self) -> None:
        err = _parse_error("")
        assert err.location == "1:1"
        assert err.line == ""

    def test_excerpt_default_shows_whole_small_document(self) -> None:
        err = _parse_error(_LINE_THREE)
        assert err.excerpt().splitlines()[0] == "{"

    def test_pickle_round_trip(self) -> None:
        err = _parse_error('{"a": tru}', context=3)
        restored = pickle.loads(pickle.dumps(err))

        assert type(restored) is JSONParseError
        assert restored.message == err.message
        assert restored.position == err.position
        assert restored.context == 3


class TestUnparseableInputError:
    """Shape of errors raised for input that is not text or bytes."""

    def test_hierarchy(self) -> None:
        err = _unparseable(None)
        assert isinstance(err, JSONKeeperError)
        assert isinstance(err, TypeError)
        assert not isinstance(err, JSONParseError)
        assert not isinstance(err, ValueError)

    @pytest.mark.parametrize(
        ("source", "message"),
        [
            (None, "Cannot parse None"),
            ([], "Cannot parse an empty array"),
            ((), "Cannot parse an empty array"),
            (42, "Cannot parse 42"),
            ([1, 2], "Cannot parse [1, 2]"),
        ],
    )
    def test_message(self, source: object, message: str) -> None:
        assert str(_unparseable(source)) == message

    def test_system_error(self) -> None:
        err = _unparseable(None)
        assert isinstance(err.system_error, TypeError)
        assert not isinstance(err.system_error, JSONKeeperError)
        assert err.__cause__ is err.system_error

    def test_no_position(self) -> None:
        err = _unparseable(None)
        assert not hasattr(err, "position")
        assert not hasattr(err, "cause")

    def test_code(self) -> None:
        assert _unparseable(None).code is ErrorCode.EJSONPARSE
