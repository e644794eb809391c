"""Fuzz testing for jsonkeeper.

This package contains:
- test_parser_property: high-volume parse/parse_safe/stringify properties

Run with:
    pytest -m fuzz tests/fuzz/

Python 3.12+.
"""
