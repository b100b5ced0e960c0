"""Tests for the error category classifier."""

from __future__ import annotations

import pytest

from jsexplain.explainer.classifier import classify
from jsexplain.explainer.models import Category


class TestKnownCategories:
    @pytest.mark.parametrize("message, expected", [
        ("ReferenceError: x is not defined", Category.REFERENCE_ERROR),
        ("TypeError: foo is not a function", Category.TYPE_ERROR),
        ("SyntaxError: Unexpected token }", Category.SYNTAX_ERROR),
        ("RangeError: Invalid array length", Category.RANGE_ERROR),
        ("URIError: URI malformed", Category.URI_ERROR),
        ("JSON.parse: unexpected character at line 1 column 1", Category.JSON),
    ])
    def test_detects_category(self, message: str, expected: Category):
        assert classify(message) == expected

    def test_case_insensitive(self):
        assert classify("typeerror: oops") == Category.TYPE_ERROR

    def test_marker_anywhere_in_message(self):
        assert classify("Uncaught ReferenceError: $ is not defined") == Category.REFERENCE_ERROR


class TestOrdering:
    def test_syntax_error_beats_json(self):
        """A message naming both resolves to whichever is checked first."""
        msg = "SyntaxError: Unexpected token < in JSON at position 0"
        assert classify(msg) == Category.SYNTAX_ERROR

    def test_reference_error_beats_type_error(self):
        assert classify("ReferenceError thrown while handling TypeError") == Category.REFERENCE_ERROR

    def test_json_only_when_nothing_else_matches(self):
        assert classify("Unexpected token < in JSON at position 0") == Category.JSON


class TestUnknown:
    @pytest.mark.parametrize("message", ["banana", "Error: something broke", "   "])
    def test_unknown(self, message: str):
        assert classify(message) == Category.UNKNOWN

    def test_never_returns_generic_error(self):
        assert classify("Error") != Category.ERROR
