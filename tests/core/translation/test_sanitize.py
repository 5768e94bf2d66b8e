"""Tests for sanitize_json_args."""

import pytest

from chatbridge.core.translation.sanitize import sanitize_json_args
from chatbridge.errors import SanitizeError


class TestSanitizeJsonArgs:
    def test_compacts_valid_object(self) -> None:
        assert sanitize_json_args('{ "q" : "x",  "n": 1 }') == '{"q":"x","n":1}'

    def test_blank_becomes_empty_object(self) -> None:
        assert sanitize_json_args("") == "{}"
        assert sanitize_json_args("  \n ") == "{}"

    def test_strips_code_fence(self) -> None:
        raw = '```json\n{"city": "Paris"}\n```'
        assert sanitize_json_args(raw) == '{"city":"Paris"}'

    def test_strips_bare_code_fence(self) -> None:
        assert sanitize_json_args('```\n{"a": true}\n```') == '{"a":true}'

    def test_keeps_unicode(self) -> None:
        assert sanitize_json_args('{"name": "Zoë"}') == '{"name":"Zoë"}'

    def test_malformed_raises(self) -> None:
        with pytest.raises(SanitizeError):
            sanitize_json_args('{"q": ')

    def test_non_object_raises(self) -> None:
        with pytest.raises(SanitizeError, match="list"):
            sanitize_json_args("[1, 2]")

    def test_nan_raises(self) -> None:
        with pytest.raises(SanitizeError, match="NaN"):
            sanitize_json_args('{"x": NaN}')
