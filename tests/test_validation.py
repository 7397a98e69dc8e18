"""
Tests for request input validation

These tests verify:
1. Only absolute URLs with scheme and host are accepted
2. POST/PUT bodies must be valid JSON of any kind
3. GET/DELETE bodies are ignored whatever they contain
"""

import pytest

from src.exceptions import InvalidBodyError, InvalidURLError, RequestValidationError
from src.models import RequestContext
from src.validation import validate_body, validate_request, validate_url


class TestValidateUrl:
    """Test URL well-formedness checks"""

    @pytest.mark.parametrize(
        "url",
        [
            "http://example.com",
            "https://example.com/ok?x=1",
            "http://localhost:8080/api",
            "http://127.0.0.1/",
        ],
    )
    def test_accepts_absolute_urls(self, url):
        """Should accept URLs with scheme and host"""
        assert validate_url(url) == url

    def test_strips_surrounding_whitespace(self):
        """Should trim whitespace left over from the input field"""
        assert validate_url("  http://example.com/ok \n") == "http://example.com/ok"

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "   ",
            "example.com",
            "/relative/path",
            "http://",
            "http:///path",
            "http://exa mple.com",
            "http://example.com:notaport/",
        ],
    )
    def test_rejects_invalid_urls(self, url):
        """Should raise InvalidURLError for anything that is not an absolute URI"""
        with pytest.raises(InvalidURLError) as exc_info:
            validate_url(url)

        assert exc_info.value.field == "url"

    def test_invalid_url_is_a_validation_error(self):
        """InvalidURLError should be catchable as RequestValidationError"""
        with pytest.raises(RequestValidationError):
            validate_url("not a url")


class TestValidateBody:
    """Test JSON body checks per method"""

    @pytest.mark.parametrize("method", ["POST", "PUT"])
    @pytest.mark.parametrize("body", ['{"a": 1}', "[1, 2]", '"text"', "42", "null", "true"])
    def test_accepts_any_json_value(self, method, body):
        """Should accept any JSON value, not only objects"""
        assert validate_body(method, body) == body.encode("utf-8")

    @pytest.mark.parametrize("method", ["POST", "PUT"])
    @pytest.mark.parametrize(
        "body",
        ["{not json", "", "{'single': 'quotes'}", "[1, 2", "NaN", "Infinity", '{"a": -Infinity}'],
    )
    def test_rejects_non_json(self, method, body):
        """Should raise InvalidBodyError for POST/PUT bodies that are not JSON"""
        with pytest.raises(InvalidBodyError) as exc_info:
            validate_body(method, body)

        assert exc_info.value.field == "body"
        assert exc_info.value.method == method

    @pytest.mark.parametrize("method", ["GET", "DELETE"])
    @pytest.mark.parametrize("body", ["", "{not json", '{"a": 1}', "plain text"])
    def test_ignores_body_for_get_and_delete(self, method, body):
        """Should accept and drop any body for GET/DELETE"""
        assert validate_body(method, body) == b""

    def test_rejects_deeply_nested_json(self):
        """Should turn a RecursionError from the parser into InvalidBodyError"""
        body = "[" * 200000 + "]" * 200000

        with pytest.raises(InvalidBodyError, match="nesting too deep"):
            validate_body("POST", body)

    def test_encodes_unicode_as_utf8(self):
        """Should send the body text as UTF-8 bytes unchanged"""
        assert validate_body("POST", '{"city": "München"}') == '{"city": "München"}'.encode()


class TestValidateRequest:
    """Test the combined validation entry point"""

    def test_builds_request_context(self):
        """Should return a normalized RequestContext on success"""
        ctx = validate_request(" http://example.com/ok ", "post", '{"a": 1}')

        assert ctx == RequestContext(url="http://example.com/ok", method="POST", body=b'{"a": 1}')

    def test_get_context_has_empty_body(self):
        """GET requests should carry an empty body"""
        ctx = validate_request("http://example.com", "GET", "{ignored")

        assert ctx.body == b""

    def test_url_checked_before_body(self):
        """Should report the URL when both fields are invalid"""
        with pytest.raises(InvalidURLError):
            validate_request("nope", "POST", "{not json")

    def test_rejects_unknown_method(self):
        """Should refuse methods outside GET/POST/DELETE/PUT"""
        with pytest.raises(ValueError, match="PATCH"):
            validate_request("http://example.com", "PATCH", "{}")
