"""Tests for response decoding."""

from __future__ import annotations

import pytest
from pydantic import BaseModel

from pkgcloud.api.decoding import decode_response, first_validation_message
from pkgcloud.api.exceptions import (
    APIError,
    AuthenticationError,
    DecodeError,
    NotFoundError,
    UnprocessableEntityError,
)
from pkgcloud.api.types import Package

from .conftest import make_package_dict, make_response


class _Shape(BaseModel):
    a: int


class TestSuccess:
    """Tests for 200 and 201 responses."""

    def test_decode_into_model(self):
        result = decode_response(make_response(200, {"a": 1}), _Shape)
        assert result == _Shape(a=1)

    def test_created_is_success(self):
        result = decode_response(make_response(201, {"a": 2}), _Shape)
        assert result.a == 2

    def test_decode_list_of_models(self):
        resp = make_response(200, [make_package_dict(), make_package_dict(filename="b.deb")])
        packages = decode_response(resp, list[Package])
        assert [p.filename for p in packages] == ["foo_1.0_amd64.deb", "b.deb"]

    def test_no_model_returns_json(self):
        assert decode_response(make_response(201, {"id": 7})) == {"id": 7}

    def test_empty_body_without_model(self):
        assert decode_response(make_response(200)) is None

    def test_invalid_json(self):
        with pytest.raises(DecodeError):
            decode_response(make_response(200, b"<html>oops</html>"), _Shape)

    def test_wrong_shape(self):
        with pytest.raises(DecodeError):
            decode_response(make_response(200, {"b": "x"}), _Shape)


class TestErrors:
    """Tests for error statuses."""

    def test_unauthorized(self):
        with pytest.raises(AuthenticationError) as exc_info:
            decode_response(make_response(401, b"HTTP Basic: Access denied."), _Shape)
        assert "Unauthorized" in str(exc_info.value)
        assert exc_info.value.status_code == 401

    def test_not_found(self):
        with pytest.raises(NotFoundError) as exc_info:
            decode_response(make_response(404), _Shape)
        assert exc_info.value.message == "HTTP status: Not Found"
        assert str(exc_info.value) == "[404] HTTP status: Not Found"

    def test_unprocessable_single_message(self):
        resp = make_response(422, {"filename": ["has already been taken"]})
        with pytest.raises(UnprocessableEntityError) as exc_info:
            decode_response(resp)
        assert exc_info.value.message == "has already been taken"
        assert exc_info.value.field == "filename"
        assert str(exc_info.value) == "[422] has already been taken"

    def test_unprocessable_picks_smallest_field(self):
        resp = make_response(422, {"zeta": ["z message"], "alpha": ["first", "second"]})
        with pytest.raises(UnprocessableEntityError) as exc_info:
            decode_response(resp)
        assert exc_info.value.message == "first"
        assert exc_info.value.field == "alpha"

    def test_unprocessable_skips_empty_lists(self):
        resp = make_response(422, {"a": [], "b": ["from b"]})
        with pytest.raises(UnprocessableEntityError) as exc_info:
            decode_response(resp)
        assert exc_info.value.message == "from b"

    @pytest.mark.parametrize("body", [b"not json", b"[1, 2]", b"{}"])
    def test_unprocessable_invalid_body(self, body):
        with pytest.raises(UnprocessableEntityError) as exc_info:
            decode_response(make_response(422, body))
        assert exc_info.value.message == "invalid HTTP body"

    @pytest.mark.parametrize("status", [204, 302, 403, 500, 503])
    def test_unexpected_status(self, status):
        with pytest.raises(APIError) as exc_info:
            decode_response(make_response(status, {"a": 1}), _Shape)
        assert type(exc_info.value) is APIError
        assert exc_info.value.status_code == status
        assert exc_info.value.message == f"unexpected HTTP status: {status}"


class TestFirstValidationMessage:
    """Tests for first_validation_message."""

    def test_ordering_is_independent_of_key_order(self):
        a = first_validation_message(b'{"b": ["B"], "a": ["A"]}')
        b = first_validation_message(b'{"a": ["A"], "b": ["B"]}')
        assert a == b == ("a", "A")

    def test_non_list_values_ignored(self):
        assert first_validation_message(b'{"a": "oops", "b": ["B"]}') == ("b", "B")
