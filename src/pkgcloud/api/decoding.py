"""Mapping of API responses to decoded values or errors."""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any

import requests
from pydantic import TypeAdapter, ValidationError

from .exceptions import (
    APIError,
    AuthenticationError,
    DecodeError,
    NotFoundError,
    UnprocessableEntityError,
)


def _status_text(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return str(status_code)


def first_validation_message(body: bytes) -> tuple[str, str] | None:
    """Pick the message to report from a 422 body.

    The body maps field names to lists of messages. The first message of the
    lexicographically smallest field with any messages is returned, so the
    result does not depend on the server's key order.

    Returns:
        (field, message), or None if the body has no usable message.
    """
    try:
        errors = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if not isinstance(errors, dict):
        return None
    for field in sorted(errors):
        messages = errors[field]
        if isinstance(messages, list) and messages:
            return field, str(messages[0])
    return None


def raise_for_status(response: requests.Response) -> None:
    """Raise the appropriate exception for a non-success response.

    Raises:
        AuthenticationError: For 401 status.
        NotFoundError: For 404 status.
        UnprocessableEntityError: For 422 status.
        APIError: For any other status than 200 and 201.
    """
    status = response.status_code
    if status in (200, 201):
        return
    if status == 401:
        raise AuthenticationError(f"HTTP status: {_status_text(status)}")
    if status == 404:
        raise NotFoundError(f"HTTP status: {_status_text(status)}")
    if status == 422:
        found = first_validation_message(response.content)
        if found is None:
            raise UnprocessableEntityError()
        field, message = found
        raise UnprocessableEntityError(message, field=field)
    raise APIError(status, f"unexpected HTTP status: {status}")


def decode_response(response: requests.Response, model: Any = None) -> Any:
    """Check the status of a response and decode its JSON body.

    Args:
        response: Completed response.
        model: Pydantic model or type (e.g. ``list[Package]``) to validate
            the body into. Without a model the parsed JSON is returned.

    Returns:
        The decoded body. An empty body decodes to None when no model is given.

    Raises:
        APIError: If the status is not 200 or 201.
        DecodeError: If the body is not valid JSON of the expected shape.
    """
    raise_for_status(response)

    if model is None and not response.content:
        return None
    try:
        data = response.json()
    except ValueError as e:
        raise DecodeError("Unexpected response from server: invalid JSON") from e
    if model is None:
        return data
    try:
        return TypeAdapter(model).validate_python(data)
    except ValidationError as e:
        raise DecodeError(f"Unexpected response format from server: {e}") from e
