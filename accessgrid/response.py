"""
Response classification for the AccessGrid API.

Maps an HTTP status code and body to a parsed value or a typed exception.
"""

import json
import logging
from typing import Any, Callable, Type, Union

from pydantic import BaseModel, ValidationError

from .exceptions import (
    APIRequestError,
    AuthenticationError,
    DeserializationError,
    InsufficientBalanceError,
)

logger = logging.getLogger(__name__)

ResponseType = Union[Type[str], Type[BaseModel], Callable[[str], Any]]


def extract_error_message(body: str) -> str:
    """Return the ``message`` field of a JSON error body, else the raw body."""
    if not body:
        return body
    try:
        data = json.loads(body)
    except ValueError:
        return body
    if isinstance(data, dict) and data.get("message") is not None:
        return str(data["message"])
    return body


def parse_body(body: str, response_type: ResponseType):
    """
    Parse a successful response body.

    Args:
        body: Raw response text
        response_type: ``str`` for the raw body, a pydantic model class, or a
            callable taking the raw body

    Raises:
        DeserializationError: If the body does not match the expected shape
    """
    if response_type is str:
        return body

    try:
        if isinstance(response_type, type) and issubclass(response_type, BaseModel):
            return response_type.model_validate_json(body)
        return response_type(body)
    except (ValidationError, ValueError) as e:
        raise DeserializationError(f"Failed to deserialize response: {e}", body=body) from e


def classify_response(status_code: int, body: str, response_type: ResponseType = str):
    """
    Turn an HTTP status and body into a parsed value or raise.

    Raises:
        AuthenticationError: On 401
        InsufficientBalanceError: On 402
        APIRequestError: On any other non-2xx status
        DeserializationError: On a 2xx body that does not parse
    """
    if status_code == 401:
        raise AuthenticationError(f"Invalid credentials: {body}", status_code=status_code, body=body)

    if status_code == 402:
        raise InsufficientBalanceError("Insufficient account balance", status_code=status_code)

    if not 200 <= status_code < 300:
        message = extract_error_message(body)
        logger.debug("API returned %s: %s", status_code, message)
        raise APIRequestError(message, status_code=status_code, body=body)

    return parse_body(body, response_type)
