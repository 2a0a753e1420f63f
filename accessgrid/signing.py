"""
Request signing for the AccessGrid API.

Every request is signed with HMAC-SHA256 over the base64 encoding of a
canonical payload. Requests with a body sign the serialized body. Requests
without one sign a synthetic ``{"id": ...}`` document derived from the URL
path, and send a copy of it in the ``sig_payload`` query parameter so the
server can recompute the signature.
"""

import base64
import hashlib
import hmac
import json
from typing import Any, NamedTuple, Optional, Tuple, Union

from pydantic import SecretStr
from pydantic_core import to_jsonable_python

from .constants import (
    ACTION_KEYWORDS,
    BODY_METHODS,
    LISTING_SEGMENT,
    SIG_PAYLOAD_PARAM,
    SUPPORTED_METHODS,
)
from .models import WireModel

EMPTY_PAYLOAD = "{}"


class CanonicalPayload(NamedTuple):
    """The string to sign and the query parameter that mirrors it, if any."""

    payload: str
    extra_query_param: Optional[Tuple[str, str]] = None


def sign(payload: str, secret_key: Union[str, SecretStr]) -> str:
    """
    Generate the hex-encoded signature for a canonical payload.

    Format: HMAC-SHA256(key=secret, message=base64(payload))

    Args:
        payload: Canonical payload string
        secret_key: Shared secret

    Returns:
        Lowercase hex-encoded HMAC signature
    """
    if isinstance(secret_key, SecretStr):
        secret_key = secret_key.get_secret_value()

    encoded = base64.b64encode(payload.encode('utf-8'))
    mac = hmac.new(secret_key.encode('utf-8'), encoded, hashlib.sha256)
    return mac.hexdigest()


def _prune_none(value):
    if isinstance(value, dict):
        return {k: _prune_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_prune_none(v) for v in value]
    return value


def serialize_body(body: Any) -> str:
    """
    Serialize a request body to the JSON string that is both signed and sent.

    Models use their wire names; ``None`` values are dropped rather than
    emitted as ``null``.
    """
    if isinstance(body, WireModel):
        data = body.to_wire()
    else:
        data = to_jsonable_python(body, by_alias=True, exclude_none=True)
    return json.dumps(_prune_none(data))


def resource_identity(path: str) -> Optional[str]:
    """
    Return the path segment naming the resource a body-less request targets.

    ``/v1/key-cards/abc`` gives ``abc``, ``/v1/key-cards/abc/suspend`` gives
    ``abc`` as well, and paths with a single segment give ``None``.
    """
    parts = path.split('?', 1)[0].strip('/').split('/')
    if len(parts) < 2:
        return None
    if parts[-1] in ACTION_KEYWORDS:
        return parts[-2]
    return parts[-1]


def _id_payload(identity: str) -> str:
    return json.dumps({"id": identity})


def build_payload(method: str, path: str, body: Any = None) -> CanonicalPayload:
    """
    Build the canonical payload for a request.

    Args:
        method: HTTP method
        path: URL path, relative to the base URL
        body: Request body, a model or plain JSON-compatible data

    Returns:
        CanonicalPayload with the string to sign and, for body-less requests
        that name a resource, the ``sig_payload`` query parameter

    Raises:
        ValueError: If the method is not supported by the API
    """
    method = method.upper()
    if method not in SUPPORTED_METHODS:
        raise ValueError(f"Unsupported HTTP method: {method}")

    if method in BODY_METHODS and body is not None:
        return CanonicalPayload(serialize_body(body))

    identity = resource_identity(path)
    if identity == LISTING_SEGMENT:
        payload = _id_payload(LISTING_SEGMENT)
    elif identity and "templates" not in identity:
        payload = _id_payload(identity)
    else:
        return CanonicalPayload(EMPTY_PAYLOAD)

    return CanonicalPayload(payload, (SIG_PAYLOAD_PARAM, payload))
