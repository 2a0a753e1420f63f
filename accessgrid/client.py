"""
AccessGrid API clients.

Both clients share request preparation (canonical payload, signature,
headers, query string) and response classification; they differ only in
the HTTP transport: ``requests`` for the blocking client and ``httpx`` for
the asyncio one.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, NamedTuple, Optional, Union
from urllib.parse import quote, urlencode, urljoin

import httpx
import requests
from pydantic import SecretStr

from .config import AccessGridSettings
from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_CONFIG,
    HEADER_ACCOUNT_ID,
    HEADER_PAYLOAD_SIG,
    HEADER_USER_AGENT,
    USER_AGENT,
)
from .exceptions import ConfigurationError, TransportError
from .response import ResponseType, classify_response
from .services import AccessCardsService, ConsoleService
from .signing import build_payload, sign

logger = logging.getLogger(__name__)


class PreparedRequest(NamedTuple):
    method: str
    url: str
    headers: Dict[str, str]
    body: Optional[str]


class BaseClient(ABC):
    """
    Credentials, configuration and request preparation shared by the
    blocking and asyncio clients.
    """

    def __init__(self, account_id: str, secret_key: Union[str, SecretStr],
                 base_url: str = DEFAULT_BASE_URL, **config):
        """
        Initialize the client.

        Args:
            account_id: AccessGrid account id
            secret_key: AccessGrid secret key
            base_url: API base URL
            **config: Configuration options (timeout)

        Raises:
            ConfigurationError: If a credential is missing or the config is invalid
        """
        if isinstance(secret_key, SecretStr):
            secret_key = secret_key.get_secret_value()

        self.account_id = account_id
        self.base_url = (base_url or '').rstrip('/')
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config(secret_key)
        self.secret_key = SecretStr(secret_key)

        self.access_cards = AccessCardsService(self)
        self.console = ConsoleService(self)

    @classmethod
    def from_env(cls, settings: Optional[AccessGridSettings] = None, **kwargs):
        """Create a client from ``ACCESSGRID_*`` environment variables."""
        settings = settings or AccessGridSettings()
        kwargs.setdefault('timeout', settings.timeout)
        return cls(settings.account_id, settings.secret_key, settings.base_url, **kwargs)

    def _validate_config(self, secret_key):
        """Validate client configuration."""
        if not self.account_id:
            raise ConfigurationError("account_id is required")

        if not secret_key:
            raise ConfigurationError("secret_key is required")

        if not self.base_url.startswith(('http://', 'https://')):
            raise ConfigurationError(f"base_url must be an http(s) URL, got {self.base_url!r}")

        timeout = self.config['timeout']
        if timeout is not None and (
                isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0):
            raise ConfigurationError(f"timeout must be a positive number, got {timeout!r}")

    def _prepare_request(self, method: str, path: str, body: Any = None,
                         params: Optional[Mapping[str, str]] = None) -> PreparedRequest:
        """
        Build the signed request: URL with query string, auth headers and body.

        The body sent is the exact string that was signed.
        """
        method = method.upper()
        canonical = build_payload(method, path, body)
        signature = sign(canonical.payload, self.secret_key)

        query = dict(params or {})
        if canonical.extra_query_param is not None:
            key, value = canonical.extra_query_param
            query[key] = value

        url = urljoin(self.base_url + '/', path.lstrip('/'))
        if query:
            url += ('&' if '?' in url else '?') + urlencode(query, quote_via=quote)

        headers = {
            HEADER_ACCOUNT_ID: self.account_id,
            HEADER_PAYLOAD_SIG: signature,
            HEADER_USER_AGENT: USER_AGENT,
        }

        data = None
        if method != 'GET' and body is not None:
            data = canonical.payload
            headers['Content-Type'] = 'application/json'

        return PreparedRequest(method, url, headers, data)

    @abstractmethod
    def _make_request(self, method, path, body=None, params=None, response_type=str, timeout=None):
        """Send the prepared request and classify the response."""

    def get(self, path: str, params: Optional[Mapping[str, str]] = None,
            response_type: ResponseType = str, **kwargs):
        """Make authenticated GET request."""
        return self._make_request('GET', path, params=params, response_type=response_type, **kwargs)

    def post(self, path: str, body: Any = None, response_type: ResponseType = str, **kwargs):
        """Make authenticated POST request."""
        return self._make_request('POST', path, body=body, response_type=response_type, **kwargs)

    def put(self, path: str, body: Any = None, response_type: ResponseType = str, **kwargs):
        """Make authenticated PUT request."""
        return self._make_request('PUT', path, body=body, response_type=response_type, **kwargs)

    def patch(self, path: str, body: Any = None, response_type: ResponseType = str, **kwargs):
        """Make authenticated PATCH request."""
        return self._make_request('PATCH', path, body=body, response_type=response_type, **kwargs)


class AccessGridClient(BaseClient):
    """
    Blocking client for the AccessGrid API.

    Example usage:
        with AccessGridClient("account-id", "secret-key") as client:
            card = client.access_cards.get("0xc4rd1d")
    """

    def __init__(self, account_id: str, secret_key: Union[str, SecretStr],
                 base_url: str = DEFAULT_BASE_URL,
                 session: Optional[requests.Session] = None, **config):
        super().__init__(account_id, secret_key, base_url, **config)

        self._owns_session = session is None
        self.session = session or requests.Session()

    def _make_request(self, method: str, path: str, body: Any = None,
                      params: Optional[Mapping[str, str]] = None,
                      response_type: ResponseType = str, timeout: Optional[float] = None):
        """
        Make authenticated HTTP request and classify the response.

        Args:
            method: HTTP method
            path: URL path (relative to base_url)
            body: Request body, a model or JSON-compatible data
            params: Query parameters
            response_type: ``str`` for the raw body, or the type to parse into
            timeout: Overrides the configured timeout for this call

        Raises:
            TransportError: If the request could not be sent
        """
        prepared = self._prepare_request(method, path, body, params)
        logger.debug("%s %s", prepared.method, path)

        try:
            response = self.session.request(
                prepared.method,
                prepared.url,
                headers=prepared.headers,
                data=prepared.body.encode('utf-8') if prepared.body is not None else None,
                timeout=timeout if timeout is not None else self.config['timeout'],
            )
        except requests.RequestException as e:
            raise TransportError(f"HTTP request failed: {e}") from e

        logger.debug("%s %s -> %s", prepared.method, path, response.status_code)
        return classify_response(response.status_code, response.text, response_type)

    def close(self):
        """Close HTTP session."""
        if self.session and self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class AsyncAccessGridClient(BaseClient):
    """
    Asyncio client for the AccessGrid API. Service methods return awaitables.

    Example usage:
        async with AsyncAccessGridClient("account-id", "secret-key") as client:
            card = await client.access_cards.get("0xc4rd1d")
    """

    def __init__(self, account_id: str, secret_key: Union[str, SecretStr],
                 base_url: str = DEFAULT_BASE_URL,
                 http_client: Optional[httpx.AsyncClient] = None, **config):
        super().__init__(account_id, secret_key, base_url, **config)

        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(self.config['timeout']),
        )

    async def _make_request(self, method: str, path: str, body: Any = None,
                            params: Optional[Mapping[str, str]] = None,
                            response_type: ResponseType = str, timeout: Optional[float] = None):
        prepared = self._prepare_request(method, path, body, params)
        logger.debug("%s %s", prepared.method, path)

        kwargs = {}
        if timeout is not None:
            kwargs['timeout'] = timeout

        try:
            response = await self.http_client.request(
                prepared.method,
                prepared.url,
                headers=prepared.headers,
                content=prepared.body.encode('utf-8') if prepared.body is not None else None,
                **kwargs,
            )
        except httpx.HTTPError as e:
            raise TransportError(f"HTTP request failed: {e}") from e

        logger.debug("%s %s -> %s", prepared.method, path, response.status_code)
        return classify_response(response.status_code, response.text, response_type)

    async def aclose(self):
        """Close the underlying httpx client."""
        if self._owns_http_client:
            await self.http_client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
