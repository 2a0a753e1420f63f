"""
Custom exceptions for the AccessGrid client library.
"""


class AccessGridError(Exception):
    """Base exception for AccessGrid client errors."""

    def __init__(self, message, status_code=None, body=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


class AuthenticationError(AccessGridError):
    """Raised when the API rejects the account id or signature (HTTP 401)."""
    pass


class InsufficientBalanceError(AccessGridError):
    """Raised when the account balance cannot cover the request (HTTP 402)."""
    pass


class APIRequestError(AccessGridError):
    """Raised for any other non-2xx response."""

    def __str__(self):
        return f"API request failed: {self.message}"


class DeserializationError(AccessGridError):
    """Raised when a 2xx response body does not match the expected shape."""
    pass


class ConfigurationError(AccessGridError):
    """Raised when client configuration is invalid."""
    pass


class TransportError(AccessGridError):
    """Raised when the HTTP request itself fails."""
    pass
