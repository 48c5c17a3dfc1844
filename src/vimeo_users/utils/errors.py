"""
Error types and error handling utilities for the Vimeo API client.

Every failure raised by this package derives from :class:`APIError`:

- :class:`TransportError`: no HTTP response was obtained at all
- :class:`HTTPStatusError`: a response came back with a non-2xx status
- :class:`DecodeError`: a 2xx response body does not have the expected shape
- :class:`EncodingError`: list options can't be turned into a query string
"""

from requests.exceptions import HTTPError
from zds_client.client import ClientError


class APIError(Exception):
    """Base class for errors raised by the Vimeo API client."""


class TransportError(APIError):
    """Raised when the request never produced an HTTP response."""


class HTTPStatusError(ClientError, APIError):
    """
    Raised for responses with an error status code.

    ``args[0]`` holds the parsed error body (or ``None``), in line with
    :class:`zds_client.client.ClientError`, so existing ``except ClientError``
    handlers keep catching it.
    """

    def __init__(self, status_code: int, raw_body: bytes, response_data=None):
        super().__init__(response_data)
        self.status_code = status_code
        self.raw_body = raw_body

    @property
    def response_data(self):
        return self.args[0]

    def __str__(self) -> str:
        return f"HTTP {self.status_code}: {self.raw_body[:200]!r}"


class DecodeError(APIError):
    """Raised when a successful response body can't be decoded."""

    def __init__(self, message: str, raw_body: bytes = b""):
        super().__init__(message)
        self.raw_body = raw_body


class EncodingError(APIError):
    """Raised when an options field can't be represented as a query value."""

    def __init__(self, field: str, value):
        super().__init__(
            f"Field '{field}' with value {value!r} can't be encoded as a query parameter"
        )
        self.field = field
        self.value = value


class ErrorHandler:
    """
    Handler converting HTTP error responses into :class:`HTTPStatusError`.

    The raw body is preserved so callers can parse the server-specific error
    detail (Vimeo returns ``{"error": ..., "developer_message": ...}``).
    """

    @classmethod
    def handle_response(cls, response):
        """
        Check response status and raise HTTPStatusError for anything but 2xx.

        Args:
            response: The requests.Response object

        Raises:
            HTTPStatusError: If the response has a non-2xx status

        Examples:
            >>> handler = ErrorHandler()
            >>> handler.handle_response(response)  # raises HTTPStatusError on 3xx/4xx/5xx
        """
        try:
            response.raise_for_status()
        except HTTPError as e:
            raise cls.status_error(response) from e

        # raise_for_status lets 1xx and 3xx through
        if not 200 <= response.status_code < 300:
            raise cls.status_error(response)

    @staticmethod
    def status_error(response) -> HTTPStatusError:
        error_data = None
        if response.content:
            try:
                error_data = response.json()
            except ValueError:
                # not JSON, the raw body is still on the exception
                pass

        return HTTPStatusError(
            response.status_code, response.content or b"", error_data
        )
