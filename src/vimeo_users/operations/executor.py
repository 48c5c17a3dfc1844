"""
Operation execution utilities for the Vimeo API client.

This module dispatches a single HTTP request and turns the outcome into either
a decoded body plus response metadata, or one of the client's error types.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping

import requests
from requests.structures import CaseInsensitiveDict

from ..pagination import Pagination
from ..utils.errors import DecodeError, TransportError

if TYPE_CHECKING:
    from ape_pie import APIClient

    from ..utils.errors import ErrorHandler

logger = logging.getLogger(__name__)

BODY_METHODS = ("POST", "PUT", "PATCH")


@dataclass(frozen=True)
class Response:
    """
    Metadata of a completed call.

    Built for a single call and never shared between calls. Header lookups are
    case-insensitive, like on ``requests.Response``.
    """

    status_code: int
    headers: Mapping[str, str] = field(default_factory=CaseInsensitiveDict)
    pagination: Pagination | None = None
    content: bytes = field(default=b"", repr=False)


class OperationExecutor:
    """
    Executor for HTTP requests with error handling.

    This class handles:
    - HTTP request dispatch (GET, POST, PUT, PATCH, DELETE)
    - Conversion of connection failures and error statuses
    - JSON decoding of the response body
    """

    def __init__(self, client: "APIClient", error_handler: "ErrorHandler"):
        """
        Initialize the operation executor.

        Args:
            client: The APIClient instance to use for requests
            error_handler: ErrorHandler for response error handling
        """
        self.client = client
        self.error_handler = error_handler

    def execute(
        self,
        method: str,
        path: str,
        data: dict | None = None,
        params: list[tuple[str, str]] | dict | None = None,
    ) -> tuple[Any, Response]:
        """
        Execute an HTTP request with error handling.

        Exactly one request is sent; nothing is retried.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE)
            path: Relative path for the request, without query string
            data: Request body data, only sent for POST/PUT/PATCH
            params: Query parameters, a list of pairs keeps its order

        Returns:
            Tuple of the decoded body (None for an empty body) and the Response

        Raises:
            TransportError: If no response was obtained
            HTTPStatusError: If the response has a non-2xx status
            DecodeError: If the response body isn't valid JSON

        Examples:
            >>> executor = OperationExecutor(client, error_handler)
            >>> user, response = executor.execute("GET", "me")
            >>> users, response = executor.execute("GET", "users", params=[("query", "jazz")])
            >>> _, response = executor.execute("PUT", "me/categories/tech")
            >>> response.status_code
            204
        """
        method = method.upper()
        kwargs = {}
        if params:
            kwargs["params"] = params
        if data is not None and method in BODY_METHODS:
            kwargs["json"] = data

        logger.debug("%s %s %s", method, path, params or "")
        try:
            response = self._dispatch_request(method, path, **kwargs)
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise TransportError(f"{method} {path}: {exc}") from exc
        logger.debug("%s %s -> %s", method, path, response.status_code)

        self.error_handler.handle_response(response)

        meta = Response(
            status_code=response.status_code,
            headers=CaseInsensitiveDict(response.headers),
            content=response.content or b"",
        )
        return self._decode(response), meta

    def _decode(self, response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(
                f"Response body is not valid JSON: {exc}", response.content
            ) from exc

    def _dispatch_request(self, method: str, path: str, **kwargs):
        """
        Dispatch HTTP request using the appropriate client method.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE)
            path: Relative path
            **kwargs: Request kwargs

        Returns:
            requests.Response object

        Raises:
            ValueError: If HTTP method is not supported
        """
        method_dispatch = {
            "GET": self.client.get,
            "POST": self.client.post,
            "PUT": self.client.put,
            "PATCH": self.client.patch,
            "DELETE": self.client.delete,
        }

        if method not in method_dispatch:
            raise ValueError(f"Unsupported HTTP method: {method}")

        return method_dispatch[method](path, **kwargs)
