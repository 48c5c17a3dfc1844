"""
Vimeo API client built on composition.

This module provides a lightweight VimeoClient that composes specialized components
for path resolution, query encoding, request execution and pagination.
"""

from typing import Any

from ape_pie import APIClient

from .conf import ClientConfig
from .operations.executor import OperationExecutor
from .resources.users import UsersService
from .utils.errors import ErrorHandler


class VimeoClient(APIClient):
    """
    Vimeo API client built on composition.

    This client provides:
    - Full ape_pie.APIClient functionality (Session-based requests with base URL)
    - Default headers (API version, user agent, bearer token) and timeout
    - Resource services for the API (currently ``users``)

    Architecture:
    - OperationExecutor: Execute HTTP requests with error handling
    - ErrorHandler: Convert error responses to HTTPStatusError
    - UsersService: Users resource operations (path resolution, query
      encoding, pagination)

    Usage:
        from vimeo_users import ClientConfig, VimeoClient

        client = VimeoClient.from_config(ClientConfig(access_token="..."))

        user, response = client.users.get()
        followers, response = client.users.list_followers("42")
        response.pagination.total
    """

    def __init__(
        self,
        base_url: str,
        request_kwargs: dict[str, Any] | None = None,
        config: ClientConfig | None = None,
        **kwargs: Any,
    ):
        """
        Initialize the Vimeo client.

        Args:
            base_url: The base URL of the Vimeo API
            request_kwargs: Default request kwargs (timeout, etc.)
            config: ClientConfig supplying default headers
            **kwargs: Additional kwargs for the underlying session
        """
        super().__init__(base_url, request_kwargs, **kwargs)
        self.config = config or ClientConfig(api_root=base_url)

        self._error_handler = ErrorHandler()
        self.executor = OperationExecutor(self, self._error_handler)
        self.users = UsersService(self)

    @classmethod
    def from_config(cls, config: ClientConfig) -> "VimeoClient":
        return cls(config.api_root, {"timeout": config.timeout}, config=config)

    def request(self, method: str, url: str, *args, **kwargs):
        """
        Make HTTP request using the parent APIClient.

        Calls the pre_request hook before delegating to the parent.
        """
        kwargs = self.pre_request(method, url, **kwargs)
        return super().request(method, url, *args, **kwargs)

    def pre_request(self, method: str, url: str, **kwargs) -> dict:
        """
        Hook for subclasses to modify requests before they are sent.

        Adds the configured default headers; headers passed explicitly win.
        """
        kwargs["headers"] = {**self.config.headers, **(kwargs.get("headers") or {})}
        return kwargs


def build_client(config: ClientConfig | None = None) -> VimeoClient:
    """
    Build a client from ``config``, or from the environment when not given.
    """
    return VimeoClient.from_config(config or ClientConfig.from_env())
