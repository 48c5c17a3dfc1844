"""
Client for the users part of the Vimeo API.

This package provides a small, composed API client:

- VimeoClient: the transport, an ape_pie APIClient bound to the API root
- UsersService: profile, social graph, groups, subscriptions, feed and appearances

Components (for advanced usage):
- PathResolver: ``me/...`` vs ``users/{id}/...`` paths
- QueryEncoder: list options to query parameters
- OperationExecutor: request dispatch and decoding
- normalize / Pagination: pagination metadata of list responses
"""

from .client import VimeoClient, build_client
from .conf import ClientConfig
from .operations.resolver import ME, Identified
from .options import UNSET, UserRequest
from .pagination import Pagination, get_paginated_results
from .utils.errors import (
    APIError,
    DecodeError,
    EncodingError,
    HTTPStatusError,
    TransportError,
)

__all__ = [
    "VimeoClient",
    "build_client",
    "ClientConfig",
    "ME",
    "Identified",
    "UNSET",
    "UserRequest",
    "Pagination",
    "get_paginated_results",
    "APIError",
    "DecodeError",
    "EncodingError",
    "HTTPStatusError",
    "TransportError",
]
