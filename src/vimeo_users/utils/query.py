"""
Query string encoding for list options.

This module turns an options dataclass into URL query parameters, leaving out
everything that was not set.
"""

from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

from furl import furl

from ..options import UNSET
from .errors import EncodingError

SCALAR_TYPES = (str, int, float)


class QueryEncoder:
    """
    Encoder for options objects into query parameters.

    This class handles:
    - Omitting unset values (``None``, empty strings and lists, zero, ``False``)
    - Flattening nested options dataclasses into top-level parameters
    - Keeping parameters in field declaration order
    """

    def encode(self, path: str, options: Any = None) -> str:
        """
        Append the populated fields of ``options`` to ``path`` as a query string.

        Args:
            path: Relative path, possibly with a query string already
            options: An options dataclass instance, or None

        Returns:
            The path with the query string appended

        Raises:
            EncodingError: If a field value can't be represented as a query value

        Examples:
            >>> encoder = QueryEncoder()
            >>> encoder.encode("users/42/followers", ListUserOptions(page=2, per_page=10))
            'users/42/followers?page=2&per_page=10'
            >>> encoder.encode("me/feed", None)
            'me/feed'
        """
        params = self.to_params(options)
        if not params:
            return path

        query = furl().add(args=params).query
        separator = "&" if "?" in path else "?"
        return f"{path}{separator}{query}"

    def to_params(self, options: Any) -> list[tuple[str, str]]:
        """
        Flatten an options object into an ordered list of (name, value) pairs.

        This is what list calls hand to the transport as ``params``; requests
        keeps the order of a list of tuples.

        Examples:
            >>> QueryEncoder().to_params(ListUserOptions(page=2, per_page=10))
            [('page', '2'), ('per_page', '10')]
        """
        if options is None:
            return []
        if not is_dataclass(options) or isinstance(options, type):
            raise EncodingError("options", options)

        params = []
        for option_field in fields(options):
            value = getattr(options, option_field.name)
            if is_dataclass(value) and not isinstance(value, type):
                params += self.to_params(value)
                continue

            name = option_field.metadata.get("param", option_field.name)
            encoded = self.encode_value(name, value)
            if encoded is not None:
                params.append((name, encoded))
        return params

    def encode_value(self, name: str, value: Any) -> str | None:
        """
        Encode a single value, returning None when it should be left out.
        """
        if value is None or value is UNSET:
            return None

        if isinstance(value, Enum):
            value = value.value

        # bool before int, bool is an int subclass
        if isinstance(value, bool):
            return "true" if value else None

        if isinstance(value, SCALAR_TYPES):
            return str(value) if value else None

        if isinstance(value, (list, tuple)):
            if not all(
                isinstance(item, SCALAR_TYPES) and not isinstance(item, bool)
                for item in value
            ):
                raise EncodingError(name, value)
            return ",".join(str(item) for item in value) if value else None

        raise EncodingError(name, value)
