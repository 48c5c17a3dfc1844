"""
Optional parameters for list calls and request bodies for edit calls.
"""

from dataclasses import dataclass, field, fields
from typing import Any


class _Unset:
    """Marker for a field that was not provided at all."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "UNSET"


UNSET: Any = _Unset()


@dataclass
class ListOptions:
    """
    Pagination and sorting controls shared by every list call.
    """

    page: int | None = None
    per_page: int | None = None
    sort: str | None = None
    direction: str | None = None
    fields: list[str] = field(default_factory=list)
    filter_embeddable: bool | None = None


@dataclass
class ListUserOptions(ListOptions):
    query: str | None = None
    filter: str | None = None


@dataclass
class ListVideoOptions(ListOptions):
    query: str | None = None
    filter: str | None = None


@dataclass
class ListCategoryOptions(ListOptions):
    pass


@dataclass
class ListChannelOptions(ListOptions):
    query: str | None = None
    filter: str | None = None


@dataclass
class ListGroupOptions(ListOptions):
    query: str | None = None
    filter: str | None = None


@dataclass
class ListFeedOptions(ListOptions):
    type: str | None = None
    offset: str | None = None


@dataclass
class UserRequest:
    """
    Partial update of a user profile.

    Only fields that were explicitly given end up in the PATCH body. Passing
    ``None`` sends a JSON ``null`` and clears the field on the server.
    """

    name: str | None = UNSET
    location: str | None = UNSET
    bio: str | None = UNSET
    link: str | None = UNSET
    content_filter: list[str] | None = UNSET

    def as_data(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }
