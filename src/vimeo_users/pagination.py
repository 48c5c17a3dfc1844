"""
Pagination support for list responses.

Vimeo list responses look like::

    {
        "total": 102,
        "page": 2,
        "per_page": 25,
        "paging": {
            "next": "/users/42/followers?page=3",
            "previous": "/users/42/followers?page=1",
            "first": "/users/42/followers?page=1",
            "last": "/users/42/followers?page=5"
        },
        "data": [...]
    }

Every listed entity type shares this envelope, so one descriptor covers all of
them.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable
from urllib.parse import parse_qs, urlparse

from .options import UNSET, ListOptions

logger = logging.getLogger(__name__)

PAGING_KEYS = ("total", "page", "per_page", "paging")


@dataclass(frozen=True)
class Pagination:
    total: int = 0
    page: int = 0
    per_page: int = 0
    next: str | None = None
    previous: str | None = None
    first: str | None = None
    last: str | None = None

    @property
    def pages(self) -> int:
        if not self.per_page:
            return 0
        return -(-self.total // self.per_page)

    @property
    def next_page(self) -> int | None:
        return _page_from_link(self.next)

    @property
    def previous_page(self) -> int | None:
        return _page_from_link(self.previous)


def _page_from_link(link: str | None) -> int | None:
    if not link:
        return None
    query = parse_qs(urlparse(link).query)
    try:
        return int(query["page"][0])
    except (KeyError, IndexError, ValueError):
        return None


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def normalize(envelope: dict) -> Pagination | None:
    """
    Build the pagination descriptor from a decoded list envelope.

    Returns None when the envelope carries no paging fields at all. Missing
    fields inside a present paging block default to zero/None.
    """
    if not isinstance(envelope, dict) or not any(
        key in envelope for key in PAGING_KEYS
    ):
        return None

    links = envelope.get("paging")
    if not isinstance(links, dict):
        links = {}

    return Pagination(
        total=_as_int(envelope.get("total")),
        page=_as_int(envelope.get("page")),
        per_page=_as_int(envelope.get("per_page")),
        next=links.get("next") or None,
        previous=links.get("previous") or None,
        first=links.get("first") or None,
        last=links.get("last") or None,
    )


def get_paginated_results(
    list_call: Callable, subject=UNSET, options=None, minimum: int | None = None
) -> list:
    """
    Fetch all results from a paginated list operation.

    Args:
        list_call: A bound list operation, e.g. ``client.users.list_followers``
        subject: The subject passed through to ``list_call``. When omitted
            ``list_call`` only gets the options, which suits ``search`` and
            addresses the caller for the per-user lists
        options: Optional options dataclass; it's copied, never modified
        minimum: Optional minimum number of results to fetch before stopping

    Returns:
        List of all results from all pages, in server order

    Examples:
        followers = get_paginated_results(client.users.list_followers, "42")
        found = get_paginated_results(
            client.users.search, options=ListUserOptions(query="jazz")
        )
    """
    if options is None:
        options = ListOptions()

    def fetch(page_options):
        if subject is UNSET:
            return list_call(options=page_options)
        return list_call(subject, options=page_options)

    results: list[Any] = []
    entities, response = fetch(options)
    results += entities

    if minimum and len(results) >= minimum:
        return results

    while response.pagination and response.pagination.next_page:
        next_page = response.pagination.next_page
        if next_page <= response.pagination.page:
            break
        logger.debug("Fetching page %d of %r", next_page, list_call)
        entities, response = fetch(replace(options, page=next_page))
        results += entities

        if minimum and len(results) >= minimum:
            return results

    return results
