from typing import Any

API_ROOT = "https://api.vimeo.example/"


def paginated_response(
    results: list[dict],
    total: int | None = None,
    page: int = 1,
    per_page: int = 25,
    next: str | None = None,
    previous: str | None = None,
) -> dict[str, Any]:
    body = {
        "total": len(results) if total is None else total,
        "page": page,
        "per_page": per_page,
        "paging": {
            "next": next,
            "previous": previous,
            "first": None,
            "last": None,
        },
        "data": results,
    }
    return body


def user_response(uid: str = "42", **overrides) -> dict[str, Any]:
    data = {
        "uri": f"/users/{uid}",
        "name": f"User {uid}",
        "link": f"https://vimeo.example/user{uid}",
        "location": "Utrecht",
        "bio": None,
        "created_time": "2019-03-31T10:00:00+00:00",
        "account": "basic",
        "pictures": {"uri": f"/users/{uid}/pictures/1", "active": True, "sizes": []},
        "websites": [],
        "content_filter": ["language", "drugs"],
        "resource_key": "abc123",
    }
    data.update(overrides)
    return data


def video_response(vid: str = "1000", **overrides) -> dict[str, Any]:
    data = {
        "uri": f"/videos/{vid}",
        "name": f"Video {vid}",
        "link": f"https://vimeo.example/{vid}",
        "duration": 61,
        "created_time": "2020-01-01T12:00:00+00:00",
        "tags": [],
    }
    data.update(overrides)
    return data
