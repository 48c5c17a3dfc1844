"""
End-to-end scenarios against a mocked API.
"""

import pytest

from vimeo_users.options import ListUserOptions
from vimeo_users.utils.errors import HTTPStatusError

from .utils import user_response


def test_get_self(client, api_root, requests_mock):
    requests_mock.get(f"{api_root}me", json=user_response("42"))

    user, response = client.users.get("")

    assert requests_mock.last_request.method == "GET"
    assert requests_mock.last_request.url == f"{api_root}me"
    assert user.uri == "/users/42"
    assert response.status_code == 200


def test_list_follower_page(client, api_root, requests_mock, followers_page):
    requests_mock.get(
        f"{api_root}users/42/followers",
        json=followers_page(uids=["5", "6"], total=12, page=2, per_page=10),
    )

    users, response = client.users.list_followers(
        "42", ListUserOptions(page=2, per_page=10)
    )

    assert requests_mock.last_request.url == (
        f"{api_root}users/42/followers?page=2&per_page=10"
    )
    assert [user.id for user in users] == ["5", "6"]
    assert response.pagination.page == 2
    assert response.pagination.per_page == 10
    assert response.pagination.total == 12


def test_subscribe_category(client, api_root, requests_mock):
    requests_mock.put(f"{api_root}me/categories/tech", status_code=204)

    response = client.users.subscribe_category("", "tech")

    assert requests_mock.last_request.method == "PUT"
    assert requests_mock.last_request.body is None
    assert response.status_code == 204


def test_get_nonexistent(client, api_root, requests_mock):
    requests_mock.get(f"{api_root}users/nonexistent", status_code=404, json={})

    with pytest.raises(HTTPStatusError) as exc_info:
        client.users.get("nonexistent")

    assert exc_info.value.status_code == 404


@pytest.mark.parametrize(
    "operation,method",
    [
        ("follow_user", "PUT"),
        ("unfollow_user", "DELETE"),
    ],
)
def test_follow_twice_same_request(client, api_root, requests_mock, operation, method):
    requests_mock.register_uri(method, f"{api_root}me/following/9", status_code=204)

    getattr(client.users, operation)(None, "9")
    getattr(client.users, operation)(None, "9")

    urls = {request.url for request in requests_mock.request_history}
    assert urls == {f"{api_root}me/following/9"}
    assert requests_mock.call_count == 2
