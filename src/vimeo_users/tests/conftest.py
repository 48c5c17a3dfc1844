import pytest

from vimeo_users.client import VimeoClient
from vimeo_users.conf import ClientConfig

from .utils import API_ROOT, paginated_response, user_response


@pytest.fixture
def api_root() -> str:
    return API_ROOT


@pytest.fixture
def client() -> VimeoClient:
    config = ClientConfig(api_root=API_ROOT, access_token="secret-token")
    return VimeoClient.from_config(config)


@pytest.fixture
def followers_page():
    def _make(uids=("1", "2"), **kwargs):
        return paginated_response([user_response(uid) for uid in uids], **kwargs)

    return _make
