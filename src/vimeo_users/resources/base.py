"""
Shared building blocks for resource services.

Each operation resolves its path, encodes its options, dispatches one request
through the executor and decodes the result. Errors from any of these steps
propagate unchanged.
"""

from dataclasses import replace
from typing import TYPE_CHECKING, Any, TypeVar

from zgw_consumers.api_models.base import factory

from ..operations.resolver import PathResolver
from ..pagination import normalize
from ..utils.errors import DecodeError
from ..utils.query import QueryEncoder

if TYPE_CHECKING:
    from ..client import VimeoClient
    from ..operations.executor import Response

T = TypeVar("T")


def decode(model: type[T], data: Any, raw_body: bytes = b"") -> Any:
    """
    Build ``model`` instance(s) from decoded JSON, raising DecodeError on mismatch.
    """
    try:
        return factory(model, data)
    except (TypeError, ValueError, KeyError, AttributeError) as exc:
        raise DecodeError(
            f"Can't build {model.__name__} from response: {exc}", raw_body
        ) from exc


class ResourceService:
    """
    Stateless service composing path resolution, query encoding and dispatch.

    One instance is created per client; it keeps no per-call state.
    """

    resource = "users"

    def __init__(self, client: "VimeoClient"):
        self.client = client
        self.resolver = PathResolver(self.resource)
        self.encoder = QueryEncoder()

    @property
    def executor(self):
        return self.client.executor

    def _retrieve(self, model: type[T], path: str) -> tuple[T, "Response"]:
        data, response = self.executor.execute("GET", path)
        return self._decode_entity(model, data, response), response

    def _partial_update(
        self, model: type[T], path: str, data: dict
    ) -> tuple[T, "Response"]:
        body, response = self.executor.execute("PATCH", path, data=data)
        return self._decode_entity(model, body, response), response

    def _list(
        self, model: type[T], path: str, options=None
    ) -> tuple[list[T], "Response"]:
        # encoding errors surface here, before anything is sent
        params = self.encoder.to_params(options)
        envelope, response = self.executor.execute("GET", path, params=params)

        if not isinstance(envelope, dict) or not isinstance(
            envelope.get("data"), list
        ):
            raise DecodeError(
                f"Expected a list envelope with 'data' from {path}", response.content
            )

        entities = decode(model, envelope["data"], response.content)
        return entities, replace(response, pagination=normalize(envelope))

    def _toggle(self, method: str, path: str) -> "Response":
        _, response = self.executor.execute(method, path)
        return response

    def _decode_entity(self, model: type[T], data: Any, response: "Response") -> T:
        if not isinstance(data, dict):
            raise DecodeError(f"Expected a {model.__name__} object", response.content)
        return decode(model, data, response.content)
