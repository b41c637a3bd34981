# src/taskboard/api/resource.py

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Generic, Protocol, TypeVar

from .client import ApiClient

T = TypeVar("T", bound="JsonModel")


class JsonModel(Protocol):
    def to_json(self) -> dict[str, Any]: ...


class ResourceService(Generic[T]):
    """
    CRUD over one REST collection (`/users`, `/tasks`, ...).

    Builds the path, serializes the model, decodes the JSON body
    back into the model type. Filtering semantics belong to the server.
    """

    def __init__(
        self,
        client: ApiClient,
        endpoint: str,
        decode: Callable[[Mapping[str, Any]], T],
    ) -> None:
        self.client = client
        self.endpoint = "/" + endpoint.strip("/")
        self._decode = decode

    def _path(self, *parts: object) -> str:
        return "/".join([self.endpoint, *(str(p).strip("/") for p in parts)])

    def _one(self, payload: Any) -> T:
        if not isinstance(payload, Mapping):
            raise ValueError(f"Expected a JSON object from {self.endpoint}, got {type(payload).__name__}")
        return self._decode(payload)

    def _many(self, payload: Any) -> list[T]:
        if not isinstance(payload, list):
            raise ValueError(f"Expected a JSON array from {self.endpoint}, got {type(payload).__name__}")
        return [self._one(item) for item in payload]

    @staticmethod
    def _body(entity: T | Mapping[str, Any]) -> dict[str, Any]:
        if isinstance(entity, Mapping):
            return dict(entity)
        return entity.to_json()

    async def get_all(self, params: Mapping[str, Any] | None = None) -> list[T]:
        return self._many(await self.client.get(self.endpoint, params=params))

    async def get_by_id(self, entity_id: int) -> T:
        return self._one(await self.client.get(self._path(entity_id)))

    async def create(self, entity: T) -> T:
        return self._one(await self.client.post(self.endpoint, self._body(entity)))

    async def update(self, entity_id: int, entity: T) -> T:
        return self._one(await self.client.put(self._path(entity_id), self._body(entity)))

    async def delete(self, entity_id: int) -> None:
        await self.client.delete(self._path(entity_id))

    async def query(self, subpath: str, params: Mapping[str, Any] | None = None) -> list[T]:
        """GET a sub-collection such as `user/3` or `date-range`."""
        return self._many(await self.client.get(self._path(subpath), params=params))
