# src/taskboard/templates/entity_api.py

"""
Template: API service for a new resource type.

Copy this module when adding a resource, then:
1. rename Entity / EntityStatus / EntityApi to your domain names,
2. change the endpoint passed to ResourceService,
3. keep only the custom queries your backend actually serves.

The batch and upload helpers work against any endpoint and can be used as-is.
"""

from __future__ import annotations

import secrets
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import IO, Any

from ..api.client import ApiClient
from ..api.resource import ResourceService


class EntityStatus(StrEnum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"

    @classmethod
    def parse(cls, raw: Any) -> EntityStatus:
        try:
            return cls(raw)
        except ValueError:
            raise ValueError(f"Invalid entity status: {raw!r}") from None


@dataclass(slots=True)
class Entity:
    name: str
    description: str | None = None
    status: EntityStatus = EntityStatus.ACTIVE
    id: int | None = None
    created_at: str | None = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Entity:
        if data.get("name") is None:
            raise ValueError("Entity payload is missing required field 'name'")
        return cls(
            id=int(data["id"]) if data.get("id") is not None else None,
            name=str(data["name"]),
            description=data.get("description"),
            status=EntityStatus.parse(data.get("status", EntityStatus.ACTIVE)),
            created_at=data.get("createdAt"),
        )

    def to_json(self) -> dict[str, Any]:
        payload = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
            "createdAt": self.created_at,
        }
        return {k: v for k, v in payload.items() if v is not None}


class EntityApi(ResourceService[Entity]):
    def __init__(self, client: ApiClient, endpoint: str = "/entities") -> None:
        super().__init__(client, endpoint, Entity.from_json)

    async def patch(self, entity_id: int, fields: Mapping[str, Any]) -> Entity:
        """Partial update: only the given fields are sent."""
        return self._one(await self.client.patch(self._path(entity_id), dict(fields)))

    async def get_by_status(self, status: EntityStatus) -> list[Entity]:
        return await self.get_all({"status": EntityStatus.parse(status).value})

    async def get_by_user_id(self, user_id: int) -> list[Entity]:
        return await self.query(f"user/{int(user_id)}")

    async def update_status(self, entity_id: int, status: EntityStatus) -> Entity:
        status = EntityStatus.parse(status)
        payload = await self.client.patch(self._path(entity_id, "status"), {"status": status.value})
        return self._one(payload)

    async def search(self, keyword: str) -> list[Entity]:
        return await self.get_all({"search": keyword})

    async def get_by_date_range(self, start_date: str, end_date: str) -> list[Entity]:
        return await self.query("date-range", {"startDate": start_date, "endDate": end_date})


def _endpoint(endpoint: str) -> str:
    return "/" + endpoint.strip("/")


async def batch_create(client: ApiClient, endpoint: str, items: Iterable[Any]) -> Any:
    """POST /{endpoint}/batch with a JSON array; returns the server's array as-is."""
    body = [item if isinstance(item, Mapping) else item.to_json() for item in items]
    return await client.post(f"{_endpoint(endpoint)}/batch", body)


async def batch_delete(client: ApiClient, endpoint: str, ids: Iterable[int]) -> None:
    """DELETE /{endpoint}/batch with body {"ids": [...]}."""
    await client.delete(f"{_endpoint(endpoint)}/batch", {"ids": [int(i) for i in ids]})


async def upload_file(
    client: ApiClient,
    endpoint: str,
    file: IO[bytes] | bytes,
    *,
    filename: str = "upload",
    content_type: str = "application/octet-stream",
    additional_data: Mapping[str, Any] | None = None,
) -> Any:
    """
    POST a file as multipart/form-data under the part name "file".

    Extra fields are sent as plain string form fields.
    """
    # The client default is JSON; an explicit boundary makes httpx encode multipart.
    boundary = secrets.token_hex(16)
    data = {k: str(v) for k, v in (additional_data or {}).items()}
    return await client.request(
        "POST",
        _endpoint(endpoint),
        data=data or None,
        files={"file": (filename, file, content_type)},
        headers={"Content-Type": f"multipart/form-data; boundary={boundary}"},
    )
