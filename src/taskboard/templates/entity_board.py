# src/taskboard/templates/entity_board.py

"""
Template: headless CRUD board for one resource type.

Copy alongside entity_api.py and rename. The board keeps the list, the active
status filter and the create/edit form; a front end renders `state` and calls
the action methods. Every mutation reloads the list from the server and then
reapplies the status filter on the client.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from ..api.errors import ApiError, describe_error
from ..core.derived import ALL, filter_by_status
from ..core.ports import EntityRepo
from ..core.state import ViewMode
from .entity_api import Entity, EntityStatus

logger = logging.getLogger(__name__)


def _empty_form() -> dict[str, Any]:
    return {"name": "", "description": "", "status": EntityStatus.ACTIVE}


@dataclass
class EntityBoardState:
    mode: ViewMode = ViewMode.IDLE
    error: str | None = None
    entities: list[Entity] = field(default_factory=list)
    status_filter: EntityStatus | str = ALL

    form_open: bool = False
    editing: Entity | None = None
    form: dict[str, Any] = field(default_factory=_empty_form)


class EntityBoard:
    def __init__(self, api: EntityRepo, *, user_id: int | None = None) -> None:
        self._api = api
        self.user_id = user_id
        self.state = EntityBoardState()

    async def load(self) -> bool:
        self.state.mode = ViewMode.LOADING
        self.state.error = None
        try:
            if self.user_id:
                data = await self._api.get_by_user_id(self.user_id)
            else:
                data = await self._api.get_all()
        except (ApiError, ValueError) as e:
            return self._fail("Failed to load entities. Please try again.", e)

        self.state.entities = filter_by_status(data, self.state.status_filter)
        self.state.mode = ViewMode.LOADED
        return True

    async def set_filter(self, status: EntityStatus | str) -> bool:
        self.state.status_filter = ALL if status == ALL else EntityStatus.parse(status)
        return await self.load()

    # ---- form ----

    def open_create(self) -> None:
        self.reset_form()
        self.state.form_open = True

    def open_edit(self, entity: Entity) -> None:
        self.state.form = {
            "name": entity.name,
            "description": entity.description or "",
            "status": entity.status,
        }
        self.state.editing = entity
        self.state.form_open = True

    def reset_form(self) -> None:
        self.state.form = _empty_form()
        self.state.editing = None

    def set_field(self, name: str, value: Any) -> None:
        if name not in self.state.form:
            raise KeyError(f"Unknown form field: {name}")
        self.state.form[name] = value

    def _entity_from_form(self) -> Entity:
        form = self.state.form
        name = str(form.get("name") or "").strip()
        if not name:
            raise ValueError("name is required")
        return Entity(
            name=name,
            description=(str(form.get("description") or "").strip() or None),
            status=EntityStatus.parse(form.get("status") or EntityStatus.ACTIVE),
        )

    # ---- actions ----

    async def submit(self) -> bool:
        """Create, or update the entity opened with open_edit()."""
        entity = self._entity_from_form()
        editing = self.state.editing
        if editing is not None and editing.id is None:
            # Nothing on the server to update.
            logger.warning("Edited entity has no id; nothing submitted")
            return False

        try:
            if editing is not None:
                await self._api.update(editing.id, entity)
            else:
                await self._api.create(entity)
        except (ApiError, ValueError) as e:
            action = "update" if editing is not None else "create"
            return self._fail(f"Failed to {action} entity", e)

        self.state.form_open = False
        self.reset_form()
        return await self.load()

    async def delete(self, entity_id: int) -> bool:
        try:
            await self._api.delete(entity_id)
        except ApiError as e:
            return self._fail("Failed to delete entity", e)
        return await self.load()

    async def change_status(self, entity_id: int, status: EntityStatus | str) -> bool:
        status = EntityStatus.parse(status)
        try:
            await self._api.update_status(entity_id, status)
        except (ApiError, ValueError) as e:
            return self._fail("Failed to update status", e)
        return await self.load()

    def _fail(self, message: str, err: Exception) -> bool:
        logger.warning("%s: %s", message, describe_error(err))
        self.state.error = message
        self.state.mode = ViewMode.ERROR
        return False
