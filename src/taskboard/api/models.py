# src/taskboard/api/models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

JsonDict = dict[str, Any]


class TaskStatus(StrEnum):
    """Task workflow status as the backend spells it."""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"

    @classmethod
    def parse(cls, raw: Any) -> TaskStatus:
        try:
            return cls(raw)
        except ValueError:
            raise ValueError(f"Invalid task status: {raw!r}") from None


class Priority(StrEnum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @classmethod
    def parse(cls, raw: Any) -> Priority:
        try:
            return cls(raw)
        except ValueError:
            raise ValueError(f"Invalid priority: {raw!r}") from None


def _opt_int(raw: Any) -> int | None:
    return int(raw) if raw is not None else None


def _opt_str(raw: Any) -> str | None:
    return str(raw) if raw is not None else None


def _require(data: Mapping[str, Any], key: str, kind: str) -> Any:
    if key not in data or data[key] is None:
        raise ValueError(f"{kind} payload is missing required field {key!r}")
    return data[key]


def _compact(payload: JsonDict) -> JsonDict:
    # Unset fields are left out of the body entirely (the server fills in defaults).
    return {k: v for k, v in payload.items() if v is not None}


@dataclass(slots=True)
class User:
    name: str
    email: str
    id: int | None = None
    created_at: str | None = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> User:
        return cls(
            id=_opt_int(data.get("id")),
            name=str(_require(data, "name", "User")),
            email=str(_require(data, "email", "User")),
            created_at=_opt_str(data.get("createdAt")),
        )

    def to_json(self) -> JsonDict:
        return _compact(
            {
                "id": self.id,
                "name": self.name,
                "email": self.email,
                "createdAt": self.created_at,
            }
        )


@dataclass(slots=True)
class Project:
    name: str
    description: str | None = None
    created_by: User | None = None
    id: int | None = None
    created_at: str | None = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Project:
        created_by = data.get("createdBy")
        return cls(
            id=_opt_int(data.get("id")),
            name=str(_require(data, "name", "Project")),
            description=_opt_str(data.get("description")),
            created_by=User.from_json(created_by) if created_by else None,
            created_at=_opt_str(data.get("createdAt")),
        )

    def to_json(self) -> JsonDict:
        return _compact(
            {
                "id": self.id,
                "name": self.name,
                "description": self.description,
                "createdBy": self.created_by.to_json() if self.created_by else None,
                "createdAt": self.created_at,
            }
        )


@dataclass(slots=True)
class Task:
    title: str
    description: str | None = None
    status: TaskStatus = TaskStatus.TODO
    priority: Priority = Priority.MEDIUM
    assigned_to: User | None = None
    project: Project | None = None
    due_date: str | None = None
    id: int | None = None
    created_at: str | None = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Task:
        assigned_to = data.get("assignedTo")
        project = data.get("project")
        return cls(
            id=_opt_int(data.get("id")),
            title=str(_require(data, "title", "Task")),
            description=_opt_str(data.get("description")),
            status=TaskStatus.parse(data.get("status", TaskStatus.TODO)),
            priority=Priority.parse(data.get("priority", Priority.MEDIUM)),
            assigned_to=User.from_json(assigned_to) if assigned_to else None,
            project=Project.from_json(project) if project else None,
            due_date=_opt_str(data.get("dueDate")),
            created_at=_opt_str(data.get("createdAt")),
        )

    def to_json(self) -> JsonDict:
        return _compact(
            {
                "id": self.id,
                "title": self.title,
                "description": self.description,
                "status": self.status.value,
                "priority": self.priority.value,
                "assignedTo": self.assigned_to.to_json() if self.assigned_to else None,
                "project": self.project.to_json() if self.project else None,
                "dueDate": self.due_date,
                "createdAt": self.created_at,
            }
        )


@dataclass(slots=True, frozen=True)
class TaskStats:
    total: int
    todo: int
    in_progress: int
    done: int
    low: int
    medium: int
    high: int
