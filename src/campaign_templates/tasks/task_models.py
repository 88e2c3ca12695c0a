# src/campaign_templates/tasks/task_models.py

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from typing import Any


class ProjectStatus(StrEnum):
    """
    Project lifecycle status.

    Only ACTIVE (and optionally ON_HOLD) templates are offered when choosing a template.
    """

    ACTIVE = "active"
    ON_HOLD = "on_hold"
    DONE = "done"
    DROPPED = "dropped"

    @classmethod
    def from_raw(cls, raw: str | None) -> ProjectStatus:
        if not raw:
            return cls.ACTIVE
        try:
            return cls(raw)
        except ValueError:
            return cls.ACTIVE


class OffsetUnit(StrEnum):
    DAY = "d"
    WEEK = "w"
    MONTH = "m"
    YEAR = "y"


@dataclass(slots=True, frozen=True)
class Offset:
    """Relative date shift, e.g. -63d. The sign lives in `value`."""

    value: int
    unit: OffsetUnit


@dataclass(slots=True, frozen=True)
class Tag:
    name: str


def _date_to_raw(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def _date_from_raw(raw: Any) -> date | None:
    if not raw:
        return None
    text = str(raw)
    # Plain dates ("2024-06-01") stay dates; anything with a time part is a datetime.
    if len(text) == 10:
        return date.fromisoformat(text)
    return datetime.fromisoformat(text)


@dataclass(slots=True)
class Task:
    id: str
    name: str
    note: str | None = None
    tags: set[Tag] = field(default_factory=set)

    defer_date: date | None = None
    due_date: date | None = None

    children: list[Task] = field(default_factory=list)

    def has_tag(self, name: str) -> bool:
        return any(t.name == name for t in self.tags)

    def tag_names(self) -> list[str]:
        return sorted(t.name for t in self.tags)

    def walk(self) -> Iterator[Task]:
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "note": self.note,
            "tags": self.tag_names(),
            "defer_date": _date_to_raw(self.defer_date),
            "due_date": _date_to_raw(self.due_date),
            "children": [c.to_dict() for c in self.children],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            note=data.get("note"),
            tags={Tag(str(n)) for n in data.get("tags") or []},
            defer_date=_date_from_raw(data.get("defer_date")),
            due_date=_date_from_raw(data.get("due_date")),
            children=[cls.from_dict(c) for c in data.get("children") or []],
        )


@dataclass(slots=True)
class Project:
    id: str
    name: str
    tasks: list[Task] = field(default_factory=list)
    status: ProjectStatus = ProjectStatus.ACTIVE

    # Reusable source tree vs. working tree.
    is_template: bool = False
    folder: str | None = None

    def flattened_tasks(self) -> Iterator[Task]:
        """All tasks depth-first, in document order."""
        for task in self.tasks:
            yield from task.walk()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status.value,
            "is_template": self.is_template,
            "folder": self.folder,
            "tasks": [t.to_dict() for t in self.tasks],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Project:
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            tasks=[Task.from_dict(t) for t in data.get("tasks") or []],
            status=ProjectStatus.from_raw(data.get("status")),
            is_template=bool(data.get("is_template", False)),
            folder=data.get("folder"),
        )
