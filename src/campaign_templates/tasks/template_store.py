# src/campaign_templates/tasks/template_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
import uuid
from pathlib import Path
from typing import Any

from ..core.errors import TemplateLibraryError, TemplateNotFoundError
from .task_models import Project, ProjectStatus, Task

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex[:12]


def _copy_task(task: Task) -> Task:
    data = task.to_dict()
    copy = Task.from_dict(data)
    _reassign_ids(copy)
    return copy


def _reassign_ids(task: Task) -> None:
    for t in task.walk():
        t.id = _new_id()


class JsonTemplateLibrary:
    """
    JSON file holding template and working projects.

    File layout: {"projects": [Project.to_dict(), ...]}

    Every call re-reads the file; writes go through a temp file + os.replace so a
    crash never leaves a half-written library behind.
    """

    def __init__(
        self,
        path: str | Path = "library.json",
        *,
        template_folder: str = "Templates",
        destination_folder: str | None = None,
    ) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self.template_folder = template_folder
        self.destination_folder = destination_folder
        logger.info(
            "JsonTemplateLibrary ready path=%s templates=%d",
            self._path,
            len(self.get_template_folder()),
        )

    # ---- low-level helpers ----

    def _load_raw(self) -> dict[str, Any]:
        if not self._path.exists():
            return {"projects": []}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise TemplateLibraryError(f"Cannot read template library {self._path}: {e}") from e
        if not isinstance(data, dict) or not isinstance(data.get("projects", []), list):
            raise TemplateLibraryError(f"Malformed template library {self._path}")
        return data

    def _write_raw(self, data: dict[str, Any]) -> None:
        tmp = self._path.with_suffix(".tmp")
        try:
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise TemplateLibraryError(f"Cannot write template library {self._path}: {e}") from e

    # ---- queries ----

    def list_projects(self) -> list[Project]:
        raw = self._load_raw()
        return [Project.from_dict(p) for p in raw.get("projects", []) if isinstance(p, dict)]

    def get_project(self, project_id: str) -> Project | None:
        for p in self.list_projects():
            if p.id == project_id:
                return p
        return None

    def get_template_folder(self) -> list[Project]:
        """Projects living in the template folder."""
        return [p for p in self.list_projects() if p.folder == self.template_folder]

    def find_template(self, name: str) -> Project:
        key = name.strip().lower()
        for p in self.get_template_folder():
            if p.name.strip().lower() == key or p.id == name:
                return p
        raise TemplateNotFoundError(f"Template not found: {name!r}")

    def get_destination(self, template: Project) -> str | None:
        return self.destination_folder

    # ---- writes ----

    def save_project(self, project: Project) -> None:
        """Insert or replace a project by id."""
        raw = self._load_raw()
        projects = [p for p in raw.get("projects", []) if isinstance(p, dict)]
        for i, p in enumerate(projects):
            if str(p.get("id")) == project.id:
                projects[i] = project.to_dict()
                break
        else:
            projects.append(project.to_dict())
        raw["projects"] = projects
        self._write_raw(raw)

    async def create_from_template(self, template: Project, destination: str | None) -> Project:
        """Duplicate `template` (fresh ids, working-tree role) into `destination`."""
        project = Project(
            id=_new_id(),
            name=template.name,
            tasks=[_copy_task(t) for t in template.tasks],
            status=ProjectStatus.ACTIVE,
            is_template=False,
            folder=destination,
        )
        self.save_project(project)
        logger.info(
            "Created project id=%s from template id=%s destination=%s",
            project.id,
            template.id,
            destination,
        )
        return project
