# tests/test_template_store.py

from __future__ import annotations

import json
from datetime import date, datetime
from pathlib import Path

import pytest

from campaign_templates.core.errors import TemplateLibraryError, TemplateNotFoundError
from campaign_templates.tasks.template_store import JsonTemplateLibrary

from .conftest import make_template


def _library(tmp_path: Path) -> JsonTemplateLibrary:
    lib = JsonTemplateLibrary(tmp_path / "library.json", destination_folder="Campaigns")
    lib.save_project(make_template())
    return lib


def test_missing_file_is_an_empty_library(tmp_path: Path) -> None:
    lib = JsonTemplateLibrary(tmp_path / "nope" / "library.json")
    assert lib.list_projects() == []
    assert lib.get_template_folder() == []


def test_find_template_by_name_or_id(tmp_path: Path) -> None:
    lib = _library(tmp_path)

    assert lib.find_template("single release").id == "tpl-1"
    assert lib.find_template("tpl-1").name == "Single Release"
    with pytest.raises(TemplateNotFoundError):
        lib.find_template("Album")


@pytest.mark.asyncio
async def test_create_from_template_copies_with_fresh_ids(tmp_path: Path) -> None:
    lib = _library(tmp_path)
    template = lib.find_template("Single Release")

    project = await lib.create_from_template(template, lib.get_destination(template))

    assert project.is_template is False
    assert project.folder == "Campaigns"
    assert [t.name for t in project.flattened_tasks()] == [t.name for t in template.flattened_tasks()]

    template_ids = {t.id for t in template.flattened_tasks()}
    assert not template_ids & {t.id for t in project.flattened_tasks()}

    # Persisted next to the template, which stays the only one in the template folder.
    assert lib.get_project(project.id) is not None
    assert [p.id for p in lib.get_template_folder()] == ["tpl-1"]


def test_save_project_replaces_existing(tmp_path: Path) -> None:
    lib = _library(tmp_path)
    project = lib.find_template("tpl-1")
    project.tasks[0].due_date = datetime(2024, 4, 6, 9, 0)

    lib.save_project(project)

    assert len(lib.list_projects()) == 1
    assert lib.get_project("tpl-1").tasks[0].due_date == datetime(2024, 4, 6, 9, 0)

    raw = json.loads((tmp_path / "library.json").read_text("utf-8"))
    assert raw["projects"][0]["tasks"][0]["due_date"] == "2024-04-06T09:00:00"
    assert raw["projects"][0]["tasks"][0]["tags"] == []


def test_corrupt_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "library.json"
    path.write_text("{not json", "utf-8")

    with pytest.raises(TemplateLibraryError):
        JsonTemplateLibrary(path)


def test_plain_dates_survive_serialization_as_dates(tmp_path: Path) -> None:
    lib = _library(tmp_path)
    project = lib.find_template("tpl-1")
    project.tasks[0].due_date = date(2024, 6, 1)
    project.tasks[0].defer_date = datetime(2024, 5, 1, 8, 30)
    lib.save_project(project)

    task = lib.find_template("tpl-1").tasks[0]

    assert type(task.due_date) is date
    assert task.due_date == date(2024, 6, 1)
    assert task.defer_date == datetime(2024, 5, 1, 8, 30)
