# tests/test_placeholders.py

from __future__ import annotations

from datetime import date
from types import SimpleNamespace

from campaign_templates.tasks.placeholders import build_placeholder_mapping, substitute_placeholders
from campaign_templates.tasks.task_models import Project, Task


def _project(*tasks: Task) -> Project:
    return Project(id="p", name="P", tasks=list(tasks))


def test_substitutes_names_and_notes_in_nested_tasks(template) -> None:
    changed = substitute_placeholders(
        template,
        {"«Campaign Name»": "Summer Single", "«Artist Name»": "Nova", "«Release Date»": "06/01/2024"},
    )

    names = [t.name for t in template.flattened_tasks()]
    assert "Announce Summer Single" in names
    assert "Draft press release for Nova" in names
    assert "Release day 06/01/2024" in names
    assert template.tasks[0].note.startswith("Teaser for Nova\n")
    assert changed == 5


def test_only_first_occurrence_is_replaced() -> None:
    task = Task(id="1", name="«X» and «X»", note="«X»\n«X»")
    substitute_placeholders(_project(task), {"«X»": "y"})

    assert task.name == "y and «X»"
    assert task.note == "y\n«X»"


def test_unmatched_text_is_left_untouched() -> None:
    task = Task(id="1", name="Plain name $DUE=+1d", note="«Unknown» stays")
    substitute_placeholders(_project(task), {"«Artist Name»": "Nova"})

    assert task.name == "Plain name $DUE=+1d"
    assert task.note == "«Unknown» stays"


def test_missing_note_and_none_value_are_skipped() -> None:
    task = Task(id="1", name="«A» «B»")
    changed = substitute_placeholders(_project(task), {"«A»": None, "«B»": "b"})

    assert task.name == "«A» b"
    assert task.note is None
    assert changed == 1


def test_mapping_order_is_applied_in_sequence() -> None:
    task = Task(id="1", name="«A»")
    substitute_placeholders(_project(task), {"«A»": "«B»", "«B»": "done"})

    assert task.name == "done"


def test_build_placeholder_mapping_formats_release_date(settings) -> None:
    values = SimpleNamespace(campaign_name="Summer", artist_name="Nova", release_date=date(2024, 6, 1))

    mapping = build_placeholder_mapping(values, settings)

    assert list(mapping) == ["«Campaign Name»", "«Artist Name»", "«Release Date»"]
    assert mapping["«Release Date»"] == "06/01/2024"
