# src/campaign_templates/tasks/placeholders.py

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from typing import Any

from .task_models import Project

logger = logging.getLogger(__name__)


def substitute_placeholders(project: Project, mapping: Mapping[str, str | None]) -> int:
    """
    Replace placeholder tokens in every task's name and note.

    Tokens are applied in mapping order. Each token replaces its FIRST occurrence in a
    field only; repeated tokens in the same field are left as they are. Unknown tokens
    and None values are ignored.

    Returns the number of fields that changed.
    """
    changed = 0
    for task in project.flattened_tasks():
        for token, value in mapping.items():
            if not token or value is None:
                continue

            new_name = task.name.replace(token, value, 1)
            if new_name != task.name:
                task.name = new_name
                changed += 1

            if task.note:
                new_note = task.note.replace(token, value, 1)
                if new_note != task.note:
                    task.note = new_note
                    changed += 1

    logger.debug("Placeholders substituted project=%s fields=%d", project.id, changed)
    return changed


def format_release_date(release_date: date, fmt: str = "%m/%d/%Y") -> str:
    return release_date.strftime(fmt)


def build_placeholder_mapping(values: Any, settings: Any) -> dict[str, str]:
    """Default token -> value mapping for a campaign (insertion order matters)."""
    fmt = str(getattr(settings, "release_date_format", "%m/%d/%Y"))
    return {
        settings.campaign_name_token: values.campaign_name,
        settings.artist_name_token: values.artist_name,
        settings.release_date_token: format_release_date(values.release_date, fmt),
    }
