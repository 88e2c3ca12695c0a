# src/campaign_templates/tasks/categories.py

from __future__ import annotations

"""
Category (vertical) pruning.

Every task is matched on its own tags; nothing is inherited from parents. Removing a
task takes its subtree with it, the same way the host app's remove() does.
"""

import logging
from collections.abc import Iterable

from .task_models import Project, Task

logger = logging.getLogger(__name__)


def categories_to_remove(all_categories: Iterable[str], selected: Iterable[str]) -> list[str]:
    selected_set = set(selected)
    return [c for c in all_categories if c not in selected_set]


def _filter_tasks(tasks: list[Task], to_remove: set[str], removed: list[Task]) -> list[Task]:
    kept: list[Task] = []
    for task in tasks:
        if any(task.has_tag(name) for name in to_remove):
            removed.append(task)
            continue
        task.children = _filter_tasks(task.children, to_remove, removed)
        kept.append(task)
    return kept


def prune_by_category(
    project: Project,
    all_categories: Iterable[str],
    selected_categories: Iterable[str],
) -> list[Task]:
    """
    Remove tasks tagged with any category in `all_categories - selected_categories`.

    Each sibling list is rebuilt from a snapshot and swapped in, so nothing is deleted
    while being iterated. Returns the removed tasks (roots of removed subtrees).
    """
    all_list = list(all_categories)
    selected = list(selected_categories)

    unknown = [c for c in selected if c not in all_list]
    if unknown:
        logger.warning("Ignoring unknown categories: %s", ", ".join(unknown))

    to_remove = set(categories_to_remove(all_list, selected))
    if not to_remove:
        logger.debug("Nothing to prune project=%s", project.id)
        return []

    removed: list[Task] = []
    project.tasks = _filter_tasks(project.tasks, to_remove, removed)

    logger.info(
        "Pruned project=%s categories=%s removed=%d",
        project.id,
        ",".join(sorted(to_remove)),
        len(removed),
    )
    return removed
