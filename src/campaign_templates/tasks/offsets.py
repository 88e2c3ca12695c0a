# src/campaign_templates/tasks/offsets.py

from __future__ import annotations

"""
Relative date directives.

A task note may carry lines like:

    $DEFER=-63d
    $DUE=+1w

Each offset is resolved against a reference date (the release date). Units:
d (days), w (weeks), m (calendar months), y (calendar years).

Month/year shifts keep the day-of-month and let it overflow into the next month when
the target month is shorter: 2024-01-31 +1m -> 2024-03-02, 2024-02-29 +1y -> 2025-03-01.
"""

import logging
import re
from datetime import date, timedelta
from typing import TypeVar

from .task_models import Offset, OffsetUnit, Project

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=date)

OFFSET_REGEX = re.compile(r"([+-]?)(\d+)([dwmy])", re.ASCII)

DEFER = "DEFER"
DUE = "DUE"


def parse_offset(text: str | None) -> Offset | None:
    """Parse the first offset expression found in `text`; None if there is none."""
    if not text:
        return None
    m = OFFSET_REGEX.search(text)
    if not m:
        return None
    sign = -1 if m.group(1) == "-" else 1
    try:
        value = int(m.group(2))
    except ValueError:
        # Digit strings past the interpreter's int conversion limit.
        return None
    return Offset(value=sign * value, unit=OffsetUnit(m.group(3)))


def _add_months(reference: D, months: int) -> D:
    total = reference.year * 12 + (reference.month - 1) + months
    year, month0 = divmod(total, 12)
    first = reference.replace(year=year, month=month0 + 1, day=1)
    # Day-of-month overflow rolls into the following month.
    return first + timedelta(days=reference.day - 1)


def apply_offset(reference: D, offset: Offset) -> D:
    """
    Shift `reference` by `offset`. Time of day and tzinfo are kept as they are.

    Raises ValueError/OverflowError when the result falls outside the supported
    calendar range.
    """
    if offset.unit is OffsetUnit.DAY:
        return reference + timedelta(days=offset.value)
    if offset.unit is OffsetUnit.WEEK:
        return reference + timedelta(weeks=offset.value)
    if offset.unit is OffsetUnit.MONTH:
        return _add_months(reference, offset.value)
    return _add_months(reference, offset.value * 12)


def calculate_offset(reference: D, text: str | None) -> D:
    """Parse and apply; a malformed or out-of-range expression returns `reference` unchanged."""
    offset = parse_offset(text)
    if offset is None:
        return reference
    try:
        return apply_offset(reference, offset)
    except (ValueError, OverflowError):
        return reference


def find_directive(note: str | None, kind: str) -> str | None:
    """Rest of the line after the first `$KIND=` in `note`, or None."""
    if not note:
        return None
    m = re.search(re.escape(f"${kind}=") + r"([^\n]+)", note)
    return m.group(1) if m else None


def _resolve_one(reference: D, note: str, kind: str, task_id: str) -> D | None:
    raw = find_directive(note, kind)
    if raw is None:
        return None

    offset = parse_offset(raw)
    if offset is None:
        logger.debug("Unparsable $%s=%r on task=%s; leaving date unset", kind, raw, task_id)
        return None

    try:
        return apply_offset(reference, offset)
    except (ValueError, OverflowError):
        logger.debug("Out-of-range $%s=%r on task=%s; leaving date unset", kind, raw, task_id)
        return None


def resolve_offsets(project: Project, reference: date) -> int:
    """
    Set defer/due dates from $DEFER= / $DUE= directives in task notes.

    Only those two fields are ever written; missing notes, missing directives and
    malformed offsets are skipped. Returns how many dates were assigned.
    """
    assigned = 0
    for task in project.flattened_tasks():
        if not task.note:
            continue

        defer = _resolve_one(reference, task.note, DEFER, task.id)
        if defer is not None:
            task.defer_date = defer
            assigned += 1

        due = _resolve_one(reference, task.note, DUE, task.id)
        if due is not None:
            task.due_date = due
            assigned += 1

    logger.debug("Offsets resolved project=%s reference=%s dates=%d", project.id, reference, assigned)
    return assigned
