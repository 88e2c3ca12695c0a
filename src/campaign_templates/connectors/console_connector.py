# src/campaign_templates/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import date, datetime
from typing import Any

from ..core.campaign import FieldKind, FormField
from ..core.errors import CampaignError
from ..tasks.task_models import Project

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]

_YES = {"y", "yes", "1", "true", "on"}
_NO = {"n", "no", "0", "false", "off"}
_NONE = {"-", "none"}


def _fmt_default(value: Any) -> str:
    if isinstance(value, datetime):
        return value.isoformat(sep=" ", timespec="minutes")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, bool):
        return "y" if value else "n"
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return "" if value is None else str(value)


def _pick_option(answer: str, field: FormField) -> Any:
    if answer.isdigit():
        idx = int(answer) - 1
        if 0 <= idx < len(field.options):
            return field.options[idx]
    key = answer.lower()
    for opt, label in zip(field.options, field.option_labels):
        if label.lower() == key:
            return opt
    raise ValueError(f"Unknown option: {answer}")


def parse_answer(answer: str, field: FormField) -> Any:
    """
    Convert one console answer into a field value.

    An empty answer takes the default. Raises ValueError for invalid input.
    """
    answer = answer.strip()
    if not answer:
        if field.default is None and field.kind != FieldKind.STRING:
            raise ValueError("A value is required.")
        return field.default

    if field.kind == FieldKind.STRING:
        return answer
    if field.kind == FieldKind.CHECKBOX:
        low = answer.lower()
        if low in _YES:
            return True
        if low in _NO:
            return False
        raise ValueError("Answer y or n.")
    if field.kind == FieldKind.DATE:
        return datetime.fromisoformat(answer)
    if field.kind == FieldKind.OPTION:
        return _pick_option(answer, field)

    # multiple options
    if answer.lower() in _NONE:
        return []
    picked: list[Any] = []
    for part in answer.split(","):
        part = part.strip()
        if not part:
            continue
        opt = _pick_option(part, field)
        if opt not in picked:
            picked.append(opt)
    return picked


class ConsoleFormPresenter:
    """Asks each form field on the terminal; Ctrl+D / Ctrl+C cancels the whole run."""

    def __init__(self, input_fn: InputFn = input, print_fn: PrintFn = print) -> None:
        self._input = input_fn
        self._print = print_fn

    def _show_options(self, field: FormField) -> None:
        for i, label in enumerate(field.option_labels, start=1):
            self._print(f"  {i}) {label}")

    async def present_form(
        self,
        fields: Sequence[FormField],
        *,
        title: str,
        confirm_label: str,
    ) -> dict[str, Any]:
        self._print(f"== {title} ==")
        values: dict[str, Any] = {}

        for field in fields:
            if field.kind in (FieldKind.OPTION, FieldKind.MULTIPLE_OPTIONS):
                self._print(f"{field.label}:")
                self._show_options(field)

            prompt = f"{field.label} [{_fmt_default(field.default)}]: "
            while True:
                try:
                    answer = self._input(prompt)
                except (EOFError, KeyboardInterrupt) as e:
                    raise CampaignError("Form cancelled.") from e
                try:
                    values[field.key] = parse_answer(answer, field)
                    break
                except ValueError as e:
                    self._print(f"  ! {e}")

        logger.debug("Form %r submitted (%s): %s", title, confirm_label, sorted(values))
        return values


class ConsoleNavigator:
    def __init__(self, print_fn: PrintFn = print) -> None:
        self._print = print_fn

    async def open_project(self, project: Project) -> None:
        where = project.folder or "(top level)"
        self._print(f"Project ready: {project.name} [{project.id}] in {where}")
        for task in project.flattened_tasks():
            dates = []
            if task.defer_date is not None:
                dates.append(f"defer {_fmt_default(task.defer_date)}")
            if task.due_date is not None:
                dates.append(f"due {_fmt_default(task.due_date)}")
            suffix = f" ({', '.join(dates)})" if dates else ""
            self._print(f"  - {task.name}{suffix}")
