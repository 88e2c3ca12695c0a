# src/campaign_templates/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The campaign flow depends on Protocols instead of concrete implementations.
The host app (template storage, form UI, navigation) stays swappable and tests use fakes.
"""

from collections.abc import Sequence
from typing import Any, Awaitable, Protocol

from ..tasks.task_models import Project

FormValues = dict[str, Any]


class TemplateLibrary(Protocol):
    """Where template projects live and how they get duplicated."""

    def get_template_folder(self) -> list[Project]: ...

    def get_destination(self, template: Project) -> str | None: ...

    def create_from_template(self, template: Project, destination: str | None) -> Awaitable[Project]: ...

    def save_project(self, project: Project) -> None: ...


class FormPresenter(Protocol):
    """
    Shows a form and waits for the user to submit it.

    Returns field key -> value. Cancelling should raise (the whole run aborts).
    """

    def present_form(
            self,
            fields: Sequence[Any],
            *,
            title: str,
            confirm_label: str,
    ) -> Awaitable[FormValues]: ...


class Navigator(Protocol):
    def open_project(self, project: Project) -> Awaitable[None]: ...
