# src/campaign_templates/core/campaign.py

from __future__ import annotations

"""
Campaign creation flow.

1. pick a template (preselected or chosen in the form)
2. collect campaign info (name, artist, release date, categories, go-to flag)
3. duplicate the template into its destination
4. substitute placeholders -> prune categories -> resolve $DEFER=/$DUE= offsets
5. save the customized project back to the library
6. optionally navigate to the new project

Collaborator failures propagate as-is; there is no partial-completion recovery.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any

from ..tasks.categories import prune_by_category
from ..tasks.offsets import resolve_offsets
from ..tasks.placeholders import build_placeholder_mapping, substitute_placeholders
from ..tasks.task_models import Project, ProjectStatus
from .errors import CampaignError
from .state import AppState

logger = logging.getLogger(__name__)

CONFIRM_LABEL = "Create"
TITLE_CHOOSE = "Choose Template"
TITLE_INFO = "Enter Campaign Info"


class FieldKind(str, Enum):
    OPTION = "option"
    CHECKBOX = "checkbox"
    STRING = "string"
    DATE = "date"
    MULTIPLE_OPTIONS = "multiple_options"


@dataclass(slots=True, frozen=True)
class FormField:
    key: str
    label: str
    kind: FieldKind
    default: Any = None
    options: tuple[Any, ...] = ()
    option_labels: tuple[str, ...] = ()


@dataclass(slots=True)
class CampaignValues:
    template: Project
    campaign_name: str
    artist_name: str
    release_date: date
    selected_categories: list[str] = field(default_factory=list)
    go_to: bool = False

    @classmethod
    def from_form(cls, raw: dict[str, Any], template: Project | None, settings: Any) -> CampaignValues:
        chosen = template if template is not None else raw.get("template")
        if not isinstance(chosen, Project):
            raise CampaignError("No template selected.")

        release_date = raw.get("release_date")
        if not isinstance(release_date, date):
            raise CampaignError(f"Release date is missing or invalid: {release_date!r}")

        selected = raw.get("selected_categories")
        if selected is None:
            selected = list(settings.categories)

        return cls(
            template=chosen,
            campaign_name=str(raw.get("campaign_name", settings.campaign_name_token)),
            artist_name=str(raw.get("artist_name", settings.artist_name_token)),
            release_date=release_date,
            selected_categories=[str(c) for c in selected],
            go_to=bool(raw.get("go_to", False)),
        )


def eligible_templates(projects: Iterable[Project], include_on_hold: bool) -> list[Project]:
    """Active templates, plus on-hold ones when the preference allows it."""
    out: list[Project] = []
    for p in projects:
        if p.status == ProjectStatus.ACTIVE:
            out.append(p)
        elif include_on_hold and p.status == ProjectStatus.ON_HOLD:
            out.append(p)
    return out


def preselected_template(
    selection: Sequence[Project] | None,
    template_folder: Sequence[Project],
) -> Project | None:
    """The selected project, if exactly one is selected and it lives in the template folder."""
    if not selection or len(selection) != 1:
        return None
    candidate = selection[0]
    folder_ids = {p.id for p in template_folder}
    return candidate if candidate.id in folder_ids else None


def build_campaign_form(
    templates: Sequence[Project],
    preselected: Project | None,
    settings: Any,
) -> list[FormField]:
    fields: list[FormField] = []

    if preselected is None:
        fields.append(
            FormField(
                key="template",
                label="Template",
                kind=FieldKind.OPTION,
                options=tuple(templates),
                option_labels=tuple(p.name for p in templates),
            )
        )

    categories = tuple(settings.categories)
    fields.extend(
        [
            FormField("go_to", "Go to created project", FieldKind.CHECKBOX, bool(settings.always_go_to)),
            FormField("campaign_name", "Campaign Name", FieldKind.STRING, settings.campaign_name_token),
            FormField("artist_name", "Artist Name", FieldKind.STRING, settings.artist_name_token),
            FormField("release_date", "Release Date", FieldKind.DATE, datetime.now().replace(microsecond=0)),
            FormField(
                "selected_categories",
                "Select Promotional Verticals",
                FieldKind.MULTIPLE_OPTIONS,
                list(categories),
                options=categories,
                option_labels=categories,
            ),
        ]
    )
    return fields


def customize_campaign(project: Project, values: CampaignValues, settings: Any) -> None:
    """Apply the three transforms, in order, to a freshly duplicated project."""
    substitute_placeholders(project, build_placeholder_mapping(values, settings))
    prune_by_category(project, settings.categories, values.selected_categories)
    resolve_offsets(project, values.release_date)


async def create_campaign(state: AppState, selection: Sequence[Project] | None = None) -> Project:
    settings = state.settings
    library = state.library

    template_folder = library.get_template_folder()
    template = preselected_template(selection, template_folder)

    if template is None:
        candidates = eligible_templates(template_folder, bool(settings.include_on_hold))
        if not candidates:
            raise CampaignError("No templates available in the template folder.")
        title = TITLE_CHOOSE
    else:
        candidates = []
        title = TITLE_INFO

    fields = build_campaign_form(candidates, template, settings)
    raw = await state.forms.present_form(fields, title=title, confirm_label=CONFIRM_LABEL)
    values = CampaignValues.from_form(raw, template, settings)

    logger.info(
        "Creating campaign %r for %r from template %r (release=%s categories=%s)",
        values.campaign_name,
        values.artist_name,
        values.template.name,
        values.release_date,
        ",".join(values.selected_categories),
    )

    destination = library.get_destination(values.template)
    project = await library.create_from_template(values.template, destination)

    customize_campaign(project, values, settings)
    library.save_project(project)

    if values.go_to:
        await state.navigator.open_project(project)

    logger.info("Campaign project ready id=%s", project.id)
    return project
