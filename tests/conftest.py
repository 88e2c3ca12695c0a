# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from campaign_templates.core.state import AppState
from campaign_templates.tasks.task_models import Project, ProjectStatus, Tag, Task

from .fakes import FakeFormPresenter, FakeNavigator, FakeTemplateLibrary


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the campaign flow.

    A SimpleNamespace keeps tests isolated from the environment and .env files.
    """
    return SimpleNamespace(
        app_name="campaign-templates",
        log_level="DEBUG",
        data_dir=tmp_path,
        library_path=tmp_path / "library.json",
        log_dir=tmp_path,
        template_folder="Templates",
        destination_folder="Campaigns",
        categories=["DSP", "Radio", "Press", "DJ"],
        campaign_name_token="«Campaign Name»",
        artist_name_token="«Artist Name»",
        release_date_token="«Release Date»",
        release_date_format="%m/%d/%Y",
        always_go_to=False,
        include_on_hold=False,
    )


def make_template() -> Project:
    """
    Release template:

    - Announce «Campaign Name»                    (untagged, $DEFER/$DUE)
      - Draft press release for «Artist Name»     (Press)
      - Book radio plugger                        (Radio)
    - Pitch «Campaign Name» to playlists          (DSP, $DUE)
    - Club promo                                  (DJ)
      - Send promos                               (untagged)
    - Release day «Release Date»                  (no note)
    """
    announce = Task(
        id="t1",
        name="Announce «Campaign Name»",
        note="Teaser for «Artist Name»\n$DEFER=-63d\n$DUE=-8w",
        children=[
            Task(id="t1a", name="Draft press release for «Artist Name»", tags={Tag("Press")}),
            Task(id="t1b", name="Book radio plugger", tags={Tag("Radio")}, note="$DUE=-2m"),
        ],
    )
    return Project(
        id="tpl-1",
        name="Single Release",
        folder="Templates",
        is_template=True,
        tasks=[
            announce,
            Task(id="t2", name="Pitch «Campaign Name» to playlists", tags={Tag("DSP")}, note="$DUE=-4w"),
            Task(
                id="t3",
                name="Club promo",
                tags={Tag("DJ")},
                children=[Task(id="t3a", name="Send promos")],
            ),
            Task(id="t4", name="Release day «Release Date»"),
        ],
    )


@pytest.fixture()
def template() -> Project:
    return make_template()


@pytest.fixture()
def library(template: Project) -> FakeTemplateLibrary:
    on_hold = Project(
        id="tpl-2",
        name="Album Release",
        folder="Templates",
        is_template=True,
        status=ProjectStatus.ON_HOLD,
    )
    return FakeTemplateLibrary([template, on_hold])


@pytest.fixture()
def state(settings: SimpleNamespace, library: FakeTemplateLibrary) -> AppState:
    return AppState(
        settings=settings,
        library=library,
        forms=FakeFormPresenter({}),
        navigator=FakeNavigator(),
    )
