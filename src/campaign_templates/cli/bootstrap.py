# src/campaign_templates/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires concrete implementations (JSON library, console form/navigation) into AppState.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..connectors.console_connector import ConsoleFormPresenter, ConsoleNavigator
from ..core.state import AppState
from ..tasks.template_store import JsonTemplateLibrary

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    Path(settings.library_path).parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, library_path: str | Path | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    library = JsonTemplateLibrary(
        library_path or settings.library_path,
        template_folder=settings.template_folder,
        destination_folder=settings.destination_folder,
    )

    return AppState(
        settings=settings,
        library=library,
        forms=ConsoleFormPresenter(),
        navigator=ConsoleNavigator(),
    )
