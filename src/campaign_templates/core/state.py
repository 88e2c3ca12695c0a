# src/campaign_templates/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .ports import FormPresenter, Navigator, TemplateLibrary


@dataclass
class AppState:
    # Settings are read once per run and handed around explicitly.
    settings: Any

    library: TemplateLibrary
    forms: FormPresenter
    navigator: Navigator
