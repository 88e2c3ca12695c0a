# src/campaign_templates/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object per run, read once and passed explicitly to the campaign flow.
- Preferences (always go to project, include on-hold templates) are plain settings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "CAMPAIGN"

DEFAULT_CATEGORIES = ["DSP", "Radio", "Press", "DJ"]


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_optional(name: str) -> str | None:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return None
    return v.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    parts = [p.strip() for p in raw.replace(",", " ").split() if p.strip()]
    return parts


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths ----
    data_dir: Path
    library_path: Path
    log_dir: Path

    # ---- Template library layout ----
    template_folder: str
    destination_folder: str | None

    # ---- Campaign form ----
    categories: List[str]
    campaign_name_token: str
    artist_name_token: str
    release_date_token: str
    release_date_format: str

    # ---- Preferences ----
    always_go_to: bool
    include_on_hold: bool

    @staticmethod
    def from_env() -> "Settings":
        load_dotenv(find_dotenv(usecwd=True), override=False)

        app_name = _env(_k("APP_NAME"), "campaign-templates")
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/campaign"))
        library_path = _env_path(_k("LIBRARY_PATH"), data_dir / "library.json")
        log_dir = _env_path(_k("LOG_DIR"), data_dir)

        template_folder = _env(_k("TEMPLATE_FOLDER"), "Templates")
        destination_folder = _env_optional(_k("DESTINATION_FOLDER"))

        categories = _env_list(_k("CATEGORIES"), DEFAULT_CATEGORIES)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            library_path=library_path,
            log_dir=log_dir,
            template_folder=template_folder,
            destination_folder=destination_folder,
            categories=categories,
            campaign_name_token=_env(_k("CAMPAIGN_NAME_TOKEN"), "«Campaign Name»"),
            artist_name_token=_env(_k("ARTIST_NAME_TOKEN"), "«Artist Name»"),
            release_date_token=_env(_k("RELEASE_DATE_TOKEN"), "«Release Date»"),
            release_date_format=_env(_k("RELEASE_DATE_FORMAT"), "%m/%d/%Y"),
            always_go_to=_env_bool(_k("ALWAYS_GO_TO"), False),
            include_on_hold=_env_bool(_k("INCLUDE_ON_HOLD"), False),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
