# src/campaign_templates/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the campaign flow once:
template -> campaign form -> duplicate -> customize -> (optional) go to project.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import Optional

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..core.campaign import create_campaign
from ..core.errors import CampaignError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="campaign-templates",
        description="Create a campaign project from a template (placeholders, verticals, relative dates).",
    )
    p.add_argument(
        "--library",
        help="Path to the JSON template library (default: CAMPAIGN_LIBRARY_PATH or .local/campaign/library.json)",
    )
    p.add_argument("--template", help="Template name or id to use (skips the template chooser).")
    p.add_argument("--log-level", help="Console log level (default: CAMPAIGN_LOG_LEVEL or INFO).")
    return p


def main(argv: Optional[list[str]] = None) -> int:
    ns = build_parser().parse_args(argv)
    settings = get_settings()

    level_name = str(ns.log_level or settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings, library_path=ns.library)
        selection = [state.library.find_template(ns.template)] if ns.template else None

        asyncio.run(create_campaign(state, selection))
    except CampaignError as e:
        logger.error("%s", e)
        return 1
    except Exception:
        logger.exception("Campaign creation failed.")
        return 1

    logger.info("Done.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
