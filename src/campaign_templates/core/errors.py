# src/campaign_templates/core/errors.py

from __future__ import annotations


class CampaignError(RuntimeError):
    """Base error for campaign creation failures (these abort the whole run)."""


class TemplateNotFoundError(CampaignError):
    pass


class TemplateLibraryError(CampaignError):
    """The template library could not be read or written."""
