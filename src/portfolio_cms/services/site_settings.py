"""Site settings business logic."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol

from portfolio_cms.domain.errors import ValidationError
from portfolio_cms.domain.site_settings import SiteSettings

logger = logging.getLogger(__name__)

_MAPPING_FIELDS = ("social_media", "meta_tags")
_TEXT_FIELDS = (
    "site_name",
    "site_description",
    "contact_email",
    "logo_url",
    "primary_color",
    "secondary_color",
)


class SettingsRepository(Protocol):
    """Persistence interface for the settings row."""

    def get_settings(self) -> SiteSettings | None:
        """Return the stored settings, or None before the first save."""

    def save_settings(self, settings: SiteSettings) -> None:
        """Insert or replace the settings row."""


@dataclass
class SettingsService:
    """Application service for site settings."""

    repository: SettingsRepository

    def get_settings(self) -> SiteSettings:
        return self.repository.get_settings() or SiteSettings()

    def update_settings(self, changes: dict[str, object]) -> SiteSettings:
        """Merge changes over the current settings and store the result.

        Text fields replace the current value. ``social_media`` and
        ``meta_tags`` are merged key by key.
        """
        current = self.get_settings()
        updates: dict[str, object] = {}
        for key in _TEXT_FIELDS:
            if key in changes and changes[key] is not None:
                updates[key] = changes[key]
        for key in _MAPPING_FIELDS:
            value = changes.get(key)
            if isinstance(value, dict):
                updates[key] = {**getattr(current, key), **value}
        if "site_name" in updates and not updates["site_name"]:
            raise ValidationError("Site name is required")
        merged = replace(current, **updates)
        self.repository.save_settings(merged)
        logger.info("Site settings updated", extra={"fields": sorted(updates)})
        return self.get_settings()
