"""SQL-backed site settings repository."""

from dataclasses import dataclass
from typing import Any

from psycopg2.extras import Json

from portfolio_cms.adapters.sql_client import SqlClient
from portfolio_cms.domain.site_settings import SiteSettings
from portfolio_cms.services.site_settings import SettingsRepository

_COLUMNS = (
    "site_name, site_description, contact_email, logo_url, "
    "primary_color, secondary_color, social_media, meta_tags"
)


@dataclass
class SqlSettingsRepository(SettingsRepository):
    """Stores settings as the single row with id 1."""

    client: SqlClient

    def get_settings(self) -> SiteSettings | None:
        rows = self.client.query(
            f"SELECT {_COLUMNS}, updated_at FROM site_settings WHERE id = 1"
        )
        return _to_settings(rows[0]) if rows else None

    def save_settings(self, settings: SiteSettings) -> None:
        """Upsert the settings row; JSONB columns are sent through ``Json``."""
        self.client.query(
            f"INSERT INTO site_settings (id, {_COLUMNS}) "
            "VALUES (1, %s, %s, %s, %s, %s, %s, %s, %s) "
            "ON CONFLICT (id) DO UPDATE SET "
            "site_name = EXCLUDED.site_name, "
            "site_description = EXCLUDED.site_description, "
            "contact_email = EXCLUDED.contact_email, "
            "logo_url = EXCLUDED.logo_url, "
            "primary_color = EXCLUDED.primary_color, "
            "secondary_color = EXCLUDED.secondary_color, "
            "social_media = EXCLUDED.social_media, "
            "meta_tags = EXCLUDED.meta_tags, "
            "updated_at = NOW()",
            (
                settings.site_name,
                settings.site_description,
                settings.contact_email,
                settings.logo_url,
                settings.primary_color,
                settings.secondary_color,
                Json(settings.social_media),
                Json(settings.meta_tags),
            ),
        )


def _to_settings(row: dict[str, Any]) -> SiteSettings:
    defaults = SiteSettings()
    return SiteSettings(
        site_name=row.get("site_name") or defaults.site_name,
        site_description=row.get("site_description") or "",
        contact_email=row.get("contact_email") or "",
        logo_url=row.get("logo_url") or "",
        primary_color=row.get("primary_color") or defaults.primary_color,
        secondary_color=row.get("secondary_color") or defaults.secondary_color,
        social_media={**defaults.social_media, **(row.get("social_media") or {})},
        meta_tags={**defaults.meta_tags, **(row.get("meta_tags") or {})},
        updated_at=row.get("updated_at"),
    )
