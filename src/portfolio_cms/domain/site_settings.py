"""Site-wide settings shown on the public portfolio."""

from dataclasses import dataclass, field
from datetime import datetime

DEFAULT_SITE_NAME = "MTP Collective"
DEFAULT_SITE_DESCRIPTION = "Photography portfolio website"


def _default_social_media() -> dict[str, str]:
    return {"instagram": "", "twitter": "", "facebook": ""}


def _default_meta_tags() -> dict[str, str]:
    return {
        "title": DEFAULT_SITE_NAME,
        "description": DEFAULT_SITE_DESCRIPTION,
        "keywords": "photography, portfolio, art",
    }


@dataclass(frozen=True)
class SiteSettings:
    """The single settings row; unset values fall back to these defaults."""

    site_name: str = DEFAULT_SITE_NAME
    site_description: str = DEFAULT_SITE_DESCRIPTION
    contact_email: str = ""
    logo_url: str = ""
    primary_color: str = "#000000"
    secondary_color: str = "#ffffff"
    social_media: dict[str, str] = field(default_factory=_default_social_media)
    meta_tags: dict[str, str] = field(default_factory=_default_meta_tags)
    updated_at: datetime | None = None
