"""Domain models for journal articles."""

import re
from dataclasses import dataclass
from datetime import datetime

DEFAULT_PAGE_SIZE = 10
SUMMARY_LENGTH = 150

_NON_WORD = re.compile(r"[^\w\s-]")
_SPACES = re.compile(r"\s+")
_DASHES = re.compile(r"-+")
_HTML_TAG = re.compile(r"</?[^>]+(>|$)")


@dataclass(frozen=True)
class ArticleRecord:
    """A stored article with its author, category and tag names."""

    id: int
    title: str
    slug: str
    content: str
    summary: str
    featured_image: str | None
    author_id: int | None
    author_name: str | None
    category_id: int | None
    category_name: str | None
    published: bool
    published_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class NewArticle:
    """Input for creating an article."""

    title: str
    slug: str
    content: str
    summary: str
    author_id: int | None
    category_id: int | None = None
    featured_image: str | None = None
    published: bool = False
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class ArticleFilter:
    """Optional constraints for listing articles."""

    category_id: int | None = None
    author_id: int | None = None
    published: bool | None = None
    tag: str | None = None
    search: str | None = None


@dataclass(frozen=True)
class ArticlePage:
    """One page of articles plus the size of the whole result."""

    items: list[ArticleRecord]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return -(-self.total // self.limit) if self.limit else 0


def slugify(title: str) -> str:
    """Turn a title into a URL slug."""
    slug = _NON_WORD.sub("", title.lower().strip())
    slug = _SPACES.sub("-", slug)
    return _DASHES.sub("-", slug).strip("-")


def summarize(content: str) -> str:
    """Default summary: the first characters of the content without markup."""
    text = _HTML_TAG.sub("", content[:SUMMARY_LENGTH])
    return f"{text}..."
