"""Domain models for categories."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CategoryRecord:
    """A photo category."""

    id: int
    name: str
    description: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
