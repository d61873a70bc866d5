import uuid
from datetime import UTC, date, datetime
from typing import ClassVar

import sqlalchemy as sa
from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel

CATALOG_PREFIX = "/catalog"


def canonical_url(kind: str, entity_id: str) -> str:
    """Return the canonical path of an entity, e.g. ``/catalog/book/<id>``."""
    return f"{CATALOG_PREFIX}/{kind}/{entity_id}"


def collection_url(kind: str) -> str:
    """Return the list page of an entity kind, e.g. ``/catalog/books``."""
    return f"{CATALOG_PREFIX}/{kind}s"


def format_medium_date(value: date | datetime | None) -> str:
    """Format a date like ``Apr 10, 2023``; empty for missing dates."""
    if value is None:
        return ""
    return f"{value:%b} {value.day}, {value.year}"


def format_iso_date(value: date | datetime | None) -> str:
    """Format a date as ``YYYY-MM-DD`` for form prefill; empty for missing dates."""
    if value is None:
        return ""
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def utcnow() -> datetime:
    return datetime.now(UTC)


class Entity(BaseModel):
    """Base entity class.

    The identifier stays ``None`` until the store assigns one on insert, so an
    entity rebuilt from form input is never mistaken for a persisted one.
    """

    model_config = ConfigDict(from_attributes=True)

    kind: ClassVar[str] = ""

    id: str | None = PydanticField(
        default=None,
        description="Unique identifier assigned by the store",
    )

    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def url(self) -> str | None:
        """Canonical URL, available once the entity has an identifier."""
        if self.id is None:
            return None
        return canonical_url(self.kind, self.id)


class EntityTable(SQLModel, table=False):
    """Base table with a UUID primary key and timestamps."""

    id: str = Field(
        primary_key=True,
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique identifier for the entity",
    )

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )
