from datetime import UTC, datetime

from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    return datetime.now(UTC)


class Entity(BaseModel):
    """Base entity class with a store-assigned integer identifier."""

    id: int | None = PydanticField(
        default=None,
        description="Unique identifier assigned by the store on insert",
    )

    created_at: datetime = PydanticField(default_factory=utc_now)


class EntityTable(SQLModel, table=False):
    """Base table class with an auto-incrementing integer primary key."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier for the entity",
    )

    created_at: datetime = Field(default_factory=utc_now, nullable=False)
