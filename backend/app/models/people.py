from datetime import datetime, timezone
from uuid import UUID, uuid4
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Person(SQLModel, table=True):
    __tablename__ = "people"
    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(index=True)
    favorite_food: Optional[str] = Field(default=None, nullable=True)
    favorite_movie: Optional[str] = Field(default=None, nullable=True)
    status: Optional[str] = Field(default=None, nullable=True, index=True)  # "Active", "Inactive"
    active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
