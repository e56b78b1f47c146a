"""
request/response shapes for the people endpoints

the wire format is camelCase (favoriteFood, createdAt, ...) while python
attributes stay snake_case. input accepts either spelling.
"""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class PersonFields(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    favorite_food: Optional[str] = Field(default=None, alias="favoriteFood")
    favorite_movie: Optional[str] = Field(default=None, alias="favoriteMovie")
    status: Optional[str] = None


class PersonCreate(PersonFields):
    """fields accepted on create; the store decides what is required"""
    pass


class PersonUpdate(PersonFields):
    """partial update: only fields present in the body are replaced"""
    active: Optional[bool] = None


class PersonRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    name: str
    favorite_food: Optional[str] = Field(default=None, alias="favoriteFood")
    favorite_movie: Optional[str] = Field(default=None, alias="favoriteMovie")
    status: Optional[str] = None
    active: bool
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class BatchCreateResult(BaseModel):
    count: int


class SearchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    property: Optional[str] = None
    query: Optional[str] = None
    sort_by: Optional[str] = Field(default=None, alias="sortBy")
    order: Optional[str] = None
