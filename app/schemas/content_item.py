from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

ContentType = Literal["blog", "case-study", "insight"]


def as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything stored is UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class ContentItemOut(BaseModel):
    id: str
    type: ContentType
    title: str
    content: str
    excerpt: str = ""
    category: str = ""
    tags: list[str] = Field(default_factory=list)
    author: str = ""
    image_url: str = Field("", alias="imageUrl")
    created_at: datetime = Field(alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")
    published: bool = True

    class Config:
        populate_by_name = True

    @field_validator("created_at", "updated_at")
    @classmethod
    def _utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v) if v is not None else None

    @field_validator("image_url", mode="before")
    @classmethod
    def _no_null_image(cls, v):
        return v or ""

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


class ContentItemCreate(BaseModel):
    """Body of the admin write endpoint. Presence of the required fields is
    checked by the router so the error matches the rest of the API."""

    type: str = ""
    title: str = ""
    content: str = ""
    excerpt: str = ""
    category: str = ""
    tags: list[str] = Field(default_factory=list)
    author: str = ""
    image_url: str = Field("", alias="imageUrl")
    published: bool = True

    class Config:
        populate_by_name = True

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags(cls, v):
        return [] if v is None else v

    @field_validator("image_url", mode="before")
    @classmethod
    def _null_image(cls, v):
        return "" if v is None else v


class ContentItemUpdate(BaseModel):
    # only fields explicitly set are written (exclude_unset)
    type: Optional[ContentType] = None
    title: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[list[str]] = None
    author: Optional[str] = None
    image_url: Optional[str] = Field(None, alias="imageUrl")
    published: Optional[bool] = None

    class Config:
        populate_by_name = True
