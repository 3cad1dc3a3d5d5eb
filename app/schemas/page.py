from typing import Any

from pydantic import BaseModel, Field


class PageSection(BaseModel):
    heading: str
    body: str = ""
    items: list[dict[str, Any]] = Field(default_factory=list)


class PageOut(BaseModel):
    slug: str
    title: str
    subtitle: str = ""
    sections: list[PageSection] = Field(default_factory=list)
    meta: dict[str, Any] = Field(default_factory=dict)
