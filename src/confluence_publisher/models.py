"""Pydantic models for Confluence REST content."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ContentType(str, Enum):
    """Kinds of content the publisher creates."""

    PAGE = "page"
    BLOG_POST = "blogpost"
    ATTACHMENT = "attachment"
    COMMENT = "comment"


class Representation(str, Enum):
    """Body representations understood by Confluence."""

    STORAGE = "storage"
    VIEW = "view"
    WIKI = "wiki"


class Space(BaseModel):
    """Space reference by key."""

    model_config = ConfigDict(extra="ignore")

    key: str


class Parent(BaseModel):
    """Ancestor reference by content id."""

    model_config = ConfigDict(extra="ignore")

    id: str


class Storage(BaseModel):
    """Body value in a given representation."""

    model_config = ConfigDict(extra="ignore")

    value: str
    representation: Representation = Representation.STORAGE


class Body(BaseModel):
    model_config = ConfigDict(extra="ignore")

    storage: Storage


class Version(BaseModel):
    model_config = ConfigDict(extra="ignore")

    number: int
    message: str = ""


class Content(BaseModel):
    """A page, blog post or attachment.

    ``id`` is assigned by Confluence and left unset when posting new content.
    """

    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    type: ContentType = ContentType.PAGE
    title: str
    space: Space | None = None
    ancestors: list[Parent] = Field(default_factory=list)
    body: Body | None = None
    version: Version | None = None

    def to_payload(self) -> dict[str, Any]:
        """JSON body for POST /rest/api/content."""
        payload = self.model_dump(mode="json", exclude_none=True)
        if not self.ancestors:
            payload.pop("ancestors", None)
        return payload

    def as_parent(self) -> Parent:
        """Reference to this content for use in ``ancestors``."""
        if self.id is None:
            raise ValueError(f"Content '{self.title}' has no id yet")
        return Parent(id=self.id)


class ContentResultList(BaseModel):
    """Paged result of a content query."""

    model_config = ConfigDict(extra="ignore")

    results: list[Content] = Field(default_factory=list)
    size: int = 0

    @property
    def first(self) -> Content | None:
        return self.results[0] if self.results else None


class PageDescriptor(BaseModel):
    """Identifies an existing page by space key and title."""

    space: str
    title: str

    def __str__(self) -> str:
        return f"{self.space}/{self.title}"
