from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from markupsafe import Markup
from pydantic import BaseModel, ConfigDict, Field, field_validator


class PostMetadata(BaseModel):
    """Front matter of a single post, as decoded from its YAML block."""

    model_config = ConfigDict(extra="ignore")

    title: str
    date: str = Field(default="", description="RFC 3339 timestamp, kept as the raw source text.")
    tags: str = Field(default="", description="Free-form, comma separated by convention.")
    draft: bool = False

    @field_validator("title", "date", "tags", mode="before")
    @classmethod
    def scalar_to_text(cls, v: Any) -> str:
        """Accept any YAML scalar; sequences and mappings are a decode error."""
        if v is None:
            return ""
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (str, int, float)):
            return str(v)
        raise ValueError(f"expected a scalar value, got {type(v).__name__}")

    @field_validator("draft", mode="before")
    @classmethod
    def empty_draft_is_false(cls, v: Any) -> Any:
        # `draft:` and `draft: null` mean "not a draft"
        return False if v is None else v


@dataclass(frozen=True)
class Post:
    """One content item, built fresh for every scan or lookup."""

    identifier: str
    title: str
    date: str
    tags: str
    draft: bool
    body: Markup

    @classmethod
    def from_metadata(cls, identifier: str, meta: PostMetadata, body: Markup) -> "Post":
        return cls(
            identifier=identifier,
            title=meta.title,
            date=meta.date,
            tags=meta.tags,
            draft=meta.draft,
            body=body,
        )

    @property
    def tag_list(self) -> list[str]:
        return [tag.strip() for tag in self.tags.split(",") if tag.strip()]
