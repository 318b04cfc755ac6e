import datetime

from pydantic import BaseModel, Field, field_validator

from thesis_admin.models.thesis import ThesisStatus
from thesis_admin.schemas._validators import as_utc, reject_null


class ThesisUpdate(BaseModel):
    """Merge-patch body: only the fields the client sends are applied."""

    title: str | None = Field(default=None, min_length=1, description="New thesis title")
    author_name: str | None = Field(default=None, min_length=1, description="Username of the new author")
    category: str | None = Field(default=None, description="Subject category (e.g. 'AI')")
    keywords: list[str] | None = Field(default=None, description="Ordered list of keywords")
    abstract: str | None = Field(default=None, description="Abstract text")
    status: ThesisStatus | None = Field(default=None, description="Review status: Pending, Approved or Rejected")

    @field_validator("title", "author_name", "category", "keywords", "abstract", "status")
    @classmethod
    def fields_not_null(cls, v):
        return reject_null(v)


class ThesisResponse(BaseModel):
    thesis_id: str = Field(description="Thesis ID, serialized as a string to keep 64-bit precision")
    title: str = Field(description="Thesis title")
    author_name: str = Field(description="Username of the author")
    category: str = Field(description="Subject category")
    keywords: list[str] = Field(description="Ordered list of keywords")
    abstract: str = Field(description="Abstract text")
    status: ThesisStatus = Field(description="Review status")
    created_at: datetime.datetime = Field(description="Creation timestamp")
    updated_at: datetime.datetime = Field(description="Last modification timestamp")

    @field_validator("created_at", "updated_at")
    @classmethod
    def timestamps_in_utc(cls, v: datetime.datetime) -> datetime.datetime:
        return as_utc(v)


class ThesisDetail(BaseModel):
    thesis: ThesisResponse


class ThesisUpdateResult(BaseModel):
    message: str = Field(description="Human-readable outcome")
    thesis: ThesisResponse
