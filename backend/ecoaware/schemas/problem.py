"""Problem Schemas: environmental problem reports."""

from datetime import datetime

from pydantic import Field, field_validator

from ecoaware.core.domain_types import ProblemStatus
from ecoaware.schemas.base import ApiModel, strip_required


class ProblemCreate(ApiModel):
    """Report creation. user_id always comes from the session."""
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    location: str = Field(min_length=1, max_length=255)
    category: str = Field(min_length=1, max_length=100)
    severity: str = Field(min_length=1, max_length=50)
    image_url: str | None = Field(None, max_length=1024)
    latitude: str | None = Field(None, max_length=50)
    longitude: str | None = Field(None, max_length=50)

    @field_validator("title", "description", "location", "category", "severity")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return strip_required(v)


class ProblemStatusUpdate(ApiModel):
    status: ProblemStatus


class ProblemResponse(ApiModel):
    id: int
    user_id: str
    title: str
    description: str
    location: str
    category: str
    severity: str
    status: str
    image_url: str | None = None
    latitude: str | None = None
    longitude: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
