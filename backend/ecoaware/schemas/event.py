"""Event Schemas: event catalogue and registrations."""

from datetime import datetime

from pydantic import Field, field_validator

from ecoaware.schemas.base import ApiModel, strip_required


class EventCreate(ApiModel):
    """Admin event creation."""
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    location: str = Field(min_length=1, max_length=255)
    image_url: str | None = Field(None, max_length=1024)
    event_date: datetime
    category: str = Field(min_length=1, max_length=100)
    is_past: bool = False

    @field_validator("title", "description", "location", "category")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return strip_required(v)


class EventResponse(ApiModel):
    id: int
    title: str
    description: str
    location: str
    image_url: str | None = None
    event_date: datetime
    category: str
    is_past: bool
    created_at: datetime | None = None


class RegistrationCreate(ApiModel):
    """Body of POST /user/registrations. user_id always comes from the session."""
    event_id: int = Field(ge=1)


class RegistrationResponse(ApiModel):
    id: int
    user_id: str
    event_id: int
    registered_at: datetime | None = None
