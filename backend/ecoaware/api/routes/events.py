"""Event Routes: public catalogue, admin creation."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ecoaware.api.dependencies import require_admin
from ecoaware.infrastructure.database import get_db
from ecoaware.models.user import User
from ecoaware.schemas.event import EventCreate, EventResponse
from ecoaware.services.event_service import EventService

router = APIRouter(prefix="/api/events", tags=["events"])


@router.get("", response_model=list[EventResponse])
async def list_events(
    category: str | None = Query(None, max_length=100),
    upcoming: bool | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    return await EventService(db).list_events(category=category, upcoming=upcoming)


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(event_id: int, db: AsyncSession = Depends(get_db)):
    return await EventService(db).get_event(event_id)


@router.post(
    "", response_model=EventResponse, status_code=status.HTTP_201_CREATED,
)
async def create_event(
    body: EventCreate,
    _: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await EventService(db).create_event(body)
