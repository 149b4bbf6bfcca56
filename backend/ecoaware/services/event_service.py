"""Event Service: event catalogue and user registrations.

Invariants:
    - Events listed by event_date desc
    - A user registers at most once per event (pre-checked, backed by a unique constraint)
    - Past events refuse registrations
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ecoaware.core.errors import (
    BusinessRuleError, ConflictError, ResourceNotFoundError,
)
from ecoaware.models.event import Event
from ecoaware.models.event_registration import EventRegistration
from ecoaware.schemas.event import EventCreate

logger = logging.getLogger(__name__)


class EventService:
    """Events and registrations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_events(
        self, category: str | None = None, upcoming: bool | None = None,
    ) -> list[Event]:
        query = select(Event).order_by(Event.event_date.desc(), Event.id.desc())
        if category:
            query = query.where(Event.category == category)
        if upcoming is not None:
            query = query.where(Event.is_past.is_(not upcoming))
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_event(self, event_id: int) -> Event:
        result = await self.db.execute(select(Event).where(Event.id == event_id))
        event = result.scalar_one_or_none()
        if not event:
            raise ResourceNotFoundError("Event", event_id)
        return event

    async def create_event(self, data: EventCreate) -> Event:
        event = Event(**data.model_dump())
        self.db.add(event)
        await self.db.commit()
        await self.db.refresh(event)
        logger.info(f"Event created: {event.title}", extra={"resource_id": event.id})
        return event

    async def list_user_registrations(self, user_id: str) -> list[EventRegistration]:
        result = await self.db.execute(
            select(EventRegistration)
            .where(EventRegistration.user_id == user_id)
            .order_by(
                EventRegistration.registered_at.desc(),
                EventRegistration.id.desc(),
            ),
        )
        return list(result.scalars().all())

    async def register(self, user_id: str, event_id: int) -> EventRegistration:
        event = await self.get_event(event_id)
        if event.is_past:
            raise BusinessRuleError(
                "Registration is closed for past events", "EVENT_IS_PAST",
            )
        existing = await self.db.execute(
            select(EventRegistration.id)
            .where(EventRegistration.user_id == user_id)
            .where(EventRegistration.event_id == event_id),
        )
        if existing.scalar_one_or_none() is not None:
            raise ConflictError(
                "Already registered for this event", "ALREADY_REGISTERED",
            )

        registration = EventRegistration(user_id=user_id, event_id=event_id)
        self.db.add(registration)
        await self.db.commit()
        await self.db.refresh(registration)
        logger.info(
            f"Registered for event {event_id}", extra={"user_id": user_id},
        )
        return registration
