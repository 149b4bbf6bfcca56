"""Seed Script: sample events, competitions and questions.

Usage:
    python -m ecoaware.db.seed

Invariants:
    - Idempotent: each table is only seeded when it is empty
    - Questions are attached to the first seeded competition
"""

import asyncio
import logging
from datetime import datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ecoaware.config import get_settings
from ecoaware.db.session import create_session_factory
from ecoaware.infrastructure.observability import setup_logging
from ecoaware.models.competition import Competition
from ecoaware.models.competition_question import CompetitionQuestion
from ecoaware.models.event import Event

logger = logging.getLogger(__name__)


def _at(year, month, day, hour) -> datetime:
    return datetime(year, month, day, hour, tzinfo=timezone.utc)


EVENTS = [
    {
        "title": "Caspian Beach Cleanup",
        "description": "Join us for a community cleanup along the Caspian Sea coastline. Help preserve marine life and keep our beaches pristine for future generations.",
        "location": "Bilgah Beach, Baku",
        "event_date": _at(2025, 1, 15, 9),
        "category": "Beach Cleanup",
        "is_past": False,
    },
    {
        "title": "Mountain Reforestation Day",
        "description": "Plant native trees in the Caucasus foothills. Learn about local flora and contribute to restoring Azerbaijan's forest cover.",
        "location": "Shamakhi District",
        "event_date": _at(2025, 1, 22, 8),
        "category": "Tree Planting",
        "is_past": False,
    },
    {
        "title": "Birdwatching at Shirvan Reserve",
        "description": "Observe migratory birds and learn about wildlife conservation at Shirvan National Park, home to gazelles and flamingos.",
        "location": "Shirvan National Park",
        "event_date": _at(2025, 2, 8, 7),
        "category": "Wildlife",
        "is_past": False,
    },
    {
        "title": "Environmental Workshop for Schools",
        "description": "Interactive workshop teaching students about recycling, conservation, and sustainable living practices.",
        "location": "Youth Center, Baku",
        "event_date": _at(2025, 2, 15, 10),
        "category": "Education",
        "is_past": False,
    },
    {
        "title": "Gobustan Nature Walk",
        "description": "Explore the mud volcanoes and semi-desert ecosystem of the Gobustan reserve while learning about geological conservation.",
        "location": "Gobustan State Reserve",
        "event_date": _at(2025, 3, 1, 9),
        "category": "Awareness",
        "is_past": False,
    },
    {
        "title": "Kura River Cleanup Campaign",
        "description": "Help clean the banks of the Kura River and raise awareness about freshwater ecosystem protection.",
        "location": "Mingachevir",
        "event_date": _at(2024, 11, 20, 9),
        "category": "Beach Cleanup",
        "is_past": True,
    },
]

COMPETITIONS = [
    {
        "title": "Azerbaijan Biodiversity Quiz",
        "description": "Test your knowledge about the diverse flora and fauna found across Azerbaijan's varied landscapes.",
        "difficulty": "Easy",
        "question_count": 10,
        "estimated_minutes": 10,
        "prize_description": "Win eco-friendly merchandise!",
    },
    {
        "title": "Caspian Sea Conservation Challenge",
        "description": "Learn about the ecosystem of the Caspian Sea and the efforts to protect its endangered species.",
        "difficulty": "Medium",
        "question_count": 15,
        "estimated_minutes": 15,
        "prize_description": "Win a guided nature tour!",
    },
    {
        "title": "Climate Change & Azerbaijan",
        "description": "Explore how climate change affects Azerbaijan and discover ways to reduce your carbon footprint.",
        "difficulty": "Medium",
        "question_count": 12,
        "estimated_minutes": 12,
        "prize_description": "Win eco-friendly gift basket!",
    },
    {
        "title": "Forest Conservation Expert Quiz",
        "description": "An advanced quiz about forest ecosystems, reforestation techniques, and sustainable forestry practices.",
        "difficulty": "Hard",
        "question_count": 20,
        "estimated_minutes": 25,
        "prize_description": "Win a tree planted in your name!",
    },
]

QUESTIONS = [
    ("What percentage of Azerbaijan is covered by forests?",
     ["5%", "11%", "25%", "40%"], 1),
    ("Which is the largest national park in Azerbaijan?",
     ["Gobustan", "Shirvan", "Shahdag", "Hirkan"], 2),
    ("What is the national animal of Azerbaijan?",
     ["Brown Bear", "Gazelle", "Karabakh Horse", "Caspian Seal"], 2),
    ("How many mud volcanoes are there in Azerbaijan?",
     ["About 50", "About 200", "About 400", "About 600"], 2),
    ("Which rare feline species can be found in Azerbaijan's mountains?",
     ["Snow Leopard", "Caucasian Leopard", "Lynx", "Cheetah"], 1),
]


async def _is_empty(db: AsyncSession, model) -> bool:
    result = await db.execute(select(func.count()).select_from(model))
    return result.scalar_one() == 0


async def seed(db: AsyncSession) -> dict:
    """Insert sample data into empty tables. Returns inserted row counts."""
    inserted = {"events": 0, "competitions": 0, "questions": 0}

    if await _is_empty(db, Event):
        db.add_all(Event(**data) for data in EVENTS)
        inserted["events"] = len(EVENTS)

    if await _is_empty(db, Competition):
        competitions = [Competition(**data) for data in COMPETITIONS]
        db.add_all(competitions)
        await db.flush()
        db.add_all(
            CompetitionQuestion(
                competition_id=competitions[0].id,
                question=question,
                options=options,
                correct_answer=correct,
                points=10,
            )
            for question, options, correct in QUESTIONS
        )
        inserted["competitions"] = len(COMPETITIONS)
        inserted["questions"] = len(QUESTIONS)

    await db.commit()
    return inserted


async def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, "text")
    factory = create_session_factory(settings.database_url)
    async with factory() as db:
        inserted = await seed(db)
    logger.info(f"Database seeding completed: {inserted}")


if __name__ == "__main__":
    asyncio.run(main())
