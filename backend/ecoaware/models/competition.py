"""Competition ORM: an environmental quiz.

Invariants:
    - question_count and estimated_minutes are advertised values, curated by admins
    - Inactive competitions are listed but cannot be submitted

Design Decisions:
    - question_count is not derived from competition_questions: the catalogue
      advertises the full quiz while questions may be added incrementally
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from ecoaware.db.base import Base


class Competition(Base):
    """Quiz entity."""
    __tablename__ = "competitions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    difficulty: Mapped[str] = mapped_column(String(50), nullable=False)
    question_count: Mapped[int] = mapped_column(Integer, nullable=False)
    estimated_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    prize_description: Mapped[str | None] = mapped_column(
        String(255), nullable=True,
    )
    image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
