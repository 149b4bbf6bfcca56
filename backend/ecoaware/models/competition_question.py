"""CompetitionQuestion ORM: one multiple-choice question of a quiz.

Invariants:
    - options is a JSON list of strings
    - correct_answer is an index into options
    - points defaults to 10 (NULL also scores 10)
"""

from sqlalchemy import Text, Integer, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from ecoaware.db.base import Base


class CompetitionQuestion(Base):
    """Question entity."""
    __tablename__ = "competition_questions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    competition_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("competitions.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    question: Mapped[str] = mapped_column(Text, nullable=False)
    options: Mapped[list] = mapped_column(JSON, nullable=False)
    correct_answer: Mapped[int] = mapped_column(Integer, nullable=False)
    points: Mapped[int | None] = mapped_column(
        Integer, nullable=True, default=10,
    )
