"""Score Stats: pure dashboard and leaderboard computations.

Invariants:
    - All inputs are already-loaded rows (no IO, no DB)
    - Never raises on empty input: counts and averages default to 0
    - Leaderboard ranks are 1-based competition ranks over the given (pre-sorted)
      rows: tied totals share a rank and the next rank skips (1, 1, 3)
"""

from typing import Protocol, Sequence

from ecoaware.core.quiz_scoring import (
    DEFAULT_POINTS, round_half_up, score_percentage,
)


class ScoreLike(Protocol):
    score: int
    total_questions: int


def compute_dashboard_stats(
    scores: Sequence[ScoreLike],
    events_registered: int = 0,
    problems_reported: int = 0,
    posts_created: int = 0,
    points_per_question: int = DEFAULT_POINTS,
) -> dict:
    """Summary numbers shown on a user's dashboard."""
    completed = len(scores)
    total = sum(s.score for s in scores)
    if completed:
        average = round_half_up(
            sum(
                s.score / (s.total_questions * points_per_question) * 100
                for s in scores if s.total_questions > 0
            ) / completed,
        )
    else:
        average = 0
    return {
        "total_score": total,
        "completed_quizzes": completed,
        "average_percentage": average,
        "best_percentage": max(
            (score_percentage(s.score, s.total_questions, points_per_question) for s in scores),
            default=0,
        ),
        "events_registered": events_registered,
        "problems_reported": problems_reported,
        "posts_created": posts_created,
    }


def rank_leaderboard(rows: Sequence[dict]) -> list[dict]:
    """Attach 1-based rank to rows already sorted by total_score desc.

    Tied totals share the same rank (competition ranking: 1, 1, 3).
    """
    ranked = []
    previous_total = None
    rank = 0
    for position, row in enumerate(rows, start=1):
        if row["total_score"] != previous_total:
            rank = position
            previous_total = row["total_score"]
        ranked.append({**row, "rank": rank})
    return ranked
