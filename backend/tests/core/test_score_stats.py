"""Tests for dashboard stats and leaderboard ranking: pure, no IO."""

from types import SimpleNamespace

from ecoaware.core.score_stats import compute_dashboard_stats, rank_leaderboard


def _score(score, total_questions):
    return SimpleNamespace(score=score, total_questions=total_questions)


def test_empty_history_returns_zero_stats():
    stats = compute_dashboard_stats([])
    assert stats == {
        "total_score": 0,
        "completed_quizzes": 0,
        "average_percentage": 0,
        "best_percentage": 0,
        "events_registered": 0,
        "problems_reported": 0,
        "posts_created": 0,
    }


def test_totals_and_percentages():
    stats = compute_dashboard_stats([_score(80, 10), _score(50, 10)])
    assert stats["total_score"] == 130
    assert stats["completed_quizzes"] == 2
    assert stats["average_percentage"] == 65
    assert stats["best_percentage"] == 80


def test_zero_question_attempt_counts_as_zero_percent():
    stats = compute_dashboard_stats([_score(100, 10), _score(0, 0)])
    assert stats["completed_quizzes"] == 2
    assert stats["average_percentage"] == 50
    assert stats["best_percentage"] == 100


def test_activity_counts_passed_through():
    stats = compute_dashboard_stats(
        [], events_registered=3, problems_reported=1, posts_created=4,
    )
    assert stats["events_registered"] == 3
    assert stats["problems_reported"] == 1
    assert stats["posts_created"] == 4


def test_points_per_question_scales_percentages():
    stats = compute_dashboard_stats([_score(50, 5)], points_per_question=20)
    assert stats["average_percentage"] == 50


def test_rank_is_one_based():
    rows = [{"user_id": "a", "total_score": 30}, {"user_id": "b", "total_score": 20}]
    assert [r["rank"] for r in rank_leaderboard(rows)] == [1, 2]


def test_tied_totals_share_rank_and_skip_next():
    rows = [
        {"user_id": "a", "total_score": 30},
        {"user_id": "b", "total_score": 30},
        {"user_id": "c", "total_score": 10},
        {"user_id": "d", "total_score": 10},
        {"user_id": "e", "total_score": 5},
    ]
    assert [r["rank"] for r in rank_leaderboard(rows)] == [1, 1, 3, 3, 5]


def test_rank_does_not_mutate_input():
    rows = [{"user_id": "a", "total_score": 1}]
    rank_leaderboard(rows)
    assert "rank" not in rows[0]


def test_half_percentages_round_up():
    stats = compute_dashboard_stats([_score(10, 8)])
    assert stats["average_percentage"] == 13
    assert stats["best_percentage"] == 13


def test_average_of_mixed_attempts_rounds_half_up():
    # 100% and 25% average to 62.5%
    stats = compute_dashboard_stats([_score(100, 10), _score(20, 8)])
    assert stats["average_percentage"] == 63
