"""Scores, Leaderboard, Dashboard Stats."""

from ecoaware.models.community_post import CommunityPost
from ecoaware.models.event_registration import EventRegistration
from ecoaware.models.problem import Problem
from ecoaware.models.user import User
from ecoaware.models.user_score import UserScore


async def test_save_client_computed_score(client, auth_headers, seed_competition):
    res = await client.post(
        "/api/user/scores",
        json={
            "competitionId": seed_competition.id, "score": 70,
            "totalQuestions": 10, "userId": "spoofed",
        },
        headers=auth_headers,
    )
    assert res.status_code == 201
    body = res.json()
    assert body["userId"] == "user-1"
    assert body["score"] == 70


async def test_save_score_for_unknown_competition_is_404(client, auth_headers):
    res = await client.post(
        "/api/user/scores",
        json={"competitionId": 999, "score": 10, "totalQuestions": 1},
        headers=auth_headers,
    )
    assert res.status_code == 404


async def test_save_negative_score_is_rejected(client, auth_headers, seed_competition):
    res = await client.post(
        "/api/user/scores",
        json={"competitionId": seed_competition.id, "score": -5, "totalQuestions": 1},
        headers=auth_headers,
    )
    assert res.status_code == 400


async def test_scores_require_login(client):
    res = await client.get("/api/user/scores")
    assert res.status_code == 401


async def test_leaderboard_sums_scores_per_user(
    client, test_db, user, other_user, seed_competition,
):
    cid = seed_competition.id
    test_db.add_all([
        UserScore(user_id=user.id, competition_id=cid, score=30, total_questions=3),
        UserScore(user_id=user.id, competition_id=cid, score=20, total_questions=3),
        UserScore(user_id=other_user.id, competition_id=cid, score=40, total_questions=3),
    ])
    await test_db.commit()

    res = await client.get("/api/leaderboard")

    assert res.status_code == 200
    board = res.json()
    assert [(e["userId"], e["totalScore"], e["rank"]) for e in board] == [
        ("user-1", 50, 1), ("user-2", 40, 2),
    ]
    assert board[0]["quizCount"] == 2
    assert board[0]["firstName"] == "Aysel"


async def test_leaderboard_ties_share_rank(
    client, test_db, user, other_user, admin, seed_competition,
):
    cid = seed_competition.id
    test_db.add_all([
        UserScore(user_id=other_user.id, competition_id=cid, score=30, total_questions=3),
        UserScore(user_id=user.id, competition_id=cid, score=30, total_questions=3),
        UserScore(user_id=admin.id, competition_id=cid, score=10, total_questions=3),
    ])
    await test_db.commit()

    board = (await client.get("/api/leaderboard")).json()

    assert [(e["userId"], e["rank"]) for e in board] == [
        ("user-1", 1), ("user-2", 1), ("admin-1", 3),
    ]


async def test_leaderboard_is_limited(client, test_db, seed_competition):
    for i in range(12):
        test_db.add(User(id=f"player-{i:02d}"))
    await test_db.flush()
    for i in range(12):
        test_db.add(UserScore(
            user_id=f"player-{i:02d}", competition_id=seed_competition.id,
            score=i, total_questions=1,
        ))
    await test_db.commit()

    board = (await client.get("/api/leaderboard")).json()

    assert len(board) == 10
    assert board[0]["totalScore"] == 11


async def test_empty_leaderboard(client):
    res = await client.get("/api/leaderboard")
    assert res.json() == []


async def test_dashboard_stats(client, test_db, user, auth_headers, seed_competition, seed_event):
    cid = seed_competition.id
    test_db.add_all([
        UserScore(user_id=user.id, competition_id=cid, score=80, total_questions=10),
        UserScore(user_id=user.id, competition_id=cid, score=50, total_questions=10),
        EventRegistration(user_id=user.id, event_id=seed_event.id),
        Problem(
            user_id=user.id, title="Oil spill", description="d", location="Sumgait",
            category="Water", severity="high",
        ),
        CommunityPost(user_id=user.id, content="Hello", post_type="general"),
        CommunityPost(user_id=user.id, content="Idea", post_type="idea"),
    ])
    await test_db.commit()

    res = await client.get("/api/user/stats", headers=auth_headers)

    assert res.status_code == 200
    assert res.json() == {
        "totalScore": 130,
        "completedQuizzes": 2,
        "averagePercentage": 65,
        "bestPercentage": 80,
        "eventsRegistered": 1,
        "problemsReported": 1,
        "postsCreated": 2,
    }


async def test_dashboard_stats_for_new_user_are_zero(client, auth_headers):
    body = (await client.get("/api/user/stats", headers=auth_headers)).json()
    assert body["totalScore"] == 0
    assert body["averagePercentage"] == 0
    assert body["bestPercentage"] == 0

