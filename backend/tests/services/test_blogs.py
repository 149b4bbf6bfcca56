"""Blogs: feedback and idea posts share likes and comments with community posts."""


async def test_create_and_list_blog_posts(client, auth_headers):
    idea = await client.post(
        "/api/blogs",
        json={"title": "Solar benches", "content": "Charge phones in parks", "postType": "idea"},
        headers=auth_headers,
    )
    assert idea.status_code == 201
    await client.post(
        "/api/community/posts", json={"content": "General chat"}, headers=auth_headers,
    )

    blogs = (await client.get("/api/blogs")).json()

    assert [b["title"] for b in blogs] == ["Solar benches"]
    assert blogs[0]["postType"] == "idea"


async def test_blog_rejects_community_types(client, auth_headers):
    res = await client.post(
        "/api/blogs", json={"content": "General chat"}, headers=auth_headers,
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_POST_TYPE"


async def test_blog_requires_login(client):
    res = await client.post("/api/blogs", json={"content": "x", "postType": "feedback"})
    assert res.status_code == 401


async def test_blog_posts_can_be_liked(client, auth_headers, other_headers):
    blog = (await client.post(
        "/api/blogs", json={"content": "Great app", "postType": "feedback"},
        headers=auth_headers,
    )).json()

    res = await client.post(f"/api/community/posts/{blog['id']}/like", headers=other_headers)

    assert res.status_code == 201
    assert (await client.get("/api/blogs")).json()[0]["likesCount"] == 1
