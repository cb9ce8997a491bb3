import pytest


@pytest.mark.asyncio
async def test_posts_for_unknown_room_are_empty(api_client):
    response = await api_client.get("/rooms/unknown/posts")
    assert response.status_code == 200
    assert response.json() == {"posts": []}


@pytest.mark.asyncio
async def test_posts_added_in_process_are_listed(api_client, store):
    store.add_post("r1", {"title": "Welcome to the room!", "content": "First post", "authorId": "1"})

    response = await api_client.get("/rooms/r1/posts")
    assert response.status_code == 200
    posts = response.json()["posts"]
    assert len(posts) == 1
    assert posts[0]["roomId"] == "r1"
    assert posts[0]["title"] == "Welcome to the room!"
    assert posts[0]["authorId"] == "1"

    other = await api_client.get("/rooms/r2/posts")
    assert other.json() == {"posts": []}


@pytest.mark.asyncio
async def test_create_doubt_then_list(api_client):
    response = await api_client.post("/rooms/r1/doubts", json={"title": "Q", "content": "C"})
    assert response.status_code == 200
    assert response.json() == {"roomId": "r1", "doubt": {"title": "Q", "content": "C"}}

    list_response = await api_client.get("/rooms/r1/doubts")
    assert list_response.status_code == 200
    assert list_response.json() == {"doubts": [{"title": "Q", "content": "C"}]}


@pytest.mark.asyncio
async def test_doubts_are_isolated_per_room(api_client):
    await api_client.post("/rooms/r1/doubts", json={"title": "Q1", "content": "C1"})
    await api_client.post("/rooms/r2/doubts", json={"title": "Q2", "content": "C2"})
    await api_client.post("/rooms/r1/doubts", json={"title": "Q3", "content": "C3"})

    r1 = (await api_client.get("/rooms/r1/doubts")).json()["doubts"]
    r2 = (await api_client.get("/rooms/r2/doubts")).json()["doubts"]
    assert [d["title"] for d in r1] == ["Q1", "Q3"]
    assert r2 == [{"title": "Q2", "content": "C2"}]


@pytest.mark.asyncio
async def test_doubts_for_unknown_room_are_empty(api_client):
    response = await api_client.get("/rooms/nobody-here/doubts")
    assert response.status_code == 200
    assert response.json() == {"doubts": []}


@pytest.mark.asyncio
async def test_doubt_room_id_is_not_checked_against_rooms(api_client, store):
    response = await api_client.post("/rooms/ghost/doubts", json={"title": "Anyone?"})
    assert response.status_code == 200
    assert response.json()["doubt"] == {"title": "Anyone?", "content": ""}
    assert store.list_rooms() == []


@pytest.mark.asyncio
async def test_create_doubt_rejects_malformed_body(api_client, store):
    response = await api_client.post(
        "/rooms/r1/doubts",
        content=b"[not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["error"]
    assert store.list_doubts("r1") == []


@pytest.mark.asyncio
async def test_create_doubt_null_fields_and_plain_text_body(api_client):
    response = await api_client.post(
        "/rooms/r1/doubts",
        content=b'{"title": "Q", "content": null}',
        headers={"Content-Type": "text/plain"},
    )
    assert response.status_code == 200
    assert response.json() == {"roomId": "r1", "doubt": {"title": "Q", "content": ""}}
