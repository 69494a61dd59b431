import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def test_list_singers_by_prefix(client: AsyncClient, context):
    singers = await context.singers.generate_random_singers(10)
    await context.albums.generate_random_albums(5)
    prefix = singers[0].last_name[0]

    response = await client.get("/api/v1/singers", params={"prefix": prefix})

    assert response.status_code == 200
    data = response.json()
    expected = sorted((s.last_name, s.first_name) for s in singers if s.last_name.startswith(prefix))
    assert [(s["last_name"], s["first_name"]) for s in data] == expected
    for singer in data:
        assert singer["full_name"] == f"{singer['first_name']} {singer['last_name']}"
        assert isinstance(singer["albums"], list)


async def test_list_singers_without_prefix_returns_all(client: AsyncClient, context):
    await context.singers.generate_random_singers(3)

    response = await client.get("/api/v1/singers")

    assert response.status_code == 200
    assert len(response.json()) == 3


async def test_list_singers_includes_albums(client: AsyncClient, context):
    singers = await context.singers.generate_random_singers(1)
    albums = await context.albums.generate_random_albums(2)

    response = await client.get("/api/v1/singers", params={"prefix": singers[0].last_name})

    assert {a["title"] for a in response.json()[0]["albums"]} == {a.title for a in albums}
