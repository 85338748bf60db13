import pytest
from httpx import AsyncClient

ALLOWED_ORIGIN = "http://localhost:8080"
FOREIGN_ORIGIN = "http://evil.example.com"


@pytest.mark.asyncio
async def test_request_without_origin_passes(client: AsyncClient):
    response = await client.get("/movies")

    assert response.status_code == 200
    assert "access-control-allow-origin" not in response.headers


@pytest.mark.asyncio
async def test_allowed_origin_is_acknowledged(client: AsyncClient):
    response = await client.get("/movies", headers={"Origin": ALLOWED_ORIGIN})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == ALLOWED_ORIGIN


@pytest.mark.asyncio
async def test_allowed_origin_preflight(client: AsyncClient):
    response = await client.options(
        "/movies/m_alien",
        headers={
            "Origin": ALLOWED_ORIGIN,
            "Access-Control-Request-Method": "PATCH",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == ALLOWED_ORIGIN
    assert "PATCH" in response.headers["access-control-allow-methods"]


@pytest.mark.asyncio
async def test_foreign_origin_is_rejected(client: AsyncClient):
    response = await client.get("/movies", headers={"Origin": FOREIGN_ORIGIN})

    assert response.status_code == 403
    assert response.headers["content-type"].startswith("text/plain")
    assert "access-control-allow-origin" not in response.headers


@pytest.mark.asyncio
async def test_foreign_origin_never_reaches_handlers(client: AsyncClient, movie_store, movie_payload):
    created = await client.post("/movies", json=movie_payload, headers={"Origin": FOREIGN_ORIGIN})
    deleted = await client.delete("/movies/m_alien", headers={"Origin": FOREIGN_ORIGIN})
    patched = await client.patch(
        "/movies/m_godfather", json={"rate": 1}, headers={"Origin": FOREIGN_ORIGIN}
    )

    assert created.status_code == deleted.status_code == patched.status_code == 403
    assert len(movie_store) == 2
    assert movie_store.find_by_id("m_godfather").rate == 9.2


@pytest.mark.asyncio
async def test_responses_carry_request_id(client: AsyncClient):
    response = await client.get("/movies", headers={"X-Request-ID": "req-123"})

    assert response.headers["x-request-id"] == "req-123"
    assert "x-process-time" in response.headers
