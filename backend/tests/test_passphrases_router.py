"""
Tests for passphrase endpoints
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_list_passphrases_returns_batch_in_order(client: AsyncClient):
    response = await client.get("/api/passphrases")

    assert response.status_code == 200
    data = response.json()
    assert [entry["length"] for entry in data["passphrases"]] == [12, 20]
    assert data["passphrases"][0]["passphrase"] == "pass12n1"
    assert data["generated_at"] is not None


@pytest.mark.asyncio
async def test_refresh_regenerates_batch(client: AsyncClient):
    first = (await client.get("/api/passphrases")).json()
    response = await client.post("/api/passphrases/refresh")

    assert response.status_code == 200
    refreshed = response.json()
    assert refreshed["passphrases"] != first["passphrases"]
    assert refreshed["passphrases"][1] == {"length": 20, "passphrase": "pass20n4"}


@pytest.mark.asyncio
async def test_get_single_passphrase(client: AsyncClient):
    response = await client.get("/api/passphrases/20")

    assert response.status_code == 200
    assert response.json() == {"length": 20, "passphrase": "pass20n2"}


@pytest.mark.asyncio
async def test_get_unknown_length_returns_404(client: AsyncClient):
    response = await client.get("/api/passphrases/99")

    assert response.status_code == 404
    assert response.json()["detail"] == "no passphrase configured for length 99"


@pytest.mark.asyncio
async def test_regenerate_single_length(client: AsyncClient):
    await client.get("/api/passphrases")
    response = await client.post("/api/passphrases/12/refresh")

    assert response.status_code == 200
    assert response.json() == {"length": 12, "passphrase": "pass12n3"}


@pytest.mark.asyncio
async def test_regenerate_unknown_length_returns_404(client: AsyncClient):
    response = await client.post("/api/passphrases/7/refresh")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_generate_single_passphrase(client: AsyncClient):
    response = await client.post("/api/passphrases/generate", json={"length": 16})

    assert response.status_code == 200
    assert response.json() == {"length": 16, "passphrase": "pass16n1"}


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{}, {"length": 0}, {"length": -3}, {"length": 100000}])
async def test_generate_rejects_invalid_length(client: AsyncClient, body):
    response = await client.post("/api/passphrases/generate", json=body)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_responses_are_never_cached(client: AsyncClient):
    response = await client.get("/api/passphrases")

    assert response.headers["Cache-Control"] == "no-store, no-cache, must-revalidate"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
