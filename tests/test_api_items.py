"""Tests for item API endpoints."""

import json

import httpx
import pytest
import respx
from fastapi import HTTPException
from httpx import ASGITransport, AsyncClient

from raritymon.api.dependencies import get_cache, get_http_client
from raritymon.api.items import parse_item_id
from raritymon.db.cache import RarityCache, fingerprint
from raritymon.main import app
from raritymon.scrapers.raritymon import RARITYMON_BASE, create_client

ITEM_URL = f"{RARITYMON_BASE}/Item-details"


@pytest.fixture
async def client(cache: RarityCache):
    """Provide an async test client with overridden cache and HTTP client."""
    outbound = create_client(timeout=5.0)

    app.dependency_overrides[get_cache] = lambda: cache
    app.dependency_overrides[get_http_client] = lambda: outbound

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
    await outbound.aclose()


class TestGetItem:
    @respx.mock
    async def test_returns_item_json(self, client: AsyncClient, item_html: str) -> None:
        respx.get(ITEM_URL).mock(return_value=httpx.Response(200, text=item_html))

        response = await client.get("/api/X/7")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        data = response.json()
        assert data["name"] == "Space Ape #7"
        assert data["rank"] == 12
        assert data["total"] == 500
        assert data["score"] == pytest.approx(87.42)
        assert data["traits"]["Background"] == {
            "type": "Background",
            "name": "Blue",
            "tier": "Rare",
            "percentage": 3.5,
        }

    @respx.mock
    async def test_second_request_served_from_cache(
        self, client: AsyncClient, item_html: str
    ) -> None:
        route = respx.get(ITEM_URL).mock(return_value=httpx.Response(200, text=item_html))

        first = await client.get("/api/X/7")
        second = await client.get("/api/X/7")

        assert route.call_count == 1
        assert first.headers["X-Cache"] == "MISS"
        assert second.headers["X-Cache"] == "HIT"
        assert second.content == first.content

    @respx.mock
    async def test_cached_entry_skips_fetch(self, client: AsyncClient, cache: RarityCache) -> None:
        route = respx.get(ITEM_URL)
        payload = json.dumps({"name": "Cached", "rank": 1, "total": 2, "score": 3.0, "traits": {}})
        await cache.put(fingerprint("X", 7), payload.encode())

        response = await client.get("/api/X/7")

        assert response.status_code == 200
        assert response.json()["name"] == "Cached"
        assert not route.called

    async def test_non_numeric_id_is_bad_request(self, client: AsyncClient) -> None:
        response = await client.get("/api/X/seven")

        assert response.status_code == 400
        assert "invalid item id" in response.json()["detail"]

    async def test_negative_id_is_bad_request(self, client: AsyncClient) -> None:
        response = await client.get("/api/X/-1")

        assert response.status_code == 400

    @pytest.mark.parametrize("raw", ["1_000", "%207", "7%20", "%D9%A7", "7.0", "0x7"])
    async def test_non_decimal_id_is_bad_request(self, client: AsyncClient, raw: str) -> None:
        response = await client.get(f"/api/X/{raw}")

        assert response.status_code == 400

    @respx.mock
    async def test_fetch_failure_is_server_error(self, client: AsyncClient) -> None:
        respx.get(ITEM_URL).mock(return_value=httpx.Response(502))

        response = await client.get("/api/X/7")

        assert response.status_code == 500
        assert "HTTP 502" in response.text

    @respx.mock
    async def test_unbalanced_page_is_server_error(
        self, client: AsyncClient, cache: RarityCache, unbalanced_html: str
    ) -> None:
        respx.get(ITEM_URL).mock(return_value=httpx.Response(200, text=unbalanced_html))

        response = await client.get("/api/X/8")

        assert response.status_code == 500
        assert "unbalanced" in response.text
        assert await cache.get(fingerprint("X", 8)) is None

    @respx.mock
    async def test_missing_node_is_server_error(self, client: AsyncClient) -> None:
        respx.get(ITEM_URL).mock(return_value=httpx.Response(200, text="<html><p>Gone</p></html>"))

        response = await client.get("/api/X/7")

        assert response.status_code == 500
        assert "could not find the HTML node" in response.text

    @respx.mock
    async def test_empty_page_is_server_error(self, client: AsyncClient) -> None:
        respx.get(ITEM_URL).mock(return_value=httpx.Response(200, text=""))

        response = await client.get("/api/X/7")

        assert response.status_code == 500
        assert "empty" in response.text

    @respx.mock
    async def test_store_failure_is_server_error(self, item_html: str) -> None:
        class BrokenCache(RarityCache):
            async def get(self, key: bytes) -> bytes | None:
                return None

            async def put(self, key: bytes, payload: bytes) -> None:
                from raritymon.models.errors import StoreError

                raise StoreError("failed to write cache entry: disk I/O error")

        respx.get(ITEM_URL).mock(return_value=httpx.Response(200, text=item_html))
        broken = BrokenCache.from_url("sqlite+aiosqlite://")
        outbound = create_client(timeout=5.0)
        app.dependency_overrides[get_cache] = lambda: broken
        app.dependency_overrides[get_http_client] = lambda: outbound

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/X/7")

        app.dependency_overrides.clear()
        await outbound.aclose()
        await broken.close()

        assert response.status_code == 500
        assert "disk I/O error" in response.text


class TestCors:
    async def test_allows_any_origin(self, client: AsyncClient) -> None:
        response = await client.options(
            "/api/X/7",
            headers={"Origin": "https://example.com", "Access-Control-Request-Method": "GET"},
        )

        assert response.headers["access-control-allow-origin"] == "*"


class TestParseItemId:
    def test_plain_digits(self) -> None:
        assert parse_item_id("7") == 7

    def test_leading_zeros_and_plus_sign(self) -> None:
        assert parse_item_id("007") == 7
        assert parse_item_id("+7") == 7

    @pytest.mark.parametrize("raw", ["1_000", " 7", "7 ", "٧", "", "-"])
    def test_rejects_non_ascii_decimal(self, raw: str) -> None:
        with pytest.raises(HTTPException) as exc_info:
            parse_item_id(raw)

        assert exc_info.value.status_code == 400
