"""HTTP surface tests: health, optimize and Shopify update routes."""

from __future__ import annotations

from typing import AsyncIterator

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from app import __version__
from app.config import Settings
from app.dependencies import get_generator_factory, get_publisher_factory, get_settings
from app.errors import PublishRejectedError
from app.main import app
from app.services.shopify_publisher import CommercePublisher, ShopifyPublisher
from tests.conftest import FakeGenerator, FakePublisher, make_generated

GID = "gid://shopify/Product/8842"


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def _use_generator(generator: FakeGenerator) -> None:
    app.dependency_overrides[get_generator_factory] = lambda: (lambda: generator)


def _use_publisher(publisher: CommercePublisher) -> None:
    app.dependency_overrides[get_publisher_factory] = lambda: (lambda: publisher)


def _use_settings(**values: str) -> None:
    app.dependency_overrides[get_settings] = lambda: Settings(_env_file=None, **values)


# ── /healthz ─────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_healthz(client: AsyncClient) -> None:
    resp = await client.get("/healthz")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["version"] == __version__


@pytest.mark.asyncio
async def test_healthz_reports_configured_settings(client: AsyncClient) -> None:
    _use_settings(openai_api_key="", shopify_store_domain="7anin.myshopify.com", shopify_admin_token="shpat_test")

    body = (await client.get("/healthz")).json()

    assert body["openai_configured"] is False
    assert body["shopify_configured"] is True


# ── /api/optimize ────────────────────────────────────────────


@pytest.mark.asyncio
async def test_optimize_returns_generated_content(client: AsyncClient, fake_generator: FakeGenerator) -> None:
    _use_generator(fake_generator)

    resp = await client.post("/api/optimize", json={"title": "Green March Tee", "language": "en"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["heading"] == "Green March Tee"
    assert body["tags"] == ["streetwear", "tee", "morocco"]
    assert "productTitle" not in body
    assert "Language: en" in fake_generator.calls[0][1]


@pytest.mark.asyncio
async def test_optimize_includes_product_title_when_generated(client: AsyncClient) -> None:
    _use_generator(FakeGenerator(make_generated(productTitle="Green March Tee")))

    resp = await client.post("/api/optimize", json={"title": "Tee"})

    assert resp.status_code == 200
    assert resp.json()["productTitle"] == "Green March Tee"


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{}, {"title": ""}, {"title": "   "}])
async def test_optimize_requires_title(client: AsyncClient, fake_generator: FakeGenerator, payload: dict) -> None:
    _use_generator(fake_generator)

    resp = await client.post("/api/optimize", json=payload)

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "error": "Title is required"}
    assert fake_generator.calls == []


@pytest.mark.asyncio
async def test_optimize_rejects_unsupported_language(client: AsyncClient, fake_generator: FakeGenerator) -> None:
    _use_generator(fake_generator)

    resp = await client.post("/api/optimize", json={"title": "Tee", "language": "de"})

    assert resp.status_code == 422
    assert fake_generator.calls == []


@pytest.mark.asyncio
async def test_optimize_validation_failure_lists_issues(client: AsyncClient) -> None:
    _use_generator(FakeGenerator(make_generated(tags=["Tee", "tee", "TEE"])))

    resp = await client.post("/api/optimize", json={"title": "Tee"})

    assert resp.status_code == 422
    body = resp.json()
    assert body["success"] is False
    assert body["issues"] == [
        {"path": ["tags"], "code": "too_few_items", "message": "Expected at least 3 items"}
    ]


@pytest.mark.asyncio
async def test_optimize_generator_failure_is_bad_gateway(
    client: AsyncClient, failing_generator: FakeGenerator
) -> None:
    _use_generator(failing_generator)

    resp = await client.post("/api/optimize", json={"title": "Tee"})

    assert resp.status_code == 502
    assert resp.json()["error"] == "OpenAI request failed: 500"


@pytest.mark.asyncio
async def test_optimize_missing_openai_key(client: AsyncClient) -> None:
    _use_settings(openai_api_key="")

    resp = await client.post("/api/optimize", json={"title": "Tee"})

    assert resp.status_code == 500
    assert resp.json()["error"] == "Missing OPENAI_API_KEY environment variable"


@pytest.mark.asyncio
async def test_api_key_is_enforced_when_configured(client: AsyncClient, fake_generator: FakeGenerator) -> None:
    _use_generator(fake_generator)
    _use_settings(api_key="secret")

    denied = await client.post("/api/optimize", json={"title": "Tee"})
    allowed = await client.post("/api/optimize", json={"title": "Tee"}, headers={"x-api-key": "secret"})

    assert denied.status_code == 401
    assert denied.json()["error"] == "Invalid API key"
    assert allowed.status_code == 200


# ── /api/shopify/update ──────────────────────────────────────


@pytest.mark.asyncio
async def test_shopify_update_sanitizes_and_publishes(client: AsyncClient, fake_publisher: FakePublisher) -> None:
    _use_publisher(fake_publisher)

    resp = await client.post(
        "/api/shopify/update",
        json={
            "productGid": GID,
            "descriptionHtml": "<p onclick='x()'>Hi</p><script>alert(1)</script>",
            "seoTitle": "Green March Tee",
            "seoDescription": "Relaxed organic cotton tee",
            "tags": ["tee"],
        },
    )

    assert resp.status_code == 200
    assert resp.json()["product"] == {"id": GID, "title": "Green March Tee", "handle": "green-march-tee"}
    assert fake_publisher.calls[0]["description_html"] == "<p>Hi</p>"
    assert fake_publisher.calls[0]["tags"] == ["tee"]


@pytest.mark.asyncio
async def test_shopify_update_requires_product_gid(client: AsyncClient, fake_publisher: FakePublisher) -> None:
    _use_publisher(fake_publisher)

    resp = await client.post("/api/shopify/update", json={"descriptionHtml": "<p>Hi</p>"})

    assert resp.status_code == 400
    assert resp.json()["error"] == "productGid is required"
    assert fake_publisher.calls == []


@pytest.mark.asyncio
async def test_shopify_user_errors_are_returned(client: AsyncClient) -> None:
    errors = [{"field": ["tags"], "message": "Tags are invalid"}]
    _use_publisher(FakePublisher(error=PublishRejectedError(errors)))

    resp = await client.post("/api/shopify/update", json={"productGid": GID})

    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["userErrors"] == errors


@pytest.mark.asyncio
async def test_shopify_missing_credentials(client: AsyncClient) -> None:
    _use_settings(shopify_store_domain="", shopify_admin_token="")

    resp = await client.post("/api/shopify/update", json={"productGid": GID})

    assert resp.status_code == 500
    assert "SHOPIFY_STORE_DOMAIN" in resp.json()["error"]


@pytest.mark.asyncio
async def test_shopify_graphql_errors_are_bad_gateway(client: AsyncClient) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"errors": [{"message": "Throttled"}]})

    publisher = ShopifyPublisher(
        store_domain="7anin.myshopify.com",
        access_token="shpat_test",
        transport=httpx.MockTransport(handler),
    )
    _use_publisher(publisher)

    resp = await client.post("/api/shopify/update", json={"productGid": GID})

    assert resp.status_code == 502
    body = resp.json()
    assert body["success"] is False
    assert "Throttled" in body["error"]
    assert body["details"] == {"errors": [{"message": "Throttled"}]}
