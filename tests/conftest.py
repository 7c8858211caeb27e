"""Shared test fixtures: fake generator and publisher, sample payloads."""

from __future__ import annotations

import os

# No real OpenAI or Shopify calls from tests, and no API key gate.
os.environ["OPENAI_API_KEY"] = "for-demo-purposes-only"
os.environ["API_KEY"] = ""

from typing import Any

import pytest

from app.errors import GeneratorError
from app.models import PublishResult

DESCRIPTION_HTML = (
    "<p>Un tee en coton bio inspiré de la Marche Verte.</p>"
    "<ul><li>Coupe ample</li><li>Impression sérigraphie</li></ul>"
)
SEO_DESCRIPTION = ("Relaxed organic cotton tee with a Green March illustration. " * 3)[:140].rstrip()


def make_generated(**overrides: Any) -> dict[str, Any]:
    """A generator payload that passes validation as-is."""
    payload: dict[str, Any] = {
        "heading": "Green March Tee",
        "descriptionHtml": DESCRIPTION_HTML,
        "seoTitle": "Green March Tee | 7anin streetwear",
        "seoDescription": SEO_DESCRIPTION,
        "tags": ["streetwear", "tee", "morocco"],
        "hashtags": ["7anin", "greenmarch", "streetwear"],
        "mockupSuggestions": ["Flat lay on sand", "Street shot in Casablanca"],
        "socialIdeas": ["Story behind the march", "Behind the print", "Styling reel"],
    }
    payload.update(overrides)
    return payload


class FakeGenerator:
    """Records prompts and returns a canned payload (or raises)."""

    def __init__(self, payload: Any = None, error: Exception | None = None) -> None:
        self.payload = payload if payload is not None else make_generated()
        self.error = error
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    async def generate(self, system: str, user: str, schema: dict[str, Any]) -> Any:
        self.calls.append((system, user, schema))
        if self.error is not None:
            raise self.error
        return self.payload


class FakePublisher:
    """Records publish calls and returns a canned result (or raises)."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def publish(
        self,
        product_gid: str,
        description_html: str,
        seo_title: str,
        seo_description: str,
        tags: list[str],
    ) -> PublishResult:
        self.calls.append({
            "product_gid": product_gid,
            "description_html": description_html,
            "seo_title": seo_title,
            "seo_description": seo_description,
            "tags": tags,
        })
        if self.error is not None:
            raise self.error
        return PublishResult(
            product={"id": product_gid, "title": "Green March Tee", "handle": "green-march-tee"},
            userErrors=[],
        )


@pytest.fixture
def fake_generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def failing_generator() -> FakeGenerator:
    return FakeGenerator(error=GeneratorError("OpenAI request failed: 500"))


@pytest.fixture
def fake_publisher() -> FakePublisher:
    return FakePublisher()
