"""
FastAPI dependencies: settings, API key check, collaborator factories
"""
from typing import Callable, Optional

from fastapi import Depends, Header, HTTPException

from .config import Settings, settings
from .services.generator import OpenAIGenerator, TextGenerator
from .services.shopify_publisher import CommercePublisher, ShopifyPublisher

GeneratorFactory = Callable[[], TextGenerator]
PublisherFactory = Callable[[], CommercePublisher]


def get_settings() -> Settings:
    return settings


def check_key(
    x_api_key: Optional[str] = Header(default=None, alias="x-api-key"),
    app_settings: Settings = Depends(get_settings),
):
    """Validate API key if configured"""
    if app_settings.api_key and x_api_key != app_settings.api_key:
        raise HTTPException(status_code=401, detail="Invalid API key")


def get_generator_factory(app_settings: Settings = Depends(get_settings)) -> GeneratorFactory:
    # Credentials are checked when the factory is called, not at injection
    def factory() -> TextGenerator:
        return OpenAIGenerator(
            api_key=app_settings.openai_api_key,
            model=app_settings.openai_model,
            timeout=app_settings.openai_timeout,
        )

    return factory


def get_publisher_factory(app_settings: Settings = Depends(get_settings)) -> PublisherFactory:
    def factory() -> CommercePublisher:
        return ShopifyPublisher(
            store_domain=app_settings.shopify_store_domain,
            access_token=app_settings.shopify_admin_token,
            api_version=app_settings.shopify_api_version,
        )

    return factory
