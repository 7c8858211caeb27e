"""
Configuration, constants, and content rules
"""
from pydantic_settings import BaseSettings

# OpenAI Configuration
OPENAI_MODEL = "gpt-4o-mini"
OPENAI_TIMEOUT = 120

# Shopify Configuration
SHOPIFY_API_VERSION = "2024-10"
SHOPIFY_TIMEOUT = 30

# Tags permitted in generated description HTML
ALLOWED_TAGS = frozenset({"p", "ul", "ol", "li", "strong", "em", "br"})

# Generated content limits
HEADING_MIN_LENGTH = 3
HEADING_MAX_LENGTH = 60
DESCRIPTION_MIN_LENGTH = 50
SEO_TITLE_MIN_LENGTH = 10
SEO_TITLE_MAX_LENGTH = 60
SEO_DESCRIPTION_MIN_LENGTH = 110
SEO_DESCRIPTION_MAX_LENGTH = 160
TAGS_MIN = 3
TAGS_MAX = 8
MOCKUP_SUGGESTIONS_MIN = 2
SUGGESTIONS_MAX = 5
SOCIAL_IDEAS_MIN = 3
PRODUCT_TITLE_MAX_LENGTH = 120

# Prompt defaults
DEFAULT_LANGUAGE = "fr"
SUPPORTED_LANGUAGES = {"fr", "en"}
EMPTY_FIELD = "(none)"

SYSTEM_PROMPT = (
    "You are an ecommerce SEO copywriter for '7anin' (culturally inspired streetwear). "
    "Voice: conversational, simple FR/EN, benefits > features, no empty adjectives. "
    "Only use cultural refs provided (Green March, El Haïk, Grand Taxi). "
    "Do not invent materials/sizes/history. "
    "Darija allowed in product titles ONLY if the product has a North African illustration; "
    "else titles in FR/EN. "
    "Description 150–300 words using only <p>, <ul>, <ol>, <li>, <strong>, <em>, <br>. "
    "Heading ≤ 60 chars. SEO title 35–60 chars. Meta 150–160 chars. "
    "3–8 tags (lowercase), 3–8 hashtags (lowercase, no spaces; hyphens ok). "
    "2–5 mockup/styling suggestions. 3–5 social ideas tied to the story. "
    "Output ONLY valid JSON matching the schema."
)


class Settings(BaseSettings):
    """Reads from .env file and environment variables."""

    # OpenAI
    openai_api_key: str = ""
    openai_model: str = OPENAI_MODEL
    openai_timeout: float = OPENAI_TIMEOUT

    # Shopify
    shopify_store_domain: str = ""
    shopify_admin_token: str = ""
    shopify_api_version: str = SHOPIFY_API_VERSION

    # API
    api_key: str = ""
    port: int = 8080

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "",
        "extra": "ignore",
    }

    @property
    def openai_configured(self) -> bool:
        return bool(self.openai_api_key)

    @property
    def shopify_configured(self) -> bool:
        return bool(self.shopify_store_domain and self.shopify_admin_token)


settings = Settings()
