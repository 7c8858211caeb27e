"""
Shopify Publisher Service
Pushes generated content to a product through the Admin GraphQL API
"""
import json
import logging
from typing import Any, Dict, List, Optional, Protocol

import httpx

from ..config import SHOPIFY_API_VERSION, SHOPIFY_TIMEOUT
from ..errors import MissingCredentialError, PublishError, PublishRejectedError
from ..models import PublishResult

logger = logging.getLogger(__name__)

PRODUCT_UPDATE_MUTATION = """#graphql
mutation UpdateProduct($input: ProductInput!) {
  productUpdate(input: $input) {
    product {
      id
      title
      handle
    }
    userErrors {
      field
      message
    }
  }
}
"""


class CommercePublisher(Protocol):
    async def publish(
        self,
        product_gid: str,
        description_html: str,
        seo_title: str,
        seo_description: str,
        tags: List[str],
    ) -> PublishResult:
        """Return the updated product, or raise PublishError"""
        ...


class ShopifyPublisher:
    """Shopify Admin API publisher using a single productUpdate mutation"""

    def __init__(
        self,
        store_domain: str,
        access_token: str,
        api_version: str = SHOPIFY_API_VERSION,
        timeout: float = SHOPIFY_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not store_domain:
            raise MissingCredentialError("SHOPIFY_STORE_DOMAIN")
        if not access_token:
            raise MissingCredentialError("SHOPIFY_ADMIN_TOKEN")

        self.store_domain = store_domain.strip().rstrip("/")
        self.access_token = access_token
        self.api_version = api_version
        self.timeout = timeout
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"https://{self.store_domain}/admin/api/{self.api_version}/graphql.json"

    def _get_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-Shopify-Access-Token": self.access_token,
        }

    async def publish(
        self,
        product_gid: str,
        description_html: str,
        seo_title: str,
        seo_description: str,
        tags: List[str],
    ) -> PublishResult:
        """
        Update description, SEO fields and tags of one product
        Args:
            product_gid: Shopify product GID (gid://shopify/Product/...)
            description_html: Sanitized description HTML
            seo_title: SEO title
            seo_description: SEO meta description
            tags: Product tags
        Returns:
            Updated product summary
        Raises:
            PublishRejectedError: If Shopify reports userErrors
            PublishError: On HTTP or GraphQL failure
        """
        variables = {
            "input": {
                "id": product_gid,
                "descriptionHtml": description_html,
                "seo": {
                    "title": seo_title,
                    "description": seo_description,
                },
                "tags": tags,
            }
        }

        logger.info(f"Publishing content to {product_gid}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    self.endpoint,
                    headers=self._get_headers(),
                    json={"query": PRODUCT_UPDATE_MUTATION, "variables": variables},
                )
        except httpx.HTTPError as e:
            logger.error(f"Shopify request failed: {e}")
            raise PublishError(f"Shopify request failed: {e}") from e

        payload = self._parse_body(response)

        if not response.is_success:
            raise PublishError(
                f"Shopify request failed: {response.status_code}",
                status_code=response.status_code,
                response_body=payload,
            )

        data = payload.get("data") if isinstance(payload, dict) else None
        update = (data or {}).get("productUpdate")
        if update is None:
            errors = payload.get("errors") if isinstance(payload, dict) else None
            raise PublishError(
                f"Shopify returned no productUpdate result: {errors or payload}",
                response_body=payload,
            )

        user_errors = update.get("userErrors") or []
        if user_errors:
            logger.warning(f"Shopify rejected update for {product_gid}: {user_errors}")
            raise PublishRejectedError(user_errors)

        return PublishResult(product=update.get("product"), userErrors=[])

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        if not response.content:
            return {}
        try:
            return response.json()
        except json.JSONDecodeError:
            return {"raw": response.text}
