"""
Shopify Router
Push generated content back to a Shopify product
"""
import logging
from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import PublisherFactory, check_key, get_publisher_factory
from ..models import PublishResult, ShopifyUpdateRequest
from ..utils.sanitizers import sanitize_html

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/shopify", tags=["Shopify"], dependencies=[Depends(check_key)])


@router.post("/update", response_model=PublishResult)
async def update_product(
    request: ShopifyUpdateRequest,
    publisher_factory: PublisherFactory = Depends(get_publisher_factory),
):
    """
    Update description, SEO title/description and tags of a Shopify product

    Returns the updated product (id, title, handle).
    Field-level rejections from Shopify are returned as userErrors with status 400.
    """
    if not request.productGid or not request.productGid.strip():
        raise HTTPException(status_code=400, detail="productGid is required")

    publisher = publisher_factory()

    logger.info(f"Updating Shopify product {request.productGid}")

    result = await publisher.publish(
        product_gid=request.productGid.strip(),
        description_html=sanitize_html(request.descriptionHtml),
        seo_title=request.seoTitle,
        seo_description=request.seoDescription,
        tags=request.tags,
    )

    logger.info(f"Updated Shopify product {request.productGid}")

    return result
