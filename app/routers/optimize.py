"""
Optimize Router
Generate validated marketing copy for a single product
"""
import logging
from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import GeneratorFactory, check_key, get_generator_factory
from ..errors import GeneratorError
from ..models import GeneratedContent, OptimizeRequest
from ..services.content_pipeline import ContentPipeline
from ..utils.validators import SchemaValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Optimize"], dependencies=[Depends(check_key)])


@router.post("/optimize", response_model=GeneratedContent, response_model_exclude_none=True)
async def optimize(
    request: OptimizeRequest,
    generator_factory: GeneratorFactory = Depends(get_generator_factory),
):
    """
    Generate heading, description, SEO fields, tags and social ideas

    The generator output is sanitized, normalized and validated before it is returned:
    - descriptionHtml limited to <p>, <ul>, <ol>, <li>, <strong>, <em>, <br>
    - seoTitle ≤ 60 chars, seoDescription ≤ 160 chars
    - 3 to 8 unique lowercase tags and hashtags
    """
    if not request.title or not request.title.strip():
        raise HTTPException(status_code=400, detail="Title is required")

    logger.info(f"Optimizing product: {request.title}")

    pipeline = ContentPipeline(generator_factory())

    try:
        content = await pipeline.run(request)
    except GeneratorError as e:
        logger.error(f"Generation failed for {request.title}: {e}")
        raise
    except SchemaValidationError as e:
        logger.warning(f"Generated content rejected for {request.title}: {e}")
        raise

    logger.info(f"Generated content for {request.title} ({len(content.tags)} tags)")

    return content
