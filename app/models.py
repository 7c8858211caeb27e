from pydantic import BaseModel, ConfigDict
from typing import List, Optional, Dict, Any, Literal, Tuple

# ============ Optimize Models ============
class OptimizeRequest(BaseModel):
    title: str = ""
    descriptionHtml: Optional[str] = None
    tags: Optional[List[str]] = None
    seoTitle: Optional[str] = None
    seoDescription: Optional[str] = None
    language: Literal["fr", "en"] = "fr"
    audience: Optional[str] = None
    inspiration: Optional[str] = None
    culturalRefs: Optional[List[str]] = None
    illustration: bool = False
    materials: Optional[str] = None
    colorway: Optional[str] = None
    fit: Optional[str] = None
    sizingNotes: Optional[str] = None
    care: Optional[str] = None
    printMethod: Optional[str] = None
    origin: Optional[str] = None

class GeneratedContent(BaseModel):
    """Validated generator output; only built from a successful schema parse"""
    model_config = ConfigDict(frozen=True)

    heading: str
    descriptionHtml: str
    seoTitle: str
    seoDescription: str
    tags: Tuple[str, ...]
    hashtags: Tuple[str, ...]
    mockupSuggestions: Tuple[str, ...]
    socialIdeas: Tuple[str, ...]
    productTitle: Optional[str] = None

# ============ Shopify Models ============
class ShopifyUpdateRequest(BaseModel):
    productGid: str = ""
    descriptionHtml: str = ""
    seoTitle: str = ""
    seoDescription: str = ""
    tags: List[str] = []

class ShopifyProduct(BaseModel):
    id: str
    title: Optional[str] = None
    handle: Optional[str] = None

class UserError(BaseModel):
    field: Optional[List[str]] = None
    message: str

class PublishResult(BaseModel):
    product: Optional[ShopifyProduct] = None
    userErrors: List[UserError] = []

# ============ Universal API Models ============
class HealthResponse(BaseModel):
    status: str
    version: Optional[str] = None
    openai_configured: Optional[bool] = None
    shopify_configured: Optional[bool] = None

class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    issues: Optional[List[Dict[str, Any]]] = None
