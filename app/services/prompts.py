"""
Prompt construction for content generation
Every product field renders as "Label: value" or "Label: (none)"
"""
from typing import List, Optional

from ..config import DEFAULT_LANGUAGE, EMPTY_FIELD
from ..models import OptimizeRequest
from ..utils.sanitizers import strip_html_tags


def format_value(value: Optional[str]) -> str:
    """Trimmed value, or the empty marker when absent or blank"""
    if not value or not value.strip():
        return EMPTY_FIELD
    return value.strip()


def format_list(values: Optional[List[str]]) -> str:
    """Comma-joined non-blank entries, or the empty marker"""
    if not values:
        return EMPTY_FIELD

    filtered = [v.strip() for v in values if v and v.strip()]
    return ", ".join(filtered) if filtered else EMPTY_FIELD


def build_user_prompt(product: OptimizeRequest) -> str:
    """
    Render merchant product fields as a fixed-shape instruction
    Args:
        product: Merchant-supplied product fields
    Returns:
        One line per field, in a stable order
    """
    language = product.language or DEFAULT_LANGUAGE
    description = strip_html_tags(product.descriptionHtml or "")

    return "\n".join([
        f"Language: {language}",
        f"Product title: {format_value(product.title)}",
        f"Current description: {description or EMPTY_FIELD}",
        f"Current tags: {format_list(product.tags)}",
        f"Current SEO title: {format_value(product.seoTitle)}",
        f"Current SEO description: {format_value(product.seoDescription)}",
        "",
        "Extra context:",
        f"Audience: {format_value(product.audience)}",
        f"Inspiration: {format_value(product.inspiration)}",
        f"Cultural references (only if relevant): {format_list(product.culturalRefs)}",
        f"Has illustration artwork: {'true' if product.illustration else 'false'}",
        f"Materials: {format_value(product.materials)}",
        f"Colorway: {format_value(product.colorway)}",
        f"Fit: {format_value(product.fit)}",
        f"Sizing notes: {format_value(product.sizingNotes)}",
        f"Care: {format_value(product.care)}",
        f"Print method: {format_value(product.printMethod)}",
        f"Origin: {format_value(product.origin)}",
    ])
