"""
Service module exports
"""
from .content_pipeline import ContentPipeline, PipelineState, reshape_generated
from .generator import OpenAIGenerator, TextGenerator
from .prompts import build_user_prompt
from .shopify_publisher import CommercePublisher, ShopifyPublisher

__all__ = [
    "ContentPipeline",
    "PipelineState",
    "reshape_generated",
    "OpenAIGenerator",
    "TextGenerator",
    "build_user_prompt",
    "CommercePublisher",
    "ShopifyPublisher",
]
