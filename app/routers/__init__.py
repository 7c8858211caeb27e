"""
API Routers for the listing optimizer
"""
from .optimize import router as optimize_router
from .shopify import router as shopify_router

__all__ = [
    "optimize_router",
    "shopify_router",
]
