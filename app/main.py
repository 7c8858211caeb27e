# app/main.py - LISTING OPTIMIZER API
# Handles: AI content optimization, Shopify product update

import logging
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from app import __version__
from app.config import Settings, settings
from app.dependencies import get_settings
from app.errors import GeneratorError, MissingCredentialError, PublishError, PublishRejectedError
from app.models import HealthResponse
from app.routers import optimize_router, shopify_router
from app.utils.validators import SchemaValidationError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Listing Optimizer",
    description="AI product copy with sanitized, schema-validated output",
    version=__version__
)

# CORS middleware - ALLOW ALL
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(optimize_router)
app.include_router(shopify_router)


# ============================================================
# HEALTH CHECK
# ============================================================

@app.get("/healthz", response_model=HealthResponse)
async def healthz(app_settings: Settings = Depends(get_settings)):
    """Health check endpoint"""
    return HealthResponse(
        status="ok",
        version=__version__,
        openai_configured=app_settings.openai_configured,
        shopify_configured=app_settings.shopify_configured,
    )


# ============================================================
# ERROR HANDLERS
# ============================================================

@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions"""
    logger.error(f"HTTP {exc.status_code}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
        }
    )


@app.exception_handler(SchemaValidationError)
async def schema_validation_handler(request: Request, exc: SchemaValidationError):
    """Generated content failed validation"""
    logger.warning(f"Validation failed: {exc}")
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "error": str(exc),
            "issues": [issue.to_dict() for issue in exc.issues],
        }
    )


@app.exception_handler(GeneratorError)
async def generator_error_handler(request: Request, exc: GeneratorError):
    """Text generator failed or returned unusable content"""
    logger.error(f"Generator error: {exc}")
    return JSONResponse(
        status_code=502,
        content={
            "success": False,
            "error": str(exc),
        }
    )


@app.exception_handler(MissingCredentialError)
async def missing_credential_handler(request: Request, exc: MissingCredentialError):
    """Required credential not configured"""
    logger.error(f"Configuration error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": str(exc),
        }
    )


@app.exception_handler(PublishRejectedError)
async def publish_rejected_handler(request: Request, exc: PublishRejectedError):
    """Commerce platform rejected one or more fields"""
    logger.warning(f"Publish rejected: {exc}")
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": str(exc),
            "userErrors": exc.user_errors,
        }
    )


@app.exception_handler(PublishError)
async def publish_error_handler(request: Request, exc: PublishError):
    """Commerce platform request failed"""
    logger.error(f"Publish error: {exc}")
    # Upstream success codes never reach the caller on a failed publish
    status_code = exc.status_code if exc.status_code and exc.status_code >= 400 else 502
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": str(exc),
            "details": exc.response_body,
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
        }
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
