"""
Errors raised by the content pipeline and its collaborators
"""
from typing import Any, List, Optional

from .utils.validators import SchemaValidationError


class GeneratorError(Exception):
    """Text generation failed or returned content that is not a JSON object."""
    pass


class MissingCredentialError(Exception):
    """A required credential is not configured. Not retryable."""

    def __init__(self, credential: str):
        super().__init__(f"Missing {credential} environment variable")
        self.credential = credential


class PublishError(Exception):
    """Commerce platform request failed."""

    def __init__(self, message: str, status_code: Optional[int] = None, response_body: Optional[Any] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class PublishRejectedError(PublishError):
    """Commerce platform accepted the request but rejected one or more fields."""

    def __init__(self, user_errors: List[Any]):
        messages = "; ".join(
            str(e.get("message", "")) if isinstance(e, dict) else str(e) for e in user_errors
        )
        super().__init__(f"Update rejected: {messages}", status_code=400)
        self.user_errors = user_errors


__all__ = [
    "GeneratorError",
    "MissingCredentialError",
    "PublishError",
    "PublishRejectedError",
    "SchemaValidationError",
]
