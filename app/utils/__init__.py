"""
Utility modules for generated content
"""
from .sanitizers import sanitize_html, strip_html_tags, normalize_whitespace
from .normalisers import dedupe_lower, clamp, clean_list
from .validators import SchemaValidationError, Issue, IssueCode

__all__ = [
    "sanitize_html",
    "strip_html_tags",
    "normalize_whitespace",
    "dedupe_lower",
    "clamp",
    "clean_list",
    "SchemaValidationError",
    "Issue",
    "IssueCode",
]
