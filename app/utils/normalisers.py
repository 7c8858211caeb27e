"""
List and string normalization for generated content
Lossy but deterministic repairs applied before schema validation
"""
from typing import Any, List


def dedupe_lower(values: Any, max_items: int = 8) -> List[str]:
    """
    Case-insensitive de-duplication, first occurrence wins
    Args:
        values: Raw list of tags/hashtags (anything else yields an empty list)
        max_items: Maximum number of entries to keep
    Returns:
        Trimmed, lower-cased, unique, non-empty entries
    """
    if not isinstance(values, list):
        return []

    seen = set()
    result = []

    for value in values:
        if len(result) >= max_items:
            break

        normalized = ("" if value is None else str(value)).strip().lower()
        if not normalized or normalized in seen:
            continue

        seen.add(normalized)
        result.append(normalized)

    return result


def clamp(value: str, max_length: int) -> str:
    """Hard-truncate to max_length, then drop trailing whitespace"""
    if not value:
        return value

    if len(value) <= max_length:
        return value

    return value[:max_length].rstrip()


def clean_list(values: Any, max_items: int = 5) -> List[str]:
    """
    Trim entries, drop empty ones and cap the list
    Args:
        values: Raw list of suggestions (anything else yields an empty list)
        max_items: Maximum number of entries to keep
    Returns:
        Normalized list of strings
    """
    if not isinstance(values, list):
        return []

    cleaned = [str(v).strip() for v in values if v is not None]
    return [v for v in cleaned if v][:max_items]
