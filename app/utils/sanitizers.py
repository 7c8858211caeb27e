"""
HTML sanitization for generated descriptions
Allow-list based tag filtering and whitespace normalization
"""
import re
import html

from ..config import ALLOWED_TAGS

_SCRIPT_BLOCK = re.compile(r'<script[\s\S]*?</script\s*>', re.IGNORECASE)
_STYLE_BLOCK = re.compile(r'<style[\s\S]*?</style\s*>', re.IGNORECASE)
_TAG = re.compile(r'<([^>]+)>')


def sanitize_html(content: str) -> str:
    """
    Keep only allow-listed tags, without attributes
    Args:
        content: Untrusted HTML produced by the text generator
    Returns:
        HTML containing only <p>, <ul>, <ol>, <li>, <strong>, <em> and <br>
    """
    if not content:
        return ""

    # Drop script and style blocks along with their content
    content = _SCRIPT_BLOCK.sub('', content)
    content = _STYLE_BLOCK.sub('', content)

    content = _TAG.sub(_rewrite_tag, content)

    return normalize_whitespace(content)


def _rewrite_tag(match: "re.Match[str]") -> str:
    raw = match.group(1).strip()
    is_closing = raw.startswith('/')
    if is_closing:
        raw = raw[1:]

    parts = raw.split()
    # "br/" in "<br/>" names the br tag
    name = parts[0].rstrip('/').lower() if parts else ""

    if name not in ALLOWED_TAGS:
        return ""

    if name == "br":
        return "<br>"

    return f"</{name}>" if is_closing else f"<{name}>"


def normalize_whitespace(content: str) -> str:
    """
    Collapse runs of spaces and blank lines
    Args:
        content: Text or HTML content
    Returns:
        Content with single spaces, at most one blank line, and no outer whitespace
    """
    if not content:
        return ""

    content = content.replace("&nbsp;", " ").replace("\u00A0", " ")

    # Spaces hugging a line break go with it
    content = re.sub(r'[ \t]+\n', '\n', content)
    content = re.sub(r'\n[ \t]+', '\n', content)

    content = re.sub(r'\n{3,}', '\n\n', content)
    content = re.sub(r'[ \t]{2,}', ' ', content)

    return content.strip()


def strip_html_tags(content: str) -> str:
    """
    Render HTML as plain text, keeping line structure
    Args:
        content: HTML content
    Returns:
        Plain text content
    """
    if not content:
        return ""

    text = re.sub(r'<br\s*/?>\n?', '\n', content, flags=re.IGNORECASE)
    text = re.sub(r'</(p|div|li|ul|ol)>', '\n', text, flags=re.IGNORECASE)
    text = re.sub(r'<[^>]+>', '', text)

    text = html.unescape(text)

    return normalize_whitespace(text)
