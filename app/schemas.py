"""
Generated content schema
The rule tree enforced on generator output, and the JSON Schema handed to the generator
"""
from .config import (
    HEADING_MIN_LENGTH,
    HEADING_MAX_LENGTH,
    DESCRIPTION_MIN_LENGTH,
    SEO_TITLE_MIN_LENGTH,
    SEO_TITLE_MAX_LENGTH,
    SEO_DESCRIPTION_MIN_LENGTH,
    SEO_DESCRIPTION_MAX_LENGTH,
    TAGS_MIN,
    TAGS_MAX,
    MOCKUP_SUGGESTIONS_MIN,
    SOCIAL_IDEAS_MIN,
    SUGGESTIONS_MAX,
    PRODUCT_TITLE_MAX_LENGTH,
)
from .utils.validators import array, object_, string

GENERATED_CONTENT_SCHEMA = object_({
    "heading": string(HEADING_MIN_LENGTH, HEADING_MAX_LENGTH),
    "descriptionHtml": string(DESCRIPTION_MIN_LENGTH),
    "seoTitle": string(SEO_TITLE_MIN_LENGTH, SEO_TITLE_MAX_LENGTH),
    "seoDescription": string(SEO_DESCRIPTION_MIN_LENGTH, SEO_DESCRIPTION_MAX_LENGTH),
    "tags": array(string(1), TAGS_MIN, TAGS_MAX),
    "hashtags": array(string(1), TAGS_MIN, TAGS_MAX),
    "mockupSuggestions": array(string(1), MOCKUP_SUGGESTIONS_MIN, SUGGESTIONS_MAX),
    "socialIdeas": array(string(1), SOCIAL_IDEAS_MIN, SUGGESTIONS_MAX),
    "productTitle": string(1, PRODUCT_TITLE_MAX_LENGTH).optional(),
})


def _string_list(min_items: int, max_items: int) -> dict:
    return {
        "type": "array",
        "minItems": min_items,
        "maxItems": max_items,
        "items": {"type": "string", "minLength": 1},
    }


# Understood by the generator, not by the validation engine
GENERATED_CONTENT_JSON_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "heading": {"type": "string", "minLength": HEADING_MIN_LENGTH, "maxLength": HEADING_MAX_LENGTH},
        "descriptionHtml": {
            "type": "string",
            "minLength": DESCRIPTION_MIN_LENGTH,
            "description": "HTML limited to <p>, <ul>, <ol>, <li>, <strong>, <em>, <br> tags",
        },
        "seoTitle": {"type": "string", "minLength": SEO_TITLE_MIN_LENGTH, "maxLength": SEO_TITLE_MAX_LENGTH},
        "seoDescription": {
            "type": "string",
            "minLength": SEO_DESCRIPTION_MIN_LENGTH,
            "maxLength": SEO_DESCRIPTION_MAX_LENGTH,
        },
        "tags": _string_list(TAGS_MIN, TAGS_MAX),
        "hashtags": _string_list(TAGS_MIN, TAGS_MAX),
        "mockupSuggestions": _string_list(MOCKUP_SUGGESTIONS_MIN, SUGGESTIONS_MAX),
        "socialIdeas": _string_list(SOCIAL_IDEAS_MIN, SUGGESTIONS_MAX),
        "productTitle": {"type": "string", "minLength": 1, "maxLength": PRODUCT_TITLE_MAX_LENGTH},
    },
    "required": [
        "heading",
        "descriptionHtml",
        "seoTitle",
        "seoDescription",
        "tags",
        "hashtags",
        "mockupSuggestions",
        "socialIdeas",
    ],
}
