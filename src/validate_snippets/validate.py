"""Editorial checks run on an article before it is posted.

Failures here are almost always the result of building the snippet
incorrectly in InDesign (missing styles, stray double spaces, a caption
left behind after the photo was removed). Every rule is evaluated and
all violations are returned together.
"""

import logging

from extract_fields.models import Article

logger = logging.getLogger(__name__)

MIN_BODY_CHARS = 100
DOUBLE_SPACE = "  "

# (label used in messages, attribute on Article)
REQUIRED_FIELDS = (
    ("headline", "headline"),
    ("author name", "author_name"),
    ("kicker", "kicker"),
    ("author title", "author_title"),
)


def _has_double_space(value: str) -> bool:
    return DOUBLE_SPACE in value


def validate_article(article: Article, min_body_chars: int = MIN_BODY_CHARS) -> list[str]:
    """Return every editorial violation found in the article, in rule order."""
    errors: list[str] = []

    for label, attr in REQUIRED_FIELDS:
        value = getattr(article, attr)
        if not value:
            errors.append(f"No {label}.")
        if _has_double_space(value):
            errors.append(f"{label.capitalize()} contains two consecutive spaces.")

    body = article.body_html
    if not body:
        errors.append("No body text.")
    elif len(body) < min_body_chars:
        errors.append(f"Body text extremely short ({len(body)} characters).")

    has_photo = len(article.photo) > 0
    if article.photo_byline and not has_photo:
        errors.append("Photo byline without photo.")
    if article.photo_caption and not has_photo:
        errors.append("Photo caption without photo.")

    if _has_double_space(article.photo_byline):
        errors.append("Photo byline contains two consecutive spaces.")
    if _has_double_space(article.photo_caption):
        errors.append("Photo caption contains two consecutive spaces.")

    if errors:
        logger.info("Validation found %d problems", len(errors))
    return errors
