"""
Models for the shortcode_ui app.

- base: Base models and mixins (TimeStampedModel, UniqueSlugMixin)
- post: Post, the document shortcode previews are rendered against
"""

from .base import TimeStampedModel, UniqueSlugMixin
from .post import Post

__all__ = [
    "TimeStampedModel",
    "UniqueSlugMixin",
    "Post",
]
