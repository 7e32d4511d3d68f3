"""
Post model: the document a shortcode preview is rendered against.
"""

from django.conf import settings
from django.db import models
from django.template.defaultfilters import slugify

from .base import TimeStampedModel, UniqueSlugMixin


class Post(TimeStampedModel, UniqueSlugMixin):
    """
    Editable content.

    ``post_type`` decides which shortcode UIs the editor offers for it.
    """

    title = models.CharField(max_length=200)
    slug = models.SlugField(
        max_length=220,
        unique=True,
        blank=True,
        help_text="Auto-generated from title if blank.",
    )
    post_type = models.CharField(max_length=40, default="post", db_index=True)
    content = models.TextField(blank=True)
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="shortcode_ui_posts",
    )

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = self._unique_slug(slugify(self.title) or "post")
        super().save(*args, **kwargs)

    def can_edit(self, user) -> bool:
        """Whether ``user`` may edit this post."""
        if not user.is_authenticated:
            return False
        if user.is_superuser or user.has_perm("shortcode_ui.change_post"):
            return True
        return self.author_id is not None and self.author_id == user.pk
