"""
Base models and mixins for the shortcode_ui app.
"""

from django.db import models


class TimeStampedModel(models.Model):
    """Abstract base model that adds created_at and updated_at timestamps."""

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True, db_index=True)

    class Meta:
        abstract = True


class UniqueSlugMixin:
    """
    Mixin that provides a method to generate a unique slug for a model.

    Expects the model to have a 'slug' field.
    """

    def _unique_slug(self, base: str) -> str:
        """Generate a unique slug, appending a counter if needed."""
        slug = base
        counter = 2

        while self.__class__.objects.filter(slug=slug).exclude(pk=self.pk).exists():
            slug = f"{base}-{counter}"
            counter += 1

        return slug
