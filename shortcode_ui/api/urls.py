"""
URL patterns for the shortcode preview API.

Endpoints:
- GET preview - Render one shortcode
- GET preview/bulk - Render several shortcodes
"""

from django.urls import path

from .views import BulkPreviewView, PreviewView

app_name = "shortcode_ui"

urlpatterns = [
    path(
        "preview",
        PreviewView.as_view(),
        name="preview",
    ),
    path(
        "preview/bulk",
        BulkPreviewView.as_view(),
        name="bulk-preview",
    ),
]
