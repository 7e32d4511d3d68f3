"""
API views for shortcode previews.

Endpoints:
- GET /shortcode-ui/v1/preview?shortcode=...&post_id=... - Render one shortcode
- GET /shortcode-ui/v1/preview/bulk?post_id=...&queries=... - Render several shortcodes
"""

import logging

from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View

from shortcode_ui.apps import get_shortcode_ui

from .auth import edit_post_required
from .sanitizers import (
    parse_queries,
    sanitize_post_id,
    sanitize_queries,
    sanitize_shortcode,
    validate_queries,
)

logger = logging.getLogger(__name__)


@method_decorator(edit_post_required, name="dispatch")
class PreviewBaseView(View):
    """
    Shared plumbing for the preview endpoints.

    The preview service is taken from the app config unless one is passed
    to ``as_view(preview_service=...)``.
    """

    http_method_names = ["get"]
    preview_service = None

    def get_preview_service(self):
        if self.preview_service is not None:
            return self.preview_service
        return get_shortcode_ui().preview

    def get_post_id(self):
        return sanitize_post_id(self.request.GET.get("post_id"))


class PreviewView(PreviewBaseView):
    """
    Render a single shortcode for the editor preview.

    GET /shortcode-ui/v1/preview?shortcode=[pullquote]Hi[/pullquote]&post_id=3

    Response (200):
    {
        "shortcode": "[pullquote]Hi[/pullquote]",
        "post_id": 3,
        "preview": "<blockquote>Hi</blockquote>"
    }
    """

    def get(self, request, *args, **kwargs):
        shortcode = sanitize_shortcode(request.GET.get("shortcode", ""))
        post_id = self.get_post_id()

        logger.debug(f"Rendering preview for post {post_id}: {shortcode[:80]}")

        return JsonResponse(
            {
                "shortcode": shortcode,
                "post_id": post_id,
                "preview": self.get_preview_service().render_preview(shortcode, post_id),
            }
        )


class BulkPreviewView(PreviewBaseView):
    """
    Render several shortcodes in one request.

    GET /shortcode-ui/v1/preview/bulk?post_id=3&queries=[{"counter": 1, "shortcode": "[a]"}]

    Response (200):
    [
        {"shortcode": "[a]", "post_id": 3, "counter": 1, "preview": "..."}
    ]

    Queries that render to nothing are omitted.
    """

    def get(self, request, *args, **kwargs):
        queries = parse_queries(request.GET)
        if queries is None:
            return JsonResponse({"error": "queries is required"}, status=400)
        if not validate_queries(queries):
            return JsonResponse({"error": "queries must be a list"}, status=400)

        queries = sanitize_queries(queries)
        post_id = self.get_post_id()

        logger.debug(f"Rendering {len(queries)} bulk preview(s) for post {post_id}")

        previews = self.get_preview_service().render_bulk(queries, post_id)
        return JsonResponse(previews, safe=False)
