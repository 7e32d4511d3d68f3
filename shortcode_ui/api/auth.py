"""
Authorization for the preview API.

Provides @edit_post_required: the caller must be able to edit the post the
preview is rendered for (``post_id`` query parameter).
"""

from functools import wraps

from django.http import JsonResponse

from .sanitizers import sanitize_post_id


def can_edit_post(user, post_id) -> bool:
    """Whether ``user`` may edit the post with ``post_id``. Unknown posts never pass."""
    from shortcode_ui.models import Post

    if not post_id:
        return False

    post = Post.objects.filter(pk=post_id).first()
    if post is None:
        return False

    return post.can_edit(user)


def edit_post_required(view_func):
    """
    Decorator that requires edit rights on the requested post.

    Usage:
        @edit_post_required
        def my_view(request):
            # request.user may edit request.GET["post_id"]
            pass
    """

    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return JsonResponse(
                {"error": "Authentication required"},
                status=401,
            )

        post_id = sanitize_post_id(request.GET.get("post_id"))
        if not can_edit_post(request.user, post_id):
            return JsonResponse(
                {"error": "Not authorized"},
                status=403,
            )

        return view_func(request, *args, **kwargs)

    return wrapper
