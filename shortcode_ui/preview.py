"""
Shortcode preview rendering for the editor.

The editor shows the output of each shortcode in place; this module expands a
single shortcode, or a batch of them, the way the front end would.
"""

import logging

from .signals import after_do_shortcode, before_do_shortcode

logger = logging.getLogger(__name__)


def load_post(post_id):
    """Default document loader: the Post with ``post_id``, or None."""
    from shortcode_ui.models import Post

    return Post.objects.filter(pk=post_id).first()


class PreviewService:
    def __init__(self, engine, registry=None, post_loader=None):
        self.engine = engine
        self.registry = registry
        self.post_loader = post_loader or load_post

    def render_preview(self, shortcode, post_id=None):
        """
        Render ``shortcode`` as it would appear in ``post_id``.

        Broken shortcode markup is not an error: whatever the engine makes of
        it is the preview.
        """
        # registration installs the attribute decoding filters
        if self.registry is not None:
            self.registry.ensure_populated()

        post = None
        if post_id:
            post = self.post_loader(post_id)
            if post is None:
                logger.warning(
                    f"Post {post_id} not found; rendering preview without document context"
                )

        with self.engine.post_context(post, doing_preview=True):
            before = _collect_output(
                before_do_shortcode.send(sender=self.__class__, shortcode=shortcode, post=post)
            )
            html = self.engine.do_shortcode(shortcode) or ""
            after = _collect_output(
                after_do_shortcode.send(sender=self.__class__, shortcode=shortcode, post=post)
            )

        return before + html + after

    def render_bulk(self, queries, post_id=None):
        """
        Render several shortcodes in one go.

        Results keep the order of ``queries`` and echo each query's
        ``counter``. Queries that render to nothing are left out.
        """
        previews = []
        for query in queries:
            preview = self.render_preview(query["shortcode"], post_id)
            if not preview:
                logger.debug(f"Dropping empty preview for query {query['counter']}")
                continue

            previews.append(
                {
                    "shortcode": query["shortcode"],
                    "post_id": post_id,
                    "counter": query["counter"],
                    "preview": preview,
                }
            )

        return previews


def _collect_output(responses):
    return "".join(response for _receiver, response in responses if isinstance(response, str))
