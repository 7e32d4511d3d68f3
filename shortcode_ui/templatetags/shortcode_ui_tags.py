# shortcode_ui/templatetags/shortcode_ui_tags.py

from django import template
from django.utils.html import json_script

from shortcode_ui.apps import get_shortcode_ui
from shortcode_ui.editor import editor_initialized, get_editor_data
from shortcode_ui.signals import assets_enqueued, editor_loaded

register = template.Library()

DATA_ELEMENT_ID = "shortcode-ui-data"
_ENQUEUED_FLAG = "_shortcode_ui_enqueued"


def _mark_enqueued(context):
    """
    Flag the page as having its editor assets enqueued; return the old flag.

    The flag lives on the request, or on the bottom layer of the render
    context when rendering without one, so included templates share it.
    """
    request = context.get("request")
    if request is not None:
        enqueued = getattr(request, _ENQUEUED_FLAG, False)
        setattr(request, _ENQUEUED_FLAG, True)
        return enqueued

    state = context.render_context.dicts[0]
    enqueued = state.get(_ENQUEUED_FLAG, False)
    state[_ENQUEUED_FLAG] = True
    return enqueued


@register.simple_tag(takes_context=True)
def shortcode_ui_editor(context, post=None, editor_id="content"):
    """
    Emit the shortcode UI editor payload as a JSON <script> element.

    Usage: {% load shortcode_ui_tags %}{% shortcode_ui_editor post %}
    """
    registry = get_shortcode_ui().registry
    editor_initialized(registry, {}, editor_id)

    post_type = getattr(post, "post_type", None)
    data = get_editor_data(registry, post_type)

    output = ""
    if data is not None:
        output = json_script(data, DATA_ELEMENT_ID)

        if not _mark_enqueued(context):
            assets_enqueued.send(sender=None, post=post)

    editor_loaded.send(sender=None, post=post, editor_id=editor_id)
    return output
