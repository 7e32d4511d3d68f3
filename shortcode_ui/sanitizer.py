# shortcode_ui/sanitizer.py

from functools import lru_cache

import bleach


@lru_cache(maxsize=1)
def _get_bleach_config():
    """Cache the post-content allowlist."""
    allowed_tags = set(bleach.sanitizer.ALLOWED_TAGS).union(
        {
            # text
            "p",
            "br",
            "div",
            "span",
            "cite",
            "mark",
            "ins",
            "del",
            "s",
            "strike",
            "u",
            "q",
            "small",
            "big",
            "sup",
            "sub",
            # headings
            "h1",
            "h2",
            "h3",
            "h4",
            "h5",
            "h6",
            # lists
            "ul",
            "ol",
            "li",
            "hr",
            "blockquote",
            "dl",
            "dt",
            "dd",
            # code
            "pre",
            "code",
            "kbd",
            "samp",
            "var",
            # tables
            "table",
            "thead",
            "tbody",
            "tfoot",
            "tr",
            "th",
            "td",
            "caption",
            "colgroup",
            "col",
            # media
            "img",
            "figure",
            "figcaption",
            "audio",
            "video",
            "track",
            # semantic
            "a",
            "time",
            "address",
            "abbr",
            "acronym",
        }
    )

    allowed_attrs = {
        "*": ["class", "id", "title", "dir", "lang"],
        "a": ["href", "title", "rel", "target", "name"],
        "img": ["src", "alt", "title", "width", "height", "align"],
        "video": ["src", "width", "height", "controls", "preload", "loop", "muted", "autoplay", "poster"],
        "audio": ["src", "controls", "preload", "loop", "muted", "autoplay"],
        "track": ["src", "kind", "srclang", "label", "default"],
        "th": ["colspan", "rowspan", "scope", "align"],
        "td": ["colspan", "rowspan", "align"],
        "time": ["datetime"],
        "abbr": ["title"],
        "acronym": ["title"],
        "blockquote": ["cite"],
        "q": ["cite"],
        "del": ["datetime"],
        "ins": ["datetime"],
        "ol": ["start", "type", "reversed"],
        "col": ["span"],
        "colgroup": ["span"],
    }

    allowed_protocols = ["http", "https", "mailto", "tel"]

    return allowed_tags, allowed_attrs, allowed_protocols


def kses_post(value):
    """
    Reduce a free-text value to markup that is allowed in post content.

    Tags outside the allowlist are stripped (their text survives), attributes
    outside it are dropped and scripts/comments never make it through.
    Empty values are returned untouched.
    """
    if not value:
        return value

    allowed_tags, allowed_attrs, allowed_protocols = _get_bleach_config()

    return bleach.clean(
        str(value),
        tags=allowed_tags,
        attributes=allowed_attrs,
        protocols=allowed_protocols,
        strip=True,
        strip_comments=True,
    )
