"""
Shortcode expansion engine.

Expands bracketed shortcode markup into HTML:

    [gallery ids="1,2"]                 → output of the "gallery" handler
    [pullquote]Quote text[/pullquote]   → handler receives the inner content
    [[gallery]]                         → literal "[gallery]" (escaped)

Tags without a registered handler are left as they are. Handlers are called
as ``handler(atts, content, tag, context)`` where ``context`` carries the
engine (``context["engine"]``), the current document (``context["post"]``)
and any extras set by the caller.
"""

import logging
import re
from contextlib import contextmanager

logger = logging.getLogger(__name__)

# Attribute grammar: name="v", name='v', name=v, "positional", 'positional', positional
ATTS_PATTERN = re.compile(
    r"""([\w-]+)\s*=\s*"([^"]*)"(?:\s|$)"""
    r"""|([\w-]+)\s*=\s*'([^']*)'(?:\s|$)"""
    r"""|([\w-]+)\s*=\s*([^\s'"]+)(?:\s|$)"""
    r"""|"([^"]*)"(?:\s|$)"""
    r"""|'([^']*)'(?:\s|$)"""
    r"""|(\S+)(?:\s|$)"""
)

_SPACE_LIKE = re.compile("[\u00a0\u200b]+")


def shortcode_regex(tags):
    """
    Build the regex matching any of ``tags``.

    Groups:
        1: an extra "[" (escaped shortcode)
        2: tag name
        3: attribute text
        4: "/" for a self-closing tag
        5: enclosed content
        6: an extra "]" (escaped shortcode)
    """
    tagregexp = "|".join(re.escape(tag) for tag in tags)
    return re.compile(
        r"\[(\[?)"
        r"(" + tagregexp + r")"
        r"(?![\w-])"
        r"([^\]/]*(?:/(?!\])[^\]/]*)*?)"
        r"(?:(/)\]|\](?:([^\[]*(?:\[(?!/\2\])[^\[]*)*)\[/\2\])?)"
        r"(\]?)",
        re.DOTALL,
    )


def parse_atts(text):
    """
    Parse the attribute part of a shortcode into a dict.

    Named attributes are keyed by their lower-cased name, positional values
    by their integer position.
    """
    atts = {}
    text = _SPACE_LIKE.sub(" ", text or "")
    position = 0

    for match in ATTS_PATTERN.finditer(text):
        if match.group(1):
            atts[match.group(1).lower()] = match.group(2)
        elif match.group(3):
            atts[match.group(3).lower()] = match.group(4)
        elif match.group(5):
            atts[match.group(5).lower()] = match.group(6)
        else:
            value = next(
                group for group in match.group(7, 8, 9) if group is not None
            )
            atts[position] = value
            position += 1

    return atts


class ShortcodeEngine:
    def __init__(self):
        self._handlers = {}
        self._atts_filters = {}
        self._context = {"engine": self}

    # --- Handlers ---

    def add_shortcode(self, tag, handler):
        if not tag or not re.fullmatch(r"[^<>&/\[\]\x00-\x20=]+", tag):
            logger.warning(f"Invalid shortcode name {tag!r}: skipping registration")
            return
        self._handlers[tag] = handler

    def remove_shortcode(self, tag):
        self._handlers.pop(tag, None)

    def shortcode_exists(self, tag):
        return tag in self._handlers

    @property
    def tags(self):
        return list(self._handlers)

    # --- Attributes ---

    def add_atts_filter(self, tag, callback):
        """Run ``callback(out, pairs, atts, tag)`` whenever ``tag`` resolves its attributes."""
        callbacks = self._atts_filters.setdefault(tag, [])
        if callback not in callbacks:
            callbacks.append(callback)

    def shortcode_atts(self, pairs, atts, tag=None):
        """
        Combine supplied attributes with known defaults.

        Only keys present in ``pairs`` are kept. When ``tag`` is given, the
        filters registered for it run over the result.
        """
        atts = atts or {}
        out = {
            name: atts[name] if name in atts else default
            for name, default in pairs.items()
        }

        if tag:
            for callback in self._atts_filters.get(tag, []):
                out = callback(out, pairs, atts, tag)

        return out

    # --- Context ---

    @property
    def context(self):
        return self._context

    @contextmanager
    def post_context(self, post, **extra):
        """Make ``post`` the current document while expanding shortcodes."""
        previous = self._context
        self._context = {**previous, "post": post, **extra}
        try:
            yield self._context
        finally:
            self._context = previous

    # --- Expansion ---

    def do_shortcode(self, text):
        """Expand every registered shortcode found in ``text``."""
        if not text or "[" not in text:
            return text

        present = [tag for tag in self._handlers if f"[{tag}" in text]
        if not present:
            return text

        return shortcode_regex(present).sub(self._expand_match, text)

    def _expand_match(self, match):
        # [[tag]] is an escaped shortcode: emit it without the outer brackets
        if match.group(1) == "[" and match.group(6) == "]":
            return match.group(0)[1:-1]

        tag = match.group(2)
        handler = self._handlers.get(tag)
        if handler is None:
            return match.group(0)

        atts = parse_atts(match.group(3))
        content = match.group(5)

        try:
            output = handler(atts, content, tag, self._context)
        except Exception as e:
            logger.error(f"Shortcode handler for [{tag}] failed: {e}", exc_info=True)
            return match.group(0)

        if output is None:
            output = ""

        return match.group(1) + str(output) + match.group(6)
