"""
Signals sent by the shortcode UI.

- before_do_shortcode / after_do_shortcode: around every preview expansion.
  Sent with ``shortcode`` (the full shortcode text) and ``post`` (the current
  document or None). A receiver may return a string; it is emitted before
  (or after) the expanded shortcode in the preview.
- editor_loaded: every time the editor payload is rendered.
- assets_enqueued: the first time the editor payload is rendered in a request.
"""

from django.dispatch import Signal

before_do_shortcode = Signal()
after_do_shortcode = Signal()

editor_loaded = Signal()
assets_enqueued = Signal()
