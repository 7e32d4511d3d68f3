"""
Sanitizers for preview request parameters.

The editor sends shortcodes slash-escaped and the bulk query list either as a
JSON array or in bracket notation:

    queries[0][counter]=1&queries[0][shortcode]=[gallery]
"""

import json
import math
import re

_SLASHED = re.compile(r"\\(.?)", re.DOTALL)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_BRACKET_KEY = re.compile(r"^(\w+)\[(\d+)\]\[(\w+)\]$")

# absint saturates at the largest signed 64-bit integer
MAX_POST_ID = 2**63 - 1


def sanitize_shortcode(shortcode):
    """Strip transport backslashes: ``\\x`` → ``x``, ``\\\\`` → ``\\``, ``\\0`` → NUL."""
    if not isinstance(shortcode, str):
        return ""

    def unslash(match):
        char = match.group(1)
        return "\0" if char == "0" else char

    return _SLASHED.sub(unslash, shortcode)


def sanitize_post_id(post_id) -> int:
    """Coerce anything to a non-negative integer (unparseable values become 0)."""
    if isinstance(post_id, bool):
        return int(post_id)
    if isinstance(post_id, int):
        return min(abs(post_id), MAX_POST_ID)
    if isinstance(post_id, float):
        if not math.isfinite(post_id):
            return 0
        return min(abs(int(post_id)), MAX_POST_ID)
    if isinstance(post_id, str):
        match = _LEADING_INT.match(post_id)
        if match:
            return min(abs(int(match.group(1))), MAX_POST_ID)
    return 0


def validate_queries(queries) -> bool:
    return isinstance(queries, list)


def sanitize_queries(queries):
    """Sanitize each ``{counter, shortcode}`` query of a bulk request."""
    clean_queries = []
    for query in queries:
        if not isinstance(query, dict):
            query = {}
        clean_queries.append(
            {
                "counter": sanitize_post_id(query.get("counter")),
                "shortcode": sanitize_shortcode(query.get("shortcode")),
            }
        )
    return clean_queries


def parse_queries(params, name="queries"):
    """
    Read the bulk query list from request parameters.

    Returns None when the parameter is missing. A JSON value that does not
    decode is returned as the raw string so validation rejects it.
    """
    if name in params:
        raw = params.get(name)
        try:
            return json.loads(raw)
        except (TypeError, ValueError):
            return raw

    indexed = {}
    for key in params.keys():
        match = _BRACKET_KEY.match(key)
        if not match or match.group(1) != name:
            continue
        index, field = int(match.group(2)), match.group(3)
        indexed.setdefault(index, {})[field] = params.get(key)

    if not indexed:
        return None

    return [indexed[index] for index in sorted(indexed)]
