"""HTML escaping for values rendered into pages."""

from html.entities import codepoint2name

_BASE = {
    ord("&"): "&amp;",
    ord("<"): "&lt;",
    ord(">"): "&gt;",
    ord('"'): "&quot;",
    ord("'"): "&#039;",
}

# Every other character that has a named entity (é -> &eacute;, © -> &copy;).
_TABLE = {
    **{code: f"&{name};" for code, name in codepoint2name.items()},
    **_BASE,
}


def escape(data: str) -> str:
    """Escape `data` for display in a browser.

    Both quote styles are escaped, and any character with a named HTML entity
    is replaced by that entity.
    """
    return data.translate(_TABLE)
