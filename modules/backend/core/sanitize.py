"""
HTML Sanitization.

Escapes HTML-significant characters in user text before it is stored,
so clients can render todos without interpreting markup.
"""

# Ampersand first, otherwise the entities produced below get escaped again.
HTML_ESCAPES: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#x27;"),
    ("/", "&#x2F;"),
)


def sanitize_html(text: str) -> str:
    """
    Escape &, <, >, ", ' and / as HTML entities.

    Example:
        >>> sanitize_html("<b>hi</b>")
        '&lt;b&gt;hi&lt;&#x2F;b&gt;'
    """
    for char, entity in HTML_ESCAPES:
        text = text.replace(char, entity)
    return text
