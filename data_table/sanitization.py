"""
HTML sanitization for cell content.

Cell formatters that pass markup through (links, badges) run it through
``sanitize_html`` first, so row data can never inject script into a table.
"""

import bleach

# Tags and attributes allowed in sanitized cell content
ALLOWED_TAGS = ['a', 'span', 'strong', 'em', 'br', 'small', 'code', 'pre']
ALLOWED_ATTRIBUTES = {
    'a': ['href', 'target', 'rel', 'title'],
    'span': ['class', 'title'],
    '*': ['class', 'title']
}
ALLOWED_PROTOCOLS = ['http', 'https', 'mailto']


def sanitize_html(html_content) -> str:
    """
    Sanitize HTML content to prevent XSS attacks.

    Only the tags in ALLOWED_TAGS survive; disallowed tags are stripped and
    their text kept. ``None`` and empty input yield an empty string.

    Args:
        html_content: Raw HTML content to sanitize

    Returns:
        Sanitized HTML content safe for rendering
    """
    if not html_content:
        return ''

    return bleach.clean(
        str(html_content),
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=True
    )
