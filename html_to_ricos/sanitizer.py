"""HTML sanitization against the converter's fixed allow-list."""

from bs4 import BeautifulSoup
import bleach
from bleach.css_sanitizer import CSSSanitizer

ALLOWED_TAGS = [
    'p', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
    'strong', 'em', 'b', 'i', 'u', 'a', 'img',
    'ul', 'ol', 'li', 'table', 'tr', 'td', 'th', 'tbody', 'thead',
    'div', 'span', 'br', 'hr', 'blockquote', 'code', 'pre'
]

_HEADING_ATTRIBUTES = ['class', 'style']

ALLOWED_ATTRIBUTES = {
    'a': ['href', 'target', 'rel', 'title', 'style', 'class'],
    'img': ['src', 'alt', 'width', 'height', 'style', 'class'],
    'td': ['colspan', 'rowspan', 'style', 'class'],
    'th': ['colspan', 'rowspan', 'style', 'class'],
    'div': ['class', 'id', 'style'],
    'span': ['class', 'id', 'style'],
    'p': ['class', 'style'],
    'h1': _HEADING_ATTRIBUTES,
    'h2': _HEADING_ATTRIBUTES,
    'h3': _HEADING_ATTRIBUTES,
    'h4': _HEADING_ATTRIBUTES,
    'h5': _HEADING_ATTRIBUTES,
    'h6': _HEADING_ATTRIBUTES,
    'ul': ['class', 'style'],
    'ol': ['class', 'style'],
    'li': ['class', 'style'],
    'blockquote': ['class', 'style'],
    'pre': ['class', 'style'],
    'code': ['class', 'style'],
    '*': ['style', 'class', 'id'],
}

# Only the properties the style extractor reads survive.
ALLOWED_CSS_PROPERTIES = [
    'color', 'font-size', 'font-weight', 'text-align',
    'margin', 'margin-top', 'margin-right', 'margin-bottom', 'margin-left',
    'padding', 'padding-top', 'padding-right', 'padding-bottom', 'padding-left',
]

# Elements dropped together with their text.
NON_TEXT_TAGS = ['head', 'script', 'style', 'textarea', 'option', 'noscript']


def sanitize_html(html_content: str, parser: str = 'lxml') -> str:
    """Restrict markup to the allow-list; disallowed tags are unwrapped."""
    soup = BeautifulSoup(html_content, parser)
    for elem in soup.find_all(NON_TEXT_TAGS):
        # children of an already removed <head> come up too
        if not elem.decomposed:
            elem.decompose()

    root = soup.body or soup
    return bleach.clean(
        root.decode_contents(),
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        css_sanitizer=CSSSanitizer(allowed_css_properties=ALLOWED_CSS_PROPERTIES),
        strip=True,
        strip_comments=True,
    )
