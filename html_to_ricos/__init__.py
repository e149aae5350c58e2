"""
HTML to Ricos

Converts sanitized HTML into a Ricos-style rich-text document (a tree of
block and inline nodes serialized as JSON).
"""

from html_to_ricos.converter import HTMLToRicos, convert, html_to_ricos, to_json
from html_to_ricos.ids import counter_ids, random_ids

__all__ = [
    'HTMLToRicos',
    'convert',
    'html_to_ricos',
    'to_json',
    'counter_ids',
    'random_ids',
]
