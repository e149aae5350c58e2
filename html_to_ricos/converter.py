"""
HTML to Ricos converter

Entry points: ``convert`` turns an already parsed tree into a document,
``HTMLToRicos`` / ``html_to_ricos`` take an HTML string through
sanitization and parsing first.
"""

import json
from typing import Any, Dict, Optional

from bs4 import BeautifulSoup, Tag

from html_to_ricos.blocks import walk
from html_to_ricos.context import DEFAULT_MAX_DEPTH, ConversionContext
from html_to_ricos.ids import IdSource, counter_ids, random_ids
from html_to_ricos.sanitizer import sanitize_html
from html_to_ricos.spacing import normalize_spacing

DEFAULT_CONFIG = {
    "sanitize": True,
    "parser": "lxml",
    "max_depth": DEFAULT_MAX_DEPTH,
    "deterministic_ids": False
}


def assemble(nodes) -> Dict[str, Any]:
    """Wrap the final node sequence in the document envelope."""
    return {
        'nodes': nodes
    }


def convert(root: Tag, ids: Optional[IdSource] = None,
            max_depth: int = DEFAULT_MAX_DEPTH) -> Dict[str, Any]:
    """Convert a parsed tree (normally <body>) into a Ricos document."""
    ctx = ConversionContext(ids=ids, max_depth=max_depth)
    nodes = walk(root, ctx)
    return assemble(normalize_spacing(nodes, ctx))


def to_json(document: Dict[str, Any], indent: Optional[int] = 2) -> str:
    return json.dumps(document, indent=indent, ensure_ascii=False)


class HTMLToRicos:
    """Converts an HTML string into a Ricos document."""

    def __init__(self, html_content: str, config: Optional[Dict[str, Any]] = None):
        merged = dict(DEFAULT_CONFIG)
        if config:
            merged.update(config)
        self.config = merged
        self.html_content = html_content

    def parse(self) -> Tag:
        """Sanitize (if enabled) and parse; returns the <body> to convert."""
        html_content = self.html_content
        if self.config.get("sanitize", True):
            html_content = sanitize_html(html_content, parser=self.config["parser"])
        soup = BeautifulSoup(html_content, self.config["parser"])
        return soup.body or soup

    def convert(self) -> Dict[str, Any]:
        ids = counter_ids() if self.config.get("deterministic_ids") else random_ids()
        return convert(self.parse(), ids=ids, max_depth=self.config["max_depth"])


def html_to_ricos(html_content: str, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return HTMLToRicos(html_content, config=config).convert()
