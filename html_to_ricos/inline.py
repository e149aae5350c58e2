"""Inline content: text runs, formatting tags, links, breaks and images.

Formatting tags (strong/b, em/i, u, a) are flattened to a single text
leaf holding their full text, so markup nested inside them loses its own
decorations. Block-level tags met in inline position are handed to the
block dispatcher and spliced in place instead of being rejected.
"""

from typing import Any, Dict, Iterable, List, Optional

from bs4 import NavigableString, Tag
from bs4.element import PreformattedString

from html_to_ricos import nodes as n
from html_to_ricos.context import ConversionContext
from html_to_ricos.styles import element_style

BLOCK_TAGS = frozenset([
    'p', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
    'div', 'blockquote', 'pre', 'ul', 'ol', 'li',
])

# tag -> decorations factory for flattened formatting tags
FORMATTING_TAGS = {
    'strong': lambda elem: [n.bold(700)],
    'b': lambda elem: [n.bold(700)],
    'em': lambda elem: [n.italic()],
    'i': lambda elem: [n.italic()],
    'u': lambda elem: [n.underline()],
    'a': lambda elem: [
        n.link(elem.get('href') or '', blank=elem.get('target') == '_blank'),
        n.underline(),
    ],
}


def is_text(child: Any) -> bool:
    return isinstance(child, NavigableString) and not isinstance(child, PreformattedString)


def parent_decorations(style: Optional[Dict[str, Any]]) -> Optional[List[Dict[str, Any]]]:
    """Decorations a parent's inline style imposes on each of its text children."""
    if not style or not (style.get('color') or style.get('fontWeight')):
        return None
    decorations = []
    if style.get('color'):
        decorations.append(n.color(style['color']))
    if style.get('fontWeight') and style['fontWeight'] >= 600:
        decorations.append(n.bold(style['fontWeight']))
    return decorations


def process_inline(elem: Tag, ctx: ConversionContext) -> List[Dict[str, Any]]:
    """Convert an element's children into an ordered run of inline nodes."""
    if ctx.exhausted:
        text = elem.get_text()
        return [n.text_node(text)] if text.strip() else []
    with ctx.nested():
        return process_inline_children(elem.children, elem, ctx)


def process_inline_children(children: Iterable[Any], parent: Tag,
                            ctx: ConversionContext) -> List[Dict[str, Any]]:
    """Inline conversion of ``children``; ``parent`` supplies the inherited style."""
    inline_nodes = []
    style = element_style(parent)

    for child in children:
        if is_text(child):
            text = str(child)
            if text.strip():
                inline_nodes.append(n.text_node(text, parent_decorations(style)))
        elif isinstance(child, Tag):
            inline_nodes.extend(_process_inline_element(child, ctx))

    return inline_nodes


def _process_inline_element(elem: Tag, ctx: ConversionContext) -> List[Dict[str, Any]]:
    tag = elem.name.lower()

    if tag in FORMATTING_TAGS:
        text = elem.get_text()
        if not text.strip():
            # Nothing to decorate; keep whatever else is inside (images).
            return process_inline(elem, ctx)
        return [n.text_node(text, FORMATTING_TAGS[tag](elem))]

    if tag == 'span':
        return process_inline(elem, ctx)

    if tag == 'br':
        return [n.text_node(n.LINE_BREAK_TEXT)]

    if tag == 'img':
        return [n.image_node(ctx, elem)]

    if tag in BLOCK_TAGS:
        from html_to_ricos.blocks import dispatch_block
        return dispatch_block(elem, ctx)

    return process_inline(elem, ctx)
