"""Block dispatcher and tree walker.

``dispatch_block`` maps one block-level element to a list of nodes,
``walk`` converts all children of a container. The two call each other
(lists and divs walk their children, the walker dispatches block
elements) and both count depth on the shared ``ConversionContext``.
"""

from typing import Any, Dict, List

from bs4 import Tag

from html_to_ricos import nodes as n
from html_to_ricos.context import ConversionContext
from html_to_ricos.inline import BLOCK_TAGS, is_text, process_inline, process_inline_children
from html_to_ricos.spacing import spaced
from html_to_ricos.styles import element_class, element_style, is_section
from html_to_ricos.tables import build_table

HEADING_TAGS = frozenset(['h1', 'h2', 'h3', 'h4', 'h5', 'h6'])
# Gathered, with loose text, into one paragraph when met directly in a container
INLINE_TAGS = frozenset(['strong', 'b', 'em', 'i', 'u', 'a', 'span'])
TABLE_SECTION_TAGS = frozenset(['thead', 'tbody', 'tfoot', 'tr'])
CELL_TAGS = frozenset(['th', 'td'])
DIV_BLOCK_CHILD_TAGS = BLOCK_TAGS | {'table'}


def _flattened(elem: Tag, ctx: ConversionContext) -> List[Dict[str, Any]]:
    """Plain paragraph of an element's text, used past the depth limit."""
    text = elem.get_text().strip()
    if not text:
        return []
    return [n.paragraph(ctx, [n.text_node(text)])]


def _trim_run(content: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Strip outer whitespace of a gathered inline run."""
    while content and content[0].get('type') == n.TEXT:
        text = content[0]['textData']['text'].lstrip()
        if text:
            content[0]['textData']['text'] = text
            break
        content.pop(0)
    while content and content[-1].get('type') == n.TEXT:
        text = content[-1]['textData']['text'].rstrip()
        if text:
            content[-1]['textData']['text'] = text
            break
        content.pop()
    return content


def _paragraph(elem: Tag, ctx: ConversionContext) -> List[Dict[str, Any]]:
    style = element_style(elem)
    content = process_inline(elem, ctx)
    if style is None:
        return [n.paragraph(ctx, content)]
    # margin/padding is approximated as one level of indentation
    indentation = 1 if style.get('hasMargin') or style.get('hasPadding') else None
    return [n.paragraph(ctx, content, alignment=style.get('alignment') or n.AUTO,
                        indentation=indentation)]


def _heading(elem: Tag, ctx: ConversionContext) -> List[Dict[str, Any]]:
    tag = elem.name.lower()
    style = element_style(elem) or {}
    node = n.heading(ctx, int(tag[1]), process_inline(elem, ctx),
                     alignment=style.get('alignment') or n.AUTO)
    return spaced(ctx, tag, [node])


def _list(elem: Tag, ctx: ConversionContext) -> List[Dict[str, Any]]:
    tag = elem.name.lower()
    node_type = n.ORDERED_LIST if tag == 'ol' else n.BULLETED_LIST
    return spaced(ctx, tag, [n.block_node(ctx, node_type, walk(elem, ctx))])


def _div(elem: Tag, ctx: ConversionContext) -> List[Dict[str, Any]]:
    descriptor = element_class(elem) or {}
    has_block_children = any(
        isinstance(child, Tag) and child.name.lower() in DIV_BLOCK_CHILD_TAGS
        for child in elem.children
    )

    if has_block_children:
        content = walk(elem, ctx)
    else:
        content = [n.paragraph(ctx, process_inline(elem, ctx), alignment=descriptor.get('alignment'))]

    if descriptor.get('isSection'):
        return spaced(ctx, 'section', content)
    return content


def dispatch_block(elem: Tag, ctx: ConversionContext) -> List[Dict[str, Any]]:
    """Convert one block element into zero or more nodes."""
    if ctx.exhausted:
        return _flattened(elem, ctx)

    tag = elem.name.lower()
    with ctx.nested():
        if tag == 'p':
            return _paragraph(elem, ctx)

        if tag in HEADING_TAGS:
            return _heading(elem, ctx)

        if tag in {'ul', 'ol'}:
            return _list(elem, ctx)

        if tag == 'li':
            return [n.block_node(ctx, n.LIST_ITEM, process_inline(elem, ctx))]

        if tag == 'blockquote':
            return spaced(ctx, tag, [n.block_node(ctx, n.BLOCKQUOTE, process_inline(elem, ctx))])

        if tag in {'pre', 'code'}:
            code = n.block_node(ctx, n.CODE_BLOCK, [n.text_node(elem.get_text())])
            return spaced(ctx, tag, [code])

        if tag == 'div':
            return _div(elem, ctx)

        # Anything else becomes a plain paragraph
        return [n.paragraph(ctx, process_inline(elem, ctx))]


def _flush_run(run: List[Any], parent: Tag, ctx: ConversionContext,
               out: List[Dict[str, Any]]) -> None:
    if not run:
        return
    content = _trim_run(process_inline_children(run, parent, ctx))
    if content:
        out.append(n.paragraph(ctx, content))
    del run[:]


def _walk_element(elem: Tag, ctx: ConversionContext, out: List[Dict[str, Any]]) -> None:
    tag = elem.name.lower()

    if tag in HEADING_TAGS:
        if out and not n.is_spacing(out[-1]):
            out.append(n.spacing_node(ctx))
        out.extend(dispatch_block(elem, ctx))
    elif tag == 'table':
        out.extend(spaced(ctx, tag, [build_table(elem, ctx)]))
    elif tag in TABLE_SECTION_TAGS:
        # Stray table parts outside a <table>
        out.extend(walk(elem, ctx))
    elif tag in CELL_TAGS:
        content = process_inline(elem, ctx)
        if content:
            out.append(n.paragraph(ctx, content))
    elif tag == 'img':
        out.append(n.image_node(ctx, elem))
    elif tag == 'hr':
        out.append(n.block_node(ctx, n.DIVIDER))
    elif tag == 'br':
        out.append(n.spacing_node(ctx))
    else:
        out.extend(dispatch_block(elem, ctx))
        if tag == 'div' and is_section(elem):
            out.extend(spaced(ctx, 'walker-section', []))


def walk(elem: Tag, ctx: ConversionContext) -> List[Dict[str, Any]]:
    """Convert the children of a container into an ordered node list."""
    if ctx.exhausted:
        return _flattened(elem, ctx)

    out = []
    run = []
    with ctx.nested():
        for child in elem.children:
            if is_text(child) or (isinstance(child, Tag) and child.name.lower() in INLINE_TAGS):
                run.append(child)
            elif isinstance(child, Tag):
                _flush_run(run, elem, ctx, out)
                _walk_element(child, ctx, out)
        _flush_run(run, elem, ctx, out)
    return out
