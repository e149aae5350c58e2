"""Builders for Ricos document nodes and text decorations.

Nodes are plain dicts shaped exactly like the serialized JSON so the
document can be handed to ``json.dumps`` without a conversion step.
"""

import re
from typing import Any, Dict, List, Optional

from bs4 import Tag

from html_to_ricos.context import ConversionContext

PARAGRAPH = 'PARAGRAPH'
HEADING = 'HEADING'
BULLETED_LIST = 'BULLETED_LIST'
ORDERED_LIST = 'ORDERED_LIST'
LIST_ITEM = 'LIST_ITEM'
TABLE = 'TABLE'
TABLE_ROW = 'TABLE_ROW'
TABLE_CELL = 'TABLE_CELL'
BLOCKQUOTE = 'BLOCKQUOTE'
CODE_BLOCK = 'CODE_BLOCK'
IMAGE = 'IMAGE'
DIVIDER = 'DIVIDER'
TEXT = 'TEXT'

AUTO = 'AUTO'
CENTER = 'CENTER'

SPACING_TEXT = ' '
LINE_BREAK_TEXT = '\n'

DEFAULT_IMAGE_WIDTH = 500
DEFAULT_IMAGE_HEIGHT = 300

_LEADING_INT_RE = re.compile(r'^\s*(\d+)')


def parse_int(value: Any) -> Optional[int]:
    """Leading integer of an attribute value ('640px' -> 640), else None."""
    if value is None:
        return None
    match = _LEADING_INT_RE.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def text_node(text: str, decorations: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    # Text leaves carry an empty id; downstream consumers expect it.
    node = {
        'type': TEXT,
        'id': '',
        'textData': {
            'text': text
        }
    }
    if decorations is not None:
        node['textData']['decorations'] = decorations
    return node


def block_node(ctx: ConversionContext, node_type: str,
               nodes: Optional[List[Dict[str, Any]]] = None, **data: Any) -> Dict[str, Any]:
    """Structural node with a fresh id; ``data`` holds the *Data payloads."""
    node = {
        'type': node_type,
        'id': ctx.new_id()
    }
    if nodes is not None:
        node['nodes'] = nodes
    node.update(data)
    return node


def paragraph(ctx: ConversionContext, nodes: List[Dict[str, Any]],
              alignment: Optional[str] = None, indentation: Optional[int] = None) -> Dict[str, Any]:
    node = block_node(ctx, PARAGRAPH, nodes)
    if alignment is not None:
        node['paragraphData'] = {
            'textStyle': {
                'textAlignment': alignment
            }
        }
        if indentation is not None:
            node['paragraphData']['indentation'] = indentation
    return node


def spacing_node(ctx: ConversionContext) -> Dict[str, Any]:
    """Empty-looking paragraph standing in for vertical whitespace."""
    return block_node(ctx, PARAGRAPH, [text_node(SPACING_TEXT)])


def is_spacing(node: Optional[Dict[str, Any]]) -> bool:
    """A spacing node is a paragraph whose only child is a single-space text."""
    if not node or node.get('type') != PARAGRAPH:
        return False
    children = node.get('nodes') or []
    if len(children) != 1:
        return False
    child = children[0]
    return child.get('type') == TEXT and child.get('textData', {}).get('text') == SPACING_TEXT


def heading(ctx: ConversionContext, level: int, nodes: List[Dict[str, Any]],
            alignment: str = AUTO) -> Dict[str, Any]:
    level = max(1, min(6, level))
    return block_node(ctx, HEADING, nodes, headingData={
        'level': level,
        'textStyle': {
            'textAlignment': alignment
        }
    })


def image_node(ctx: ConversionContext, elem: Tag) -> Dict[str, Any]:
    """Image node from an <img>; unusable dimensions fall back to 500x300."""
    width = parse_int(elem.get('width'))
    height = parse_int(elem.get('height'))
    return block_node(ctx, IMAGE, imageData={
        'containerData': {
            'width': {
                'size': 'CONTENT'
            },
            'alignment': CENTER,
            'textWrap': True
        },
        'image': {
            'src': {
                'url': elem.get('src') or ''
            },
            'width': DEFAULT_IMAGE_WIDTH if width is None else width,
            'height': DEFAULT_IMAGE_HEIGHT if height is None else height
        }
    })


def bold(weight: int = 700) -> Dict[str, Any]:
    return {'type': 'BOLD', 'fontWeightValue': weight}


def italic() -> Dict[str, Any]:
    return {'type': 'ITALIC'}


def underline() -> Dict[str, Any]:
    return {'type': 'UNDERLINE'}


def color(value: str) -> Dict[str, Any]:
    return {'type': 'COLOR', 'colorData': {'color': value}}


def link(url: str, blank: bool = False) -> Dict[str, Any]:
    return {
        'type': 'LINK',
        'linkData': {
            'link': {
                'url': url,
                'target': 'BLANK' if blank else 'SELF',
                'rel': {
                    'noreferrer': True
                }
            }
        }
    }
