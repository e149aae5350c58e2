"""Style and class attribute extraction.

Only a handful of signals are read from inline CSS and class names: text
alignment, color, font size/weight and whether the element asks for
margins or padding. Nothing here evaluates a cascade; absent or malformed
attributes simply yield fewer keys (or None).
"""

import re
from typing import Any, Dict, Optional

from bs4 import Tag

_ALIGN_RE = re.compile(r'text-align\s*:\s*([a-z-]+)', re.I)
_COLOR_RE = re.compile(
    r'(?<![\w-])color\s*:\s*(#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{3})\b|rgba?\([^)]+\)|[a-zA-Z]+)\s*(!important)?'
)
_FONT_SIZE_RE = re.compile(r'font-size\s*:\s*(\d+)(px|pt|em|rem)?\s*(!important)?', re.I)
_FONT_WEIGHT_RE = re.compile(r'font-weight\s*:\s*(\d+|bold|normal)\s*(!important)?', re.I)

STYLE_ALIGNMENTS = {
    'center': 'CENTER',
    'right': 'RIGHT',
    'justify': 'JUSTIFY',
}

# Checked in order; a later match overrides an earlier one.
CLASS_ALIGNMENTS = [
    (('center', 'text-center'), 'CENTER'),
    (('right', 'text-right'), 'RIGHT'),
    (('justify', 'text-justify'), 'JUSTIFY'),
]
HIGHLIGHT_CLASSES = ('highlight', 'important')
SECTION_CLASSES = ('section', 'container')


def parse_style(style: Optional[str]) -> Optional[Dict[str, Any]]:
    """Parse an inline style string into a style descriptor."""
    if not style:
        return None

    descriptor = {}

    if 'margin' in style:
        descriptor['hasMargin'] = True
    if 'padding' in style:
        descriptor['hasPadding'] = True

    if 'text-align' in style:
        match = _ALIGN_RE.search(style)
        value = match.group(1).lower() if match else ''
        descriptor['alignment'] = STYLE_ALIGNMENTS.get(value, 'LEFT')

    color_match = _COLOR_RE.search(style)
    if color_match:
        descriptor['color'] = color_match.group(1)

    size_match = _FONT_SIZE_RE.search(style)
    if size_match:
        descriptor['fontSize'] = int(size_match.group(1))

    weight_match = _FONT_WEIGHT_RE.search(style)
    if weight_match:
        weight = weight_match.group(1).lower()
        if weight == 'bold':
            descriptor['fontWeight'] = 700
        elif weight == 'normal':
            descriptor['fontWeight'] = 400
        else:
            descriptor['fontWeight'] = int(weight)

    return descriptor


def parse_class(class_attr: Any) -> Optional[Dict[str, Any]]:
    """Classify a class attribute (string or BeautifulSoup list) by substring."""
    if not class_attr:
        return None
    if isinstance(class_attr, (list, tuple)):
        class_str = ' '.join(str(c) for c in class_attr)
    else:
        class_str = str(class_attr)
    if not class_str.strip():
        return None

    descriptor = {}

    if any(key in class_str for key in HIGHLIGHT_CLASSES):
        descriptor['highlight'] = True

    for keys, alignment in CLASS_ALIGNMENTS:
        if any(key in class_str for key in keys):
            descriptor['alignment'] = alignment

    if any(key in class_str for key in SECTION_CLASSES):
        descriptor['isSection'] = True

    return descriptor


def element_style(elem: Tag) -> Optional[Dict[str, Any]]:
    return parse_style(elem.get('style'))


def element_class(elem: Tag) -> Optional[Dict[str, Any]]:
    return parse_class(elem.get('class'))


def is_section(elem: Tag) -> bool:
    """True for containers whose class marks them as a page section."""
    descriptor = element_class(elem)
    return bool(descriptor and descriptor.get('isSection'))
