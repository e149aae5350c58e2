"""Spacing policy and the normalization pass.

Vertical rhythm is emulated with spacing nodes (see ``nodes.spacing_node``).
All spacing decisions live in the tables below: ``EMIT_RULES`` says how
many spacing nodes a construct emits before and after itself while the
tree is walked, ``GAP_POLICY`` says which neighbouring node kinds must be
separated in the final document. ``normalize_spacing`` then collapses,
fills and trims so the output never has adjacent or edge spacing nodes.
"""

from typing import Any, Dict, List, Tuple

from html_to_ricos import nodes as n
from html_to_ricos.context import ConversionContext

ANY = '*'

# construct -> (spacing before, spacing after)
EMIT_RULES: Dict[str, Tuple[int, int]] = {
    'h1': (0, 1),
    'h2': (1, 2),
    'h3': (1, 1),
    'h4': (0, 1),
    'h5': (0, 1),
    'h6': (0, 1),
    'ul': (0, 1),
    'ol': (0, 1),
    'blockquote': (0, 1),
    'pre': (0, 1),
    'code': (0, 1),
    'table': (0, 1),
    'section': (2, 2),
    # extra run the walker appends after a section container
    'walker-section': (0, 2),
}

# (previous kind, next kind) -> a spacing node must separate them
GAP_POLICY: Dict[Tuple[str, str], bool] = {
    (ANY, n.HEADING): True,
    (n.HEADING, ANY): True,
}


def spaced(ctx: ConversionContext, construct: str,
           content: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Surround ``content`` with the spacing ``EMIT_RULES`` prescribes."""
    before, after = EMIT_RULES.get(construct, (0, 0))
    return (
        [n.spacing_node(ctx) for _ in range(before)]
        + content
        + [n.spacing_node(ctx) for _ in range(after)]
    )


def needs_gap(previous: Dict[str, Any], following: Dict[str, Any]) -> bool:
    prev_kind = previous.get('type')
    next_kind = following.get('type')
    for key in ((prev_kind, next_kind), (prev_kind, ANY), (ANY, next_kind)):
        if GAP_POLICY.get(key):
            return True
    return False


def collapse_spacing(nodes: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Reduce every run of consecutive spacing nodes to a single one."""
    collapsed = []
    for node in nodes:
        if n.is_spacing(node) and collapsed and n.is_spacing(collapsed[-1]):
            continue
        collapsed.append(node)
    return collapsed


def fill_gaps(nodes: List[Dict[str, Any]], ctx: ConversionContext) -> List[Dict[str, Any]]:
    """Insert one spacing node between neighbours the gap policy separates."""
    filled = []
    for node in nodes:
        if (filled and not n.is_spacing(node) and not n.is_spacing(filled[-1])
                and needs_gap(filled[-1], node)):
            filled.append(n.spacing_node(ctx))
        filled.append(node)
    return filled


def trim_spacing(nodes: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    start = 0
    end = len(nodes)
    while start < end and n.is_spacing(nodes[start]):
        start += 1
    while end > start and n.is_spacing(nodes[end - 1]):
        end -= 1
    return nodes[start:end]


def normalize_spacing(nodes: List[Dict[str, Any]], ctx: ConversionContext) -> List[Dict[str, Any]]:
    """Collapse runs, separate headings, then trim leading/trailing spacing."""
    nodes = collapse_spacing(nodes)
    nodes = fill_gaps(nodes, ctx)
    return trim_spacing(nodes)
