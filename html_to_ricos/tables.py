"""Table conversion.

Rows are collected with a flat search, so rows of nested sections (thead,
tbody, tfoot) and even nested tables end up in one grid. The layout
metadata is fixed scaffolding, not measured from the content.
"""

from typing import Any, Dict, List

from bs4 import Tag

from html_to_ricos import nodes as n
from html_to_ricos.context import ConversionContext
from html_to_ricos.inline import process_inline

COLUMN_WIDTH_RATIO = 150
COLUMN_MIN_WIDTH = 140
ROW_HEIGHT = 50
BORDER_COLOR = '#CFCFCF'
BORDER_WIDTH = 1
BORDER_STYLE = 'solid'

HEADER_SECTION_TAGS = ('thead',)


def _embolden(inline_nodes: List[Dict[str, Any]]) -> None:
    """Bold every text leaf, including those inside nested block content."""
    stack = list(inline_nodes)
    while stack:
        node = stack.pop()
        if node.get('type') != n.TEXT:
            stack.extend(node.get('nodes') or [])
            continue
        decorations = node['textData'].setdefault('decorations', [])
        if not any(d.get('type') == 'BOLD' for d in decorations):
            decorations.append(n.bold(700))


def _build_cell(cell: Tag, is_header: bool, ctx: ConversionContext) -> Dict[str, Any]:
    content = process_inline(cell, ctx)
    if not content:
        content = [n.text_node(cell.get_text())]
    if is_header:
        _embolden(content)

    cell_node = n.block_node(ctx, n.TABLE_CELL)
    colspan = n.parse_int(cell.get('colspan'))
    if colspan is not None:
        cell_node['cellData'] = {'colspan': colspan}
    cell_node['nodes'] = [n.paragraph(ctx, content, alignment=n.CENTER)]
    return cell_node


def build_table(elem: Tag, ctx: ConversionContext) -> Dict[str, Any]:
    """Table node for a <table>; a spacing node when it has no rows."""
    rows = elem.find_all('tr')
    if not rows:
        return n.spacing_node(ctx)

    table_rows = []
    rows_height = []
    max_cols = 0

    for row in rows:
        cells = row.find_all(['th', 'td'])
        if not cells:
            continue

        parent = row.parent
        header_row = isinstance(parent, Tag) and parent.name in HEADER_SECTION_TAGS
        max_cols = max(max_cols, len(cells))
        rows_height.append(ROW_HEIGHT)

        row_cells = [_build_cell(cell, header_row or cell.name == 'th', ctx) for cell in cells]
        table_rows.append(n.block_node(ctx, n.TABLE_ROW, row_cells))

    return n.block_node(ctx, n.TABLE, table_rows, tableData={
        'dimensions': {
            'colsWidthRatio': [COLUMN_WIDTH_RATIO] * max_cols,
            'rowsHeight': rows_height,
            'colsMinWidth': [COLUMN_MIN_WIDTH] * max_cols
        },
        'borderColor': BORDER_COLOR,
        'cellStyle': {
            'borderWidth': BORDER_WIDTH,
            'borderStyle': BORDER_STYLE
        }
    })
