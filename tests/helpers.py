"""Small accessors used across tests."""

from html_to_ricos.nodes import is_spacing


def text_of(node):
    return node['textData']['text']


def decorations_of(node):
    return node['textData'].get('decorations')


def kinds(nodes):
    """Node types with spacing nodes shown as 'SPACING'."""
    return ['SPACING' if is_spacing(node) else node['type'] for node in nodes]


def iter_nodes(nodes):
    for node in nodes:
        yield node
        for child in iter_nodes(node.get('nodes', [])):
            yield child
