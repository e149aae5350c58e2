import pytest

from html_to_ricos import nodes as n
from html_to_ricos.spacing import (
    EMIT_RULES,
    collapse_spacing,
    fill_gaps,
    needs_gap,
    normalize_spacing,
    spaced,
    trim_spacing,
)

from helpers import kinds


@pytest.fixture
def make(ctx):
    """Build a node list from kind names: S (spacing), P, H, L."""
    def _make(spec):
        built = []
        for kind in spec.split():
            if kind == 'S':
                built.append(n.spacing_node(ctx))
            elif kind == 'P':
                built.append(n.paragraph(ctx, [n.text_node('p')]))
            elif kind == 'H':
                built.append(n.heading(ctx, 2, [n.text_node('h')]))
            elif kind == 'L':
                built.append(n.block_node(ctx, n.BULLETED_LIST, []))
        return built
    return _make


@pytest.mark.unit
class TestSpacingShape:

    def test_spacing_node_shape(self, ctx):
        node = n.spacing_node(ctx)
        assert node == {
            'type': 'PARAGRAPH',
            'id': 'n1',
            'nodes': [{'type': 'TEXT', 'id': '', 'textData': {'text': ' '}}]
        }
        assert n.is_spacing(node)

    @pytest.mark.parametrize('text', ['  ', '\n', 'x', ''])
    def test_other_paragraphs_are_not_spacing(self, ctx, text):
        assert not n.is_spacing(n.paragraph(ctx, [n.text_node(text)]))

    def test_two_children_is_not_spacing(self, ctx):
        node = n.paragraph(ctx, [n.text_node(' '), n.text_node(' ')])
        assert not n.is_spacing(node)

    def test_heading_with_space_is_not_spacing(self, ctx):
        assert not n.is_spacing(n.heading(ctx, 1, [n.text_node(' ')]))


@pytest.mark.unit
class TestPolicy:

    def test_emit_rules(self, ctx):
        assert kinds(spaced(ctx, 'h2', [])) == ['SPACING'] * 3
        assert kinds(spaced(ctx, 'section', [])) == ['SPACING'] * 4
        assert spaced(ctx, 'p', []) == []

    def test_headings_need_gaps(self, make):
        p, h, lst = make('P H L')
        assert needs_gap(p, h)
        assert needs_gap(h, p)
        assert needs_gap(h, h)
        assert not needs_gap(p, lst)

    def test_every_heading_level_has_a_rule(self):
        for level in range(1, 7):
            assert f'h{level}' in EMIT_RULES


@pytest.mark.unit
class TestNormalize:

    @pytest.mark.parametrize('spec,expected', [
        ('S S P S S S', 'S P S'),
        ('P P', 'P P'),
        ('S', 'S'),
        ('', ''),
    ])
    def test_collapse(self, make, spec, expected):
        assert kinds(collapse_spacing(make(spec))) == kinds(make(expected))

    @pytest.mark.parametrize('spec,expected', [
        ('H P', 'H S P'),
        ('P H', 'P S H'),
        ('H H', 'H S H'),
        ('S H S', 'S H S'),
        ('P L', 'P L'),
        ('H', 'H'),
    ])
    def test_fill_gaps(self, make, ctx, spec, expected):
        assert kinds(fill_gaps(make(spec), ctx)) == kinds(make(expected))

    def test_trim(self, make):
        assert kinds(trim_spacing(make('S S P S P S'))) == kinds(make('P S P'))
        assert trim_spacing(make('S S')) == []

    def test_full_pass(self, make, ctx):
        result = normalize_spacing(make('S H S S H P S S L S'), ctx)
        assert kinds(result) == kinds(make('H S H S P S L'))

    def test_no_adjacent_or_edge_spacing(self, make, ctx):
        result = normalize_spacing(make('S S H H S S S P H S P S S'), ctx)
        assert not n.is_spacing(result[0])
        assert not n.is_spacing(result[-1])
        for left, right in zip(result, result[1:]):
            assert not (n.is_spacing(left) and n.is_spacing(right))
