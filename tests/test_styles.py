import pytest

from html_to_ricos.styles import element_class, element_style, is_section, parse_class, parse_style


@pytest.mark.unit
class TestParseStyle:
    """Inline style attribute extraction."""

    @pytest.mark.parametrize('style', [None, ''])
    def test_absent_style(self, style):
        assert parse_style(style) is None

    def test_unrecognized_properties_give_empty_descriptor(self):
        assert parse_style('font-family: Arial') == {}

    def test_margin_and_padding(self):
        descriptor = parse_style('margin: 4px; padding-left: 2px')
        assert descriptor['hasMargin'] is True
        assert descriptor['hasPadding'] is True

    @pytest.mark.parametrize('style,expected', [
        ('text-align: center', 'CENTER'),
        ('text-align:right', 'RIGHT'),
        ('text-align: justify;', 'JUSTIFY'),
        ('text-align: left', 'LEFT'),
        ('text-align: start', 'LEFT'),
    ])
    def test_alignment(self, style, expected):
        assert parse_style(style)['alignment'] == expected

    @pytest.mark.parametrize('style,expected', [
        ('color: #ff0000', '#ff0000'),
        ('color: #abc !important', '#abc'),
        ('color: rgb(1, 2, 3)', 'rgb(1, 2, 3)'),
        ('color: rgba(1, 2, 3, 0.5)', 'rgba(1, 2, 3, 0.5)'),
        ('color: red', 'red'),
    ])
    def test_color(self, style, expected):
        assert parse_style(style)['color'] == expected

    def test_background_color_is_not_text_color(self):
        assert 'color' not in parse_style('background-color: red')
        assert parse_style('background-color: red; color: blue')['color'] == 'blue'

    def test_font_size_ignores_unit(self):
        assert parse_style('font-size: 18px')['fontSize'] == 18
        assert parse_style('font-size: 2em')['fontSize'] == 2

    @pytest.mark.parametrize('style,expected', [
        ('font-weight: bold', 700),
        ('font-weight: normal', 400),
        ('font-weight: 600 !important', 600),
    ])
    def test_font_weight(self, style, expected):
        assert parse_style(style)['fontWeight'] == expected


@pytest.mark.unit
class TestParseClass:
    """Class attribute classification."""

    @pytest.mark.parametrize('value', [None, '', [], '   '])
    def test_absent_class(self, value):
        assert parse_class(value) is None

    def test_alignment_classes(self):
        assert parse_class(['text-center'])['alignment'] == 'CENTER'
        assert parse_class('text-right')['alignment'] == 'RIGHT'
        assert parse_class('text-justify')['alignment'] == 'JUSTIFY'

    def test_later_alignment_wins(self):
        assert parse_class(['center', 'right'])['alignment'] == 'RIGHT'

    def test_highlight(self):
        assert parse_class('important-note')['highlight'] is True

    @pytest.mark.parametrize('value', ['section', 'page-section', 'container'])
    def test_section(self, value):
        assert parse_class(value)['isSection'] is True

    def test_plain_class(self):
        assert parse_class('intro') == {}


@pytest.mark.unit
def test_element_helpers(parse):
    div = parse('<div class="container text-center" style="color: red">x</div>').div
    assert element_style(div) == {'color': 'red'}
    assert element_class(div) == {'alignment': 'CENTER', 'isSection': True}
    assert is_section(div)
    assert not is_section(parse('<div>x</div>').div)
