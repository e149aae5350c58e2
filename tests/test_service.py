import json
from urllib.parse import urlencode

import pytest

from html_to_ricos import service
from html_to_ricos.service import RequestError, check_length, extract_html, handle_convert


@pytest.mark.unit
class TestExtractHtml:

    def test_json_body(self):
        assert extract_html(b'{"html": "<p>a</p>"}', 'application/json') == '<p>a</p>'

    def test_form_body(self):
        body = urlencode({'html': '<p>a</p>'}).encode('utf-8')
        assert extract_html(body, 'application/x-www-form-urlencoded') == '<p>a</p>'

    def test_charset_from_content_type(self):
        body = json.dumps({'html': '<p>é</p>'}, ensure_ascii=False).encode('latin-1')
        assert extract_html(body, 'application/json; charset=latin-1') == '<p>é</p>'

    @pytest.mark.parametrize('body', [b'', b'{}', b'{"html": ""}', b'{"html": 3}', b'[1, 2]'])
    def test_missing_html(self, body):
        with pytest.raises(RequestError) as exc:
            extract_html(body, 'application/json')
        assert exc.value.status == 400
        assert exc.value.payload()['error'] == 'HTML content is required'

    def test_invalid_json(self):
        with pytest.raises(RequestError) as exc:
            extract_html(b'{nope', 'application/json')
        assert exc.value.payload() == {'error': 'Invalid JSON payload.'}


@pytest.mark.unit
class TestCheckLength:

    def test_within_limit(self):
        assert check_length('12') == 12
        assert check_length(None) == 0

    def test_over_limit(self, monkeypatch):
        monkeypatch.setenv('MAX_BODY_BYTES', '10')
        with pytest.raises(RequestError) as exc:
            check_length('11')
        assert exc.value.status == 413

    def test_bad_limit_uses_default(self, monkeypatch):
        monkeypatch.setenv('MAX_BODY_BYTES', 'lots')
        assert service.max_body_bytes() == service.DEFAULT_MAX_BODY_BYTES

    def test_bad_header(self):
        with pytest.raises(RequestError):
            check_length('abc')


@pytest.mark.unit
class TestHandleConvert:

    def test_success(self, capsys):
        status, payload = handle_convert(b'{"html": "<p>a</p>"}', 'application/json',
                                         config={'deterministic_ids': True})
        assert status == 200
        assert payload['nodes'][0]['id'] == 'n1'

        records = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
        assert [record["event"] for record in records] == ["convert_start", "convert_ok"]
        assert all(record["route"] == "/convert" for record in records)

    def test_bad_request(self, capsys):
        status, payload = handle_convert(b'{}', 'application/json')
        assert status == 400
        assert 'message' in payload
        assert json.loads(capsys.readouterr().out)['event'] == 'convert_bad_request'

    def test_conversion_failure(self, monkeypatch, capsys):
        def boom(self):
            raise RuntimeError('parser exploded')

        monkeypatch.setattr(service.HTMLToRicos, 'convert', boom)
        status, payload = handle_convert(b'{"html": "<p>a</p>"}', 'application/json')

        assert status == 500
        assert payload == {'error': 'Error converting HTML to Ricos', 'message': 'parser exploded'}
        lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
        assert lines[-1]['level'] == 'ERROR'
        assert lines[-1]['error'] == 'parser exploded'
