import pytest
import requests

from nodes_core.commons import files
from nodes_core.commons.exceptions import ArgumentError, ConfigEmpty, ConfigMissing, MalformedEntry
from nodes_core.commons.files import load_and_read


class _Response:
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError('{} Client Error'.format(self.status_code))


def test_load_local(tmp_path):
    config_file = tmp_path / 'nodes.yml'
    config_file.write_text('nodes:\n  web:\n    box: ubuntu/focal64\n  db:\n    box: ubuntu/jammy64\n')

    data = load_and_read(str(config_file), 'nodes file')

    assert list(data['nodes'].keys()) == ['web', 'db']


def test_load_path_scheme(tmp_path):
    config_file = tmp_path / 'nodes.yml'
    config_file.write_text('{"nodes": {"web": null}}')

    data = load_and_read('path:{}'.format(config_file), 'nodes file')

    assert data == {'nodes': {'web': None}}


def test_load_missing(tmp_path):
    with pytest.raises(ConfigMissing):
        load_and_read(str(tmp_path / 'nodes.yml'), 'nodes file')


def test_load_empty(tmp_path):
    config_file = tmp_path / 'nodes.yml'
    config_file.write_text('')

    with pytest.raises(ConfigEmpty):
        load_and_read(str(config_file), 'nodes file')


def test_load_not_a_dictionary(tmp_path):
    config_file = tmp_path / 'nodes.yml'
    config_file.write_text('- web\n- db\n')

    with pytest.raises(MalformedEntry):
        load_and_read(str(config_file), 'nodes file')


def test_load_invalid_yaml(tmp_path):
    config_file = tmp_path / 'nodes.yml'
    config_file.write_text('nodes: [web\n')

    with pytest.raises(MalformedEntry) as e:
        load_and_read(str(config_file), 'nodes file')

    assert '\n' not in str(e.value)


def test_load_unknown_scheme():
    with pytest.raises(ArgumentError):
        load_and_read('ftp://example.org/nodes.yml', 'nodes file')


def test_load_http(monkeypatch):
    monkeypatch.setattr(files.requests, 'get', lambda location, timeout: _Response('nodes:\n  web: {}\n'))

    data = load_and_read('https://example.org/nodes.yml', 'nodes file')

    assert data == {'nodes': {'web': {}}}


def test_load_http_not_found(monkeypatch):
    monkeypatch.setattr(files.requests, 'get', lambda location, timeout: _Response('', status_code=404))

    with pytest.raises(ConfigMissing):
        load_and_read('https://example.org/nodes.yml', 'nodes file')


def test_load_http_uses_timeout(monkeypatch):
    calls = []

    def get(location, **kwargs):
        calls.append(kwargs)
        return _Response('nodes:\n  web: {}\n')

    monkeypatch.setattr(files.requests, 'get', get)

    load_and_read('https://example.org/nodes.yml', 'nodes file')

    assert calls == [{'timeout': files.HTTP_TIMEOUT}]
