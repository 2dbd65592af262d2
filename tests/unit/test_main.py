"""Unit tests for process startup in __main__.py.

Test coverage includes:
    1. build_app() wires the configured DAO into the services.
    2. main() runs the threaded server on the configured address.
    3. main() exits with status 1 on unreachable stores or bad configuration,
       including settings the DAO or the MongoDB driver rejects.
"""

import json
import logging
from unittest.mock import MagicMock

import pytest

from urlshortener import __main__ as entrypoint
from urlshortener.dao.exceptions import DataStoreError
from urlshortener.exceptions import BadConfigurationError
from urlshortener.utils.config import default_config


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    monkeypatch.setattr(entrypoint, 'initialize_logging', lambda: None)


@pytest.fixture
def create_link_dao(monkeypatch, memory_dao):
    mock = MagicMock(return_value=memory_dao)
    monkeypatch.setattr(entrypoint, 'create_link_dao', mock)
    return mock


# -------------------------------
# 1. build_app()
# -------------------------------


def test_build_app(create_link_dao, memory_dao):
    config = default_config()
    config['server']['base_url'] = 'https://sho.rt'

    app = entrypoint.build_app(config)
    client = app.test_client()
    response = client.post('/shorten', data={'url': 'https://example.com'})

    create_link_dao.assert_called_once_with(config)
    assert response.status_code == 200
    assert 'https://sho.rt/short/' in response.get_data(as_text=True)
    assert len(memory_dao.records) == 1


# -------------------------------
# 2. main() happy path
# -------------------------------


def test_main_runs_server(monkeypatch, create_link_dao):
    app = MagicMock()
    monkeypatch.setattr(entrypoint, 'create_app', lambda *a: app)
    monkeypatch.setenv('PORT', '8080')

    assert entrypoint.main() == 0
    app.run.assert_called_once_with(host='0.0.0.0', port=8080, threaded=True)


# -------------------------------
# 3. main() failures
# -------------------------------


def test_main_exits_when_store_unreachable(create_link_dao):
    create_link_dao.side_effect = DataStoreError("Can't connect to MongoDB collection 'urlshortener.urls'.")
    assert entrypoint.main() == 1


def test_main_exits_on_bad_configuration(monkeypatch):
    monkeypatch.setattr(entrypoint, 'load_config', MagicMock(side_effect=BadConfigurationError('bad')))
    assert entrypoint.main() == 1


def test_main_exits_on_non_integer_timeout(monkeypatch, tmp_path, caplog):
    path = tmp_path / 'config.json'
    path.write_text(json.dumps({'configs': {'mongo': {'timeout_ms': 'fast'}}}), encoding='utf-8')
    monkeypatch.setenv('CONFIG_PATH', str(path))

    with caplog.at_level(logging.ERROR, logger='urlshortener'):
        assert entrypoint.main() == 1

    assert 'Invalid configuration. Exiting.' in caplog.messages


def test_main_exits_on_malformed_mongo_uri(monkeypatch, caplog):
    monkeypatch.setenv('MONGO_URI', 'mongodb://db.internal:notaport')

    with caplog.at_level(logging.ERROR, logger='urlshortener'):
        assert entrypoint.main() == 1

    assert 'Invalid configuration. Exiting.' in caplog.messages
