import base64
import logging
import importlib

import requests

from canadapost_api import config
from canadapost_api.auth import ApiKeyAuth, encode_api_key


def test_encode_api_key():
    assert encode_api_key('user:secret') == base64.b64encode(b'user:secret').decode('ascii')
    assert base64.b64decode(encode_api_key('clé:pässword')).decode('utf-8') == 'clé:pässword'


def test_auth_sets_basic_header():
    prepared = requests.Request('GET', 'https://ct.soa-gw.canadapost.ca/rs/ship/service',
                                auth=ApiKeyAuth('user:secret')).prepare()
    assert prepared.headers['Authorization'] == 'Basic dXNlcjpzZWNyZXQ='


def test_timeout_from_environment(monkeypatch):
    monkeypatch.setenv('CANADAPOST_TIMEOUT', '7.5')
    assert config.get_timeout() == 7.5


def test_invalid_timeout_falls_back_to_default(monkeypatch):
    monkeypatch.setenv('CANADAPOST_TIMEOUT', 'soon')
    assert config.get_timeout() == config.DEFAULT_TIMEOUT
    monkeypatch.setenv('CANADAPOST_TIMEOUT', '-1')
    assert config.get_timeout() == config.DEFAULT_TIMEOUT
    monkeypatch.delenv('CANADAPOST_TIMEOUT')
    assert config.get_timeout() == config.DEFAULT_TIMEOUT


def test_language_from_environment(monkeypatch):
    monkeypatch.setenv('CANADAPOST_LANGUAGE', 'fr-CA')
    try:
        assert importlib.reload(config).CANADAPOST_LANGUAGE == 'fr-CA'
    finally:
        monkeypatch.delenv('CANADAPOST_LANGUAGE')
        importlib.reload(config)


def test_set_logger_level(monkeypatch):
    logger = logging.getLogger('canadapost_api.test')
    monkeypatch.setenv('LOG_LEVEL', 'debug')
    config.set_logger_level(logger)
    assert logger.level == logging.DEBUG
    monkeypatch.setenv('LOG_LEVEL', 'chatty')
    config.set_logger_level(logger)
    assert logger.level == logging.INFO
