import logging

import pytest
from pydantic import ValidationError

from collection_client.config import ClientConfig, ClientSettings
from collection_client.logging_config import LOGGER_NAME, configure_logging


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("VECTORDB_BASE_URL", "http://vectors:9000")
    monkeypatch.setenv("VECTORDB_RETRIES", "0")
    monkeypatch.setenv("VECTORDB_STRICT_SCHEMA", "true")
    monkeypatch.setenv("VECTORDB_LOG_LEVEL", "debug")

    s = ClientSettings(_env_file=None)
    assert s.log_level == "DEBUG"
    cfg = s.to_config()
    assert cfg == ClientConfig(base_url="http://vectors:9000", retries=0, strict_schema=True)


def test_settings_reject_bad_values(monkeypatch):
    monkeypatch.setenv("VECTORDB_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        ClientSettings(_env_file=None)

    monkeypatch.delenv("VECTORDB_LOG_LEVEL")
    monkeypatch.setenv("VECTORDB_RETRIES", "-1")
    with pytest.raises(ValidationError):
        ClientSettings(_env_file=None)


def test_configure_logging_is_idempotent():
    logger = configure_logging("DEBUG")
    n = len(logger.handlers)
    assert configure_logging(logging.INFO) is logger
    assert len(logger.handlers) == n == 1
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.INFO
    assert logger.propagate is False
