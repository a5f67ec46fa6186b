"""
Encoder Settings Test Suite

Environment-driven configuration and its effect on address handling.

Usage:
    pytest tests/test_schemas/test_settings.py -v
"""

import importlib
import logging

import pytest

import sys
from pathlib import Path
src_path = Path(__file__).parent.parent.parent / "src"
sys.path.insert(0, str(src_path))

import wyvern_schemas
from wyvern_schemas.constants import PACKAGE_LOGGER, configure_logging, get_settings, init_logging
from wyvern_schemas.encoders.calls import normalize_value
from wyvern_schemas.engine.exceptions import ConfigurationError, ValidationError

USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
BAD_CHECKSUM = "0xa0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    monkeypatch.delenv("WYVERN_LOG_LEVEL", raising=False)
    monkeypatch.delenv("WYVERN_STRICT_ADDRESSES", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = get_settings()
    assert settings.log_level == "WARNING"
    assert settings.strict_addresses is False


def test_settings_are_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("WYVERN_LOG_LEVEL", "DEBUG")
    assert get_settings() is first
    get_settings.cache_clear()
    assert get_settings().log_level == "DEBUG"


def test_log_level_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("WYVERN_LOG_LEVEL", "info")
    assert get_settings().log_level == "INFO"


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("WYVERN_LOG_LEVEL", "LOUD")
    with pytest.raises(ConfigurationError):
        get_settings()


def test_invalid_boolean(monkeypatch):
    monkeypatch.setenv("WYVERN_STRICT_ADDRESSES", "maybe")
    with pytest.raises(ConfigurationError):
        get_settings()


def test_lenient_addresses_are_normalised():
    assert normalize_value("address", BAD_CHECKSUM) == USDC


def test_strict_addresses_reject_bad_checksum(monkeypatch):
    monkeypatch.setenv("WYVERN_STRICT_ADDRESSES", "true")
    with pytest.raises(ValidationError):
        normalize_value("address", BAD_CHECKSUM)
    assert normalize_value("address", USDC) == USDC
    assert normalize_value("address", USDC.lower()) == USDC


def test_configure_logging(monkeypatch):
    monkeypatch.setenv("WYVERN_LOG_LEVEL", "DEBUG")
    package_logger = configure_logging()
    configure_logging()
    assert package_logger.name == "wyvern_schemas"
    assert package_logger.level == logging.DEBUG
    assert sum(isinstance(h, logging.NullHandler) for h in package_logger.handlers) == 1
    package_logger.setLevel(logging.NOTSET)


def test_import_survives_invalid_settings(monkeypatch):
    monkeypatch.setenv("WYVERN_LOG_LEVEL", "LOUD")
    monkeypatch.setenv("WYVERN_STRICT_ADDRESSES", "maybe")
    importlib.reload(wyvern_schemas)
    assert wyvern_schemas.encode_call is not None
    with pytest.raises(ConfigurationError):
        get_settings()


def test_init_logging_leaves_level_to_application():
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.NOTSET)
    init_logging()
    assert package_logger.level == logging.NOTSET
    root = logging.getLogger()
    previous = root.level
    root.setLevel(logging.DEBUG)
    try:
        assert logging.getLogger("wyvern_schemas.encoders.calls").getEffectiveLevel() == logging.DEBUG
    finally:
        root.setLevel(previous)


def test_init_logging_applies_level_from_environment(monkeypatch):
    monkeypatch.setenv("WYVERN_LOG_LEVEL", "info")
    package_logger = init_logging()
    try:
        assert package_logger.level == logging.INFO
    finally:
        package_logger.setLevel(logging.NOTSET)


def test_init_logging_ignores_invalid_level(monkeypatch):
    monkeypatch.setenv("WYVERN_LOG_LEVEL", "LOUD")
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.NOTSET)
    init_logging()
    assert package_logger.level == logging.NOTSET
    assert sum(isinstance(h, logging.NullHandler) for h in package_logger.handlers) == 1
