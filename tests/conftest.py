from unittest.mock import Mock

import pytest
from loguru import logger

import narigama_option


@pytest.fixture
def spy():
    """
    Build a Mock that returns `return_value`, use it to count how often a
    callback was invoked.
    """

    def factory(return_value=None):
        return Mock(return_value=return_value)

    return factory


@pytest.fixture
def logs():
    """
    Capture narigama_option's log records as formatted strings. The package
    logger is disabled again afterwards.
    """
    messages = []
    logger.enable(narigama_option.log.PACKAGE)
    sink_id = logger.add(messages.append, level="DEBUG", format="{level} {message}")

    try:
        yield messages

    finally:
        logger.remove(sink_id)
        logger.disable(narigama_option.log.PACKAGE)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch):
    for key in ("NARIGAMA_OPTION_LOG", "NARIGAMA_OPTION_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
