"""Shared fixtures for the unit tests."""

import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging configuration done by setup_logging or the CLI."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep configuration tests independent of the caller's environment."""
    for name in (
        "REFLECT_MAPPER_CONFIG_PATH",
        "REFLECT_MAPPER_ENVIRONMENT",
        "REFLECT_MAPPER_INCLUDE_NULL",
        "REFLECT_MAPPER_MAX_NESTING",
        "REFLECT_MAPPER_JSON_INDENT",
        "REFLECT_MAPPER_JSON_SORT_KEYS",
        "REFLECT_MAPPER_JSON_ENSURE_ASCII",
        "REFLECT_MAPPER_LOG_LEVEL",
        "REFLECT_MAPPER_LOG_FORMAT",
        "REFLECT_MAPPER_LOG_REDACT_VALUES",
    ):
        monkeypatch.delenv(name, raising=False)
