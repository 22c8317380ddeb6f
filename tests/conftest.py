"""Pytest configuration and shared fixtures for bounded-rand tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

import bounded_rand._config as config_module


@pytest.fixture
def reset_state() -> Iterator[None]:
    """Reset the default sampler and undo configure_logging around a test."""
    root = logging.getLogger()
    level = root.level
    config_module._config = None
    config_module._sampler = None
    yield
    config_module._config = None
    config_module._sampler = None
    structlog.reset_defaults()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove sampler environment variables."""
    monkeypatch.delenv(config_module.SOURCE_ENV, raising=False)
    monkeypatch.delenv(config_module.SEED_ENV, raising=False)
    return monkeypatch
