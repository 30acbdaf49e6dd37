"""Pytest fixtures for test configuration.

Global test safety measures:
 - Run Qt without a display by forcing the offscreen platform plugin
 - Never read a developer's .env (load_config skips it under pytest)
"""
import os
from typing import Any, Dict

import pytest


def pytest_sessionstart(session):  # type: ignore[no-untyped-def]
    os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


@pytest.fixture(autouse=True)
def _clean_ulm_env(monkeypatch):
    """Drop ULM__* variables leaking in from the developer's shell."""
    for key in list(os.environ):
        if key.startswith('ULM__') or key == 'ULM_ENABLE_DOTENV':
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def test_config() -> Dict[str, Any]:
    """Provide a minimal test configuration as a dict.

    Tests should pass cfg to CLI/modules directly rather than setting
    environment variables.
    """
    return {
        'log_level': 'DEBUG',
        'api': {
            'base_url': 'http://api.test',
            'token': 'secret-token',
            'timeout': None,
            'max_retries': 3,
        },
        'users': {
            'page_size': 10,
            'search_debounce_ms': 500,
        },
    }
