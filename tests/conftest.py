"""Root conftest — shared test configuration.

Invariants:
    - Tests never talk to a real WordPress: WP_URL points at a reserved test host
    - get_settings() cache is cleared around every test (env changes are visible)
    - Root logger handlers/level restored after every test (setup_logging is global)
"""

import logging
import os

import pytest

from wp_frontend.config import get_settings
import wp_frontend.infrastructure.observability as observability

os.environ.setdefault("WP_URL", "http://wp.test")
os.environ.pop("WP_API_KEY", None)


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logger():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)
    observability._handler = None
