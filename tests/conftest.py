"""
Shared pytest fixtures for engine tests.
"""

import sys
from pathlib import Path

import pytest

# Ensure repository root is on sys.path so `tests.helpers` imports resolve
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from engine.settings import Settings, get_settings


@pytest.fixture
def test_settings() -> Settings:
    """Test settings that ignore any local .env file."""
    return Settings(environment="test", _env_file=None)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Keep cached settings from leaking between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
