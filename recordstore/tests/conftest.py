"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

# Add repo root for imports - do this before other imports
repo_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(repo_root))

import pytest

from recordstore.repositories.memory_repository import KeyedMemoryRepository, MemoryRepository
from recordstore.services import config_service


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate tests from RECORDSTORE_* variables and the cached config."""
    for name in (
        config_service.ENV_CONFIG_PATH,
        config_service.ENV_ID_STRATEGY,
        config_service.ENV_FALSY_ID_LISTS_ALL,
        config_service.ENV_LOG_LEVEL,
    ):
        monkeypatch.delenv(name, raising=False)
    config_service.reset_config_service()
    yield
    config_service.reset_config_service()


@pytest.fixture
def repo():
    """Empty positional repository."""
    return MemoryRepository({})


@pytest.fixture
def keyed_repo():
    """Empty repository with stable IDs."""
    return KeyedMemoryRepository({})
