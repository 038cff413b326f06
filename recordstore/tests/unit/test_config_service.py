"""Unit tests for ConfigService."""

import json

import pytest

from recordstore.models.domain import IdStrategy
from recordstore.repositories.memory_repository import (
    KeyedMemoryRepository,
    MemoryRepository,
    create_repository,
)
from recordstore.services.config_service import ConfigService, StoreSettings, get_config_service


class TestConfigService:
    """Test settings resolution."""

    def test_defaults(self):
        settings = ConfigService(environ={}).settings

        assert settings == StoreSettings()
        assert settings.id_strategy == IdStrategy.POSITIONAL
        assert settings.falsy_id_lists_all is False

    def test_env_overrides(self):
        environ = {
            "RECORDSTORE_ID_STRATEGY": "Sequential",
            "RECORDSTORE_FALSY_ID_LISTS_ALL": "yes",
            "RECORDSTORE_LOG_LEVEL": "debug",
        }
        settings = ConfigService(environ=environ).settings

        assert settings.id_strategy == IdStrategy.SEQUENTIAL
        assert settings.falsy_id_lists_all is True
        assert settings.log_level == "DEBUG"

    def test_config_file(self, tmp_path):
        config_file = tmp_path / "store.json"
        config_file.write_text(json.dumps({"idStrategy": "sequential", "falsyIdListsAll": True}))

        settings = ConfigService(environ={"RECORDSTORE_CONFIG": str(config_file)}).settings

        assert settings.id_strategy == IdStrategy.SEQUENTIAL
        assert settings.falsy_id_lists_all is True

    def test_env_beats_file(self, tmp_path):
        config_file = tmp_path / "store.json"
        config_file.write_text(json.dumps({"idStrategy": "sequential", "falsyIdListsAll": True}))
        environ = {"RECORDSTORE_ID_STRATEGY": "positional", "RECORDSTORE_FALSY_ID_LISTS_ALL": "0"}

        settings = ConfigService(config_file, environ=environ).settings

        assert settings.id_strategy == IdStrategy.POSITIONAL
        assert settings.falsy_id_lists_all is False

    def test_missing_config_file(self, tmp_path):
        service = ConfigService(tmp_path / "missing.json", environ={})

        with pytest.raises(FileNotFoundError):
            service.settings

    def test_invalid_strategy(self):
        with pytest.raises(ValueError, match="Invalid id strategy"):
            ConfigService(environ={"RECORDSTORE_ID_STRATEGY": "uuid"}).settings


class TestCreateRepository:
    """Test building repositories from settings."""

    def test_positional_by_default(self):
        repo = create_repository()

        assert type(repo) is MemoryRepository

    def test_sequential_from_env(self, monkeypatch):
        monkeypatch.setenv("RECORDSTORE_ID_STRATEGY", "sequential")

        repo = create_repository(model="orm-model")

        assert isinstance(repo, KeyedMemoryRepository)
        assert repo.model == "orm-model"

    def test_explicit_settings(self):
        settings = StoreSettings(falsy_id_lists_all=True)

        repo = create_repository(settings=settings)

        assert repo.settings is settings

    def test_global_instance_is_cached(self):
        assert get_config_service() is get_config_service()
