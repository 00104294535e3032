"""Tests for the SQLite settings store."""

import pytest

from resubuild_ai.settings.local_store import LocalSettingsStore
from resubuild_ai.settings.preferences import PreferenceProvider


@pytest.fixture
def store(tmp_path):
    return LocalSettingsStore(tmp_path / "nested" / "settings.db")


class TestLocalSettingsStore:
    def test_is_preference_provider(self, store):
        assert isinstance(store, PreferenceProvider)

    def test_empty_store(self, store):
        assert store.get_api_key() is None
        assert store.get_preferred_model() is None

    def test_save_and_get_api_key(self, store):
        store.save_api_key("  abc123  ")
        assert store.get_api_key() == "abc123"

    def test_save_overwrites(self, store):
        store.save_api_key("first")
        store.save_api_key("second")
        assert store.get_api_key() == "second"

    def test_empty_key_rejected(self, store):
        with pytest.raises(ValueError):
            store.save_api_key("   ")

    def test_remove_api_key(self, store):
        store.save_api_key("abc")
        store.remove_api_key()
        assert store.get_api_key() is None

    def test_has_api_key_from_store(self, store, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("API_KEY", raising=False)
        assert not store.has_api_key()
        store.save_api_key("abc")
        assert store.has_api_key()

    def test_has_api_key_from_env(self, store, monkeypatch):
        monkeypatch.delenv("API_KEY", raising=False)
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")
        assert store.has_api_key()
        assert store.get_api_key() is None

    def test_preferred_model(self, store):
        store.set_preferred_model("gemini-2.5-pro")
        assert store.get_preferred_model() == "gemini-2.5-pro"

    def test_empty_model_rejected(self, store):
        with pytest.raises(ValueError):
            store.set_preferred_model("")

    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "settings.db"
        LocalSettingsStore(path).save_api_key("persisted")
        assert LocalSettingsStore(path).get_api_key() == "persisted"

    def test_clear(self, store):
        store.save_api_key("abc")
        store.set_preferred_model("gemini-2.5-pro")
        assert store.clear() == 2
        assert store.get_api_key() is None
