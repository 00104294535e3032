"""Tests for credential and model resolution."""

import pytest

from resubuild_ai.errors import MissingCredential
from resubuild_ai.generation.resolver import ModelResolver
from resubuild_ai.settings.preferences import StaticPreferences


def _resolver(api_key=None, model=None, env=None) -> ModelResolver:
    return ModelResolver(
        StaticPreferences(api_key=api_key, preferred_model=model),
        default_model="gemini-2.5-flash",
        high_capability_model="gemini-3-pro-preview",
        env=env or {},
    )


class TestResolveCredential:
    def test_stored_key_wins(self):
        resolver = _resolver(api_key="stored", env={"GEMINI_API_KEY": "env"})
        assert resolver.resolve_credential() == "stored"

    def test_gemini_env_before_generic(self):
        resolver = _resolver(env={"GEMINI_API_KEY": "gemini", "API_KEY": "generic"})
        assert resolver.resolve_credential() == "gemini"

    def test_generic_env_fallback(self):
        assert _resolver(env={"API_KEY": "generic"}).resolve_credential() == "generic"

    def test_missing_credential(self):
        with pytest.raises(MissingCredential, match="API Key is missing"):
            _resolver().resolve_credential()

    def test_empty_stored_key_falls_through(self):
        resolver = _resolver(api_key="", env={"API_KEY": "generic"})
        assert resolver.resolve_credential() == "generic"


class TestResolveModel:
    def test_basic_uses_default_without_preference(self):
        assert _resolver().resolve_model("basic") == "gemini-2.5-flash"

    def test_basic_uses_preference(self):
        assert _resolver(model="gemini-2.5-flash-lite").resolve_model("basic") == "gemini-2.5-flash-lite"

    def test_blank_preference_uses_default(self):
        assert _resolver(model="   ").resolve_model("basic") == "gemini-2.5-flash"

    def test_complex_upgrades_non_pro_preference(self):
        assert _resolver(model="gemini-2.5-flash").resolve_model("complex") == "gemini-3-pro-preview"

    def test_complex_keeps_pro_preference(self):
        """A preferred pro model is honored for complex tasks."""
        assert _resolver(model="gemini-2.5-pro").resolve_model("complex") == "gemini-2.5-pro"

    def test_pro_check_is_case_insensitive(self):
        assert _resolver(model="Gemini-2.5-PRO").resolve_model("complex") == "Gemini-2.5-PRO"

    def test_unknown_tier(self):
        with pytest.raises(ValueError, match="Unknown tier"):
            _resolver().resolve_model("extreme")

    def test_preference_read_on_every_call(self):
        class MutablePrefs:
            model = "gemini-2.5-flash"

            def get_api_key(self):
                return "k"

            def get_preferred_model(self):
                return self.model

        prefs = MutablePrefs()
        resolver = ModelResolver(prefs, env={})
        assert resolver.resolve_model("basic") == "gemini-2.5-flash"
        prefs.model = "gemini-2.5-pro"
        assert resolver.resolve_model("basic") == "gemini-2.5-pro"

    def test_is_high_capability(self):
        resolver = _resolver()
        assert resolver.is_high_capability("gemini-3-pro-preview")
        assert not resolver.is_high_capability("gemini-2.5-pro")
