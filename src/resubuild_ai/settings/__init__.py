"""Stored user preferences: API key and preferred model."""

from resubuild_ai.settings.local_store import LocalSettingsStore
from resubuild_ai.settings.preferences import PreferenceProvider, StaticPreferences

__all__ = ["LocalSettingsStore", "PreferenceProvider", "StaticPreferences"]
