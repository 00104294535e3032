"""Read-only view of the user's stored preferences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class PreferenceProvider(Protocol):
    """Source of the stored API key and preferred model identifier."""

    def get_api_key(self) -> str | None: ...

    def get_preferred_model(self) -> str | None: ...


@dataclass(frozen=True)
class StaticPreferences:
    """Fixed preferences, for embedding applications and tests."""

    api_key: str | None = None
    preferred_model: str | None = None

    def get_api_key(self) -> str | None:
        return self.api_key

    def get_preferred_model(self) -> str | None:
        return self.preferred_model
