"""Credential and model resolution for generation requests."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Literal

from resubuild_ai.config import DEFAULT_MODEL, HIGH_CAPABILITY_MODEL
from resubuild_ai.errors import MissingCredential
from resubuild_ai.settings.local_store import ENV_KEY_NAMES
from resubuild_ai.settings.preferences import PreferenceProvider

logger = logging.getLogger(__name__)

Tier = Literal["basic", "complex"]


class ModelResolver:
    """Picks the API key and model identifier for each request.

    Preferences are read on every call; this class never writes them.
    Complex-tier requests never run on a model whose identifier lacks
    "pro": they are moved to ``high_capability_model`` instead.
    """

    def __init__(
        self,
        preferences: PreferenceProvider,
        *,
        default_model: str = DEFAULT_MODEL,
        high_capability_model: str = HIGH_CAPABILITY_MODEL,
        env: Mapping[str, str] | None = None,
    ):
        self.preferences = preferences
        self.default_model = default_model
        self.high_capability_model = high_capability_model
        self._env = os.environ if env is None else env

    def resolve_credential(self) -> str:
        key = self.preferences.get_api_key()
        if key:
            return key
        for name in ENV_KEY_NAMES:
            key = self._env.get(name)
            if key:
                return key
        raise MissingCredential()

    def preferred_model(self) -> str:
        preferred = self.preferences.get_preferred_model()
        if preferred and preferred.strip():
            return preferred.strip()
        return self.default_model

    def resolve_model(self, tier: Tier) -> str:
        preferred = self.preferred_model()
        if tier == "basic":
            return preferred
        if tier == "complex":
            if "pro" in preferred.lower():
                return preferred
            logger.debug("Complex task: overriding %s with %s", preferred, self.high_capability_model)
            return self.high_capability_model
        raise ValueError(f"Unknown tier: {tier!r}")

    def is_high_capability(self, model: str) -> bool:
        return model == self.high_capability_model
