"""Runs a registered capability: render, invoke, normalize, apply fallback policy."""

from __future__ import annotations

import logging
from typing import Any

from resubuild_ai.capabilities.registry import REGISTRY, Capability
from resubuild_ai.errors import MalformedResponse, UpstreamError
from resubuild_ai.generation.invoker import GenerationInvoker

logger = logging.getLogger(__name__)


class CapabilityRunner:
    """Generic over the capability registry.

    UpstreamError and MalformedResponse become the capability's fallback
    value when it declares one and propagate otherwise. MissingCredential
    always propagates.
    """

    def __init__(self, invoker: GenerationInvoker, registry: dict[str, Capability] | None = None):
        self.invoker = invoker
        self.registry = REGISTRY if registry is None else registry

    async def run(self, name: str, *args: Any, **kwargs: Any) -> Any:
        capability = self.registry[name]
        prompt = capability.template(*args, **kwargs)
        logger.debug("Running capability %s (%d prompt chars)", name, len(prompt))
        try:
            raw = await self.invoker.invoke(
                prompt,
                tier=capability.tier,
                response_mode=capability.response_mode,
                pin_high_capability=capability.pin_high_capability,
                thinking_budget=capability.thinking_budget,
                thinking_requires_high_capability=capability.thinking_requires_high_capability,
            )
            return capability.normalize(raw)
        except (UpstreamError, MalformedResponse):
            if capability.fallback is None:
                raise
            logger.error("Capability %s failed; returning fallback", name, exc_info=True)
            return capability.fallback()
