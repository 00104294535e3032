"""Issues one generation request with the resolved credential and model."""

from __future__ import annotations

import logging

from resubuild_ai.clients.llm_client import LLMClient, ResponseMode
from resubuild_ai.generation.resolver import ModelResolver, Tier

logger = logging.getLogger(__name__)


class GenerationInvoker:
    """Resolves credential and model, then calls the LLM once.

    No retries: MissingCredential and UpstreamError reach the caller as raised.
    """

    def __init__(self, resolver: ModelResolver, llm: LLMClient):
        self.resolver = resolver
        self.llm = llm

    def model_for(self, tier: Tier, pin_high_capability: bool = False) -> str:
        if pin_high_capability:
            return self.resolver.high_capability_model
        return self.resolver.resolve_model(tier)

    async def invoke(
        self,
        prompt: str,
        *,
        tier: Tier = "basic",
        response_mode: ResponseMode = "text",
        pin_high_capability: bool = False,
        thinking_budget: int | None = None,
        thinking_requires_high_capability: bool = False,
    ) -> str:
        api_key = self.resolver.resolve_credential()
        model = self.model_for(tier, pin_high_capability)

        budget = thinking_budget
        if budget is not None and thinking_requires_high_capability and not self.resolver.is_high_capability(model):
            budget = None

        response = await self.llm.generate(
            prompt,
            api_key=api_key,
            model=model,
            response_mode=response_mode,
            thinking_budget=budget,
        )
        return response.text
