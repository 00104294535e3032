"""Gemini API wrapper with async support."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from google import genai
from google.genai import types

from resubuild_ai.errors import UpstreamError

logger = logging.getLogger(__name__)

ResponseMode = Literal["text", "json"]


@dataclass
class LLMResponse:
    """Response from the LLM including usage metadata."""

    text: str
    input_tokens: int
    output_tokens: int


class LLMClient:
    """Async Gemini client.

    One SDK client per call, since the key can change between calls; it is
    closed before ``generate`` returns.
    """

    def __init__(self, timeout: float | None = None):
        self.timeout = timeout
        self._token_log: list[tuple[str, int, int]] = []  # (model, input_tokens, output_tokens)

    def _make_client(self, api_key: str) -> genai.Client:
        kwargs: dict = {"api_key": api_key}
        if self.timeout is not None:
            # HttpOptions takes milliseconds
            kwargs["http_options"] = types.HttpOptions(timeout=int(self.timeout * 1000))
        return genai.Client(**kwargs)

    @staticmethod
    def _build_config(
        response_mode: ResponseMode,
        thinking_budget: int | None,
    ) -> types.GenerateContentConfig | None:
        kwargs: dict = {}
        if response_mode == "json":
            kwargs["response_mime_type"] = "application/json"
        if thinking_budget is not None:
            kwargs["thinking_config"] = types.ThinkingConfig(thinking_budget=thinking_budget)
        if not kwargs:
            return None
        return types.GenerateContentConfig(**kwargs)

    async def generate(
        self,
        prompt: str,
        *,
        api_key: str,
        model: str,
        response_mode: ResponseMode = "text",
        thinking_budget: int | None = None,
    ) -> LLMResponse:
        """Send a prompt to Gemini and return the text response with usage.

        Any SDK or transport failure is raised as UpstreamError. Nothing is retried.
        """
        logger.debug("LLM call: model=%s mode=%s thinking=%s", model, response_mode, thinking_budget)
        kwargs: dict = {"model": model, "contents": prompt}
        config = self._build_config(response_mode, thinking_budget)
        if config is not None:
            kwargs["config"] = config
        client = self._make_client(api_key)
        try:
            response = await client.aio.models.generate_content(**kwargs)
        except Exception as exc:
            logger.error("LLM call failed: model=%s", model, exc_info=True)
            raise UpstreamError(f"Gemini request failed: {exc}", model=model) from exc
        finally:
            await client.aio.aclose()

        usage = response.usage_metadata
        input_tokens = (usage.prompt_token_count or 0) if usage else 0
        output_tokens = (usage.candidates_token_count or 0) if usage else 0
        logger.debug("LLM response: %d input, %d output tokens", input_tokens, output_tokens)
        self._token_log.append((model, input_tokens, output_tokens))
        return LLMResponse(
            text=response.text or "",
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )

    def get_token_summary(self) -> dict:
        """Return accumulated token usage and reset the log."""
        summary = {
            "input": sum(t[1] for t in self._token_log),
            "output": sum(t[2] for t in self._token_log),
            "calls": list(self._token_log),
        }
        self._token_log.clear()
        return summary
