"""Tests for the generation invoker."""

import pytest

from resubuild_ai.errors import MissingCredential, UpstreamError
from resubuild_ai.generation.invoker import GenerationInvoker
from resubuild_ai.generation.resolver import ModelResolver
from resubuild_ai.settings.preferences import StaticPreferences


class TestInvoke:
    async def test_basic_uses_preferred_model(self, invoker, mock_llm_client, set_reply, sent_kwargs):
        set_reply("hello")
        result = await invoker.invoke("prompt")
        assert result == "hello"
        assert sent_kwargs()["model"] == "gemini-2.5-flash"
        assert sent_kwargs()["api_key"] == "test-key"
        assert sent_kwargs()["response_mode"] == "text"
        assert sent_kwargs()["thinking_budget"] is None

    async def test_complex_upgrades_model(self, invoker, sent_kwargs):
        await invoker.invoke("prompt", tier="complex")
        assert sent_kwargs()["model"] == "gemini-3-pro-preview"

    async def test_pin_wins_over_tier(self, invoker, sent_kwargs):
        await invoker.invoke("prompt", tier="basic", pin_high_capability=True)
        assert sent_kwargs()["model"] == "gemini-3-pro-preview"

    async def test_pin_ignores_pro_preference(self, mock_llm_client, sent_kwargs):
        resolver = ModelResolver(
            StaticPreferences(api_key="k", preferred_model="gemini-2.5-pro"),
            high_capability_model="gemini-3-pro-preview",
            env={},
        )
        await GenerationInvoker(resolver, mock_llm_client).invoke("p", tier="complex", pin_high_capability=True)
        assert sent_kwargs()["model"] == "gemini-3-pro-preview"

    async def test_pin_uses_configured_model(self, mock_llm_client, sent_kwargs):
        resolver = ModelResolver(StaticPreferences(api_key="k"), high_capability_model="gemini-2.5-pro", env={})
        await GenerationInvoker(resolver, mock_llm_client).invoke("p", pin_high_capability=True)
        assert sent_kwargs()["model"] == "gemini-2.5-pro"

    async def test_budget_dropped_on_non_high_model(self, mock_llm_client, sent_kwargs):
        resolver = ModelResolver(StaticPreferences(api_key="k", preferred_model="gemini-2.5-pro"), env={})
        invoker = GenerationInvoker(resolver, mock_llm_client)
        await invoker.invoke("p", tier="complex", thinking_budget=16384, thinking_requires_high_capability=True)
        assert sent_kwargs()["model"] == "gemini-2.5-pro"
        assert sent_kwargs()["thinking_budget"] is None

    async def test_budget_kept_on_high_model(self, invoker, sent_kwargs):
        await invoker.invoke("p", tier="complex", thinking_budget=16384, thinking_requires_high_capability=True)
        assert sent_kwargs()["thinking_budget"] == 16384

    async def test_missing_credential_before_call(self, mock_llm_client):
        invoker = GenerationInvoker(ModelResolver(StaticPreferences(), env={}), mock_llm_client)
        with pytest.raises(MissingCredential):
            await invoker.invoke("p")
        mock_llm_client.generate.assert_not_called()

    async def test_upstream_error_not_retried(self, invoker, mock_llm_client):
        mock_llm_client.generate.side_effect = UpstreamError("quota", model="gemini-2.5-flash")
        with pytest.raises(UpstreamError):
            await invoker.invoke("p")
        assert mock_llm_client.generate.await_count == 1
