"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import AsyncMock

import pytest

from resubuild_ai.capabilities.runner import CapabilityRunner
from resubuild_ai.capabilities.service import ResumeAIService
from resubuild_ai.clients.llm_client import LLMClient, LLMResponse
from resubuild_ai.generation.invoker import GenerationInvoker
from resubuild_ai.generation.resolver import ModelResolver
from resubuild_ai.models.resume import (
    Education,
    Experience,
    PersonalInfo,
    Project,
    ResumeProfile,
)
from resubuild_ai.settings.preferences import StaticPreferences


@pytest.fixture
def sample_resume() -> ResumeProfile:
    return ResumeProfile(
        id="resume-1",
        name="Backend resume",
        personal_info=PersonalInfo(
            full_name="Jane Doe",
            email="jane@example.com",
            phone="555-0100",
            location="Berlin",
            job_title="Backend Engineer",
            summary="Backend engineer focused on high-traffic APIs.",
        ),
        experience=[
            Experience(
                id="exp-1",
                company="Acme",
                position="Senior Backend Engineer",
                start_date="2021-03",
                current=True,
                description="Built the payments API serving 1M requests/day.",
            ),
            Experience(
                id="exp-2",
                company="Startup GmbH",
                position="Software Engineer",
                start_date="2018-01",
                end_date="2021-02",
                description="Django REST APIs and AWS infrastructure.",
            ),
        ],
        education=[
            Education(id="edu-1", institution="TU Berlin", degree="BSc", field="Computer Science", graduation_date="2017"),
        ],
        projects=[Project(id="proj-1", name="ratelimit", description="Open-source rate limiter", link="https://example.com")],
        skills=["Python", "Go", "PostgreSQL"],
    )


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text="", input_tokens=100, output_tokens=50)
    )
    return client


@pytest.fixture
def set_reply(mock_llm_client) -> Callable[[str], None]:
    """Make the mock LLM answer every call with ``text``."""

    def _set(text: str) -> None:
        mock_llm_client.generate.return_value = LLMResponse(text=text, input_tokens=100, output_tokens=50)

    return _set


@pytest.fixture
def preferences() -> StaticPreferences:
    return StaticPreferences(api_key="test-key", preferred_model="gemini-2.5-flash")


@pytest.fixture
def resolver(preferences) -> ModelResolver:
    return ModelResolver(preferences, env={})


@pytest.fixture
def invoker(resolver, mock_llm_client) -> GenerationInvoker:
    return GenerationInvoker(resolver, mock_llm_client)


@pytest.fixture
def runner(invoker) -> CapabilityRunner:
    return CapabilityRunner(invoker)


@pytest.fixture
def service(runner) -> ResumeAIService:
    return ResumeAIService(runner)


@pytest.fixture
def sent_prompt(mock_llm_client) -> Callable[[], str]:
    """Return the prompt of the most recent LLM call."""

    def _get() -> str:
        return mock_llm_client.generate.call_args.args[0]

    return _get


@pytest.fixture
def sent_kwargs(mock_llm_client) -> Callable[[], dict]:
    """Return the keyword arguments of the most recent LLM call."""

    def _get() -> dict:
        return mock_llm_client.generate.call_args.kwargs

    return _get
