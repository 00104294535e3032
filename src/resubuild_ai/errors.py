"""Error types raised by the generation layer."""

from __future__ import annotations


class ResubuildError(Exception):
    """Base class for all resubuild-ai errors."""


class MissingCredential(ResubuildError):
    """No Gemini API key could be resolved from settings or the environment."""

    def __init__(self, message: str = "API Key is missing. Please add your Gemini API Key in Settings."):
        super().__init__(message)


class UpstreamError(ResubuildError):
    """The generative-AI call itself failed (network, quota, service error)."""

    def __init__(self, message: str, model: str | None = None):
        super().__init__(message)
        self.model = model


class MalformedResponse(ResubuildError, ValueError):
    """The upstream response could not be coerced into the expected shape."""
