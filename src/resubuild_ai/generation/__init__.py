"""Model resolution, invocation and response normalization."""

from resubuild_ai.generation.invoker import GenerationInvoker
from resubuild_ai.generation.resolver import ModelResolver

__all__ = ["GenerationInvoker", "ModelResolver"]
