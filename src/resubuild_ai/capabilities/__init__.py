"""AI capabilities: registry, runner and typed service facade."""

from resubuild_ai.capabilities.registry import REGISTRY, Capability, get_capability
from resubuild_ai.capabilities.runner import CapabilityRunner
from resubuild_ai.capabilities.service import ResumeAIService

__all__ = ["REGISTRY", "Capability", "CapabilityRunner", "ResumeAIService", "get_capability"]
