"""LLM adapters — OpenAI HTTP and Claude CLI providers."""

from typing import Optional

from actionscribe.adapters.llm.claude_adapter import ClaudeAdapter
from actionscribe.adapters.llm.openai_adapter import OpenAIAdapter
from actionscribe.config import ProviderConfig
from actionscribe.ports.outbound import LLMPort


def create_provider(config: Optional[ProviderConfig] = None) -> LLMPort:
    """Create a provider adapter for the configured provider name."""
    config = config or ProviderConfig()
    selected = config.name.strip().lower()
    if selected == "openai":
        return OpenAIAdapter(config)
    if selected == "claude":
        return ClaudeAdapter(config)
    raise ValueError(f"Unsupported provider: {selected}")


__all__ = [
    "ClaudeAdapter",
    "OpenAIAdapter",
    "create_provider",
]
