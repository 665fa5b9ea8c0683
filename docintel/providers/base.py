"""
Language model provider interface.

A provider turns a prompt into a text completion. Providers are built
explicitly and passed to the analyzers that need them; nothing here is a
global.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..exceptions import ProviderError

logger = logging.getLogger(__name__)

CONNECTION_TEST_PROMPT = 'Test connection - respond with "OK"'


@dataclass
class LLMResponse:
    """Response from an LLM provider."""
    content: str
    model: str = ""
    provider: str = ""
    latency_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "model": self.model,
            "provider": self.provider,
            "latency_ms": self.latency_ms,
        }


class LLMProvider(ABC):
    """Interface for asynchronous text generation."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        ...

    @abstractmethod
    async def invoke(self, prompt: str) -> LLMResponse:
        """
        Send ``prompt`` to the model.

        Raises:
            ProviderError: on network, authentication, rate limit or timeout failures
        """
        ...


async def safe_invoke(provider: LLMProvider, prompt: str, task: str = "generation") -> Optional[str]:
    """Invoke a provider, returning None instead of raising on provider failure."""
    try:
        response = await provider.invoke(prompt)
    except ProviderError as e:
        logger.warning(f"{task} failed ({provider.provider_name}): {e}")
        return None
    return response.content


async def check_connection(provider: LLMProvider) -> bool:
    """Ask the model to echo OK; any reply mentioning ok/test counts."""
    content = await safe_invoke(provider, CONNECTION_TEST_PROMPT, task="Connection test")
    if content is None:
        return False
    logger.debug(f"Connection test response: {content[:50]}")
    lowered = content.lower()
    return "ok" in lowered or "test" in lowered
