"""
LangChain chat model provider.

Wraps any LangChain ``BaseChatModel`` (ChatGroq, ChatOpenAI, or a fake
model in tests) behind the ``LLMProvider`` interface.

Example:
    >>> provider = create_chat_provider(settings)
    >>> response = await provider.invoke("Summarize ...")
"""
import asyncio
import logging
import time
from typing import Optional

from langchain_core.language_models.chat_models import BaseChatModel

from ..config import Settings, settings as default_settings
from ..exceptions import ProviderConfigError, ProviderError
from .base import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)


def _message_text(message) -> str:
    content = getattr(message, "content", message)
    if isinstance(content, list):
        # Content blocks: keep the text parts
        parts = [
            block.get("text", "") if isinstance(block, dict) else str(block)
            for block in content
        ]
        return "".join(parts)
    return str(content)


class LangChainChatProvider(LLMProvider):
    """Provider backed by a LangChain chat model."""

    def __init__(
        self,
        chat_model: BaseChatModel,
        provider_name: str = "langchain",
        model_name: str = "",
        timeout: Optional[float] = None,
    ):
        self.chat_model = chat_model
        self._provider_name = provider_name
        self.model_name = model_name or getattr(chat_model, "model_name", "") or ""
        self.timeout = timeout

    @property
    def provider_name(self) -> str:
        return self._provider_name

    async def invoke(self, prompt: str) -> LLMResponse:
        start = time.time()
        try:
            if self.timeout:
                message = await asyncio.wait_for(self.chat_model.ainvoke(prompt), timeout=self.timeout)
            else:
                message = await self.chat_model.ainvoke(prompt)
        except asyncio.TimeoutError as e:
            raise ProviderError(f"{self.provider_name} timed out after {self.timeout}s") from e
        except Exception as e:
            raise ProviderError(f"{self.provider_name} request failed: {e}") from e

        return LLMResponse(
            content=_message_text(message),
            model=self.model_name,
            provider=self.provider_name,
            latency_ms=(time.time() - start) * 1000,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(provider='{self.provider_name}', model='{self.model_name}')"


def create_chat_provider(config: Optional[Settings] = None) -> LangChainChatProvider:
    """
    Build the provider named by ``LLM_PROVIDER``.

    Raises:
        ProviderConfigError: the provider's API key is not set
    """
    config = config or default_settings

    if config.llm_provider == "groq":
        if not config.groq_api_key:
            raise ProviderConfigError("GROQ_API_KEY is not set")
        from langchain_groq import ChatGroq

        chat_model = ChatGroq(
            api_key=config.groq_api_key,
            model=config.groq_model,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )
        model_name = config.groq_model
    elif config.llm_provider == "openai":
        if not config.openai_api_key:
            raise ProviderConfigError("OPENAI_API_KEY is not set")
        from langchain_openai import ChatOpenAI

        chat_model = ChatOpenAI(
            api_key=config.openai_api_key,
            model=config.openai_model,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )
        model_name = config.openai_model
    else:
        raise ProviderConfigError(f"Unsupported provider: {config.llm_provider}")

    logger.info(f"Using {config.llm_provider} ({model_name}) for language model operations")
    return LangChainChatProvider(
        chat_model,
        provider_name=config.llm_provider,
        model_name=model_name,
        timeout=config.provider_timeout,
    )
