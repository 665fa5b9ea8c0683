"""Tests for the provider interface and the LangChain chat provider."""

import asyncio

import pytest
from langchain_core.language_models import FakeListChatModel

from docintel.config import Settings
from docintel.exceptions import ProviderConfigError, ProviderError
from docintel.providers import LangChainChatProvider, check_connection, create_chat_provider, safe_invoke

from conftest import FailingProvider, ScriptedProvider


class _SlowChatModel:
    async def ainvoke(self, prompt):
        await asyncio.sleep(5)


class _BrokenChatModel:
    async def ainvoke(self, prompt):
        raise RuntimeError("401 Unauthorized")


@pytest.mark.asyncio
async def test_chat_provider_returns_model_text():
    provider = LangChainChatProvider(
        FakeListChatModel(responses=["hello there"]),
        provider_name="fake",
        model_name="fake-model",
    )

    response = await provider.invoke("Say hello")

    assert response.content == "hello there"
    assert response.provider == "fake"
    assert response.model == "fake-model"
    assert response.latency_ms >= 0
    assert response.to_dict()["content"] == "hello there"


@pytest.mark.asyncio
async def test_chat_provider_wraps_errors():
    provider = LangChainChatProvider(_BrokenChatModel(), provider_name="broken")
    with pytest.raises(ProviderError, match="401"):
        await provider.invoke("anything")


@pytest.mark.asyncio
async def test_chat_provider_timeout():
    provider = LangChainChatProvider(_SlowChatModel(), provider_name="slow", timeout=0.05)
    with pytest.raises(ProviderError, match="timed out"):
        await provider.invoke("anything")


@pytest.mark.asyncio
async def test_safe_invoke_swallows_provider_errors():
    assert await safe_invoke(FailingProvider(), "prompt") is None
    assert await safe_invoke(ScriptedProvider(["fine"]), "prompt") == "fine"


@pytest.mark.asyncio
async def test_check_connection():
    assert await check_connection(ScriptedProvider(["OK"])) is True
    assert await check_connection(ScriptedProvider(["Test successful"])) is True
    assert await check_connection(ScriptedProvider(["nope"])) is False
    assert await check_connection(FailingProvider()) is False


def test_create_provider_requires_api_key():
    config = Settings(LLM_PROVIDER="groq", GROQ_API_KEY=None, OPENAI_API_KEY=None)
    with pytest.raises(ProviderConfigError):
        create_chat_provider(config)

    config = Settings(LLM_PROVIDER="openai", GROQ_API_KEY="gsk-test", OPENAI_API_KEY=None)
    with pytest.raises(ProviderConfigError, match="OPENAI_API_KEY"):
        create_chat_provider(config)


def test_create_openai_provider():
    config = Settings(LLM_PROVIDER="openai", OPENAI_API_KEY="sk-test", OPENAI_MODEL="gpt-4", PROVIDER_TIMEOUT=30)
    provider = create_chat_provider(config)

    assert provider.provider_name == "openai"
    assert provider.model_name == "gpt-4"
    assert provider.timeout == 30
