"""Tests for settings validation."""

import pytest
from pydantic import ValidationError

from docintel.config import Settings


def test_defaults():
    config = Settings(GROQ_API_KEY=None, OPENAI_API_KEY=None)
    assert config.chunk_size == 1000
    assert config.chunk_overlap == 200
    assert config.max_results == 5
    assert config.has_llm_credentials() is False


def test_overlap_must_be_smaller_than_chunk_size():
    with pytest.raises(ValidationError):
        Settings(DEFAULT_CHUNK_SIZE=100, DEFAULT_CHUNK_OVERLAP=100)


def test_chunk_size_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(DEFAULT_CHUNK_SIZE=0, DEFAULT_CHUNK_OVERLAP=0)


def test_environment_variables(monkeypatch):
    monkeypatch.setenv("DEFAULT_CHUNK_SIZE", "400")
    monkeypatch.setenv("DEFAULT_CHUNK_OVERLAP", "40")
    monkeypatch.setenv("LLM_PROVIDER", "openai")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

    config = Settings()

    assert config.chunk_size == 400
    assert config.chunk_overlap == 40
    assert config.llm_provider == "openai"
    assert config.has_llm_credentials() is True


def test_unknown_provider_rejected():
    with pytest.raises(ValidationError):
        Settings(LLM_PROVIDER="anthropic")
