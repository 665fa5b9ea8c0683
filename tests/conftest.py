"""Shared fixtures: documents built in memory and a scripted provider."""

from typing import List, Optional, Union

import pytest

from docintel.data_models import Document, DocumentMetadata
from docintel.exceptions import ProviderError
from docintel.providers.base import LLMProvider, LLMResponse


def make_document(content: str, filename: str = "notes.txt", doc_id: Optional[str] = None) -> Document:
    metadata = DocumentMetadata(filename=filename, file_type=".txt", size=len(content.encode()))
    if doc_id:
        return Document(id=doc_id, content=content, metadata=metadata)
    return Document(content=content, metadata=metadata)


class ScriptedProvider(LLMProvider):
    """Returns queued replies in order; an Exception in the queue is raised as ProviderError."""

    def __init__(self, replies: List[Union[str, Exception]]):
        self.replies = list(replies)
        self.prompts: List[str] = []

    @property
    def provider_name(self) -> str:
        return "scripted"

    async def invoke(self, prompt: str) -> LLMResponse:
        self.prompts.append(prompt)
        reply = self.replies.pop(0) if self.replies else ""
        if isinstance(reply, Exception):
            raise ProviderError(str(reply))
        return LLMResponse(content=reply, model="scripted-model", provider=self.provider_name)


class FailingProvider(LLMProvider):
    """Every call fails the way a network error would surface."""

    def __init__(self):
        self.calls = 0

    @property
    def provider_name(self) -> str:
        return "failing"

    async def invoke(self, prompt: str) -> LLMResponse:
        self.calls += 1
        raise ProviderError("connection refused")


@pytest.fixture
def sample_text():
    return (
        "Machine learning is a field of study. It gives computers the ability to learn. "
        "Neural networks are one approach to machine learning. "
        "Decision trees are another approach."
    )


@pytest.fixture
def sample_document(sample_text):
    return make_document(sample_text, filename="ml.txt")
