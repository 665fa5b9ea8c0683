"""
Exception hierarchy for docintel.

Configuration errors are fatal and raised before any work is done.
Provider errors are caught at the analyzer boundary and degrade to
default results; the response parser never raises at all.
"""


class DocIntelError(Exception):
    """Base class for all docintel errors."""


class ChunkingConfigError(DocIntelError, ValueError):
    """Invalid chunk window / overlap combination."""


class ProviderError(DocIntelError):
    """A language model provider call failed (network, auth, rate limit, timeout)."""


class ProviderConfigError(ProviderError):
    """The provider cannot be built from the current settings (e.g. missing API key)."""


class DocumentNotFoundError(DocIntelError, KeyError):
    """No document with the requested id is in the store."""

    def __init__(self, document_id: str):
        super().__init__(document_id)
        self.document_id = document_id

    def __str__(self) -> str:
        return f"Document not found: {self.document_id}"


class UnsupportedFileError(DocIntelError):
    """No registered processor handles the file's extension."""


class DocumentProcessingError(DocIntelError):
    """A supported file could not be read or extracted."""
