"""
FastAPI dependency injection.
"""
from functools import lru_cache

from ..config import settings
from ..exceptions import ProviderConfigError
from ..logger import logger
from ..providers import create_chat_provider
from ..system import DocumentIntelligenceSystem


@lru_cache()
def get_system() -> DocumentIntelligenceSystem:
    """Creates and caches the shared system instance."""
    provider = None
    if settings.has_llm_credentials():
        try:
            provider = create_chat_provider(settings)
        except ProviderConfigError as e:
            logger.warning(f"{e}; API will use local analysis")
    return DocumentIntelligenceSystem(provider=provider)


def check_services_health(system: DocumentIntelligenceSystem) -> dict:
    """Reports which optional services are configured."""
    return {
        "store": True,
        "llm": system.has_model,
    }
