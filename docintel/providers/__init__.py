"""
Language model providers.

The LangChain provider is imported lazily so that commands which never
call a model do not pay for loading LangChain.
"""
from .base import LLMProvider, LLMResponse, check_connection, safe_invoke

__all__ = [
    "LLMProvider",
    "LLMResponse",
    "check_connection",
    "safe_invoke",
    "LangChainChatProvider",
    "create_chat_provider",
]

_LAZY_IMPORTS = {
    "LangChainChatProvider": (".chat", "LangChainChatProvider"),
    "create_chat_provider": (".chat", "create_chat_provider"),
}


def __getattr__(name: str):
    if name in _LAZY_IMPORTS:
        module_path, real_name = _LAZY_IMPORTS[name]
        import importlib
        mod = importlib.import_module(module_path, __package__)
        attr = getattr(mod, real_name)
        globals()[name] = attr
        return attr
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
