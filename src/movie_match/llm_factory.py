from typing import Any, Optional

from .exceptions import ConfigurationError

# Groq and OpenAI chat models via their LangChain integrations
try:
    from langchain_groq import ChatGroq
except ImportError:
    ChatGroq = None

try:
    from langchain_openai import ChatOpenAI
except ImportError:
    ChatOpenAI = None


def get_llm_instance(provider: str, model: str, api_key: Optional[str]) -> Any:
    """
    Factory returning a LangChain chat model for the generative-text producer.

    :param provider: 'groq' or 'openai'
    :param model: Model name
    :param api_key: Provider API key (from MovieMatchConfig, never read here)
    :return: Chat model instance
    :raises ConfigurationError: Unknown provider, missing key or missing integration
    """
    provider = provider.lower()

    if not api_key:
        raise ConfigurationError(f"An API key is required for LLM provider '{provider}'")

    if provider == "groq":
        if ChatGroq is None:
            raise ConfigurationError("langchain-groq is not installed")
        return ChatGroq(model=model, api_key=api_key, temperature=0.2)

    elif provider == "openai":
        if ChatOpenAI is None:
            raise ConfigurationError("langchain-openai is not installed")
        return ChatOpenAI(model=model, api_key=api_key, temperature=0.2)

    else:
        raise ConfigurationError(f"Unknown LLM provider: {provider}")
