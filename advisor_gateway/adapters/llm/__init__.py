"""LLM adapter layer - abstracts over LLM providers."""

from advisor_gateway.adapters.llm.base import AbstractLLMClient
from advisor_gateway.adapters.llm.factory import create_llm_client
from advisor_gateway.adapters.llm.openai_client import OpenAIClient

__all__ = [
    "AbstractLLMClient",
    "OpenAIClient",
    "create_llm_client",
]
