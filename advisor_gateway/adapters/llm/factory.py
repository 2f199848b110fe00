"""Factory pattern for creating LLM client instances."""

from advisor_gateway.adapters.llm.base import AbstractLLMClient
from advisor_gateway.adapters.llm.openai_client import OpenAIClient
from advisor_gateway.core.config import LLMSettings, settings
from advisor_gateway.core.errors import ValidationAppError


def create_llm_client(llm_settings: LLMSettings | None = None) -> AbstractLLMClient:
    """Instantiate the LLM client for the configured provider.

    Args:
        llm_settings: Settings to read; defaults to the global LLM settings.

    Returns:
        AbstractLLMClient: Configured LLM client instance.

    Raises:
        ValidationAppError: If provider-specific requirements are not met.
    """
    cfg = llm_settings or settings.llm
    provider = cfg.provider.lower()

    if provider == "openai":
        if not cfg.api_key:
            raise ValidationAppError(
                code="llm_missing_api_key",
                message="OpenAI provider requires LLM_API_KEY environment variable",
                details={"provider": provider},
            )
        return OpenAIClient(
            api_key=cfg.api_key,
            model=cfg.model,
            base_url=cfg.base_url,
            timeout_seconds=cfg.timeout_seconds,
            temperature=cfg.temperature,
            max_tokens=cfg.max_tokens,
        )

    raise ValidationAppError(
        code="llm_unknown_provider",
        message=f"Unknown LLM provider: '{provider}'. Supported providers: openai",
        details={"provider": provider},
    )
