"""OpenAI LLM client adapter."""

from typing import Any

from openai import AsyncOpenAI

from advisor_gateway.adapters.llm.base import AbstractLLMClient


class OpenAIClient(AbstractLLMClient):
    """Client for OpenAI chat completions, using the official async SDK."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str | None = None,
        timeout_seconds: float = 45.0,
        temperature: float = 0.7,
        max_tokens: int = 800,
    ) -> None:
        """Initialize OpenAI async client.

        Args:
            api_key: OpenAI API key for authentication.
            model: Model name (e.g., "gpt-4").
            base_url: Optional custom base URL for OpenAI API.
            timeout_seconds: Timeout for requests in seconds.
            temperature: Default sampling temperature.
            max_tokens: Default completion length limit.
        """
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout_seconds,
        )
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def complete(
        self,
        prompt: str,
        *,
        system_prompt: str | None = None,
        **kwargs: Any,
    ) -> str:
        """Run one chat completion and return the answer text.

        Args:
            prompt: User message.
            system_prompt: Optional system message.
            **kwargs: temperature, max_tokens, top_p, frequency_penalty,
                presence_penalty, seed.

        Returns:
            str: Stripped answer text ("" when the model returns no content).

        Raises:
            RuntimeError: If the API call fails.
        """
        messages: list[dict[str, str]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        request_params: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": kwargs.pop("temperature", self.temperature),
            "max_tokens": kwargs.pop("max_tokens", self.max_tokens),
        }

        allowed_params = {
            "top_p",
            "frequency_penalty",
            "presence_penalty",
            "seed",
        }
        for param in allowed_params:
            if param in kwargs:
                request_params[param] = kwargs[param]

        try:
            response = await self.client.chat.completions.create(**request_params)
        except Exception as exc:
            raise RuntimeError(f"OpenAI API error: {str(exc)}") from exc

        if not response.choices:
            return ""
        content = response.choices[0].message.content
        return (content or "").strip()
