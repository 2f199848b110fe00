from abc import ABC, abstractmethod
from typing import Any


class AbstractLLMClient(ABC):
	"""Interface for LLM clients that answer free-text prompts."""

	@abstractmethod
	async def complete(
		self,
		prompt: str,
		*,
		system_prompt: str | None = None,
		**kwargs: Any,
	) -> str:
		"""Generate a text completion for ``prompt``.

		Args:
			prompt: User message sent to the model.
			system_prompt: Optional system message framing the answer.
			**kwargs: Provider-specific options (e.g., temperature, max_tokens).

		Returns:
			str: Model output text (may be empty).

		Raises:
			RuntimeError: If the provider call fails.
		"""
		...
