"""OpenAI-backed text generation adapter."""

from openai import AsyncOpenAI

from src.application.ports.text_generation import TextGenerationPort
from src.infrastructure.logging.logger import get_usage_logger

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_MAX_TOKENS = 2000
SYSTEM_PROMPT = (
    "You are a financial advisor specializing in debt repayment. "
    "Answer with a single JSON object and no other text."
)


class OpenAITextGenerator(TextGenerationPort):
    """TextGenerationPort implementation using chat completions."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        timeout_seconds: float = 20.0,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        client: AsyncOpenAI | None = None,
        usage_logger=None,
    ) -> None:
        """Initialize the generator.

        Args:
            api_key: OpenAI API key.
            model: Chat model name.
            timeout_seconds: Client-side request timeout.
            max_tokens: Upper bound on completion tokens.
            client: Optional preconfigured client.
            usage_logger: Optional logger recording token usage.
        """
        self._client = client or AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
        )
        self._model = model
        self._max_tokens = max_tokens
        self._usage_logger = usage_logger or get_usage_logger()

    async def generate(self, prompt: str) -> str:
        """Return the completion text for a prompt.

        Args:
            prompt: User prompt.

        Returns:
            str: Completion text; empty when the model returned no content.
        """
        response = await self._client.chat.completions.create(
            model=self._model,
            max_tokens=self._max_tokens,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
        )
        usage = getattr(response, "usage", None)
        if usage is not None:
            self._usage_logger.info(
                f"{self._model} used {usage.total_tokens} tokens"
            )
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""


__all__ = ["DEFAULT_MODEL", "OpenAITextGenerator"]
