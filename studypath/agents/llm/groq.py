import logging

from openai import OpenAI, OpenAIError

from .base import LLMClient, LLMError

logger = logging.getLogger(__name__)


class GroqOpenAIClient(LLMClient):
    def __init__(self, * , api_key: str, base_url: str, model: str, client: OpenAI | None = None):
        self.client = client or OpenAI(api_key=api_key, base_url=base_url)
        self.model = model

    def generate_text(self, *, prompt: str) -> str:
        logger.info("Groq chat completion model=%s prompt_chars=%d", self.model, len(prompt))
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                stream=False,
            )
        except OpenAIError as e:
            raise LLMError(f"Groq request failed: {e}") from e

        if not resp.choices or resp.choices[0].message.content is None:
            raise LLMError("Groq response has no message content")
        return resp.choices[0].message.content.strip()
