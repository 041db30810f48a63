import logging

import httpx

from studypath.agents.llm.base import LLMClient, LLMError

logger = logging.getLogger(__name__)


class OllamaClient(LLMClient):
    def __init__(self, base_url: str, model: str, timeout: float | None = None,
    transport: httpx.BaseTransport | None = None):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.transport = transport

    def generate_text(self, *, prompt: str) -> str:
        # Ollama native endpoint
        # POST {base_url}/api/generate, single JSON response when stream is false

        url = f"{self.base_url}/api/generate"
        payload = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
        }

        logger.info("POST %s model=%s prompt_chars=%d", url, self.model, len(prompt))
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                r = client.post(url, json=payload)
                r.raise_for_status()
                data = r.json()
        except httpx.HTTPError as e:
            raise LLMError(f"Ollama request failed: {e}") from e
        except ValueError as e:
            raise LLMError(f"Ollama returned invalid JSON: {e}") from e

        text = data.get("response") if isinstance(data, dict) else None
        if not isinstance(text, str):
            raise LLMError("Ollama response has no 'response' text")
        return text.strip()
