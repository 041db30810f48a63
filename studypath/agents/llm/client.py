from studypath.settings import Settings, settings as default_settings
from studypath.agents.llm.base import LLMClient
from studypath.agents.llm.ollama import OllamaClient
from studypath.agents.llm.groq import GroqOpenAIClient

def get_llm_client(settings: Settings | None = None) -> LLMClient:
    settings = settings or default_settings

    if settings.LLM_PROVIDER == "groq":
        return GroqOpenAIClient(
            api_key=settings.GROQ_API_KEY,
            base_url=settings.GROQ_BASE_URL,
            model=settings.GROQ_MODEL,
        )

    return OllamaClient(
        base_url = settings.ollama_base_url,
        model = settings.ollama_model,
        timeout = settings.ollama_timeout,
    )
