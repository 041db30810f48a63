## Application settings configuration

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = "dev"
    log_level: str = "INFO"

    # Ollama settings
    ollama_base_url: str = "http://localhost:11434"
    ollama_model: str = "llama3.1:8b"
    # None waits until the transport itself gives up
    ollama_timeout: float | None = None

    # Production settings
    LLM_PROVIDER: str = "ollama"
    GROQ_API_KEY: str = ""
    GROQ_BASE_URL: str = "https://api.groq.com/openai/v1"
    GROQ_MODEL: str = "llama-3.1-8b-instant"

    # Roadmap storage: sql | redis | memory
    storage_backend: str = "sql"
    database_url: str = "sqlite:///./studypath.db"
    redis_url: str = "redis://localhost:6379/0"
    roadmaps_key: str = "roadmaps"


settings = Settings()
