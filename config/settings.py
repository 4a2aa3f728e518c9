from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from dotenv import load_dotenv

# Load .env file into os.environ BEFORE pydantic reads it
# This ensures ALL environment variables are available to both:
# - pydantic-settings (reads from os.environ)
# - Langfuse SDK (reads from os.environ)
# - LangChain provider clients (OPENAI_API_KEY etc.)
load_dotenv()

# Used when no provider key is configured so startup never fails
PLACEHOLDER_API_KEY = "default_key"


class Settings(BaseSettings):
    # LLM Configuration
    LLM_PROVIDER: str = "openai"
    LLM_MODEL: str = "gpt-4"
    LLM_TEMPERATURE: float = 0.7
    LLM_TIMEOUT_SECONDS: float = 60.0
    SWOT_MAX_TOKENS: int = 2048
    TURN_MAX_TOKENS: int = 1024

    # OpenAI
    OPENAI_API_KEY: Optional[str] = None

    # Anthropic
    ANTHROPIC_API_KEY: Optional[str] = None

    # OpenRouter
    OPENROUTER_API_KEY: Optional[str] = None

    # Gemini
    GEMINI_API_KEY: Optional[str] = None

    # Store: "memory" (lost on restart) or "sql" (SQLModel engine on DATABASE_URL)
    STORE_BACKEND: str = "memory"
    DATABASE_URL: str = "sqlite://"

    # Vazir conversation ceiling
    MAX_CONVERSATION_CALLS: int = 10

    # Server
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 8000
    ALLOWED_ORIGINS: str = "*"

    LOG_LEVEL: str = "INFO"

    # Langfuse Observability
    LANGFUSE_PUBLIC_KEY: Optional[str] = None
    LANGFUSE_SECRET_KEY: Optional[str] = None
    LANGFUSE_HOST: str = "https://cloud.langfuse.com"
    LANGFUSE_ENABLED: bool = False

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",  # ignore unknown env vars instead of raising errors
    )

    def provider_api_key(self) -> Optional[str]:
        """Return the configured key for the active LLM provider, if any."""
        provider = self.LLM_PROVIDER.lower()
        if provider == "openai":
            return self.OPENAI_API_KEY
        if provider == "anthropic":
            return self.ANTHROPIC_API_KEY
        if provider == "openrouter":
            return self.OPENROUTER_API_KEY
        if provider == "gemini":
            return self.GEMINI_API_KEY
        # ollama runs locally and needs no key
        return "ollama"


settings = Settings()
