"""
Application configuration.
Loads settings from environment variables and .env file.
"""
from pathlib import Path
from typing import Literal, Optional
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):

    # Language model provider - one of "groq" or "openai"
    llm_provider: Literal["groq", "openai"] = Field(default="groq", alias="LLM_PROVIDER")

    groq_api_key: Optional[str] = Field(default=None, alias="GROQ_API_KEY")
    groq_model: str = Field(default="llama3-8b-8192", alias="GROQ_MODEL")

    openai_api_key: Optional[str] = Field(default=None, alias="OPENAI_API_KEY")
    openai_model: str = Field(default="gpt-4", alias="OPENAI_MODEL")

    # Generation settings
    max_tokens: int = Field(default=500, alias="MAX_TOKENS")
    temperature: float = Field(default=0.7, alias="TEMPERATURE")
    provider_timeout: Optional[float] = Field(default=None, alias="PROVIDER_TIMEOUT")

    # Chunking settings (characters)
    chunk_size: int = Field(default=1000, alias="DEFAULT_CHUNK_SIZE", gt=0)
    chunk_overlap: int = Field(default=200, alias="DEFAULT_CHUNK_OVERLAP", ge=0)

    max_results: int = Field(default=5, alias="MAX_RESULTS")

    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=3000, alias="API_PORT")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    logs_path: Optional[Path] = Field(default=None, alias="LOGS_DIR")

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"
        populate_by_name = True

    @model_validator(mode="after")
    def _check_chunk_overlap(self) -> "Settings":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"DEFAULT_CHUNK_OVERLAP ({self.chunk_overlap}) must be smaller "
                f"than DEFAULT_CHUNK_SIZE ({self.chunk_size})"
            )
        return self

    @property
    def project_root(self) -> Path:
        return Path(__file__).parents[1]

    @property
    def logs_dir(self) -> Path:
        return self.logs_path or self.project_root / "logs"

    def has_llm_credentials(self) -> bool:
        """True when at least one provider API key is configured."""
        return bool(self.groq_api_key or self.openai_api_key)

    def ensure_directories(self) -> None:
        self.logs_dir.mkdir(parents=True, exist_ok=True)


settings = Settings()
