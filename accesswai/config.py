"""
AccessWAI Configuration — pydantic-settings based.

All settings are read from environment variables or .env file.
A missing GROQ_API_KEY is not an error: suggestions fall back to the
deterministic generator.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application-wide settings sourced from environment variables."""

    # ── LLM ──
    groq_api_key: str | None = Field(
        default=None, description="Groq API key for AI suggestions (optional)"
    )
    accesswai_model: str = Field(
        default="llama-3.3-70b-versatile",
        description="Model identifier for Groq completions",
    )
    llm_timeout: float = Field(
        default=30.0, gt=0, description="AI suggestion timeout in seconds"
    )
    llm_temperature: float = Field(default=0.2, description="LLM temperature")
    llm_max_tokens: int = Field(
        default=2048, description="Completion token cap for AI suggestions"
    )

    # ── Input ──
    max_upload_bytes: int = Field(
        default=10 * 1024 * 1024, description="Max ZIP archive size (bytes)"
    )
    allowed_extensions: list[str] = Field(
        default=[".html", ".jsx", ".js", ".tsx", ".ts"],
        description="File suffixes accepted for analysis (case-insensitive)",
    )

    # ── Server ──
    port: int = Field(default=5000, description="Server port")
    host: str = Field(default="0.0.0.0", description="Server bind host")
    cors_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )
    log_level: str = Field(default="INFO", description="Root log level")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    @property
    def llm_configured(self) -> bool:
        return bool(self.groq_api_key and self.groq_api_key.strip())


# Singleton instance — imported by other modules
settings = Settings()
