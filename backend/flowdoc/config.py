"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    groq_api_key: str = ""
    flowdoc_env: str = "development"
    flowdoc_log_level: str = "info"

    # CORS: every JSON response carries this allow-origin value
    cors_allow_origin: str = "*"

    # Reasoning service (OpenAI-compatible chat completions endpoint)
    reasoning_api_url: str = "https://api.groq.com/openai/v1/chat/completions"
    reasoning_model: str = "meta-llama/llama-4-scout-17b-16e-instruct"
    reasoning_timeout_seconds: float = 120.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
