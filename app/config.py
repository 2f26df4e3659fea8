# app/config.py
import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

from app.features.keywords.catalog import KEYWORD_CATALOG

load_dotenv()

API_MODES = {"completions", "chat"}

class ConfigError(RuntimeError):
    """Raised when the process cannot start because of missing or bad settings."""

def _env_csv(name: str, default: str = "*") -> List[str]:
    raw = os.getenv(name, default)
    return [x.strip() for x in raw.split(",") if x.strip()]

@dataclass(frozen=True)
class Config:
    # OpenAI
    openai_api_key: str
    openai_text_model: str
    openai_api_mode: str  # valid: completions, chat
    # API / CORS
    allowed_origins: List[str]
    port: int
    # Stories
    random_keyword_count: int
    # Logging
    log_level: str

def load_config() -> Config:
    api_key = os.getenv("OPENAI_API_KEY", "").strip()
    if not api_key:
        raise ConfigError("OPENAI_API_KEY is not defined in environment variables")

    api_mode = os.getenv("OPENAI_API_MODE", "completions").strip().lower()
    if api_mode not in API_MODES:
        raise ConfigError(f"OPENAI_API_MODE must be one of {sorted(API_MODES)}, got {api_mode!r}")

    keyword_count = int(os.getenv("RANDOM_KEYWORD_COUNT", "3"))
    if not 0 <= keyword_count <= len(KEYWORD_CATALOG):
        raise ConfigError(f"RANDOM_KEYWORD_COUNT must be between 0 and {len(KEYWORD_CATALOG)}, got {keyword_count}")

    return Config(
        openai_api_key = api_key,
        openai_text_model = os.getenv("OPENAI_TEXT_MODEL", "gpt-3.5-turbo-instruct"),
        openai_api_mode = api_mode,
        allowed_origins = _env_csv("ALLOWED_ORIGINS", "*"),
        port = int(os.getenv("PORT", "8080")),
        random_keyword_count = keyword_count,
        log_level = os.getenv("LOG_LEVEL", "INFO"),
    )

# Load once; a missing credential stops the process here
config = load_config()
