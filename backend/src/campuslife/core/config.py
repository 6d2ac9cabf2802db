from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict


BACKEND_ROOT = Path(__file__).resolve().parents[3]
ENV_PATH = BACKEND_ROOT / ".env"

# Load environment variables as early as possible so Settings picks them up.
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "CampusLife API"
    app_version: str = "0.1.0"
    docs_url: str = "/docs"
    database_url: str = f"sqlite:///{(BACKEND_ROOT / 'campuslife.db').as_posix()}"
    database_echo: bool = False
    log_level: str = "INFO"

    advisor_llm_enabled: bool = True
    ollama_host: str = "127.0.0.1"
    ollama_port: int = 11434
    ollama_model: str = "llama3.1"
    ollama_timeout: int = 100

    openmensa_base_url: str = "https://openmensa.org/api/v2"
    openmensa_canteen_id: int = 277
    openmensa_timeout: int = 15
    menu_static_fallback: bool = True

    @property
    def ollama_endpoint(self) -> str:
        return f"http://{self.ollama_host}:{self.ollama_port}"


@lru_cache
def get_settings() -> Settings:
    return Settings()
