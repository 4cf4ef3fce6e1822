# app/core/config.py
import os
from typing import ClassVar
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# .env local (não sobrescreve variáveis já definidas)
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _default_database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url and url.strip():
        return url
    data_dir = os.path.abspath(os.getenv("DATA_DIR", "./data"))
    os.makedirs(data_dir, exist_ok=True)
    return f"sqlite:///{os.path.join(data_dir, 'eventos.db')}"


class Settings(BaseModel):
    # Constante (não vira campo Pydantic)
    DATA_DIR: ClassVar[str] = os.path.abspath(os.getenv("DATA_DIR", "./data"))

    # Campos de configuração
    DATABASE_URL: str = Field(default_factory=_default_database_url)
    LOG_LEVEL: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    API_PREFIX: str = Field(default_factory=lambda: os.getenv("API_PREFIX", "").rstrip("/"))
    CORS_ORIGINS: list[str] = Field(
        default_factory=lambda: [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    )
    RUN_MIGRATIONS_ON_STARTUP: bool = Field(default_factory=lambda: _env_bool("RUN_MIGRATIONS_ON_STARTUP", "1"))
    ENABLE_METRICS: bool = Field(default_factory=lambda: _env_bool("ENABLE_METRICS", "1"))

settings = Settings()
