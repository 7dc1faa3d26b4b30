import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel


load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings(BaseModel):
    # База заказов
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "sqlite+aiosqlite:///./orders.db",
    )
    DB_ECHO: bool = _flag("DB_ECHO")

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "order_store")

    # Логирование
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_JSON: bool = _flag("LOG_JSON")


@lru_cache
def get_settings() -> Settings:
    return Settings()
