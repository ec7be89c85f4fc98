# app/config/__init__.py
"""
Конфигурация приложения.
Объединяет все настройки в одном месте.
"""

from pathlib import Path
from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Константы
ROOT_DIR = Path(__file__).parents[2]
ENV_FILE_PATH = ROOT_DIR.joinpath('.env')

MODELS_MODULE = "db.models"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    # Environment
    ENV: str = Field(default="development")

    # Database
    POSTGRES_HOST: str = Field(default="localhost")
    POSTGRES_PORT: int = Field(default=5432)
    POSTGRES_USER: str = Field(default="postgres")
    POSTGRES_PASSWORD: str = Field(default="postgres")
    POSTGRES_DB: str = Field(default="store")
    # Полный URL подключения, заменяет параметры Postgres (например sqlite://db.sqlite3)
    DB_URL: Optional[str] = Field(default=None)

    # CORS
    CORS_ORIGINS: List[str] = Field(default=["*"])
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True)
    CORS_ALLOW_METHODS: List[str] = Field(default=["*"])
    CORS_ALLOW_HEADERS: List[str] = Field(default=["*"])

    # API Docs
    DOCS_URL: str = Field(default="/docs")
    REDOC_URL: str = Field(default="/redoc")

    # Server Settings
    HOST: str = Field(default="127.0.0.1")
    PORT: int = Field(default=3000)
    RELOAD: bool = Field(default=True)
    WORKERS: int = Field(default=1)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # Sentry
    USE_SENTRY: bool = Field(default=False)
    SENTRY_DSN: str = Field(default="")

    # Test
    TEST_DB_URL: str = Field(default="sqlite://:memory:")

    # Computed properties
    @property
    def is_production(self) -> bool:
        return self.ENV.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.ENV.lower() == "development"

    @property
    def postgres_dsn(self) -> str:
        return f"postgres://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    @property
    def database_url(self) -> str:
        return self.DB_URL or self.postgres_dsn

    @property
    def tortoise_config(self) -> dict:
        return build_tortoise_config(self.database_url, with_migrations=True)


def build_tortoise_config(db_url: str, with_migrations: bool = False) -> dict:
    """Собирает конфигурацию Tortoise ORM для приложения store."""
    models = [MODELS_MODULE]
    if with_migrations:
        models.insert(0, "aerich.models")
    return {
        "connections": {
            "default": db_url
        },
        "apps": {
            "store": {
                "models": models,
                "default_connection": "default",
            }
        }
    }


# Создаем экземпляр настроек
settings = Settings()
tortoise_settings = settings.tortoise_config

# Экспортируем всё необходимое
__all__ = [
    'settings',
    'tortoise_settings',
    'build_tortoise_config',
]
