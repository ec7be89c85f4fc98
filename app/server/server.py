# app/server/server.py
"""
Основной файл FastAPI приложения.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from tortoise import Tortoise, connections
from tortoise.exceptions import BaseORMException, DBConnectionError

from config import build_tortoise_config, settings, tortoise_settings
from config.logging import configure_logging

from api.errors import register_error_handlers
from server.middleware import SecurityHeadersMiddleware

# Импортируем роутеры
from api.routes import router as api_router

logger = logging.getLogger(__name__)


def _init_middleware(_app: FastAPI) -> None:
    """
    Инициализация middleware приложения.
    """
    _app.add_middleware(SecurityHeadersMiddleware)
    _app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )


def _init_sentry() -> None:
    """
    Инициализация Sentry для мониторинга ошибок.
    """
    if settings.USE_SENTRY:
        import sentry_sdk
        from sentry_sdk.integrations.fastapi import FastApiIntegration

        sentry_sdk.init(
            dsn=settings.SENTRY_DSN,
            integrations=[FastApiIntegration()],
            traces_sample_rate=1.0,
            environment=settings.ENV,
        )


async def _init_tortoise(testing: bool = False) -> None:
    """
    Инициализация Tortoise ORM.

    Args:
        testing: Если True, используется тестовая база данных
    """
    if testing:
        config = build_tortoise_config(settings.TEST_DB_URL)
    else:
        # Используем конфигурацию из настроек
        config = tortoise_settings

    try:
        await Tortoise.init(config=config)

        # Создаем схемы (в dev окружении и для тестовой БД)
        if settings.is_development or testing:
            await Tortoise.generate_schemas(safe=True)
            logger.info("Database schemas generated")

        logger.info("Database initialized successfully (testing=%s)", testing)

    except Exception:
        logger.exception("Failed to initialize database")
        raise


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Контекстный менеджер жизненного цикла приложения.
    Управляет подключением к БД.
    """
    testing = getattr(_app.state, "testing", False)

    await _init_tortoise(testing=testing)
    logger.info("Application startup completed successfully")

    try:
        yield
    finally:
        # Гарантируем закрытие соединений при завершении
        await Tortoise.close_connections()
        logger.info("Database connections closed")


def create_app(testing: bool = False) -> FastAPI:
    """
    Создает и настраивает экземпляр FastAPI приложения.

    Args:
        testing: Если True, создается приложение для тестов

    Returns:
        FastAPI: Настроенное приложение
    """
    configure_logging(settings.LOG_LEVEL)

    # Инициализация Sentry (если включено)
    _init_sentry()

    _app = FastAPI(
        title="Store API",
        description="REST API для управления категориями и товарами",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=settings.DOCS_URL if settings.is_development else None,
        redoc_url=settings.REDOC_URL if settings.is_development else None,
    )

    # Устанавливаем флаг тестирования в состояние приложения
    _app.state.testing = testing

    _init_middleware(_app)
    register_error_handlers(_app)

    # Подключаем роутеры
    _app.include_router(api_router)

    # Корневые endpoint'ы
    @_app.get("/")
    async def root():
        """
        Корневой endpoint для проверки работы API.
        """
        return {
            "message": "Store API",
            "version": "1.0.0",
            "status": "running",
            "environment": settings.ENV,
            "docs": f"{settings.DOCS_URL}" if settings.DOCS_URL else "disabled"
        }

    @_app.get("/health")
    async def health_check():
        """
        Endpoint для проверки здоровья приложения.
        """
        try:
            # Выполняем простой запрос для проверки соединения
            conn = connections.get("default")
            await conn.execute_query("SELECT 1")
            db_status = "connected"
        except DBConnectionError:
            db_status = "disconnected"
        except (BaseORMException, KeyError) as e:
            logger.warning("Health check failed: %s", e)
            db_status = "error"

        return {
            "status": "healthy" if db_status == "connected" else "unhealthy",
            "database": db_status,
            "environment": settings.ENV,
            "timestamp": datetime.now().isoformat()
        }

    return _app


# Создаем экземпляр приложения для production
app = create_app()


# Экспортируем для использования в main.py
__all__ = ['app', 'create_app']
