# app/api/errors.py
"""
Перевод ошибок в HTTP-ответы.

Persistence errors become HTTP exceptions inside the services; the handlers
registered here render every error as the ``{"msg": ...}`` envelope and
never expose internal details to the client.
"""

import logging
from typing import Any, Dict, List, Mapping, Type

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.exceptions import (
    BadRequestException,
    ConflictException,
    InternalServerException,
    NotFoundException,
)
from db.repository import ErrorKind, PersistenceError

logger = logging.getLogger(__name__)

_EXCEPTION_BY_KIND: Dict[ErrorKind, Type[StarletteHTTPException]] = {
    ErrorKind.UNIQUE_VIOLATION: ConflictException,
    ErrorKind.NOT_FOUND: NotFoundException,
    ErrorKind.FOREIGN_KEY_VIOLATION: BadRequestException,
}

Handled = Mapping[ErrorKind, str]


def translate(error: PersistenceError, handled: Handled, fallback: str) -> StarletteHTTPException:
    """
    Преобразует ошибку хранилища в HTTP-исключение.

    Args:
        error: Ошибка репозитория
        handled: Ожидаемые виды ошибок и сообщения для них
        fallback: Сообщение для ответа 500

    Returns:
        HTTPException: Исключение для ответа клиенту
    """
    message = handled.get(error.kind)
    if message is None:
        logger.error("%s: %s", fallback, error)
        return InternalServerException(fallback)

    logger.warning("Persistence error mapped to client error: %s", error)
    return _EXCEPTION_BY_KIND[error.kind](message)


def validation_failures(exc: RequestValidationError) -> List[Dict[str, Any]]:
    failures = []
    for error in exc.errors():
        loc = error.get("loc") or ()
        failures.append({
            "field": str(loc[-1]) if loc else "",
            "message": error.get("msg", "Invalid value"),
        })
    return failures


def register_error_handlers(app: FastAPI) -> None:
    """
    Регистрирует обработчики ошибок приложения.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation(_request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"msg": validation_failures(exc)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"msg": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        # Никогда не отдаём клиенту детали внутренней ошибки
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"msg": "Internal server error"},
        )
