# app/db/repository.py
"""
Persistence boundary for the API.

Wraps Tortoise ORM calls and reduces every driver failure to one of the
closed ``ErrorKind`` values, so services never inspect backend-specific
exceptions or error codes.
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Type

from tortoise import timezone
from tortoise.exceptions import BaseORMException, DoesNotExist, IntegrityError
from tortoise.models import Model


# SQLSTATE codes reported by PostgreSQL drivers
_UNIQUE_VIOLATION_CODE = "23505"
_FOREIGN_KEY_VIOLATION_CODE = "23503"


class ErrorKind(str, Enum):
    UNIQUE_VIOLATION = "unique_violation"
    NOT_FOUND = "not_found"
    FOREIGN_KEY_VIOLATION = "foreign_key_violation"
    OTHER = "other"


class PersistenceError(Exception):
    """A persistence call failed; ``kind`` says how."""

    def __init__(self, kind: ErrorKind, detail: str = ""):
        super().__init__(detail or kind.value)
        self.kind = kind
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.detail}" if self.detail else self.kind.value


def classify_integrity_error(exc: IntegrityError) -> ErrorKind:
    """
    Определяет вид нарушения целостности.

    Драйверы PostgreSQL передают SQLSTATE в исходном исключении,
    SQLite сообщает только текст ошибки.
    """
    original = exc.args[0] if exc.args else None
    code = getattr(original, "sqlstate", None) or getattr(original, "pgcode", None)
    if code == _UNIQUE_VIOLATION_CODE:
        return ErrorKind.UNIQUE_VIOLATION
    if code == _FOREIGN_KEY_VIOLATION_CODE:
        return ErrorKind.FOREIGN_KEY_VIOLATION

    text = str(exc).lower()
    if "unique" in text or "duplicate key" in text:
        return ErrorKind.UNIQUE_VIOLATION
    if "foreign key" in text:
        return ErrorKind.FOREIGN_KEY_VIOLATION
    return ErrorKind.OTHER


def to_persistence_error(exc: BaseORMException) -> PersistenceError:
    if isinstance(exc, IntegrityError):
        return PersistenceError(classify_integrity_error(exc), str(exc))
    if isinstance(exc, DoesNotExist):
        return PersistenceError(ErrorKind.NOT_FOUND, str(exc))
    return PersistenceError(ErrorKind.OTHER, str(exc))


class Repository:
    """Generic CRUD over Tortoise models, keyed by primary key."""

    async def find_many(
            self,
            model: Type[Model],
            related: Iterable[str] = (),
            order_by: Iterable[str] = ("name",),
    ) -> List[Model]:
        try:
            query = model.all().order_by(*order_by)
            if related:
                query = query.prefetch_related(*related)
            return await query
        except BaseORMException as exc:
            raise to_persistence_error(exc) from exc

    async def find_unique(
            self,
            model: Type[Model],
            pk: Any,
            related: Iterable[str] = (),
    ) -> Optional[Model]:
        """
        Получает запись по первичному ключу.

        Returns:
            Model | None: Запись с загруженными связями или None
        """
        try:
            query = model.filter(id=pk)
            if related:
                query = query.prefetch_related(*related)
            return await query.first()
        except BaseORMException as exc:
            raise to_persistence_error(exc) from exc

    async def exists(self, model: Type[Model], pk: Any) -> bool:
        try:
            return await model.filter(id=pk).exists()
        except BaseORMException as exc:
            raise to_persistence_error(exc) from exc

    async def create(
            self,
            model: Type[Model],
            payload: Dict[str, Any],
            related: Iterable[str] = (),
    ) -> Model:
        try:
            instance = await model.create(**payload)
            if related:
                await instance.fetch_related(*related)
            return instance
        except BaseORMException as exc:
            raise to_persistence_error(exc) from exc

    async def update(
            self,
            model: Type[Model],
            pk: Any,
            payload: Dict[str, Any],
            related: Iterable[str] = (),
            unless: Optional[Dict[str, Any]] = None,
    ) -> Model:
        """
        Обновляет запись одним условным UPDATE.

        Args:
            model: Модель
            pk: Первичный ключ
            payload: Поля для записи
            related: Связи, загружаемые в результат
            unless: Строка не обновляется, если совпадает с этими значениями

        Raises:
            PersistenceError: NOT_FOUND, если ни одна строка не изменилась
        """
        try:
            query = model.filter(id=pk)
            if unless:
                query = query.exclude(**unless)
            updated = await query.update(**payload, updated_at=timezone.now())
            if not updated:
                raise PersistenceError(ErrorKind.NOT_FOUND, f"{model.__name__} {pk} was not updated")

            instance = await self.find_unique(model, pk, related=related)
            if instance is None:
                raise PersistenceError(ErrorKind.NOT_FOUND, f"{model.__name__} {pk} vanished after update")
            return instance
        except BaseORMException as exc:
            raise to_persistence_error(exc) from exc

    async def delete(self, model: Type[Model], pk: Any) -> None:
        try:
            deleted = await model.filter(id=pk).delete()
        except BaseORMException as exc:
            raise to_persistence_error(exc) from exc
        if not deleted:
            raise PersistenceError(ErrorKind.NOT_FOUND, f"{model.__name__} {pk} does not exist")


# Экземпляр репозитория для использования
repository = Repository()
