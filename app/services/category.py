# app/services/category.py
"""
Сервис для работы с категориями.
"""

import logging
from typing import List

from api.errors import translate
from api.exceptions import ConflictException, NotFoundException
from api.sanitizer import sanitize
from db.models import Category
from db.repository import ErrorKind, PersistenceError, Repository, repository
from models.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)

CATEGORY_NOT_FOUND = "Category not found!"


class CategoryService:
    """Сервис категорий"""

    def __init__(self, repo: Repository = repository):
        self.repo = repo

    async def get_all_categories(self) -> List[Category]:
        """
        Получает все категории.

        Returns:
            List[Category]: Список всех категорий
        """
        try:
            return await self.repo.find_many(Category)
        except PersistenceError as exc:
            raise translate(exc, {}, "Internal server error while fetching categories") from exc

    async def get_category_by_id(self, category_id: str) -> Category:
        """
        Получает категорию по ID вместе с родительской категорией.

        Args:
            category_id: ID категории

        Returns:
            Category: Категория

        Raises:
            NotFoundException: Если категория не найдена
        """
        try:
            category = await self.repo.find_unique(Category, category_id, related=("parent",))
        except PersistenceError as exc:
            raise translate(exc, {}, "Internal server error while fetching category") from exc
        if category is None:
            raise NotFoundException(CATEGORY_NOT_FOUND)
        return category

    async def create_category(self, category_data: CategoryCreate) -> Category:
        """
        Создает новую категорию.

        Args:
            category_data: Данные категории

        Returns:
            Category: Созданная категория

        Raises:
            ConflictException: Если категория с таким именем уже существует
        """
        name = sanitize(category_data.name)
        try:
            return await self.repo.create(Category, {"name": name})
        except PersistenceError as exc:
            raise translate(
                exc,
                {ErrorKind.UNIQUE_VIOLATION: f"'{name}' category already exists"},
                "Internal server error while creating category",
            ) from exc

    async def update_category(self, category_id: str, category_data: CategoryUpdate) -> Category:
        """
        Переименовывает категорию.

        Запись выполняется одним условным UPDATE: строка с тем же именем
        не изменяется. Если ничего не обновилось, проверка существования
        отличает «имя не изменилось» (409) от «нет такой категории» (404).

        Args:
            category_id: ID категории
            category_data: Новое имя категории

        Returns:
            Category: Обновленная категория

        Raises:
            NotFoundException: Если категория не найдена
            ConflictException: Если категория с таким именем уже существует
        """
        name = sanitize(category_data.name)
        conflict = f"Category with name '{name}' already exists!"
        fallback = "Internal server error while updating category"
        try:
            return await self.repo.update(
                Category,
                category_id,
                {"name": name},
                unless={"name": name},
            )
        except PersistenceError as exc:
            if exc.kind is not ErrorKind.NOT_FOUND:
                raise translate(exc, {ErrorKind.UNIQUE_VIOLATION: conflict}, fallback) from exc

        try:
            exists = await self.repo.exists(Category, category_id)
        except PersistenceError as exc:
            raise translate(exc, {}, fallback) from exc
        if exists:
            logger.info("Category %s already has name %r", category_id, name)
            raise ConflictException(conflict)
        raise NotFoundException(CATEGORY_NOT_FOUND)

    async def delete_category(self, category_id: str) -> None:
        """
        Удаляет категорию.

        Args:
            category_id: ID категории

        Raises:
            NotFoundException: Если категория не найдена
        """
        try:
            await self.repo.delete(Category, category_id)
        except PersistenceError as exc:
            raise translate(
                exc,
                {ErrorKind.NOT_FOUND: CATEGORY_NOT_FOUND},
                "Internal server error while deleting category",
            ) from exc


# Экземпляр сервиса для использования
category_service = CategoryService()
