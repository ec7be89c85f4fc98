# app/services/product.py
"""
Сервис для работы с товарами.

Товар всегда возвращается вместе с категорией (id и name);
столбец category_id в схему ответа не попадает.
"""

import logging
from typing import List

from api.errors import translate
from api.exceptions import NotFoundException, ValidationException
from db.models import Product
from db.repository import ErrorKind, PersistenceError, Repository, repository
from models.product import ProductCreate, ProductUpdate, ProductWrite

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Product not found!"
CATEGORY_NOT_FOUND = "Category not found!"
RELATED = ("category",)


class ProductService:
    """Сервис товаров"""

    def __init__(self, repo: Repository = repository):
        self.repo = repo

    async def get_all_products(self) -> List[Product]:
        """
        Получает все товары с их категориями.

        Returns:
            List[Product]: Список товаров
        """
        try:
            return await self.repo.find_many(Product, related=RELATED)
        except PersistenceError as exc:
            raise translate(exc, {}, "Internal server error while fetching products") from exc

    async def get_product_by_id(self, product_id: str) -> Product:
        """
        Получает товар по ID.

        Raises:
            NotFoundException: Если товар не найден
        """
        try:
            product = await self.repo.find_unique(Product, product_id, related=RELATED)
        except PersistenceError as exc:
            raise translate(exc, {}, "Internal server error while fetching product") from exc
        if product is None:
            raise NotFoundException(PRODUCT_NOT_FOUND)
        return product

    async def create_product(self, product_data: ProductCreate) -> Product:
        """
        Создает новый товар.

        Args:
            product_data: Проверенные данные запроса

        Returns:
            Product: Созданный товар с категорией

        Raises:
            ConflictException: Если товар с таким именем уже существует
            BadRequestException: Если категория не существует
        """
        payload = ProductWrite.for_create(product_data)
        try:
            return await self.repo.create(Product, payload.to_orm(), related=RELATED)
        except PersistenceError as exc:
            raise translate(
                exc,
                {
                    ErrorKind.UNIQUE_VIOLATION: f"'{payload.name}' product already exists",
                    ErrorKind.FOREIGN_KEY_VIOLATION: CATEGORY_NOT_FOUND,
                },
                "Internal server error while creating product",
            ) from exc

    async def update_product(self, product_id: str, product_data: ProductUpdate) -> Product:
        """
        Частично обновляет товар.

        Записываются только переданные поля.

        Args:
            product_id: ID товара
            product_data: Проверенные данные запроса

        Returns:
            Product: Обновленный товар с категорией

        Raises:
            ValidationException: Если не передано ни одного поля
            NotFoundException: Если товар не найден
            ConflictException: Если товар с таким именем уже существует
            BadRequestException: Если новая категория не существует
        """
        payload = ProductWrite.for_update(product_data)
        if payload.is_empty():
            raise ValidationException("No data provided to update")

        logger.debug("Updating product %s fields: %s", product_id, sorted(payload.model_fields_set))
        try:
            return await self.repo.update(Product, product_id, payload.to_orm(), related=RELATED)
        except PersistenceError as exc:
            raise translate(
                exc,
                {
                    ErrorKind.UNIQUE_VIOLATION: f"'{payload.name}' product already exists",
                    ErrorKind.NOT_FOUND: PRODUCT_NOT_FOUND,
                    ErrorKind.FOREIGN_KEY_VIOLATION: CATEGORY_NOT_FOUND,
                },
                "Internal server error while updating product",
            ) from exc

    async def delete_product(self, product_id: str) -> None:
        """
        Удаляет товар.

        Raises:
            NotFoundException: Если товар не найден
        """
        try:
            await self.repo.delete(Product, product_id)
        except PersistenceError as exc:
            raise translate(
                exc,
                {ErrorKind.NOT_FOUND: PRODUCT_NOT_FOUND},
                "Internal server error while deleting product",
            ) from exc


# Экземпляр сервиса для использования
product_service = ProductService()
