# app/models/product.py
"""
Pydantic модели для товаров.
"""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from api import rules
from api.sanitizer import sanitize
from api.validation import parse_bool
from models.category import CategoryRef

CREATE_NAME_RULES = rules.product_name()
CREATE_PRICE_RULES = rules.price()
CREATE_CATEGORY_RULES = rules.category_ref()
UPDATE_NAME_RULES = rules.product_name(optional=True)
UPDATE_PRICE_RULES = rules.price(optional=True)
UPDATE_CATEGORY_RULES = rules.category_ref(optional=True)
REQUIRED_FIELDS = ("name", "price", "categoryId")


class ProductOptionalRules(BaseModel):
    """Правила необязательных полей, общие для создания и обновления"""

    @field_validator("description", mode="before", check_fields=False)
    @classmethod
    def validate_description(cls, v):
        return rules.DESCRIPTION.run(v)

    @field_validator("currency", mode="before", check_fields=False)
    @classmethod
    def validate_currency(cls, v):
        return rules.CURRENCY.run(v)

    @field_validator("quantity", mode="before", check_fields=False)
    @classmethod
    def validate_quantity(cls, v):
        return rules.QUANTITY.run(v)

    @field_validator("exists", mode="before", check_fields=False)
    @classmethod
    def validate_exists(cls, v):
        return rules.EXISTS.run(v)


class ProductCreate(ProductOptionalRules):
    """Схема для создания товара"""
    name: str = None
    price: Any = None
    category_id: str = Field(default=None, alias="categoryId")
    description: Optional[str] = None
    currency: Optional[str] = None
    quantity: Any = None
    exists: Any = None

    @model_validator(mode="before")
    @classmethod
    def fill_required(cls, data):
        # Отсутствующие обязательные поля проверяются под именами из запроса
        if isinstance(data, dict):
            return {**dict.fromkeys(REQUIRED_FIELDS), **data}
        return data

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        return CREATE_NAME_RULES.run(v)

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, v):
        return CREATE_PRICE_RULES.run(v)

    @field_validator("category_id", mode="before")
    @classmethod
    def validate_category_id(cls, v):
        return CREATE_CATEGORY_RULES.run(v)


class ProductUpdate(ProductOptionalRules):
    """Схема для частичного обновления товара; все поля необязательны"""
    name: Optional[str] = None
    price: Any = None
    category_id: Optional[str] = Field(default=None, alias="categoryId")
    description: Optional[str] = None
    currency: Optional[str] = None
    quantity: Any = None
    exists: Any = None

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        return UPDATE_NAME_RULES.run(v)

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, v):
        return UPDATE_PRICE_RULES.run(v)

    @field_validator("category_id", mode="before")
    @classmethod
    def validate_category_id(cls, v):
        return UPDATE_CATEGORY_RULES.run(v)


class ProductWrite(BaseModel):
    """
    Данные для записи товара в БД.

    В ORM попадают только явно заданные поля.
    """
    name: Optional[str] = None
    price: Optional[float] = None
    category_id: Optional[UUID] = None
    description: Optional[str] = None
    currency: Optional[str] = None
    quantity: Optional[int] = None
    in_stock: Optional[bool] = None

    @classmethod
    def for_create(cls, data: ProductCreate) -> "ProductWrite":
        payload = cls(
            name=sanitize(data.name),
            price=float(data.price),
            category_id=data.category_id,
        )
        payload._apply_optional(data)
        return payload

    @classmethod
    def for_update(cls, data: ProductUpdate) -> "ProductWrite":
        payload = cls()
        if data.name is not None:
            payload.name = sanitize(data.name)
        if data.price is not None:
            payload.price = float(data.price)
        if data.category_id is not None:
            payload.category_id = UUID(data.category_id)
        payload._apply_optional(data)
        return payload

    def _apply_optional(self, data) -> None:
        if data.description is not None:
            self.description = sanitize(data.description)
        if data.currency is not None:
            self.currency = sanitize(data.currency)
        if data.quantity is not None:
            self.quantity = int(data.quantity)
        if data.exists is not None:
            self.in_stock = parse_bool(data.exists)

    def is_empty(self) -> bool:
        return not self.model_fields_set

    def to_orm(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ProductResponse(BaseModel):
    """Публичный ответ с данными товара и его категорией"""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    price: float
    description: Optional[str] = None
    currency: Optional[str] = None
    quantity: int
    exists: bool = Field(validation_alias=AliasChoices("in_stock", "exists"))
    category: CategoryRef
    created_at: datetime
    updated_at: datetime
