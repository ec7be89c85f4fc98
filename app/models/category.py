# app/models/category.py
"""
Pydantic модели для категорий.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from api import rules

NAME_RULES = rules.category_name()


class CategoryRef(BaseModel):
    """Краткая ссылка на категорию (id и имя)"""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str


class CategoryCreate(BaseModel):
    """Схема для создания категории"""
    name: str = Field(default=None, validate_default=True)

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        return NAME_RULES.run(v)


class CategoryUpdate(CategoryCreate):
    """Схема для переименования категории"""
    pass


class CategoryResponse(CategoryRef):
    """Публичный ответ с данными категории"""
    created_at: datetime
    updated_at: datetime


class CategoryDetail(CategoryResponse):
    """Категория вместе с родительской категорией"""
    parent: Optional[CategoryRef] = None
