# app/db/models/abstract_model.py
from tortoise import fields, models


class TimestampMixin:
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)


class BaseModel(models.Model, TimestampMixin):
    id = fields.UUIDField(primary_key=True)

    class Meta:
        abstract = True
