# app/db/models/category.py
from tortoise import fields
from db.models.abstract_model import BaseModel


class Category(BaseModel):
    name = fields.CharField(max_length=60, unique=True)

    # Optional nesting: a category may belong to a parent category
    parent: fields.ForeignKeyNullableRelation["Category"] = fields.ForeignKeyField(
        "store.Category",
        related_name="children",
        null=True,
        on_delete=fields.SET_NULL,
    )

    class Meta:
        table = "categories"

    def __str__(self):
        return self.name
