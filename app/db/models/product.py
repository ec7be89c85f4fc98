# app/db/models/product.py
from tortoise import fields
from db.models.abstract_model import BaseModel
from db.models.category import Category


class Product(BaseModel):
    name = fields.CharField(max_length=60, unique=True)
    price = fields.FloatField()
    description = fields.TextField(null=True)
    # holds the escaped form of a 3-char code
    currency = fields.CharField(max_length=15, null=True)
    quantity = fields.IntField(default=0)
    in_stock = fields.BooleanField(default=True, source_field="exists")

    # Foreign keys
    category: fields.ForeignKeyRelation[Category] = fields.ForeignKeyField(
        "store.Category",
        related_name="products",
        on_delete=fields.RESTRICT,
    )

    class Meta:
        table = "products"

    def __str__(self):
        return f"{self.name} ({self.price})"
