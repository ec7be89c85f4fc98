# app/api/rules.py
"""
Правила валидации полей категорий и товаров.
"""

from api.validation import Rules

CATEGORY_NAME_PATTERN = r"^[a-zA-Z0-9\s]+$"
PRODUCT_NAME_PATTERN = r"^[a-zA-Z0-9\s']+$"


def resource_id(label: str) -> Rules:
    return (
        Rules()
        .trim()
        .not_empty(f"{label} ID is required")
        .is_uuid(f"Invalid {label.lower()} ID format")
    )


def category_name() -> Rules:
    return (
        Rules()
        .trim()
        .not_empty("Name is required")
        .length(3, 60, "Name should be between 3 and 60 characters")
        .matches(CATEGORY_NAME_PATTERN, "Name should contain only letters, numbers, and spaces")
    )


def product_name(optional: bool = False) -> Rules:
    rules = Rules().optional() if optional else Rules()
    return (
        rules
        .trim()
        .not_empty("Name is required")
        .length(3, 60, "Name should be between 3 and 60 characters")
        .matches(PRODUCT_NAME_PATTERN, "Name should contain only letters, numbers, and spaces")
    )


def price(optional: bool = False) -> Rules:
    rules = Rules().optional() if optional else Rules()
    return (
        rules
        .not_empty("Price is required")
        .is_float("Price should be a positive number", min_value=0.01)
    )


def category_ref(optional: bool = False) -> Rules:
    rules = Rules().optional() if optional else Rules()
    return (
        rules
        .trim()
        .not_empty("Category ID is required")
        .is_uuid("Invalid category ID format")
    )


DESCRIPTION = (
    Rules()
    .optional()
    .trim()
    .strip_tags()
    .length(3, 120, "Description should be between 3 and 120 characters")
)

CURRENCY = (
    Rules()
    .optional()
    .trim()
    .strip_tags()
    .length(3, 3, "Currency should be exactly 3 characters")
)

QUANTITY = Rules().optional().is_int("Quantity should be a positive number", min_value=0)

EXISTS = Rules().optional().is_boolean("Exists should be a boolean")

CATEGORY_ID = resource_id("Category")
PRODUCT_ID = resource_id("Product")
