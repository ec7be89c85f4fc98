# app/api/product/product.py
from fastapi import APIRouter, Response, status

from api.dependencies import ProductId
from api.schemas import ERROR_RESPONSES, ProductEnvelope, ProductListEnvelope
from models.product import ProductCreate, ProductResponse, ProductUpdate
from services.product import product_service

router = APIRouter(prefix="/products", tags=["products"], responses=ERROR_RESPONSES)


@router.get("", response_model=ProductListEnvelope)
async def get_products():
    products = await product_service.get_all_products()
    return ProductListEnvelope(
        msg="Products fetched successfully",
        data=[ProductResponse.model_validate(product) for product in products],
    )


@router.get("/{id}", response_model=ProductEnvelope)
async def get_product(id: ProductId):
    product = await product_service.get_product_by_id(id)
    return ProductEnvelope(
        msg="Product fetched successfully",
        data=ProductResponse.model_validate(product),
    )


@router.post("", response_model=ProductEnvelope, status_code=status.HTTP_201_CREATED)
async def create_product(product_data: ProductCreate):
    """
    Создание товара.

    Необязательные поля (description, currency, quantity, exists)
    записываются только если переданы.
    """
    product = await product_service.create_product(product_data)
    return ProductEnvelope(
        msg="Product created successfully",
        data=ProductResponse.model_validate(product),
    )


@router.put("/{id}", response_model=ProductEnvelope)
async def update_product(id: ProductId, product_data: ProductUpdate):
    """
    Частичное обновление товара.

    Пустой набор изменений отклоняется с кодом 422.
    """
    product = await product_service.update_product(id, product_data)
    return ProductEnvelope(
        msg="Product updated successfully",
        data=ProductResponse.model_validate(product),
    )


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_product(id: ProductId):
    await product_service.delete_product(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
