# app/api/category/category.py
from fastapi import APIRouter, Response, status

from api.dependencies import CategoryId
from api.schemas import ERROR_RESPONSES, CategoryDetailEnvelope, CategoryEnvelope, CategoryListEnvelope
from models.category import CategoryCreate, CategoryDetail, CategoryResponse, CategoryUpdate
from services.category import category_service

router = APIRouter(prefix="/categories", tags=["categories"], responses=ERROR_RESPONSES)


@router.get("", response_model=CategoryListEnvelope)
async def get_categories():
    categories = await category_service.get_all_categories()
    return CategoryListEnvelope(
        msg="Categories fetched successfully",
        data=[CategoryResponse.model_validate(category) for category in categories],
    )


@router.get("/{id}", response_model=CategoryDetailEnvelope)
async def get_category(id: CategoryId):
    category = await category_service.get_category_by_id(id)
    return CategoryDetailEnvelope(
        msg="Category fetched successfully",
        data=CategoryDetail.model_validate(category),
    )


@router.post("", response_model=CategoryEnvelope, status_code=status.HTTP_201_CREATED)
async def create_category(category_data: CategoryCreate):
    category = await category_service.create_category(category_data)
    return CategoryEnvelope(
        msg="Category created successfully",
        data=CategoryResponse.model_validate(category),
    )


@router.put("/{id}", response_model=CategoryEnvelope)
async def update_category_name(id: CategoryId, category_data: CategoryUpdate):
    category = await category_service.update_category(id, category_data)
    return CategoryEnvelope(
        msg="Category updated successfully",
        data=CategoryResponse.model_validate(category),
    )


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_category(id: CategoryId):
    await category_service.delete_category(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
