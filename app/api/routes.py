# app/api/routes.py
from fastapi import APIRouter
from api.category.category import router as category_router
from api.product.product import router as product_router

router = APIRouter(prefix="/api")

router.include_router(category_router)
router.include_router(product_router)
