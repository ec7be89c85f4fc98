# app/api/schemas.py
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel

from models.category import CategoryDetail, CategoryResponse
from models.product import ProductResponse

DataT = TypeVar("DataT")


# Response envelope
class Envelope(BaseModel, Generic[DataT]):
    msg: str
    data: Optional[DataT] = None


class ValidationFailure(BaseModel):
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    msg: List[ValidationFailure]


class MessageResponse(BaseModel):
    msg: str


CategoryEnvelope = Envelope[CategoryResponse]
CategoryDetailEnvelope = Envelope[CategoryDetail]
CategoryListEnvelope = Envelope[List[CategoryResponse]]
ProductEnvelope = Envelope[ProductResponse]
ProductListEnvelope = Envelope[List[ProductResponse]]

# Документация ошибок для OpenAPI
ERROR_RESPONSES = {
    400: {"model": MessageResponse},
    404: {"model": MessageResponse},
    409: {"model": MessageResponse},
    422: {"model": ValidationErrorResponse},
    500: {"model": MessageResponse},
}
