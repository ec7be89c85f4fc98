# app/api/dependencies.py
from typing import Annotated

from pydantic import AfterValidator

from api import rules

# Path parameters validated by the same rule chains as body fields
CategoryId = Annotated[str, AfterValidator(rules.CATEGORY_ID.run)]
ProductId = Annotated[str, AfterValidator(rules.PRODUCT_ID.run)]
