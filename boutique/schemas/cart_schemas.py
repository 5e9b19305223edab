from typing import Optional

from pydantic import Field

from boutique.schemas.base import CamelModel


class CartAddRequest(CamelModel):
    product_id: str
    quantity: int = Field(default=1, ge=1)
    size: Optional[str] = None
    color: Optional[str] = None
