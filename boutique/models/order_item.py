from sqlmodel import SQLModel, Field , Relationship
from typing import Optional , TYPE_CHECKING

if TYPE_CHECKING:
    from boutique.models.order import Order


class OrderItem(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    order_id: str = Field(foreign_key="order.id", index=True)

    # a real product id or a custom-design sentinel, so no foreign key
    product_id: str

    quantity: int
    price: float
    size: Optional[str] = None
    color: Optional[str] = None

    order: Optional["Order"] = Relationship(back_populates="items")
