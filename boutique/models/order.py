from sqlmodel import SQLModel, Field, Relationship
from typing import List, Optional
from datetime import datetime
from uuid import uuid4
from sqlalchemy import DateTime

from boutique.utils.timestamps import utcnow

from boutique.models.address import Address
from boutique.models.order_item import OrderItem
from boutique.models.user import User


class Order(SQLModel, table=True):
    id: str = Field(default_factory=lambda: uuid4().hex, primary_key=True)
    order_number: str = Field(index=True, unique=True)
    user_id: str = Field(foreign_key="user.id", index=True)
    address_id: Optional[str] = Field(default=None, foreign_key="address.id")

    status: str = Field(default="PENDING")

    subtotal: float
    discount: float = 0
    tax: float
    shipping: float
    total: float

    payment_method: str
    payment_status: str = Field(default="PENDING")

    notes: Optional[str] = None
    shipping_address: Optional[str] = None  # JSON snapshot of the checkout form

    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))

    user: Optional["User"] = Relationship()
    address: Optional["Address"] = Relationship()
    items: List["OrderItem"] = Relationship(back_populates="order")
