from sqlmodel import SQLModel, Field, Relationship
from typing import Optional
from datetime import datetime
from uuid import uuid4
from sqlalchemy import DateTime

from boutique.utils.timestamps import utcnow

from boutique.models.user import User


class CustomOrder(SQLModel, table=True):
    __tablename__ = "custom_order"
    id: str = Field(default_factory=lambda: uuid4().hex, primary_key=True)
    user_id: str = Field(foreign_key="user.id", index=True)

    fabric: str
    fabric_color: str
    front_design: str
    back_design: str
    front_design_model: Optional[str] = None
    back_design_model: Optional[str] = None

    measurements: str = Field(default="{}")  # serialized JSON

    price: float
    fabric_cost: Optional[float] = None
    front_model_price: Optional[float] = None
    back_model_price: Optional[float] = None
    is_own_fabric: bool = Field(default=False)

    notes: Optional[str] = None
    appointment_date: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
    appointment_type: Optional[str] = None
    appointment_purpose: Optional[str] = Field(default=None, index=True)

    status: str = Field(default="PENDING")

    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))

    user: Optional["User"] = Relationship()
