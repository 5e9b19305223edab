from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from uuid import uuid4
from sqlalchemy import DateTime

from boutique.utils.timestamps import utcnow


class GarmentModelBase(SQLModel):
    """Ready-made silhouettes shown in the design configurator."""

    id: str = Field(default_factory=lambda: uuid4().hex, primary_key=True)
    name: str = Field(index=True)
    design_name: str
    description: Optional[str] = None
    image: Optional[str] = None
    images: Optional[str] = None   # comma separated paths
    price: float
    discount: Optional[float] = None   # percent
    final_price: float
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))


class BlouseModel(GarmentModelBase, table=True):
    __tablename__ = "blouse_model"
    stitch_cost: float = 0


class LehengaModel(GarmentModelBase, table=True):
    __tablename__ = "lehenga_model"


class SalwarKameezModel(GarmentModelBase, table=True):
    __tablename__ = "salwar_kameez_model"
