from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from uuid import uuid4
from sqlalchemy import DateTime

from boutique.utils.timestamps import utcnow


class BlouseDesign(SQLModel, table=True):
    __tablename__ = "blouse_design"
    id: str = Field(default_factory=lambda: uuid4().hex, primary_key=True)
    name: str = Field(index=True)
    type: str = Field(default="FRONT")  # FRONT | BACK
    image: Optional[str] = None
    description: Optional[str] = None
    stitch_cost: float = 0
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
