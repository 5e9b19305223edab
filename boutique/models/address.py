from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from uuid import uuid4
from sqlalchemy import DateTime

from boutique.utils.timestamps import utcnow


class Address(SQLModel, table=True):
    id: str = Field(default_factory=lambda: uuid4().hex, primary_key=True)
    user_id: str = Field(foreign_key="user.id", index=True)
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: str
    city: str
    state: str
    zip_code: str
    country: str = Field(default="India")
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
