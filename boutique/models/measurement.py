from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from uuid import uuid4
from sqlalchemy import DateTime

from boutique.utils.timestamps import utcnow


# All lengths are in inches.

class MeasurementBase(SQLModel):
    id: str = Field(default_factory=lambda: uuid4().hex, primary_key=True)
    user_id: str = Field(foreign_key="user.id", index=True)
    custom_order_id: Optional[str] = Field(default=None, foreign_key="custom_order.id")
    notes: Optional[str] = None
    measured_by: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))


class BlouseFields(MeasurementBase):
    # front
    blouse_back_length: Optional[float] = None
    full_shoulder: Optional[float] = None
    shoulder_strap: Optional[float] = None
    back_neck_depth: Optional[float] = None
    front_neck_depth: Optional[float] = None
    shoulder_to_apex: Optional[float] = None
    front_length: Optional[float] = None
    chest: Optional[float] = None
    waist: Optional[float] = None
    # back / sleeves
    sleeve_length: Optional[float] = None
    arm_round: Optional[float] = None
    sleeve_round: Optional[float] = None
    arm_hole: Optional[float] = None


class BlouseMeasurement(BlouseFields, table=True):
    __tablename__ = "blouse_measurement"


class LehengaMeasurement(BlouseFields, table=True):
    __tablename__ = "lehenga_measurement"
    lehenga_waist: Optional[float] = None
    lehenga_hip: Optional[float] = None
    lehenga_length: Optional[float] = None
    lehenga_width: Optional[float] = None


class SalwarMeasurement(MeasurementBase, table=True):
    __tablename__ = "salwar_measurement"
    bust: Optional[float] = None
    waist: Optional[float] = None
    hip: Optional[float] = None
    kameez_length: Optional[float] = None
    shoulder: Optional[float] = None
    sleeve_length: Optional[float] = None
    armhole_round: Optional[float] = None
    wrist_round: Optional[float] = None
    waist_tie: Optional[float] = None
    salwar_length: Optional[float] = None
    thigh_round: Optional[float] = None
    knee_round: Optional[float] = None
    ankle_round: Optional[float] = None
