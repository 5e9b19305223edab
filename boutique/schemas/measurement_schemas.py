from typing import Optional

from pydantic import Field

from boutique.schemas.base import CamelModel


class MeasurementIn(CamelModel):
    # required on create, ignored on update
    user_id: Optional[str] = None
    custom_order_id: Optional[str] = None
    notes: Optional[str] = None
    measured_by: Optional[str] = None


class BlouseMeasurementIn(MeasurementIn):
    blouse_back_length: Optional[float] = Field(default=None, ge=0)
    full_shoulder: Optional[float] = Field(default=None, ge=0)
    shoulder_strap: Optional[float] = Field(default=None, ge=0)
    back_neck_depth: Optional[float] = Field(default=None, ge=0)
    front_neck_depth: Optional[float] = Field(default=None, ge=0)
    shoulder_to_apex: Optional[float] = Field(default=None, ge=0)
    front_length: Optional[float] = Field(default=None, ge=0)
    chest: Optional[float] = Field(default=None, ge=0)
    waist: Optional[float] = Field(default=None, ge=0)
    sleeve_length: Optional[float] = Field(default=None, ge=0)
    arm_round: Optional[float] = Field(default=None, ge=0)
    sleeve_round: Optional[float] = Field(default=None, ge=0)
    arm_hole: Optional[float] = Field(default=None, ge=0)


class LehengaMeasurementIn(BlouseMeasurementIn):
    lehenga_waist: Optional[float] = Field(default=None, ge=0)
    lehenga_hip: Optional[float] = Field(default=None, ge=0)
    lehenga_length: Optional[float] = Field(default=None, ge=0)
    lehenga_width: Optional[float] = Field(default=None, ge=0)


class SalwarMeasurementIn(MeasurementIn):
    bust: Optional[float] = Field(default=None, ge=0)
    waist: Optional[float] = Field(default=None, ge=0)
    hip: Optional[float] = Field(default=None, ge=0)
    kameez_length: Optional[float] = Field(default=None, ge=0)
    shoulder: Optional[float] = Field(default=None, ge=0)
    sleeve_length: Optional[float] = Field(default=None, ge=0)
    armhole_round: Optional[float] = Field(default=None, ge=0)
    wrist_round: Optional[float] = Field(default=None, ge=0)
    waist_tie: Optional[float] = Field(default=None, ge=0)
    salwar_length: Optional[float] = Field(default=None, ge=0)
    thigh_round: Optional[float] = Field(default=None, ge=0)
    knee_round: Optional[float] = Field(default=None, ge=0)
    ankle_round: Optional[float] = Field(default=None, ge=0)
