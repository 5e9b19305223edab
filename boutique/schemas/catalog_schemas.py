from typing import List, Literal, Optional

from pydantic import Field

from boutique.schemas.base import CamelModel


class FabricIn(CamelModel):
    name: str = Field(min_length=1)
    type: Optional[str] = None
    color: Optional[str] = None
    price_per_meter: float = Field(ge=0)
    image: Optional[str] = None
    description: Optional[str] = None
    is_active: bool = True


class BlouseDesignIn(CamelModel):
    name: str = Field(min_length=1)
    type: Literal["FRONT", "BACK"] = "FRONT"
    image: Optional[str] = None
    description: Optional[str] = None
    stitch_cost: float = Field(default=0, ge=0)
    is_active: bool = True


class GarmentModelIn(CamelModel):
    name: str = Field(min_length=1)
    design_name: str = Field(min_length=1)
    description: Optional[str] = None
    image: Optional[str] = None
    images: Optional[List[str]] = None
    price: float = Field(gt=0)
    discount: Optional[float] = Field(default=None, ge=0, le=100)
    is_active: bool = True


class BlouseModelIn(GarmentModelIn):
    stitch_cost: float = Field(ge=0)


class ActiveToggle(CamelModel):
    is_active: bool
