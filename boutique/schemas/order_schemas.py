from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from boutique.schemas.base import CamelModel


class FabricChoice(CamelModel):
    id: Optional[str] = None
    name: Optional[str] = None
    color: Optional[str] = None
    price_per_meter: Optional[float] = Field(default=None, ge=0)
    is_own_fabric: bool = False


class DesignChoice(CamelModel):
    id: Optional[str] = None
    name: Optional[str] = None
    stitch_cost: Optional[float] = Field(default=None, ge=0)


class ModelChoice(CamelModel):
    id: Optional[str] = None
    name: Optional[str] = None
    design_name: Optional[str] = None
    final_price: Optional[float] = Field(default=None, ge=0)
    image: Optional[str] = None


class SelectedModels(CamelModel):
    front_model: Optional[ModelChoice] = None
    back_model: Optional[ModelChoice] = None


class OwnFabricDetails(CamelModel):
    description: Optional[str] = None


class CustomDesign(CamelModel):
    fabric: Optional[FabricChoice] = None
    front_design: Optional[DesignChoice] = None
    back_design: Optional[DesignChoice] = None
    selected_models: Optional[SelectedModels] = None
    measurements: Optional[Dict[str, Any]] = None
    own_fabric_details: Optional[OwnFabricDetails] = None
    appointment_date: Optional[datetime] = None
    appointment_type: Optional[str] = None
    appointment_purpose: Optional[str] = None


class OrderLineIn(CamelModel):
    product_id: str
    quantity: int = Field(default=1, ge=1)
    final_price: float = Field(default=0, ge=0)
    size: Optional[str] = None
    color: Optional[str] = None
    custom_design: Optional[CustomDesign] = None


class ShippingInfo(CamelModel):
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: str
    city: str
    state: str
    zip_code: str
    country: str = "India"


class PaymentInfo(CamelModel):
    method: str
    notes: Optional[str] = None


class OrderCreate(CamelModel):
    # top-level fields are optional here so that absence can be reported
    # as a single "missing fields" error instead of a schema error
    user_id: Optional[str] = None
    items: Optional[List[OrderLineIn]] = None
    shipping_info: Optional[ShippingInfo] = None
    payment_info: Optional[PaymentInfo] = None
    address_id: Optional[str] = None

    subtotal: Optional[float] = None
    tax: Optional[float] = None
    shipping: Optional[float] = None
    total: Optional[float] = None


class StatusUpdate(CamelModel):
    status: str


class CustomOrderStatusUpdate(CamelModel):
    order_id: str
    status: str
