from dataclasses import dataclass
from typing import Optional

from fastapi import HTTPException
from sqlmodel import Session

from boutique.config import settings
from boutique.models.blouse_design import BlouseDesign
from boutique.models.fabric import Fabric
from boutique.models.garment_model import BlouseModel, LehengaModel, SalwarKameezModel
from boutique.schemas.order_schemas import CustomDesign

# configurator model table per appointment purpose
MODEL_TABLES = {
    "blouse": BlouseModel,
    "lehenga": LehengaModel,
    "salwar": SalwarKameezModel,
}


@dataclass
class CustomDesignQuote:
    price: float
    fabric_cost: float
    front_model_price: Optional[float]
    back_model_price: Optional[float]
    is_own_fabric: bool


@dataclass
class OrderTotals:
    subtotal: float
    tax: float
    shipping: float
    total: float
    discount: float = 0


def quote_custom_design(design: CustomDesign, fallback_price: float = 0) -> CustomDesignQuote:
    """
    Price a configurator design from its components: fabric yardage
    (free when the customer brings their own), stitch costs of the chosen
    front and back designs, and the front/back model prices.

    fallback_price is only used when the design names no priced component.
    """
    fabric = design.fabric
    is_own_fabric = bool(fabric and fabric.is_own_fabric)

    fabric_cost = 0.0
    if fabric and not is_own_fabric and fabric.price_per_meter:
        fabric_cost = fabric.price_per_meter * settings.fabric_meters_per_garment

    stitch_cost = sum(
        d.stitch_cost or 0
        for d in (design.front_design, design.back_design)
        if d is not None
    )

    models = design.selected_models
    front_model_price = models.front_model.final_price if models and models.front_model else None
    back_model_price = models.back_model.final_price if models and models.back_model else None

    price = fabric_cost + stitch_cost + (front_model_price or 0) + (back_model_price or 0)
    if price <= 0:
        price = fallback_price

    return CustomDesignQuote(
        price=round(price, 2),
        fabric_cost=round(fabric_cost, 2),
        front_model_price=front_model_price,
        back_model_price=back_model_price,
        is_own_fabric=is_own_fabric,
    )


def compute_totals(subtotal: float) -> OrderTotals:
    # SHIPPING RULE
    shipping = 0 if subtotal > settings.free_shipping_threshold else settings.shipping_flat_rate
    tax = round(subtotal * settings.tax_rate, 2)

    return OrderTotals(
        subtotal=round(subtotal, 2),
        tax=tax,
        shipping=shipping,
        total=round(subtotal + tax + shipping, 2),
    )


def final_price(price: float, discount: Optional[float]) -> float:
    """List price less a percentage discount."""
    if not discount:
        return price
    return round(price - price * discount / 100, 2)


def _catalog_row(session: Session, model, row_id: str, label: str):
    row = session.get(model, row_id)
    if not row or not row.is_active:
        raise HTTPException(400, f"{label} not found: {row_id}")
    return row


def apply_catalog_prices(session: Session, design: CustomDesign, purpose: str) -> CustomDesign:
    """
    Replace the prices of every design component that names a catalog id
    with the catalog's own figures. Components without an id keep the
    submitted (non-negative) figures.
    """
    design = design.model_copy(deep=True)

    fabric = design.fabric
    if fabric and fabric.id and not fabric.is_own_fabric:
        row = _catalog_row(session, Fabric, fabric.id, "Fabric")
        fabric.name = row.name
        fabric.color = fabric.color or row.color
        fabric.price_per_meter = row.price_per_meter

    for choice in (design.front_design, design.back_design):
        if choice and choice.id:
            row = _catalog_row(session, BlouseDesign, choice.id, "Blouse design")
            choice.name = row.name
            choice.stitch_cost = row.stitch_cost

    models = design.selected_models
    table = MODEL_TABLES.get(purpose)
    if models and table is not None:
        for choice in (models.front_model, models.back_model):
            if choice and choice.id:
                row = _catalog_row(session, table, choice.id, "Design model")
                choice.name = row.name
                choice.design_name = row.design_name
                choice.final_price = row.final_price

    return design
