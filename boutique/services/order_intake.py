# boutique/services/order_intake.py

import json
import logging
from typing import List, Optional, Tuple

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from boutique.config import settings
from boutique.constants.order_status import OrderStatus, PaymentMethod, PaymentStatus
from boutique.constants.products import CUSTOM_PRODUCT_PURPOSES, GARMENT_NAMES, is_custom_product
from boutique.models.address import Address
from boutique.models.cart import CartItem
from boutique.models.custom_order import CustomOrder
from boutique.models.order import Order
from boutique.models.order_item import OrderItem
from boutique.models.product import Product
from boutique.models.user import User
from boutique.schemas.order_schemas import CustomDesign, OrderCreate, OrderLineIn, ShippingInfo
from boutique.services.order_number import allocate_order_number
from boutique.services.pricing import apply_catalog_prices, compute_totals, quote_custom_design

logger = logging.getLogger(__name__)

MONEY_TOLERANCE = 0.01


def validate_order_request(data: OrderCreate) -> None:
    # an empty item list counts as missing: every order needs a line
    if not data.user_id or not data.items or not data.shipping_info or not data.payment_info:
        raise HTTPException(400, "Missing required fields")

    method = (data.payment_info.method or "").upper()
    if method not in PaymentMethod.__members__:
        raise HTTPException(400, f"Unsupported payment method: {data.payment_info.method}")


def create_order(session: Session, data: OrderCreate, now_ms: Optional[int] = None) -> Order:
    """
    Materialize a checkout into an Order.

    Address, order, lines, custom orders, stock decrements and cart
    clearing are flushed in one session and committed once. Any failure
    rolls the whole order back. A unique-index clash on the order number
    retries the unit of work with a fresh number.
    """
    validate_order_request(data)

    attempts = settings.order_number_attempts
    if attempts < 1:
        raise RuntimeError(f"order_number_attempts must be at least 1, got {attempts}")

    for attempt in range(1, attempts + 1):
        try:
            order = _materialize(session, data, now_ms)
            session.commit()
        except IntegrityError as e:
            session.rollback()
            if attempt == attempts:
                raise
            logger.warning(f"Order insert conflict for user {data.user_id} (attempt {attempt}): {e.orig}")
            continue
        except Exception:
            session.rollback()
            raise

        session.refresh(order)
        logger.info(
            f"Created order {order.order_number} for user {order.user_id}: "
            f"{len(order.items)} item(s), total {order.total}"
        )
        return order


def _materialize(session: Session, data: OrderCreate, now_ms: Optional[int]) -> Order:
    user = session.get(User, data.user_id)
    if not user:
        raise HTTPException(404, "User not found")

    address = resolve_address(session, user.id, data.address_id, data.shipping_info)

    lines, subtotal = price_lines(session, data.items)
    totals = compute_totals(subtotal)
    _warn_on_client_totals(data, totals)

    order = Order(
        order_number=allocate_order_number(session, now_ms),
        user_id=user.id,
        address_id=address.id,
        status=OrderStatus.PENDING.value,
        subtotal=totals.subtotal,
        discount=0,
        tax=totals.tax,
        shipping=totals.shipping,
        total=totals.total,
        payment_method=data.payment_info.method.upper(),
        payment_status=PaymentStatus.PENDING.value,
        notes=data.payment_info.notes or "",
        shipping_address=data.shipping_info.model_dump_json(by_alias=True),
    )
    session.add(order)
    session.flush()

    for line, unit_price, product, design in lines:
        if is_custom_product(line.product_id):
            if design is not None:
                create_custom_order(session, user.id, line, design, unit_price)
        else:
            decrement_stock(session, product, line.quantity)

        session.add(OrderItem(
            order_id=order.id,
            product_id=line.product_id,
            quantity=line.quantity,
            price=unit_price,
            size=line.size,
            color=line.color,
        ))

    clear_cart(session, user.id)
    session.flush()
    return order


def resolve_address(
    session: Session,
    user_id: str,
    address_id: Optional[str],
    shipping_info: ShippingInfo,
) -> Address:
    if address_id:
        address = session.get(Address, address_id)
        if not address or address.user_id != user_id:
            raise HTTPException(404, "Address not found")
        return address

    address = Address(user_id=user_id, **shipping_info.model_dump())
    session.add(address)
    session.flush()
    return address


def lock_product(product_id: str):
    # populate_existing re-reads a row the session already holds, so the
    # stock check sees the value under the lock and not a cached one
    return (
        select(Product)
        .where(Product.id == product_id)
        .with_for_update()
        .execution_options(populate_existing=True)
    )


PricedLine = Tuple[OrderLineIn, float, Optional[Product], Optional[CustomDesign]]


def price_lines(session: Session, items: List[OrderLineIn]) -> Tuple[List[PricedLine], float]:
    """
    Unit prices come from the product catalog for stocked lines and from
    the configurator catalog for custom lines. Stocked products are locked
    until the order commits.
    """
    lines = []
    subtotal = 0.0

    for line in items:
        product = None
        design = None
        if is_custom_product(line.product_id):
            if line.custom_design is not None:
                design = apply_catalog_prices(
                    session, line.custom_design, CUSTOM_PRODUCT_PURPOSES[line.product_id]
                )
                unit_price = quote_custom_design(design, line.final_price).price
            else:
                unit_price = line.final_price
        else:
            product = session.exec(lock_product(line.product_id)).first()
            if not product:
                raise HTTPException(400, f"Product not found: {line.product_id}")
            unit_price = product.price

        subtotal += unit_price * line.quantity
        lines.append((line, unit_price, product, design))

    return lines, subtotal


def create_custom_order(
    session: Session,
    user_id: str,
    line: OrderLineIn,
    design: CustomDesign,
    unit_price: float,
) -> CustomOrder:
    quote = quote_custom_design(design, line.final_price)
    purpose = design.appointment_purpose or CUSTOM_PRODUCT_PURPOSES[line.product_id]
    models = design.selected_models

    custom_order = CustomOrder(
        user_id=user_id,
        fabric=(design.fabric.name if design.fabric else None) or "Custom Fabric",
        fabric_color=(design.fabric.color if design.fabric else None) or "#000000",
        front_design=(design.front_design.name if design.front_design else None) or "Custom Front Design",
        back_design=(design.back_design.name if design.back_design else None) or "Custom Back Design",
        front_design_model=models.front_model.name if models and models.front_model else None,
        back_design_model=models.back_model.name if models and models.back_model else None,
        measurements=json.dumps(design.measurements or {}),
        price=unit_price,
        fabric_cost=quote.fabric_cost,
        front_model_price=quote.front_model_price,
        back_model_price=quote.back_model_price,
        is_own_fabric=quote.is_own_fabric,
        notes=(
            (design.own_fabric_details.description if design.own_fabric_details else None)
            or f"Custom {GARMENT_NAMES.get(purpose, purpose)} design"
        ),
        appointment_date=design.appointment_date,
        appointment_type=design.appointment_type,
        appointment_purpose=purpose,
    )
    session.add(custom_order)
    return custom_order


def decrement_stock(session: Session, product: Product, quantity: int) -> None:
    if product.stock < quantity:
        raise HTTPException(
            400, f"Insufficient stock for {product.name}"
        )

    product.stock -= quantity
    session.add(product)


def clear_cart(session: Session, user_id: str) -> None:
    items = session.exec(
        select(CartItem).where(CartItem.user_id == user_id)
    ).all()

    for item in items:
        session.delete(item)


def _warn_on_client_totals(data: OrderCreate, totals) -> None:
    supplied = {
        "subtotal": data.subtotal,
        "tax": data.tax,
        "shipping": data.shipping,
        "total": data.total,
    }
    mismatched = {
        name: value
        for name, value in supplied.items()
        if value is not None and abs(value - getattr(totals, name)) > MONEY_TOLERANCE
    }
    if mismatched:
        logger.warning(
            f"Ignoring client totals for user {data.user_id}: sent {mismatched}, "
            f"computed subtotal={totals.subtotal} tax={totals.tax} "
            f"shipping={totals.shipping} total={totals.total}"
        )
