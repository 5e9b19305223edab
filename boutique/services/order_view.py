# boutique/services/order_view.py
import json
from datetime import timedelta
from typing import Dict, Iterable, List, Optional

from sqlmodel import Session, select

from boutique.config import settings
from boutique.constants.products import CUSTOM_PRODUCT_PURPOSES, ORDER_TYPES, is_custom_product
from boutique.models.address import Address
from boutique.models.custom_order import CustomOrder
from boutique.models.order import Order
from boutique.models.order_item import OrderItem
from boutique.models.product import Product
from boutique.utils.timestamps import as_utc


def product_summaries(session: Session, items: Iterable[OrderItem]) -> Dict[str, dict]:
    ids = {i.product_id for i in items if not is_custom_product(i.product_id)}
    if not ids:
        return {}

    products = session.exec(select(Product).where(Product.id.in_(ids))).all()
    return {
        p.id: {
            "id": p.id,
            "name": p.name,
            "sku": p.sku,
            "images": p.images.split(",") if p.images else [],
        }
        for p in products
    }


def serialize_address(address: Optional[Address]) -> Optional[dict]:
    if address is None:
        return None
    return {
        "id": address.id,
        "firstName": address.first_name,
        "lastName": address.last_name,
        "email": address.email,
        "phone": address.phone,
        "address": address.address,
        "city": address.city,
        "state": address.state,
        "zipCode": address.zip_code,
        "country": address.country,
    }


def serialize_item(item: OrderItem, products: Optional[Dict[str, dict]] = None) -> dict:
    return {
        "id": item.id,
        "productId": item.product_id,
        "quantity": item.quantity,
        "price": item.price,
        "size": item.size,
        "color": item.color,
        "isCustomDesign": is_custom_product(item.product_id),
        "product": (products or {}).get(item.product_id),
    }


def serialize_order(
    order: Order,
    products: Optional[Dict[str, dict]] = None,
    include_user: bool = False,
) -> dict:
    data = {
        "id": order.id,
        "orderNumber": order.order_number,
        "userId": order.user_id,
        "status": order.status,
        "subtotal": order.subtotal,
        "discount": order.discount,
        "tax": order.tax,
        "shipping": order.shipping,
        "total": order.total,
        "paymentMethod": order.payment_method,
        "paymentStatus": order.payment_status,
        "notes": order.notes,
        "shippingAddress": json.loads(order.shipping_address) if order.shipping_address else None,
        "addressId": order.address_id,
        "address": serialize_address(order.address),
        "orderItems": [serialize_item(i, products) for i in order.items],
        "createdAt": order.created_at,
        "updatedAt": order.updated_at,
    }

    if include_user and order.user:
        data["user"] = {
            "name": order.user.name,
            "email": order.user.email,
            "phone": order.user.phone,
        }

    return data


def serialize_custom_order(custom_order: CustomOrder) -> dict:
    return {
        "id": custom_order.id,
        "userId": custom_order.user_id,
        "fabric": custom_order.fabric,
        "fabricColor": custom_order.fabric_color,
        "frontDesign": custom_order.front_design,
        "backDesign": custom_order.back_design,
        "frontDesignModel": custom_order.front_design_model,
        "backDesignModel": custom_order.back_design_model,
        "measurements": custom_order.measurements or "{}",
        "price": custom_order.price,
        "fabricCost": custom_order.fabric_cost,
        "frontModelPrice": custom_order.front_model_price,
        "backModelPrice": custom_order.back_model_price,
        "isOwnFabric": custom_order.is_own_fabric,
        "notes": custom_order.notes,
        "appointmentDate": custom_order.appointment_date,
        "appointmentType": custom_order.appointment_type,
        "appointmentPurpose": custom_order.appointment_purpose,
        "status": custom_order.status,
        "createdAt": custom_order.created_at,
        "updatedAt": custom_order.updated_at,
    }


def custom_order_purpose(custom_order: CustomOrder) -> str:
    """Appointment purpose, or a guess from the front design name for old rows."""
    if custom_order.appointment_purpose:
        return custom_order.appointment_purpose

    front = (custom_order.front_design or "").lower()
    if "lehenga" in front:
        return "lehenga"
    if "salwar" in front:
        return "salwar"
    return "blouse"


def custom_order_type(custom_order: CustomOrder) -> str:
    """Garment type as the admin console names it."""
    purpose = custom_order_purpose(custom_order)
    return ORDER_TYPES.get(purpose, purpose)


def nearby_custom_orders(session: Session, order: Order) -> List[CustomOrder]:
    """
    Custom orders are not keyed to their order line; they are matched by
    owner and by being created within the configured window of the order.
    Closest to the order's own timestamp first.
    """
    window = timedelta(hours=settings.custom_order_match_window_hours)
    placed_at = as_utc(order.created_at)
    candidates = session.exec(
        select(CustomOrder)
        .where(
            CustomOrder.user_id == order.user_id,
            CustomOrder.created_at >= placed_at - window,
            CustomOrder.created_at <= placed_at + window,
        )
    ).all()

    return sorted(candidates, key=lambda co: abs(as_utc(co.created_at) - placed_at))


def attach_custom_designs(order_data: dict, custom_orders: List[CustomOrder]) -> dict:
    unclaimed = list(custom_orders)

    for item in order_data["orderItems"]:
        item["customDesign"] = None
        item["designModel"] = None

        purpose = CUSTOM_PRODUCT_PURPOSES.get(item["productId"])
        if purpose is None:
            continue

        match = next((co for co in unclaimed if custom_order_purpose(co) == purpose), None)
        if match is None:
            continue
        unclaimed.remove(match)

        item["customDesign"] = {
            "customOrderId": match.id,
            "fabric": match.fabric,
            "fabricColor": match.fabric_color,
            "frontDesign": match.front_design,
            "backDesign": match.back_design,
            "status": match.status,
        }
        if match.front_design_model or match.back_design_model:
            item["designModel"] = {
                "front": match.front_design_model,
                "back": match.back_design_model,
            }

    return order_data
