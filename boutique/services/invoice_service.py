# boutique/services/invoice_service.py
from typing import Optional

from boutique.config import settings
from boutique.constants.products import CUSTOM_PRODUCT_PURPOSES, GARMENT_NAMES
from boutique.models.order import Order
from boutique.utils.template import render_template


def _party(order: Order) -> dict:
    """Ship-to block: the linked address, falling back to the account."""
    user = order.user
    address = order.address

    user_name = user.name if user else None
    user_phone = user.phone if user else None

    if address is None:
        return {
            "name": user_name or "Customer",
            "phone": user_phone or "N/A",
            "address": "N/A",
            "city": "N/A",
            "state": "N/A",
            "pincode": "N/A",
            "country": "India",
        }

    full_name = f"{address.first_name or ''} {address.last_name or ''}".strip()
    return {
        "name": full_name or user_name or "Customer",
        "phone": address.phone or user_phone or "N/A",
        "address": address.address or "N/A",
        "city": address.city or "N/A",
        "state": address.state or "N/A",
        "pincode": address.zip_code or "N/A",
        "country": address.country or "India",
    }


def _line_name(product_id: str, products: dict) -> str:
    purpose = CUSTOM_PRODUCT_PURPOSES.get(product_id)
    if purpose:
        return f"Custom {GARMENT_NAMES[purpose].title()}"
    product = products.get(product_id)
    return product["name"] if product else product_id


def _tax_rate_pct(order: Order) -> float:
    """GST rate the order was actually charged at."""
    if not order.subtotal:
        return 0
    return round(order.tax / order.subtotal * 100, 2)


def render_invoice(order: Order, products: Optional[dict] = None) -> str:
    products = products or {}

    lines = [
        {
            "name": _line_name(item.product_id, products),
            "sku": (products.get(item.product_id) or {}).get("sku"),
            "size": item.size,
            "color": item.color,
            "quantity": item.quantity,
            "price": item.price,
            "line_total": round(item.price * item.quantity, 2),
        }
        for item in order.items
    ]

    return render_template(
        "invoice.html",
        store={
            "name": settings.store_name,
            "tagline": settings.store_tagline,
            "email": settings.support_email,
        },
        order=order,
        order_date=order.created_at.strftime("%d %B %Y"),
        ship_to=_party(order),
        customer_email=order.user.email if order.user else None,
        lines=lines,
        tax_rate_pct=_tax_rate_pct(order),
    )
