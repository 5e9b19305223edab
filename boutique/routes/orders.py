import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.encoders import jsonable_encoder
from fastapi.responses import HTMLResponse, JSONResponse
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from boutique.database import get_session
from boutique.models.order import Order
from boutique.models.user import User
from boutique.schemas.order_schemas import OrderCreate
from boutique.services.invoice_service import render_invoice
from boutique.services.legitimacy import ORDER_POLICY, order_fields
from boutique.services.order_intake import create_order
from boutique.services.order_view import (
    attach_custom_designs,
    nearby_custom_orders,
    product_summaries,
    serialize_order,
)
from boutique.utils.token import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter()

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


# Place Order

@router.post("")
def place_order(
    data: OrderCreate,
    session: Session = Depends(get_session),
):
    try:
        order = create_order(session, data)
        products = product_summaries(session, order.items)
        body = {"order": serialize_order(order, products)}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Error creating order")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to create order", "details": str(e)},
        )

    return body


# My Orders

@router.get("")
def list_my_orders(
    user_id: Optional[str] = Query(None, alias="userId"),
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    if user_id and user_id != current_user.id:
        raise HTTPException(403, "Access denied")

    try:
        orders = session.exec(
            select(Order)
            .where(Order.user_id == current_user.id)
            .options(
                selectinload(Order.items),
                selectinload(Order.user),
                selectinload(Order.address),
            )
            .order_by(Order.created_at.desc())
        ).all()

        result = ORDER_POLICY.apply(orders, order_fields)

        products = product_summaries(
            session, [i for o in result.kept for i in o.items]
        )
        # serialize_order leaves the owning user out
        body = {
            "orders": [serialize_order(o, products) for o in result.kept],
            "meta": {
                "total": result.total,
                "filtered": result.filtered,
                "user": {"id": current_user.id, "email": current_user.email},
            },
        }
    except Exception:
        logger.exception(f"Error fetching orders for user {current_user.id}")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch orders"},
        )

    return JSONResponse(content=jsonable_encoder(body), headers=NO_CACHE_HEADERS)


def _own_order(session: Session, order_id: str, user: User) -> Order:
    order = session.get(Order, order_id)

    if not order or order.user_id != user.id:
        raise HTTPException(404, "Order not found")

    return order


# Order Details

@router.get("/{order_id}")
def order_details(
    order_id: str,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    order = _own_order(session, order_id, current_user)

    products = product_summaries(session, order.items)
    data = serialize_order(order, products)
    attach_custom_designs(data, nearby_custom_orders(session, order))

    return {"order": data}


# View Invoice

@router.get("/{order_id}/invoice", response_class=HTMLResponse)
def order_invoice(
    order_id: str,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    order = session.get(Order, order_id)

    if not order or (order.user_id != current_user.id and current_user.role != "ADMIN"):
        raise HTTPException(404, "Order not found")

    html = render_invoice(order, product_summaries(session, order.items))

    return HTMLResponse(
        content=html,
        headers={"Cache-Control": NO_CACHE_HEADERS["Cache-Control"]},
    )
