# -------- ADMIN DASHBOARD --------
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import selectinload
from sqlmodel import Session, func, or_, select

from boutique.config import settings
from boutique.constants.order_status import PaymentStatus
from boutique.database import get_session
from boutique.dependencies.admin import require_admin
from boutique.models.custom_order import CustomOrder
from boutique.models.measurement import BlouseMeasurement, LehengaMeasurement, SalwarMeasurement
from boutique.models.order import Order
from boutique.models.order_item import OrderItem
from boutique.models.product import Product
from boutique.models.user import User
from boutique.services.legitimacy import CUSTOM_ORDER_POLICY, order_fields
from boutique.utils.timestamps import as_utc

logger = logging.getLogger(__name__)

router = APIRouter()

RECENT_ORDERS = 10
TOP_PRODUCTS = 5


def _counts_by_user(session: Session, column) -> dict:
    rows = session.exec(select(column, func.count()).group_by(column)).all()
    return {user_id: count for user_id, count in rows}


@router.get("/dashboard")
def dashboard(
    session: Session = Depends(get_session),
    admin: User = Depends(require_admin),
):
    try:
        total_sales = session.exec(
            select(func.sum(Order.total))
            .where(Order.payment_status == PaymentStatus.COMPLETED.value)
        ).one()

        total_orders = session.exec(select(func.count(Order.id))).one()

        total_users = session.exec(
            select(func.count(User.id)).where(User.is_active == True)  # noqa: E712
        ).one()

        total_products = session.exec(select(func.count(Product.id))).one()

        # seeded and placeholder accounts are left out of the feed
        candidates = session.exec(
            select(Order)
            .join(User, User.id == Order.user_id)
            .where(User.is_active == True)  # noqa: E712
            .options(selectinload(Order.user), selectinload(Order.items))
            .order_by(Order.created_at.desc())
        ).all()
        recent = CUSTOM_ORDER_POLICY.apply(candidates, order_fields).kept[:RECENT_ORDERS]

        sold = func.sum(OrderItem.quantity).label("sold")
        top = session.exec(
            select(Product.name, Product.price, sold)
            .join(OrderItem, OrderItem.product_id == Product.id)
            .group_by(Product.id, Product.name, Product.price)
            .order_by(sold.desc())
            .limit(TOP_PRODUCTS)
        ).all()

        low_stock = session.exec(
            select(Product)
            .where(Product.stock <= settings.low_stock_threshold)
            .order_by(Product.stock)
            .limit(10)
        ).all()
    except Exception:
        logger.exception("Error fetching dashboard data")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch dashboard data"})

    logger.info(f"Dashboard for {admin.email}: {total_orders} orders, sales {total_sales or 0}")

    return {
        "totalSales": total_sales or 0,
        "totalOrders": total_orders,
        "totalUsers": total_users,
        "totalProducts": total_products,
        "recentOrders": [
            {
                "id": o.order_number,
                "customer": o.user.name or o.user.email,
                "amount": o.total,
                "status": o.status,
                "date": as_utc(o.created_at).date().isoformat(),
            }
            for o in recent
        ],
        "topProducts": [
            {"name": name, "price": price, "sales": qty, "revenue": round(qty * price, 2)}
            for name, price, qty in top
        ],
        "lowStockProducts": [
            {
                "id": p.id,
                "name": p.name,
                "stock": p.stock,
                "minStock": settings.low_stock_threshold,
            }
            for p in low_stock
        ],
    }


@router.get("/users")
def list_users(
    search: Optional[str] = None,
    session: Session = Depends(get_session),
    _: User = Depends(require_admin),
):
    query = select(User).where(User.role == "USER").order_by(User.created_at.desc())

    if search:
        pattern = f"%{search}%"
        query = query.where(or_(
            User.name.ilike(pattern),
            User.email.ilike(pattern),
            User.phone.ilike(pattern),
        ))

    users = session.exec(query).all()

    orders = _counts_by_user(session, Order.user_id)
    custom_orders = _counts_by_user(session, CustomOrder.user_id)
    measurements = {}
    for model in (BlouseMeasurement, LehengaMeasurement, SalwarMeasurement):
        for user_id, count in _counts_by_user(session, model.user_id).items():
            measurements[user_id] = measurements.get(user_id, 0) + count

    return {
        "users": [
            {
                "id": u.id,
                "name": u.name,
                "email": u.email,
                "phone": u.phone,
                "isActive": u.is_active,
                "createdAt": u.created_at,
                "counts": {
                    "orders": orders.get(u.id, 0),
                    "customOrders": custom_orders.get(u.id, 0),
                    "measurements": measurements.get(u.id, 0),
                },
            }
            for u in users
        ]
    }
