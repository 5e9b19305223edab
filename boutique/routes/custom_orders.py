import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session, select

from boutique.constants.order_status import CUSTOMER_CANCELLABLE, CustomOrderStatus
from boutique.database import get_session
from boutique.models.custom_order import CustomOrder
from boutique.models.user import User
from boutique.schemas.order_schemas import CustomOrderStatusUpdate
from boutique.services.order_view import serialize_custom_order
from boutique.utils.timestamps import utcnow
from boutique.utils.token import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
def my_custom_orders(
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    custom_orders = session.exec(
        select(CustomOrder)
        .where(CustomOrder.user_id == current_user.id)
        .order_by(CustomOrder.created_at.desc())
    ).all()

    return {"customOrders": [serialize_custom_order(co) for co in custom_orders]}


# Cancel Custom Order

@router.patch("")
def cancel_custom_order(
    data: CustomOrderStatusUpdate,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    if data.status.upper() != CustomOrderStatus.CANCELLED.value:
        raise HTTPException(400, "Customers can only cancel a custom order")

    custom_order = session.get(CustomOrder, data.order_id)

    if not custom_order or custom_order.user_id != current_user.id:
        raise HTTPException(404, "Custom order not found")

    if custom_order.status not in CUSTOMER_CANCELLABLE:
        raise HTTPException(
            400,
            "This order cannot be cancelled. Only pending or confirmed orders can be cancelled."
        )

    custom_order.status = CustomOrderStatus.CANCELLED.value
    custom_order.updated_at = utcnow()
    session.add(custom_order)
    session.commit()
    session.refresh(custom_order)

    logger.info(f"Custom order {custom_order.id} cancelled by user {current_user.id}")

    return {"customOrder": serialize_custom_order(custom_order)}
