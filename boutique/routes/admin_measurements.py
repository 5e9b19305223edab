# -------- ADMIN MEASUREMENTS --------
import logging
from typing import Optional, Type

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlmodel import Session, SQLModel, or_, select

from boutique.database import get_session
from boutique.dependencies.admin import require_admin
from boutique.models.custom_order import CustomOrder
from boutique.models.measurement import BlouseMeasurement, LehengaMeasurement, SalwarMeasurement
from boutique.models.user import User
from boutique.schemas.measurement_schemas import (
    BlouseMeasurementIn,
    LehengaMeasurementIn,
    MeasurementIn,
    SalwarMeasurementIn,
)
from boutique.services.catalog_view import camel_row, user_summary
from boutique.utils.timestamps import utcnow

logger = logging.getLogger(__name__)

# linkage fields are handled explicitly
LINK_FIELDS = {"user_id", "custom_order_id"}


def serialize_measurement(session: Session, row: SQLModel) -> dict:
    data = camel_row(row)
    data["user"] = user_summary(session.get(User, row.user_id))

    custom_order = session.get(CustomOrder, row.custom_order_id) if row.custom_order_id else None
    data["customOrder"] = None
    if custom_order:
        data["customOrder"] = {
            "id": custom_order.id,
            "status": custom_order.status,
            "fabric": custom_order.fabric,
            "fabricColor": custom_order.fabric_color,
            "frontDesign": custom_order.front_design,
            "backDesign": custom_order.back_design,
        }
    return data


def _check_custom_order(session: Session, custom_order_id: Optional[str], user_id: str):
    if not custom_order_id:
        return
    custom_order = session.get(CustomOrder, custom_order_id)
    if not custom_order or custom_order.user_id != user_id:
        raise HTTPException(404, "Custom order not found or does not belong to this user")


def measurement_router(model: Type[SQLModel], schema: Type[MeasurementIn], label: str) -> APIRouter:
    router = APIRouter()

    def _get(session: Session, measurement_id: str):
        row = session.get(model, measurement_id)
        if not row:
            raise HTTPException(404, "Measurement not found")
        return row

    @router.get("")
    def list_measurements(
        search: Optional[str] = None,
        user_id: Optional[str] = Query(None, alias="userId"),
        session: Session = Depends(get_session),
        _: User = Depends(require_admin),
    ):
        query = select(model).order_by(model.created_at.desc())

        if user_id:
            query = query.where(model.user_id == user_id)
        elif search:
            pattern = f"%{search}%"
            query = query.join(User, User.id == model.user_id).where(
                or_(User.name.ilike(pattern), User.email.ilike(pattern))
            )

        rows = session.exec(query).all()
        return {"measurements": [serialize_measurement(session, r) for r in rows]}

    @router.get("/{measurement_id}")
    def get_measurement(
        measurement_id: str,
        session: Session = Depends(get_session),
        _: User = Depends(require_admin),
    ):
        return {"measurement": serialize_measurement(session, _get(session, measurement_id))}

    @router.post("")
    def create_measurement(
        data: schema,
        session: Session = Depends(get_session),
        admin: User = Depends(require_admin),
    ):
        if not data.user_id:
            raise HTTPException(400, "userId is required")
        if not session.get(User, data.user_id):
            raise HTTPException(404, "User not found")
        _check_custom_order(session, data.custom_order_id, data.user_id)

        row = model(
            user_id=data.user_id,
            custom_order_id=data.custom_order_id,
            **data.model_dump(exclude=LINK_FIELDS | {"measured_by"}),
            measured_by=data.measured_by or admin.name or "Admin",
        )
        session.add(row)
        session.commit()
        session.refresh(row)

        logger.info(f"{label} measurement {row.id} recorded for user {row.user_id}")
        return {"measurement": serialize_measurement(session, row)}

    @router.put("/{measurement_id}")
    def update_measurement(
        measurement_id: str,
        data: schema,
        session: Session = Depends(get_session),
        _: User = Depends(require_admin),
    ):
        row = _get(session, measurement_id)

        changes = data.model_dump(exclude_unset=True, exclude={"user_id"})
        if "custom_order_id" in changes:
            _check_custom_order(session, changes["custom_order_id"], row.user_id)

        for key, value in changes.items():
            setattr(row, key, value)
        row.updated_at = utcnow()

        session.add(row)
        session.commit()
        session.refresh(row)
        return {"measurement": serialize_measurement(session, row)}

    @router.delete("/{measurement_id}")
    def delete_measurement(
        measurement_id: str,
        session: Session = Depends(get_session),
        _: User = Depends(require_admin),
    ):
        row = _get(session, measurement_id)
        session.delete(row)
        session.commit()

        return {"message": "Measurement deleted successfully"}

    return router


blouse = measurement_router(BlouseMeasurement, BlouseMeasurementIn, "Blouse")
lehenga = measurement_router(LehengaMeasurement, LehengaMeasurementIn, "Lehenga")
salwar = measurement_router(SalwarMeasurement, SalwarMeasurementIn, "Salwar")
