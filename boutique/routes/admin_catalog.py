# -------- ADMIN CATALOG --------
import logging
from typing import Callable, Type

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlmodel import Session, SQLModel, select

from boutique.database import get_session
from boutique.dependencies.admin import require_admin
from boutique.models.blouse_design import BlouseDesign
from boutique.models.fabric import Fabric
from boutique.models.garment_model import BlouseModel, LehengaModel, SalwarKameezModel
from boutique.models.user import User
from boutique.schemas.catalog_schemas import (
    ActiveToggle,
    BlouseDesignIn,
    BlouseModelIn,
    FabricIn,
    GarmentModelIn,
)
from boutique.services.catalog_view import serialize_catalog_item
from boutique.services.pricing import final_price
from boutique.utils.timestamps import utcnow

logger = logging.getLogger(__name__)


def plain_values(data: BaseModel) -> dict:
    return data.model_dump()


def garment_values(data: GarmentModelIn) -> dict:
    values = data.model_dump()
    values["images"] = ",".join(data.images) if data.images else None
    values["final_price"] = final_price(data.price, data.discount)
    return values


def catalog_admin_router(
    model: Type[SQLModel],
    schema: Type[BaseModel],
    label: str,
    plural: str,
    singular: str,
    to_values: Callable[[BaseModel], dict] = plain_values,
) -> APIRouter:
    """List/get/create/update/delete/toggle for one configurator catalog table."""
    router = APIRouter()

    def _get(session: Session, item_id: str):
        row = session.get(model, item_id)
        if not row:
            raise HTTPException(404, f"{label} not found")
        return row

    def _check_unique_name(session: Session, name: str, item_id: str = None):
        query = select(model).where(model.name == name)
        if item_id:
            query = query.where(model.id != item_id)
        if session.exec(query).first():
            raise HTTPException(400, f"{label} with this name already exists")

    @router.get("")
    def list_items(
        session: Session = Depends(get_session),
        _: User = Depends(require_admin),
    ):
        rows = session.exec(select(model).order_by(model.created_at.desc())).all()
        return {plural: [serialize_catalog_item(r) for r in rows]}

    @router.get("/{item_id}")
    def get_item(
        item_id: str,
        session: Session = Depends(get_session),
        _: User = Depends(require_admin),
    ):
        return {singular: serialize_catalog_item(_get(session, item_id))}

    @router.post("")
    def create_item(
        data: schema,
        session: Session = Depends(get_session),
        admin: User = Depends(require_admin),
    ):
        _check_unique_name(session, data.name)

        row = model(**to_values(data))
        session.add(row)
        session.commit()
        session.refresh(row)

        logger.info(f"{label} {row.id} ({row.name}) created by {admin.email}")
        return {singular: serialize_catalog_item(row)}

    @router.put("/{item_id}")
    def update_item(
        item_id: str,
        data: schema,
        session: Session = Depends(get_session),
        admin: User = Depends(require_admin),
    ):
        row = _get(session, item_id)
        _check_unique_name(session, data.name, item_id)

        for key, value in to_values(data).items():
            setattr(row, key, value)
        row.updated_at = utcnow()

        session.add(row)
        session.commit()
        session.refresh(row)

        logger.info(f"{label} {row.id} updated by {admin.email}")
        return {singular: serialize_catalog_item(row)}

    @router.patch("/{item_id}/toggle")
    def toggle_item(
        item_id: str,
        data: ActiveToggle,
        session: Session = Depends(get_session),
        _: User = Depends(require_admin),
    ):
        row = _get(session, item_id)
        row.is_active = data.is_active
        row.updated_at = utcnow()

        session.add(row)
        session.commit()
        session.refresh(row)
        return {singular: serialize_catalog_item(row)}

    @router.delete("/{item_id}")
    def delete_item(
        item_id: str,
        session: Session = Depends(get_session),
        admin: User = Depends(require_admin),
    ):
        row = _get(session, item_id)

        # custom orders keep names and prices, not ids, so history survives
        session.delete(row)
        session.commit()

        logger.info(f"{label} {item_id} deleted by {admin.email}")
        return {"message": f"{label} deleted successfully"}

    return router


fabrics = catalog_admin_router(Fabric, FabricIn, "Fabric", "fabrics", "fabric")
blouse_designs = catalog_admin_router(
    BlouseDesign, BlouseDesignIn, "Blouse design", "designs", "design"
)
blouse_models = catalog_admin_router(
    BlouseModel, BlouseModelIn, "Blouse model", "models", "model", garment_values
)
lehenga_models = catalog_admin_router(
    LehengaModel, GarmentModelIn, "Lehenga model", "models", "model", garment_values
)
salwar_kameez_models = catalog_admin_router(
    SalwarKameezModel, GarmentModelIn, "Salwar kameez model", "models", "model", garment_values
)
