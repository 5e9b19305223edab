# Public configurator catalog: only active rows are listed.
import logging
from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlmodel import Session, or_, select

from boutique.database import get_session
from boutique.models.blouse_design import BlouseDesign
from boutique.models.fabric import Fabric
from boutique.models.garment_model import BlouseModel, LehengaModel, SalwarKameezModel
from boutique.services.catalog_view import serialize_catalog_item
from boutique.utils.pagination import paginate

logger = logging.getLogger(__name__)

router = APIRouter()


def _failed(what: str) -> JSONResponse:
    logger.exception(f"Error fetching {what}")
    return JSONResponse(status_code=500, content={"error": f"Failed to fetch {what}"})


# ---------- FABRICS ----------
@router.get("/fabrics")
def list_fabrics(session: Session = Depends(get_session)):
    try:
        fabrics = session.exec(
            select(Fabric).where(Fabric.is_active == True).order_by(Fabric.name)  # noqa: E712
        ).all()
    except Exception:
        return _failed("fabrics")

    return {"fabrics": [serialize_catalog_item(f) for f in fabrics]}


# ---------- BLOUSE MODELS ----------
@router.get("/blouse-models")
def list_blouse_models(
    min_price: Optional[float] = Query(None, alias="minPrice"),
    max_price: Optional[float] = Query(None, alias="maxPrice"),
    search: Optional[str] = None,
    sort_by: Literal["name", "price"] = Query("name", alias="sortBy"),
    sort_order: Literal["asc", "desc"] = Query("asc", alias="sortOrder"),
    page: int = 1,
    limit: int = 50,
    session: Session = Depends(get_session),
):
    query = select(BlouseModel).where(BlouseModel.is_active == True)  # noqa: E712

    if min_price is not None:
        query = query.where(BlouseModel.price >= min_price)
    if max_price is not None:
        query = query.where(BlouseModel.price <= max_price)
    if search:
        pattern = f"%{search}%"
        query = query.where(or_(
            BlouseModel.name.ilike(pattern),
            BlouseModel.design_name.ilike(pattern),
            BlouseModel.description.ilike(pattern),
        ))

    column = BlouseModel.price if sort_by == "price" else BlouseModel.name
    query = query.order_by(column.desc() if sort_order == "desc" else column.asc())

    try:
        page_data = paginate(session=session, query=query, page=page, limit=limit)
    except Exception:
        return _failed("blouse models")

    models = page_data["results"]
    offset = (page_data["current_page"] - 1) * page_data["limit"]

    return {
        "models": [serialize_catalog_item(m) for m in models],
        "pagination": {
            "page": page_data["current_page"],
            "limit": page_data["limit"],
            "totalCount": page_data["total_items"],
            "hasMore": offset + len(models) < page_data["total_items"],
        },
    }


# ---------- BLOUSE DESIGNS ----------
@router.get("/blouse-designs")
def list_blouse_designs(
    type: Optional[Literal["FRONT", "BACK"]] = None,
    session: Session = Depends(get_session),
):
    query = select(BlouseDesign).where(BlouseDesign.is_active == True)  # noqa: E712
    if type:
        query = query.where(BlouseDesign.type == type)

    try:
        designs = session.exec(query.order_by(BlouseDesign.name)).all()
    except Exception:
        return _failed("blouse designs")

    return {"designs": [serialize_catalog_item(d) for d in designs]}


# ---------- LEHENGA MODELS ----------
@router.get("/lehenga-models")
def list_lehenga_models(session: Session = Depends(get_session)):
    try:
        models = session.exec(
            select(LehengaModel)
            .where(LehengaModel.is_active == True)  # noqa: E712
            .order_by(LehengaModel.created_at.desc())
        ).all()
    except Exception:
        return _failed("lehenga models")

    return {"models": [serialize_catalog_item(m) for m in models]}


# ---------- SALWAR KAMEEZ MODELS ----------
@router.get("/salwar-kameez-models")
def list_salwar_kameez_models(
    page: int = 1,
    limit: int = 50,
    session: Session = Depends(get_session),
):
    query = (
        select(SalwarKameezModel)
        .where(SalwarKameezModel.is_active == True)  # noqa: E712
        .order_by(SalwarKameezModel.created_at.desc())
    )

    try:
        page_data = paginate(session=session, query=query, page=page, limit=limit)
    except Exception:
        return _failed("salwar kameez models")

    return {
        "models": [serialize_catalog_item(m) for m in page_data["results"]],
        "pagination": {
            "page": page_data["current_page"],
            "limit": page_data["limit"],
            "total": page_data["total_items"],
            "totalPages": page_data["total_pages"],
        },
    }
