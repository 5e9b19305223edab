# boutique/services/catalog_view.py
from typing import Iterable, Optional

from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel


def camel_row(row: SQLModel, exclude: Iterable[str] = ()) -> dict:
    skip = set(exclude)
    return {to_camel(k): v for k, v in row.model_dump().items() if k not in skip}


def serialize_catalog_item(row: SQLModel) -> dict:
    data = camel_row(row)
    if "images" in data:
        data["images"] = data["images"].split(",") if data["images"] else []
    return data


def user_summary(user) -> Optional[dict]:
    if user is None:
        return None
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "phone": user.phone,
    }
