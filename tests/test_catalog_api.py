from datetime import timedelta

import pytest
from sqlmodel import select

from boutique.models.blouse_design import BlouseDesign
from boutique.models.fabric import Fabric
from boutique.models.garment_model import BlouseModel, LehengaModel, SalwarKameezModel
from boutique.utils.timestamps import utcnow


def _blouse_model(add_row, name, price, **extra):
    extra.setdefault("design_name", f"{name} Design")
    return add_row(BlouseModel(name=name, price=price, final_price=price, **extra))


# -------------------------
# Public catalog
# -------------------------

def test_fabrics_lists_active_by_name(client, add_row):
    add_row(Fabric(name="Velvet", price_per_meter=900))
    add_row(Fabric(name="Chanderi", price_per_meter=700))
    add_row(Fabric(name="Retired Tissue", price_per_meter=400, is_active=False))

    r = client.get("/api/fabrics")

    assert r.status_code == 200
    fabrics = r.json()["fabrics"]
    assert [f["name"] for f in fabrics] == ["Chanderi", "Velvet"]
    assert fabrics[0]["pricePerMeter"] == 700
    assert fabrics[0]["isActive"] is True


def test_blouse_designs_filter_by_type(client, add_row):
    add_row(BlouseDesign(name="Sweetheart Neck", type="FRONT", stitch_cost=400))
    add_row(BlouseDesign(name="Deep U Back", type="BACK", stitch_cost=300))
    add_row(BlouseDesign(name="Boat Neck", type="FRONT", stitch_cost=350, is_active=False))

    everything = client.get("/api/blouse-designs").json()["designs"]
    backs = client.get("/api/blouse-designs", params={"type": "BACK"}).json()["designs"]

    assert [d["name"] for d in everything] == ["Deep U Back", "Sweetheart Neck"]
    assert [d["name"] for d in backs] == ["Deep U Back"]
    assert backs[0]["stitchCost"] == 300


def test_blouse_designs_unknown_type(client):
    assert client.get("/api/blouse-designs", params={"type": "SIDE"}).status_code == 400


def test_blouse_models_filters_and_sort(client, add_row):
    _blouse_model(add_row, "Princess Cut", 500, images="a.jpg,b.jpg")
    _blouse_model(add_row, "Peplum", 1200, description="flared princess hem")
    _blouse_model(add_row, "Halter", 800)
    _blouse_model(add_row, "Corset", 950, is_active=False)

    r = client.get("/api/blouse-models", params={"sortBy": "price", "sortOrder": "desc"})

    assert r.status_code == 200
    body = r.json()
    assert [m["name"] for m in body["models"]] == ["Peplum", "Halter", "Princess Cut"]
    assert body["models"][2]["images"] == ["a.jpg", "b.jpg"]
    assert body["models"][0]["images"] == []
    assert body["pagination"] == {"page": 1, "limit": 50, "totalCount": 3, "hasMore": False}

    ranged = client.get("/api/blouse-models", params={"minPrice": 600, "maxPrice": 1000}).json()
    assert [m["name"] for m in ranged["models"]] == ["Halter"]

    searched = client.get("/api/blouse-models", params={"search": "princess"}).json()
    assert [m["name"] for m in searched["models"]] == ["Peplum", "Princess Cut"]


def test_blouse_models_pagination(client, add_row):
    for n in range(3):
        _blouse_model(add_row, f"Model {n}", 500 + n)

    body = client.get("/api/blouse-models", params={"page": 1, "limit": 2}).json()

    assert len(body["models"]) == 2
    assert body["pagination"] == {"page": 1, "limit": 2, "totalCount": 3, "hasMore": True}

    last = client.get("/api/blouse-models", params={"page": 2, "limit": 2}).json()
    assert last["pagination"]["hasMore"] is False


def test_lehenga_models_newest_first(client, add_row):
    now = utcnow()
    add_row(LehengaModel(name="Kalidar", design_name="Kalidar", price=9000, final_price=9000,
                         created_at=now - timedelta(days=1)))
    add_row(LehengaModel(name="Mermaid", design_name="Mermaid", price=12000, final_price=12000,
                         created_at=now))
    add_row(LehengaModel(name="A-Line", design_name="A-Line", price=7000, final_price=7000,
                         is_active=False))

    models = client.get("/api/lehenga-models").json()["models"]

    assert [m["name"] for m in models] == ["Mermaid", "Kalidar"]


def test_salwar_kameez_models_pagination(client, add_row):
    for n in range(3):
        add_row(SalwarKameezModel(name=f"Anarkali {n}", design_name="Anarkali",
                                  price=3000, final_price=3000))

    body = client.get("/api/salwar-kameez-models", params={"page": 2, "limit": 2}).json()

    assert len(body["models"]) == 1
    assert body["pagination"] == {"page": 2, "limit": 2, "total": 3, "totalPages": 2}


def test_catalog_failure_is_reported(client, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("database is locked")

    monkeypatch.setattr("boutique.routes.catalog.paginate", boom)

    r = client.get("/api/salwar-kameez-models")

    assert r.status_code == 500
    assert r.json() == {"error": "Failed to fetch salwar kameez models"}


# -------------------------
# Admin catalog
# -------------------------

@pytest.mark.parametrize("path", [
    "/api/admin/fabrics",
    "/api/admin/blouse-designs",
    "/api/admin/blouse-models",
    "/api/admin/lehenga-models",
    "/api/admin/salwar-kameez-models",
])
def test_admin_catalog_requires_admin(client, customer, login, path):
    assert client.get(path).status_code == 401
    assert login(customer).get(path).status_code == 403


def test_admin_fabric_lifecycle(client, session, admin, login):
    c = login(admin)

    r = c.post("/api/admin/fabrics", json={"name": "Organza", "color": "#FFFFFF", "pricePerMeter": 650})
    assert r.status_code == 200
    fabric = r.json()["fabric"]
    assert fabric["pricePerMeter"] == 650

    r = c.post("/api/admin/fabrics", json={"name": "Organza", "pricePerMeter": 100})
    assert r.status_code == 400
    assert r.json()["error"] == "Fabric with this name already exists"

    r = c.put(f"/api/admin/fabrics/{fabric['id']}", json={"name": "Silk Organza", "pricePerMeter": 720})
    assert r.status_code == 200
    assert r.json()["fabric"]["name"] == "Silk Organza"

    r = c.patch(f"/api/admin/fabrics/{fabric['id']}/toggle", json={"isActive": False})
    assert r.json()["fabric"]["isActive"] is False
    assert client.get("/api/fabrics").json()["fabrics"] == []

    assert c.get(f"/api/admin/fabrics/{fabric['id']}").json()["fabric"]["pricePerMeter"] == 720
    assert len(c.get("/api/admin/fabrics").json()["fabrics"]) == 1

    r = c.delete(f"/api/admin/fabrics/{fabric['id']}")
    assert r.json() == {"message": "Fabric deleted successfully"}
    assert session.exec(select(Fabric)).all() == []


def test_admin_rejects_negative_fabric_price(client, admin, login):
    r = login(admin).post("/api/admin/fabrics", json={"name": "Net", "pricePerMeter": -5})

    assert r.status_code == 400
    assert r.json()["error"] == "Invalid request body"


def test_admin_missing_catalog_row(client, admin, login):
    r = login(admin).put("/api/admin/blouse-designs/nope", json={"name": "Boat Neck"})

    assert r.status_code == 404
    assert r.json() == {"error": "Blouse design not found"}


def test_admin_blouse_model_computes_final_price(client, admin, login):
    r = login(admin).post("/api/admin/blouse-models", json={
        "name": "Princess Cut",
        "designName": "Princess",
        "price": 1000,
        "discount": 15,
        "stitchCost": 200,
        "images": ["front.jpg", "back.jpg"],
    })

    assert r.status_code == 200
    model = r.json()["model"]
    assert model["finalPrice"] == 850
    assert model["stitchCost"] == 200
    assert model["images"] == ["front.jpg", "back.jpg"]


def test_admin_lehenga_model_update_recomputes_final_price(client, session, admin, login, add_row):
    model = add_row(LehengaModel(name="Kalidar", design_name="Kalidar", price=9000, final_price=9000))

    r = login(admin).put(f"/api/admin/lehenga-models/{model.id}", json={
        "name": "Kalidar", "designName": "Kalidar", "price": 10000, "discount": 10,
    })

    assert r.status_code == 200
    session.refresh(model)
    assert model.final_price == 9000
    assert model.price == 10000


def test_admin_salwar_model_duplicate_name(client, admin, login, add_row):
    add_row(SalwarKameezModel(name="Anarkali", design_name="Anarkali", price=3000, final_price=3000))

    r = login(admin).post("/api/admin/salwar-kameez-models", json={
        "name": "Anarkali", "designName": "Floor Length", "price": 3500,
    })

    assert r.status_code == 400
    assert r.json()["error"] == "Salwar kameez model with this name already exists"
