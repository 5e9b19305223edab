import pytest
from fastapi import HTTPException
from pydantic import ValidationError

from boutique.models.blouse_design import BlouseDesign
from boutique.models.fabric import Fabric
from boutique.models.garment_model import BlouseModel, LehengaModel
from boutique.schemas.order_schemas import CustomDesign
from boutique.services.pricing import (
    apply_catalog_prices,
    compute_totals,
    final_price,
    quote_custom_design,
)

from conftest import BLOUSE_DESIGN


def test_quote_adds_fabric_stitching_and_models():
    quote = quote_custom_design(CustomDesign.model_validate(BLOUSE_DESIGN))

    # 600/m * 1.5m + 400 + 300 stitching + 500 + 250 models
    assert quote.fabric_cost == 900
    assert quote.front_model_price == 500
    assert quote.back_model_price == 250
    assert quote.price == 2350
    assert quote.is_own_fabric is False


def test_own_fabric_is_not_charged():
    design = dict(BLOUSE_DESIGN, fabric={"name": "Mother's saree", "isOwnFabric": True, "pricePerMeter": 600})
    quote = quote_custom_design(CustomDesign.model_validate(design))

    assert quote.is_own_fabric is True
    assert quote.fabric_cost == 0
    assert quote.price == 1450


def test_unpriced_design_falls_back_to_line_price():
    quote = quote_custom_design(CustomDesign.model_validate({}), fallback_price=1800)

    assert quote.price == 1800
    assert quote.front_model_price is None


def test_totals_above_free_shipping_threshold():
    totals = compute_totals(1000)

    assert totals.shipping == 0
    assert totals.tax == pytest.approx(180)
    assert totals.total == pytest.approx(1180)
    assert totals.discount == 0


def test_totals_at_threshold_pay_shipping():
    totals = compute_totals(999)

    assert totals.shipping == 99
    assert totals.tax == pytest.approx(179.82)
    assert totals.total == pytest.approx(1277.82)


@pytest.mark.parametrize("component", [
    {"fabric": {"name": "Raw Silk", "pricePerMeter": -600}},
    {"frontDesign": {"name": "Sweetheart Neck", "stitchCost": -700}},
    {"selectedModels": {"backModel": {"name": "Tie-up Dori", "finalPrice": -250}}},
])
def test_negative_components_are_rejected(component):
    with pytest.raises(ValidationError):
        CustomDesign.model_validate(component)


def test_catalog_rows_replace_submitted_figures(session, add_row):
    fabric = add_row(Fabric(name="Chanderi", color="#F5F5DC", price_per_meter=800))
    back = add_row(BlouseDesign(name="Deep U Back", type="BACK", stitch_cost=350))
    model = add_row(LehengaModel(name="Kalidar", design_name="Kalidar Flare", price=5000, final_price=4500))

    design = CustomDesign.model_validate({
        "fabric": {"id": fabric.id, "color": "#FFD700", "pricePerMeter": 10},
        "backDesign": {"id": back.id, "stitchCost": 1},
        "selectedModels": {"frontModel": {"id": model.id, "finalPrice": 1}},
    })

    priced = apply_catalog_prices(session, design, "lehenga")

    assert priced.fabric.name == "Chanderi"
    assert priced.fabric.color == "#FFD700"
    assert priced.fabric.price_per_meter == 800
    assert priced.back_design.name == "Deep U Back"
    assert priced.back_design.stitch_cost == 350
    assert priced.selected_models.front_model.name == "Kalidar"
    assert priced.selected_models.front_model.final_price == 4500
    # the submitted design is left untouched
    assert design.fabric.price_per_meter == 10

    # 800/m * 1.5m + 350 + 4500
    assert quote_custom_design(priced).price == 6050


def test_model_ids_resolve_against_the_garment_table(session, add_row):
    blouse_model = add_row(BlouseModel(name="Princess Cut", design_name="Princess", price=500, final_price=500))
    design = CustomDesign.model_validate({"selectedModels": {"frontModel": {"id": blouse_model.id}}})

    with pytest.raises(HTTPException) as exc:
        apply_catalog_prices(session, design, "salwar")

    assert exc.value.status_code == 400
    assert exc.value.detail == f"Design model not found: {blouse_model.id}"


def test_own_fabric_skips_the_fabric_catalog(session):
    design = CustomDesign.model_validate({"fabric": {"id": "gone", "isOwnFabric": True}})

    assert apply_catalog_prices(session, design, "blouse").fabric.id == "gone"


def test_final_price_applies_percent_discount():
    assert final_price(1000, 10) == 900
    assert final_price(1299, 0) == 1299
    assert final_price(999, 33.3) == 666.33
