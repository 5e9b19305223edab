from boutique.models.custom_order import CustomOrder
from boutique.utils.token import create_access_token


def _custom_order(session, user, status="PENDING", purpose="blouse"):
    co = CustomOrder(
        user_id=user.id,
        fabric="Raw Silk",
        fabric_color="#8B0000",
        front_design="Sweetheart Neck",
        back_design="Deep U Back",
        price=2350,
        appointment_purpose=purpose,
        status=status,
    )
    session.add(co)
    session.commit()
    session.refresh(co)
    return co


def test_list_my_custom_orders(client, session, customer, make_user, login):
    mine = _custom_order(session, customer)
    _custom_order(session, make_user(email="neha@gmail.com"))

    r = login(customer).get("/api/custom-orders")

    assert r.status_code == 200
    orders = r.json()["customOrders"]
    assert [o["id"] for o in orders] == [mine.id]
    assert orders[0]["fabricColor"] == "#8B0000"


def test_list_with_bearer_header(client, session, customer):
    _custom_order(session, customer)
    token = create_access_token({"userId": customer.id})

    r = client.get("/api/custom-orders", headers={"Authorization": f"Bearer {token}"})

    assert r.status_code == 200
    assert len(r.json()["customOrders"]) == 1


def test_list_requires_auth(client):
    assert client.get("/api/custom-orders").status_code == 401


def test_cancel_pending_custom_order(client, session, customer, login):
    co = _custom_order(session, customer, status="CONFIRMED")

    r = login(customer).patch("/api/custom-orders", json={"orderId": co.id, "status": "CANCELLED"})

    assert r.status_code == 200
    assert r.json()["customOrder"]["status"] == "CANCELLED"
    session.refresh(co)
    assert co.status == "CANCELLED"


def test_cannot_cancel_once_in_production(client, session, customer, login):
    co = _custom_order(session, customer, status="IN_PRODUCTION")

    r = login(customer).patch("/api/custom-orders", json={"orderId": co.id, "status": "CANCELLED"})

    assert r.status_code == 400
    assert "cannot be cancelled" in r.json()["error"]


def test_customer_cannot_advance_status(client, session, customer, login):
    co = _custom_order(session, customer)

    r = login(customer).patch("/api/custom-orders", json={"orderId": co.id, "status": "DELIVERED"})

    assert r.status_code == 400
    session.refresh(co)
    assert co.status == "PENDING"


def test_cannot_cancel_someone_elses_order(client, session, customer, make_user, login):
    co = _custom_order(session, make_user(email="neha@gmail.com"))

    r = login(customer).patch("/api/custom-orders", json={"orderId": co.id, "status": "CANCELLED"})

    assert r.status_code == 404


def test_cancel_requires_fields(client, customer, login):
    r = login(customer).patch("/api/custom-orders", json={"status": "CANCELLED"})

    assert r.status_code == 400
