import os

os.environ.setdefault("ENV", "test")
os.environ.setdefault("DATABASE_URI", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ALGORITHM", "HS256")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import boutique.models  # noqa: F401
from boutique.database import get_session
from boutique.main import app
from boutique.models.address import Address
from boutique.models.cart import CartItem
from boutique.models.product import Product
from boutique.models.user import User
from boutique.utils.token import create_access_token


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(session):
    def get_test_session():
        return session

    app.dependency_overrides[get_session] = get_test_session
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(session):
    def _make(email="priya@ishqelibas.in", role="USER", is_active=True, name="Priya Sharma"):
        user = User(email=email, role=role, is_active=is_active, name=name, phone="9876543210")
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make


@pytest.fixture
def customer(make_user):
    return make_user()


@pytest.fixture
def admin(make_user):
    return make_user(email="admin@ishqelibas.in", role="ADMIN", name="Store Admin")


@pytest.fixture
def make_product(session):
    def _make(name="Banarasi Silk Saree", price=2500.0, stock=10, sku=None):
        product = Product(name=name, price=price, stock=stock, sku=sku)
        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    return _make


@pytest.fixture
def add_to_cart(session):
    def _add(user, product_id, quantity=1):
        item = CartItem(user_id=user.id, product_id=product_id, quantity=quantity)
        session.add(item)
        session.commit()
        return item

    return _add


@pytest.fixture
def make_address(session):
    def _make(user, city="Jaipur"):
        address = Address(
            user_id=user.id,
            first_name="Priya",
            last_name="Sharma",
            address="12 MI Road",
            city=city,
            state="Rajasthan",
            zip_code="302001",
            country="India",
        )
        session.add(address)
        session.commit()
        session.refresh(address)
        return address

    return _make


def token_for(user) -> str:
    return create_access_token({"userId": user.id})


@pytest.fixture
def login(client):
    def _login(user):
        client.cookies.set("auth-token", token_for(user))
        return client

    return _login


SHIPPING_INFO = {
    "firstName": "Priya",
    "lastName": "Sharma",
    "email": "priya@ishqelibas.in",
    "phone": "9876543210",
    "address": "12 MI Road",
    "city": "Jaipur",
    "state": "Rajasthan",
    "zipCode": "302001",
    "country": "India",
}

BLOUSE_DESIGN = {
    "fabric": {"name": "Raw Silk", "color": "#8B0000", "pricePerMeter": 600, "isOwnFabric": False},
    "frontDesign": {"name": "Sweetheart Neck", "stitchCost": 400},
    "backDesign": {"name": "Deep U Back", "stitchCost": 300},
    "selectedModels": {
        "frontModel": {"name": "Princess Cut", "finalPrice": 500},
        "backModel": {"name": "Tie-up Dori", "finalPrice": 250},
    },
    "measurements": {"bust": 34, "waist": 28, "blouseLength": 15},
    "appointmentPurpose": "blouse",
}


@pytest.fixture
def order_payload():
    def _payload(user, items, **extra):
        payload = {
            "userId": user.id,
            "items": items,
            "shippingInfo": dict(SHIPPING_INFO),
            "paymentInfo": {"method": "cod", "notes": "Order created via cod payment"},
            "subtotal": 0,
            "tax": 0,
            "shipping": 0,
            "total": 0,
        }
        payload.update(extra)
        return payload

    return _payload


@pytest.fixture
def add_row(session):
    def _add(row):
        session.add(row)
        session.commit()
        session.refresh(row)
        return row

    return _add
