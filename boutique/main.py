import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager

from boutique.config import settings
from boutique.database import create_db_and_tables
from boutique.routes import (
    admin_catalog,
    admin_dashboard,
    admin_measurements,
    admin_orders,
    cart,
    catalog,
    custom_orders,
    orders,
)

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Run DB creation ONLY in local
    if settings.ENV == "local":
        create_db_and_tables()
    yield

app = FastAPI(title="Boutique Store API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Every error body is {"error": ...}; the storefront reads that key for its toasts.
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
    )


app.include_router(orders.router, prefix="/api/orders", tags=["Orders"])
app.include_router(custom_orders.router, prefix="/api/custom-orders", tags=["Custom Orders"])
app.include_router(cart.router, prefix="/api/cart", tags=["Cart"])
app.include_router(admin_orders.router, prefix="/api/admin", tags=["Admin Orders"])
app.include_router(admin_dashboard.router, prefix="/api/admin", tags=["Admin Dashboard"])

app.include_router(catalog.router, prefix="/api", tags=["Catalog"])
app.include_router(admin_catalog.fabrics, prefix="/api/admin/fabrics", tags=["Admin Catalog"])
app.include_router(admin_catalog.blouse_designs, prefix="/api/admin/blouse-designs", tags=["Admin Catalog"])
app.include_router(admin_catalog.blouse_models, prefix="/api/admin/blouse-models", tags=["Admin Catalog"])
app.include_router(admin_catalog.lehenga_models, prefix="/api/admin/lehenga-models", tags=["Admin Catalog"])
app.include_router(
    admin_catalog.salwar_kameez_models, prefix="/api/admin/salwar-kameez-models", tags=["Admin Catalog"]
)

app.include_router(admin_measurements.blouse, prefix="/api/admin/measurements", tags=["Admin Measurements"])
app.include_router(
    admin_measurements.lehenga, prefix="/api/admin/lehenga-measurements", tags=["Admin Measurements"]
)
app.include_router(
    admin_measurements.salwar, prefix="/api/admin/salwar-measurements", tags=["Admin Measurements"]
)


@app.get("/")
def root():
    return {
        "order_endpoints": [
            "/api/orders", "/api/orders/{order_id}", "/api/orders/{order_id}/invoice"
        ],
        "custom_order_endpoints": [
            "/api/custom-orders"
        ],
        "cart": [
            "/api/cart", "/api/cart/add", "/api/cart/remove/{id}", "/api/cart/clear"
        ],
        "catalog": [
            "/api/fabrics", "/api/blouse-models", "/api/blouse-designs",
            "/api/lehenga-models", "/api/salwar-kameez-models"
        ],
        "admin": [
            "/api/admin/orders", "/api/admin/orders/{order_id}/status",
            "/api/admin/custom-orders", "/api/admin/dashboard", "/api/admin/users",
            "/api/admin/fabrics", "/api/admin/blouse-designs", "/api/admin/blouse-models",
            "/api/admin/lehenga-models", "/api/admin/salwar-kameez-models",
            "/api/admin/measurements", "/api/admin/lehenga-measurements",
            "/api/admin/salwar-measurements"
        ]
    }
