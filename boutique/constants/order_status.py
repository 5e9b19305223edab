from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PROCESSING = "PROCESSING"
    IN_PRODUCTION = "IN_PRODUCTION"
    SHIPPED = "SHIPPED"
    READY = "READY"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class CustomOrderStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    IN_PRODUCTION = "IN_PRODUCTION"
    READY = "READY"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class PaymentMethod(str, Enum):
    RAZORPAY = "RAZORPAY"
    COD = "COD"


class PaymentStatus(str, Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"


# Suggested next steps for the admin UI. The API itself accepts any
# status value; these tables only drive what the console offers.
ORDER_FLOW = {
    "PENDING": ["CONFIRMED", "CANCELLED"],
    "CONFIRMED": ["PROCESSING", "IN_PRODUCTION", "CANCELLED"],
    "PROCESSING": ["SHIPPED", "READY", "CANCELLED"],
    "IN_PRODUCTION": ["SHIPPED", "READY", "CANCELLED"],
    "SHIPPED": ["DELIVERED", "CANCELLED"],
    "READY": ["DELIVERED", "CANCELLED"],
    "DELIVERED": [],
    "CANCELLED": [],
}

CUSTOM_ORDER_FLOW = {
    "PENDING": ["CONFIRMED", "CANCELLED"],
    "CONFIRMED": ["IN_PRODUCTION", "CANCELLED"],
    "IN_PRODUCTION": ["READY", "CANCELLED"],
    "READY": ["DELIVERED", "CANCELLED"],
    "DELIVERED": [],
    "CANCELLED": [],
}

# customers may only withdraw a made-to-order garment before cutting starts
CUSTOMER_CANCELLABLE = {CustomOrderStatus.PENDING.value, CustomOrderStatus.CONFIRMED.value}


def next_statuses(status: str, flow: dict = ORDER_FLOW) -> list:
    return flow.get(status, [])
