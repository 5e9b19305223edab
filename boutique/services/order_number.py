import logging
import time
from typing import Optional

from sqlmodel import Session, select

from boutique.config import settings
from boutique.models.order import Order

logger = logging.getLogger(__name__)

PREFIX = "ORD-"
SUFFIX_SPACE = 1_000_000

# numbers used by seeded demo data; the storefront filter hides them
RESERVED = {"ORD-000000", "ORD-111111", "ORD-999999"}


def generate_order_number(now_ms: Optional[int] = None) -> str:
    """ORD- followed by the last six digits of the epoch milliseconds."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{PREFIX}{str(now_ms)[-6:].zfill(6)}"


def allocate_order_number(
    session: Session,
    now_ms: Optional[int] = None,
    attempts: Optional[int] = None,
) -> str:
    """
    Time-derived order number that is not yet taken.

    The six digit suffix wraps every ~16 minutes, so clashes are real.
    On a clash the suffix is advanced until a free, non-reserved value is
    found. The unique index on order.order_number still guards against
    two requests picking the same value concurrently.
    """
    attempts = attempts or settings.order_number_attempts
    base = int(generate_order_number(now_ms)[len(PREFIX):])

    for step in range(attempts):
        candidate = f"{PREFIX}{(base + step) % SUFFIX_SPACE:06d}"
        if candidate in RESERVED:
            continue

        taken = session.exec(
            select(Order.id).where(Order.order_number == candidate)
        ).first()
        if not taken:
            if step:
                logger.info(f"Order number {PREFIX}{base:06d} taken, using {candidate}")
            return candidate

    raise RuntimeError(f"Could not allocate an order number after {attempts} attempts")
