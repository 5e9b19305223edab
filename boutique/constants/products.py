# Sentinel product ids used by the design configurator in place of a
# stocked product. Each maps to the appointment purpose of its custom order.
CUSTOM_PRODUCT_PURPOSES = {
    "custom-blouse": "blouse",
    "custom-salwar-kameez": "salwar",
    "custom-lehenga": "lehenga",
}

GARMENT_NAMES = {
    "blouse": "blouse",
    "salwar": "salwar kameez",
    "lehenga": "lehenga",
}


def is_custom_product(product_id: str) -> bool:
    return product_id in CUSTOM_PRODUCT_PURPOSES

# admin console order types, keyed by appointment purpose
ORDER_TYPES = {
    "blouse": "blouse",
    "salwar": "salwar-kameez",
    "lehenga": "lehenga",
}
