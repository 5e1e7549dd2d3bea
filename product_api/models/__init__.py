from product_api.models.product import (
    Product,
    ProductCreate,
    ProductMessage,
    ProductRead,
    ProductUpdate,
)

__all__ = [
    "Product",
    "ProductCreate",
    "ProductUpdate",
    "ProductRead",
    "ProductMessage",
]
