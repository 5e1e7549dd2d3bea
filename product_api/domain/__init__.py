from product_api.domain.product_operations import product_ops

__all__ = [
    "product_ops",
]
