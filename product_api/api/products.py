"""Product CRUD endpoints: create, get, list, replace, delete.

Absent ids are not errors here: get returns the empty product and
update/delete report 0 affected rows.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from product_api.api.deps import DbSession, cors_headers
from product_api.domain import product_ops
from product_api.models.product import (
    INT32_MAX,
    INT32_MIN,
    ProductCreate,
    ProductMessage,
    ProductRead,
    ProductUpdate,
)

router = APIRouter(tags=["products"])

ProductId = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]

CREATED_MESSAGE = "Product created successfully"
UPDATED_MESSAGE = "Product updated successfully. Total rows/record affected {affected}"
DELETED_MESSAGE = "Product deleted successfully. Total rows/record affected {affected}"


@router.post(
    "/product",
    response_model=ProductMessage,
    dependencies=[Depends(cors_headers("POST"))],
)
async def create_product(data: ProductCreate, db: DbSession):
    """Create a product and return its generated id."""
    product = await product_ops.create_product(db, data)
    return ProductMessage(id=product.id, message=CREATED_MESSAGE)


@router.get(
    "/product/{product_id}",
    response_model=ProductRead,
    dependencies=[Depends(cors_headers("GET"))],
)
async def get_product(product_id: ProductId, db: DbSession):
    """Get a single product, or the zero-valued product if the id is unknown."""
    product = await product_ops.get_product(db, product_id)
    if product is None:
        return ProductRead()
    return product


@router.get(
    "/products",
    response_model=list[ProductRead],
    dependencies=[Depends(cors_headers("GET"))],
)
async def list_products(db: DbSession):
    """List every product."""
    return await product_ops.list_products(db)


@router.put(
    "/product/{product_id}",
    response_model=ProductMessage,
    dependencies=[Depends(cors_headers("PUT"))],
)
async def update_product(product_id: ProductId, data: ProductUpdate, db: DbSession):
    """Replace all fields of a product."""
    affected = await product_ops.replace_product(db, product_id, data)
    return ProductMessage(id=product_id, message=UPDATED_MESSAGE.format(affected=affected))


@router.delete(
    "/product/{product_id}",
    response_model=ProductMessage,
    dependencies=[Depends(cors_headers("DELETE"))],
)
async def delete_product(product_id: ProductId, db: DbSession):
    """Delete a product."""
    affected = await product_ops.delete_product(db, product_id)
    return ProductMessage(id=product_id, message=DELETED_MESSAGE.format(affected=affected))
