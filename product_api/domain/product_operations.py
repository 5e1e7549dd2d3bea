import logging

from sqlalchemy.ext.asyncio import AsyncSession

from product_api.domain.base_operations import BaseOperations
from product_api.models.product import Product, ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


class ProductOperations(BaseOperations[Product]):
    """CRUD operations for Product model."""

    def __init__(self) -> None:
        super().__init__(Product)

    async def get_product(self, db: AsyncSession, id: int) -> Product | None:
        """Look a product up by primary key."""
        product = await self.get(db, id)
        if product is None:
            logger.info(f"No rows were returned for product {id}")
        return product

    async def list_products(self, db: AsyncSession) -> list[Product]:
        """Every product in the table, unfiltered and unpaginated."""
        return await self.get_multi(db)

    async def create_product(self, db: AsyncSession, data: ProductCreate) -> Product:
        """Insert a product and return it with its generated id."""
        product = await self.create(db, data.model_dump())
        logger.info(f"Inserted product {product.id}")
        return product

    async def replace_product(self, db: AsyncSession, id: int, data: ProductUpdate) -> int:
        """Replace every field of a product. Returns the affected-row count."""
        affected = await self.update(db, id, data.model_dump())
        logger.info(f"Updated product {id}: {affected} row(s) affected")
        return affected

    async def delete_product(self, db: AsyncSession, id: int) -> int:
        """Delete a product. Returns the affected-row count."""
        affected = await self.delete(db, id)
        logger.info(f"Deleted product {id}: {affected} row(s) affected")
        return affected


product_ops = ProductOperations()
