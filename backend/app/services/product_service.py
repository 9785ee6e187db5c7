"""Product Service — read-only catalog queries for the API layer."""

from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.sql_repositories import SqlProductCatalog
from app.models.product import Product


async def get_products(db: AsyncSession) -> list[Product]:
    return await SqlProductCatalog(db).list_all()


async def get_product_by_id(db: AsyncSession, product_id) -> Product | None:
    return await SqlProductCatalog(db).find_by_id(product_id)
