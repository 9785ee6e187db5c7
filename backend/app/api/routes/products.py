"""Product Routes — public, read-only catalog."""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ErrorContext, NotFoundError
from app.infrastructure.database import get_db
from app.schemas.product import ProductResponse
from app.services.product_service import get_product_by_id, get_products

router = APIRouter(prefix="/api/v1/products", tags=["products"])


@router.get("", response_model=list[ProductResponse])
async def list_products(db: AsyncSession = Depends(get_db)):
    return await get_products(db)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: UUID, db: AsyncSession = Depends(get_db)):
    product = await get_product_by_id(db, product_id)
    if product is None:
        raise NotFoundError(
            "Product not found", ErrorContext(product_id=str(product_id)),
        )
    return product
