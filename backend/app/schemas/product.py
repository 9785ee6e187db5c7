"""Product Schemas — catalog entries as returned by the API."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    category: str
    cost: int
    rating: int
    image: str
