"""Physical good request and response models."""

from pydantic import BaseModel

from src.schemas.common import DetailsOut, EntityID, LongDescription, Name, Price, ShortDescription, Tags


class CreatePhysicalGoodRequest(BaseModel):
    name: Name
    short_description: ShortDescription
    shipping_required: bool = True
    price: Price


class UpdatePhysicalGoodRequest(BaseModel):
    id: EntityID
    name: Name | None = None
    short_description: ShortDescription | None = None
    long_description: LongDescription | None = None
    shipping_required: bool | None = None
    tags: Tags | None = None
    price: Price | None = None


class PhysicalGoodDetails(DetailsOut):
    shipping_required: bool
