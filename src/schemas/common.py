"""Field types and base models shared by the request/response schemas."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, Generic, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from src.utils.validation import is_uuid

ItemT = TypeVar("ItemT")


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so stored and requested values compare."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _check_uuid(value: str) -> str:
    if not is_uuid(value):
        raise ValueError("must be a valid UUID")
    return value


def _check_name(value: str) -> str:
    if value and not value[0].isalpha():
        raise ValueError("must start with a letter")
    return value


EntityID = Annotated[str, AfterValidator(_check_uuid)]
Name = Annotated[str, Field(min_length=3, max_length=255), AfterValidator(_check_name)]
ShortDescription = Annotated[str, Field(min_length=3, max_length=255)]
LongDescription = Annotated[str, Field(min_length=3, max_length=3000)]
Price = Annotated[Decimal, Field(gt=0, max_digits=10, decimal_places=2)]
Tag = Annotated[str, Field(min_length=3, max_length=20, pattern=r"^[A-Za-z0-9]+$")]
Tags = Annotated[list[Tag], Field(min_length=1, max_length=10)]
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]
HttpURL = Annotated[str, Field(max_length=512, pattern=r"^https?://\S+$")]


class CreateResponse(BaseModel):
    id: str
    product_id: str


class ImageOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    media_service_id: str
    url: str
    secure_url: str
    public_id: str


class DetailsOut(BaseModel):
    """Fields every details DTO exposes, combined with its product's price."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    product_id: str
    price: Decimal
    name: str
    short_description: str
    long_description: str | None = None
    tags: list[str] = []
    in_stock: bool
    uploaded_image_amount: int = 0
    images: list[ImageOut] = []
    video_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None


class ListResponse(BaseModel, Generic[ItemT]):
    items: list[ItemT]
    total: int
