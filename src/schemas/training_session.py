"""Training session request and response models."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from src.schemas.common import DetailsOut, EntityID, LongDescription, Name, Price, ShortDescription, Tags

SessionFormat = Literal["online", "offline"]


def _check_duration(value: int | None) -> int | None:
    if value is not None and (value <= 0 or value % 30 != 0):
        raise ValueError("should be greater than 0 and a multiple of 30")
    return value


class CreateTrainingSessionRequest(BaseModel):
    name: Name
    short_description: ShortDescription
    duration_minutes: int
    format: SessionFormat
    price: Price

    @field_validator("duration_minutes")
    @classmethod
    def check_duration(cls, value):
        return _check_duration(value)


class UpdateTrainingSessionRequest(BaseModel):
    id: EntityID
    name: Name | None = None
    short_description: ShortDescription | None = None
    long_description: LongDescription | None = None
    duration_minutes: int | None = None
    format: SessionFormat | None = None
    tags: Tags | None = None
    price: Price | None = None

    @field_validator("duration_minutes")
    @classmethod
    def check_duration(cls, value):
        return _check_duration(value)


class TrainingSessionDetails(DetailsOut):
    duration_minutes: int
    format: str = Field(description="online or offline")
