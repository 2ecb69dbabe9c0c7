"""Seminar request and response models."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, model_validator

from src.schemas.common import DetailsOut, EntityID, LongDescription, Name, Price, ShortDescription, Tags, UtcDatetime


def check_seminar_dates(date: datetime, ending_date: datetime, late_payment_date: datetime):
    """Raise ValueError unless the seminar dates are ordered late payment < start < end."""
    if ending_date <= date:
        raise ValueError("ending_date must be after date")
    if late_payment_date >= date:
        raise ValueError("late_payment_date must be before date")


class CreateSeminarRequest(BaseModel):
    name: Name
    short_description: ShortDescription
    place: str = Field(min_length=3, max_length=255)
    date: UtcDatetime
    ending_date: UtcDatetime
    late_payment_date: UtcDatetime
    price: Price

    @model_validator(mode="after")
    def check_dates(self):
        if self.date <= datetime.now(timezone.utc):
            raise ValueError("date must be in the future")
        check_seminar_dates(self.date, self.ending_date, self.late_payment_date)
        return self


class UpdateSeminarRequest(BaseModel):
    id: EntityID
    name: Name | None = None
    short_description: ShortDescription | None = None
    long_description: LongDescription | None = None
    place: str | None = Field(default=None, min_length=3, max_length=255)
    date: UtcDatetime | None = None
    ending_date: UtcDatetime | None = None
    late_payment_date: UtcDatetime | None = None
    tags: Tags | None = None
    price: Price | None = None


class SeminarDetails(DetailsOut):
    place: str
    date: datetime
    ending_date: datetime
    late_payment_date: datetime
