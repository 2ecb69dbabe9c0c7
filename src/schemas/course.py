"""Course request and response models."""

from pydantic import BaseModel, Field

from src.schemas.common import DetailsOut, EntityID, LongDescription, Name, Price, ShortDescription, Tags
from src.schemas.course_part import CoursePartOut


class CreateCourseRequest(BaseModel):
    name: Name
    short_description: ShortDescription
    topic: str = Field(min_length=3, max_length=128)
    access_duration: int = Field(ge=1)
    price: Price


class UpdateCourseRequest(BaseModel):
    id: EntityID
    name: Name | None = None
    short_description: ShortDescription | None = None
    long_description: LongDescription | None = None
    topic: str | None = Field(default=None, min_length=3, max_length=128)
    access_duration: int | None = Field(default=None, ge=1)
    tags: Tags | None = None
    price: Price | None = None


class CourseDetails(DetailsOut):
    topic: str
    access_duration: int
    parts: list[CoursePartOut] = []
