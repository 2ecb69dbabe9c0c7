"""Course part request and response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.schemas.common import EntityID, LongDescription, Name, ShortDescription, Tags


class CreateCoursePartRequest(BaseModel):
    course_id: EntityID
    name: Name
    short_description: ShortDescription
    number: int = Field(ge=1)


class CreateCoursePartResponse(BaseModel):
    id: str
    course_id: str


class UpdateCoursePartRequest(BaseModel):
    id: EntityID
    name: Name | None = None
    short_description: ShortDescription | None = None
    long_description: LongDescription | None = None
    number: int | None = Field(default=None, ge=1)
    tags: Tags | None = None


class CoursePartOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    course_id: str
    number: int
    name: str
    short_description: str
    long_description: str | None = None
    tags: list[str] = []
    published: bool
    video_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None
