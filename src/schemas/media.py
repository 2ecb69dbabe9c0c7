"""Image and video attachment request models."""

from pydantic import BaseModel, Field

from src.schemas.common import EntityID, HttpURL


class AddImageRequest(BaseModel):
    owner_id: EntityID
    media_service_id: EntityID
    url: HttpURL
    secure_url: HttpURL
    public_id: str = Field(min_length=1, max_length=255)


class DeleteImageRequest(BaseModel):
    owner_id: EntityID
    media_service_id: EntityID


class AddImageBatchRequest(BaseModel):
    owner_ids: list[EntityID] = Field(min_length=1)
    media_service_id: EntityID
    url: HttpURL
    secure_url: HttpURL
    public_id: str = Field(min_length=1, max_length=255)


class DeleteImageBatchRequest(BaseModel):
    owner_ids: list[EntityID] = Field(min_length=1)
    media_service_id: EntityID


class AddVideoRequest(BaseModel):
    owner_id: EntityID
    media_service_id: EntityID


class RemoveVideoRequest(BaseModel):
    owner_id: EntityID
